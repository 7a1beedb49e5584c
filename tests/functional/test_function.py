from paradigm.functional.function import constant, flow, identity, pipe


def test_pipe_applies_left_to_right():
    assert pipe(2, lambda x: x + 1, lambda x: x * 10) == 30
    assert pipe(2, lambda x: x * 10, lambda x: x + 1) == 21


def test_pipe_without_functions_returns_value():
    marker = object()
    assert pipe(marker) is marker


def test_flow_is_lazy():
    calls = []

    def record(x):
        calls.append(x)
        return x

    composed = flow(record, lambda x: x + 1)
    assert calls == []
    assert composed(1) == 2
    assert calls == [1]


def test_flow_first_function_takes_any_arguments():
    add_then_negate = flow(lambda a, b, scale=1: (a + b) * scale, lambda x: -x)
    assert add_then_negate(1, 2) == -3
    assert add_then_negate(1, 2, scale=10) == -30


def test_flow_matches_pipe():
    fns = [str.strip, str.upper, lambda s: s + "!"]
    assert flow(*fns)("  hi ") == pipe("  hi ", *fns) == "HI!"


def test_identity_and_constant():
    assert identity(5) == 5
    assert constant(7)() == 7
    assert constant(7)(1, 2, key="x") == 7
