import pytest
from paradigm.core.either import left as either_left
from paradigm.core.either import right as either_right
from paradigm.core.task import Task
from paradigm.functional import array, either, option, task, task_either
from paradigm.functional.apply import sequence_s, sequence_t


def to_int(s):
    return option.some(int(s)) if s.lstrip("-").isdigit() else option.none()


def get_thing(n):
    return task_either.left("invalid") if n < 1 else task_either.right(str(n))


# --- Option ---


def test_sequence_option_all_some():
    xs = [option.some(1), option.some(2), option.some(3)]
    assert array.sequence(option.applicative)(xs) == option.some([1, 2, 3])


def test_sequence_option_with_none():
    xs = [option.some(1), option.none(), option.some(3)]
    assert array.sequence(option.applicative)(xs) == option.none()
    assert option.sequence_array(xs) == option.none()


def test_sequence_empty_array():
    assert array.sequence(option.applicative)([]) == option.some([])
    assert task.sequence_array([]).run() == []


def test_traverse_option():
    assert array.traverse(option.applicative)(to_int)(["1", "2", "3"]) == option.some(
        [1, 2, 3]
    )
    assert option.traverse_array(to_int)(["1", "x", "3"]) == option.none()


def test_traverse_option_stops_at_first_none():
    seen = []

    def spy(s):
        seen.append(s)
        return to_int(s)

    assert option.traverse_array(spy)(["1", "x", "3"]) == option.none()
    assert seen == ["1", "x"]


def test_traverse_equals_map_then_sequence():
    items = ["4", "5", "nope", "6"]
    fused = array.traverse(option.applicative)(to_int)(items)
    two_step = array.sequence(option.applicative)(array.map(to_int)(items))
    assert fused == two_step


def test_generic_traverse_matches_short_circuit_override():
    # The derived ap-based traversal gives the same answer as the fast path.
    generic = super(option.OptionMonad, option.monad).traverse_array
    for items in (["1", "2"], ["1", "x", "3"], []):
        assert generic(items, to_int) == option.traverse_array(to_int)(items)


# --- Either ---


def test_sequence_either():
    assert either.sequence_array([either.right(1), either.right(2)]) == either.right(
        [1, 2]
    )
    assert either.sequence_array(
        [either.right(1), either.left("a"), either.left("b")]
    ) == either.left("a")


# --- Task ---


def test_sequence_task_preserves_order():
    tasks = [task.of(1), task.of(2), task.of(3)]
    combined = array.sequence(task.applicative)(tasks)
    assert isinstance(combined, Task)
    assert combined.run() == [1, 2, 3]


def test_sequence_task_is_lazy_and_re_runnable():
    runs = []

    def make(n):
        return Task(lambda: runs.append(n) or n * 10)

    combined = task.sequence_array([make(1), make(2)])
    assert runs == []
    assert combined.run() == [10, 20]
    assert combined.run() == [10, 20]
    assert runs == [1, 2, 1, 2]


def test_traverse_task_with_generator_input():
    combined = task.traverse_array(lambda n: task.of(n * n))(n for n in range(4))
    assert combined.run() == [0, 1, 4, 9]
    assert combined.run() == [0, 1, 4, 9]


# --- TaskEither ---


def test_traverse_task_either_all_right():
    result = task_either.traverse_array(get_thing)([1, 2, 3])
    assert result.run() == either_right(["1", "2", "3"])


def test_traverse_task_either_fails_fast():
    called = []
    ran = []

    def spy(n):
        called.append(n)
        return get_thing(n).map(lambda s: ran.append(n) or s)

    result = task_either.traverse_array(spy)([1, -1, 3])

    assert called == []
    assert result.run() == either_left("invalid")
    assert called == [1, -1]
    assert ran == [1]


def test_sequence_task_either_via_array_adapter():
    stages = [task_either.right(1), task_either.left("boom"), task_either.right(3)]
    assert array.sequence(task_either.applicative)(stages).run() == either_left("boom")


# --- sequence_t / sequence_s ---


def test_sequence_t_option():
    sequence_t_option = sequence_t(option.applicative)
    assert sequence_t_option(option.some(1)) == option.some((1,))
    assert sequence_t_option(option.some(1), option.some("2")) == option.some(
        (1, "2")
    )
    assert (
        sequence_t_option(option.some(1), option.some("2"), option.none())
        == option.none()
    )


def test_sequence_t_preserves_position_and_types():
    result = sequence_t(either.applicative)(
        either.right("a"), either.right(2), either.right([3.0])
    )
    assert result == either.right(("a", 2, [3.0]))


def test_sequence_t_task_either_and_task():
    assert sequence_t(task.applicative)(task.of(1), task.of("x")).run() == (1, "x")
    assert sequence_t(task_either.applicative)(
        task_either.right(1), task_either.left("e")
    ).run() == either_left("e")


def test_sequence_t_task_either_does_not_run_after_left():
    ran = []
    later = task_either.try_catch(lambda: ran.append("later") or 1, str)

    result = sequence_t(task_either.applicative)(task_either.left("e"), later)

    assert result.run() == either_left("e")
    assert ran == []


@pytest.mark.parametrize(
    "fields, expected",
    [
        ({"a": option.some(1), "b": option.some(2)}, option.some({"a": 1, "b": 2})),
        ({"a": option.some(1), "b": option.none()}, option.none()),
        ({}, option.some({})),
    ],
)
def test_sequence_s_option(fields, expected):
    assert sequence_s(option.applicative)(fields) == expected


def test_sequence_s_keeps_key_order():
    result = sequence_s(task.applicative)({"z": task.of(1), "a": task.of(2)}).run()
    assert list(result) == ["z", "a"]
