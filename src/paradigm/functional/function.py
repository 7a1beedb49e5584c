"""Function composition helpers.

``pipe`` threads a value through functions left to right; ``flow`` builds the
same composition as a reusable function without running anything. Together
with the curried combinators in this package they let container code read top
to bottom::

    contact = pipe(
        "123",
        to_int,
        option.map(to_company_id),
        option.chain(get_contact),
    )
"""

import typing as tp

__all__ = [
    "pipe",
    "flow",
    "identity",
    "constant",
]

T = tp.TypeVar("T")


def pipe(value: tp.Any, *fns: tp.Callable[[tp.Any], tp.Any]) -> tp.Any:
    """Apply ``fns`` to ``value`` in order and return the final result.

    Args:
        value: Starting value.
        *fns: Single-argument functions, applied left to right.

    Returns:
        ``fns[-1](...fns[1](fns[0](value)))``, or ``value`` when no functions
        are given.
    """
    for fn in fns:
        value = fn(value)
    return value


def flow(
    first: tp.Callable[..., tp.Any], *rest: tp.Callable[[tp.Any], tp.Any]
) -> tp.Callable[..., tp.Any]:
    """Compose functions left to right into a new function.

    The first function may take any arguments; the others take one. Nothing is
    called until the returned function is.

    Args:
        first: Function receiving the composed function's arguments.
        *rest: Single-argument functions applied to the previous result.

    Returns:
        ``lambda *args, **kwargs: rest[-1](...rest[0](first(*args, **kwargs)))``.
    """

    def composed(*args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        return pipe(first(*args, **kwargs), *rest)

    return composed


def identity(value: T) -> T:
    return value


def constant(value: T) -> tp.Callable[..., T]:
    return lambda *_, **__: value
