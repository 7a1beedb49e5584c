"""Ordered-sequence adapter.

Curried list operations in the same shape as the container combinators, so a
pipeline over lists reads like one over options or tasks. ``chain`` is
``flatMap``. ``sequence`` and ``traverse`` take a typeclass instance and flip a
list of containers into a container of a list.

Inputs may be any iterable; every operation returns a new list.

Examples:
    >>> from paradigm.functional import array, option
    >>> from paradigm.functional.function import pipe
    >>> pipe([2, 3], array.chain(lambda n: [n] * n), array.map(str))
    ['2', '2', '3', '3', '3']
    >>> array.sequence(option.applicative)([option.some(1), option.some(2)])
    Some(value=[1, 2])
"""

import functools
import typing as tp

from paradigm.core.monoid import Monoid
from paradigm.core.option import NOTHING, Option, Some
from paradigm.core.typeclasses import Applicative

__all__ = [
    "map",
    "chain",
    "filter",
    "filter_map",
    "reduce",
    "fold_map",
    "head",
    "lookup",
    "sequence",
    "traverse",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
B = tp.TypeVar("B")


def map(f: tp.Callable[[T], U]) -> tp.Callable[[tp.Iterable[T]], tp.List[U]]:
    return lambda xs: [f(x) for x in xs]


def chain(
    f: tp.Callable[[T], tp.Iterable[U]],
) -> tp.Callable[[tp.Iterable[T]], tp.List[U]]:
    """Map each element to a sequence and flatten the results one level."""
    return lambda xs: [y for x in xs for y in f(x)]


def filter(predicate: tp.Callable[[T], bool]) -> tp.Callable[[tp.Iterable[T]], tp.List[T]]:
    return lambda xs: [x for x in xs if predicate(x)]


def filter_map(
    f: tp.Callable[[T], Option[U]],
) -> tp.Callable[[tp.Iterable[T]], tp.List[U]]:
    """Map with an Option-returning ``f`` and keep only the present values."""

    def run(xs: tp.Iterable[T]) -> tp.List[U]:
        results = (f(x) for x in xs)
        return [result.unwrap() for result in results if result.is_some()]

    return run


def reduce(b: B, f: tp.Callable[[B, T], B]) -> tp.Callable[[tp.Iterable[T]], B]:
    """Left fold starting from ``b``."""
    return lambda xs: functools.reduce(f, xs, b)


def fold_map(
    monoid: Monoid[U],
) -> tp.Callable[[tp.Callable[[T], U]], tp.Callable[[tp.Iterable[T]], U]]:
    """Map every element into ``monoid`` and combine left to right."""
    return lambda f: lambda xs: functools.reduce(
        lambda acc, x: monoid.concat(acc, f(x)), xs, monoid.empty
    )


def head(xs: tp.Sequence[T]) -> Option[T]:
    return Some(xs[0]) if len(xs) > 0 else NOTHING


def lookup(index: int) -> tp.Callable[[tp.Sequence[T]], Option[T]]:
    """Element at a non-negative ``index``, if the sequence is long enough."""
    return lambda xs: Some(xs[index]) if 0 <= index < len(xs) else NOTHING


def sequence(F: Applicative) -> tp.Callable[[tp.Iterable[tp.Any]], tp.Any]:
    """Flip ``list[F[T]]`` into ``F[list[T]]`` using the instance ``F``.

    Args:
        F: Typeclass instance of the element container, e.g.
            ``paradigm.functional.option.applicative``.

    Returns:
        Function from a sequence of containers to a container of a list.
    """
    return lambda fas: F.sequence_array(fas)


def traverse(
    F: Applicative,
) -> tp.Callable[[tp.Callable[[T], tp.Any]], tp.Callable[[tp.Iterable[T]], tp.Any]]:
    """``map(f)`` followed by ``sequence(F)``, without the intermediate list."""
    return lambda f: lambda items: F.traverse_array(items, f)
