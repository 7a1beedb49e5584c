"""Pipeable Option combinators and the Option typeclass instance.

Each combinator takes its configuration first and returns a function of the
option, so it can sit directly in :func:`~paradigm.functional.function.pipe`
or :func:`~paradigm.functional.function.flow`.

Examples:
    >>> from paradigm.functional import option
    >>> from paradigm.functional.function import flow
    >>> people = {"A": "p1"}
    >>> sales = {"p1": 101}
    >>> person_of = lambda company: option.from_nullable(people.get(company))
    >>> sale_of = lambda person: option.from_nullable(sales.get(person))
    >>> latest_sale = flow(person_of, option.chain(sale_of))
    >>> latest_sale("A"), latest_sale("B")
    (Some(value=101), Nothing())
"""

import typing as tp

from paradigm.core.option import NOTHING, Option, Some, from_nullable, none, some
from paradigm.core.typeclasses import Monad

__all__ = [
    "some",
    "none",
    "from_nullable",
    "from_predicate",
    "map",
    "chain",
    "filter",
    "fold",
    "get_or_else",
    "to_nullable",
    "is_some",
    "is_none",
    "OptionMonad",
    "monad",
    "applicative",
    "sequence_array",
    "traverse_array",
    "do",
    "bind",
    "bind_to",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
R = tp.TypeVar("R")


def from_predicate(predicate: tp.Callable[[T], bool]) -> tp.Callable[[T], Option[T]]:
    """Build a function returning ``Some(x)`` when ``predicate(x)`` holds."""
    return lambda x: Some(x) if predicate(x) else NOTHING


def map(f: tp.Callable[[T], U]) -> tp.Callable[[Option[T]], Option[U]]:
    return lambda fa: fa.map(f)


def chain(f: tp.Callable[[T], Option[U]]) -> tp.Callable[[Option[T]], Option[U]]:
    return lambda fa: fa.chain(f)


def filter(predicate: tp.Callable[[T], bool]) -> tp.Callable[[Option[T]], Option[T]]:
    return lambda fa: fa.filter(predicate)


def fold(
    on_none: tp.Callable[[], R], on_some: tp.Callable[[T], R]
) -> tp.Callable[[Option[T]], R]:
    return lambda fa: fa.fold(on_none, on_some)


def get_or_else(default: T) -> tp.Callable[[Option[T]], T]:
    return lambda fa: fa.get_or_else(default)


def to_nullable(fa: Option[T]) -> tp.Optional[T]:
    return fa.to_nullable()


def is_some(fa: Option[tp.Any]) -> bool:
    return fa.is_some()


def is_none(fa: Option[tp.Any]) -> bool:
    return fa.is_none()


class OptionMonad(Monad):
    """Typeclass instance for :class:`~paradigm.core.option.Option`."""

    def of(self, a: T) -> Option[T]:
        return Some(a)

    def map(self, fa: Option[T], f: tp.Callable[[T], U]) -> Option[U]:
        return fa.map(f)

    def chain(self, fa: Option[T], f: tp.Callable[[T], Option[U]]) -> Option[U]:
        return fa.chain(f)

    def traverse_array(
        self, items: tp.Iterable[T], f: tp.Callable[[T], Option[U]]
    ) -> Option[tp.List[U]]:
        # Stops at the first empty result; later items are never passed to f.
        values = []
        for item in items:
            result = f(item)
            if result.is_none():
                return NOTHING
            values.append(result.unwrap())
        return Some(values)


monad = OptionMonad()
applicative = monad


def sequence_array(fas: tp.Iterable[Option[T]]) -> Option[tp.List[T]]:
    """``Some`` of all values in order, or empty if any element is empty."""
    return monad.sequence_array(fas)


def traverse_array(
    f: tp.Callable[[T], Option[U]],
) -> tp.Callable[[tp.Iterable[T]], Option[tp.List[U]]]:
    return lambda items: monad.traverse_array(items, f)


do: Option[dict] = Some({})


def bind_to(name: str) -> tp.Callable[[Option[T]], Option[dict]]:
    return lambda fa: monad.bind_to(fa, name)


def bind(
    name: str, f: tp.Callable[[dict], Option[tp.Any]]
) -> tp.Callable[[Option[dict]], Option[dict]]:
    return lambda fa: monad.bind(fa, name, f)
