"""Pipeable Either combinators and the Either typeclass instance."""

import typing as tp

from paradigm.core.either import (
    Either,
    Right,
    from_nullable,
    from_option,
    left,
    right,
    try_catch,
)
from paradigm.core.typeclasses import Monad

__all__ = [
    "left",
    "right",
    "from_option",
    "from_nullable",
    "try_catch",
    "map",
    "map_left",
    "bimap",
    "chain",
    "fold",
    "get_or_else",
    "swap",
    "EitherMonad",
    "monad",
    "applicative",
    "sequence_array",
    "traverse_array",
    "do",
    "bind",
    "bind_to",
]

E = tp.TypeVar("E")
A = tp.TypeVar("A")
B = tp.TypeVar("B")
F = tp.TypeVar("F")
R = tp.TypeVar("R")


def map(f: tp.Callable[[A], B]) -> tp.Callable[[Either[E, A]], Either[E, B]]:
    return lambda fa: fa.map(f)


def map_left(f: tp.Callable[[E], F]) -> tp.Callable[[Either[E, A]], Either[F, A]]:
    return lambda fa: fa.map_left(f)


def bimap(
    on_left: tp.Callable[[E], F], on_right: tp.Callable[[A], B]
) -> tp.Callable[[Either[E, A]], Either[F, B]]:
    return lambda fa: fa.bimap(on_left, on_right)


def chain(
    f: tp.Callable[[A], Either[E, B]],
) -> tp.Callable[[Either[E, A]], Either[E, B]]:
    return lambda fa: fa.chain(f)


def fold(
    on_left: tp.Callable[[E], R], on_right: tp.Callable[[A], R]
) -> tp.Callable[[Either[E, A]], R]:
    return lambda fa: fa.fold(on_left, on_right)


def get_or_else(default: A) -> tp.Callable[[Either[tp.Any, A]], A]:
    return lambda fa: fa.get_or_else(default)


def swap(fa: Either[E, A]) -> Either[A, E]:
    return fa.swap()


class EitherMonad(Monad):
    """Typeclass instance for :class:`~paradigm.core.either.Either`."""

    def of(self, a: A) -> Either[tp.Any, A]:
        return Right(a)

    def map(self, fa: Either[E, A], f: tp.Callable[[A], B]) -> Either[E, B]:
        return fa.map(f)

    def chain(self, fa: Either[E, A], f: tp.Callable[[A], Either[E, B]]) -> Either[E, B]:
        return fa.chain(f)

    def traverse_array(
        self, items: tp.Iterable[A], f: tp.Callable[[A], Either[E, B]]
    ) -> Either[E, tp.List[B]]:
        # The first Left is returned as-is; later items are never passed to f.
        values = []
        for item in items:
            result = f(item)
            if result.is_left():
                return result
            values.append(result.unwrap())
        return Right(values)


monad = EitherMonad()
applicative = monad


def sequence_array(fas: tp.Iterable[Either[E, A]]) -> Either[E, tp.List[A]]:
    return monad.sequence_array(fas)


def traverse_array(
    f: tp.Callable[[A], Either[E, B]],
) -> tp.Callable[[tp.Iterable[A]], Either[E, tp.List[B]]]:
    return lambda items: monad.traverse_array(items, f)


do: Either[tp.Any, dict] = Right({})


def bind_to(name: str) -> tp.Callable[[Either[E, A]], Either[E, dict]]:
    return lambda fa: monad.bind_to(fa, name)


def bind(
    name: str, f: tp.Callable[[dict], Either[E, tp.Any]]
) -> tp.Callable[[Either[E, dict]], Either[E, dict]]:
    return lambda fa: monad.bind(fa, name, f)
