"""Pipeable Task combinators and the Task typeclass instance.

Array traversal policy:
    ``sequence_array`` and ``traverse_array`` run the element tasks one after
    another in input order on the caller's thread. Results are collected
    positionally, so the output order always matches the input order. The
    traversal function is applied lazily, when the combined task runs, and
    again on every run.
"""

import typing as tp

from paradigm.core.task import Task, delay, of
from paradigm.core.typeclasses import Monad

__all__ = [
    "of",
    "delay",
    "map",
    "chain",
    "TaskMonad",
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


def map(f: tp.Callable[[T], U]) -> tp.Callable[[Task[T]], Task[U]]:
    return lambda fa: fa.map(f)


def chain(f: tp.Callable[[T], Task[U]]) -> tp.Callable[[Task[T]], Task[U]]:
    return lambda fa: fa.chain(f)


class TaskMonad(Monad):
    """Typeclass instance for :class:`~paradigm.core.task.Task`."""

    def of(self, a: T) -> Task[T]:
        return Task.of(a)

    def map(self, fa: Task[T], f: tp.Callable[[T], U]) -> Task[U]:
        return fa.map(f)

    def chain(self, fa: Task[T], f: tp.Callable[[T], Task[U]]) -> Task[U]:
        return fa.chain(f)

    def traverse_array(
        self, items: tp.Iterable[T], f: tp.Callable[[T], Task[U]]
    ) -> Task[tp.List[U]]:
        items = list(items)
        return Task(lambda: [f(item).run() for item in items])


monad = TaskMonad()
applicative = monad


def sequence_array(fas: tp.Iterable[Task[T]]) -> Task[tp.List[T]]:
    """Combine tasks into one task yielding their results in input order."""
    return monad.sequence_array(fas)


def traverse_array(
    f: tp.Callable[[T], Task[U]],
) -> tp.Callable[[tp.Iterable[T]], Task[tp.List[U]]]:
    return lambda items: monad.traverse_array(items, f)


do: Task[dict] = Task.of({})


def bind_to(name: str) -> tp.Callable[[Task[T]], Task[dict]]:
    return lambda fa: monad.bind_to(fa, name)


def bind(
    name: str, f: tp.Callable[[dict], Task[tp.Any]]
) -> tp.Callable[[Task[dict]], Task[dict]]:
    return lambda fa: monad.bind(fa, name, f)
