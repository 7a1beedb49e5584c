"""Pipeable TaskEither combinators and the TaskEither typeclass instance.

Traversals are fail-fast: the combined task runs the stages in input order and
stops at the first ``Left``. The traversal function is not called for items
after the failing one, so their stages are neither constructed nor run.

Examples:
    >>> from paradigm.functional import task_either
    >>> def get_thing(n):
    ...     return task_either.left("invalid") if n < 1 else task_either.right(str(n))
    >>> task_either.traverse_array(get_thing)([1, 2, 3]).run()
    Right(value=['1', '2', '3'])
    >>> task_either.traverse_array(get_thing)([1, -1, 3]).run()
    Left(value='invalid')
"""

import typing as tp

from paradigm.core.either import Either, Right
from paradigm.core.task import Task
from paradigm.core.task_either import (
    TaskEither,
    from_either,
    from_option,
    from_task,
    left,
    left_task,
    right,
    try_catch,
)
from paradigm.core.typeclasses import Monad
from paradigm.logger.logger import logger

__all__ = [
    "left",
    "right",
    "from_either",
    "from_task",
    "left_task",
    "from_option",
    "try_catch",
    "map",
    "map_left",
    "bimap",
    "chain",
    "chain_either",
    "or_else",
    "fold",
    "get_or_else",
    "TaskEitherMonad",
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


def map(f: tp.Callable[[A], B]) -> tp.Callable[[TaskEither[E, A]], TaskEither[E, B]]:
    return lambda fa: fa.map(f)


def map_left(
    f: tp.Callable[[E], F],
) -> tp.Callable[[TaskEither[E, A]], TaskEither[F, A]]:
    return lambda fa: fa.map_left(f)


def bimap(
    on_left: tp.Callable[[E], F], on_right: tp.Callable[[A], B]
) -> tp.Callable[[TaskEither[E, A]], TaskEither[F, B]]:
    return lambda fa: fa.bimap(on_left, on_right)


def chain(
    f: tp.Callable[[A], TaskEither[E, B]],
) -> tp.Callable[[TaskEither[E, A]], TaskEither[E, B]]:
    return lambda fa: fa.chain(f)


def chain_either(
    f: tp.Callable[[A], Either[E, B]],
) -> tp.Callable[[TaskEither[E, A]], TaskEither[E, B]]:
    return lambda fa: fa.chain_either(f)


def or_else(
    f: tp.Callable[[E], TaskEither[F, A]],
) -> tp.Callable[[TaskEither[E, A]], TaskEither[F, A]]:
    return lambda fa: fa.or_else(f)


def fold(
    on_left: tp.Callable[[E], R], on_right: tp.Callable[[A], R]
) -> tp.Callable[[TaskEither[E, A]], Task[R]]:
    return lambda fa: fa.fold(on_left, on_right)


def get_or_else(default: A) -> tp.Callable[[TaskEither[tp.Any, A]], Task[A]]:
    return lambda fa: fa.get_or_else(default)


class TaskEitherMonad(Monad):
    """Typeclass instance for :class:`~paradigm.core.task_either.TaskEither`."""

    def of(self, a: A) -> TaskEither[tp.Any, A]:
        return right(a)

    def map(self, fa: TaskEither[E, A], f: tp.Callable[[A], B]) -> TaskEither[E, B]:
        return fa.map(f)

    def chain(
        self, fa: TaskEither[E, A], f: tp.Callable[[A], TaskEither[E, B]]
    ) -> TaskEither[E, B]:
        return fa.chain(f)

    def traverse_array(
        self, items: tp.Iterable[A], f: tp.Callable[[A], TaskEither[E, B]]
    ) -> TaskEither[E, tp.List[B]]:
        items = list(items)

        def run_all() -> Either[E, tp.List[B]]:
            values = []
            for index, item in enumerate(items):
                result = f(item).run()
                if result.is_left():
                    logger.debug(
                        f"Traversal stopped at index {index} of {len(items)}: {result!r}"
                    )
                    return result
                values.append(result.unwrap())
            return Right(values)

        return TaskEither(Task(run_all))


monad = TaskEitherMonad()
applicative = monad


def sequence_array(fas: tp.Iterable[TaskEither[E, A]]) -> TaskEither[E, tp.List[A]]:
    return monad.sequence_array(fas)


def traverse_array(
    f: tp.Callable[[A], TaskEither[E, B]],
) -> tp.Callable[[tp.Iterable[A]], TaskEither[E, tp.List[B]]]:
    return lambda items: monad.traverse_array(items, f)


do: TaskEither[tp.Any, dict] = right({})


def bind_to(name: str) -> tp.Callable[[TaskEither[E, A]], TaskEither[E, dict]]:
    return lambda fa: monad.bind_to(fa, name)


def bind(
    name: str, f: tp.Callable[[dict], TaskEither[E, tp.Any]]
) -> tp.Callable[[TaskEither[E, dict]], TaskEither[E, dict]]:
    return lambda fa: monad.bind(fa, name, f)
