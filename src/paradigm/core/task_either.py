"""Deferred fallible computations.

``TaskEither[E, A]`` is a :class:`~paradigm.core.task.Task` whose result is an
:class:`~paradigm.core.either.Either`. Pipelines built with ``chain`` are
fail-fast: once a stage resolves to ``Left``, no later stage is constructed or
run and the original ``Left`` is the pipeline's result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from paradigm.core.either import Either, Left, Right
from paradigm.core.either import from_option as either_from_option
from paradigm.core.either import try_catch as either_try_catch
from paradigm.core.option import Option
from paradigm.core.task import Task

__all__ = [
    "TaskEither",
    "left",
    "right",
    "from_either",
    "from_task",
    "left_task",
    "from_option",
    "try_catch",
]

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")
R = TypeVar("R")


@dataclass(frozen=True)
class TaskEither(Generic[E, A]):
    """A task that completes with either a failure or a success.

    Attributes:
        task: The underlying task yielding an ``Either``.
    """

    task: Task[Either[E, A]]

    def run(self) -> Either[E, A]:
        return self.task.run()

    def __call__(self) -> Either[E, A]:
        return self.run()

    def to_task(self) -> Task[Either[E, A]]:
        return self.task

    def map(self, f: Callable[[A], B]) -> TaskEither[E, B]:
        return TaskEither(self.task.map(lambda ea: ea.map(f)))

    def map_left(self, f: Callable[[E], F]) -> TaskEither[F, A]:
        return TaskEither(self.task.map(lambda ea: ea.map_left(f)))

    def bimap(
        self, on_left: Callable[[E], F], on_right: Callable[[A], B]
    ) -> TaskEither[F, B]:
        return TaskEither(self.task.map(lambda ea: ea.bimap(on_left, on_right)))

    def chain(self, f: Callable[[A], TaskEither[E, B]]) -> TaskEither[E, B]:
        """Run this stage; on ``Right`` build and run the stage returned by ``f``.

        A ``Left`` outcome is returned as-is and ``f`` is never called.
        """

        def step(ea: Either[E, A]) -> Task[Either[E, B]]:
            return ea.fold(lambda _: Task.of(ea), lambda a: f(a).task)

        return TaskEither(self.task.chain(step))

    def chain_either(self, f: Callable[[A], Either[E, B]]) -> TaskEither[E, B]:
        return TaskEither(self.task.map(lambda ea: ea.chain(f)))

    def or_else(self, f: Callable[[E], TaskEither[F, A]]) -> TaskEither[F, A]:
        """Recover from a ``Left`` by running the stage returned by ``f``."""

        def step(ea: Either[E, A]) -> Task[Either[F, A]]:
            return ea.fold(lambda e: f(e).task, lambda _: Task.of(ea))

        return TaskEither(self.task.chain(step))

    def fold(self, on_left: Callable[[E], R], on_right: Callable[[A], R]) -> Task[R]:
        return self.task.map(lambda ea: ea.fold(on_left, on_right))

    def get_or_else(self, default: A) -> Task[A]:
        return self.task.map(lambda ea: ea.get_or_else(default))


def left(e: E) -> TaskEither[E, Any]:
    return TaskEither(Task.of(Left(e)))


def right(a: A) -> TaskEither[Any, A]:
    return TaskEither(Task.of(Right(a)))


def from_either(ea: Either[E, A]) -> TaskEither[E, A]:
    return TaskEither(Task.of(ea))


def from_task(task: Task[A]) -> TaskEither[Any, A]:
    """Treat the result of ``task`` as a success."""
    return TaskEither(task.map(Right))


def left_task(task: Task[E]) -> TaskEither[E, Any]:
    """Treat the result of ``task`` as a failure."""
    return TaskEither(task.map(Left))


def from_option(option: Option[A], on_none: Callable[[], E]) -> TaskEither[E, A]:
    return from_either(either_from_option(option, on_none))


def try_catch(thunk: Callable[[], A], on_error: Callable[[Exception], E]) -> TaskEither[E, A]:
    """Suspend ``thunk``; when run, an exception it raises becomes a ``Left``."""
    return TaskEither(Task(lambda: either_try_catch(thunk, on_error)))
