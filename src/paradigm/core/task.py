"""Deferred computations.

A ``Task[T]`` wraps a zero-argument callable that produces a ``T``. Building
and composing tasks does no work; the wrapped computation only executes when
the task is run, and it executes again on every run (results are never
cached).

Ordering:
    ``chain`` runs its stages strictly one after the other: the second stage is
    not even constructed until the first has produced its value. Tasks are run
    synchronously on the caller's thread; any real I/O lives inside the thunks
    supplied by the caller.

Composition:
    ``map`` and ``chain`` do not wrap the task in a new closure. They append a
    stage to ``stages`` and ``run`` works through the stages in a loop, so the
    depth of a pipeline is not limited by the interpreter's recursion limit.
    A task returned from a ``chain`` stage is spliced into the same loop.

Examples:
    >>> calls = []
    >>> t = Task(lambda: calls.append("ran") or 1).map(lambda x: x + 1)
    >>> calls
    []
    >>> t.run(), t.run()
    (2, 2)
    >>> calls
    ['ran', 'ran']
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, TypeVar

__all__ = [
    "Task",
    "of",
    "delay",
]

T = TypeVar("T")
U = TypeVar("U")

MAP = "map"
CHAIN = "chain"

Stage = Tuple[str, Callable[[Any], Any]]


@dataclass(frozen=True)
class Task(Generic[T]):
    """A suspended, re-runnable computation yielding ``T``.

    Attributes:
        thunk: The computation to execute first on every run.
        stages: ``(kind, f)`` pairs applied to the thunk's result in order.
            ``kind`` is ``"map"`` (``f`` returns a value) or ``"chain"``
            (``f`` returns the next ``Task``).
    """

    thunk: Callable[[], Any]
    stages: Tuple[Stage, ...] = ()

    @classmethod
    def of(cls, value: T) -> Task[T]:
        """An already-resolved task."""
        return cls(lambda: value)

    def run(self) -> T:
        """Execute the computation and return its result."""
        value = self.thunk()
        pending = list(reversed(self.stages))
        while pending:
            kind, f = pending.pop()
            if kind == MAP:
                value = f(value)
                continue
            following = f(value)
            value = following.thunk()
            pending.extend(reversed(following.stages))
        return value

    def __call__(self) -> T:
        return self.run()

    def map(self, f: Callable[[T], U]) -> Task[U]:
        return Task(self.thunk, self.stages + ((MAP, f),))

    def chain(self, f: Callable[[T], Task[U]]) -> Task[U]:
        """Run this task, then build and run the task returned by ``f``."""
        return Task(self.thunk, self.stages + ((CHAIN, f),))


def of(value: T) -> Task[T]:
    return Task.of(value)


def delay(thunk: Callable[[], T]) -> Task[T]:
    return Task(thunk)
