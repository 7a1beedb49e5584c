"""Error-or-value container.

``Either[E, A]`` holds exactly one of two values: ``Left(E)`` for a failure
reason or ``Right(A)`` for a success. ``map`` and ``chain`` only touch the
``Right`` side, so a ``Left`` produced anywhere in a pipeline travels to the
end untouched and no later stage runs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from paradigm.core.errors import EmptyContainerError
from paradigm.core.option import Option
from paradigm.logger.logger import logger

__all__ = [
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    "from_option",
    "from_nullable",
    "try_catch",
]

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")
F = TypeVar("F")
R = TypeVar("R")


class Either(ABC, Generic[E, A]):
    """Exactly one of a failure (``Left``) or a success (``Right``)."""

    @abstractmethod
    def is_right(self) -> bool:
        pass

    def is_left(self) -> bool:
        return not self.is_right()

    @abstractmethod
    def fold(self, on_left: Callable[[E], R], on_right: Callable[[A], R]) -> R:
        """Collapse into a plain value by handling both sides."""
        pass

    def bimap(
        self, on_left: Callable[[E], F], on_right: Callable[[A], B]
    ) -> Either[F, B]:
        """Transform whichever side is populated."""
        return self.fold(lambda e: Left(on_left(e)), lambda a: Right(on_right(a)))

    def map(self, f: Callable[[A], B]) -> Either[E, B]:
        return self.fold(lambda _: self, lambda a: Right(f(a)))

    def map_left(self, f: Callable[[E], F]) -> Either[F, A]:
        return self.fold(lambda e: Left(f(e)), lambda _: self)

    def chain(self, f: Callable[[A], Either[E, B]]) -> Either[E, B]:
        return self.fold(lambda _: self, f)

    def swap(self) -> Either[A, E]:
        return self.fold(Right, Left)

    def get_or_else(self, default: A) -> A:
        return self.fold(lambda _: default, lambda a: a)

    @abstractmethod
    def unwrap(self) -> A:
        """Return the ``Right`` value.

        Raises:
            EmptyContainerError: If this is a ``Left``.
        """
        pass

    @abstractmethod
    def unwrap_left(self) -> E:
        """Return the ``Left`` value.

        Raises:
            EmptyContainerError: If this is a ``Right``.
        """
        pass


@dataclass(frozen=True)
class Left(Either[E, Any]):
    value: E

    def is_right(self) -> bool:
        return False

    def fold(self, on_left: Callable[[E], R], on_right: Callable[[Any], R]) -> R:
        return on_left(self.value)

    def unwrap(self) -> Any:
        raise EmptyContainerError(f"Cannot unwrap a Left({self.value!r}).")

    def unwrap_left(self) -> E:
        return self.value


@dataclass(frozen=True)
class Right(Either[Any, A]):
    value: A

    def is_right(self) -> bool:
        return True

    def fold(self, on_left: Callable[[Any], R], on_right: Callable[[A], R]) -> R:
        return on_right(self.value)

    def unwrap(self) -> A:
        return self.value

    def unwrap_left(self) -> Any:
        raise EmptyContainerError(f"Cannot take the left side of Right({self.value!r}).")


def left(e: E) -> Either[E, Any]:
    return Left(e)


def right(a: A) -> Either[Any, A]:
    return Right(a)


def from_option(option: Option[A], on_none: Callable[[], E]) -> Either[E, A]:
    """Convert an option, using ``on_none()`` as the failure for an empty one."""
    return option.fold(lambda: Left(on_none()), Right)


def from_nullable(value: Optional[A], e: E) -> Either[E, A]:
    return Left(e) if value is None else Right(value)


def try_catch(thunk: Callable[[], A], on_error: Callable[[Exception], E]) -> Either[E, A]:
    """Run ``thunk`` and capture a raised exception as a ``Left``.

    This is the boundary where exception-raising code enters the value world.

    Args:
        thunk: Zero-argument callable that may raise.
        on_error: Maps the raised exception to the failure value.

    Returns:
        ``Right`` with the result, or ``Left(on_error(exc))``.
    """
    try:
        return Right(thunk())
    except Exception as exc:
        logger.debug(f"try_catch captured {type(exc).__name__}: {exc}")
        return Left(on_error(exc))
