"""Optional values.

``Option[T]`` holds either exactly one value (``Some``) or nothing
(``Nothing``). It replaces ``T | None`` in code that needs to compose: a chain
of lookups that may each come up empty is written as a chain of ``chain``
calls instead of a ladder of ``is None`` checks.

Examples:
    >>> from paradigm.core.option import some, none, from_nullable
    >>> some(2).map(lambda x: x * 10)
    Some(value=20)
    >>> none().map(lambda x: x * 10)
    Nothing()
    >>> from_nullable({"a": 1}.get("b")).get_or_else(0)
    0
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from paradigm.core.errors import EmptyContainerError

__all__ = [
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "some",
    "none",
    "from_nullable",
]

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Option(ABC, Generic[T]):
    """Zero-or-one value container. Construct with :func:`some` or :func:`none`."""

    @abstractmethod
    def is_some(self) -> bool:
        pass

    def is_none(self) -> bool:
        return not self.is_some()

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Apply ``f`` to the contained value, if any."""
        pass

    @abstractmethod
    def chain(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply an Option-returning ``f`` to the contained value, if any."""
        pass

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if ``predicate`` holds for it."""
        pass

    @abstractmethod
    def fold(self, on_none: Callable[[], R], on_some: Callable[[T], R]) -> R:
        """Collapse the option into a plain value."""
        pass

    def get_or_else(self, default: T) -> T:
        """Return the contained value, or ``default`` when empty."""
        return self.fold(lambda: default, lambda value: value)

    def to_nullable(self) -> Optional[T]:
        return self.fold(lambda: None, lambda value: value)

    @abstractmethod
    def unwrap(self) -> T:
        """Return the contained value.

        Raises:
            EmptyContainerError: If the option is empty.
        """
        pass


@dataclass(frozen=True)
class Some(Option[T]):
    value: T

    def is_some(self) -> bool:
        return True

    def map(self, f: Callable[[T], U]) -> Option[U]:
        return Some(f(self.value))

    def chain(self, f: Callable[[T], Option[U]]) -> Option[U]:
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self if predicate(self.value) else NOTHING

    def fold(self, on_none: Callable[[], R], on_some: Callable[[T], R]) -> R:
        return on_some(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Nothing(Option[Any]):
    def is_some(self) -> bool:
        return False

    def map(self, f: Callable[[Any], U]) -> Option[U]:
        return self

    def chain(self, f: Callable[[Any], Option[U]]) -> Option[U]:
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> Option[Any]:
        return self

    def fold(self, on_none: Callable[[], R], on_some: Callable[[Any], R]) -> R:
        return on_none()

    def unwrap(self) -> Any:
        raise EmptyContainerError("Cannot unwrap an empty Option; use get_or_else.")


NOTHING: Option[Any] = Nothing()


def some(value: T) -> Option[T]:
    return Some(value)


def none() -> Option[Any]:
    return NOTHING


def from_nullable(value: Optional[T]) -> Option[T]:
    """Map ``None`` to an empty option and anything else to ``Some(value)``."""
    return NOTHING if value is None else Some(value)
