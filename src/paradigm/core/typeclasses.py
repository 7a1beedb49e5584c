"""Typeclass interfaces used for dictionary passing.

Python has no higher-kinded generics, so operations that must work for "any
container" (``sequence``, ``traverse``, ``sequence_t``) take an instance object
that carries the container's operations. Each container module in
:mod:`paradigm.functional` exposes one such instance.

The derived operations defined here (``sequence_array``, ``traverse_array``,
``bind``) are written against ``of``/``ap``/``chain`` only. Instances override
them where the container can stop early, which changes how much work is done
but never the result.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List

__all__ = [
    "Functor",
    "Applicative",
    "Monad",
]


class Functor(ABC):
    """Containers that can map a function over their contents."""

    @abstractmethod
    def map(self, fa: Any, f: Callable[[Any], Any]) -> Any:
        """Apply ``f`` to the contents of ``fa`` without changing its shape."""
        pass


class Applicative(Functor):
    """Functors that can lift plain values and combine independent containers."""

    @abstractmethod
    def of(self, a: Any) -> Any:
        """Lift a plain value into the container."""
        pass

    @abstractmethod
    def ap(self, fab: Any, fa: Any) -> Any:
        """Apply the function held in ``fab`` to the value held in ``fa``."""
        pass

    def traverse_array(self, items: Iterable[Any], f: Callable[[Any], Any]) -> Any:
        """Map ``f`` over ``items`` and collect the results into one container.

        Args:
            items: Plain values, consumed in order.
            f: Function returning a container of this kind.

        Returns:
            A container holding the list of results in input order.
        """
        acc = self.of([])
        for item in items:
            acc = self.ap(self.map(acc, _appender), f(item))
        return acc

    def sequence_array(self, fas: Iterable[Any]) -> Any:
        """Turn a sequence of containers into a container of a list."""
        return self.traverse_array(fas, _identity)


class Monad(Applicative):
    """Applicatives whose stages can depend on earlier results."""

    @abstractmethod
    def chain(self, fa: Any, f: Callable[[Any], Any]) -> Any:
        """Feed the contents of ``fa`` into ``f`` without double wrapping."""
        pass

    def ap(self, fab: Any, fa: Any) -> Any:
        return self.chain(fab, lambda g: self.map(fa, g))

    def bind_to(self, fa: Any, name: str) -> Any:
        """Start a do-block by naming the contents of ``fa``."""
        return self.map(fa, lambda a: {name: a})

    def bind(self, fa: Any, name: str, f: Callable[[dict], Any]) -> Any:
        """Extend a do-block scope with ``name`` bound to the result of ``f``.

        Args:
            fa: Container holding the current scope dictionary.
            name: Key to add to the scope.
            f: Receives the current scope and returns a container.

        Raises:
            ValueError: If ``name`` is already bound in the scope.
        """

        def extend(scope: dict) -> Any:
            if name in scope:
                raise ValueError(f"Name '{name}' is already bound in this scope.")
            return self.map(f(scope), lambda b: {**scope, name: b})

        return self.chain(fa, extend)


def _identity(a: Any) -> Any:
    return a


def _appender(xs: List[Any]) -> Callable[[Any], List[Any]]:
    return lambda x: [*xs, x]
