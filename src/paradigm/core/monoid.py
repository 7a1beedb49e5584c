"""Monoids: an identity element plus an associative binary operation.

A monoid is the unit of reduction: :func:`paradigm.functional.monoid.concat_all`
folds any sequence with one. Every instance must satisfy

    concat(empty, x) == x == concat(x, empty)
    concat(concat(a, b), c) == concat(a, concat(b, c))

The type cannot enforce these; :func:`verify_monoid` checks them against
sample values and raises :class:`~paradigm.core.errors.MonoidLawError` when an
instance does not hold up.

Instances:
    - ``monoid_sum`` / ``monoid_product``: numbers under ``+`` / ``*``.
    - ``monoid_string``: string concatenation.
    - ``monoid_all`` / ``monoid_any``: booleans under ``and`` / ``or``.
    - ``get_list_monoid()``: list concatenation.
    - ``get_first_monoid()`` / ``get_last_monoid()``: leftmost / rightmost ``Some``.
    - ``get_option_monoid(m)``: combines ``Some`` values with ``m``.
    - ``tuple_monoid(*monoids)``: component-wise product of monoids.
"""

from dataclasses import dataclass
from itertools import product
from typing import Any, Callable, Generic, Iterable, List, Tuple, TypeVar

from paradigm.core.errors import MonoidLawError
from paradigm.core.option import NOTHING, Option, Some
from paradigm.logger.logger import logger

__all__ = [
    "Monoid",
    "monoid_sum",
    "monoid_product",
    "monoid_string",
    "monoid_all",
    "monoid_any",
    "get_list_monoid",
    "get_first_monoid",
    "get_last_monoid",
    "get_option_monoid",
    "tuple_monoid",
    "verify_monoid",
]

T = TypeVar("T")


@dataclass(frozen=True)
class Monoid(Generic[T]):
    """Identity element and associative combinator for ``T``.

    Attributes:
        empty: Identity element.
        concat: Associative binary operation; must be pure.
    """

    empty: T
    concat: Callable[[T, T], T]


monoid_sum: Monoid[Any] = Monoid(0, lambda x, y: x + y)
monoid_product: Monoid[Any] = Monoid(1, lambda x, y: x * y)
monoid_string: Monoid[str] = Monoid("", lambda x, y: x + y)
monoid_all: Monoid[bool] = Monoid(True, lambda x, y: x and y)
monoid_any: Monoid[bool] = Monoid(False, lambda x, y: x or y)


def get_list_monoid() -> Monoid[List[Any]]:
    return Monoid([], lambda x, y: [*x, *y])


def get_first_monoid() -> Monoid[Option[Any]]:
    """Keep the leftmost non-empty option."""
    return Monoid(NOTHING, lambda x, y: x if x.is_some() else y)


def get_last_monoid() -> Monoid[Option[Any]]:
    """Keep the rightmost non-empty option."""
    return Monoid(NOTHING, lambda x, y: y if y.is_some() else x)


def get_option_monoid(monoid: Monoid[T]) -> Monoid[Option[T]]:
    """Lift ``monoid`` to options.

    Two ``Some`` values are combined with ``monoid.concat``; an empty option is
    the identity.
    """

    def concat(x: Option[T], y: Option[T]) -> Option[T]:
        if x.is_none():
            return y
        if y.is_none():
            return x
        return Some(monoid.concat(x.unwrap(), y.unwrap()))

    return Monoid(NOTHING, concat)


def tuple_monoid(*monoids: Monoid[Any]) -> Monoid[Tuple[Any, ...]]:
    """Combine tuples component-wise, one monoid per position."""
    return Monoid(
        tuple(m.empty for m in monoids),
        lambda x, y: tuple(m.concat(a, b) for m, a, b in zip(monoids, x, y)),
    )


def verify_monoid(monoid: Monoid[T], samples: Iterable[T]) -> Monoid[T]:
    """Check the identity and associativity laws against ``samples``.

    Identity is checked for every sample; associativity for every ordered
    triple of samples, so keep the sample small.

    Args:
        monoid: Instance under test.
        samples: Representative values of ``T``.

    Returns:
        ``monoid`` unchanged, so the call can wrap a definition.

    Raises:
        MonoidLawError: On the first violated law.
    """
    samples = list(samples)
    empty, concat = monoid.empty, monoid.concat

    for x in samples:
        if concat(empty, x) != x:
            raise MonoidLawError("left identity", (empty, x))
        if concat(x, empty) != x:
            raise MonoidLawError("right identity", (x, empty))

    for a, b, c in product(samples, repeat=3):
        if concat(concat(a, b), c) != concat(a, concat(b, c)):
            raise MonoidLawError("associativity", (a, b, c))

    logger.debug(f"Monoid laws hold for {len(samples)} samples")
    return monoid
