"""Reduction with monoids."""

import functools
import typing as tp

from paradigm.config import config
from paradigm.core.monoid import Monoid, verify_monoid

__all__ = [
    "concat_all",
]

T = tp.TypeVar("T")


def concat_all(monoid: Monoid[T]) -> tp.Callable[[tp.Iterable[T]], T]:
    """Reduce a sequence with ``monoid``.

    The fold starts from ``monoid.empty`` and combines elements left to right
    in index order, so non-commutative monoids give
    ``concat(...concat(concat(empty, xs[0]), xs[1])..., xs[-1])``.

    When ``STRICT_MONOIDS`` is enabled the monoid is first checked against the
    leading ``LAW_SAMPLE_SIZE`` elements. In lenient mode (the default) the
    laws are not checked at all: a broken monoid folds without error, so call
    ``verify_monoid`` directly when an instance is not known to be lawful.

    Args:
        monoid: Instance used for the reduction.

    Returns:
        Function reducing an iterable to a single value; ``monoid.empty`` for an
        empty input.

    Raises:
        MonoidLawError: In strict mode, if the sample exposes a law violation.

    Examples:
        >>> from paradigm.core.monoid import monoid_sum
        >>> concat_all(monoid_sum)([1, 2, 3])
        6
    """

    def reduce(xs: tp.Iterable[T]) -> T:
        xs = list(xs)
        if config.settings.STRICT_MONOIDS:
            verify_monoid(monoid, xs[: config.settings.LAW_SAMPLE_SIZE])
        return functools.reduce(monoid.concat, xs, monoid.empty)

    return reduce
