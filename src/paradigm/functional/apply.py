"""Applicative combination of independent containers.

``sequence_t`` combines a fixed number of containers positionally into one
container of a tuple; ``sequence_s`` does the same for a mapping of
containers and yields a container of a dict. Both use only the instance's
``of``/``map``/``ap``, so the container's own rule decides the outcome: for
Option the result is present iff every input is present.

Examples:
    >>> from paradigm.functional import option
    >>> sequence_t(option.applicative)(option.some(1), option.some("2"))
    Some(value=(1, '2'))
    >>> sequence_t(option.applicative)(option.some(1), option.none())
    Nothing()
"""

import typing as tp

from paradigm.core.typeclasses import Applicative

__all__ = [
    "sequence_t",
    "sequence_s",
]


def sequence_t(F: Applicative) -> tp.Callable[..., tp.Any]:
    """Build ``(F[A], F[B], ...) -> F[(A, B, ...)]`` for the instance ``F``."""

    def combine(*fas: tp.Any) -> tp.Any:
        acc = F.of(())
        for fa in fas:
            acc = F.ap(F.map(acc, lambda t: lambda x: (*t, x)), fa)
        return acc

    return combine


def sequence_s(F: Applicative) -> tp.Callable[[tp.Mapping[str, tp.Any]], tp.Any]:
    """Build ``{k: F[A]} -> F[{k: A}]`` for the instance ``F``, keeping key order."""

    def combine(fas: tp.Mapping[str, tp.Any]) -> tp.Any:
        keys = list(fas)
        return F.map(
            sequence_t(F)(*(fas[key] for key in keys)),
            lambda values: dict(zip(keys, values)),
        )

    return combine
