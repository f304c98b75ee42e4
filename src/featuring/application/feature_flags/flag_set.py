"""Application feature flags – FlagSet value object and name coercion."""

from __future__ import annotations

import dataclasses
from typing import Iterable, Iterator, Union

FlagNames = Union[str, Iterable[str], None]
"""A single flag name, an ordered iterable of names, or ``None`` for "no names"."""


def coerce_names(names: FlagNames) -> tuple[str, ...]:
    """Normalise *names* to a flat tuple, preserving order and duplicates.

    A bare string is one name, never a sequence of characters.
    """
    if names is None:
        return ()
    if isinstance(names, str):
        return (names,)
    return tuple(names)


@dataclasses.dataclass(frozen=True)
class FlagSet:
    """Immutable set of active flag names.

    Membership is exact and case-sensitive.  Equality only considers the
    members; ``order`` keeps first-occurrence order for :meth:`names`.
    """

    members: frozenset[str] = frozenset()
    order: tuple[str, ...] = dataclasses.field(default=(), compare=False)

    @classmethod
    def of(cls, names: FlagNames = None) -> FlagSet:
        ordered = tuple(dict.fromkeys(coerce_names(names)))
        return cls(frozenset(ordered), ordered)

    def contains(self, name: str) -> bool:
        return name in self.members

    def names(self) -> list[str]:
        """Return a fresh list of the distinct names in this set."""
        return list(self.order)

    def __contains__(self, name: object) -> bool:
        return name in self.members

    def __iter__(self) -> Iterator[str]:
        return iter(self.order)

    def __len__(self) -> int:
        return len(self.members)


__all__ = ["FlagNames", "FlagSet", "coerce_names"]
