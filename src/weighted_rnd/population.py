"""Indexed views over the two kinds of candidate containers.

A host hands over either an ordered list of values or an agent set. Both are
modelled as immutable tuples of candidates that know how to rebuild a
container of their own kind from a selection of indices.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class OrderedPopulation:
    """An ordered list of candidates, duplicates allowed."""

    items: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def size(self) -> int:
        return len(self.items)

    def item_at(self, index: int) -> Any:
        return self.items[index]

    def candidates(self) -> tuple[Any, ...]:
        return self.items

    def rebuild(self, indices: Iterable[int]) -> "OrderedPopulation":
        return OrderedPopulation(tuple(self.items[i] for i in indices))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)


@dataclass(frozen=True)
class FilterablePopulation:
    """An agent set: members in iteration order plus an optional breed tag.

    Rebuilt sets keep the breed of the set they were selected from.
    """

    members: tuple[Any, ...] = ()
    breed: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))

    def size(self) -> int:
        return len(self.members)

    def item_at(self, index: int) -> Any:
        return self.members[index]

    def candidates(self) -> tuple[Any, ...]:
        return self.members

    def rebuild(self, indices: Iterable[int]) -> "FilterablePopulation":
        return FilterablePopulation(
            tuple(self.members[i] for i in indices), self.breed
        )

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.members)


Population = OrderedPopulation | FilterablePopulation


def as_population(candidates: Population | Sequence[Any]) -> Population:
    """Return ``candidates`` as a population, wrapping plain sequences."""
    if isinstance(candidates, (OrderedPopulation, FilterablePopulation)):
        return candidates
    if isinstance(candidates, (str, bytes)) or not isinstance(candidates, Sequence):
        raise TypeError(
            f"Expected a list or an agent set of candidates, got {candidates!r}."
        )
    return OrderedPopulation(tuple(candidates))
