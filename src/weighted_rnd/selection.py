"""Host-facing selection primitives.

These turn the index lists produced by :mod:`weighted_rnd.sampler` back into
candidates, in the same kind of container the caller passed in. Plain
sequences come back as lists; populations come back as populations of the
same kind.
"""

import logging
import random
from collections.abc import Sequence
from typing import Any

from weighted_rnd.population import FilterablePopulation, Population, as_population
from weighted_rnd.sampler import sample_with_repeats, sample_without_repeats
from weighted_rnd.weights import WeightFunction

logger = logging.getLogger(__name__)

Candidates = Population | Sequence[Any]


class _Nobody:
    """The "no selection" result of picking from an empty agent set."""

    _instance = None

    def __new__(cls) -> "_Nobody":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "nobody"

    def __bool__(self) -> bool:
        return False


NOBODY = _Nobody()


def _assemble(
    candidates: Candidates, population: Population, indices: list[int]
) -> Population | list[Any]:
    if candidates is population:
        return population.rebuild(indices)
    return [population.item_at(i) for i in indices]


def weighted_one_of(
    candidates: Candidates, weight_of: "WeightFunction[Any]", rng: random.Random
) -> Any:
    """Pick a single candidate with probability proportional to its weight.

    Picking from an empty agent set yields :data:`NOBODY`; picking from an
    empty list is an error.
    """
    population = as_population(candidates)
    if isinstance(population, FilterablePopulation) and population.size() == 0:
        logger.debug("Empty agent set, returning nobody")
        return NOBODY
    (index,) = sample_without_repeats(1, population.candidates(), weight_of, rng)
    return population.item_at(index)


def weighted_n_of(
    n: int,
    candidates: Candidates,
    weight_of: "WeightFunction[Any]",
    rng: random.Random,
) -> Population | list[Any]:
    """Pick ``n`` distinct candidates, keeping their original relative order."""
    population = as_population(candidates)
    indices = sample_without_repeats(n, population.candidates(), weight_of, rng)
    if candidates is population and len(indices) == population.size():
        return population
    return _assemble(candidates, population, indices)


def weighted_n_of_with_repeats(
    n: int,
    candidates: Candidates,
    weight_of: "WeightFunction[Any]",
    rng: random.Random,
) -> Population | list[Any]:
    """Pick ``n`` candidates independently, in the order they were drawn."""
    population = as_population(candidates)
    indices = sample_with_repeats(n, population.candidates(), weight_of, rng)
    return _assemble(candidates, population, indices)
