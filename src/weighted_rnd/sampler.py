"""Multi-draw weighted sampling over an indexed population.

Both strategies evaluate every weight exactly once, in population order,
before the generator is consumed. They return indices into the population;
mapping indices back to candidates is the caller's business.
"""

import logging
import random
from collections.abc import Sequence
from typing import TypeVar

from weighted_rnd.alias import AliasTable, normalize
from weighted_rnd.errors import InsufficientCandidatesError, NegativeCountError
from weighted_rnd.weights import WeightFunction, evaluate_weights

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _check_count(n: int) -> None:
    if n < 0:
        raise NegativeCountError(n)


def sample_with_repeats(
    n: int,
    population: Sequence[T],
    weight_of: "WeightFunction[T]",
    rng: random.Random,
) -> list[int]:
    """Draw ``n`` indices independently, with replacement, in draw order."""
    _check_count(n)
    size = len(population)
    if n > 0 and size == 0:
        raise InsufficientCandidatesError(1, 0)

    weights = evaluate_weights(population, weight_of)
    if n == 0:
        return []

    if sum(weights) == 0.0:
        logger.debug("All %d weights are zero, drawing uniformly", size)
        return [rng.randrange(size) for _ in range(n)]

    table = AliasTable.build(normalize(weights))
    return [table.draw(rng) for _ in range(n)]


def sample_without_repeats(
    n: int,
    population: Sequence[T],
    weight_of: "WeightFunction[T]",
    rng: random.Random,
) -> list[int]:
    """Draw ``n`` distinct indices and return them in ascending order.

    Each round draws from the positions not chosen so far, renormalizing
    their cached weights. When every remaining weight is zero the round picks
    uniformly among the remaining positions instead.
    """
    _check_count(n)
    size = len(population)
    if n > size:
        raise InsufficientCandidatesError(n, size)

    weights = evaluate_weights(population, weight_of)
    if n == size:
        logger.debug("Selecting all %d candidates, weights are moot", size)
        return list(range(size))

    unselected = list(range(size))
    chosen: list[int] = []
    for _ in range(n):
        remaining = [weights[i] for i in unselected]
        if sum(remaining) == 0.0:
            logger.debug(
                "Remaining %d weights are zero, choosing uniformly", len(unselected)
            )
            slot = rng.randrange(len(unselected))
        else:
            slot = AliasTable.build(normalize(remaining)).draw(rng)
        chosen.append(unselected.pop(slot))

    return sorted(chosen)
