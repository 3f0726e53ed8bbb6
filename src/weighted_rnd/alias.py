"""Vose's alias method for O(1) draws from a discrete distribution.

See http://www.keithschwarz.com/darts-dice-coins/ for a full treatment. A
table over k outcomes is two parallel arrays: slot i keeps outcome i with
probability ``thresholds[i]`` and otherwise yields ``aliases[i]``. Picking a
slot uniformly and then flipping that biased coin reproduces the input
distribution exactly, up to floating point rounding.
"""

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass


def normalize(weights: Sequence[float]) -> list[float]:
    """Scale non-negative finite weights into probabilities summing to 1.

    Weights are divided by the largest one before summing, so vectors whose
    plain sum would overflow to infinity keep their proportions.
    """
    peak = max(weights, default=0.0)
    if not peak > 0.0:
        raise ValueError(f"Weights must have a positive sum, got peak {peak}.")
    scaled = [w / peak for w in weights]
    total = math.fsum(scaled)
    return [s / total for s in scaled]


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


@dataclass(frozen=True)
class AliasTable:
    thresholds: tuple[float, ...]
    aliases: tuple[int, ...]

    @classmethod
    def build(cls, probabilities: Sequence[float]) -> "AliasTable":
        """Preprocess a probability vector summing to 1 in linear time."""
        k = len(probabilities)
        if k == 0:
            raise ValueError("Cannot build an alias table with no outcomes.")

        scaled = [p * k for p in probabilities]
        thresholds = [1.0] * k
        aliases = list(range(k))

        light: list[int] = []
        heavy: list[int] = []
        for i, q in enumerate(scaled):
            if q < 1.0:
                light.append(i)
            else:
                heavy.append(i)

        while light and heavy:
            small = light.pop()
            large = heavy.pop()
            thresholds[small] = _clamp(scaled[small])
            aliases[small] = large
            scaled[large] = (scaled[large] + scaled[small]) - 1.0
            if scaled[large] < 1.0:
                light.append(large)
            else:
                heavy.append(large)

        # Whatever remains on either worklist is within rounding error of a
        # full slot, and keeps the threshold of 1 and alias of itself.
        return cls(tuple(thresholds), tuple(aliases))

    @classmethod
    def from_weights(cls, weights: Sequence[float]) -> "AliasTable":
        """Normalize non-negative weights with a positive sum and build."""
        return cls.build(normalize(weights))

    def __len__(self) -> int:
        return len(self.thresholds)

    def draw(self, rng: random.Random) -> int:
        """Draw one outcome, consuming one slot choice and one coin flip."""
        i = rng.randrange(len(self.thresholds))
        if rng.random() < self.thresholds[i]:
            return i
        return self.aliases[i]
