"""Weight validation and eager evaluation of weight callbacks."""

import math
import numbers
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any, TypeVar

from weighted_rnd.errors import (
    NegativeWeightError,
    NonFiniteWeightError,
    NonNumericWeightError,
)

T = TypeVar("T")

WeightFunction = Callable[[T], Any]


def validate_weight(raw: Any) -> float:
    """Convert a value returned by a weight callback into a usable weight.

    Booleans are rejected even though Python treats them as integers.
    """
    if isinstance(raw, bool) or not isinstance(raw, (numbers.Real, Decimal)):
        raise NonNumericWeightError(raw)
    weight = float(raw)
    if weight < 0.0:
        raise NegativeWeightError(weight)
    if not math.isfinite(weight):
        raise NonFiniteWeightError(weight)
    return weight


def evaluate_weights(
    candidates: Sequence[T], weight_of: "WeightFunction[T]"
) -> list[float]:
    """Call ``weight_of`` exactly once per candidate, in population order.

    The whole vector is validated before it is returned, so callers can rely
    on every entry being finite and non-negative.
    """
    return [validate_weight(weight_of(candidate)) for candidate in candidates]
