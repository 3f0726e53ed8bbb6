"""Package initialization for weighted-rnd.

Weighted random selection of list items and agents, with or without repeats,
built on Vose's alias method.
"""

from weighted_rnd.alias import AliasTable, normalize
from weighted_rnd.errors import (
    InsufficientCandidatesError,
    NegativeCountError,
    NegativeWeightError,
    NonFiniteWeightError,
    NonNumericWeightError,
    WeightedSelectionError,
    WeightError,
)
from weighted_rnd.population import (
    FilterablePopulation,
    OrderedPopulation,
    Population,
    as_population,
)
from weighted_rnd.sampler import sample_with_repeats, sample_without_repeats
from weighted_rnd.selection import (
    NOBODY,
    weighted_n_of,
    weighted_n_of_with_repeats,
    weighted_one_of,
)
from weighted_rnd.weights import evaluate_weights, validate_weight

__version__ = "0.1.0"
__all__ = [
    "NOBODY",
    "AliasTable",
    "FilterablePopulation",
    "InsufficientCandidatesError",
    "NegativeCountError",
    "NegativeWeightError",
    "NonFiniteWeightError",
    "NonNumericWeightError",
    "OrderedPopulation",
    "Population",
    "WeightError",
    "WeightedSelectionError",
    "as_population",
    "evaluate_weights",
    "normalize",
    "sample_with_repeats",
    "sample_without_repeats",
    "validate_weight",
    "weighted_n_of",
    "weighted_n_of_with_repeats",
    "weighted_one_of",
]
