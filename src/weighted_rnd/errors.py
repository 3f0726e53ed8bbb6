"""Error kinds raised by weighted selection.

Every error is raised before the caller's generator is touched, so a failing
call never perturbs a reproducible simulation run.
"""

from typing import Any


def pluralize(count: int, word: str) -> str:
    """Render ``count`` followed by ``word``, pluralized with a trailing s."""
    return f"{count} {word}{'' if count == 1 else 's'}"


class WeightedSelectionError(ValueError):
    """Base class for all errors raised by weighted selection."""


class WeightError(WeightedSelectionError):
    """A weight callback produced an unusable weight."""

    def __init__(self, value: Any, message: str) -> None:
        super().__init__(message)
        self.value = value


class NonNumericWeightError(WeightError):
    def __init__(self, value: Any) -> None:
        super().__init__(
            value, f"Got {value!r} as a weight but all weights must be numbers."
        )


class NegativeWeightError(WeightError):
    def __init__(self, value: float) -> None:
        super().__init__(
            value, f"Got {value} as a weight but all weights must be >= 0.0."
        )


class NonFiniteWeightError(WeightError):
    def __init__(self, value: float) -> None:
        super().__init__(
            value, f"Got {value} as a weight but all weights must be finite."
        )


class NegativeCountError(WeightedSelectionError):
    def __init__(self, count: int) -> None:
        super().__init__("First input can't be negative.")
        self.count = count


class InsufficientCandidatesError(WeightedSelectionError):
    """More distinct items were requested than there are candidates."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"Requested {pluralize(requested, 'random item')} "
            f"from {pluralize(available, 'candidate')}."
        )
        self.requested = requested
        self.available = available
