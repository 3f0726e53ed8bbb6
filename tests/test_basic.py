"""Smoke tests for the package surface."""

import logging
import random

import pytest

import weighted_rnd
from weighted_rnd import (
    NOBODY,
    InsufficientCandidatesError,
    WeightedSelectionError,
    sample_without_repeats,
    weighted_one_of,
)


def test_import_works() -> None:
    """Verify everything advertised in __all__ can be imported."""
    for name in weighted_rnd.__all__:
        assert getattr(weighted_rnd, name) is not None
    assert weighted_rnd.__version__ == "0.1.0"


def test_basic_selection() -> None:
    """Verify a single weighted pick returns one of the candidates."""
    weights = {"wolf": 1.0, "sheep": 3.0, "grass": 0.0}
    rng = random.Random(17)
    for _ in range(100):
        pick = weighted_one_of(list(weights), weights.__getitem__, rng)
        assert pick in ("wolf", "sheep")


def test_errors_are_value_errors() -> None:
    """Verify callers can catch selection failures as ValueError."""
    with pytest.raises(ValueError):
        weighted_one_of([], lambda c: 1.0, random.Random(0))
    assert issubclass(InsufficientCandidatesError, WeightedSelectionError)


def test_nobody_is_a_singleton() -> None:
    """Verify the no-selection sentinel has a single identity."""
    assert type(NOBODY)() is NOBODY


def test_zero_sum_fallback_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Verify the uniform fallback leaves a debug record."""
    with caplog.at_level(logging.DEBUG, logger="weighted_rnd"):
        sample_without_repeats(1, ["a", "b", "c"], lambda c: 0, random.Random(0))
    assert any("zero" in record.getMessage() for record in caplog.records)


def test_library_logs_nothing_by_default(caplog: pytest.LogCaptureFixture) -> None:
    """Verify nothing at info or above is emitted during normal selection."""
    with caplog.at_level(logging.INFO, logger="weighted_rnd"):
        sample_without_repeats(2, ["a", "b", "c"], lambda c: 1.0, random.Random(0))
    assert caplog.records == []
