"""Hypothesis strategies for currencykit property-based testing.

Usage:
    from tests.strategies import known_codes, synthetic_datasets
    from tests.strategies.currency import numeric_strings

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - entry_by_fraction_digits, numeric_strings, synthetic_datasets
"""

from .currency import (
    dataset_entries,
    entry_by_fraction_digits,
    known_codes,
    known_numeric_codes,
    numeric_strings,
    synthetic_datasets,
    unknown_codes,
    unknown_numeric_codes,
)

__all__ = [
    "dataset_entries",
    "entry_by_fraction_digits",
    "known_codes",
    "known_numeric_codes",
    "numeric_strings",
    "synthetic_datasets",
    "unknown_codes",
    "unknown_numeric_codes",
]
