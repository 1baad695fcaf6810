"""Shared constants for currencykit.

Centralized configuration constants used across the currency, registry and
verification modules. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Code shapes: Lengths of ISO 4217 and ISO 3166-1 identifiers
- CLDR: Locale used when cross-checking against Babel

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Code shapes
    "ISO_4217_CODE_LENGTH",
    "ISO_4217_NUMERIC_CODE_DIGITS",
    "ISO_3166_ALPHA2_LENGTH",
    # CLDR
    "CLDR_REFERENCE_LOCALE",
]

# ============================================================================
# CODE SHAPES
# ============================================================================

# ISO 4217 alphabetic codes are three uppercase letters (EUR, USD, JPY).
# Non-ISO currencies in injected datasets may use other shapes; the registry
# only requires codes to be non-empty and unique.
ISO_4217_CODE_LENGTH: int = 3

# ISO 4217 numeric codes are published as three digits with leading zeros
# ("036" for AUD). Stored and compared as integers without leading zeros.
ISO_4217_NUMERIC_CODE_DIGITS: int = 3

# ISO 3166-1 alpha-2 country codes (FR, JP, US).
ISO_3166_ALPHA2_LENGTH: int = 2

# ============================================================================
# CLDR
# ============================================================================

# Babel locale whose currency list is treated as the complete CLDR set.
# English carries display names for every ISO 4217 code.
CLDR_REFERENCE_LOCALE: str = "en"
