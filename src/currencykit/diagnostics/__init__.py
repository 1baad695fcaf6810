"""Diagnostic system for currency errors.

Provides structured error diagnostics with codes, hints, and lookup context.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, LookupFailure, LookupKind
from .errors import (
    CurrencyError,
    DatasetError,
    InvalidArgumentError,
    UnknownCurrencyError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CurrencyError",
    "DatasetError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidArgumentError",
    "LookupFailure",
    "LookupKind",
    "OutputFormat",
    "UnknownCurrencyError",
]
