#!/usr/bin/env python3
"""Verify the bundled ISO 4217 table against Babel CLDR data.

Runs currencykit.verification.verify_dataset() and prints the findings.

This script is informational: fraction-digit and country discrepancies are
expected because Babel's CLDR data may reflect common usage patterns rather
than the ISO standard. The bundled table is authoritative for ISO 4217
compliance.

Checks:
    1. Structural: Dataset currencies not recognized by Babel.
    2. Fraction digits: Dataset value differs from Babel precision.
    3. Countries: CLDR single tender currency not listed for the country.

Exit codes:
    0: All checks passed (discrepancies are warnings, not failures).
    1: Structural errors (unknown currencies, Babel not installed).

Usage:
    verify_iso4217.py [--verbose] [--format {rust,simple,json}]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys

from currencykit.diagnostics import DiagnosticFormatter, OutputFormat
from currencykit.verification import BabelImportError, VerificationReport, verify_dataset


def _print_section(
    header: str,
    explanation: str,
    lines: list[str],
) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(f"  {line}")
    print()


def _print_report(
    report: VerificationReport,
    formatter: DiagnosticFormatter,
    *,
    verbose: bool,
) -> None:
    """Print formatted report."""
    print("ISO 4217 Dataset Verification")
    print("=" * 50)
    print(f"Dataset entries:   {report.entry_count}")
    print(f"Babel currencies:  {report.cldr_count}")
    print()

    _print_section(
        "[ERROR] Structural errors",
        "Dataset currency not recognized by Babel",
        [formatter.format(d) for d in report.errors],
    )

    if report.warnings:
        if verbose:
            _print_section(
                "[WARN] ISO 4217 vs Babel discrepancies",
                "Bundled ISO 4217 data is authoritative; Babel CLDR may differ",
                [formatter.format(d) for d in report.warnings],
            )
        else:
            print(
                f"[INFO] {len(report.warnings)} discrepancy(ies) with Babel CLDR."
                " Use --verbose to list."
            )
            print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the bundled ISO 4217 table against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List every discrepancy with Babel CLDR data.",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.SIMPLE.value,
        help="Diagnostic output format (default: simple).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run ISO 4217 verification checks."""
    args = _parse_args(argv)

    try:
        report = verify_dataset()
    except BabelImportError as e:
        print(f"[ERROR] {e}")
        return 1

    formatter = DiagnosticFormatter(output_format=OutputFormat(args.format))
    _print_report(report, formatter, verbose=args.verbose)

    if not report.is_valid:
        print(f"[FAIL] {len(report.errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    print(f"[PASS] {len(report.warnings)} discrepancy(ies).")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
