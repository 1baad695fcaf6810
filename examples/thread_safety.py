"""Thread Safety Example - Sharing the Process-wide Currency Registry.

The registry is built once, on first use, no matter how many threads race
to it. After construction it is read-only, so lookups need no locking.

Demonstrates:
1. Concurrent first access builds exactly one registry
2. Concurrent lookups share the same Currency instances

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from currencykit import Currency, CurrencyRegistry


def example_1_first_access() -> None:
    """Example 1: Many threads trigger construction at the same moment."""
    print("=" * 60)
    print("Example 1: Concurrent First Access")
    print("=" * 60)

    CurrencyRegistry.reset_instance()
    barrier = threading.Barrier(8)

    def worker() -> int:
        barrier.wait()
        return id(CurrencyRegistry.get_instance())

    with ThreadPoolExecutor(max_workers=8) as executor:
        ids = {future.result() for future in [executor.submit(worker) for _ in range(8)]}

    print(f"Distinct registries built: {len(ids)}")


def example_2_shared_instances() -> None:
    """Example 2: Lookups from many threads return identical objects."""
    print("\n" + "=" * 60)
    print("Example 2: Shared Currency Instances")
    print("=" * 60)

    identifiers: list[str | int] = ["EUR", 978, "978", "USD", 840, "JPY"]

    def lookup(identifier: str | int) -> tuple[str | int, Currency]:
        return identifier, Currency.of(identifier)

    with ThreadPoolExecutor(max_workers=4) as executor:
        futures = [executor.submit(lookup, i) for i in identifiers]
        for future in as_completed(futures):
            identifier, currency = future.result()
            print(f"  {identifier!r:>6} -> {currency} (id={id(currency)})")

    print(f"EUR by code and numeric code identical: {Currency.of('EUR') is Currency.of(978)}")


if __name__ == "__main__":
    example_1_first_access()
    example_2_shared_instances()
