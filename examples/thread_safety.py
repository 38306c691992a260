"""Thread Safety Example - Sharing one CurrencyLookup across threads.

Thread Safety:
    CurrencyLookup is thread-safe. Each locale's currency map and string
    index are computed once under a lock and then read without locking.
    PrivateCurrencyRegistry publishes copy-on-write snapshots, so readers
    never block writers and a code can only be registered once.

Demonstrates:
1. Concurrent string resolution against a shared lookup
2. Racing registrations of the same private code (exactly one wins)

Requires: pip install cldrcurrency[babel]

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from cldrcurrency import CurrencyLookup, PrivateCurrencyRegistry


def example_1_concurrent_reads() -> None:
    """Example 1: Many threads resolving strings in several locales."""
    print("=" * 60)
    print("Example 1: Concurrent Reads")
    print("=" * 60)

    lookup = CurrencyLookup()
    queries = [("euros", "en"), ("US Dollars", "en"), ("Euro", "de"), ("dollar", "en-AU")] * 5

    def resolve(query: tuple[str, str]) -> str:
        text, locale = query
        code, errors = lookup.currency_code_for_string(text, locale)
        return f"{text!r} in {locale}: {code or type(errors[0]).__name__}"

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = sorted(set(pool.map(resolve, queries)))

    for line in results:
        print(f"  {line}")
    print(f"\n[CACHE] Locales computed: {lookup.cached_locales}")


def example_2_racing_registrations() -> None:
    """Example 2: Eight threads register the same private code."""
    print("\n" + "=" * 60)
    print("Example 2: Racing Registrations")
    print("=" * 60)

    registry = PrivateCurrencyRegistry()
    barrier = threading.Barrier(8)

    def register(worker: int) -> str:
        barrier.wait()
        currency, errors = registry.register("XAZ", name=f"Coin from worker {worker}", digits=2)
        return currency.name if currency else type(errors[0]).__name__

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(register, range(8)))

    winners = [outcome for outcome in outcomes if outcome.startswith("Coin")]
    print(f"  Winners: {winners}")
    print(f"  Rejected: {len(outcomes) - len(winners)} x CurrencyAlreadyDefinedError")
    print(f"  Registry now holds: {dict(registry.all())['XAZ'].name}")


if __name__ == "__main__":
    example_1_concurrent_reads()
    example_2_racing_registrations()
    print("\n[SUCCESS] All examples completed successfully!")
