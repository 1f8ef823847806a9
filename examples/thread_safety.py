"""Thread Safety Example - Concurrent Rule Evaluation.

Every evaluation builds its own cursor, grammar and depth guard, and nothing
is cached between calls except Babel Locale objects (lru_cache, internally
locked). Evaluations can therefore run from any number of threads without
locks.

Demonstrates:
1. ThreadPoolExecutor fan-out over numbers
2. Consistency check: concurrent results equal sequential results

Python 3.13+.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from cldrplural import select_plural_category

LOCALES = ("en", "ru", "pl", "ar", "lv", "fr")


def categorize(number: int) -> tuple[str, ...]:
    """Category of number in every example locale."""
    return tuple(select_plural_category(number, locale) for locale in LOCALES)


def example_1_threadpool_pattern() -> None:
    """Example 1: Fan out evaluations across a thread pool."""
    print("=" * 60)
    print("Example 1: ThreadPoolExecutor Pattern")
    print("=" * 60)

    numbers = list(range(30))
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(categorize, numbers))

    print(f"  {'n':>3}  " + "  ".join(f"{loc:>5}" for loc in LOCALES))
    for number, categories in zip(numbers, results, strict=True):
        print(f"  {number:>3}  " + "  ".join(f"{c:>5}" for c in categories))


def example_2_consistency() -> None:
    """Example 2: Concurrent results match sequential results."""
    print("\n" + "=" * 60)
    print("Example 2: Consistency Check")
    print("=" * 60)

    numbers = list(range(1000))
    sequential = [categorize(n) for n in numbers]
    with ThreadPoolExecutor(max_workers=16) as executor:
        concurrent = list(executor.map(categorize, numbers))

    status = "OK" if sequential == concurrent else "MISMATCH"
    print(f"  [{status}] {len(numbers)} numbers x {len(LOCALES)} locales")


if __name__ == "__main__":
    example_1_threadpool_pattern()
    example_2_consistency()
