"""Thread Safety Example - Sharing One TranslationService Between Threads.

Thread Safety:
    translate() takes a read lock only to snapshot the current locale and
    catalogs. set_locale() loads catalogs without holding any lock and then
    swaps the current locale under the write lock. Concurrent readers see
    either the old locale or the new one.

Demonstrates:
1. Concurrent reads
2. Switching locale while other threads translate

Python 3.13+.
"""

from __future__ import annotations

import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

from lingoresolve import MappingCatalogLoader, TranslationService

CATALOGS = {
    "en_US": {"HELLO": "Hello %s!"},
    "en": {"BYE": "Goodbye!"},
    "zh_CN": {"HELLO": "你好%s!"},
}


class SlowLoader:
    """MappingCatalogLoader with simulated I/O latency."""

    def __init__(self, delay: float) -> None:
        self._inner = MappingCatalogLoader(CATALOGS)
        self._delay = delay

    def __call__(self, locale: str) -> object:
        time.sleep(self._delay)
        return self._inner(locale)


def example_1_concurrent_reads() -> None:
    """Example 1: 100 translate() calls from a thread pool."""
    print("=" * 60)
    print("Example 1: Concurrent Reads")
    print("=" * 60)

    service = TranslationService(MappingCatalogLoader(CATALOGS), "en_US")
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda i: service.translate("HELLO", f"#{i}"), range(100)))
    print(f"  {len(results)} results, first: {results[0]}, last: {results[-1]}")


def example_2_switch_during_reads() -> None:
    """Example 2: A slow set_locale() does not block readers."""
    print("\n" + "=" * 60)
    print("Example 2: Switching Locale Under Load")
    print("=" * 60)

    service = TranslationService(SlowLoader(delay=0.05), "en_US")  # type: ignore[arg-type]

    def reader() -> Counter[str]:
        return Counter(service.translate("HELLO", "Sam") for _ in range(2000))

    with ThreadPoolExecutor(max_workers=5) as executor:
        futures = [executor.submit(reader) for _ in range(4)]
        started = time.perf_counter()
        service.set_locale("zh_CN")
        print(f"  set_locale took {time.perf_counter() - started:.3f}s (loads outside the lock)")
        totals = sum((f.result() for f in futures), Counter())

    for text, count in totals.most_common():
        print(f"  {count:5} x {text}")


if __name__ == "__main__":
    example_1_concurrent_reads()
    example_2_switch_during_reads()
