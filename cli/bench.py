from __future__ import annotations

import statistics
import time

from app.deps import get_all_display_names
from core.search.name_search import search_display_name

QUERIES = ["emily kwan", "em kwan", "kwan", "ch", "arden", "nobody here"]


def main(rounds: int = 1000) -> None:
    names = get_all_display_names()
    timings = []
    for _ in range(rounds):
        for query in QUERIES:
            start = time.perf_counter()
            search_display_name(query, names)
            timings.append((time.perf_counter() - start) * 1000)
    print(f"Name search over {len(names)} names p50 ~= {statistics.median(timings):.4f} ms")


if __name__ == "__main__":
    main()
