# main.py
# Dimostrazione del Bloom filter + benchmark FPR osservato vs teorico.
# Output: report a video e CSV con una riga per configurazione.

import csv
import logging
import time
from typing import Iterable, List, Tuple

from bloom_filter import BloomFilter
from bloom_hashing import HASH_FUNCTIONS
from bloom_params import optimal_num_hashes, theoretical_false_positive_rate


# ============================================================
# CONFIGURAZIONE
# ============================================================

# (size m, num_hashes k, elementi inseriti n)
FPR_CONFIGS = [
    (10_000, 7, 1_000),
    (10_000, 3, 1_000),
    (50_000, 7, 5_000),
    (100_000, 7, 10_000),
]

NUM_QUERIES = 500
HASH_NAMES = list(HASH_FUNCTIONS)

CSV_OUT = "fpr_results.csv"

logger = logging.getLogger(__name__)


# ============================================================
# UTILITY
# ============================================================

def make_items(start: int, stop: int, prefix: str = "item_") -> List[str]:
    return [f"{prefix}{i}" for i in range(start, stop)]


def measure_false_positive_rate(bloom: BloomFilter, queries: Iterable[str]) -> Tuple[int, float]:
    """Conta i falsi positivi su elementi mai inseriti."""
    queries = list(queries)
    if not queries:
        return 0, 0.0
    false_positives = sum(1 for q in queries if bloom.contains(q))
    return false_positives, false_positives / len(queries)


def _report(bloom: BloomFilter, items: Iterable[str]) -> None:
    for item in items:
        print(f"Contains '{item}': {bloom.contains(item)}")


# ============================================================
# SCENARI
# ============================================================

def run_scenarios() -> None:

    print("--- Bloom Filter: scenari di esempio ---")

    print("\n--- Caso 1: stringhe ---")
    bf1 = BloomFilter(100, 3)
    for word in ("apple", "banana", "cherry"):
        bf1.add(word)
    _report(bf1, ["apple", "banana", "cherry", "grape", "orange"])

    print("\n--- Caso 2: numeri (come stringhe) ---")
    bf2 = BloomFilter(200, 4)
    for i in range(50):
        bf2.add(str(i))
    _report(bf2, ["25", "0", "49", "50", "100"])

    print("\n--- Caso 3: filtro piccolo, falsi positivi probabili ---")
    bf3 = BloomFilter(50, 2)
    added_words = ["cat", "dog", "bird", "fish", "lion"]
    for word in added_words:
        bf3.add(word)
    print("Words added:", ", ".join(added_words))
    _report(bf3, ["cat", "tiger", "zebra", "elephant"])

    print("\n--- Caso 4: larga scala, tasso di falsi positivi ---")
    size, num_hashes, num_items = 10_000, 7, 1_000
    bf4 = BloomFilter(size, num_hashes)
    for item in make_items(0, num_items):
        bf4.add(item)
    fp, rate = measure_false_positive_rate(bf4, make_items(num_items, num_items + NUM_QUERIES))
    p = theoretical_false_positive_rate(size, num_hashes, num_items)

    print(f"Filter Size (m): {size}")
    print(f"Number of Hashes (k): {num_hashes} (ottimale: {optimal_num_hashes(size, num_items)})")
    print(f"Number of items added (n): {num_items}")
    print(f"Number of non-existent items checked: {NUM_QUERIES}")
    print(f"False Positives found: {fp}")
    print(f"False Positive Rate: {rate * 100:.2f}%")
    print(f"Theoretical False Positive Rate: {p * 100:.2f}%")


# ============================================================
# BENCHMARK FPR
# ============================================================

def run_fpr_benchmark(csv_out: str = CSV_OUT) -> List[dict]:

    fieldnames = [
        "hash", "size", "num_hashes", "num_items", "num_queries",
        "false_positives", "observed_fpr", "theoretical_fpr", "fill_ratio",
        "add_seconds", "query_seconds",
    ]
    rows = []

    with open(csv_out, "w", newline="") as csv_f:
        writer = csv.DictWriter(csv_f, fieldnames=fieldnames)
        writer.writeheader()

        for size, num_hashes, num_items in FPR_CONFIGS:
            added = make_items(0, num_items)
            queries = make_items(num_items, num_items + NUM_QUERIES)

            for hash_name in HASH_NAMES:
                bf = BloomFilter(size, num_hashes, hash_name=hash_name)

                t0 = time.perf_counter()
                for item in added:
                    bf.add(item)
                t_add = time.perf_counter() - t0

                t0 = time.perf_counter()
                fp, rate = measure_false_positive_rate(bf, queries)
                t_query = time.perf_counter() - t0

                row = {
                    "hash": hash_name,
                    "size": size,
                    "num_hashes": num_hashes,
                    "num_items": num_items,
                    "num_queries": len(queries),
                    "false_positives": fp,
                    "observed_fpr": round(rate, 5),
                    "theoretical_fpr": round(bf.estimated_false_positive_rate(), 5),
                    "fill_ratio": round(bf.fill_ratio, 5),
                    "add_seconds": t_add,
                    "query_seconds": t_query,
                }
                writer.writerow(row)
                csv_f.flush()
                rows.append(row)

                print(f"[{hash_name:>8}] m={size} k={num_hashes} n={num_items} "
                      f"-> FPR {rate * 100:.2f}% (teorico {row['theoretical_fpr'] * 100:.2f}%)")

    logger.info("Results saved to %s", csv_out)
    return rows


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_scenarios()
    print(f"\n--- BENCHMARK FPR ({NUM_QUERIES} query per configurazione) ---")
    run_fpr_benchmark()
    print(f"Risultati salvati in → {CSV_OUT}")


if __name__ == "__main__":
    main()
