# bloom_params.py
# Dimensionamento del filtro e stima teorica dei falsi positivi.

import math
from dataclasses import dataclass


def theoretical_false_positive_rate(size: int, num_hashes: int, num_items: int) -> float:
    """p = (1 - e^(-k·n/m))^k"""
    if num_items <= 0:
        return 0.0
    return (1.0 - math.exp(-(num_hashes * num_items) / size)) ** num_hashes


def optimal_num_hashes(size: int, expected_items: int) -> int:
    """k ≈ ln(2) · m / n, almeno 1."""
    if expected_items <= 0:
        raise ValueError("expected_items must be positive")
    return max(1, int(round((size / expected_items) * math.log(2.0))))


@dataclass(frozen=True)
class BloomParams:
    size: int
    num_hashes: int

    def build(self, hash_name: str = "rolling"):
        """Costruisce un BloomFilter vuoto con questi parametri."""
        from bloom_filter import BloomFilter
        return BloomFilter(self.size, self.num_hashes, hash_name=hash_name)


def optimal_params(expected_items: int, target_fpr: float) -> BloomParams:
    """m e k ottimali per n elementi attesi e un tasso di falsi positivi p."""
    if expected_items <= 0:
        raise ValueError("expected_items must be positive")
    if not (0 < target_fpr < 1):
        raise ValueError("target_fpr must be in (0, 1)")

    ln2 = math.log(2.0)
    m = int(math.ceil(-expected_items * math.log(target_fpr) / (ln2 ** 2)))
    return BloomParams(size=m, num_hashes=optimal_num_hashes(m, expected_items))
