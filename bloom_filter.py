# bloom_filter.py

import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from bitarray import bitarray

from bloom_hashing import get_hash_function
from bloom_interface import BloomFilterInterface
from bloom_params import theoretical_false_positive_rate

logger = logging.getLogger(__name__)


def _check_positive(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


class BloomFilter(BloomFilterInterface):
    """
    Bloom filter a dimensione fissa su chiavi stringa.

    I bit passano solo da 0 a 1: niente cancellazione, niente resize.
    I k indici di un elemento derivano da un solo hash base in XOR con i seed 0..k-1,
    quindi sono correlati (stima dei falsi positivi più ottimista del reale).
    """

    def __init__(self, size: int = 1000, num_hashes: int = 3, hash_name: str = "rolling"):
        _check_positive("size", size)
        _check_positive("num_hashes", num_hashes)
        self.size = size
        self.num_hashes = num_hashes
        self.hash_name = hash_name
        self._hash_to_index = get_hash_function(hash_name)
        self.bit_array = bitarray(size)
        self.bit_array.setall(0)
        self._items_added = 0
        logger.debug("BloomFilter created: size=%d num_hashes=%d hash=%s", size, num_hashes, hash_name)

    def _hashes(self, item: str) -> List[int]:
        """Calcola 'num_hashes' posizioni nel bit array per un dato elemento."""
        return [self._hash_to_index(item, seed, self.size) for seed in range(self.num_hashes)]

    def add(self, item: str) -> None:
        """Aggiunge un elemento al filtro."""
        for index in self._hashes(item):
            self.bit_array[index] = 1
        self._items_added += 1

    def _might_contain(self, item: str) -> bool:
        for seed in range(self.num_hashes):
            # un solo bit a 0 basta: sicuramente assente
            if not self.bit_array[self._hash_to_index(item, seed, self.size)]:
                return False
        return True

    def contains(self, items: Union[str, Sequence[str]]) -> Union[bool, List[bool]]:
        """
        Stringa singola -> bool, lista di stringhe -> lista di bool.
        True significa "forse presente" (possibile falso positivo), False "sicuramente assente".
        """
        if isinstance(items, str):
            return self._might_contain(items)
        return [self._might_contain(i) for i in items]

    def __contains__(self, item: str) -> bool:
        return self._might_contain(item)

    # --- Statistiche (sola lettura) ---

    @property
    def bit_count(self) -> int:
        return self.bit_array.count(1)

    @property
    def fill_ratio(self) -> float:
        return self.bit_count / self.size

    @property
    def items_added(self) -> int:
        """Numero di chiamate ad add (duplicati inclusi)."""
        return self._items_added

    def estimated_false_positive_rate(self) -> float:
        return theoretical_false_positive_rate(self.size, self.num_hashes, self._items_added)

    def __repr__(self) -> str:
        return (f"BloomFilter(size={self.size}, num_hashes={self.num_hashes}, "
                f"hash_name={self.hash_name!r}, bits_set={self.bit_count})")

    # --- Caricamento da file ---

    def build(self, source: Union[str, Path, Iterable[Union[str, Path]]]) -> int:
        """
        Carica elementi nel filtro, una riga per elemento (righe vuote ignorate).
        Accetta un singolo percorso (str o Path) oppure un iterabile di percorsi.
        Ritorna il numero totale di elementi aggiunti.
        """
        if not isinstance(source, (str, Path)) and isinstance(source, Iterable):
            total = 0
            for single_path in source:
                total += self.build(single_path)
            return total

        path = Path(source)
        if not path.exists():
            logger.warning("File %s not found, skipping", path)
            return 0

        count = 0
        with path.open("r", encoding="utf-8", errors="ignore") as f:
            for line in f:
                item = line.strip()
                if item:
                    self.add(item)
                    count += 1
        logger.debug("Loaded %d items from %s", count, path)
        return count

    def verify_from_paths(self, paths: Iterable[Union[str, Path]]) -> List[bool]:
        results: List[bool] = []
        for p in paths:
            path_obj = Path(p)
            if not path_obj.exists():
                logger.warning("File %s not found, skipping", path_obj)
                continue
            with path_obj.open("r", encoding="utf-8", errors="ignore") as f:
                lines = [line.strip() for line in f if line.strip()]
            results.extend(self.contains(lines))
        return results
