# bloom_hashing.py
# Derivazione degli indici: hash polinomiale a 32 bit (stile hashCode) + XOR del seed.

from typing import Callable, Dict, Iterator
import mmh3

INT32_MASK = 0xFFFFFFFF
INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    """Riporta un intero Python alla semantica complemento a due a 32 bit."""
    value &= INT32_MASK
    return value - (1 << 32) if value & INT32_SIGN else value


def _code_units(item: str) -> Iterator[int]:
    """Unità UTF-16 della stringa (i caratteri fuori dal BMP diventano coppie surrogate)."""
    for ch in item:
        cp = ord(ch)
        if cp > 0xFFFF:
            cp -= 0x10000
            yield 0xD800 + (cp >> 10)
            yield 0xDC00 + (cp & 0x3FF)
        else:
            yield cp


def string_hash(item: str) -> int:
    """Hash rolling h = h * 31 + c, troncato a int32 ad ogni passo."""
    h = 0
    for unit in _code_units(item):
        h = _to_int32(h * 31 + unit)
    return h


def reduce_index(h: int, size: int) -> int:
    # |resto troncato| == |h| mod size: il % di Python è floored, non va usato su h negativo
    return abs(h) % size


def hash_to_index(item: str, seed: int, size: int) -> int:
    """Indice in [0, size) per la coppia (item, seed)."""
    return reduce_index(string_hash(item) ^ seed, size)


def murmur_hash_to_index(item: str, seed: int, size: int) -> int:
    """Variante MurmurHash3 (mmh3 restituisce già un int32 con segno)."""
    return reduce_index(mmh3.hash(item, seed), size)


HASH_FUNCTIONS: Dict[str, Callable[[str, int, int], int]] = {
    "rolling": hash_to_index,
    "murmur3": murmur_hash_to_index,
}


def get_hash_function(name: str) -> Callable[[str, int, int], int]:
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        raise ValueError(f"Unknown hash function {name!r}, expected one of {sorted(HASH_FUNCTIONS)}") from None
