# weighted_ring/utils/hashing.py

import logging
from functools import lru_cache

import mmh3  # pip install mmh3

log = logging.getLogger("ring")


def murmur3_hash(value, seed=0):
    """MurmurHash3 32-bit (unsigned) dari sebuah string."""
    # Hash bawaan Python di-salt per proses, jadi tidak bisa dipakai untuk posisi ring
    return mmh3.hash(value, seed, signed=False)


@lru_cache(maxsize=None)
def make_hash_fn(seed=0):
    """Membuat fungsi hash str -> int yang terikat pada seed tertentu (satu objek per seed)."""
    if seed == 0:
        return murmur3_hash

    def _hash(value):
        return murmur3_hash(value, seed)

    return _hash


def default_node_id(node):
    """
    Identitas stabil sebuah node, dipakai untuk menurunkan posisi replika.
    Nama tipe ikut dimasukkan agar node 1 dan "1" tidak berbagi posisi.
    """
    node_type = type(node)
    # str() bawaan object berisi alamat memori, berubah di setiap proses
    if node_type.__str__ is object.__str__ and node_type.__repr__ is object.__repr__:
        log.warning(
            f"{node_type.__qualname__} has no stable str(); replica positions will change between runs, "
            f"pass RingConfig(node_id=...) for these nodes"
        )
    return f"{node_type.__module__}.{node_type.__qualname__}:{node}"


def replica_salt(node_id, index):
    """String unik per replika; indeks berbeda menghasilkan posisi berbeda."""
    return f"{index}#{node_id}"
