# weighted_ring/utils/config.py

import os
from dataclasses import dataclass, field, replace
from typing import Any, Callable

from dotenv import load_dotenv

from .hashing import default_node_id, make_hash_fn

load_dotenv()

# Konfigurasi ring
DEFAULT_REPLICAS = int(os.getenv("RING_DEFAULT_REPLICAS", 3))
HASH_SEED = int(os.getenv("RING_HASH_SEED", 0))

# Level log untuk skrip benchmark
LOG_LEVEL = os.getenv("RING_LOG_LEVEL", "WARNING")


def env_hash_fn():
    """Fungsi hash dengan seed dari RING_HASH_SEED (dibaca saat dipanggil)."""
    return make_hash_fn(int(os.getenv("RING_HASH_SEED", HASH_SEED)))


def env_replica_count():
    return int(os.getenv("RING_DEFAULT_REPLICAS", DEFAULT_REPLICAS))


@dataclass(frozen=True)
class RingConfig:
    """
    Fungsi hash dan jumlah replika default yang dibawa oleh setiap Ring.
    Nilai default diambil dari RING_HASH_SEED dan RING_DEFAULT_REPLICAS.
    """
    hash_fn: Callable[[str], int] = field(default_factory=env_hash_fn)
    default_replica_count: int = field(default_factory=env_replica_count)
    node_id: Callable[[Any], str] = default_node_id

    def __post_init__(self):
        if self.default_replica_count < 0:
            raise ValueError(f"default_replica_count must be >= 0, got {self.default_replica_count}")

    @classmethod
    def from_env(cls):
        """Membangun konfigurasi dari variabel lingkungan (.env didukung)."""
        return cls(hash_fn=env_hash_fn(), default_replica_count=env_replica_count())

    def with_replicas(self, replica_count):
        return replace(self, default_replica_count=replica_count)
