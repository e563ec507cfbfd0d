# weighted_ring/utils/consistent_hash.py

import bisect
import logging
from itertools import islice

from .config import RingConfig
from .hashing import replica_salt

log = logging.getLogger("ring")

# Jumlah posisi yang ditampilkan oleh repr()
REPR_LIMIT = 10


class EmptyRingError(LookupError):
    """Dilempar saat locate dipanggil pada ring tanpa posisi."""


class Ring:
    """
    Consistent hash ring berbobot yang immutable.
    Setiap node menempati sejumlah posisi (replika) di ruang kunci 32-bit.
    Operasi update/remove selalu mengembalikan Ring baru; Ring lama tidak berubah,
    sehingga aman dibaca dari banyak thread tanpa lock.
    """

    def __init__(self, positions=None, config=None):
        self._config = config if config is not None else RingConfig()
        if positions is None:
            positions = ()
        elif isinstance(positions, dict):
            positions = positions.items()
        # dict menjaga aturan "last write wins" untuk hash yang bertabrakan
        merged = dict(positions)
        ordered = sorted(merged.items(), key=lambda item: item[0])
        self._keys = tuple(key for key, _ in ordered)
        self._nodes = tuple(node for _, node in ordered)

    # --------------------------------------------------------------------------
    # FACTORY
    # --------------------------------------------------------------------------

    @classmethod
    def empty(cls, config=None):
        """Ring kosong dengan fungsi hash dan jumlah replika default."""
        return cls(config=config)

    @classmethod
    def of(cls, *nodes, replicas=None, config=None):
        """Membangun ring dengan meng-update ring kosong satu per satu, sesuai urutan."""
        return cls.empty(config).update_all(nodes, replicas)

    def update_all(self, nodes, replicas=None):
        ring = self
        for node in nodes:
            ring = ring.update(node, replicas)
        return ring

    # --------------------------------------------------------------------------
    # UPDATE / REMOVE
    # --------------------------------------------------------------------------

    def update(self, node, replica_count=None):
        """
        Mengembalikan Ring baru di mana `node` menempati tepat `replica_count` posisi.
        Semua posisi lama milik node dibuang lebih dulu, jadi bobot diganti, tidak ditambah.
        replica_count == 0 sama dengan remove(node).
        """
        if replica_count is None:
            replica_count = self._config.default_replica_count
        if replica_count < 0:
            raise ValueError(f"replica_count must be >= 0, got {replica_count}")

        positions = self._without(node)
        node_id = self._config.node_id(node)
        for index in range(1, replica_count + 1):
            positions.append((self._config.hash_fn(replica_salt(node_id, index)), node))

        log.debug(f"Updated node {node!r} to {replica_count} replicas")
        return Ring(positions, self._config)

    def remove(self, node):
        """Mengembalikan Ring baru tanpa posisi milik `node`. No-op jika node tidak ada."""
        if node not in self._nodes:
            return self
        log.debug(f"Removed node {node!r}")
        return Ring(self._without(node), self._config)

    def _without(self, node):
        return [(key, value) for key, value in zip(self._keys, self._nodes) if value != node]

    # --------------------------------------------------------------------------
    # LOOKUP
    # --------------------------------------------------------------------------

    def locate(self, key):
        """Node pertama searah jarum jam dari hash(str(key)), berputar ke awal jika perlu."""
        return self._nodes[self._index_of(key)]

    def preference_list(self, key, n):
        """Hingga `n` node berbeda searah jarum jam mulai dari pemilik `key`."""
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        start = self._index_of(key)
        size = len(self._keys)
        result = []
        for offset in range(size):
            if len(result) >= n:
                break
            node = self._nodes[(start + offset) % size]
            if node not in result:
                result.append(node)
        return result

    def _index_of(self, key):
        if not self._keys:
            raise EmptyRingError("Cannot locate a key on an empty ring")
        index = bisect.bisect_left(self._keys, self._config.hash_fn(str(key)))
        # Lewat dari posisi terakhir -> kembali ke posisi terkecil
        if index == len(self._keys):
            index = 0
        return index

    # --------------------------------------------------------------------------
    # STATUS & DIAGNOSTIC
    # --------------------------------------------------------------------------

    def count(self, node):
        return sum(1 for value in self._nodes if value == node)

    def contains(self, node):
        return self.count(node) > 0

    def __contains__(self, node):
        return self.contains(node)

    @property
    def is_empty(self):
        return not self._keys

    def frequencies(self):
        """Pasangan (node, jumlah posisi), urut berdasarkan kemunculan pertama di ruang kunci."""
        try:
            # dict menjaga urutan penyisipan
            counts = {}
            for node in self._nodes:
                counts[node] = counts.get(node, 0) + 1
            return list(counts.items())
        except TypeError:
            # Node yang tidak hashable: kelompokkan dengan perbandingan ==
            return self._frequencies_by_equality()

    def _frequencies_by_equality(self):
        counts = []
        for node in self._nodes:
            for entry in counts:
                if entry[0] == node:
                    entry[1] += 1
                    break
            else:
                counts.append([node, 1])
        return [(node, total) for node, total in counts]

    @property
    def nodes(self):
        return [node for node, _ in self.frequencies()]

    @property
    def positions(self):
        return list(zip(self._keys, self._nodes))

    @property
    def config(self):
        return self._config

    def __len__(self):
        return len(self._keys)

    def __eq__(self, other):
        if not isinstance(other, Ring):
            return NotImplemented
        # Konfigurasi ikut dibandingkan: ring yang sama harus menurunkan ring yang sama
        return (
            self._keys == other._keys
            and self._nodes == other._nodes
            and self._config == other._config
        )

    __hash__ = None

    def __repr__(self):
        shown = ", ".join(f"{key}: {node!r}" for key, node in islice(zip(self._keys, self._nodes), REPR_LIMIT))
        more = ", ..." if len(self._keys) > REPR_LIMIT else ""
        return f"Ring({{{shown}{more}}})"
