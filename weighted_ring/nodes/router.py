# weighted_ring/nodes/router.py

import logging
import threading

from ..utils.consistent_hash import Ring

log = logging.getLogger("router")


class RingRouter:
    """
    Memegang referensi ke Ring terbaru dan merutekan kunci ke node pemiliknya.
    Penulis diserialkan dengan lock; pembaca cukup mengambil snapshot ring saat ini.
    """

    def __init__(self, ring=None, config=None):
        self._ring = ring if ring is not None else Ring.empty(config)
        self._write_lock = threading.Lock()

    @property
    def ring(self):
        return self._ring

    def route(self, key):
        """Mendapatkan node yang bertanggung jawab atas kunci (key) tertentu."""
        return self._ring.locate(key)

    def publish(self, ring):
        """Mengganti ring yang dipublikasikan secara utuh."""
        with self._write_lock:
            self._ring = ring
        log.info("Published ring with %d positions", len(ring))
        return ring

    def add_node(self, node, replicas=None):
        """Menambahkan (atau mengubah bobot) node lalu mempublikasikan ring baru."""
        with self._write_lock:
            self._ring = self._ring.update(node, replicas)
            ring = self._ring
        log.info(f"Node {node!r} now holds {ring.count(node)} positions")
        return ring

    def remove_node(self, node):
        """Menghapus node dari ring lalu mempublikasikan ring baru."""
        with self._write_lock:
            self._ring = self._ring.remove(node)
            ring = self._ring
        log.info(f"Node {node!r} removed from ring")
        return ring

    def get_status(self):
        """Mengembalikan status ring saat ini."""
        ring = self._ring
        return {
            "positions": len(ring),
            "nodes": {str(node): replicas for node, replicas in ring.frequencies()},
        }
