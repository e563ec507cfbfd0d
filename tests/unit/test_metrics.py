# tests/unit/test_metrics.py

from weighted_ring.utils.config import RingConfig
from weighted_ring.utils.consistent_hash import Ring
from weighted_ring.utils.metrics import (get_report, key_distribution, remap_fraction,
                                         remapped_keys, replica_share)

FAKE_CONFIG = RingConfig(hash_fn=int)
KEYS = ["5", "15", "25"]


def test_key_distribution():
    ring = Ring({10: "a", 20: "b"}, FAKE_CONFIG)
    assert key_distribution(ring, KEYS) == {"a": 2, "b": 1}


def test_remapped_keys_after_removal():
    ring = Ring({10: "a", 20: "b"}, FAKE_CONFIG)
    shrunk = ring.remove("b")
    assert remapped_keys(ring, shrunk, KEYS) == ["15"]
    assert remap_fraction(ring, shrunk, KEYS) == 1 / 3
    assert remap_fraction(ring, shrunk, []) == 0.0


def test_replica_share():
    ring = Ring({10: "a", 20: "a", 30: "b", 40: "b"}, FAKE_CONFIG)
    assert replica_share(ring) == {"a": 0.5, "b": 0.5}
    assert replica_share(Ring.empty()) == {}


def test_get_report():
    ring = Ring({10: "a", 20: "b", 30: "b", 40: "b"}, FAKE_CONFIG)
    report = get_report(ring, KEYS)
    assert report["positions"] == 4
    assert report["keys"] == 3
    assert report["nodes"]["a"] == {"replicas": 1, "replica_share": 0.25, "keys": 1, "key_share": 0.3333}
    assert report["nodes"]["b"]["replicas"] == 3
    assert report["nodes"]["b"]["keys"] == 2


def test_get_report_empty_ring():
    """Laporan ring kosong tidak boleh memanggil locate."""
    report = get_report(Ring.empty(), KEYS)
    assert report == {"positions": 0, "keys": 3, "nodes": {}}


def test_metrics_do_not_modify_ring():
    ring = Ring.of("node-a", "node-b", replicas=10)
    positions = ring.positions
    get_report(ring, [f"k{i}" for i in range(50)])
    assert ring.positions == positions
