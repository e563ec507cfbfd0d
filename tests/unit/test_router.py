# tests/unit/test_router.py

import logging
import threading

import pytest
from weighted_ring.nodes.router import RingRouter
from weighted_ring.utils.consistent_hash import EmptyRingError, Ring


def test_route_on_empty_router_fails():
    router = RingRouter()
    assert router.ring.is_empty
    with pytest.raises(EmptyRingError):
        router.route("key")


def test_add_and_remove_node_publish_new_ring():
    router = RingRouter()
    published = router.add_node("node-a", 5)
    assert router.ring is published
    assert router.ring.count("node-a") == 5
    assert router.route("key") == "node-a"

    snapshot = router.ring
    router.add_node("node-b")
    router.remove_node("node-a")
    # Snapshot lama tidak ikut berubah
    assert snapshot.nodes == ["node-a"]
    assert router.ring.nodes == ["node-b"]
    assert router.route("key") == "node-b"


def test_publish_replaces_ring():
    router = RingRouter(Ring.of("node-a"))
    replacement = Ring.of("node-x", "node-y")
    assert router.publish(replacement) is replacement
    assert router.route("key") in ("node-x", "node-y")


def test_concurrent_writers_do_not_lose_updates():
    """Penulis paralel diserialkan, tidak ada update yang hilang."""
    router = RingRouter()
    threads = [threading.Thread(target=router.add_node, args=(f"node-{i}", 4)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(router.ring.nodes) == sorted(f"node-{i}" for i in range(8))
    assert len(router.ring) == 32


def test_get_status():
    router = RingRouter(Ring.empty().update("X", 5).update("Y", 15))
    status = router.get_status()
    assert status["positions"] == 20
    assert status["nodes"] == {"X": 5, "Y": 15}


def test_publish_is_logged(caplog):
    router = RingRouter()
    with caplog.at_level(logging.INFO, logger="router"):
        router.publish(Ring.empty().update("X", 5).update("Y", 15))
    assert "Published ring with 20 positions" in caplog.text
