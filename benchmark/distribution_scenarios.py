# benchmark/distribution_scenarios.py

import logging
import random
import time

from weighted_ring.utils.config import LOG_LEVEL, RingConfig
from weighted_ring.utils.consistent_hash import Ring
from weighted_ring.utils.metrics import get_report, remap_fraction

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

# Jalankan dari root repo: python -m benchmark.distribution_scenarios
SAMPLE_KEYS = 100_000
NODES = ["cache-1:11211", "cache-2:11211", "cache-3:11211", "cache-4:11211"]


def scenario_replica_counts(keys, config):
    """Bagaimana jumlah replika mempengaruhi keseimbangan beban."""
    for replicas in (3, 50, 200):
        start_time = time.time()
        ring = Ring.of(*NODES, replicas=replicas, config=config)
        report = get_report(ring, keys)
        elapsed_ms = (time.time() - start_time) * 1000
        shares = [node["key_share"] for node in report["nodes"].values()]
        print(f"replicas={replicas:<4} positions={report['positions']:<5} "
              f"min_share={min(shares):.3f} max_share={max(shares):.3f} ({elapsed_ms:.0f} ms)")


def scenario_weighted(keys, config):
    """Node dengan bobot 3x seharusnya menerima sekitar 3x kunci."""
    ring = Ring.of(*NODES[:3], replicas=100, config=config).update(NODES[3], 300)
    for node, stats in get_report(ring, keys)["nodes"].items():
        print(f"{node}: replica_share={stats['replica_share']:.3f} key_share={stats['key_share']:.3f}")


def scenario_membership_change(keys, config):
    """Fraksi kunci yang berpindah saat node ditambah atau dihapus."""
    ring = Ring.of(*NODES, replicas=100, config=config)
    grown = ring.update("cache-5:11211", 100)
    shrunk = ring.remove(NODES[0])
    print(f"add node:    {remap_fraction(ring, grown, keys):.3f} of keys moved (ideal ~0.200)")
    print(f"remove node: {remap_fraction(ring, shrunk, keys):.3f} of keys moved (ideal ~0.250)")


if __name__ == "__main__":
    rng = random.Random(42)
    keys = [f"key-{rng.getrandbits(64)}" for _ in range(SAMPLE_KEYS)]
    config = RingConfig.from_env()
    scenario_replica_counts(keys, config)
    scenario_weighted(keys, config)
    scenario_membership_change(keys, config)
