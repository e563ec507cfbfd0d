# weighted_ring/utils/metrics.py

from collections import defaultdict

# Metrik distribusi sederhana; semua fungsi hanya membaca ring, tidak mengubahnya.


def key_distribution(ring, keys):
    """Menghitung berapa banyak kunci sampel yang jatuh ke setiap node."""
    counts = defaultdict(int)
    for key in keys:
        counts[ring.locate(key)] += 1
    return dict(counts)


def remapped_keys(before, after, keys):
    """Kunci yang pemiliknya berubah antara dua ring."""
    return [key for key in keys if before.locate(key) != after.locate(key)]


def remap_fraction(before, after, keys):
    keys = list(keys)
    if not keys:
        return 0.0
    return len(remapped_keys(before, after, keys)) / len(keys)


def replica_share(ring):
    """Porsi posisi yang dimiliki setiap node (0.0 - 1.0)."""
    total = len(ring)
    if total == 0:
        return {}
    return {node: replicas / total for node, replicas in ring.frequencies()}


def get_report(ring, keys):
    """Mendapatkan ringkasan distribusi untuk ring dan sampel kunci."""
    keys = list(keys)
    distribution = key_distribution(ring, keys) if keys and not ring.is_empty else {}
    shares = replica_share(ring)

    report = {
        "positions": len(ring),
        "keys": len(keys),
        "nodes": {},
    }
    for node, replicas in ring.frequencies():
        received = distribution.get(node, 0)
        report["nodes"][node] = {
            "replicas": replicas,
            "replica_share": round(shares[node], 4),
            "keys": received,
            "key_share": round(received / len(keys), 4) if keys else 0.0,
        }
    return report
