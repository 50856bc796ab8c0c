"""Benchmark: probe counts and clustering vs load factor."""

import argparse
import json
from pathlib import Path

import numpy as np

from probedict import HashEngine, Origin, Timer, configure_logging, get_logger
from probedict.metrics import occupancy_summary


def random_words(rng: np.random.Generator, n: int, min_len: int = 3, max_len: int = 12) -> list[str]:
    """Generate n distinct lowercase words."""
    letters = np.array(list("abcdefghijklmnopqrstuvwxyz"))
    words: set[str] = set()
    while len(words) < n:
        length = int(rng.integers(min_len, max_len + 1))
        words.add("".join(rng.choice(letters, size=length)))
    return sorted(words)


def benchmark_load_factors(capacity, load_factors, lookups=1000, seed=42):
    """Fill tables to each load factor and measure load and lookup probes."""
    rng = np.random.default_rng(seed)
    results = []

    for alpha in load_factors:
        n = int(alpha * capacity)
        logger.info(f"Benchmarking load factor {alpha:.2f} ({n} keys)")
        words = random_words(rng, n + lookups)
        stored, absent = words[:n], words[n:]

        engine = HashEngine(capacity=capacity)
        with Timer(f"load alpha={alpha:.2f}", logger=logger) as t:
            for word in stored:
                engine.insert(word, "x", Origin.LOAD)
        load = engine.stats.snapshot()

        hit_probes = [engine.search(w).probes for w in rng.choice(stored, size=min(lookups, n))] if n else []
        miss_probes = [engine.search(w).probes for w in absent]

        occ = occupancy_summary(engine.slot_states())
        results.append({
            "load_factor": alpha,
            "items": n,
            "measured_load_factor": engine.load_factor,
            "load_seconds": t.elapsed,
            "average_load_probes": load.average_load_probes,
            "max_probes": load.max_probes,
            "not_hashed": load.not_hashed,
            "hit_probes_mean": float(np.mean(hit_probes)) if len(hit_probes) else 0.0,
            "miss_probes_mean": float(np.mean(miss_probes)) if miss_probes else 0.0,
            # Uniform-hashing expectations: hit -ln(1-a)/a, miss 1/(1-a)
            "expected_hit": float(-np.log(1 - alpha) / alpha) if 0 < alpha < 1 else 1.0,
            "expected_miss": float(1 / (1 - alpha)) if alpha < 1 else float(capacity),
            "longest_run": occ["longest_run"],
            "run_gini": occ["run_gini"],
        })

    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Probe-count benchmark")
    parser.add_argument("--out", type=Path, default=Path("results/benchmarks/probes.json"))
    parser.add_argument("--capacity", type=int, default=20011)
    parser.add_argument("--alpha", type=float, nargs="+", default=[0.1, 0.25, 0.5, 0.75, 0.9, 0.95])
    parser.add_argument("--lookups", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=42)

    args = parser.parse_args()

    configure_logging("INFO")
    logger = get_logger("probe_bench")

    results = benchmark_load_factors(
        capacity=args.capacity,
        load_factors=args.alpha,
        lookups=args.lookups,
        seed=args.seed,
    )

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with open(args.out, "w") as f:
        json.dump(results, f, indent=2)

    print(f"Results saved to {args.out}")
