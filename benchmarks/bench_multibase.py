#!/usr/bin/env python3
"""
Benchmark: multibase encode/decode latency per algorithm

Measures, for every algorithm in the default registry:
  1. Encode latency (bytes -> prefixed text)
  2. Decode latency (prefixed text -> bytes, including strict validation)
  3. Round-trip integrity against a CRC32C of the payload

Usage:
  $ python benchmarks/bench_multibase.py --runs 1000 --size 1024
"""
from __future__ import annotations

import argparse
import time
from statistics import quantiles

import numpy as np
from rich import box
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from multibase_registry import decode, default_registry, encode, new_digest


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------
def generate_payload(size: int, seed: int) -> bytes:
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=size, dtype=np.uint8).tobytes()


def checksum(data: bytes) -> bytes:
    digest = new_digest("crc32c")
    digest.update(data)
    return digest.finalize()


# ---------------------------------------------------------------------------
# Benchmark
# ---------------------------------------------------------------------------
def bench_algorithm(name: str, size: int, runs: int) -> dict[str, list[float] | int]:
    encode_lat: list[float] = []
    decode_lat: list[float] = []
    validation_errors = 0

    for run_num in tqdm(range(runs), desc=name, leave=False):
        # Unique payload per run
        payload = generate_payload(size, run_num)
        expected = checksum(payload)

        t0 = time.perf_counter()
        text = encode(payload, name)
        t1 = time.perf_counter()
        decoded = decode(text)
        t2 = time.perf_counter()

        encode_lat.append(t1 - t0)
        decode_lat.append(t2 - t1)
        if checksum(decoded) != expected:
            validation_errors += 1

    return {"encode": encode_lat, "decode": decode_lat, "validation_errors": validation_errors}


UNITS = {
    "ms": 1e3,
    "us": 1e6,
    "ns": 1e9,
}


def summarise(
    latencies: list[float], size_bytes: int, validation_errors: int, total_runs: int, unit: str = "us"
) -> dict[str, float]:
    if len(latencies) < 2:
        return {"p50": float("nan"), "p95": float("nan"), "p99": float("nan"), "thr": 0.0, "success_rate": 0.0}
    lat = [t * UNITS[unit] for t in latencies]
    cuts = quantiles(lat, n=100)
    p50, p95, p99 = cuts[49], cuts[94], cuts[98]
    throughput = (size_bytes * len(latencies)) / sum(latencies) / (2**20)  # MiB/s
    success_rate = (total_runs - validation_errors) / total_runs * 100
    return {"p50": p50, "p95": p95, "p99": p99, "thr": throughput, "success_rate": success_rate}


def print_table(results: dict[str, dict[str, float]], title: str, unit: str = "us"):
    console = Console()
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("Algorithm")
    table.add_column(f"p50 ({unit}, ↓)")
    table.add_column(f"p95 ({unit}, ↓)")
    table.add_column(f"p99 ({unit}, ↓)")
    table.add_column("Throughput (MiB/s, ↑)")
    table.add_column("Success Rate (%)")
    for k, v in results.items():
        success_rate = v.get("success_rate", 100.0)
        success_color = "green" if success_rate == 100.0 else "red"
        table.add_row(
            k,
            f"{v['p50']:.2f}",
            f"{v['p95']:.2f}",
            f"{v['p99']:.2f}",
            f"{v['thr']:.1f}",
            f"[{success_color}]{success_rate:.1f}%[/{success_color}]",
        )
    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Benchmark multibase algorithms")
    parser.add_argument("--runs", type=int, default=100, help="Number of benchmark runs per algorithm")
    parser.add_argument("--size", type=int, default=1024, help="Payload size in bytes")
    parser.add_argument("--unit", choices=["us", "ms", "ns"], default="us", help="Latency unit")
    parser.add_argument("--only", nargs="*", help="Algorithm names to benchmark (default: all)")
    args = parser.parse_args()

    names = args.only or sorted(default_registry.names(), key=str.lower)
    print(f"Benchmarking {args.runs} runs with {args.size} byte payloads over {len(names)} algorithms")

    encode_results = {}
    decode_results = {}
    for name in names:
        res = bench_algorithm(name, args.size, args.runs)
        errors = res["validation_errors"]
        encode_results[name] = summarise(res["encode"], args.size, errors, args.runs, args.unit)
        decode_results[name] = summarise(res["decode"], args.size, errors, args.runs, args.unit)

    print_table(encode_results, "Multibase Encode", args.unit)
    print_table(decode_results, "Multibase Decode", args.unit)


if __name__ == "__main__":
    main()
