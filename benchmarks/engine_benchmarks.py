"""Engine throughput benchmarks: cached facade, uncached pipeline, and tracing."""

from __future__ import annotations

import argparse
import json
import math
import time
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path

from math_parser import evaluate, evaluate_postfix, infix_to_postfix


WORKLOADS: dict[str, str] = {
    "short": "1+2*3",
    "nested": "((8*21)+89/14)^2",
    "unary": "50 * -45 - -3 ^ -2",
    "functions": "((2048/4)-12)*log!100,10 + sin!1 * cos!0",
}


@dataclass(frozen=True)
class TimingRow:
    workload: str
    size: int
    engine: str
    mean_ms: float
    p50_ms: float
    p95_ms: float
    min_ms: float
    max_ms: float
    repeats: int
    samples: int


def _percentile(values: list[float], q: float) -> float:
    ordered = sorted(values)
    if len(ordered) == 1:
        return ordered[0]
    pos = (len(ordered) - 1) * q
    lo = int(math.floor(pos))
    hi = int(math.ceil(pos))
    if lo == hi:
        return ordered[lo]
    alpha = pos - lo
    return ordered[lo] * (1.0 - alpha) + ordered[hi] * alpha


def _time_samples(fn, *, repeats: int, samples: int, warmup: int = 1) -> tuple[float, float, float, float, float]:
    for _ in range(warmup):
        fn()
    rows: list[float] = []
    for _ in range(samples):
        start = time.perf_counter()
        for _ in range(repeats):
            fn()
        end = time.perf_counter()
        rows.append((end - start) * 1e3 / repeats)
    return (
        sum(rows) / len(rows),
        _percentile(rows, 0.50),
        _percentile(rows, 0.95),
        min(rows),
        max(rows),
    )


def _chain(expr: str, size: int) -> str:
    """Join ``size`` copies of ``expr`` with ``+`` to scale the input length."""
    return "+".join(f"({expr})" for _ in range(size))


def _bench_workload(name: str, expr: str, size: int, *, repeats: int, samples: int) -> list[TimingRow]:
    source = _chain(expr, size)
    engines = {
        "evaluate": lambda: evaluate(source),
        "evaluate_trace": lambda: evaluate(source, trace=True),
        "uncached": lambda: evaluate_postfix(infix_to_postfix(source)),
    }
    rows: list[TimingRow] = []
    for engine, fn in engines.items():
        stats = _time_samples(fn, repeats=repeats, samples=samples)
        rows.append(
            TimingRow(
                workload=name,
                size=size,
                engine=engine,
                mean_ms=stats[0],
                p50_ms=stats[1],
                p95_ms=stats[2],
                min_ms=stats[3],
                max_ms=stats[4],
                repeats=repeats,
                samples=samples,
            )
        )
    return rows


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--sizes", default="1,16,128", help="comma-separated chain lengths")
    parser.add_argument("--repeats", type=int, default=200, help="calls per timing sample")
    parser.add_argument("--samples", type=int, default=5, help="timing samples per workload")
    parser.add_argument("--json-out", default="", help="optional output path")
    args = parser.parse_args()

    sizes = [int(x.strip()) for x in args.sizes.split(",") if x.strip()]
    rows: list[TimingRow] = []

    print("Engine throughput benchmarks")
    print(f"sizes={sizes}, repeats={args.repeats}, samples={args.samples}")
    print()

    for size in sizes:
        repeats = max(1, args.repeats // size)
        for name, expr in WORKLOADS.items():
            rows.extend(_bench_workload(name, expr, size, repeats=repeats, samples=args.samples))

    print("workload    size  engine           mean(ms)   p95(ms)")
    print("---------  -----  --------------  ---------  --------")
    for row in rows:
        print(f"{row.workload:9} {row.size:6d}  {row.engine:14}  {row.mean_ms:9.4f}  {row.p95_ms:8.4f}")
    print()

    by_key: dict[tuple[str, int], dict[str, TimingRow]] = {}
    for row in rows:
        by_key.setdefault((row.workload, row.size), {})[row.engine] = row
    print("uncached / evaluate speedup from the postfix cache")
    for (workload, size), table in by_key.items():
        cached = table.get("evaluate")
        uncached = table.get("uncached")
        if cached is None or uncached is None or cached.mean_ms == 0:
            continue
        print(f"{workload:9} n={size:4d}: {uncached.mean_ms / cached.mean_ms:8.3f}x")

    if args.json_out:
        outpath = Path(args.json_out)
        outpath.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "timestamp_utc": datetime.now(UTC).strftime("%Y%m%dT%H%M%SZ"),
            "sizes": sizes,
            "samples": args.samples,
            "rows": [asdict(row) for row in rows],
        }
        outpath.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote JSON: {outpath}")


if __name__ == "__main__":
    main()
