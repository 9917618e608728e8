#!/usr/bin/env python3
"""Hash Table Demo Driver

Runs a random insert/delete workload against a table and samples slot
diagnostics, printing them and optionally writing them to CSV.

Usage:
    python demo/table_demo_driver.py --capacity 1024 --operations 5000
    python demo/table_demo_driver.py --probe-mode full --expand-when-full --rehash-on-expand
"""

from __future__ import annotations

import argparse
import csv
import logging
import random
from pathlib import Path

from open_table import ProbeMode, collect_stats, create_table


def run_demo(args: argparse.Namespace) -> list[dict[str, object]]:
    """Run the workload and return one stats row per sample."""
    rng = random.Random(args.seed)
    table = create_table(
        args.capacity,
        probe_mode=ProbeMode(args.probe_mode),
        expand_when_full=args.expand_when_full,
        rehash_on_expand=args.rehash_on_expand,
        round_up_capacity=True,
    )
    keys = [f"key{i:06d}" for i in range(args.key_space_size)]
    value = b"x" * args.value_size_bytes

    print(f"Starting demo: {table!r}")
    print(f"Workload: {args.operations} ops, delete ratio {args.delete_ratio}, {len(keys)} keys")

    rows: list[dict[str, object]] = []
    failed_inserts = 0
    for op in range(1, args.operations + 1):
        key = rng.choice(keys)
        if rng.random() < args.delete_ratio:
            table.delete(key)
        elif not table.insert(key, value):
            failed_inserts += 1

        if op % args.sample_every == 0 or op == args.operations:
            row = {"op": op, "failed_inserts": failed_inserts, **collect_stats(table).as_row()}
            rows.append(row)
            print(
                f"[{op:>8}] len={row['length']}/{row['capacity']} "
                f"load={row['load_factor']:.2f} displaced={row['displaced']} "
                f"unreachable={row['unreachable']} duplicates={row['duplicates']} "
                f"cluster={row['longest_cluster']} failed={failed_inserts}"
            )

    lost = sum(1 for key in keys if table.search(key) is None)
    print(f"Done. Keys not found by search: {lost}/{len(keys)}")
    table.destroy()
    return rows


def write_csv(rows: list[dict[str, object]], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)
    print(f"Wrote {len(rows)} samples to {path}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Hash table workload demo")
    parser.add_argument("--capacity", type=int, default=256, help="Initial slot count (rounded up to a power of two)")
    parser.add_argument("--operations", type=int, default=2000, help="Number of operations to run")
    parser.add_argument("--key-space-size", type=int, default=300, help="Number of distinct keys")
    parser.add_argument("--value-size-bytes", type=int, default=16, help="Size of each value")
    parser.add_argument("--delete-ratio", type=float, default=0.3, help="Fraction of operations that delete")
    parser.add_argument("--probe-mode", choices=[m.value for m in ProbeMode], default=ProbeMode.HOME_ONLY.value)
    parser.add_argument("--expand-when-full", action="store_true", help="Expand instead of failing on a full table")
    parser.add_argument("--rehash-on-expand", action="store_true", help="Rehash entries when expanding")
    parser.add_argument("--sample-every", type=int, default=250, help="Operations between samples")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--csv", type=Path, default=None, help="Write samples to this CSV file")
    parser.add_argument("--log-level", default="ERROR", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.ERROR),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    rows = run_demo(args)
    if args.csv is not None and rows:
        write_csv(rows, args.csv)


if __name__ == "__main__":
    main()
