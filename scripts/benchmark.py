#!/usr/bin/env python3
"""
tinystore Performance Benchmarks

Measures how far each store operation scales within a fixed time budget and
prints the results as rich tables.

Usage:
    python scripts/benchmark.py                     # Run all benchmarks
    python scripts/benchmark.py --config            # Show current configuration
    python scripts/benchmark.py --time-limit 0.25   # Shorter run

Configuration:
    Adjust the constants at the top of the file, or override them with flags.
"""

import argparse
import time
from typing import Any, Callable, Dict

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table, box

from tinystore import Store

# Configuration constants - adjust these to change benchmark behavior
TIME_LIMIT_SECONDS = 1.0  # Stop scaling once a single run takes this long
STARTING_N = 10  # Starting workload size
SCALE_FACTOR = 1.5  # How much to multiply N by each iteration


def _noop(value):
    pass


class StoreBenchmark:
    """Rich-formatted display for tinystore performance benchmarking."""

    def __init__(self, time_limit: float = TIME_LIMIT_SECONDS):
        self.console = Console()
        self.time_limit = time_limit
        self.results: Dict[str, Dict[str, Any]] = {}

    def run_benchmarks(self):
        start_time = time.time()
        self._display_header()

        self._run("creation", "Store Creation", self._creation)
        self._run("update", "Distinct Updates", self._updates)
        self._run("unchanged", "Unchanged Sets", self._unchanged_sets)
        self._run("fanout", "Notification Fan-out", self._fanout)
        self._run("churn", "Subscribe/Unsubscribe", self._churn)

        self._display_final_results(start_time)

    # Workloads return the number of operations they performed

    def _creation(self, n: int) -> int:
        stores = [Store(i) for i in range(n)]
        return len(stores)

    def _updates(self, n: int) -> int:
        store = Store(0)
        store.subscribe(_noop)
        for i in range(1, n + 1):
            store.set(i)
        assert store.get() == n
        return n

    def _unchanged_sets(self, n: int) -> int:
        store = Store("same")
        store.subscribe(_noop)
        for _ in range(n):
            store.set("same")
        return n

    def _fanout(self, n: int) -> int:
        store = Store(0)
        received = []
        for _ in range(n):
            store.subscribe(received.append)
        received.clear()

        store.set(1)
        assert len(received) == n
        return n

    def _churn(self, n: int) -> int:
        store = Store(0)
        handles = [store.subscribe(_noop) for _ in range(n)]
        for handle in handles:
            handle()
        assert store.subscriber_count == 0
        return n * 2

    def _run(self, name: str, label: str, operation: Callable[[int], int]):
        self.console.print(f"[yellow]Running {label}...[/yellow]")
        result = self._run_adaptive_benchmark(operation)
        self.results[name] = dict(result, label=label)
        self.console.print(
            f"[green]✓[/green] {label}: {result['operations_per_second']:,.0f} ops/sec "
            f"({result['max_n']:,} items)"
        )

    def _run_adaptive_benchmark(self, operation: Callable[[int], int]):
        """Scale the workload until one run reaches the time limit."""
        n = STARTING_N
        while True:
            start_time = time.perf_counter()
            ops_performed = operation(n)
            operation_time = time.perf_counter() - start_time

            result = {
                "max_n": n,
                "operation_time": operation_time,
                "operations_per_second": ops_performed / max(operation_time, 1e-9),
            }
            if operation_time >= self.time_limit:
                return result
            n = int(n * SCALE_FACTOR) + 1

    def _display_header(self):
        header = Panel(
            Align.center("tinystore Performance Benchmark Suite"),
            title="tinystore Benchmarks",
            border_style="blue",
        )
        self.console.print(header)
        self.console.print()

    def _display_final_results(self, start_time: float):
        elapsed = time.time() - start_time

        table = Table(title="Final Benchmark Results", box=box.DOUBLE)
        table.add_column("Benchmark", style="cyan", no_wrap=True)
        table.add_column("Max Workload", style="magenta", justify="right")
        table.add_column("Performance", style="green", justify="right")
        table.add_column("Per Operation", style="yellow", justify="right")

        for result in self.results.values():
            ops_sec = result["operations_per_second"]
            table.add_row(
                result["label"],
                f"{result['max_n']:,}",
                f"{ops_sec / 1000:.1f}K ops/sec",
                f"{1e6 / ops_sec:.2f}μs" if ops_sec else "N/A",
            )

        self.console.print()
        self.console.print(table)
        self.console.print()
        self.console.print(f"[dim]Benchmark completed in {elapsed:.2f} seconds[/dim]")


def print_config(time_limit: float):
    print("tinystore Benchmark Configuration:")
    print(f"  TIME_LIMIT_SECONDS: {time_limit}")
    print(f"  STARTING_N: {STARTING_N}")
    print(f"  SCALE_FACTOR: {SCALE_FACTOR}")


def main():
    parser = argparse.ArgumentParser(description="tinystore Performance Benchmarks")
    parser.add_argument(
        "--config", action="store_true", help="Show current benchmark configuration"
    )
    parser.add_argument(
        "--time-limit",
        type=float,
        default=TIME_LIMIT_SECONDS,
        help="Seconds a single run may take before scaling stops",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the configuration before running",
    )
    args = parser.parse_args()

    if args.config:
        print_config(args.time_limit)
        return

    if not args.quiet:
        print_config(args.time_limit)
        print()

    StoreBenchmark(time_limit=args.time_limit).run_benchmarks()


if __name__ == "__main__":
    main()
