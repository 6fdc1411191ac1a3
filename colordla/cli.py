"""Command line entry point: thread benchmarks, a serial run and the classic model."""

from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from colordla.classic import ClassicDLA
from colordla.grid import Color, ColorCounts, Grid
from colordla.simulation import generate_dla, generate_threaded

DEFAULT_THREAD_COUNTS = (1, 2, 4, 6, 8, 10, 12, 16, 20, 32, 64)
# Wall-clock seconds of the reference serial run that speedups are measured against.
SERIAL_BASELINE_SECONDS = 121.0


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one benchmark run."""

    threads: int
    seconds: float
    speedup: float
    path: Path
    counts: ColorCounts


def run_benchmarks(
    width: int = 300,
    height: int = 300,
    walkers: Optional[int] = None,
    thread_counts: Sequence[int] = DEFAULT_THREAD_COUNTS,
    out_dir: Union[str, PathLike] = ".",
    seed: Optional[int] = None,
) -> list[BenchmarkResult]:
    """Grow one grid per thread count, export each as img_<threads>.ppm and print a timing table."""
    if walkers is None:
        walkers = width * height
    thread_counts = list(thread_counts)
    for threads in thread_counts:
        if threads < 1:
            raise ValueError(f"thread count must be positive, got {threads}")
    out = Path(out_dir)

    print(f"Benchmarking DLA Simulation with {walkers} walkers on {width}x{height} grid")
    print("%-10s %-15s %-15s" % ("Threads", "Time (sec)", "Speedup"))
    print("------------------------------------")

    results = []
    for threads in thread_counts:
        grid = Grid(width, height)
        grid.seed_center(Color.YELLOW)
        seconds = generate_threaded(grid, walkers, threads, seed)
        path = out / f"img_{threads}.ppm"
        counts = grid.export_ppm(path)
        print(f"Grid exported to {path}")
        speedup = SERIAL_BASELINE_SECONDS / seconds if seconds > 0 else float("inf")
        print("%-10d %-15.4f %-15.4f" % (threads, seconds, speedup))
        results.append(BenchmarkResult(threads, seconds, speedup, path, counts))
    return results


def _run_serial(args: argparse.Namespace) -> None:
    walkers = args.walkers if args.walkers is not None else args.width * args.height
    grid = Grid(args.width, args.height)
    grid.seed_center(Color.YELLOW)
    rng = random.Random(args.seed if args.seed is not None else int(time.time()))
    started = time.perf_counter()
    generate_dla(grid, walkers, rng)
    print("serial time:%.3fs" % (time.perf_counter() - started))
    print("Exporting grid:")
    counts = grid.export_ppm(args.output)
    print(f"Grid exported to {args.output}")
    print(counts.format(), end="")


def _run_classic(args: argparse.Namespace) -> None:
    rng = random.Random(args.seed if args.seed is not None else int(time.time()))
    dla = ClassicDLA(args.width, args.height, rng)
    dla.run(args.particles)
    print(dla.render(), end="")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colordla",
        description="Coloured diffusion-limited aggregation.",
    )
    commands = parser.add_subparsers(dest="command")

    bench = commands.add_parser("benchmark", help="time threaded runs (default)")
    bench.add_argument("--width", type=int, default=300)
    bench.add_argument("--height", type=int, default=300)
    bench.add_argument("--walkers", type=int, default=None)
    bench.add_argument("--threads", type=int, nargs="+", default=list(DEFAULT_THREAD_COUNTS))
    bench.add_argument("--out-dir", default=".")
    bench.add_argument("--seed", type=int, default=None)

    serial = commands.add_parser("serial", help="one serial run exported to a PPM file")
    serial.add_argument("--width", type=int, default=300)
    serial.add_argument("--height", type=int, default=300)
    serial.add_argument("--walkers", type=int, default=None)
    serial.add_argument("--output", default="./output.ppm")
    serial.add_argument("--seed", type=int, default=None)

    classic = commands.add_parser("classic", help="plain single-colour aggregation")
    classic.add_argument("--width", type=int, default=100)
    classic.add_argument("--height", type=int, default=100)
    classic.add_argument("--particles", type=int, default=1000)
    classic.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run the chosen command; benchmarks run when none is given."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.command == "serial":
            _run_serial(args)
        elif args.command == "classic":
            _run_classic(args)
        elif args.command == "benchmark":
            run_benchmarks(
                args.width, args.height, args.walkers, args.threads, args.out_dir, args.seed
            )
        else:
            run_benchmarks()
    except (ValueError, OSError) as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())