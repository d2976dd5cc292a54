## itersort.bench

"""Timing comparison for the duplicate removal strategies

## Overview

`Bench` generates a sequence of points, each a tuple of a position
`(x, y, z)` and a color `(r, g, b)`, then removes duplicates from a copy of
the sequence under each strategy. For most strategies, only the position of
each point is compared. The `_whole` strategies compare the complete point.

This module is run as `python -m itersort`.
"""

import argparse
from dataclasses import dataclass
from operator import itemgetter
from random import Random
import sys
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from typing_extensions import Self, TypeAlias

from .cmdline import ArgparseAction, Cmdline
from .common.iterlib import unique_adjacent
from .common.loglib import LogLevel
from .common.naming import export
from .relations import key_relations, natural_equal, natural_less
from .uniquify import (
    heap_order, stable_unique_handles, stable_uniquify, unstable_unique_handles
)


Position: TypeAlias = Tuple[float, float, float]
Color: TypeAlias = Tuple[int, int, int]
Point3D: TypeAlias = Tuple[Position, Color]

Strategy: TypeAlias = Callable[[List[Point3D]], int]


position = itemgetter(0)
position_less, position_equal = key_relations(position)


def generate_points(n: int, duplicates: float = 0.0, seed: Optional[int] = None) -> List[Point3D]:
    """return a list of `n` points with increasing x coordinates

    If `duplicates` is non-zero, that fraction of the points is
    replaced with copies of points at earlier positions, chosen with
    a `random.Random` initialized from `seed`
    """
    points = []
    x = 0.0
    for _ in range(n):
        x += 0.00000001
        points.append(((x, 0.0, 0.0), (0, 0, 0)))
    ndup = int(n * duplicates)
    if ndup:
        rnd = Random(seed)
        for idx in sorted(rnd.sample(range(1, n), min(ndup, n - 1))):
            points[idx] = points[rnd.randrange(0, idx)]
    return points


def _direct_sort(points: List[Point3D], key=None, equal=natural_equal) -> int:
    ## sort the elements themselves, then drop adjacent equal elements
    points.sort(key=key)
    points[:] = unique_adjacent(points, equal)
    return len(points)


def _direct_heap_sort(points: List[Point3D], compare=natural_less, equal=natural_equal) -> int:
    ## as _direct_sort, with the heap sort of unstable_unique_handles()
    points[:] = [points[h] for h in heap_order(points, 0, len(points), compare)]
    points[:] = unique_adjacent(points, equal)
    return len(points)


# fmt: off
STRATEGIES: Dict[str, Strategy] = {
    "stable_unique_handles":
        lambda v: len(stable_unique_handles(v, compare=position_less, equal=position_equal)),
    "stable_unique_handles_whole":
        lambda v: len(stable_unique_handles(v)),
    "unstable_unique_handles":
        lambda v: len(unstable_unique_handles(v, compare=position_less, equal=position_equal)),
    "direct_stable_sort":
        lambda v: _direct_sort(v, key=position, equal=position_equal),
    "direct_stable_sort_whole":
        lambda v: _direct_sort(v),
    "direct_unstable_sort":
        lambda v: _direct_heap_sort(v, compare=position_less, equal=position_equal),
    "direct_unstable_sort_whole":
        lambda v: _direct_heap_sort(v),
    "stable_uniquify":
        lambda v: len(stable_uniquify(v, compare=position_less, equal=position_equal)),
}
# fmt: on

REFERENCE_STRATEGY = "stable_unique_handles"

POSITION_STRATEGIES = ("stable_unique_handles", "unstable_unique_handles",
                       "direct_stable_sort", "direct_unstable_sort", "stable_uniquify")


@dataclass(frozen=True)
class BenchResult:
    strategy: str
    size: int
    uniques: int
    duration: float


def default_sizes(max_size: int) -> List[int]:
    """return the sizes `1000 * sqrt(10) ** k` not greater than `max_size`"""
    sizes = []
    k = 0
    size = 1000.0
    while size <= max_size:
        sizes.append(int(round(size)))
        k += 1
        size = 1000.0 * 10.0 ** (k / 2)
    return sizes


class Bench(Cmdline):

    @property
    def program_name(self) -> str:
        return "itersort"

    @classmethod
    def init_argparser(cls, instance: Self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog=instance.program_name,
            exit_on_error=False,
            description="Compare the timing of duplicate removal strategies",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        )

    def configure_argparser(self, parser: argparse.ArgumentParser):
        # autopep8: off
        # fmt: off
        parser.add_argument("-n", "--size", dest="sizes", action=ArgparseAction.APPEND,
                            type=int, default=None,
                            help="number of points. Multiple values supported")
        parser.add_argument("--max-size", action=ArgparseAction.STORE, type=int,
                            default=100000,
                            help="largest number of points, when no --size is provided")
        parser.add_argument("-d", "--duplicates", action=ArgparseAction.STORE, type=float,
                            default=0.0,
                            help="fraction of points replaced with duplicates, in [0, 1)")
        parser.add_argument("--seed", action=ArgparseAction.STORE, type=int, default=None,
                            help="seed for placement of duplicates")
        parser.add_argument("-v", "--verbose", action=ArgparseAction.COUNT, default=0,
                            help="increase the verbosity of logging output. "
                            "Multiple values supported")
        parser.add_argument("-q", "--quiet", action=ArgparseAction.STORE_TRUE,
                            help="display only errors")
        # autopep8: on
        # fmt: on

    @property
    def log_level(self) -> int:
        if hasattr(self, "_log_level"):
            return self._log_level
        else:
            ns = self.option_namespace
            verbose = getattr(ns, "verbose", 0)
            if getattr(ns, "quiet", False):
                level = LogLevel.CRITICAL
            elif verbose >= 3:
                level = LogLevel.TRACE
            elif verbose == 2:
                level = LogLevel.DEBUG
            elif verbose == 1:
                level = LogLevel.INFO
            else:
                level = LogLevel.WARNING
            self._log_level = level
            return level

    @property
    def sizes(self) -> Sequence[int]:
        ns = self.option_namespace
        return ns.sizes if ns.sizes else default_sizes(ns.max_size)

    def run_strategy(self, name: str, points: Sequence[Point3D]) -> BenchResult:
        strategy = STRATEGIES[name]
        v = list(points)
        self.logger.info("%s...", name)
        t0 = time.perf_counter()
        uniques = strategy(v)
        t1 = time.perf_counter()
        self.logger.info("%s done, got %d uniques", name, uniques)
        return BenchResult(name, len(points), uniques, t1 - t0)

    def run_size(self, n: int) -> List[BenchResult]:
        ns = self.option_namespace
        self.logger.info("Generating %d points ...", n)
        points = generate_points(n, ns.duplicates, ns.seed)
        return [self.run_strategy(name, points) for name in STRATEGIES]

    def report(self, results: Sequence[BenchResult], out=None):
        out = sys.stdout if out is None else out
        ref = None
        for rslt in results:
            if rslt.strategy == REFERENCE_STRATEGY:
                ref = rslt.duration
        print("Timing (n = %d):" % results[0].size, file=out)
        for rslt in results:
            line = "  %-40s %7.2f s" % (rslt.strategy + ":", rslt.duration)
            if ref and rslt.strategy != REFERENCE_STRATEGY:
                line = line + " (%.2f x)" % (rslt.duration / ref)
            print(line, file=out)

    def check(self, results: Sequence[BenchResult]) -> bool:
        """return True if all position-only strategies found the same number of uniques"""
        counts = set(r.uniques for r in results if r.strategy in POSITION_STRATEGIES)
        if len(counts) > 1:
            self.logger.error("Strategies disagree on the number of uniques for n = %d: %r",
                              results[0].size, sorted(counts))
            return False
        return True

    def main(self, args=sys.argv[1:], out=None) -> int:
        out = sys.stdout if out is None else out
        try:
            restargs, _ = self.consume_args(args)
        except argparse.ArgumentError as exc:
            print("%s: %s" % (self.program_name, exc), file=sys.stderr)
            return 2
        if restargs:
            self.logger.error("Unrecognized arguments: %s", " ".join(restargs))
            return 2
        ns = self.option_namespace
        if not (0.0 <= ns.duplicates < 1.0):
            self.logger.error("Duplicates fraction must be in [0, 1): %s", ns.duplicates)
            return 2
        sizes = self.sizes
        if not sizes or any(n < 1 for n in sizes):
            self.logger.error("Sizes must be positive: %r", sizes)
            return 2
        rc = 0
        for n in sizes:
            results = self.run_size(n)
            self.report(results, out)
            print(file=out)
            if not self.check(results):
                rc = 1
        return rc


def main() -> int:
    return Bench().main(sys.argv[1:])


# autopep8: off
# fmt: off
__all__ = ["Point3D", "STRATEGIES"]
export(__name__, BenchResult, Bench, generate_points, default_sizes, main)
