"""Timing comparison of the list types and the search tree."""

from __future__ import annotations

import argparse
import random
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

from .aslist import ASList
from .aulist import AUList
from .bst import BST
from .llslist import LLSList
from .llulist import LLUList

STRUCTURES = (ASList, AUList, BST, LLSList, LLUList)


@dataclass
class Timings:
    """Elapsed seconds of each operation measured for one structure."""

    name: str
    empty: list[float] = field(default_factory=list)
    insert: list[float] = field(default_factory=list)
    search: list[float] = field(default_factory=list)
    delete: list[float] = field(default_factory=list)

    @staticmethod
    def _mean(values: list[float]) -> float:
        return sum(values) / len(values) if values else 0.0

    @property
    def averages(self) -> tuple[float, float, float, float]:
        """Mean empty, insert, search and delete times."""
        return (
            self._mean(self.empty),
            self._mean(self.insert),
            self._mean(self.search),
            self._mean(self.delete),
        )

    def summary(self) -> str:
        return f"{self.name} Avgs " + ", ".join(f"{value:.6f}" for value in self.averages)


def _timed(action: Callable[..., object], *args) -> float:
    start = time.perf_counter()
    action(*args)
    return time.perf_counter() - start


def _fill(structure, count: int, draw: Callable[[], int]) -> None:
    for _ in range(count):
        structure.put_item(draw())


def run_benchmark(
    num_items: int = 100,
    loops: int = 100,
    rng: Optional[random.Random] = None,
    out: Optional[TextIO] = None,
) -> list[Timings]:
    """Time emptying, filling, searching and deleting on every structure."""
    rng = random.Random() if rng is None else rng
    out = sys.stdout if out is None else out

    def say(text: str = "") -> None:
        print(text, file=out)

    def draw() -> int:
        return rng.randint(0, num_items)

    structures = [cls() for cls in STRUCTURES]
    timings = [Timings(type(structure).__name__) for structure in structures]
    pairs = list(zip(structures, timings))

    def report(timing: Timings, elapsed: float) -> float:
        say(f"\t{timing.name}: {elapsed:.6f} s")
        return elapsed

    say("Performance Comparing")
    say("Creating structures...")
    for structure, timing in pairs:
        say(f"\t{timing.name}: {structure}")
    say()

    for _ in range(loops):
        say("Emptying...")
        for structure, timing in pairs:
            timing.empty.append(report(timing, _timed(structure.make_empty)))
        say(f"Inserting {num_items} items...")
        for structure, timing in pairs:
            timing.insert.append(report(timing, _timed(_fill, structure, num_items, draw)))
        say()

    for _ in range(loops):
        value = draw()
        say(f"Searching for {value}")
        for structure, timing in pairs:
            timing.search.append(report(timing, _timed(structure.get_item, value)))

    done = 0
    failures = 0
    while done < loops and failures <= num_items:
        value = draw()
        if all(structure.get_item(value) != -1 for structure in structures):
            say(f"Deleting {value}")
            for structure, timing in pairs:
                timing.delete.append(_timed(structure.delete_item, value))
            failures = 0
            done += 1
        else:
            failures += 1

    say()
    say(f"num_items {num_items}")
    say(f"loops {loops}")
    for timing in timings:
        say(timing.summary())
    say()
    return timings


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compare list and tree operation times.")
    parser.add_argument("--items", type=int, default=100, help="items inserted per round")
    parser.add_argument("--loops", type=int, default=100, help="number of rounds")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    run_benchmark(args.items, args.loops, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())