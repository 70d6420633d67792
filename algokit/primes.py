"""Prime numbers: a sieve, a primality test and a timed grid scan."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass, field


def primes_up_to(n: int) -> list[int]:
    """Return every prime less than or equal to ``n``, ascending."""
    if n < 2:
        return []
    is_candidate = bytearray([1]) * (n + 1)
    is_candidate[0] = is_candidate[1] = 0
    for p in range(2, math.isqrt(n) + 1):
        if is_candidate[p]:
            is_candidate[p * p :: p] = bytes(len(range(p * p, n + 1, p)))
    return [value for value, flag in enumerate(is_candidate) if flag]


def is_prime(n: int) -> bool:
    """Return True when ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def populate_grid(rows: int, cols: int, rng: random.Random) -> list[list[int]]:
    """Return a ``rows`` by ``cols`` grid of random integers from 1 to 100."""
    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must not be negative")
    return [[rng.randint(1, 100) for _ in range(cols)] for _ in range(rows)]


def primes_in_grid(grid: list[list[int]]) -> list[int]:
    """Return the prime entries of ``grid`` in row-major order."""
    return [value for row in grid for value in row if is_prime(value)]


@dataclass
class GridReport:
    """Outcome of filling a square grid and scanning it for primes."""

    size: int
    grid: list[list[int]] = field(repr=False)
    primes: list[int]
    populate_us: float
    search_us: float

    def __str__(self) -> str:
        lines = [f"{value} is a prime number" for value in self.primes]
        lines.append(
            f"The time taken for populating a {self.size}x{self.size} array is : "
            f"{self.populate_us:10.2f}us"
        )
        lines.append(
            "The time taken to search for prime numbers in a "
            f"{self.size}x{self.size} array is : {self.search_us:10.2f}us"
        )
        return "\n".join(lines)


def benchmark_grid(size: int = 100, seed: int | None = None) -> GridReport:
    """Fill a ``size`` square grid at random and time the fill and prime scan."""
    rng = random.Random(seed)

    start = time.perf_counter()
    grid = populate_grid(size, size, rng)
    populated = time.perf_counter()

    search_start = time.perf_counter()
    found = primes_in_grid(grid)
    searched = time.perf_counter()

    return GridReport(
        size=size,
        grid=grid,
        primes=found,
        populate_us=(populated - start) * 1e6,
        search_us=(searched - search_start) * 1e6,
    )