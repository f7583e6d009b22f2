"""Tolerance-based lookup of values in sorted arrays or mass buckets."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from itertools import chain, takewhile
from typing import Generic, TypeVar

T = TypeVar("T")

_INT_MAX = 2147483647
_PPM = 1_000_000.0


class ToleranceBy(Enum):
    """How a mass tolerance is expressed."""

    PPM = "ppm"
    DALTON = "dalton"


@dataclass
class Point(Generic[T]):
    """A value to search on, carrying an arbitrary payload."""

    value: float
    content: T

    def __lt__(self, other: Point[T]) -> bool:
        return self.value < other.value


def _within_tolerance(
    tolerance_by: ToleranceBy,
    tolerance: float,
    expect: float,
    observe: float,
    base: float,
) -> bool:
    delta = abs(expect - observe)
    if tolerance_by is ToleranceBy.PPM:
        return delta / base * _PPM < tolerance
    return delta < tolerance


class Searcher(Generic[T]):
    """Interface of the searchers; the plain searcher holds nothing and finds nothing."""

    def init(self, points: Iterable[Point[T]], presorted: bool = False) -> None:
        """Load the points to search."""

    def search(self, target: float, base: float | None = None) -> list[T]:
        """Contents of every point within tolerance of ``target``."""
        return []

    def match(self, target: float, base: float | None = None) -> bool:
        """Whether any point lies within tolerance of ``target``."""
        return False


class BinarySearch(Searcher[T]):
    """Binary search over points sorted by value."""

    def __init__(self, tolerance_by: ToleranceBy, tolerance: float) -> None:
        self.tolerance_by = tolerance_by
        self.tolerance = tolerance
        self._points: list[Point[T]] = []

    def is_match(self, expect: float, observe: float, base: float) -> bool:
        """Whether ``observe`` lies within tolerance of ``expect``.

        In PPM mode the deviation is taken relative to ``base``.
        """
        return _within_tolerance(
            self.tolerance_by, self.tolerance, expect, observe, base
        )

    def init(self, points: Iterable[Point[T]], presorted: bool = False) -> None:
        """Load the points, sorting them by value unless ``presorted``."""
        points = list(points)
        if not presorted:
            points.sort(key=lambda point: point.value)
        self._points = points

    def _find(self, target: float, base: float) -> int | None:
        start, end = 0, len(self._points) - 1
        while start <= end:
            mid = (end - start) // 2 + start
            value = self._points[mid].value
            if self.is_match(target, value, base):
                return mid
            if value < target:
                start = mid + 1
            else:
                end = mid - 1
        return None

    def search(self, target: float, base: float | None = None) -> list[T]:
        """Contents of matching points, from the first hit downward, then upward."""
        if base is None:
            base = target
        mid = self._find(target, base)
        if mid is None:
            return []
        points = self._points

        def within(point: Point[T]) -> bool:
            return self.is_match(target, point.value, base)

        downward: Iterator[Point[T]] = (points[i] for i in range(mid, -1, -1))
        upward: Iterator[Point[T]] = (points[i] for i in range(mid + 1, len(points)))
        return [
            point.content
            for point in chain(takewhile(within, downward), takewhile(within, upward))
        ]

    def match(self, target: float, base: float | None = None) -> bool:
        """Whether any point lies within tolerance of ``target``."""
        return self._find(target, target if base is None else base) is not None


class BucketSearch(Searcher[T]):
    """Search through buckets one tolerance wide (linear or logarithmic for PPM)."""

    def __init__(self, tolerance_by: ToleranceBy, tolerance: float) -> None:
        if tolerance <= 0:
            raise ValueError("tolerance must be positive")
        self.tolerance_by = tolerance_by
        self.tolerance = tolerance
        self._buckets: list[list[Point[T]]] = []
        self._lower = float(_INT_MAX)
        self._upper = 0.0

    def is_match(self, expect: float, observe: float, base: float) -> bool:
        """Whether ``observe`` lies within tolerance of ``expect``.

        In PPM mode the deviation is taken relative to ``base``.
        """
        return _within_tolerance(
            self.tolerance_by, self.tolerance, expect, observe, base
        )

    def _log_ratio(self) -> float:
        return math.log(1.0 / (1.0 - self.tolerance / _PPM))

    def index(self, expect: float) -> int:
        """Bucket index that ``expect`` falls into; may be out of range."""
        if self.tolerance_by is ToleranceBy.DALTON:
            return math.floor((expect - self._lower) / self.tolerance)
        if expect <= 0 or self._lower <= 0:
            return -1
        return math.floor(math.log(expect / self._lower) / self._log_ratio())

    def init(self, points: Iterable[Point[T]], presorted: bool = False) -> None:
        """Distribute the points into buckets spanning their value range."""
        points = list(points)
        values = [point.value for point in points]
        self._lower = min([float(_INT_MAX), *values]) - 1
        self._upper = max([0.0, *values])

        if self.tolerance_by is ToleranceBy.DALTON:
            size = math.ceil((self._upper - self._lower + 1.0) / self.tolerance)
        elif not points:
            size = 0
        elif self._lower <= 0:
            raise ValueError("PPM buckets need every value above 1")
        else:
            size = math.ceil(math.log(self._upper / self._lower) / self._log_ratio())
        size = max(size, 0)
        if points:
            size = max(size, self.index(self._upper) + 1)

        self._buckets = [[] for _ in range(size)]
        for point in points:
            if self._lower <= point.value <= self._upper:
                self._buckets[self.index(point.value)].append(point)

    def add(self, point: Point[T]) -> None:
        """Add a point; points outside the bucket range are dropped."""
        i = self.index(point.value)
        if 0 <= i < len(self._buckets):
            self._buckets[i].append(point)

    def _neighbours(self, i: int, target: float, base: float) -> Iterator[Point[T]]:
        if i + 1 < len(self._buckets):
            yield from (
                p for p in self._buckets[i + 1] if self.is_match(target, p.value, base)
            )
        if i > 0:
            yield from (
                p
                for p in reversed(self._buckets[i - 1])
                if self.is_match(target, p.value, base)
            )

    def search(self, target: float, base: float | None = None) -> list[T]:
        """Everything in the target's bucket plus matching points of its neighbours."""
        if base is None:
            base = target
        i = self.index(target)
        if not 0 <= i < len(self._buckets):
            return []
        return [
            point.content
            for point in chain(self._buckets[i], self._neighbours(i, target, base))
        ]

    def match(self, target: float, base: float | None = None) -> bool:
        """Whether the target's bucket is occupied or a neighbour holds a match."""
        if base is None:
            base = target
        i = self.index(target)
        if not 0 <= i < len(self._buckets):
            return False
        if self._buckets[i]:
            return True
        return any(True for _ in self._neighbours(i, target, base))