"""Locality-sensitive hashing of embedded spectra by random projections."""

from __future__ import annotations

import math
import random
from collections.abc import Mapping
from typing import Any

_MEAN = 0.0
_STD = 1.0


class LSH:
    """Signs of random Gaussian projections, packed into an integer key."""

    def __init__(self, weight_size: int, hash_func_num: int, seed: int | None = None) -> None:
        self.weight_size = weight_size
        self.hash_func_num = hash_func_num
        self._rng = random.Random(seed)
        self._weights: list[list[float]] = []
        self.init()

    @property
    def weights(self) -> tuple[tuple[float, ...], ...]:
        """The projection vectors, one per hash function."""
        return tuple(tuple(weight) for weight in self._weights)

    def init(self) -> None:
        """Draw fresh projection vectors for the current sizes."""
        self._weights = [
            [self._rng.gauss(_MEAN, _STD) for _ in range(self.weight_size)]
            for _ in range(self.hash_func_num)
        ]

    @staticmethod
    def _intensity(entry: Any) -> float:
        return float(getattr(entry, "intensity", entry))

    def _projection(self, embedded: Mapping[int, Any], weight: list[float]) -> int:
        total = sum(
            weight[i] * math.sqrt(self._intensity(entry)) for i, entry in embedded.items()
        )
        return 1 if total >= 0 else 0

    def key(self, embedded: Mapping[int, Any]) -> int:
        """Hash key of an embedding mapping bin index to a peak or an intensity."""
        key = 0
        for weight in self._weights:
            key = (key << 1) | self._projection(embedded, weight)
        return key