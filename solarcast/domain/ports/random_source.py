"""Randomness port so stochastic code paths can be driven deterministically."""

from __future__ import annotations

from typing import Protocol


class RandomSource(Protocol):
    """Subset of ``random.Random`` used by the forecasting services."""

    def uniform(self, a: float, b: float) -> float:
        ...
