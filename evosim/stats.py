"""Per-cycle statistics records.

Design Principles:
- Records are frozen; the World builds one per cycle and never mutates it
- Empty populations are handled explicitly (min/max are None, mean is 0.0)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from statistics import fmean
from typing import Any, Dict, Iterable, Optional


@dataclass(frozen=True)
class HealthSummary:
    """Health distribution across the live population.

    Attributes:
        average: Mean health (0.0 for an empty population)
        minimum: Lowest health, None when empty
        maximum: Highest health, None when empty
    """

    average: float = 0.0
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "HealthSummary":
        data = list(values)
        if not data:
            return cls()
        return cls(average=fmean(data), minimum=min(data), maximum=max(data))


@dataclass(frozen=True)
class CycleStats:
    """Outcome of one World.simulate_cycle call.

    Attributes:
        cycle: 1-based cycle index
        population: Live creatures after newborns and spawns were added
        deaths: Creatures removed this cycle
        reproductions: Newborns added through reproduction
        spawns: Creatures added by spontaneous spawning
        food_consumed: Items eaten this cycle
        food_spawned: Whether a new food item appeared this cycle
        food_remaining: Items left in the pool
        health: Health distribution of the live population
        seasonal_food_chance: New food spawn chance if a season changed, else None
    """

    cycle: int
    population: int
    deaths: int
    reproductions: int
    spawns: int
    food_consumed: int
    food_spawned: bool
    food_remaining: int
    health: HealthSummary
    seasonal_food_chance: Optional[float] = None

    @property
    def extinct(self) -> bool:
        return self.population == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
