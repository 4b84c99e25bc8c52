"""Creature entity.

A creature holds its health and fixed behavioral probabilities. All health
mutations clamp to [MIN_HEALTH, MAX_HEALTH]; the World decides when each
operation runs and which rule variant parameters apply.
"""

from __future__ import annotations

from typing import Optional

from evosim.config.creatures import (
    DEFAULT_HEALTH,
    MAX_HEALTH,
    MIN_HEALTH,
    REPRODUCTION_COST,
)
from evosim.protocols import RandomSource


def clamp_health(value: float) -> float:
    return max(MIN_HEALTH, min(MAX_HEALTH, value))


class Creature:
    """A single agent in the population.

    Attributes:
        name: Display name (not unique)
        health: Current health in [0, 100]
        death_probability: Base chance of dying per cycle
        reproduction_probability: Chance of reproducing per cycle
        metabolism: Health lost per cycle to metabolic decay
        alive: False once metabolic decay has driven health to zero
    """

    def __init__(
        self,
        name: str,
        health: float = DEFAULT_HEALTH,
        death_probability: float = 0.05,
        reproduction_probability: float = 0.3,
        metabolism: float = 0.0,
    ) -> None:
        if metabolism < 0:
            raise ValueError(f"metabolism must be >= 0, got {metabolism}")
        self.name = name
        self.health = clamp_health(health)
        self.death_probability = death_probability
        self.reproduction_probability = reproduction_probability
        self.metabolism = metabolism
        self.alive = True

    def feed(self, nutrition: float) -> None:
        """Gain health from food, capped at MAX_HEALTH."""
        self.health = clamp_health(self.health + nutrition)

    def decrease_health(self, amount: float) -> None:
        """Lose health, floored at MIN_HEALTH."""
        self.health = clamp_health(self.health - amount)

    def apply_metabolic_decay(self) -> bool:
        """Burn one cycle of metabolism.

        Returns:
            True if health reached zero, in which case the creature is dead
            regardless of any later death roll.
        """
        self.decrease_health(self.metabolism)
        if self.health <= MIN_HEALTH:
            self.alive = False
        return not self.alive

    def death_chance(self, scale_by_health: bool = True) -> float:
        """Probability of dying on this cycle's roll.

        With ``scale_by_health`` the base probability is multiplied by the
        fraction of health missing, so healthy creatures rarely die.
        """
        if not scale_by_health:
            return self.death_probability
        return self.death_probability * (1 - self.health / MAX_HEALTH)

    def roll_death(self, rng: RandomSource, scale_by_health: bool = True) -> bool:
        if not self.alive:
            return True
        return rng.random() < self.death_chance(scale_by_health)

    def roll_reproduction(
        self,
        rng: RandomSource,
        health_threshold: Optional[float] = None,
        cost: float = REPRODUCTION_COST,
    ) -> bool:
        """Roll for reproduction.

        Args:
            rng: Random source for the roll
            health_threshold: Minimum health required; None disables the gate
            cost: Health deducted from this creature on success

        Returns:
            True if the roll succeeded (the cost has already been paid)
        """
        if health_threshold is not None and self.health < health_threshold:
            return False
        if rng.random() < self.reproduction_probability:
            self.decrease_health(cost)
            return True
        return False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "health": self.health,
            "death_probability": self.death_probability,
            "reproduction_probability": self.reproduction_probability,
            "metabolism": self.metabolism,
        }

    def __repr__(self) -> str:
        return f"Creature(name={self.name!r}, health={self.health:.2f})"
