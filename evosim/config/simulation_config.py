"""Lightweight simulation configuration helpers."""

from __future__ import annotations

import random
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

from evosim.config.world import (
    DEFAULT_CYCLES,
    DEFAULT_FOOD_SPAWN_CHANCE,
    DEFAULT_NAMES_PATH,
    DEFAULT_ROSTER,
    DEFAULT_SPAWN_CHANCE,
    DEFAULT_VARIANT,
)
from evosim.exceptions import ConfigurationError
from evosim.rulesets import RuleSet, get_ruleset


@dataclass
class SimulationConfig:
    """Configuration for a single simulation run.

    Attributes:
        spawn_chance: Probability of a spontaneous creature spawn per cycle
        food_spawn_chance: Initial probability of a food spawn per cycle
        cycles: Maximum number of cycles to run
        roster: Names of the starting creatures
        names_path: Name list file for newborns
        variant: Rule variant name ("rich" or "simple")
        seed: Optional seed for a reproducible run
        max_population: Overrides the variant's population cap when set
    """

    spawn_chance: float = DEFAULT_SPAWN_CHANCE
    food_spawn_chance: float = DEFAULT_FOOD_SPAWN_CHANCE
    cycles: int = DEFAULT_CYCLES
    roster: Tuple[str, ...] = field(default_factory=lambda: DEFAULT_ROSTER)
    names_path: str = DEFAULT_NAMES_PATH
    variant: str = DEFAULT_VARIANT
    seed: Optional[int] = None
    max_population: Optional[int] = None

    def validate(self) -> None:
        """Raise ConfigurationError if any setting is out of range."""
        for label, value in (
            ("spawn_chance", self.spawn_chance),
            ("food_spawn_chance", self.food_spawn_chance),
        ):
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{label} must be within [0, 1], got {value}")
        if self.cycles < 0:
            raise ConfigurationError(f"cycles must be >= 0, got {self.cycles}")
        if not self.roster:
            raise ConfigurationError("roster must name at least one creature")
        rules = self.rules()
        cap = self.max_population if self.max_population is not None else rules.max_population
        if cap is not None and len(self.roster) > cap:
            raise ConfigurationError(
                f"Population cap ({cap}) is smaller than the roster ({len(self.roster)})"
            )

    def rules(self) -> RuleSet:
        return get_ruleset(self.variant)

    def make_rng(self) -> random.Random:
        """Random source for the run; seeded when ``seed`` is set."""
        return random.Random(self.seed)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["roster"] = list(self.roster)
        return data
