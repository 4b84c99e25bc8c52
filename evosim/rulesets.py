"""Rule variants for the population simulation.

A RuleSet bundles every constant that distinguishes one variant from
another, so the World and Creature code is shared and only the numbers and
switches change:

- ``rich``: health-scaled death, metabolism, reproduction health gate,
  labelled food with random nutrition, seasons, population cap.
- ``simple``: flat probabilities and nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from evosim.config.creatures import (
    DEFAULT_HEALTH,
    REPRODUCTION_COST,
    RICH_DEATH_PROBABILITY,
    RICH_METABOLISM,
    RICH_REPRODUCTION_HEALTH_THRESHOLD,
    RICH_REPRODUCTION_PROBABILITY,
    SIMPLE_DEATH_PROBABILITY,
    SIMPLE_METABOLISM,
    SIMPLE_REPRODUCTION_PROBABILITY,
)
from evosim.config.food import (
    RICH_NUTRITION_MIN,
    RICH_NUTRITION_RANGE,
    RICH_STARVATION_PENALTY,
    SIMPLE_NUTRITION,
    SIMPLE_STARVATION_PENALTY,
)
from evosim.config.world import RICH_MAX_POPULATION, SEASON_LENGTH, SEASONAL_FOOD_FACTOR
from evosim.exceptions import ConfigurationError


@dataclass(frozen=True)
class RuleSet:
    """Constants and switches for one simulation variant.

    Frozen to ensure immutability after creation.
    """

    name: str

    # Creature defaults
    initial_health: float = DEFAULT_HEALTH
    death_probability: float = RICH_DEATH_PROBABILITY
    reproduction_probability: float = RICH_REPRODUCTION_PROBABILITY
    metabolism: float = RICH_METABOLISM

    health_scaled_death: bool = True
    """Scale the death roll by missing health instead of using a flat chance."""

    reproduction_health_threshold: Optional[float] = RICH_REPRODUCTION_HEALTH_THRESHOLD
    """Minimum health to attempt reproduction; None disables the gate."""

    reproduction_cost: float = REPRODUCTION_COST

    # Food
    nutrition_range: Tuple[float, float] = (
        RICH_NUTRITION_MIN,
        RICH_NUTRITION_MIN + RICH_NUTRITION_RANGE,
    )
    labelled_food: bool = True
    starvation_penalty: float = RICH_STARVATION_PENALTY

    # World
    max_population: Optional[int] = RICH_MAX_POPULATION
    season_length: Optional[int] = SEASON_LENGTH
    seasonal_food_factor: float = SEASONAL_FOOD_FACTOR

    def is_season_change(self, cycle_index: int) -> bool:
        if not self.season_length:
            return False
        return cycle_index % self.season_length == 0


RICH_RULES = RuleSet(name="rich")

SIMPLE_RULES = RuleSet(
    name="simple",
    death_probability=SIMPLE_DEATH_PROBABILITY,
    reproduction_probability=SIMPLE_REPRODUCTION_PROBABILITY,
    metabolism=SIMPLE_METABOLISM,
    health_scaled_death=False,
    reproduction_health_threshold=None,
    nutrition_range=(SIMPLE_NUTRITION, SIMPLE_NUTRITION),
    labelled_food=False,
    starvation_penalty=SIMPLE_STARVATION_PENALTY,
    max_population=None,
    season_length=None,
)

RULESETS: Dict[str, RuleSet] = {
    RICH_RULES.name: RICH_RULES,
    SIMPLE_RULES.name: SIMPLE_RULES,
}


def get_ruleset(name: str) -> RuleSet:
    """Look up a rule variant by name.

    Raises:
        ConfigurationError: If no variant has that name.
    """
    try:
        return RULESETS[name]
    except KeyError:
        available = ", ".join(sorted(RULESETS))
        raise ConfigurationError(
            f"Unknown rule variant '{name}' (available: {available})"
        ) from None
