"""World: owner of the population and the food pool.

One call to ``simulate_cycle`` advances the simulation by a single step:

1. Seasonal adjustment of the food spawn chance (variants with seasons)
2. Food spawn roll
3. Shuffle of the feeding order
4. Per-creature pass: eat or starve, death check, reproduction check
5. Newborn merge (newborns never act in their birth cycle)
6. Spontaneous spawn roll
7. Statistics

Deaths during the pass build a fresh survivor list instead of removing from
the list being iterated, and offspring wait in a separate buffer until the
pass is over.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from evosim.entities.creature import Creature
from evosim.entities.food import FoodItem, FoodPool
from evosim.exceptions import ConfigurationError
from evosim.names import NameProvider
from evosim.protocols import RandomSource
from evosim.rulesets import RICH_RULES, RuleSet
from evosim.stats import CycleStats, HealthSummary

logger = logging.getLogger(__name__)


class World:
    """Creature population, food pool and the per-cycle rules.

    Attributes:
        spawn_chance: Probability of a spontaneous creature spawn per cycle
        food_spawn_chance: Probability of a food spawn per cycle; seasons lower it
        rules: Active rule variant
        rng: Random source for every roll in the world
        names: Name provider for newborns and spawned creatures
        max_population: Carrying capacity, None for unbounded
    """

    def __init__(
        self,
        spawn_chance: float,
        food_spawn_chance: float,
        rules: RuleSet = RICH_RULES,
        rng: Optional[RandomSource] = None,
        names: Optional[NameProvider] = None,
        max_population: Optional[int] = None,
    ) -> None:
        for label, value in (("spawn_chance", spawn_chance), ("food_spawn_chance", food_spawn_chance)):
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{label} must be within [0, 1], got {value}")

        self.spawn_chance = spawn_chance
        self.food_spawn_chance = food_spawn_chance
        self.rules = rules
        self.rng: RandomSource = rng or random.Random()
        self.names = names if names is not None else NameProvider()
        self.max_population = max_population if max_population is not None else rules.max_population
        if self.max_population is not None and self.max_population < 1:
            raise ConfigurationError(f"max_population must be positive, got {self.max_population}")

        self.food_pool = FoodPool(nutrition_range=rules.nutrition_range, labelled=rules.labelled_food)
        self._creatures: List[Creature] = []

    # =========================================================================
    # Population
    # =========================================================================

    @property
    def creatures(self) -> List[Creature]:
        """Snapshot of the live population."""
        return list(self._creatures)

    @property
    def population(self) -> int:
        return len(self._creatures)

    @property
    def food_items(self) -> List[FoodItem]:
        return self.food_pool.items

    def has_room(self, prospective_population: int) -> bool:
        """Check whether one more creature fits next to ``prospective_population``."""
        if self.max_population is None:
            return True
        return prospective_population < self.max_population

    def make_creature(self, name: Optional[str] = None) -> Creature:
        """Build a creature with the rule variant's default stats."""
        return Creature(
            name=name if name is not None else self.names.next_name(self.rng),
            health=self.rules.initial_health,
            death_probability=self.rules.death_probability,
            reproduction_probability=self.rules.reproduction_probability,
            metabolism=self.rules.metabolism,
        )

    def create_creature(self, name: Optional[str] = None) -> Creature:
        """Add a default creature to the live population.

        Raises:
            ConfigurationError: If the population is already at capacity
        """
        if not self.has_room(len(self._creatures)):
            raise ConfigurationError(
                f"Cannot add '{name}': population cap of {self.max_population} reached"
            )
        creature = self.make_creature(name)
        self._creatures.append(creature)
        return creature

    def populate(self, roster: Iterable[str]) -> None:
        for name in roster:
            self.create_creature(name)

    # =========================================================================
    # Cycle
    # =========================================================================

    def simulate_cycle(self, cycle_index: int) -> CycleStats:
        """Advance the world by one cycle.

        Args:
            cycle_index: 1-based cycle number, used for seasonal changes

        Returns:
            Statistics for the cycle
        """
        seasonal_food_chance = None
        if self.rules.is_season_change(cycle_index):
            self.food_spawn_chance *= self.rules.seasonal_food_factor
            seasonal_food_chance = self.food_spawn_chance
            logger.debug(
                "Cycle %d: season changed, food spawn chance now %.2f",
                cycle_index,
                self.food_spawn_chance,
            )

        food_spawned = False
        if self.rng.random() < self.food_spawn_chance:
            self.food_pool.spawn(self.rng)
            food_spawned = True

        self.rng.shuffle(self._creatures)

        survivors: List[Creature] = []
        newborns: List[Creature] = []
        deaths = 0
        reproductions = 0
        food_consumed = 0
        live_count = len(self._creatures)

        for creature in self._creatures:
            food = self.food_pool.consume_random(self.rng)
            if food is not None:
                creature.feed(food.nutrition)
                food_consumed += 1
            else:
                creature.decrease_health(self.rules.starvation_penalty)

            if self._check_death(creature):
                deaths += 1
                live_count -= 1
                logger.debug("Cycle %d: %s died", cycle_index, creature.name)
                continue

            survivors.append(creature)

            reproduced = creature.roll_reproduction(
                self.rng,
                health_threshold=self.rules.reproduction_health_threshold,
                cost=self.rules.reproduction_cost,
            )
            if reproduced and self.has_room(live_count + len(newborns)):
                newborn = self.make_creature()
                newborns.append(newborn)
                reproductions += 1
                logger.debug("Cycle %d: %s gave birth to %s", cycle_index, creature.name, newborn.name)

        self._creatures = survivors + newborns

        spawns = 0
        if self._creatures and self.rng.random() < self.spawn_chance and self.has_room(len(self._creatures)):
            spawned = self.create_creature()
            spawns = 1
            logger.debug("Cycle %d: %s appeared", cycle_index, spawned.name)

        return CycleStats(
            cycle=cycle_index,
            population=len(self._creatures),
            deaths=deaths,
            reproductions=reproductions,
            spawns=spawns,
            food_consumed=food_consumed,
            food_spawned=food_spawned,
            food_remaining=len(self.food_pool),
            health=HealthSummary.from_values(c.health for c in self._creatures),
            seasonal_food_chance=seasonal_food_chance,
        )

    def _check_death(self, creature: Creature) -> bool:
        """Metabolic decay first, then the death roll.

        With zero metabolism the decay step only catches creatures whose
        health was already driven to zero this cycle.
        """
        if creature.apply_metabolic_decay():
            return True
        return creature.roll_death(self.rng, scale_by_health=self.rules.health_scaled_death)
