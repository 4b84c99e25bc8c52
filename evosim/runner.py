"""Multi-cycle simulation driver."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from evosim.entities.creature import Creature
from evosim.entities.food import FoodItem
from evosim.exceptions import SimulationError
from evosim.reporting import ConsoleReporter
from evosim.stats import CycleStats
from evosim.world import World

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Outcome of a SimulationRunner.run call.

    Attributes:
        cycles_requested: Cycle count passed to run()
        history: Stats for every cycle that actually ran, in order
        survivors: Live creatures at the end of the run
        food_remaining: Uneaten food at the end of the run
    """

    cycles_requested: int
    history: List[CycleStats] = field(default_factory=list)
    survivors: List[Creature] = field(default_factory=list)
    food_remaining: List[FoodItem] = field(default_factory=list)

    @property
    def cycles_run(self) -> int:
        return len(self.history)

    @property
    def extinct(self) -> bool:
        return not self.survivors

    @property
    def ended_early(self) -> bool:
        return self.cycles_run < self.cycles_requested

    @property
    def total_deaths(self) -> int:
        return sum(stats.deaths for stats in self.history)

    @property
    def total_reproductions(self) -> int:
        return sum(stats.reproductions for stats in self.history)

    @property
    def total_spawns(self) -> int:
        return sum(stats.spawns for stats in self.history)


class SimulationRunner:
    """Runs a World for a fixed number of cycles.

    The run stops early, after the first cycle that ends with no live
    creatures, and always finishes with a final state report.
    """

    def __init__(self, world: World, reporter: Optional[ConsoleReporter] = None) -> None:
        self.world = world
        self.reporter = reporter or ConsoleReporter()

    def run(self, cycles: int) -> SimulationResult:
        """Simulate up to ``cycles`` cycles, numbered from 1.

        Raises:
            SimulationError: If ``cycles`` is negative
        """
        if cycles < 0:
            raise SimulationError(f"Cycle count must be >= 0, got {cycles}")

        logger.info(
            "Running %d cycles with %d creatures (%s rules)",
            cycles,
            self.world.population,
            self.world.rules.name,
        )
        self.reporter.simulation_started()

        result = SimulationResult(cycles_requested=cycles)
        for cycle_index in range(1, cycles + 1):
            self.reporter.cycle_started(cycle_index)
            stats = self.world.simulate_cycle(cycle_index)
            result.history.append(stats)
            self.reporter.cycle_finished(stats)

            if stats.extinct:
                logger.info("Population extinct after cycle %d", cycle_index)
                self.reporter.extinction()
                break

        result.survivors = self.world.creatures
        result.food_remaining = self.world.food_items
        self.reporter.final_state(self.world)

        logger.info(
            "Simulation complete: %d/%d cycles, %d survivors, %d food items left",
            result.cycles_run,
            cycles,
            len(result.survivors),
            len(result.food_remaining),
        )
        return result
