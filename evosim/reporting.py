"""Console reporting for simulation runs.

Per-cycle summaries and the final world state are printed to a text
stream (stdout unless told otherwise). Diagnostic messages go through
``logging``; the reports themselves are plain output meant for a human.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, TextIO

from evosim.config.world import SEPARATOR_WIDTH

if TYPE_CHECKING:
    from evosim.stats import CycleStats
    from evosim.world import World


class ConsoleReporter:
    """Writes human-readable progress reports.

    Attributes:
        stream: Output stream; resolved at write time when None so that
            redirected stdout (e.g. under pytest's capsys) is honored
        separator_width: Width of separator lines
    """

    def __init__(self, stream: Optional[TextIO] = None, separator_width: int = SEPARATOR_WIDTH) -> None:
        self._stream = stream
        self.separator_width = separator_width

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str = "") -> None:
        print(line, file=self.stream)

    def simulation_started(self) -> None:
        self._write("Starting Simulation...")

    def cycle_started(self, cycle_index: int) -> None:
        self._write()
        self._write(f"=== Cycle {cycle_index} ===")

    def cycle_finished(self, stats: "CycleStats") -> None:
        if stats.seasonal_food_chance is not None:
            self._write(
                f"Seasonal change: Food spawn chance decreased to {stats.seasonal_food_chance:.2f}"
            )
        self._write(f"--- Cycle {stats.cycle} Summary ---")
        self._write(f"Total Creatures: {stats.population}")
        self._write(f"Deaths This Cycle: {stats.deaths}")
        self._write(f"Reproductions This Cycle: {stats.reproductions}")
        self._write(f"Spontaneous Spawns This Cycle: {stats.spawns}")
        self._write(f"Food Consumed This Cycle: {stats.food_consumed}")
        self._write(f"Food Available: {stats.food_remaining}")
        self._write(f"Average Health: {stats.health.average:.2f}")
        if stats.health.minimum is not None and stats.health.maximum is not None:
            self._write(f"Health Range: {stats.health.minimum:.2f} - {stats.health.maximum:.2f}")
        self._write("-" * self.separator_width)

    def extinction(self) -> None:
        self._write("All creatures have died. Simulation ending early.")

    def final_state(self, world: "World") -> None:
        """Print every surviving creature and every uneaten food item."""
        creatures = world.creatures
        food_items = world.food_items

        self._write()
        self._write("Simulation ended. Final state:")
        self._write()
        self._write("--- Current World State ---")
        self._write(f"Creatures ({len(creatures)}):")
        for creature in creatures:
            self._write(f"  {creature.name}: health {creature.health:.2f}")
        self._write(f"Food available ({len(food_items)}):")
        for item in food_items:
            self._write(f"  {item}")
        self._write("-" * self.separator_width)
