"""Discrete-cycle creature population simulation.

This package contains the pure simulation logic, with no UI dependencies.
Key modules include:

- entities: Creature, FoodItem and FoodPool
- rulesets: Rich and simple rule variants
- world: One-cycle orchestration (World.simulate_cycle)
- runner: Multi-cycle driver with early extinction stop
- reporting: Console summaries and final state report
- names: Name list loading for newborn creatures

Design note: this module exposes a small, explicit public API via ``__all__``.
"""

from evosim.rulesets import RICH_RULES, SIMPLE_RULES, RuleSet, get_ruleset
from evosim.runner import SimulationResult, SimulationRunner
from evosim.world import World

__version__ = "0.1.0"

# Public API of the evosim package. Keep this list intentionally small.
__all__ = [
    "RICH_RULES",
    "SIMPLE_RULES",
    "RuleSet",
    "SimulationResult",
    "SimulationRunner",
    "World",
    "get_ruleset",
]
