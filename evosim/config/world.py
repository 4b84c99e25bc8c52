"""World and run-level configuration constants.

The defaults reproduce the classic three-creature starting scenario.
"""

# =============================================================================
# POPULATION
# =============================================================================
RICH_MAX_POPULATION = 1000  # Carrying capacity; the simple variant is unbounded

# =============================================================================
# SEASONS
# =============================================================================
# Every SEASON_LENGTH cycles the food spawn chance is multiplied by
# SEASONAL_FOOD_FACTOR. The decrease is permanent, modelling slow scarcity.
SEASON_LENGTH = 10
SEASONAL_FOOD_FACTOR = 0.8

# =============================================================================
# DEFAULT RUN
# =============================================================================
DEFAULT_SPAWN_CHANCE = 0.2
DEFAULT_FOOD_SPAWN_CHANCE = 0.7
DEFAULT_CYCLES = 20
DEFAULT_ROSTER = ("Alpha", "Beta", "Gamma")
DEFAULT_NAMES_PATH = "names.txt"
DEFAULT_VARIANT = "rich"

# Width of separator lines in console reports.
SEPARATOR_WIDTH = 32
