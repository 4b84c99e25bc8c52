"""Creature configuration constants.

Health is measured on a 0-100 scale. Every creature is born at full health;
the per-variant defaults below decide how quickly that health is lost and how
likely a creature is to die or reproduce each cycle.
"""

# =============================================================================
# HEALTH BOUNDS
# =============================================================================
MIN_HEALTH = 0.0
MAX_HEALTH = 100.0
DEFAULT_HEALTH = MAX_HEALTH

# Health deducted from a parent on every successful reproduction roll.
REPRODUCTION_COST = 10.0

# =============================================================================
# RICH VARIANT
# =============================================================================
# Death chance scales with missing health: a full-health creature never dies
# from the roll, only from metabolic decay reaching zero.
RICH_DEATH_PROBABILITY = 0.05
RICH_REPRODUCTION_PROBABILITY = 0.3
RICH_METABOLISM = 5.0  # Health lost per cycle
RICH_REPRODUCTION_HEALTH_THRESHOLD = 70.0  # Too weak to breed below this

# =============================================================================
# SIMPLE VARIANT
# =============================================================================
# Flat probabilities, no health gate, no metabolism.
SIMPLE_DEATH_PROBABILITY = 0.1
SIMPLE_REPRODUCTION_PROBABILITY = 0.2
SIMPLE_METABOLISM = 0.0

# Returned by the name provider when no names are available.
FALLBACK_NAME = "Unnamed"
