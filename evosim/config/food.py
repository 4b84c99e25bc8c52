"""Food system configuration constants."""

# Rich variant: nutrition is drawn uniformly from [MIN, MIN + RANGE).
RICH_NUTRITION_MIN = 20.0
RICH_NUTRITION_RANGE = 30.0

# Simple variant: every item is worth the same.
SIMPLE_NUTRITION = 20.0

# Health lost by a creature that finds the pool empty on its turn.
RICH_STARVATION_PENALTY = 10.0
SIMPLE_STARVATION_PENALTY = 0.0
