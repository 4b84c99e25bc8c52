"""Food items and the shared food pool."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from evosim.protocols import RandomSource

logger = logging.getLogger(__name__)


class FoodKind(Enum):
    HERB = "Herb"
    BERRY = "Berry"
    FRUIT = "Fruit"


FOOD_KINDS: Tuple[FoodKind, ...] = tuple(FoodKind)


@dataclass(frozen=True)
class FoodItem:
    """A single piece of food.

    Attributes:
        nutrition: Health restored when eaten
        kind: Label for reporting; None for unlabelled food
    """

    nutrition: float
    kind: Optional[FoodKind] = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value if self.kind else None,
            "nutrition": self.nutrition,
        }

    def __str__(self) -> str:
        label = self.kind.value if self.kind else "Food"
        return f"{label} (nutrition {self.nutrition:.2f})"


class FoodPool:
    """Unordered, depleting collection of food items.

    Items are appended by ``spawn`` and removed at random by
    ``consume_random``. Anything left over carries into the next cycle.

    Attributes:
        nutrition_range: (low, high) bounds for spawned nutrition
        labelled: Whether spawned items get a random FoodKind
    """

    def __init__(
        self,
        nutrition_range: Tuple[float, float] = (20.0, 50.0),
        labelled: bool = True,
    ) -> None:
        low, high = nutrition_range
        if high < low:
            raise ValueError(f"Invalid nutrition range {nutrition_range}")
        self.nutrition_range = nutrition_range
        self.labelled = labelled
        self._items: List[FoodItem] = []

    def spawn(self, rng: RandomSource) -> FoodItem:
        """Create one food item and add it to the pool.

        Nutrition is uniform in ``[low, high)``; a zero-width range yields
        exactly ``low`` without consuming a random draw.
        """
        kind = FOOD_KINDS[rng.randrange(len(FOOD_KINDS))] if self.labelled else None
        low, high = self.nutrition_range
        nutrition = low + rng.random() * (high - low) if high > low else low
        item = FoodItem(nutrition=nutrition, kind=kind)
        self._items.append(item)
        logger.debug("Food spawned: %s", item)
        return item

    def consume_random(self, rng: RandomSource) -> Optional[FoodItem]:
        """Remove and return a uniformly chosen item, or None if empty."""
        if not self._items:
            return None
        return self._items.pop(rng.randrange(len(self._items)))

    @property
    def items(self) -> List[FoodItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
