"""Entity package exposing simulation agents and resources."""

from evosim.entities.creature import Creature
from evosim.entities.food import FoodItem, FoodKind, FoodPool

__all__ = [
    "Creature",
    "FoodItem",
    "FoodKind",
    "FoodPool",
]
