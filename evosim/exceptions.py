"""evosim exception hierarchy.

Centralised base classes so callers can catch simulation failures narrowly
and startup errors can be told apart from runtime misuse.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union


class EvoSimError(Exception):
    """Root of all evosim domain exceptions."""


class SimulationError(EvoSimError):
    """Errors during simulation execution (world, runner, entities)."""


class ConfigurationError(EvoSimError):
    """Invalid or missing configuration."""


class MissingNameResourceError(ConfigurationError):
    """The name list file could not be found or read."""

    def __init__(self, path: Union[str, Path], reason: str = "not found") -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Name resource {self.path} {reason}")
