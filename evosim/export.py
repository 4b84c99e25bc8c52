"""JSON export of a finished run.

Keeps the export format out of the runner so the simulation loop does not
change when the file layout does.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Union

import orjson

if TYPE_CHECKING:
    from evosim.config.simulation_config import SimulationConfig
    from evosim.runner import SimulationResult

logger = logging.getLogger(__name__)


def build_export(result: "SimulationResult", config: "SimulationConfig") -> Dict[str, Any]:
    return {
        "config": config.to_dict(),
        "summary": {
            "cycles_requested": result.cycles_requested,
            "cycles_run": result.cycles_run,
            "extinct": result.extinct,
            "total_deaths": result.total_deaths,
            "total_reproductions": result.total_reproductions,
            "total_spawns": result.total_spawns,
        },
        "cycles": [stats.to_dict() for stats in result.history],
        "survivors": [creature.to_dict() for creature in result.survivors],
        "food_remaining": [item.to_dict() for item in result.food_remaining],
    }


def export_stats_json(
    result: "SimulationResult",
    config: "SimulationConfig",
    filename: Union[str, Path],
) -> Path:
    """Write the run's statistics to ``filename`` and return the path."""
    path = Path(filename)
    path.write_bytes(orjson.dumps(build_export(result, config), option=orjson.OPT_INDENT_2))
    logger.info("Stats exported to: %s", path)
    return path
