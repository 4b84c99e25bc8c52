"""Tests for SimulationConfig validation and rule lookup."""

import pytest

from evosim.config.simulation_config import SimulationConfig
from evosim.exceptions import ConfigurationError
from evosim.rulesets import RICH_RULES, SIMPLE_RULES, get_ruleset


def test_defaults_reproduce_classic_run():
    config = SimulationConfig()
    config.validate()
    assert config.spawn_chance == 0.2
    assert config.food_spawn_chance == 0.7
    assert config.cycles == 20
    assert config.roster == ("Alpha", "Beta", "Gamma")
    assert config.rules() is RICH_RULES


@pytest.mark.parametrize(
    "overrides",
    [
        {"spawn_chance": 1.2},
        {"food_spawn_chance": -0.5},
        {"cycles": -1},
        {"roster": ()},
        {"variant": "baroque"},
        {"max_population": 2},
        {"max_population": 0},
        {"roster": tuple(f"C{i}" for i in range(1001))},
    ],
)
def test_invalid_settings_rejected(overrides):
    with pytest.raises(ConfigurationError):
        SimulationConfig(**overrides).validate()


def test_seeded_rng_is_reproducible():
    config = SimulationConfig(seed=99)
    assert config.make_rng().random() == config.make_rng().random()


def test_get_ruleset():
    assert get_ruleset("simple") is SIMPLE_RULES
    with pytest.raises(ConfigurationError, match="available: rich, simple"):
        get_ruleset("nope")


def test_season_changes_only_on_multiples():
    assert RICH_RULES.is_season_change(10)
    assert RICH_RULES.is_season_change(20)
    assert not RICH_RULES.is_season_change(15)
    assert not SIMPLE_RULES.is_season_change(10)


def test_to_dict_is_plain():
    data = SimulationConfig().to_dict()
    assert data["roster"] == ["Alpha", "Beta", "Gamma"]
    assert data["variant"] == "rich"


def test_simple_variant_roster_is_unbounded():
    SimulationConfig(variant="simple", roster=tuple(f"C{i}" for i in range(1001))).validate()


def test_roster_may_fill_the_cap_exactly():
    SimulationConfig(roster=("Alpha", "Beta"), max_population=2).validate()
