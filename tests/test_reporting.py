"""Tests for console report formatting."""

from evosim.reporting import ConsoleReporter
from evosim.stats import CycleStats, HealthSummary
from evosim.world import World
from tests.fakes.fake_random import FixedRandom


def make_stats(**overrides):
    values = dict(
        cycle=10,
        population=3,
        deaths=1,
        reproductions=2,
        spawns=0,
        food_consumed=1,
        food_spawned=True,
        food_remaining=4,
        health=HealthSummary.from_values([50.0, 75.5, 100.0]),
        seasonal_food_chance=0.56,
    )
    values.update(overrides)
    return CycleStats(**values)


def test_cycle_summary(report_stream):
    ConsoleReporter(stream=report_stream).cycle_finished(make_stats())
    output = report_stream.getvalue()

    assert "Seasonal change: Food spawn chance decreased to 0.56" in output
    assert "--- Cycle 10 Summary ---" in output
    assert "Total Creatures: 3" in output
    assert "Deaths This Cycle: 1" in output
    assert "Reproductions This Cycle: 2" in output
    assert "Food Consumed This Cycle: 1" in output
    assert "Food Available: 4" in output
    assert "Average Health: 75.17" in output
    assert "Health Range: 50.00 - 100.00" in output


def test_empty_population_has_no_health_range(report_stream):
    stats = make_stats(population=0, health=HealthSummary(), seasonal_food_chance=None)
    ConsoleReporter(stream=report_stream).cycle_finished(stats)
    output = report_stream.getvalue()

    assert "Health Range" not in output
    assert "Seasonal change" not in output
    assert "Average Health: 0.00" in output


def test_final_state_lists_creatures_and_food(report_stream, seeded_rng):
    world = World(spawn_chance=0.0, food_spawn_chance=0.0, rng=seeded_rng)
    world.populate(["Alpha"])
    world.creatures[0].health = 42.123
    world.food_pool.spawn(FixedRandom(0.0))

    ConsoleReporter(stream=report_stream).final_state(world)
    output = report_stream.getvalue()

    assert "Creatures (1):" in output
    assert "Alpha: health 42.12" in output
    assert "Food available (1):" in output
    assert "Herb (nutrition 20.00)" in output


def test_defaults_to_stdout(capsys):
    ConsoleReporter().extinction()
    assert "All creatures have died" in capsys.readouterr().out
