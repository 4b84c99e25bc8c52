"""Pytest configuration and fixtures for population simulation tests."""

import io
import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def report_stream():
    """Capture reporter output in memory."""
    return io.StringIO()


@pytest.fixture
def quiet_reporter(report_stream):
    """A console reporter writing to an in-memory stream."""
    from evosim.reporting import ConsoleReporter

    return ConsoleReporter(stream=report_stream)


@pytest.fixture
def names_file(tmp_path):
    """A small name list file with a blank line in the middle."""
    path = tmp_path / "names.txt"
    path.write_text("Ada\n\n  Brook  \nCedar\n", encoding="utf-8")
    return path
