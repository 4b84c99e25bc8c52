"""Tests for name list loading and the fallback name."""

import pytest

from evosim.exceptions import ConfigurationError, MissingNameResourceError
from evosim.names import NameProvider, load_names
from tests.fakes.fake_random import FixedRandom


def test_load_names_skips_blank_lines(names_file):
    assert load_names(names_file) == ["Ada", "Brook", "Cedar"]


def test_load_missing_file_raises(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(MissingNameResourceError) as excinfo:
        load_names(missing)
    assert excinfo.value.path == missing
    assert isinstance(excinfo.value, ConfigurationError)


def test_strict_provider_propagates_missing_file(tmp_path):
    with pytest.raises(MissingNameResourceError):
        NameProvider.from_file(tmp_path / "nope.txt", strict=True)


def test_lenient_provider_falls_back(tmp_path, caplog):
    with caplog.at_level("WARNING", logger="evosim.names"):
        provider = NameProvider.from_file(tmp_path / "nope.txt")
    assert len(provider) == 0
    assert provider.next_name(FixedRandom(0.3)) == "Unnamed"
    assert "nope.txt" in caplog.text


def test_empty_file_falls_back(tmp_path):
    path = tmp_path / "blank.txt"
    path.write_text("\n   \n", encoding="utf-8")
    assert NameProvider.from_file(path).next_name(FixedRandom(0.0)) == "Unnamed"


def test_next_name_picks_by_index(names_file):
    provider = NameProvider.from_file(names_file)
    assert provider.next_name(FixedRandom(0.0)) == "Ada"
    assert provider.next_name(FixedRandom(0.5)) == "Brook"
    assert provider.next_name(FixedRandom(0.99)) == "Cedar"


def test_names_read_once(names_file, seeded_rng):
    provider = NameProvider.from_file(names_file)
    names_file.unlink()
    assert provider.next_name(seeded_rng) in {"Ada", "Brook", "Cedar"}
