"""Tests for settings loading."""

import pytest

from dbdatagen.config import Settings
from dbdatagen.exceptions import ConfigurationError


def test_defaults(settings: Settings):
    defaults = Settings()

    assert defaults.locale == "en"
    assert defaults.modulus_factor == 10
    assert defaults.batch_size == 1000
    assert defaults.max_unique_retries == 1000
    assert defaults.on_unsupported == "table"
    assert defaults.connection_string is None


def test_environment_variables(settings: Settings, monkeypatch):
    """Should read DBDATAGEN_* variables."""
    monkeypatch.setenv("DBDATAGEN_MODULUS_FACTOR", "4")
    monkeypatch.setenv("DBDATAGEN_ON_UNSUPPORTED", "column")

    loaded = Settings()

    assert loaded.modulus_factor == 4
    assert loaded.on_unsupported == "column"


def test_from_toml_table(settings: Settings, tmp_path):
    """Should read settings under a [dbdatagen] table."""
    path = tmp_path / "dbdatagen.toml"
    path.write_text('[dbdatagen]\nlocale = "de_DE"\nseed = 7\nbatch_size = 250\n')

    loaded = Settings.from_toml(path)

    assert (loaded.locale, loaded.seed, loaded.batch_size) == ("de_DE", 7, 250)


def test_from_toml_invalid(settings: Settings, tmp_path):
    path = tmp_path / "dbdatagen.toml"
    path.write_text("modulus_factor = 0\n")
    with pytest.raises(ConfigurationError):
        Settings.from_toml(path)

    path.write_text("not = [valid toml")
    with pytest.raises(ConfigurationError):
        Settings.from_toml(path)

    with pytest.raises(ConfigurationError):
        Settings.from_toml(tmp_path / "missing.toml")


def test_find_and_load_walks_up(settings: Settings, tmp_path):
    """Should find dbdatagen.toml in a parent directory."""
    (tmp_path / "dbdatagen.toml").write_text("modulus_factor = 3\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert Settings.find_and_load(nested).modulus_factor == 3


def test_batch_size_limited_to_thousand(settings: Settings):
    with pytest.raises(Exception):
        Settings(batch_size=1001)
