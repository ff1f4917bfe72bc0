"""
Runtime settings for dbdatagen.

Loads settings from dbdatagen.toml files and DBDATAGEN_* environment
variables using pydantic-settings.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Literal, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from dbdatagen.exceptions import ConfigurationError

CONFIG_FILE_NAME = "dbdatagen.toml"


class Settings(BaseSettings):
    """Settings shared by the CLI, the orchestrator and dataset generation."""

    model_config = SettingsConfigDict(env_prefix="DBDATAGEN_", extra="ignore")

    connection_string: Optional[str] = Field(
        default=None,
        description="ODBC connection string of the target SQL Server database",
    )
    locale: str = Field(default="en", description="Faker locale for generated values")
    seed: Optional[int] = Field(
        default=None, description="Random seed for reproducible runs"
    )
    modulus_factor: int = Field(
        default=10,
        ge=1,
        description="Nullable columns get NULL on every Nth generated value",
    )
    batch_size: int = Field(
        default=1000, ge=1, le=1000, description="Rows per INSERT statement"
    )
    max_unique_retries: int = Field(
        default=1000,
        ge=0,
        description="Regeneration attempts per row before a unique index gives up",
    )
    on_unsupported: Literal["table", "column"] = Field(
        default="table",
        description="Skip the whole table or only the column with an unsupported type",
    )
    log_level: str = Field(default="INFO", description="Logging level for the CLI")

    @classmethod
    def from_toml(cls, path: Path | str) -> Settings:
        """
        Load settings from a TOML file.

        Settings may sit at the top level or under a [dbdatagen] table.
        Values in the file win over DBDATAGEN_* environment variables.

        Args:
            path: Path to dbdatagen.toml

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file is missing or invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {config_path}: {e}") from e

        data = data.get("dbdatagen", data)
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings in {config_path}:\n{e}") from e

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Settings:
        """
        Find and load dbdatagen.toml, or fall back to defaults.

        Searches for dbdatagen.toml starting from start_dir and walking up
        parent directories until found or reaching filesystem root.

        Args:
            start_dir: Directory to start search (defaults to current directory)

        Returns:
            Settings instance
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()

        # Walk up directory tree
        while True:
            config_path = current / CONFIG_FILE_NAME
            if config_path.exists():
                return cls.from_toml(config_path)

            # Check if we've reached filesystem root
            parent = current.parent
            if parent == current:
                break
            current = parent

        return cls()
