"""
Generator configuration document.

The document lists the tables to load and, per column, how to generate its
values. It is read from JSON or YAML with PascalCase keys:

    {
      "Name": "Sales",
      "Type": "DataGeneratorConfiguration",
      "Tables": [
        {
          "Schema": "dbo",
          "Name": "Customer",
          "Rows": 1000,
          "HasUniqueIndex": false,
          "TruncateTable": true,
          "Columns": [
            {"Name": "CustomerId", "ColumnType": "int", "Identity": true},
            {"Name": "Email", "ColumnType": "nvarchar", "MaxValue": 100,
             "MaskingType": "Internet", "SubType": "Email", "Nullable": true}
          ]
        }
      ]
    }
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dbdatagen.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DOCUMENT_TYPE = "DataGeneratorConfiguration"


class _DocumentModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class ForeignKeySpec(_DocumentModel):
    """Referenced column whose existing values a foreign key column reuses."""

    schema_name: str = Field(default="dbo", alias="Schema")
    table: str = Field(alias="Table")
    column: str = Field(alias="Column")


class ColumnSpec(_DocumentModel):
    """How to generate one column's values."""

    name: str = Field(alias="Name")
    column_type: str = Field(alias="ColumnType")
    masking_type: str | None = Field(default=None, alias="MaskingType")
    sub_type: str | None = Field(default=None, alias="SubType")
    nullable: bool = Field(default=False, alias="Nullable")
    identity: bool = Field(default=False, alias="Identity")
    min_value: Any = Field(default=None, alias="MinValue")
    max_value: Any = Field(default=None, alias="MaxValue")
    character_string: str | None = Field(default=None, alias="CharacterString")
    format: str | None = Field(default=None, alias="Format")
    separator: str | None = Field(default=None, alias="Separator")
    precision: int | None = Field(default=None, alias="Precision")
    value: Any = Field(default=None, alias="Value")
    foreign_key: ForeignKeySpec | None = Field(default=None, alias="ForeignKey")

    @property
    def uses_randomizer(self) -> bool:
        """True when a masking type or subtype selects the generator."""
        return bool(self.masking_type or self.sub_type)


class TableSpec(_DocumentModel):
    """One table's synthetic data load."""

    schema_name: str = Field(default="dbo", alias="Schema")
    name: str = Field(alias="Name")
    rows: int = Field(default=1000, ge=0, alias="Rows")
    has_unique_index: bool = Field(default=False, alias="HasUniqueIndex")
    truncate_table: bool = Field(default=False, alias="TruncateTable")
    columns: tuple[ColumnSpec, ...] = Field(default=(), alias="Columns")
    unique_indexes: tuple[tuple[str, ...], ...] | None = Field(default=None, alias="UniqueIndexes")

    @property
    def full_name(self) -> str:
        return f"{self.schema_name}.{self.name}"

    @property
    def identity_column(self) -> ColumnSpec | None:
        return next((col for col in self.columns if col.identity), None)

    def get_column(self, name: str) -> ColumnSpec | None:
        return next((col for col in self.columns if col.name == name), None)


class GeneratorDocument(_DocumentModel):
    """A whole configuration document."""

    name: str | None = Field(default=None, alias="Name")
    type: str = Field(default=DOCUMENT_TYPE, alias="Type")
    tables: tuple[TableSpec, ...] = Field(alias="Tables")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def to_json(self, path: str | Path | None = None) -> str:
        """Serialize with PascalCase keys; also write to `path` if given."""
        text = json.dumps(self.to_dict(), indent=2)
        if path is not None:
            Path(path).write_text(text + "\n", encoding="utf-8")
        return text


def parse_document(data: Any) -> GeneratorDocument:
    """
    Validate an already-decoded document.

    Raises:
        ConfigurationError: If the structure does not match the document model
    """
    if isinstance(data, list):
        # A bare list of tables
        data = {"Tables": data}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration document must be an object, got {type(data).__name__}"
        )
    try:
        return GeneratorDocument.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration document:\n{e}") from e


def load_document(path: str | Path) -> GeneratorDocument:
    """
    Load a configuration document from a JSON or YAML file.

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed

    Example:
        >>> doc = load_document("sales.datagen.json")
        >>> [t.name for t in doc.tables]
        ['Customer', 'Order']
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8-sig")
        if path.suffix.lower() in (".yaml", ".yml"):
            import yaml

            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except Exception as e:
        raise ConfigurationError(f"Could not read configuration file {path}: {e}") from e

    document = parse_document(data)
    logger.info(f"Loaded configuration {path} with {len(document.tables)} table(s)")
    return document
