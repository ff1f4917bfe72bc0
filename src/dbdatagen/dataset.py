"""
Dataset templates: generate rows of synthetic data without a database.

A template names its columns and, per column, either a randomizer pair
(Type "Name" with SubType "FirstName") or a native SQL type ("int").
"""

import csv
import json
import logging
from pathlib import Path
from typing import IO, Any

from pydantic import Field, ValidationError

from dbdatagen.document import _DocumentModel
from dbdatagen.exceptions import ConfigurationError
from dbdatagen.generators import Category, RandomizerCatalog, ValueGenerator
from dbdatagen.models import GenerationRequest

logger = logging.getLogger(__name__)


class TemplateColumn(_DocumentModel):
    """One column of a dataset template."""

    name: str = Field(alias="Name")
    type: str | None = Field(default=None, alias="Type")
    sub_type: str | None = Field(default=None, alias="SubType")
    min_value: Any = Field(default=None, alias="MinValue")
    max_value: Any = Field(default=None, alias="MaxValue")
    precision: int | None = Field(default=None, alias="Precision")
    character_string: str | None = Field(default=None, alias="CharacterString")
    format: str | None = Field(default=None, alias="Format")
    separator: str | None = Field(default=None, alias="Separator")
    value: Any = Field(default=None, alias="Value")

    def to_request(self, locale: str) -> GenerationRequest:
        options = {
            "min": self.min_value,
            "max": self.max_value,
            "precision": self.precision,
            "character_set": self.character_string,
            "format": self.format,
            "separator": self.separator,
            "value": self.value,
            "locale": locale,
            "column": self.name,
        }
        if self.sub_type:
            category = (
                Category.parse(self.type, self.name)
                if self.type
                else RandomizerCatalog.infer_category(self.sub_type, self.name)
            )
            return GenerationRequest(category=category, subtype=self.sub_type, **options)
        if not self.type:
            raise ConfigurationError(f"Template column '{self.name}' needs a Type or SubType")
        return GenerationRequest(data_type=self.type, **options)


class DatasetTemplate(_DocumentModel):
    """A named list of template columns."""

    name: str = Field(alias="Name")
    columns: tuple[TemplateColumn, ...] = Field(alias="Columns")


PERSONAL_DATA = DatasetTemplate(
    Name="PersonalData",
    Columns=(
        TemplateColumn(Name="FirstName", Type="Name", SubType="FirstName"),
        TemplateColumn(Name="LastName", Type="Name", SubType="LastName"),
        TemplateColumn(Name="Gender", Type="Person", SubType="Gender"),
        TemplateColumn(Name="BirthDate", Type="Person", SubType="DateOfBirth"),
        TemplateColumn(Name="Email", Type="Internet", SubType="Email"),
        TemplateColumn(Name="UserName", Type="Internet", SubType="UserName"),
        TemplateColumn(Name="Phone", Type="Phone", SubType="PhoneNumber", Format="(###) ###-####"),
        TemplateColumn(Name="Address", Type="Address", SubType="StreetAddress"),
        TemplateColumn(Name="City", Type="Address", SubType="City"),
        TemplateColumn(Name="ZipCode", Type="Address", SubType="ZipCode", Format="#####"),
        TemplateColumn(Name="Country", Type="Address", SubType="Country"),
        TemplateColumn(Name="CreditCardNumber", Type="Finance", SubType="CreditCardNumber"),
        TemplateColumn(Name="Iban", Type="Finance", SubType="Iban"),
    ),
)

BUILTIN_TEMPLATES = {PERSONAL_DATA.name.lower(): PERSONAL_DATA}


def load_template(name_or_path: str | Path) -> DatasetTemplate:
    """
    Get a built-in template by name, or load one from a JSON or YAML file.

    Raises:
        ConfigurationError: If the name is unknown and no such file exists,
            or the file is malformed
    """
    builtin = BUILTIN_TEMPLATES.get(str(name_or_path).lower())
    if builtin is not None:
        return builtin

    path = Path(name_or_path)
    if not path.exists():
        raise ConfigurationError(
            f"Unknown dataset template '{name_or_path}'.\n\n"
            f"Suggestions:\n"
            f"1. Use a built-in template: {', '.join(t.name for t in BUILTIN_TEMPLATES.values())}\n"
            f"2. Pass the path of a JSON or YAML template file"
        )

    try:
        text = path.read_text(encoding="utf-8-sig")
        if path.suffix.lower() in (".yaml", ".yml"):
            import yaml

            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
        return DatasetTemplate.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid dataset template {path}:\n{e}") from e
    except Exception as e:
        raise ConfigurationError(f"Could not read dataset template {path}: {e}") from e


def generate_dataset(
    template: DatasetTemplate | str,
    rows: int,
    catalog: RandomizerCatalog | None = None,
) -> list[dict[str, Any]]:
    """
    Generate rows from a template.

    Args:
        template: Template, template name or template file path
        rows: Number of rows
        catalog: Randomizer catalog (defaults to the shared "en" catalog)

    Returns:
        One dict per row, keyed by template column name
    """
    if not isinstance(template, DatasetTemplate):
        template = load_template(template)
    catalog = catalog or RandomizerCatalog.for_locale()
    generator = ValueGenerator(catalog)

    requests = [(col.name, col.to_request(catalog.locale)) for col in template.columns]
    dataset = [
        {name: generator.generate(request) for name, request in requests}
        for _ in range(rows)
    ]
    logger.debug(f"Generated {rows} rows from template '{template.name}'")
    return dataset


def write_dataset(dataset: list[dict[str, Any]], stream: IO[str], fmt: str = "json") -> None:
    """Write rows as a JSON array or as CSV with a header line."""
    if fmt == "csv":
        if not dataset:
            return
        writer = csv.DictWriter(stream, fieldnames=list(dataset[0]))
        writer.writeheader()
        writer.writerows(dataset)
    else:
        json.dump(dataset, stream, indent=2, default=str)
        stream.write("\n")
