"""Tests for the dbdatagen CLI."""

import json
import re

import pytest
from click.testing import CliRunner

from dbdatagen.cli.main import cli


@pytest.fixture
def runner(settings, tmp_path, monkeypatch) -> CliRunner:
    """CliRunner inside an empty directory with a seeded settings file."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "dbdatagen.toml").write_text("[dbdatagen]\nseed = 11\n")
    return CliRunner()


def test_value_native(runner: CliRunner):
    result = runner.invoke(cli, ["value", "int", "--min", "1", "--max", "3", "--count", "20"])

    assert result.exit_code == 0
    values = result.output.split()
    assert len(values) == 20
    assert set(values) <= {"1", "2", "3"}


def test_value_category_with_format(runner: CliRunner):
    result = runner.invoke(cli, ["value", "Phone.PhoneNumber", "--format", "###-###-####"])

    assert result.exit_code == 0
    assert re.match(r"^\d{3}-\d{3}-\d{4}$", result.output.strip())


def test_value_bare_subtype(runner: CliRunner):
    """Should infer the category of a bare subtype."""
    result = runner.invoke(cli, ["value", "ZipCode", "--format", "#####", "--count", "3"])

    assert result.exit_code == 0
    assert all(re.match(r"^\d{5}$", line) for line in result.output.split())


def test_value_unsupported_type(runner: CliRunner):
    """Should exit 1 with the error on stderr."""
    result = runner.invoke(cli, ["value", "xml"])

    assert result.exit_code == 1
    assert "Unsupported column type 'xml'" in result.output


def test_types_filtered(runner: CliRunner):
    result = runner.invoke(cli, ["types", "--category", "Internet", "--pattern", "^ip"])

    assert result.exit_code == 0
    assert result.output.split() == ["Internet", "Ip", "Internet", "Ipv6"]


def test_dataset_json(runner: CliRunner):
    result = runner.invoke(cli, ["dataset", "--rows", "3"])

    assert result.exit_code == 0
    rows = json.loads(result.output)
    assert len(rows) == 3
    assert "Email" in rows[0]


def test_dataset_csv_to_file(runner: CliRunner, tmp_path):
    out = tmp_path / "people.csv"

    result = runner.invoke(
        cli, ["dataset", "PersonalData", "--rows", "4", "--format", "csv", "--output", str(out)]
    )

    assert result.exit_code == 0
    assert len(out.read_text().strip().splitlines()) == 5


def test_generate_dry_run(runner: CliRunner, tmp_path):
    """Should print the T-SQL of every table without a connection."""
    config = tmp_path / "sales.json"
    config.write_text(
        json.dumps(
            {
                "Tables": [
                    {
                        "Name": "Customer",
                        "Rows": 3,
                        "TruncateTable": True,
                        "Columns": [
                            {"Name": "Id", "ColumnType": "int", "Identity": True},
                            {"Name": "Email", "ColumnType": "varchar", "SubType": "Email"},
                        ],
                    },
                    {"Name": "Skipped", "Rows": 1, "Columns": [{"Name": "A", "ColumnType": "int"}]},
                ]
            }
        )
    )

    result = runner.invoke(
        cli, ["generate", str(config), "--dry-run", "--exclude-table", "Skipped"]
    )

    assert result.exit_code == 0
    assert "TRUNCATE TABLE [dbo].[Customer];" in result.output
    assert "SET IDENTITY_INSERT [dbo].[Customer] ON;" in result.output
    assert "INSERT INTO [dbo].[Customer] ([Id], [Email]) VALUES" in result.output
    assert "[dbo].[Skipped]" not in result.output


def test_generate_reports_failure(runner: CliRunner, tmp_path):
    config = tmp_path / "bad.json"
    config.write_text(
        json.dumps({"Tables": [{"Name": "T", "Columns": [{"Name": "X", "ColumnType": "xml"}]}]})
    )

    result = runner.invoke(cli, ["generate", str(config), "--dry-run"])

    assert result.exit_code == 1
    assert "Skipped" in result.output


def test_generate_without_connection_string(runner: CliRunner, tmp_path):
    """Should explain how to configure the connection."""
    config = tmp_path / "sales.json"
    config.write_text(json.dumps({"Tables": []}))

    result = runner.invoke(cli, ["generate", str(config)])

    assert result.exit_code == 1
    assert "DBDATAGEN_CONNECTION_STRING" in result.output


def test_config_requires_connection(runner: CliRunner, tmp_path):
    result = runner.invoke(cli, ["config", "--output", str(tmp_path / "out.json")])

    assert result.exit_code == 1
    assert "No connection string configured" in result.output


def test_invalid_config_file(runner: CliRunner, tmp_path):
    bad = tmp_path / "bad.toml"
    bad.write_text("modulus_factor = 0\n")

    result = runner.invoke(cli, ["--config-file", str(bad), "types"])

    assert result.exit_code == 1
    assert "Invalid settings" in result.output
