"""T-SQL statement text for truncate, identity insert and multi-row INSERT."""

from collections.abc import Sequence
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any
from uuid import UUID

from dbdatagen.sqltypes import (
    BOOLEAN_TYPES,
    TEMPORAL_TYPES,
    UNICODE_TYPES,
    format_temporal,
    normalize_type,
)

# SQL Server accepts at most 1000 row value expressions per INSERT ... VALUES
MAX_ROWS_PER_INSERT = 1000


def quote_identifier(name: str) -> str:
    """Bracket-quote an identifier, doubling any closing bracket."""
    return "[" + name.replace("]", "]]") + "]"


def qualified_name(schema: str, table: str) -> str:
    return f"{quote_identifier(schema)}.{quote_identifier(table)}"


def quote_string(value: str, unicode: bool = False) -> str:
    prefix = "N" if unicode else ""
    return prefix + "'" + value.replace("'", "''") + "'"


def render_literal(value: Any, column_type: str | None = None) -> str:
    """
    Render a Python value as a T-SQL literal for a column type.

    Examples:
        >>> render_literal(None)
        'NULL'
        >>> render_literal("O'Brien", "nvarchar")
        "N'O''Brien'"
        >>> render_literal(True, "bit")
        '1'
    """
    column_type = normalize_type(column_type)
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "1" if value else "0"
    if column_type in BOOLEAN_TYPES and isinstance(value, (int, str)):
        return "1" if str(value).strip().lower() in ("1", "true") else "0"
    if isinstance(value, (int, Decimal)):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (datetime, date, time)):
        target = column_type if column_type in TEMPORAL_TYPES else "datetime2"
        return quote_string(format_temporal(value, target))
    if isinstance(value, UUID):
        return quote_string(str(value))
    if isinstance(value, bytes):
        return "0x" + value.hex()
    return quote_string(str(value), unicode=column_type in UNICODE_TYPES)


def build_truncate(schema: str, table: str) -> str:
    return f"TRUNCATE TABLE {qualified_name(schema, table)};"


def build_identity_insert(schema: str, table: str, on: bool) -> str:
    state = "ON" if on else "OFF"
    return f"SET IDENTITY_INSERT {qualified_name(schema, table)} {state};"


def build_insert(
    schema: str,
    table: str,
    columns: Sequence[tuple[str, str]],
    rows: Sequence[dict[str, Any]],
) -> str:
    """
    Build one multi-row INSERT statement.

    Args:
        schema: Table schema
        table: Table name
        columns: (column name, column type) pairs in insert order
        rows: Row dicts keyed by column name

    Example:
        >>> build_insert("dbo", "Customer", [("Id", "int"), ("Name", "nvarchar")],
        ...              [{"Id": 1, "Name": "Ann"}])
        "INSERT INTO [dbo].[Customer] ([Id], [Name]) VALUES\\n(1, N'Ann');"
    """
    column_list = ", ".join(quote_identifier(name) for name, _type in columns)
    values = ",\n".join(
        "(" + ", ".join(render_literal(row.get(name), col_type) for name, col_type in columns) + ")"
        for row in rows
    )
    return f"INSERT INTO {qualified_name(schema, table)} ({column_list}) VALUES\n{values};"


def build_load_statements(
    schema: str,
    table: str,
    columns: Sequence[tuple[str, str]],
    rows: Sequence[dict[str, Any]],
    identity_insert: bool = False,
    batch_size: int = MAX_ROWS_PER_INSERT,
) -> list[str]:
    """
    All statements that load rows into one table, in execution order.

    Rows are split into INSERT statements of at most batch_size rows, and
    wrapped in SET IDENTITY_INSERT ON/OFF when identity values are supplied.
    """
    if not rows or not columns:
        return []
    batch_size = max(1, min(batch_size, MAX_ROWS_PER_INSERT))

    statements = []
    if identity_insert:
        statements.append(build_identity_insert(schema, table, on=True))
    for i in range(0, len(rows), batch_size):
        statements.append(build_insert(schema, table, columns, rows[i : i + batch_size]))
    if identity_insert:
        statements.append(build_identity_insert(schema, table, on=False))
    return statements
