"""Tests for T-SQL statement building."""

from datetime import date, datetime, time
from decimal import Decimal
from uuid import UUID

from dbdatagen.sql import (
    build_identity_insert,
    build_insert,
    build_load_statements,
    build_truncate,
    qualified_name,
    quote_identifier,
    render_literal,
)


def test_quote_identifier_doubles_closing_bracket():
    assert quote_identifier("Order Details") == "[Order Details]"
    assert quote_identifier("odd]name") == "[odd]]name]"
    assert qualified_name("sales", "Order") == "[sales].[Order]"


class TestRenderLiteral:
    """Tests for value → literal rendering."""

    def test_null(self):
        assert render_literal(None, "int") == "NULL"

    def test_bit(self):
        assert render_literal(True, "bit") == "1"
        assert render_literal(0, "bit") == "0"
        assert render_literal(1, "bit") == "1"

    def test_numbers(self):
        assert render_literal(42, "int") == "42"
        assert render_literal(Decimal("12.50"), "decimal") == "12.50"
        assert render_literal(1.5, "float") == "1.5"

    def test_strings_escape_quotes(self):
        assert render_literal("O'Brien", "varchar") == "'O''Brien'"
        assert render_literal("O'Brien", "nvarchar") == "N'O''Brien'"
        assert render_literal("x", "NCHAR(10)") == "N'x'"

    def test_temporal(self):
        assert render_literal(date(2024, 1, 31), "date") == "'2024-01-31'"
        assert (
            render_literal(datetime(2024, 1, 31, 13, 45, 7, 123456), "datetime")
            == "'2024-01-31 13:45:07.123'"
        )
        assert (
            render_literal(datetime(2024, 1, 31, 13, 45, 7, 123456), "datetime2")
            == "'2024-01-31 13:45:07.1234560'"
        )
        assert (
            render_literal(datetime(2024, 1, 31, 13, 45, 7), "smalldatetime")
            == "'2024-01-31 13:45:00'"
        )
        assert render_literal(time(8, 30, 0), "time") == "'08:30:00.0000000'"

    def test_pre_rendered_temporal_string(self):
        assert render_literal("2024-01-31", "date") == "'2024-01-31'"

    def test_uuid_and_bytes(self):
        uid = UUID("12345678-1234-4234-8234-123456789abc")
        assert render_literal(uid, "uniqueidentifier") == "'12345678-1234-4234-8234-123456789abc'"
        assert render_literal(b"\x01\xff", "varbinary") == "0x01ff"


def test_truncate_and_identity_insert():
    assert build_truncate("dbo", "Customer") == "TRUNCATE TABLE [dbo].[Customer];"
    assert build_identity_insert("dbo", "Customer", True) == (
        "SET IDENTITY_INSERT [dbo].[Customer] ON;"
    )
    assert build_identity_insert("dbo", "Customer", False) == (
        "SET IDENTITY_INSERT [dbo].[Customer] OFF;"
    )


def test_build_insert_multi_row():
    """Should emit one INSERT with a VALUES row per generated row."""
    sql = build_insert(
        "dbo",
        "Customer",
        [("Id", "int"), ("Name", "nvarchar"), ("Email", "varchar")],
        [{"Id": 1, "Name": "Ann", "Email": None}, {"Id": 2, "Name": "Bo", "Email": "b@x.io"}],
    )

    assert sql == (
        "INSERT INTO [dbo].[Customer] ([Id], [Name], [Email]) VALUES\n"
        "(1, N'Ann', NULL),\n"
        "(2, N'Bo', 'b@x.io');"
    )


def test_load_statements_split_and_wrap_identity():
    """Should split rows into batches inside IDENTITY_INSERT ON/OFF."""
    rows = [{"Id": i} for i in range(1, 6)]

    statements = build_load_statements(
        "dbo", "T", [("Id", "int")], rows, identity_insert=True, batch_size=2
    )

    assert statements[0] == "SET IDENTITY_INSERT [dbo].[T] ON;"
    assert statements[-1] == "SET IDENTITY_INSERT [dbo].[T] OFF;"
    inserts = statements[1:-1]
    assert len(inserts) == 3
    assert inserts[2].endswith("(5);")


def test_load_statements_cap_batch_at_thousand():
    rows = [{"Id": i} for i in range(2500)]

    statements = build_load_statements("dbo", "T", [("Id", "int")], rows, batch_size=5000)

    assert len(statements) == 3


def test_load_statements_empty():
    assert build_load_statements("dbo", "T", [("Id", "int")], []) == []
