"""Tests for SQL Server schema introspection."""

import pytest

from dbdatagen.exceptions import TableNotFoundError
from dbdatagen.introspection import SchemaIntrospector, infer_masking

#  name, type, user defined, max_length, precision, scale, nullable, identity, computed
CUSTOMER_COLUMNS = [
    ("CustomerId", "int", False, 4, 10, 0, False, True, False),
    ("FirstName", "nvarchar", False, 100, 0, 0, False, False, False),
    ("EmailAddress", "varchar", False, 200, 0, 0, True, False, False),
    ("Balance", "decimal", False, 9, 7, 2, False, False, False),
    ("Notes", "nvarchar", False, -1, 0, 0, True, False, False),
    ("Payload", "xml", False, -1, 0, 0, True, False, False),
    ("RowVer", "timestamp", False, 8, 0, 0, False, False, False),
    ("FullName", "nvarchar", False, 202, 0, 0, True, False, True),
    ("Flag", "MyFlag", True, 1, 1, 0, False, False, False),
]

ORDER_COLUMNS = [
    ("OrderId", "int", False, 4, 10, 0, False, True, False),
    ("CustomerId", "int", False, 4, 10, 0, False, False, False),
    ("OrderDate", "datetime2", False, 8, 27, 7, False, False, False),
]


def _customer_results():
    return [[(101,)], CUSTOMER_COLUMNS, [], [("UQ_Email", "EmailAddress")]]


def _order_results():
    return [[(102,)], ORDER_COLUMNS, [("CustomerId", "dbo", "Customer", "CustomerId")], []]


def test_get_table_spec(fake_conn_factory):
    """Should describe columns, identity, nullability and lengths."""
    conn = fake_conn_factory(results=_customer_results())

    table = SchemaIntrospector(conn).get_table_spec("Customer", rows=50)

    assert table.full_name == "dbo.Customer"
    assert table.rows == 50
    assert table.has_unique_index
    names = [col.name for col in table.columns]
    # xml, rowversion and computed columns are left out
    assert names == ["CustomerId", "FirstName", "EmailAddress", "Balance", "Notes", "Flag"]

    assert table.identity_column.name == "CustomerId"
    first = table.get_column("FirstName")
    assert (first.max_value, first.masking_type, first.sub_type) == (50, "Name", "FirstName")
    email = table.get_column("EmailAddress")
    assert email.nullable and email.sub_type == "Email" and email.max_value == 200
    balance = table.get_column("Balance")
    assert (balance.min_value, balance.max_value, balance.precision) == (0, 1000, 2)
    assert table.get_column("Notes").max_value == 255
    assert table.get_column("Flag").column_type == "userdefineddatatype"


def test_missing_table(fake_conn_factory):
    conn = fake_conn_factory(results=[[(None,)]])

    with pytest.raises(TableNotFoundError):
        SchemaIntrospector(conn, "sales").get_table_spec("Nope")


def test_build_document_orders_by_foreign_keys(fake_conn_factory):
    """Should put referenced tables before referencing ones."""
    conn = fake_conn_factory(results=_order_results() + _customer_results())

    doc = SchemaIntrospector(conn).build_document(["Order", "Customer"], rows=10, truncate=True)

    assert [t.name for t in doc.tables] == ["Customer", "Order"]
    order = doc.tables[1]
    assert order.truncate_table
    fk = order.get_column("CustomerId").foreign_key
    assert (fk.schema_name, fk.table, fk.column) == ("dbo", "Customer", "CustomerId")


def test_build_document_lists_tables(fake_conn_factory):
    conn = fake_conn_factory(results=[[("Customer",)]] + _customer_results())

    doc = SchemaIntrospector(conn).build_document()

    assert doc.name == "dbo"
    assert [t.name for t in doc.tables] == ["Customer"]


def test_table_spec_is_cached(fake_conn_factory):
    conn = fake_conn_factory(results=_customer_results())
    introspector = SchemaIntrospector(conn)

    assert introspector.get_table_spec("Customer") is introspector.get_table_spec("Customer")
    assert len(conn.executed) == 4


@pytest.mark.parametrize(
    "column, column_type, expected",
    [
        ("email", "varchar", ("Internet", "Email")),
        ("Last_Name", "nvarchar", ("Name", "LastName")),
        ("PostalCode", "char", ("Address", "ZipCode")),
        ("BirthDate", "date", ("Person", "DateOfBirth")),
        ("BirthDate", "varchar", None),
        ("Email", "int", None),
        ("Quantity", "int", None),
    ],
)
def test_infer_masking(column, column_type, expected):
    assert infer_masking(column, column_type) == expected
