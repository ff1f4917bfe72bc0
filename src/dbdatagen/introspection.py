"""SQL Server schema introspection for writing configuration documents."""

import logging
import re
from contextlib import closing
from typing import Any

from dbdatagen.backends.direct import UNIQUE_INDEX_QUERY
from dbdatagen.dependency import DependencyGraph
from dbdatagen.document import ColumnSpec, ForeignKeySpec, GeneratorDocument, TableSpec
from dbdatagen.exceptions import TableNotFoundError
from dbdatagen.sql import qualified_name
from dbdatagen.sqltypes import INTEGER_RANGES, STRING_TYPES, UNICODE_TYPES, is_supported

logger = logging.getLogger(__name__)

DEFAULT_ROWS = 1000

# Longest value written for (n)varchar(max), text and ntext columns
MAX_STRING_LENGTH = 255

# Database types the server fills in itself
SERVER_GENERATED_TYPES = frozenset({"timestamp", "rowversion"})

# Normalized column name → (MaskingType, SubType)
COLUMN_MAPPINGS = {
    "email": ("Internet", "Email"),
    "emailaddress": ("Internet", "Email"),
    "firstname": ("Name", "FirstName"),
    "givenname": ("Name", "FirstName"),
    "lastname": ("Name", "LastName"),
    "surname": ("Name", "LastName"),
    "familyname": ("Name", "LastName"),
    "fullname": ("Name", "FullName"),
    "middlename": ("Name", "FirstName"),
    "title": ("Name", "Prefix"),
    "jobtitle": ("Name", "JobTitle"),
    "company": ("Company", "CompanyName"),
    "companyname": ("Company", "CompanyName"),
    "phone": ("Phone", "PhoneNumber"),
    "phonenumber": ("Phone", "PhoneNumber"),
    "telephone": ("Phone", "PhoneNumber"),
    "mobile": ("Phone", "PhoneNumber"),
    "address": ("Address", "StreetAddress"),
    "addressline1": ("Address", "StreetAddress"),
    "addressline2": ("Address", "SecondaryAddress"),
    "street": ("Address", "StreetAddress"),
    "streetaddress": ("Address", "StreetAddress"),
    "city": ("Address", "City"),
    "state": ("Address", "State"),
    "stateprovince": ("Address", "State"),
    "country": ("Address", "Country"),
    "countrycode": ("Address", "CountryCode"),
    "zip": ("Address", "ZipCode"),
    "zipcode": ("Address", "ZipCode"),
    "postalcode": ("Address", "ZipCode"),
    "latitude": ("Address", "Latitude"),
    "longitude": ("Address", "Longitude"),
    "url": ("Internet", "Url"),
    "website": ("Internet", "Url"),
    "username": ("Internet", "UserName"),
    "login": ("Internet", "UserName"),
    "loginid": ("Internet", "UserName"),
    "password": ("Internet", "Password"),
    "ipaddress": ("Internet", "Ip"),
    "macaddress": ("Internet", "Mac"),
    "description": ("Lorem", "Sentence"),
    "comment": ("Lorem", "Sentence"),
    "comments": ("Lorem", "Sentence"),
    "notes": ("Lorem", "Paragraph"),
    "bio": ("Lorem", "Paragraph"),
    "iban": ("Finance", "Iban"),
    "creditcard": ("Finance", "CreditCardNumber"),
    "creditcardnumber": ("Finance", "CreditCardNumber"),
    "cardnumber": ("Finance", "CreditCardNumber"),
    "currency": ("Finance", "Currency"),
    "currencycode": ("Finance", "Currency"),
    "accountnumber": ("Finance", "Account"),
    "gender": ("Person", "Gender"),
    "birthdate": ("Person", "DateOfBirth"),
    "dateofbirth": ("Person", "DateOfBirth"),
    "department": ("Commerce", "Department"),
    "productname": ("Commerce", "ProductName"),
    "filename": ("System", "FileName"),
    "mimetype": ("System", "MimeType"),
}

# Mappings whose values are dates, applied only to temporal columns
TEMPORAL_MAPPINGS = {"Person.DateOfBirth"}

COLUMNS_QUERY = """
    SELECT
        c.name,
        t.name AS type_name,
        t.is_user_defined,
        c.max_length,
        c.precision,
        c.scale,
        c.is_nullable,
        c.is_identity,
        c.is_computed
    FROM sys.columns AS c
    JOIN sys.types AS t ON t.user_type_id = c.user_type_id
    WHERE c.object_id = OBJECT_ID(?)
    ORDER BY c.column_id
"""

FOREIGN_KEYS_QUERY = """
    SELECT
        pc.name,
        OBJECT_SCHEMA_NAME(fkc.referenced_object_id),
        OBJECT_NAME(fkc.referenced_object_id),
        rc.name
    FROM sys.foreign_key_columns AS fkc
    JOIN sys.columns AS pc
        ON pc.object_id = fkc.parent_object_id AND pc.column_id = fkc.parent_column_id
    JOIN sys.columns AS rc
        ON rc.object_id = fkc.referenced_object_id AND rc.column_id = fkc.referenced_column_id
    WHERE fkc.parent_object_id = OBJECT_ID(?)
    ORDER BY fkc.constraint_column_id
"""


def _normalize_name(column_name: str) -> str:
    return re.sub(r"[^a-z0-9]", "", column_name.lower())


def infer_masking(column_name: str, column_type: str) -> tuple[str, str] | None:
    """
    Guess (MaskingType, SubType) from a column name.

    Examples:
        >>> infer_masking("EmailAddress", "nvarchar")
        ('Internet', 'Email')
        >>> infer_masking("first_name", "varchar")
        ('Name', 'FirstName')
        >>> infer_masking("Quantity", "int") is None
        True
    """
    mapping = COLUMN_MAPPINGS.get(_normalize_name(column_name))
    if mapping is None:
        return None
    if ".".join(mapping) in TEMPORAL_MAPPINGS:
        return mapping if column_type in ("date", "datetime", "datetime2", "smalldatetime") else None
    # Everything else produces text
    return mapping if column_type in STRING_TYPES else None


class SchemaIntrospector:
    """Introspect a SQL Server schema with caching."""

    def __init__(self, conn: Any, schema: str = "dbo"):
        self.conn = conn
        self.schema = schema
        self._table_cache: dict[str, TableSpec] = {}

    def get_tables(self) -> list[str]:
        """Names of the base tables in the schema."""
        with closing(self.conn.cursor()) as cur:
            cur.execute(
                """
                SELECT TABLE_NAME
                FROM INFORMATION_SCHEMA.TABLES
                WHERE TABLE_SCHEMA = ? AND TABLE_TYPE = 'BASE TABLE'
                ORDER BY TABLE_NAME
                """,
                (self.schema,),
            )
            return [row[0] for row in cur.fetchall()]

    def get_table_spec(
        self, table_name: str, rows: int = DEFAULT_ROWS, truncate: bool = False
    ) -> TableSpec:
        """
        Describe one table as a TableSpec (cached).

        Raises:
            TableNotFoundError: If the table does not exist in the schema
        """
        if table_name in self._table_cache:
            return self._table_cache[table_name]

        name = qualified_name(self.schema, table_name)
        with closing(self.conn.cursor()) as cur:
            cur.execute("SELECT OBJECT_ID(?, 'U')", (name,))
            if cur.fetchone()[0] is None:
                raise TableNotFoundError(table_name, self.schema)

            cur.execute(COLUMNS_QUERY, (name,))
            column_rows = cur.fetchall()
            cur.execute(FOREIGN_KEYS_QUERY, (name,))
            foreign_keys = {
                row[0]: ForeignKeySpec(Schema=row[1], Table=row[2], Column=row[3])
                for row in cur.fetchall()
            }
            cur.execute(UNIQUE_INDEX_QUERY, (name,))
            has_unique_index = bool(cur.fetchall())

        columns = []
        for row in column_rows:
            column = self._column_spec(table_name, row, foreign_keys.get(row[0]))
            if column is not None:
                columns.append(column)

        table = TableSpec(
            Schema=self.schema,
            Name=table_name,
            Rows=rows,
            HasUniqueIndex=has_unique_index,
            TruncateTable=truncate,
            Columns=tuple(columns),
        )
        self._table_cache[table_name] = table
        return table

    def build_document(
        self,
        tables: list[str] | None = None,
        rows: int = DEFAULT_ROWS,
        truncate: bool = False,
        name: str | None = None,
    ) -> GeneratorDocument:
        """
        Build a configuration document for some or all tables of the schema.

        Tables are ordered so referenced tables come before the tables whose
        foreign keys point at them.
        """
        table_names = tables or self.get_tables()
        specs = {t: self.get_table_spec(t, rows=rows, truncate=truncate) for t in table_names}

        graph = DependencyGraph()
        for spec in specs.values():
            graph.add_table(spec.name)
            for col in spec.columns:
                fk = col.foreign_key
                if fk is not None and fk.schema_name == self.schema and fk.table in specs:
                    graph.add_dependency(spec.name, fk.table)

        ordered = [specs[t] for t in graph.topological_sort()]
        logger.info(f"Described {len(ordered)} table(s) in schema '{self.schema}'")
        return GeneratorDocument(Name=name or self.schema, Tables=tuple(ordered))

    def clear_cache(self) -> None:
        """Clear cached introspection data."""
        self._table_cache.clear()

    def _column_spec(
        self, table_name: str, row: tuple, foreign_key: ForeignKeySpec | None
    ) -> ColumnSpec | None:
        (
            column_name,
            type_name,
            is_user_defined,
            max_length,
            precision,
            scale,
            is_nullable,
            is_identity,
            is_computed,
        ) = row
        column_type = "userdefineddatatype" if is_user_defined else type_name.lower()

        if is_computed or column_type in SERVER_GENERATED_TYPES:
            logger.debug(f"{table_name}.{column_name} is filled by the server, skipped")
            return None
        if not is_supported(column_type):
            logger.warning(
                f"{table_name}.{column_name} has unsupported type '{column_type}', "
                f"left out of the configuration"
            )
            return None

        fields: dict[str, Any] = {
            "Name": column_name,
            "ColumnType": column_type,
            "Nullable": bool(is_nullable),
            "Identity": bool(is_identity),
        }
        if foreign_key is not None:
            fields["ForeignKey"] = foreign_key
        elif column_type in STRING_TYPES:
            fields["MinValue"] = 1
            fields["MaxValue"] = self._string_length(column_type, max_length)
            masking = infer_masking(column_name, column_type)
            if masking is not None:
                fields["MaskingType"], fields["SubType"] = masking
        elif column_type in ("decimal", "numeric"):
            fields["MinValue"] = 0
            fields["MaxValue"] = min(10 ** (precision - scale) - 1, 1000) if precision > scale else 0
            fields["Precision"] = scale
        elif column_type in INTEGER_RANGES and not is_identity:
            fields["MinValue"] = max(INTEGER_RANGES[column_type][0], 0)
        else:
            masking = infer_masking(column_name, column_type)
            if masking is not None:
                fields["MaskingType"], fields["SubType"] = masking

        return ColumnSpec(**fields)

    @staticmethod
    def _string_length(column_type: str, max_length: int) -> int:
        # max_length is in bytes, -1 for (max); text and ntext report 16
        if max_length == -1 or column_type in ("text", "ntext"):
            return MAX_STRING_LENGTH
        if column_type in UNICODE_TYPES:
            return max_length // 2
        return max_length
