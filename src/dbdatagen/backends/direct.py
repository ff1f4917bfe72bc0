"""Direct backend - runs T-SQL against a live SQL Server connection."""

import logging
from collections.abc import Sequence
from contextlib import closing
from typing import Any

from dbdatagen.backends.base import Backend
from dbdatagen.document import ColumnSpec, TableSpec
from dbdatagen.exceptions import ConfigurationError, ExecutionError
from dbdatagen.identity import IdentityState
from dbdatagen.models import UniqueIndex
from dbdatagen.sql import (
    MAX_ROWS_PER_INSERT,
    build_load_statements,
    build_truncate,
    qualified_name,
    quote_identifier,
)

logger = logging.getLogger(__name__)

IDENTITY_QUERY = "SELECT IDENT_SEED(?), IDENT_INCR(?), IDENT_CURRENT(?)"

UNIQUE_INDEX_QUERY = """
    SELECT i.name, c.name
    FROM sys.indexes AS i
    JOIN sys.index_columns AS ic
        ON ic.object_id = i.object_id AND ic.index_id = i.index_id
    JOIN sys.columns AS c
        ON c.object_id = ic.object_id AND c.column_id = ic.column_id
    WHERE i.object_id = OBJECT_ID(?)
        AND i.is_unique = 1
        AND ic.is_included_column = 0
    ORDER BY i.index_id, ic.key_ordinal
"""


class DirectBackend(Backend):
    """
    Load generated rows with multi-row INSERT statements.

    Works over any DB-API 2.0 connection with qmark parameters; in practice
    a pyodbc connection to SQL Server opened with autocommit off.
    """

    def __init__(self, conn: Any, batch_size: int = MAX_ROWS_PER_INSERT):
        """
        Initialize backend.

        Args:
            conn: DB-API connection (pyodbc for SQL Server)
            batch_size: Rows per INSERT statement
        """
        self.conn = conn
        self.batch_size = batch_size

    def truncate(self, table: TableSpec) -> None:
        self._execute_all(table, [build_truncate(table.schema_name, table.name)])
        logger.info(f"Truncated {table.full_name}")

    def read_identity(self, table: TableSpec, column: ColumnSpec) -> IdentityState:
        name = qualified_name(table.schema_name, table.name)
        with closing(self.conn.cursor()) as cur:
            cur.execute(IDENTITY_QUERY, (name, name, name))
            seed, increment, current = cur.fetchone()
            if seed is None:
                raise ConfigurationError(
                    f"Column '{column.name}' is marked Identity but "
                    f"{table.full_name} has no identity column.\n\n"
                    f"Suggestions:\n"
                    f"1. Set Identity to false for '{column.name}'\n"
                    f"2. Regenerate the configuration from the database"
                )
            cur.execute(f"SELECT COUNT_BIG(*) FROM {name}")
            (row_count,) = cur.fetchone()

        state = IdentityState(
            seed=int(seed),
            increment=int(increment),
            current=int(current) if current is not None else None,
            row_count=int(row_count),
        )
        logger.debug(f"Identity of {table.full_name}: {state}")
        return state

    def read_unique_indexes(self, table: TableSpec) -> list[UniqueIndex]:
        with closing(self.conn.cursor()) as cur:
            cur.execute(UNIQUE_INDEX_QUERY, (qualified_name(table.schema_name, table.name),))
            results = cur.fetchall()

        columns_by_index: dict[str, list[str]] = {}
        for index_name, column_name in results:
            columns_by_index.setdefault(index_name, []).append(column_name)

        return [UniqueIndex(name, tuple(cols)) for name, cols in columns_by_index.items()]

    def read_column_values(
        self, schema: str, table: str, column: str, limit: int = 1000
    ) -> list[Any]:
        column_name = quote_identifier(column)
        sql = (
            f"SELECT DISTINCT TOP ({int(limit)}) {column_name} "
            f"FROM {qualified_name(schema, table)} WHERE {column_name} IS NOT NULL"
        )
        with closing(self.conn.cursor()) as cur:
            cur.execute(sql)
            return [row[0] for row in cur.fetchall()]

    def insert_rows(
        self,
        table: TableSpec,
        columns: Sequence[ColumnSpec],
        rows: Sequence[dict[str, Any]],
        identity_insert: bool = False,
    ) -> int:
        if not rows:
            return 0

        statements = build_load_statements(
            table.schema_name,
            table.name,
            [(col.name, col.column_type) for col in columns],
            rows,
            identity_insert=identity_insert,
            batch_size=self.batch_size,
        )
        self._execute_all(table, statements)
        return len(rows)

    def _execute_all(self, table: TableSpec, statements: list[str]) -> None:
        """Run statements in one transaction; roll back on the first failure."""
        sql = None
        try:
            with closing(self.conn.cursor()) as cur:
                for sql in statements:
                    logger.debug(f"Executing on {table.full_name}:\n{sql}")
                    cur.execute(sql)
            self.conn.commit()
        except Exception as e:
            self.conn.rollback()
            logger.debug(f"Failed SQL for {table.full_name}:\n{sql}")
            raise ExecutionError(table.full_name, e, sql=sql) from e
