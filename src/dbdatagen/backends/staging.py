"""Staging backend - in-memory backend for testing and dry runs."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from dbdatagen.backends.base import Backend
from dbdatagen.document import ColumnSpec, TableSpec
from dbdatagen.exceptions import ExecutionError
from dbdatagen.identity import IdentityState
from dbdatagen.models import UniqueIndex
from dbdatagen.sql import MAX_ROWS_PER_INSERT, build_load_statements, build_truncate

logger = logging.getLogger(__name__)


@dataclass
class _Identity:
    column: str
    seed: int = 1
    increment: int = 1
    current: int | None = None


def _table_key(name: str) -> str:
    return name if "." in name else f"dbo.{name}"


class StagingBackend(Backend):
    """
    In-memory backend for running generation without a database.

    Simulates database behavior:
    - Identity columns with seed, increment and current value
    - TRUNCATE resetting rows and identity
    - UNIQUE indexes validated on insert (the whole batch fails on a duplicate)
    - Rows stored in memory, and every emitted statement recorded

    Use case: Fast unit tests and --dry-run, where the statements are
    printed instead of executed.
    """

    def __init__(self, batch_size: int = MAX_ROWS_PER_INSERT):
        """Initialize staging backend with empty state."""
        self.batch_size = batch_size
        self.statements: list[str] = []
        self._data: dict[str, list[dict[str, Any]]] = {}
        self._identities: dict[str, _Identity] = {}
        self._unique_indexes: dict[str, list[UniqueIndex]] = {}

    def register_identity(
        self, table_name: str, column: str, seed: int = 1, increment: int = 1
    ) -> None:
        """Declare an identity column, as CREATE TABLE would."""
        self._identities[_table_key(table_name)] = _Identity(column, seed, increment)

    def register_unique_index(
        self, table_name: str, columns: Sequence[str], name: str | None = None
    ) -> None:
        """Declare a unique index over columns, in key order."""
        key = _table_key(table_name)
        indexes = self._unique_indexes.setdefault(key, [])
        name = name or f"UQ_{key.split('.')[-1]}_{'_'.join(columns)}"
        indexes.append(UniqueIndex(name, tuple(columns)))

    def add_rows(self, table_name: str, rows: Sequence[dict[str, Any]]) -> None:
        """Seed existing rows without recording statements (identity advances)."""
        key = _table_key(table_name)
        stored = [dict(row) for row in rows]
        self._assign_identity(key, stored, explicit=False)
        self._data.setdefault(key, []).extend(stored)

    def truncate(self, table: TableSpec) -> None:
        key = _table_key(table.full_name)
        self.statements.append(build_truncate(table.schema_name, table.name))
        self._data.pop(key, None)
        if key in self._identities:
            self._identities[key].current = None

    def read_identity(self, table: TableSpec, column: ColumnSpec) -> IdentityState:
        key = _table_key(table.full_name)
        identity = self._identities.get(key)
        row_count = len(self._data.get(key, []))
        if identity is None:
            return IdentityState(row_count=row_count)
        return IdentityState(
            seed=identity.seed,
            increment=identity.increment,
            current=identity.current,
            row_count=row_count,
        )

    def read_unique_indexes(self, table: TableSpec) -> list[UniqueIndex]:
        return list(self._unique_indexes.get(_table_key(table.full_name), []))

    def read_column_values(
        self, schema: str, table: str, column: str, limit: int = 1000
    ) -> list[Any]:
        rows = self._data.get(f"{schema}.{table}", [])
        values = [row.get(column) for row in rows if row.get(column) is not None]
        return list(dict.fromkeys(values))[:limit]

    def insert_rows(
        self,
        table: TableSpec,
        columns: Sequence[ColumnSpec],
        rows: Sequence[dict[str, Any]],
        identity_insert: bool = False,
    ) -> int:
        if not rows:
            return 0

        key = _table_key(table.full_name)
        names = [col.name for col in columns]
        staged = [{name: row.get(name) for name in names} for row in rows]

        # Validate against what is already stored before touching any state
        self._check_unique(table, key, staged)
        statements = build_load_statements(
            table.schema_name,
            table.name,
            [(col.name, col.column_type) for col in columns],
            staged,
            identity_insert=identity_insert,
            batch_size=self.batch_size,
        )

        self._assign_identity(key, staged, explicit=identity_insert)
        self._data.setdefault(key, []).extend(staged)
        self.statements.extend(statements)
        logger.debug(f"Staged {len(staged)} rows for {table.full_name}")
        return len(staged)

    def get_data(self, table_name: str) -> list[dict[str, Any]]:
        """
        Get in-memory data for inspection.

        Args:
            table_name: "schema.table", or a bare name in the dbo schema

        Returns:
            List of row dicts for the table
        """
        return self._data.get(_table_key(table_name), [])

    def clear(self):
        """Clear all in-memory data, statements and identity values."""
        self._data.clear()
        self.statements.clear()
        for identity in self._identities.values():
            identity.current = None

    def _check_unique(
        self, table: TableSpec, key: str, staged: list[dict[str, Any]]
    ) -> None:
        for index in self._unique_indexes.get(key, []):
            seen = {index.key(row) for row in self._data.get(key, [])}
            for row in staged:
                projected = index.key(row)
                if projected in seen:
                    raise ExecutionError(
                        table.full_name,
                        ValueError(
                            f"Cannot insert duplicate key in object '{table.full_name}' "
                            f"with unique index '{index.name}'. "
                            f"The duplicate key value is {index.project(row)}."
                        ),
                    )
                seen.add(projected)

    def _assign_identity(
        self, key: str, rows: list[dict[str, Any]], explicit: bool
    ) -> None:
        identity = self._identities.get(key)
        if identity is None:
            return
        for row in rows:
            if explicit and row.get(identity.column) is not None:
                value = row[identity.column]
            else:
                value = (
                    identity.seed
                    if identity.current is None
                    else identity.current + identity.increment
                )
                row[identity.column] = value
            if identity.current is None or value > identity.current:
                identity.current = value
