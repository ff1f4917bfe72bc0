"""Interface shared by the database and in-memory backends."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from dbdatagen.document import ColumnSpec, TableSpec
from dbdatagen.identity import IdentityState
from dbdatagen.models import UniqueIndex


class Backend(ABC):
    """
    Storage boundary of the orchestrator.

    The orchestrator never builds or runs SQL itself; it asks a backend to
    truncate, to read identity and index metadata, and to load rows.
    """

    @abstractmethod
    def truncate(self, table: TableSpec) -> None:
        """Remove every row of the table and reset its identity."""

    @abstractmethod
    def read_identity(self, table: TableSpec, column: ColumnSpec) -> IdentityState:
        """Read seed, increment, current value and row count once per table."""

    @abstractmethod
    def read_unique_indexes(self, table: TableSpec) -> list[UniqueIndex]:
        """List the table's unique indexes with key columns in key order."""

    @abstractmethod
    def read_column_values(
        self, schema: str, table: str, column: str, limit: int = 1000
    ) -> list[Any]:
        """Existing distinct non-NULL values of a column (for foreign keys)."""

    @abstractmethod
    def insert_rows(
        self,
        table: TableSpec,
        columns: Sequence[ColumnSpec],
        rows: Sequence[dict[str, Any]],
        identity_insert: bool = False,
    ) -> int:
        """
        Load rows in a single transaction.

        Returns:
            Number of rows inserted

        Raises:
            ExecutionError: If any statement fails (nothing is committed)
        """
