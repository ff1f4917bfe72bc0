"""Unique index resolution for generated rows."""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from dbdatagen.exceptions import UniqueValueSpaceExhaustedError
from dbdatagen.models import UniqueIndex
from dbdatagen.sqltypes import type_cardinality

logger = logging.getLogger(__name__)

# Maximum regeneration attempts per row before giving up
MAX_UNIQUE_RETRIES = 1000


class UniquenessResolver:
    """
    Generate row tuples whose projection onto every unique index is distinct.

    Each candidate tuple is compared against the projections accepted so
    far; when an index collides, only that index's columns are regenerated.
    The retry count is capped per row so an impossible request (10,000
    unique values from a 100-value range) fails instead of hanging.
    """

    def __init__(self, max_retries: int = MAX_UNIQUE_RETRIES):
        self.max_retries = max_retries

    def resolve(
        self,
        table: str,
        indexes: Sequence[UniqueIndex],
        generate: Callable[[str], Any],
        rows: int,
        column_bounds: dict[str, tuple[str, Any, Any]] | None = None,
    ) -> list[dict[str, Any]]:
        """
        Build `rows` unique tuples.

        Args:
            table: Table name (for errors and logging)
            indexes: Unique indexes to satisfy
            generate: Produces one fresh value for a column name
            rows: Number of tuples to produce
            column_bounds: Column → (type, min, max), used to reject value
                spaces that are smaller than `rows` before generating

        Returns:
            One dict per row holding a value for every indexed column

        Raises:
            UniqueValueSpaceExhaustedError: If the value space is too small
                or a row cannot be made unique within max_retries attempts
        """
        indexes = [index for index in indexes if index.columns]
        if not indexes or rows <= 0:
            return [{} for _ in range(max(rows, 0))]

        self._check_cardinality(table, indexes, rows, column_bounds or {})

        columns = list(dict.fromkeys(col for index in indexes for col in index.columns))
        accepted: dict[str, set[tuple[Any, ...]]] = {index.name: set() for index in indexes}
        tuples: list[dict[str, Any]] = []
        total_retries = 0

        for _ in range(rows):
            candidate = {col: generate(col) for col in columns}
            retries = 0
            while True:
                colliding = [
                    index for index in indexes if index.key(candidate) in accepted[index.name]
                ]
                if not colliding:
                    break
                if retries == self.max_retries:
                    index = colliding[0]
                    raise UniqueValueSpaceExhaustedError(
                        list(index.columns),
                        table,
                        f"no unique tuple after {self.max_retries} attempts "
                        f"({len(tuples)} of {rows} rows generated)",
                    )
                for index in colliding:
                    for col in index.columns:
                        candidate[col] = generate(col)
                retries += 1

            total_retries += retries
            for index in indexes:
                accepted[index.name].add(index.key(candidate))
            tuples.append(candidate)

        logger.debug(
            f"Resolved {rows} unique tuples for '{table}' "
            f"over {len(indexes)} index(es) with {total_retries} retries"
        )
        return tuples

    @staticmethod
    def _check_cardinality(
        table: str,
        indexes: Sequence[UniqueIndex],
        rows: int,
        column_bounds: dict[str, tuple[str, Any, Any]],
    ) -> None:
        for index in indexes:
            space = 1
            for col in index.columns:
                if col not in column_bounds:
                    space = None
                    break
                size = type_cardinality(*column_bounds[col])
                if size is None:
                    space = None
                    break
                space *= size
            if space is not None and space < rows:
                raise UniqueValueSpaceExhaustedError(
                    list(index.columns),
                    table,
                    f"only {space} distinct values available for {rows} rows",
                )
