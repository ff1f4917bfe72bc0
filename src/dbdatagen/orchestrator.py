"""DataGenerator: fills configured tables with synthetic rows."""

import logging
from collections.abc import Iterable, Sequence
from datetime import date, datetime, time
from typing import Any

from dbdatagen.backends.base import Backend
from dbdatagen.config import Settings
from dbdatagen.document import ColumnSpec, GeneratorDocument, TableSpec
from dbdatagen.exceptions import (
    ExecutionError,
    GenerationError,
    UnsupportedKindError,
    UnsupportedSubtypeError,
    UnsupportedTypeError,
)
from dbdatagen.generators import Category, RandomizerCatalog, ValueGenerator
from dbdatagen.identity import IdentitySequencer
from dbdatagen.models import GenerationRequest, TableResult, UniqueIndex
from dbdatagen.sqltypes import (
    INTEGER_RANGES,
    STRING_TYPES,
    TEMPORAL_TYPES,
    format_temporal,
    is_supported,
    normalize_type,
)
from dbdatagen.uniqueness import UniquenessResolver

logger = logging.getLogger(__name__)

# Referenced values sampled per foreign key column
FOREIGN_KEY_SAMPLE_SIZE = 1000


class DataGenerator:
    """
    Drive generation for every table of a configuration document.

    Tables are processed one after another. Per table: validate every
    column once, truncate if asked, read identity and unique index metadata,
    build the rows, and hand them to the backend for a single transactional
    load. A table that fails is reported in its TableResult and the run
    continues with the next table.

    Example:
        >>> backend = StagingBackend()
        >>> results = DataGenerator(backend).run(load_document("sales.json"))
        >>> [(r.table, r.rows, r.status) for r in results]
        [('Customer', 1000, 'Success')]
    """

    def __init__(
        self,
        backend: Backend,
        settings: Settings | None = None,
        catalog: RandomizerCatalog | None = None,
    ):
        """
        Initialize DataGenerator.

        Args:
            backend: Where rows are loaded (DirectBackend or StagingBackend)
            settings: Runtime settings (defaults from the environment)
            catalog: Randomizer catalog (defaults to the settings' locale and seed)
        """
        self.backend = backend
        self.settings = settings or Settings()
        self.catalog = catalog or RandomizerCatalog.for_locale(
            self.settings.locale, self.settings.seed
        )
        self.generator = ValueGenerator(self.catalog)
        self.resolver = UniquenessResolver(self.settings.max_unique_retries)

    def run(
        self,
        document: GeneratorDocument,
        tables: Iterable[str] | None = None,
        exclude_tables: Iterable[str] | None = None,
        columns: Iterable[str] | None = None,
        exclude_columns: Iterable[str] | None = None,
    ) -> list[TableResult]:
        """
        Generate every selected table of a document.

        Table filters match "Name" or "Schema.Name", column filters match
        column names; all comparisons ignore case.

        Returns:
            One TableResult per selected table, in document order

        Raises:
            ConfigurationError: If the document and the database disagree in
                a way that affects every table (aborts the run)
        """
        selected = [
            table
            for table in document.tables
            if _selected(table, tables, exclude_tables)
        ]
        if not selected:
            logger.warning("No tables selected for generation")

        results = []
        for table in selected:
            if columns or exclude_columns:
                table = table.model_copy(
                    update={
                        "columns": tuple(
                            col
                            for col in table.columns
                            if _matches_filter(col.name, columns, exclude_columns)
                        )
                    }
                )
            results.append(self.generate_table(table))

        loaded = sum(result.rows for result in results)
        failed = [result.table for result in results if not result.succeeded]
        logger.info(
            f"Generated {loaded} rows across {len(results)} table(s)"
            + (f"; not loaded: {', '.join(failed)}" if failed else "")
        )
        return results

    def generate_table(self, table: TableSpec) -> TableResult:
        """
        Generate and load one table.

        Unsupported kinds, generation failures and execution failures are
        reported in the result instead of raised.
        """
        result = TableResult(table.schema_name, table.name)

        try:
            columns, requests = self._validate(table, result)
        except UnsupportedKindError as e:
            logger.warning(f"Skipping table {table.full_name}: {e}")
            result.status = "Skipped"
            result.error = str(e)
            return result
        except GenerationError as e:
            logger.error(f"Failed to generate {table.full_name}: {e}")
            result.status = "Failed"
            result.error = str(e)
            return result

        if not columns:
            logger.warning(f"Skipping table {table.full_name}: no columns to generate")
            result.status = "Skipped"
            result.error = "No columns to generate"
            return result

        logger.info(f"Generating {table.rows} rows for {table.full_name}")
        try:
            if table.truncate_table:
                self.backend.truncate(table)
            rows = self._generate_rows(table, columns, requests)
            identity = table.identity_column
            result.rows = self.backend.insert_rows(
                table,
                columns,
                rows,
                identity_insert=identity is not None and identity in columns,
            )
        except (GenerationError, ExecutionError) as e:
            logger.error(f"Failed to generate {table.full_name}: {e}")
            result.status = "Failed"
            result.error = str(e)
            return result

        logger.info(f"Loaded {result.rows} rows into {table.full_name}")
        return result

    def _validate(
        self, table: TableSpec, result: TableResult
    ) -> tuple[list[ColumnSpec], dict[str, GenerationRequest]]:
        """
        Check every column once, before any row is generated.

        With on_unsupported="table" the first unsupported column aborts the
        table; with "column" the column is dropped and recorded.
        """
        columns = []
        requests = {}
        for col in table.columns:
            try:
                request = self._build_request(col)
            except UnsupportedKindError as e:
                if self.settings.on_unsupported == "table":
                    raise
                logger.warning(f"Skipping column {table.full_name}.{col.name}: {e}")
                result.skipped_columns.append(col.name)
                continue
            columns.append(col)
            if request is not None:
                requests[col.name] = request
        return columns, requests

    def _build_request(self, col: ColumnSpec) -> GenerationRequest | None:
        if not is_supported(col.column_type):
            raise UnsupportedTypeError(col.column_type, col.name)
        if col.identity or col.foreign_key is not None:
            return None
        _check_length_bounds(col)

        options = {
            "min": col.min_value,
            "max": col.max_value,
            "precision": col.precision,
            "character_set": col.character_string,
            "format": col.format,
            "separator": col.separator,
            "value": col.value,
            "locale": self.settings.locale,
            "column": col.name,
        }
        if not col.uses_randomizer:
            return GenerationRequest(data_type=col.column_type, **options)

        if col.masking_type:
            category = Category.parse(col.masking_type, col.name)
        else:
            category = RandomizerCatalog.infer_category(col.sub_type, col.name)
        subtype = (
            RandomizerCatalog.canonical_subtype(category, col.sub_type)
            if col.sub_type
            else None
        )
        if subtype is None:
            raise UnsupportedSubtypeError(col.sub_type, col.name, category.value)
        return GenerationRequest(category=category, subtype=subtype, **options)

    def _generate_rows(
        self,
        table: TableSpec,
        columns: Sequence[ColumnSpec],
        requests: dict[str, GenerationRequest],
    ) -> list[dict[str, Any]]:
        identity = table.identity_column
        sequencer = None
        if identity is not None and identity in columns:
            state = self.backend.read_identity(table, identity)
            sequencer = IdentitySequencer(state, fresh=table.truncate_table)
            logger.debug(
                f"Identity {table.full_name}.{identity.name} starts at {sequencer.peek()}"
            )

        by_name = {col.name: col for col in columns}
        foreign_values = {
            col.name: self._foreign_values(table, col)
            for col in columns
            if col.foreign_key is not None
        }

        def generate(name: str) -> Any:
            return self._column_value(by_name[name], requests, foreign_values)

        indexes = self._unique_indexes(table, by_name, identity)
        unique_columns = {name for index in indexes for name in index.columns}
        column_bounds = {
            name: (requests[name].data_type, requests[name].min, requests[name].max)
            for name in unique_columns
            if name in requests and requests[name].is_native
        }
        unique_tuples = self.resolver.resolve(
            table.full_name, indexes, generate, table.rows, column_bounds
        )

        modulus = self.settings.modulus_factor
        null_counters = dict.fromkeys(by_name, 0)
        rows = []
        for row_number in range(table.rows):
            row: dict[str, Any] = {}
            for col in columns:
                if sequencer is not None and col is identity:
                    row[col.name] = sequencer.next()
                elif col.name in unique_columns:
                    row[col.name] = unique_tuples[row_number][col.name]
                elif col.nullable and self._is_null_slot(null_counters, col.name, modulus):
                    row[col.name] = None
                else:
                    row[col.name] = generate(col.name)
            rows.append(row)

        return rows

    @staticmethod
    def _is_null_slot(counters: dict[str, int], name: str, modulus: int) -> bool:
        """Every modulus-th value of a nullable column is NULL (1-based)."""
        counters[name] += 1
        return counters[name] % modulus == 0

    def _column_value(
        self,
        col: ColumnSpec,
        requests: dict[str, GenerationRequest],
        foreign_values: dict[str, list[Any]],
    ) -> Any:
        if col.name in foreign_values:
            values = foreign_values[col.name]
            return self.catalog.random.choice(values) if values else None

        request = requests[col.name]
        value = self.generator.generate(request)
        column_type = normalize_type(col.column_type)

        if isinstance(value, (datetime, date, time)) and column_type in TEMPORAL_TYPES:
            value = format_temporal(value, column_type)
        elif (
            not request.is_native
            and isinstance(value, str)
            and column_type in STRING_TYPES
            and col.max_value is not None
        ):
            value = value[: int(col.max_value)]
        return value

    def _foreign_values(self, table: TableSpec, col: ColumnSpec) -> list[Any]:
        fk = col.foreign_key
        values = self.backend.read_column_values(
            fk.schema_name, fk.table, fk.column, FOREIGN_KEY_SAMPLE_SIZE
        )
        if not values:
            if not col.nullable:
                raise GenerationError(
                    f"referenced table {fk.schema_name}.{fk.table} has no "
                    f"{fk.column} values to reuse; load it first",
                    col.name,
                )
            logger.warning(
                f"{table.full_name}.{col.name}: {fk.schema_name}.{fk.table} is empty, "
                f"the column will be NULL"
            )
        return values

    def _unique_indexes(
        self,
        table: TableSpec,
        by_name: dict[str, ColumnSpec],
        identity: ColumnSpec | None,
    ) -> list[UniqueIndex]:
        if table.unique_indexes:
            indexes = [
                UniqueIndex(f"UQ_{table.name}_{i}", tuple(cols))
                for i, cols in enumerate(table.unique_indexes, start=1)
            ]
        elif table.has_unique_index:
            indexes = self.backend.read_unique_indexes(table)
        else:
            return []

        usable = []
        for index in indexes:
            if identity is not None and identity.name in index.columns:
                # Identity values are already distinct
                logger.debug(f"Index {index.name} contains the identity column, skipped")
                continue
            missing = [name for name in index.columns if name not in by_name]
            if missing:
                logger.warning(
                    f"Index {index.name} on {table.full_name} covers columns that are "
                    f"not generated ({', '.join(missing)}), uniqueness is not enforced"
                )
                continue
            usable.append(index)
        return usable


def _check_length_bounds(col: ColumnSpec) -> None:
    """
    Reject bounds that must be whole numbers but are not.

    Integer and character columns read MinValue/MaxValue as numbers or
    lengths. Category values only use MaxValue, to truncate text.

    Raises:
        GenerationError: If such a bound is not a whole number
    """
    column_type = normalize_type(col.column_type)
    if column_type in INTEGER_RANGES or (
        column_type in STRING_TYPES and not col.uses_randomizer
    ):
        bounds = {"MinValue": col.min_value, "MaxValue": col.max_value}
    elif column_type in STRING_TYPES:
        bounds = {"MaxValue": col.max_value}
    else:
        return

    for key, value in bounds.items():
        if value is None:
            continue
        try:
            int(value)
        except (TypeError, ValueError) as e:
            raise GenerationError(
                f"{key} {value!r} is not a whole number for {column_type}", col.name
            ) from e


def _matches_filter(
    name: str, include: Iterable[str] | None, exclude: Iterable[str] | None
) -> bool:
    lowered = name.lower()
    if include and lowered not in {n.lower() for n in include}:
        return False
    if exclude and lowered in {n.lower() for n in exclude}:
        return False
    return True


def _selected(
    table: TableSpec, include: Iterable[str] | None, exclude: Iterable[str] | None
) -> bool:
    names = {table.name.lower(), table.full_name.lower()}
    if include and not names & {n.lower() for n in include}:
        return False
    if exclude and names & {n.lower() for n in exclude}:
        return False
    return True
