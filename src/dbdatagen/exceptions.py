"""Custom exceptions with helpful error messages."""

from typing import Any


class DataGenError(Exception):
    """Base exception for dbdatagen errors."""

    pass


class ConfigurationError(DataGenError):
    """Configuration document or settings are malformed or missing."""

    pass


class UnsupportedKindError(DataGenError):
    """A column asks for a type, masking type or subtype outside the supported sets."""

    kind = "kind"

    def __init__(self, value: Any, column: str | None = None, detail: str = ""):
        self.value = value
        self.column = column
        where = f" for column '{column}'" if column else ""
        message = f"Unsupported {self.kind} '{value}'{where}."
        if detail:
            message = f"{message}\n\n{detail}"
        super().__init__(message)


class UnsupportedTypeError(UnsupportedKindError):
    """Native column type is not in the supported type set."""

    kind = "column type"

    def __init__(self, value: Any, column: str | None = None):
        from dbdatagen.sqltypes import SUPPORTED_TYPES

        super().__init__(
            value,
            column,
            f"Supported types: {', '.join(sorted(SUPPORTED_TYPES))}",
        )


class UnsupportedCategoryError(UnsupportedKindError):
    """Masking type (randomizer category) is unknown."""

    kind = "masking type"

    def __init__(self, value: Any, column: str | None = None):
        from dbdatagen.generators.catalog import Category

        super().__init__(
            value,
            column,
            f"Supported masking types: {', '.join(c.value for c in Category)}",
        )


class UnsupportedSubtypeError(UnsupportedKindError):
    """Subtype is unknown for the requested category."""

    kind = "subtype"

    def __init__(self, value: Any, column: str | None = None, category: str | None = None):
        detail = ""
        if category:
            detail = (
                f"Suggestions:\n"
                f"1. List the subtypes of '{category}': dbdatagen types --category {category}\n"
                f"2. Check the SubType spelling in the configuration document"
            )
        super().__init__(value, column, detail)


class GenerationError(DataGenError):
    """An underlying generator failed to produce a value."""

    def __init__(self, message: str, column: str | None = None):
        self.column = column
        if column:
            message = f"Could not generate value for column '{column}': {message}"
        super().__init__(message)


class UniqueValueSpaceExhaustedError(GenerationError):
    """Could not produce a tuple that is unique for every unique index."""

    def __init__(self, columns: list[str], table: str, reason: str):
        self.columns = columns
        self.table = table
        cols_str = ", ".join(columns)
        super().__init__(
            f"Unique index ({cols_str}) on table '{table}': {reason}\n\n"
            f"Suggestions:\n"
            f"1. Lower the Rows count for '{table}'\n"
            f"2. Widen MinValue/MaxValue of the indexed columns\n"
            f"3. Raise max_unique_retries if the value space is large but crowded"
        )


class ExecutionError(DataGenError):
    """A statement failed at the storage layer; the table was not committed."""

    def __init__(self, table: str, error: Exception, sql: str | None = None):
        self.table = table
        self.sql = sql
        self.__cause__ = error
        super().__init__(f"Failed to load table '{table}': {error}")


class TableNotFoundError(DataGenError):
    """Table does not exist in the database."""

    def __init__(self, table: str, schema: str):
        super().__init__(
            f"Table '{table}' not found in schema '{schema}'.\n\n"
            f"Suggestions:\n"
            f"1. Check table name spelling\n"
            f"2. Use SchemaIntrospector.get_tables() to see available tables\n"
            f"3. Check the database in the connection string"
        )
