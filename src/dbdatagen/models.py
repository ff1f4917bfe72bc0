"""Data models and type definitions."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from dbdatagen.sqltypes import is_supported, normalize_type

if TYPE_CHECKING:
    from dbdatagen.generators.catalog import Category


@dataclass
class GenerationRequest:
    """
    Describes one value to produce.

    Exactly one of `data_type` (a native column type tag) or
    `category` + `subtype` (a randomizer pair such as Internet/Password)
    must be set.

    Attributes:
        data_type: Native SQL type tag, e.g. "int" or "datetime2"
        category: Randomizer category
        subtype: Randomizer subtype name, e.g. "ZipCode"
        min: Lower bound (length, number or date depending on the kind)
        max: Upper bound
        precision: Decimal digits for decimal-like values
        character_set: Allowed characters for random strings
        format: Placeholder template where '#' marks a generated character
        separator: Separator for list-like outputs such as MAC addresses
        value: Input value for transforming subtypes (Shuffle, Replace)
        locale: Generation dictionary, default "en"
        column: Column name, used in error messages only
    """

    data_type: str | None = None
    category: "Category | None" = None
    subtype: str | None = None
    min: Any = None
    max: Any = None
    precision: int | None = None
    character_set: str | None = None
    format: str | None = None
    separator: str | None = None
    value: Any = None
    locale: str = "en"
    column: str | None = None

    def __post_init__(self):
        has_type = bool(self.data_type)
        has_pair = self.category is not None or bool(self.subtype)
        if has_type == has_pair:
            raise ValueError(
                "GenerationRequest needs exactly one of data_type or category/subtype, "
                f"got data_type={self.data_type!r}, category={self.category!r}, "
                f"subtype={self.subtype!r}"
            )
        if self.data_type:
            self.data_type = normalize_type(self.data_type)

    @property
    def is_native(self) -> bool:
        return bool(self.data_type)

    @property
    def kind(self) -> str:
        """Printable kind: the type tag or 'Category.SubType'."""
        if self.data_type:
            return self.data_type
        if self.category is None:
            return self.subtype
        return f"{self.category.value}.{self.subtype}"

    @classmethod
    def parse(cls, kind: str, **options: Any) -> "GenerationRequest":
        """
        Build a request from a single kind string.

        A bare name that is not a native type but is declared by some
        category ("ZipCode") becomes a subtype-only request; the category is
        inferred at generation time.

        Examples:
            >>> GenerationRequest.parse("int", min=1, max=10)
            >>> GenerationRequest.parse("Internet.Password", max=12)
            >>> GenerationRequest.parse("ZipCode", format="#####")
        """
        from dbdatagen.generators.catalog import Category, find_subtype

        if "." in kind:
            category, subtype = kind.split(".", 1)
            return cls(category=Category.parse(category), subtype=subtype, **options)
        if not is_supported(kind) and any(find_subtype(c, kind) for c in Category):
            return cls(subtype=kind, **options)
        return cls(data_type=kind, **options)


@dataclass(frozen=True)
class UniqueIndex:
    """
    A unique index registered on a table.

    Attributes:
        name: Index name
        columns: Key columns in index order
    """

    name: str
    columns: tuple[str, ...]

    def project(self, row: dict[str, Any]) -> tuple[Any, ...]:
        """Restrict a row to the index key columns."""
        return tuple(row.get(col) for col in self.columns)

    def key(self, row: dict[str, Any]) -> tuple[Any, ...]:
        """
        Projection compared the way SQL Server's default collations compare.

        Strings ignore case and trailing spaces, so "aB " and "Ab" collide.
        """
        return tuple(
            value.rstrip(" ").casefold() if isinstance(value, str) else value
            for value in self.project(row)
        )


@dataclass
class TableResult:
    """
    Outcome of one table's generation pass.

    Attributes:
        schema: Table schema
        table: Table name
        rows: Number of rows inserted
        status: "Success", "Skipped" or "Failed"
        error: Error message when the table did not load
        skipped_columns: Columns dropped because their kind is unsupported
    """

    schema: str
    table: str
    rows: int = 0
    status: str = "Success"
    error: str | None = None
    skipped_columns: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == "Success"
