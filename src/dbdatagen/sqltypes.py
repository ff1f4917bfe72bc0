"""Native SQL Server type table: supported tags, ranges and canonical formats."""

from datetime import date, datetime, time
from decimal import Decimal

SUPPORTED_TYPES = frozenset(
    {
        "bigint",
        "bit",
        "bool",
        "char",
        "date",
        "datetime",
        "datetime2",
        "decimal",
        "int",
        "float",
        "guid",
        "money",
        "numeric",
        "nchar",
        "ntext",
        "nvarchar",
        "real",
        "smalldatetime",
        "smallint",
        "text",
        "time",
        "tinyint",
        "uniqueidentifier",
        "userdefineddatatype",
        "varchar",
    }
)

INTEGER_RANGES: dict[str, tuple[int, int]] = {
    "bigint": (-9223372036854775808, 9223372036854775807),
    "int": (-2147483648, 2147483647),
    "smallint": (-32768, 32767),
    "tinyint": (0, 255),
}

MONEY_RANGE = (Decimal("-922337203685477.5808"), Decimal("922337203685477.5807"))

DECIMAL_TYPES = frozenset({"decimal", "numeric", "money", "float", "real"})
BOOLEAN_TYPES = frozenset({"bit", "bool"})
TEMPORAL_TYPES = frozenset({"date", "datetime", "datetime2", "smalldatetime", "time"})
STRING_TYPES = frozenset({"char", "nchar", "varchar", "nvarchar", "text", "ntext"})
UNICODE_TYPES = frozenset({"nchar", "nvarchar", "ntext"})
GUID_TYPES = frozenset({"uniqueidentifier", "guid"})

DEFAULT_CHARACTER_SET = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)


def normalize_type(data_type: str | None) -> str:
    """Lower-case a type tag and strip any length suffix, e.g. 'NVARCHAR(50)'."""
    if not data_type:
        return ""
    return data_type.split("(", 1)[0].strip().lower()


def is_supported(data_type: str | None) -> bool:
    return normalize_type(data_type) in SUPPORTED_TYPES


def type_cardinality(data_type: str, min_value=None, max_value=None) -> int | None:
    """
    Number of distinct values a bounded integer or bit column can hold.

    Returns None when the value space is large or unknown (strings, dates,
    decimals), since those are not worth pre-checking.
    """
    data_type = normalize_type(data_type)
    if data_type in BOOLEAN_TYPES:
        return 2
    if data_type not in INTEGER_RANGES:
        return None
    type_min, type_max = INTEGER_RANGES[data_type]
    low, high = clamp_integer_bounds(data_type, min_value, max_value)
    if (low, high) == (type_min, type_max) and data_type != "tinyint":
        return None
    return high - low + 1


def clamp_integer_bounds(data_type: str, min_value=None, max_value=None) -> tuple[int, int]:
    """
    Clamp caller bounds to the representable range of an integer type.

    Missing bounds take the type's bound. When max ends up below min it is
    widened to the type maximum.
    """
    type_min, type_max = INTEGER_RANGES[normalize_type(data_type)]
    low = type_min if min_value is None else max(type_min, int(min_value))
    high = type_max if max_value is None else min(type_max, int(max_value))
    low = min(low, type_max)
    if high < low:
        high = type_max
    return low, high


def format_temporal(value: datetime | date | time, data_type: str) -> str:
    """
    Render a temporal value in the canonical string form of a SQL type.

    date: yyyy-MM-dd, datetime: 3 fraction digits, datetime2 and time: 7
    fraction digits, smalldatetime: minute precision with zero seconds.
    """
    data_type = normalize_type(data_type)
    if isinstance(value, time):
        return f"{value:%H:%M:%S}.{value.microsecond:06d}0"
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)

    if data_type == "date":
        return f"{value:%Y-%m-%d}"
    if data_type == "datetime":
        return f"{value:%Y-%m-%d %H:%M:%S}.{value.microsecond // 1000:03d}"
    if data_type == "smalldatetime":
        return f"{value:%Y-%m-%d %H:%M}:00"
    if data_type == "time":
        return f"{value:%H:%M:%S}.{value.microsecond:06d}0"
    # datetime2 and anything else temporal
    return f"{value:%Y-%m-%d %H:%M:%S}.{value.microsecond:06d}0"


def parse_datetime(value) -> datetime | None:
    """
    Coerce a bound from a configuration document into a datetime.

    Accepts datetime, date and ISO 8601 strings ("2024-01-31",
    "2024-01-31 13:45:00", "2024-01-31T13:45:00.123"). None passes through.

    Raises:
        ValueError: If a string is not ISO 8601
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(str(value).strip())


def parse_time(value) -> time | None:
    """
    Coerce a bound for a time column into a time of day.

    Accepts time, datetime, "08:30:00"-style strings and full ISO 8601
    datetime strings, whose time part is used. None passes through.

    Raises:
        ValueError: If a string is neither an ISO time nor an ISO datetime
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value
    text = str(value).strip()
    try:
        return time.fromisoformat(text)
    except ValueError:
        return datetime.fromisoformat(text).time()
