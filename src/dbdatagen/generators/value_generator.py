"""Value generator: one random value per GenerationRequest."""

import logging
from datetime import datetime, time, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any

from dbdatagen.exceptions import DataGenError, GenerationError, UnsupportedTypeError
from dbdatagen.generators.catalog import RandomizerCatalog
from dbdatagen.generators.categories import DAYS_PER_YEAR, random_amount
from dbdatagen.models import GenerationRequest
from dbdatagen.sqltypes import (
    BOOLEAN_TYPES,
    DECIMAL_TYPES,
    DEFAULT_CHARACTER_SET,
    GUID_TYPES,
    INTEGER_RANGES,
    MONEY_RANGE,
    STRING_TYPES,
    TEMPORAL_TYPES,
    clamp_integer_bounds,
    format_temporal,
    parse_datetime,
    parse_time,
)

logger = logging.getLogger(__name__)

DEFAULT_STRING_MIN = 1
DEFAULT_STRING_MAX = 255
DEFAULT_DECIMAL_MIN = 0
DEFAULT_DECIMAL_MAX = 1000
DEFAULT_PRECISION = 2

# Last representable instant of a time column, 23:59:59.999999
END_OF_DAY_SECONDS = 86399.999999


class ValueGenerator:
    """
    Produce exactly one random value for a GenerationRequest.

    Native type requests honour the SQL type's range and canonical string
    form; category requests dispatch through the randomizer catalog.

    Example:
        >>> gen = ValueGenerator(RandomizerCatalog.for_locale("en"))
        >>> gen.generate(GenerationRequest(data_type="int", min=1, max=10))
        7
        >>> gen.generate(GenerationRequest.parse("Phone.PhoneNumber", format="(###) ###-####"))
        '(412) 555-0123'
    """

    def __init__(self, catalog: RandomizerCatalog):
        self.catalog = catalog

    @property
    def random(self):
        return self.catalog.random

    def generate(self, request: GenerationRequest) -> Any:
        """
        Generate a value.

        Raises:
            UnsupportedKindError: If the type, category or subtype is unknown
            GenerationError: If the underlying generator fails
        """
        if request.is_native:
            return self._generate_native(request)

        category = request.category or RandomizerCatalog.infer_category(
            request.subtype, request.column
        )
        generator = self.catalog.resolve(category, request.subtype, request.column)
        try:
            return generator(request)
        except DataGenError:
            raise
        except Exception as e:
            raise GenerationError(f"{request.kind} failed: {e}", request.column) from e

    def _generate_native(self, request: GenerationRequest) -> Any:
        data_type = request.data_type
        try:
            if data_type in INTEGER_RANGES:
                return self._integer(request)
            if data_type in DECIMAL_TYPES:
                return self._decimal(request)
            if data_type in BOOLEAN_TYPES:
                return self._bit()
            if data_type in TEMPORAL_TYPES:
                return self._temporal(request)
            if data_type in STRING_TYPES:
                return self._string(request)
            if data_type in GUID_TYPES:
                return self.catalog.fake.uuid4()
            if data_type == "userdefineddatatype":
                if request.max is not None and int(request.max) == 1:
                    return self._bit()
                return self._string(request)
        except (TypeError, ValueError, InvalidOperation) as e:
            raise GenerationError(f"Invalid bounds for {data_type}: {e}", request.column) from e

        raise UnsupportedTypeError(request.data_type, request.column)

    def _integer(self, request: GenerationRequest) -> int:
        low, high = clamp_integer_bounds(request.data_type, request.min, request.max)
        return self.random.randint(low, high)

    def _bit(self) -> int:
        return 1 if self.random.random() < 0.5 else 0

    def _decimal(self, request: GenerationRequest) -> Decimal | float:
        low = Decimal(str(request.min)) if request.min is not None else Decimal(DEFAULT_DECIMAL_MIN)
        high = Decimal(str(request.max)) if request.max is not None else Decimal(DEFAULT_DECIMAL_MAX)
        precision = request.precision if request.precision is not None else DEFAULT_PRECISION
        if request.data_type == "money":
            low = max(low, MONEY_RANGE[0])
            high = min(high, MONEY_RANGE[1])
            precision = min(precision, 4)
        if high < low:
            high = low
        amount = random_amount(self.random, low, high, precision)
        if request.data_type in ("float", "real"):
            return float(amount)
        return amount

    def _temporal(self, request: GenerationRequest) -> str:
        if request.data_type == "time":
            return self._time_of_day(request)
        start = parse_datetime(request.min)
        end = parse_datetime(request.max)
        window = timedelta(days=DAYS_PER_YEAR)
        if start is None and end is None:
            end = datetime.now()
            start = end - window
        elif end is None:
            end = start + window
        elif start is None:
            start = end - window
        if end < start:
            start, end = end, start

        span = (end - start).total_seconds()
        value = start + timedelta(seconds=self.random.uniform(0, span))
        return format_temporal(value, request.data_type)

    def _time_of_day(self, request: GenerationRequest) -> str:
        """Time between the bounds; a missing bound is midnight or the end of the day."""
        start = parse_time(request.min)
        end = parse_time(request.max)
        low = _seconds_since_midnight(start) if start is not None else 0.0
        high = _seconds_since_midnight(end) if end is not None else END_OF_DAY_SECONDS
        if high < low:
            low, high = high, low

        seconds = min(self.random.uniform(low, high), END_OF_DAY_SECONDS)
        value = (datetime.min + timedelta(seconds=seconds)).time()
        return format_temporal(value, "time")

    def _string(self, request: GenerationRequest) -> str:
        low = DEFAULT_STRING_MIN if request.min is None else max(0, int(request.min))
        high = DEFAULT_STRING_MAX if request.max is None else max(0, int(request.max))
        if high < low:
            high = low
        alphabet = request.character_set or DEFAULT_CHARACTER_SET
        length = self.random.randint(low, high)
        return "".join(self.random.choice(alphabet) for _ in range(length))


def _seconds_since_midnight(value: time) -> float:
    return value.hour * 3600 + value.minute * 60 + value.second + value.microsecond / 1_000_000
