"""Tests for native type and category value generation."""

import re
import string
from datetime import datetime
from decimal import Decimal
from uuid import UUID

import pytest

from dbdatagen.exceptions import (
    GenerationError,
    UnsupportedCategoryError,
    UnsupportedKindError,
    UnsupportedSubtypeError,
    UnsupportedTypeError,
)
from dbdatagen.generators import ValueGenerator
from dbdatagen.models import GenerationRequest


def test_int_respects_bounds(generator: ValueGenerator):
    """Should stay inside [Min, Max] for integer types."""
    request = GenerationRequest(data_type="int", min=1, max=10)
    values = [generator.generate(request) for _ in range(200)]

    assert all(1 <= v <= 10 for v in values)
    assert all(isinstance(v, int) for v in values)


def test_tinyint_bounds_clamped_to_type_range(generator: ValueGenerator):
    """Should clamp a negative Min to tinyint's lower bound of 0."""
    request = GenerationRequest(data_type="tinyint", min=-5, max=3)
    values = {generator.generate(request) for _ in range(200)}

    assert values <= {0, 1, 2, 3}


def test_int_max_below_min_widens_to_type_max(generator: ValueGenerator):
    """Should widen Max to the type maximum when Max < Min."""
    request = GenerationRequest(data_type="smallint", min=100, max=5)
    values = [generator.generate(request) for _ in range(100)]

    assert all(100 <= v <= 32767 for v in values)


def test_bit_is_not_degenerate(generator: ValueGenerator):
    """Should produce both 0 and 1 over many draws."""
    request = GenerationRequest(data_type="bit")
    values = {generator.generate(request) for _ in range(200)}

    assert values == {0, 1}


def test_decimal_precision_and_range(generator: ValueGenerator):
    """Should return Decimal rounded to Precision digits inside the bounds."""
    request = GenerationRequest(data_type="decimal", min=10, max=20, precision=3)
    for _ in range(100):
        value = generator.generate(request)
        assert isinstance(value, Decimal)
        assert Decimal("10") <= value <= Decimal("20")
        assert -value.as_tuple().exponent <= 3


def test_float_returns_float(generator: ValueGenerator):
    """Should return a Python float for float and real columns."""
    value = generator.generate(GenerationRequest(data_type="float", min=0, max=1))

    assert isinstance(value, float)
    assert 0 <= value <= 1


def test_string_length_and_charset(generator: ValueGenerator):
    """Should build strings of exactly the requested length from the charset."""
    request = GenerationRequest(data_type="varchar", min=5, max=5, character_set="abc")
    for _ in range(50):
        value = generator.generate(request)
        assert len(value) == 5
        assert set(value) <= set("abc")


def test_string_defaults_to_alphanumerics(generator: ValueGenerator):
    """Should use the 62 alphanumerics and lengths 1..255 by default."""
    value = generator.generate(GenerationRequest(data_type="nvarchar"))

    assert 1 <= len(value) <= 255
    assert set(value) <= set(string.ascii_letters + string.digits)


@pytest.mark.parametrize(
    "data_type, pattern",
    [
        ("date", r"^\d{4}-\d{2}-\d{2}$"),
        ("datetime", r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}$"),
        ("datetime2", r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{7}$"),
        ("smalldatetime", r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:00$"),
        ("time", r"^\d{2}:\d{2}:\d{2}\.\d{7}$"),
    ],
)
def test_temporal_canonical_format(generator: ValueGenerator, data_type: str, pattern: str):
    """Should render each temporal type in its canonical string form."""
    value = generator.generate(GenerationRequest(data_type=data_type))

    assert re.match(pattern, value), value


def test_date_between_bounds(generator: ValueGenerator):
    """Should stay between both bounds when Min and Max are given."""
    request = GenerationRequest(data_type="date", min="2020-01-01", max="2020-12-31")
    for _ in range(50):
        value = generator.generate(request)
        assert "2020-01-01" <= value <= "2020-12-31"


def test_date_only_min_uses_one_year_window(generator: ValueGenerator):
    """Should draw from [Min, Min + 1 year] when only Min is given."""
    request = GenerationRequest(data_type="date", min="2010-06-01")
    for _ in range(50):
        value = generator.generate(request)
        assert "2010-06-01" <= value <= "2011-06-02"


def test_invalid_date_bound_raises_generation_error(generator: ValueGenerator):
    """Should wrap an unparseable bound in GenerationError."""
    with pytest.raises(GenerationError):
        generator.generate(GenerationRequest(data_type="date", min="not a date"))


def test_guid_is_uuid4(generator: ValueGenerator):
    """Should return a version 4 UUID string for uniqueidentifier."""
    value = generator.generate(GenerationRequest(data_type="uniqueidentifier"))

    assert UUID(value).version == 4


def test_userdefined_with_max_one_is_bit(generator: ValueGenerator):
    """Should treat a user-defined type with Max 1 as a bit."""
    request = GenerationRequest(data_type="userdefineddatatype", max=1)
    values = {generator.generate(request) for _ in range(100)}

    assert values <= {0, 1}


def test_type_tag_is_case_insensitive(generator: ValueGenerator):
    """Should accept type tags in any case, with a length suffix."""
    value = generator.generate(GenerationRequest(data_type="NVARCHAR(10)", min=3, max=3))

    assert len(value) == 3


def test_unsupported_type_raises(generator: ValueGenerator):
    """Should reject xml without producing a value."""
    with pytest.raises(UnsupportedKindError) as exc_info:
        generator.generate(GenerationRequest(data_type="xml", column="Payload"))

    assert isinstance(exc_info.value, UnsupportedTypeError)
    assert "xml" in str(exc_info.value)
    assert "Payload" in str(exc_info.value)


def test_unknown_category_raises():
    """Should reject a category outside the supported set."""
    with pytest.raises(UnsupportedCategoryError):
        GenerationRequest.parse("Weather.Forecast")


def test_unknown_subtype_raises(generator: ValueGenerator):
    """Should reject a subtype the category does not declare."""
    with pytest.raises(UnsupportedSubtypeError):
        generator.generate(GenerationRequest.parse("Internet.Forecast"))


def test_request_needs_exactly_one_kind():
    """Should refuse requests with both or neither of data_type and category."""
    with pytest.raises(ValueError):
        GenerationRequest()
    with pytest.raises(ValueError):
        GenerationRequest.parse("int", subtype="Email")


def test_phone_format_keeps_literals(generator: ValueGenerator):
    """Should pour ten digits into the format and keep every literal."""
    request = GenerationRequest.parse("Phone.PhoneNumber", format="(###) ###-####")
    for _ in range(20):
        value = generator.generate(request)
        assert re.match(r"^\(\d{3}\) \d{3}-\d{4}$", value), value


def test_zip_code_format(generator: ValueGenerator):
    """Should fill a ZIP+4 format from postcode digits."""
    value = generator.generate(GenerationRequest.parse("Address.ZipCode", format="#####-####"))

    assert re.match(r"^\d{5}-\d{4}$", value)


def test_format_without_placeholder_raises(generator: ValueGenerator):
    """Should raise GenerationError when the format has no '#'."""
    with pytest.raises(GenerationError):
        generator.generate(GenerationRequest.parse("Phone.PhoneNumber", format="no digits"))


def test_shuffle_keeps_separators(generator: ValueGenerator):
    """Should keep ',' and '.' at their indices and permute the digits."""
    original = "1,234.56"
    request = GenerationRequest.parse("Random.Shuffle", value=original)
    for _ in range(20):
        value = generator.generate(request)
        assert len(value) == len(original)
        assert value[1] == ","
        assert value[5] == "."
        assert sorted(value.replace(",", "").replace(".", "")) == sorted("123456")


def test_shuffle_without_value_raises(generator: ValueGenerator):
    """Should require a Value to shuffle."""
    with pytest.raises(GenerationError):
        generator.generate(GenerationRequest.parse("Random.Shuffle"))


class TestMacAddress:
    """Tests for Internet.Mac formatting."""

    def test_separator(self, generator: ValueGenerator):
        """Should join six hex pairs with the separator."""
        value = generator.generate(GenerationRequest.parse("Internet.Mac", separator="-"))

        assert re.match(r"^([0-9a-f]{2}-){5}[0-9a-f]{2}$", value, re.IGNORECASE)

    def test_default_format(self, generator: ValueGenerator):
        """Should use the colon form without a format."""
        value = generator.generate(GenerationRequest.parse("Internet.Mac"))

        assert re.match(r"^([0-9a-f]{2}:){5}[0-9a-f]{2}$", value, re.IGNORECASE)

    def test_all_placeholders_gives_bare_mac(self, generator: ValueGenerator):
        """Should return twelve hex digits for an all-'#' format."""
        value = generator.generate(GenerationRequest.parse("Internet.Mac", format="#" * 12))

        assert re.match(r"^[0-9a-f]{12}$", value, re.IGNORECASE)

    def test_custom_format(self, generator: ValueGenerator):
        """Should fill a custom format with hex digits."""
        value = generator.generate(
            GenerationRequest.parse("Internet.Mac", format="####.####.####")
        )

        assert re.match(r"^[0-9a-f]{4}\.[0-9a-f]{4}\.[0-9a-f]{4}$", value, re.IGNORECASE)


def test_lorem_min_count_clamped_to_one(generator: ValueGenerator):
    """Should produce at least one word even with Min 0."""
    request = GenerationRequest.parse("Lorem.Words", min=0, max=0)

    assert len(generator.generate(request).split()) == 1


def test_date_past_is_before_max(generator: ValueGenerator):
    """Should anchor Date.Past at Max."""
    request = GenerationRequest.parse("Date.Past", min="2015-01-01", max="2020-01-01")
    for _ in range(20):
        value = generator.generate(request)
        assert isinstance(value, datetime)
        assert datetime(2014, 12, 1) <= value <= datetime(2020, 1, 1)


def test_category_lookup_is_case_insensitive(generator: ValueGenerator):
    """Should accept lower-case category and subtype names."""
    value = generator.generate(GenerationRequest.parse("internet.email"))

    assert "@" in value


def test_seeded_catalogs_are_reproducible():
    """Should produce the same values from the same seed."""
    from dbdatagen.generators import RandomizerCatalog

    first = ValueGenerator(RandomizerCatalog("en", seed=7))
    second = ValueGenerator(RandomizerCatalog("en", seed=7))
    request = GenerationRequest.parse("Name.FullName")

    assert [first.generate(request) for _ in range(5)] == [
        second.generate(request) for _ in range(5)
    ]


class TestTimeBounds:
    """Tests for bounded time columns."""

    def test_time_of_day_bounds(self, generator: ValueGenerator):
        """Should stay between time-of-day bounds written as times."""
        request = GenerationRequest(data_type="time", min="08:00:00", max="17:00:00")
        for _ in range(50):
            value = generator.generate(request)
            assert re.match(r"^\d{2}:\d{2}:\d{2}\.\d{7}$", value), value
            assert "08:00:00" <= value <= "17:00:00.0000000"

    def test_datetime_bounds_use_time_part(self, generator: ValueGenerator):
        """Should accept full datetime strings and use only their time of day."""
        request = GenerationRequest(
            data_type="time", min="2020-01-01 22:00:00", max="2020-01-01T23:00:00"
        )
        for _ in range(20):
            assert "22:00:00" <= generator.generate(request) <= "23:00:00.0000000"

    def test_only_min_runs_to_end_of_day(self, generator: ValueGenerator):
        """Should draw from Min up to the end of the day."""
        request = GenerationRequest(data_type="time", min="23:59:00")
        for _ in range(20):
            assert generator.generate(request) >= "23:59:00"

    def test_invalid_time_bound_raises_generation_error(self, generator: ValueGenerator):
        """Should wrap an unparseable time bound in GenerationError."""
        with pytest.raises(GenerationError):
            generator.generate(GenerationRequest(data_type="time", min="noon"))


class TestSubtypeOnly:
    """Tests for requests naming only a subtype."""

    def test_category_inferred_from_subtype(self, generator: ValueGenerator):
        """Should infer Address for ZipCode and honour the format."""
        request = GenerationRequest(subtype="ZipCode", format="#####")

        assert re.match(r"^\d{5}$", generator.generate(request))

    def test_parse_bare_subtype(self, generator: ValueGenerator):
        """Should parse a bare known subtype as a subtype-only request."""
        request = GenerationRequest.parse("Email")

        assert request.category is None
        assert request.subtype == "Email"
        assert request.kind == "Email"
        assert "@" in generator.generate(request)

    def test_parse_bare_native_type_stays_native(self):
        """Should keep supported type tags as native requests."""
        assert GenerationRequest.parse("int").is_native

    def test_unknown_bare_kind_is_unsupported_type(self, generator: ValueGenerator):
        """Should treat a bare name that no category declares as a type tag."""
        request = GenerationRequest.parse("xml")

        assert request.is_native
        with pytest.raises(UnsupportedTypeError):
            generator.generate(request)

    def test_unknown_subtype_only_raises(self, generator: ValueGenerator):
        """Should reject a subtype no category declares."""
        with pytest.raises(UnsupportedSubtypeError):
            generator.generate(GenerationRequest(subtype="Forecast"))
