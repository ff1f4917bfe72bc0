"""Faker-backed randomizers, one class per category."""

import string
from datetime import datetime, timedelta
from decimal import ROUND_HALF_EVEN, Decimal

from dbdatagen.exceptions import GenerationError
from dbdatagen.generators import wordlists
from dbdatagen.generators.base import CategoryRandomizer, subtype
from dbdatagen.generators.formatting import (
    DEFAULT_MAC_FORMAT,
    PLACEHOLDER,
    apply_format,
    is_hex_digit,
    shuffle_preserving_separators,
)
from dbdatagen.models import GenerationRequest
from dbdatagen.sqltypes import DEFAULT_CHARACTER_SET, parse_datetime

DAYS_PER_YEAR = 365.25


def random_amount(rnd, low, high, precision: int = 2) -> Decimal:
    """Uniform amount in [low, high] rounded to `precision` digits."""
    low = Decimal(str(low))
    high = Decimal(str(high))
    if high < low:
        high = low
    quantum = Decimal(1).scaleb(-precision)
    amount = low + (high - low) * Decimal(str(rnd.random()))
    amount = amount.quantize(quantum, rounding=ROUND_HALF_EVEN)
    # Rounding may step just past a bound
    return min(max(amount, low.quantize(quantum)), high.quantize(quantum))


class AddressRandomizer(CategoryRandomizer):
    @subtype("BuildingNumber")
    def building_number(self, request):
        return self.fake.building_number()

    @subtype("CardinalDirection")
    def cardinal_direction(self, request):
        return self.fake.random_element(wordlists.CARDINAL_DIRECTIONS)

    @subtype("City")
    def city(self, request):
        return self.fake.city()

    @subtype("CityPrefix")
    def city_prefix(self, request):
        return self.fake.city_prefix()

    @subtype("CitySuffix")
    def city_suffix(self, request):
        return self.fake.city_suffix()

    @subtype("Country")
    def country(self, request):
        return self.fake.country()

    @subtype("CountryCode")
    def country_code(self, request):
        return self.fake.country_code()

    @subtype("Direction")
    def direction(self, request):
        return self.fake.random_element(
            wordlists.CARDINAL_DIRECTIONS + wordlists.ORDINAL_DIRECTIONS
        )

    @subtype("FullAddress")
    def full_address(self, request):
        return self.fake.address().replace("\n", ", ")

    @subtype("Latitude")
    def latitude(self, request):
        return self.fake.latitude()

    @subtype("Longitude")
    def longitude(self, request):
        return self.fake.longitude()

    @subtype("OrdinalDirection")
    def ordinal_direction(self, request):
        return self.fake.random_element(wordlists.ORDINAL_DIRECTIONS)

    @subtype("SecondaryAddress")
    def secondary_address(self, request):
        return self.fake.secondary_address()

    @subtype("State")
    def state(self, request):
        return self.fake.state()

    @subtype("StateAbbr")
    def state_abbr(self, request):
        return self.fake.state_abbr()

    @subtype("StreetAddress")
    def street_address(self, request):
        return self.fake.street_address()

    @subtype("StreetName")
    def street_name(self, request):
        return self.fake.street_name()

    @subtype("StreetSuffix")
    def street_suffix(self, request):
        return self.fake.street_suffix()

    @subtype("ZipCode")
    def zip_code(self, request):
        if request.format:
            return apply_format(request.format, self.fake.postcode, str.isdigit)
        return self.fake.postcode()


class CommerceRandomizer(CategoryRandomizer):
    @subtype("Categories")
    def categories(self, request):
        count = min(self.count(request, default=1), len(wordlists.DEPARTMENTS))
        separator = request.separator or ", "
        return separator.join(
            self.fake.random_elements(wordlists.DEPARTMENTS, length=count, unique=True)
        )

    @subtype("Department")
    def department(self, request):
        return self.fake.random_element(wordlists.DEPARTMENTS)

    @subtype("Ean13")
    def ean13(self, request):
        return self.fake.ean13()

    @subtype("Ean8")
    def ean8(self, request):
        return self.fake.ean8()

    @subtype("Price")
    def price(self, request):
        low = request.min if request.min is not None else 1
        high = request.max if request.max is not None else 1000
        precision = request.precision if request.precision is not None else 2
        return random_amount(self.random, low, high, precision)

    @subtype("Product")
    def product(self, request):
        return self.fake.random_element(wordlists.PRODUCTS)

    @subtype("ProductAdjective")
    def product_adjective(self, request):
        return self.fake.random_element(wordlists.PRODUCT_ADJECTIVES)

    @subtype("ProductMaterial")
    def product_material(self, request):
        return self.fake.random_element(wordlists.PRODUCT_MATERIALS)

    @subtype("ProductName")
    def product_name(self, request):
        return " ".join(
            (
                self.product_adjective(request),
                self.product_material(request),
                self.product(request),
            )
        )


class CompanyRandomizer(CategoryRandomizer):
    @subtype("Bs")
    def bs(self, request):
        return self.fake.bs()

    @subtype("CatchPhrase")
    def catch_phrase(self, request):
        return self.fake.catch_phrase()

    @subtype("CompanyName")
    def company_name(self, request):
        return self.fake.company()

    @subtype("CompanySuffix")
    def company_suffix(self, request):
        return self.fake.company_suffix()


class DatabaseRandomizer(CategoryRandomizer):
    @subtype("Collation")
    def collation(self, request):
        return self.fake.random_element(wordlists.DATABASE_COLLATIONS)

    @subtype("Column")
    def column(self, request):
        return self.fake.random_element(wordlists.DATABASE_COLUMNS)

    @subtype("Engine")
    def engine(self, request):
        return self.fake.random_element(wordlists.DATABASE_ENGINES)

    @subtype("Type")
    def column_type(self, request):
        return self.fake.random_element(wordlists.DATABASE_TYPES)


class DateRandomizer(CategoryRandomizer):
    """
    Dates between bounds, in the past or in the future.

    Past and Future use a window of whole years. When both endpoints are
    given the window is the rounded number of years between them, anchored
    at Max (Past) or Min (Future); otherwise the window is one year.
    """

    def _bounds(self, request: GenerationRequest) -> tuple[datetime | None, datetime | None]:
        try:
            return parse_datetime(request.min), parse_datetime(request.max)
        except ValueError as e:
            raise GenerationError(f"Invalid date bound: {e}", request.column) from e

    def _between(self, start: datetime, end: datetime) -> datetime:
        if end < start:
            start, end = end, start
        return self.fake.date_time_between(start_date=start, end_date=end)

    @staticmethod
    def _years(start: datetime | None, end: datetime | None) -> int:
        if start is None or end is None:
            return 1
        return max(1, round(abs((end - start).days) / DAYS_PER_YEAR))

    @subtype("Between")
    def between(self, request):
        start, end = self._bounds(request)
        now = datetime.now()
        if start is None and end is None:
            return self._between(now - timedelta(days=DAYS_PER_YEAR), now)
        if start is None:
            return self._between(end - timedelta(days=DAYS_PER_YEAR), end)
        if end is None:
            return self._between(start, start + timedelta(days=DAYS_PER_YEAR))
        return self._between(start, end)

    @subtype("Past")
    def past(self, request):
        start, end = self._bounds(request)
        reference = end or datetime.now()
        years = self._years(start, end)
        return self._between(reference - timedelta(days=years * DAYS_PER_YEAR), reference)

    @subtype("Future")
    def future(self, request):
        start, end = self._bounds(request)
        reference = start or datetime.now()
        years = self._years(start, end)
        return self._between(reference, reference + timedelta(days=years * DAYS_PER_YEAR))

    @subtype("Month")
    def month(self, request):
        return self.fake.month_name()

    @subtype("Recent")
    def recent(self, request):
        days = self.count(request, default=1)
        now = datetime.now()
        return self._between(now - timedelta(days=days), now)

    @subtype("Soon")
    def soon(self, request):
        days = self.count(request, default=1)
        now = datetime.now()
        return self._between(now, now + timedelta(days=days))

    @subtype("Weekday")
    def weekday(self, request):
        return self.fake.day_of_week()


class FinanceRandomizer(CategoryRandomizer):
    def _base58(self, prefixes: str, low: int, high: int) -> str:
        length = self.random.randint(low, high)
        body = "".join(
            self.random.choice(wordlists.BASE58_ALPHABET) for _ in range(length - 1)
        )
        return self.random.choice(prefixes) + body

    @subtype("Account")
    def account(self, request):
        length = int(request.max) if request.max else 8
        return self.fake.numerify("#" * max(1, length))

    @subtype("AccountName")
    def account_name(self, request):
        return f"{self.fake.random_element(wordlists.ACCOUNT_NAMES)} Account"

    @subtype("Amount")
    def amount(self, request):
        low = request.min if request.min is not None else 0
        high = request.max if request.max is not None else 1000
        precision = request.precision if request.precision is not None else 2
        return random_amount(self.random, low, high, precision)

    @subtype("Bic")
    def bic(self, request):
        return self.fake.swift8()

    @subtype("BitcoinAddress")
    def bitcoin_address(self, request):
        return self._base58("13", 26, 34)

    @subtype("CreditCardCvv")
    def credit_card_cvv(self, request):
        return self.fake.credit_card_security_code()

    @subtype("CreditCardNumber")
    def credit_card_number(self, request):
        number = self.fake.credit_card_number()
        if request.format:
            return apply_format(request.format, lambda: number, str.isdigit)
        return number

    @subtype("Currency")
    def currency(self, request):
        return self.fake.currency_code()

    @subtype("EthereumAddress")
    def ethereum_address(self, request):
        return "0x" + self.fake.hexify("^" * 40)

    @subtype("Iban")
    def iban(self, request):
        return self.fake.iban()

    @subtype("Litecoin")
    def litecoin(self, request):
        return self._base58("LM3", 26, 33)

    @subtype("RoutingNumber")
    def routing_number(self, request):
        return self.fake.aba()

    @subtype("TransactionType")
    def transaction_type(self, request):
        return self.fake.random_element(wordlists.TRANSACTION_TYPES)


class HackerRandomizer(CategoryRandomizer):
    @subtype("Abbreviation")
    def abbreviation(self, request):
        return self.fake.random_element(wordlists.HACKER_ABBREVIATIONS)

    @subtype("Adjective")
    def adjective(self, request):
        return self.fake.random_element(wordlists.HACKER_ADJECTIVES)

    @subtype("IngVerb")
    def ing_verb(self, request):
        return self.fake.random_element(wordlists.HACKER_ING_VERBS)

    @subtype("Noun")
    def noun(self, request):
        return self.fake.random_element(wordlists.HACKER_NOUNS)

    @subtype("Verb")
    def verb(self, request):
        return self.fake.random_element(wordlists.HACKER_VERBS)

    @subtype("Phrase")
    def phrase(self, request):
        template = self.fake.random_element(wordlists.HACKER_PHRASES)
        # Each placeholder occurrence gets its own word
        words = {
            "abbreviation": wordlists.HACKER_ABBREVIATIONS,
            "adjective": wordlists.HACKER_ADJECTIVES,
            "noun": wordlists.HACKER_NOUNS,
            "verb": wordlists.HACKER_VERBS,
            "ingverb": wordlists.HACKER_ING_VERBS,
        }
        for key, choices in words.items():
            token = "{" + key + "}"
            while token in template:
                template = template.replace(token, self.fake.random_element(choices), 1)
        return template[0].upper() + template[1:]


class ImageRandomizer(CategoryRandomizer):
    def _size(self, request: GenerationRequest) -> tuple[int, int]:
        width = int(request.min) if request.min else 640
        height = int(request.max) if request.max else 480
        return width, height

    @subtype("DataUri")
    def data_uri(self, request):
        width, height = self._size(request)
        color = self.fake.hex_color().replace("#", "%23")
        return (
            "data:image/svg+xml;charset=UTF-8,"
            f"%3Csvg%20xmlns%3D%22http%3A%2F%2Fwww.w3.org%2F2000%2Fsvg%22%20"
            f"width%3D%22{width}%22%20height%3D%22{height}%22%3E"
            f"%3Crect%20width%3D%22100%25%22%20height%3D%22100%25%22%20fill%3D%22{color}%22%2F%3E"
            "%3C%2Fsvg%3E"
        )

    @subtype("LoremFlickrUrl")
    def lorem_flickr_url(self, request):
        width, height = self._size(request)
        return f"https://loremflickr.com/{width}/{height}?lock={self.random.randint(1, 10000)}"

    @subtype("PicsumUrl")
    def picsum_url(self, request):
        width, height = self._size(request)
        return self.fake.image_url(
            width=width, height=height, placeholder_url="https://picsum.photos/{width}/{height}"
        )

    @subtype("PlaceholderUrl")
    def placeholder_url(self, request):
        width, height = self._size(request)
        return self.fake.image_url(
            width=width,
            height=height,
            placeholder_url="https://via.placeholder.com/{width}x{height}",
        )


class InternetRandomizer(CategoryRandomizer):
    @subtype("Avatar")
    def avatar(self, request):
        return self.fake.image_url(
            width=128, height=128, placeholder_url="https://i.pravatar.cc/{width}"
        )

    @subtype("Color")
    def color(self, request):
        return self.fake.hex_color()

    @subtype("DomainName")
    def domain_name(self, request):
        return self.fake.domain_name()

    @subtype("DomainSuffix")
    def domain_suffix(self, request):
        return self.fake.tld()

    @subtype("DomainWord")
    def domain_word(self, request):
        return self.fake.domain_word()

    @subtype("Email")
    def email(self, request):
        return self.fake.email()

    @subtype("ExampleEmail")
    def example_email(self, request):
        return self.fake.safe_email()

    @subtype("Ip")
    def ip(self, request):
        return self.fake.ipv4()

    @subtype("Ipv6")
    def ipv6(self, request):
        return self.fake.ipv6()

    def _bare_mac(self) -> str:
        return self.fake.hexify("^" * 12)

    @subtype("Mac")
    def mac(self, request):
        if request.separator is not None:
            raw = self._bare_mac()
            return request.separator.join(raw[i : i + 2] for i in range(0, 12, 2))
        if not request.format or request.format == DEFAULT_MAC_FORMAT:
            return self.fake.mac_address()
        if set(request.format) == {PLACEHOLDER}:
            return self._bare_mac()
        return apply_format(request.format, self._bare_mac, is_hex_digit)

    @subtype("Password")
    def password(self, request):
        length = self.length(request, default_min=10, default_max=10)
        # Faker needs room for one character of each enabled class
        length = max(length, 4)
        return self.fake.password(length=length)

    @subtype("Protocol")
    def protocol(self, request):
        return self.fake.random_element(("http", "https"))

    @subtype("Url")
    def url(self, request):
        return self.fake.url()

    @subtype("UrlWithPath")
    def url_with_path(self, request):
        return self.fake.url().rstrip("/") + "/" + self.fake.uri_path()

    @subtype("UserAgent")
    def user_agent(self, request):
        return self.fake.user_agent()

    @subtype("UserName")
    def user_name(self, request):
        return self.fake.user_name()


class LoremRandomizer(CategoryRandomizer):
    @subtype("Letter")
    def letter(self, request):
        return "".join(self.fake.random_letter() for _ in range(self.count(request, default=1)))

    @subtype("Lines")
    def lines(self, request):
        return "\n".join(self.fake.sentences(nb=self.count(request)))

    @subtype("Paragraph")
    def paragraph(self, request):
        return self.fake.paragraph(nb_sentences=self.count(request))

    @subtype("Paragraphs")
    def paragraphs(self, request):
        separator = request.separator or "\n\n"
        return separator.join(self.fake.paragraphs(nb=self.count(request)))

    @subtype("Sentence")
    def sentence(self, request):
        return self.fake.sentence(nb_words=self.count(request, default=6))

    @subtype("Sentences")
    def sentences(self, request):
        separator = request.separator or " "
        return separator.join(self.fake.sentences(nb=self.count(request)))

    @subtype("Slug")
    def slug(self, request):
        return "-".join(self.fake.words(nb=self.count(request)))

    @subtype("Text")
    def text(self, request):
        max_chars = int(request.max) if request.max else 200
        return self.fake.text(max_nb_chars=max(5, max_chars))

    @subtype("Word")
    def word(self, request):
        return self.fake.word()

    @subtype("Words")
    def words(self, request):
        separator = request.separator or " "
        return separator.join(self.fake.words(nb=self.count(request)))


class NameRandomizer(CategoryRandomizer):
    @subtype("FirstName")
    def first_name(self, request):
        return self.fake.first_name()

    @subtype("FullName")
    def full_name(self, request):
        return self.fake.name()

    @subtype("FindName")
    def find_name(self, request):
        return self.fake.name()

    @subtype("JobArea")
    def job_area(self, request):
        return self.fake.random_element(wordlists.JOB_AREAS)

    @subtype("JobDescriptor")
    def job_descriptor(self, request):
        return self.fake.random_element(wordlists.JOB_DESCRIPTORS)

    @subtype("JobTitle")
    def job_title(self, request):
        return self.fake.job()

    @subtype("JobType")
    def job_type(self, request):
        return self.fake.random_element(wordlists.JOB_TYPES)

    @subtype("LastName")
    def last_name(self, request):
        return self.fake.last_name()

    @subtype("Prefix")
    def prefix(self, request):
        return self.fake.prefix()

    @subtype("Suffix")
    def suffix(self, request):
        return self.fake.suffix()


def formatted_phone(fake, template: str | None) -> str:
    """Phone number, digits poured into `template` when one is given."""
    if template:
        return apply_format(template, fake.phone_number, str.isdigit)
    return fake.phone_number()


class PhoneRandomizer(CategoryRandomizer):
    @subtype("PhoneNumber")
    def phone_number(self, request):
        return formatted_phone(self.fake, request.format)

    @subtype("PhoneNumberFormat")
    def phone_number_format(self, request):
        return self.fake.random_element(wordlists.PHONE_FORMATS)


class PersonRandomizer(CategoryRandomizer):
    @subtype("Company")
    def company(self, request):
        return self.fake.company()

    @subtype("DateOfBirth")
    def date_of_birth(self, request):
        low = int(request.min) if request.min is not None else 18
        high = int(request.max) if request.max is not None else 90
        return self.fake.date_of_birth(minimum_age=low, maximum_age=max(low, high))

    @subtype("Email")
    def email(self, request):
        return self.fake.email()

    @subtype("FirstName")
    def first_name(self, request):
        return self.fake.first_name()

    @subtype("FullName")
    def full_name(self, request):
        return self.fake.name()

    @subtype("Gender")
    def gender(self, request):
        return self.fake.random_element(wordlists.GENDERS)

    @subtype("LastName")
    def last_name(self, request):
        return self.fake.last_name()

    @subtype("Phone")
    def phone(self, request):
        return formatted_phone(self.fake, request.format)

    @subtype("UserName")
    def user_name(self, request):
        return self.fake.user_name()

    @subtype("Website")
    def website(self, request):
        return self.fake.url()


class RandomRandomizer(CategoryRandomizer):
    """Plain random primitives, plus transforms of a given Value."""

    def _number_bounds(self, request: GenerationRequest, low: int, high: int) -> tuple[int, int]:
        lo = int(request.min) if request.min is not None else low
        hi = int(request.max) if request.max is not None else high
        return (lo, hi) if lo <= hi else (lo, lo)

    def _chars(self, request: GenerationRequest, alphabet: str) -> str:
        length = self.length(request, default_min=1, default_max=10)
        return "".join(self.random.choice(alphabet) for _ in range(length))

    def _require_value(self, request: GenerationRequest) -> str:
        if request.value is None:
            raise GenerationError(f"Random.{request.subtype} needs a Value", request.column)
        return str(request.value)

    @subtype("AlphaNumeric")
    def alpha_numeric(self, request):
        return self._chars(request, string.ascii_lowercase + string.digits)

    @subtype("Bool")
    def boolean(self, request):
        return self.fake.boolean()

    @subtype("Byte")
    def byte(self, request):
        return self.random.randint(*self._number_bounds(request, 0, 255))

    @subtype("Bytes")
    def hex_bytes(self, request):
        return self.fake.hexify("^^" * self.count(request, default=4))

    @subtype("Char")
    def char(self, request):
        alphabet = request.character_set or DEFAULT_CHARACTER_SET
        return self.random.choice(alphabet)

    @subtype("Chars")
    def chars(self, request):
        return self._chars(request, request.character_set or DEFAULT_CHARACTER_SET)

    @subtype("Decimal")
    def decimal(self, request):
        low = request.min if request.min is not None else 0
        high = request.max if request.max is not None else 1
        precision = request.precision if request.precision is not None else 4
        return random_amount(self.random, low, high, precision)

    @subtype("Digits")
    def digits(self, request):
        return self.fake.numerify("#" * self.count(request, default=1))

    @subtype("Double")
    def double(self, request):
        low = float(request.min) if request.min is not None else 0.0
        high = float(request.max) if request.max is not None else 1.0
        return self.random.uniform(low, high)

    @subtype("Even")
    def even(self, request):
        low, high = self._number_bounds(request, 0, 100)
        value = self.random.randint(low, high)
        if value % 2:
            value = value + 1 if value + 1 <= high else value - 1
        return value

    @subtype("Float")
    def floating(self, request):
        return self.double(request)

    @subtype("Guid")
    def guid(self, request):
        return self.fake.uuid4()

    @subtype("Hash")
    def hash_hex(self, request):
        length = int(request.max) if request.max else 40
        return self.fake.hexify("^" * length)

    @subtype("Hexadecimal")
    def hexadecimal(self, request):
        return "0x" + self.fake.hexify("^" * self.count(request, default=1))

    @subtype("Int")
    def integer(self, request):
        return self.random.randint(*self._number_bounds(request, -2147483648, 2147483647))

    @subtype("Long")
    def long(self, request):
        return self.random.randint(
            *self._number_bounds(request, -9223372036854775808, 9223372036854775807)
        )

    @subtype("Number")
    def number(self, request):
        return self.random.randint(*self._number_bounds(request, 0, 1))

    @subtype("Odd")
    def odd(self, request):
        low, high = self._number_bounds(request, 0, 100)
        value = self.random.randint(low, high)
        if value % 2 == 0:
            value = value + 1 if value + 1 <= high else value - 1
        return value

    @subtype("Replace")
    def replace(self, request):
        # '#' becomes a digit, '?' a letter
        return self.fake.bothify(self._require_value(request))

    @subtype("SByte")
    def sbyte(self, request):
        return self.random.randint(*self._number_bounds(request, -128, 127))

    @subtype("Short")
    def short(self, request):
        return self.random.randint(*self._number_bounds(request, -32768, 32767))

    @subtype("Shuffle")
    def shuffle(self, request):
        return shuffle_preserving_separators(self._require_value(request), self.random)

    @subtype("String")
    def random_string(self, request):
        return self._chars(request, string.ascii_letters)

    @subtype("String2")
    def string2(self, request):
        return self._chars(request, request.character_set or DEFAULT_CHARACTER_SET)

    @subtype("UInt")
    def uint(self, request):
        return self.random.randint(*self._number_bounds(request, 0, 4294967295))

    @subtype("ULong")
    def ulong(self, request):
        return self.random.randint(*self._number_bounds(request, 0, 18446744073709551615))

    @subtype("Uuid")
    def uuid(self, request):
        return self.fake.uuid4()

    @subtype("Word")
    def word(self, request):
        return self.fake.word()

    @subtype("Words")
    def words(self, request):
        return " ".join(self.fake.words(nb=self.count(request)))

    @subtype("WordsArray")
    def words_array(self, request):
        separator = request.separator if request.separator is not None else ","
        return separator.join(self.fake.words(nb=self.count(request)))


class RantRandomizer(CategoryRandomizer):
    def _review(self, product: str) -> str:
        template = self.fake.random_element(wordlists.RANT_TEMPLATES)
        return template.format(
            product=product,
            subject=self.fake.random_element(wordlists.RANT_SUBJECTS),
            adjective=self.fake.random_element(wordlists.RANT_ADJECTIVES),
            place=self.fake.random_element(wordlists.RANT_PLACES),
            frequency=self.fake.random_element(wordlists.RANT_FREQUENCIES),
        )

    @subtype("Review")
    def review(self, request):
        return self._review(str(request.value or "product"))

    @subtype("Reviews")
    def reviews(self, request):
        product = str(request.value or "product")
        separator = request.separator or " "
        return separator.join(self._review(product) for _ in range(self.count(request)))


class SystemRandomizer(CategoryRandomizer):
    @subtype("CommonFileExt")
    def common_file_ext(self, request):
        return self.fake.file_extension()

    @subtype("CommonFileName")
    def common_file_name(self, request):
        return self.fake.file_name()

    @subtype("CommonFileType")
    def common_file_type(self, request):
        return self.fake.random_element(wordlists.FILE_TYPES)

    @subtype("DirectoryPath")
    def directory_path(self, request):
        return "/" + "/".join(self.fake.words(nb=self.count(request, default=2)))

    @subtype("Exception")
    def exception(self, request):
        return self.fake.random_element(wordlists.EXCEPTIONS)

    @subtype("FileExt")
    def file_ext(self, request):
        return self.fake.file_extension()

    @subtype("FileName")
    def file_name(self, request):
        return self.fake.file_name()

    @subtype("FilePath")
    def file_path(self, request):
        return self.fake.file_path()

    @subtype("FileType")
    def file_type(self, request):
        return self.fake.mime_type().split("/", 1)[0]

    @subtype("MimeType")
    def mime_type(self, request):
        return self.fake.mime_type()

    @subtype("Semver")
    def semver(self, request):
        return ".".join(str(self.random.randint(0, 20)) for _ in range(3))

    @subtype("Version")
    def version(self, request):
        return ".".join(str(self.random.randint(0, 20)) for _ in range(4))
