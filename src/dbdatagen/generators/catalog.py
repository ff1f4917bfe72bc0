"""Randomizer catalog: category/subtype lookup over a per-locale Faker context."""

import logging
import re
from collections.abc import Callable
from enum import Enum
from typing import Any

from faker import Faker
from faker.config import AVAILABLE_LOCALES

from dbdatagen.exceptions import (
    ConfigurationError,
    UnsupportedCategoryError,
    UnsupportedSubtypeError,
)
from dbdatagen.generators import categories
from dbdatagen.generators.base import CategoryRandomizer

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

# Short locale names that Faker only ships regional data for
LOCALE_ALIASES = {"en": "en_US"}


class Category(str, Enum):
    """Randomizer categories, in lookup order for subtype inference."""

    ADDRESS = "Address"
    COMMERCE = "Commerce"
    COMPANY = "Company"
    DATABASE = "Database"
    DATE = "Date"
    FINANCE = "Finance"
    HACKER = "Hacker"
    IMAGE = "Image"
    INTERNET = "Internet"
    LOREM = "Lorem"
    NAME = "Name"
    PERSON = "Person"
    PHONE = "Phone"
    RANDOM = "Random"
    RANT = "Rant"
    SYSTEM = "System"

    @classmethod
    def parse(cls, name: "str | Category", column: str | None = None) -> "Category":
        """
        Case-insensitive lookup by name.

        Raises:
            UnsupportedCategoryError: If name is not a category
        """
        if isinstance(name, Category):
            return name
        key = str(name).strip().lower()
        for category in cls:
            if category.value.lower() == key:
                return category
        raise UnsupportedCategoryError(name, column)


RANDOMIZERS: dict[Category, type[CategoryRandomizer]] = {
    Category.ADDRESS: categories.AddressRandomizer,
    Category.COMMERCE: categories.CommerceRandomizer,
    Category.COMPANY: categories.CompanyRandomizer,
    Category.DATABASE: categories.DatabaseRandomizer,
    Category.DATE: categories.DateRandomizer,
    Category.FINANCE: categories.FinanceRandomizer,
    Category.HACKER: categories.HackerRandomizer,
    Category.IMAGE: categories.ImageRandomizer,
    Category.INTERNET: categories.InternetRandomizer,
    Category.LOREM: categories.LoremRandomizer,
    Category.NAME: categories.NameRandomizer,
    Category.PERSON: categories.PersonRandomizer,
    Category.PHONE: categories.PhoneRandomizer,
    Category.RANDOM: categories.RandomRandomizer,
    Category.RANT: categories.RantRandomizer,
    Category.SYSTEM: categories.SystemRandomizer,
}


def resolve_locale(locale: str | None) -> str:
    """
    Map a locale name to the Faker locale that backs it.

    Raises:
        ConfigurationError: If Faker has no data for the locale
    """
    name = (locale or DEFAULT_LOCALE).replace("-", "_")
    name = LOCALE_ALIASES.get(name, name)
    if name not in AVAILABLE_LOCALES:
        raise ConfigurationError(
            f"Unknown locale '{locale}'.\n\n"
            f"Suggestions:\n"
            f"1. Use a Faker locale such as 'en', 'en_GB', 'de_DE' or 'fr_FR'\n"
            f"2. Leave locale unset to use '{DEFAULT_LOCALE}'"
        )
    return name


def find_subtype(category: Category, subtype: str) -> tuple[str, str] | None:
    """Return (display name, method name) for a subtype, or None."""
    return RANDOMIZERS[category].SUBTYPES.get(str(subtype).strip().lower())


def list_types(category: "str | Category | None" = None, pattern: str | None = None) -> list[tuple[Category, str]]:
    """
    List (category, subtype) pairs.

    Args:
        category: Restrict to one category
        pattern: Case-insensitive regular expression matched against the
            subtype name

    Example:
        >>> list_types("Internet", pattern="^ip")
        [(<Category.INTERNET: 'Internet'>, 'Ip'), (<Category.INTERNET: 'Internet'>, 'Ipv6')]
    """
    selected = [Category.parse(category)] if category else list(Category)
    regex = re.compile(pattern, re.IGNORECASE) if pattern else None
    result = []
    for cat in selected:
        for name, _method in sorted(RANDOMIZERS[cat].SUBTYPES.values()):
            if regex is None or regex.search(name):
                result.append((cat, name))
    return result


class RandomizerCatalog:
    """
    Immutable lookup from (category, subtype) to a bound generator.

    One catalog wraps one Faker instance for one locale. Use for_locale()
    to share an unseeded catalog per locale across the process; pass a seed
    to get a private, reproducible one.
    """

    _shared: dict[str, "RandomizerCatalog"] = {}

    def __init__(self, locale: str = DEFAULT_LOCALE, seed: int | None = None):
        self.locale = resolve_locale(locale)
        self.fake = Faker(self.locale)
        if seed is not None:
            self.fake.seed_instance(seed)
        self._randomizers = {cat: cls(self.fake) for cat, cls in RANDOMIZERS.items()}
        logger.debug(f"Loaded randomizer catalog for locale '{self.locale}'")

    @classmethod
    def for_locale(cls, locale: str = DEFAULT_LOCALE, seed: int | None = None) -> "RandomizerCatalog":
        """Get the catalog for a locale (cached per process when unseeded)."""
        if seed is not None:
            return cls(locale, seed)
        key = resolve_locale(locale)
        if key not in cls._shared:
            cls._shared[key] = cls(key)
        return cls._shared[key]

    @property
    def random(self):
        return self.fake.random

    def resolve(self, category: "str | Category", subtype: str, column: str | None = None) -> Callable[..., Any]:
        """
        Get the generator for a category/subtype pair.

        Raises:
            UnsupportedCategoryError: If category is unknown
            UnsupportedSubtypeError: If subtype is not in the category
        """
        category = Category.parse(category, column)
        entry = find_subtype(category, subtype) if subtype else None
        if entry is None:
            raise UnsupportedSubtypeError(subtype, column, category.value)
        return getattr(self._randomizers[category], entry[1])

    @staticmethod
    def infer_category(subtype: str, column: str | None = None) -> Category:
        """
        First category, in enum order, that declares the subtype.

        Raises:
            UnsupportedSubtypeError: If no category declares it
        """
        for category in Category:
            if find_subtype(category, subtype):
                return category
        raise UnsupportedSubtypeError(subtype, column)

    @staticmethod
    def canonical_subtype(category: "str | Category", subtype: str) -> str | None:
        """Display spelling of a subtype, e.g. 'zipcode' → 'ZipCode'."""
        entry = find_subtype(Category.parse(category), subtype)
        return entry[0] if entry else None
