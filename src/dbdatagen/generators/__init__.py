"""Random value generators: catalog, category randomizers and the value generator."""

from dbdatagen.generators.base import CategoryRandomizer, subtype
from dbdatagen.generators.catalog import Category, RandomizerCatalog, list_types
from dbdatagen.generators.value_generator import ValueGenerator

__all__ = [
    "Category",
    "CategoryRandomizer",
    "RandomizerCatalog",
    "ValueGenerator",
    "list_types",
    "subtype",
]
