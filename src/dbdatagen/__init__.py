"""
dbdatagen - Synthetic Data Generation for SQL Server

Fills tables described by a configuration document with type-constrained
random values, honouring unique indexes, identity columns and nullability.
"""

from dbdatagen.backends import DirectBackend, StagingBackend
from dbdatagen.config import Settings
from dbdatagen.document import GeneratorDocument, load_document
from dbdatagen.generators import Category, RandomizerCatalog, ValueGenerator, list_types
from dbdatagen.models import GenerationRequest, TableResult
from dbdatagen.orchestrator import DataGenerator

__version__ = "0.1.0"

__all__ = [
    "DataGenerator",
    "DirectBackend",
    "StagingBackend",
    "Settings",
    "GeneratorDocument",
    "load_document",
    "Category",
    "RandomizerCatalog",
    "ValueGenerator",
    "GenerationRequest",
    "TableResult",
    "list_types",
]
