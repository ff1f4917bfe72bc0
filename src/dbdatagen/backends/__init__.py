"""Backend implementations for synthetic data loads."""

from dbdatagen.backends.base import Backend
from dbdatagen.backends.direct import DirectBackend
from dbdatagen.backends.staging import StagingBackend

__all__ = ["Backend", "DirectBackend", "StagingBackend"]
