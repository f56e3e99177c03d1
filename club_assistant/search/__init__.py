# Makes the folder importable as a package.
# Exports the retrieval pipeline pieces for convenience.

from .classifier import classify
from .context import serialize
from .retriever import Retriever
from .store import RecordStore, SQLiteRecordStore
from .types import ContextBlock, EntityKind, RetrievalQuery

__all__ = [
    "classify",
    "serialize",
    "Retriever",
    "RecordStore",
    "SQLiteRecordStore",
    "ContextBlock",
    "EntityKind",
    "RetrievalQuery",
]
