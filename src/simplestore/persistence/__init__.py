"""Document persistence adapters.

Business logic talks to a DocumentStore. FileDocumentStore keeps one JSON
file per document under a root directory; MemoryDocumentStore keeps them in
a dict for tests.
"""

from simplestore.persistence.file_store import FileDocumentStore
from simplestore.persistence.memory_store import MemoryDocumentStore
from simplestore.persistence.patterns import DecimalFilePattern, parse_sequence_id
from simplestore.persistence.port import DocumentStore, PersistenceError

__all__ = [
    "DecimalFilePattern",
    "DocumentStore",
    "FileDocumentStore",
    "MemoryDocumentStore",
    "PersistenceError",
    "parse_sequence_id",
]
