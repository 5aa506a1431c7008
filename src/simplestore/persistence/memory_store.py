"""In-memory document store — records documents in a dict for tests."""

import copy
import json

from protean.exceptions import ObjectNotFoundError

from simplestore.persistence.port import DocumentStore, PersistenceError, split_key


class MemoryDocumentStore(DocumentStore):
    """Document store that keeps JSON round-tripped copies in memory."""

    def __init__(self) -> None:
        self.documents: dict[str, dict] = {}

    def get(self, key: str) -> dict:
        split_key(key)
        try:
            document = self.documents[key]
        except KeyError:
            raise ObjectNotFoundError(f"Document {key} does not exist") from None

        if not isinstance(document, dict):
            raise PersistenceError(f"Document {key} is not a JSON object")
        return copy.deepcopy(document)

    def put(self, key: str, document: dict) -> None:
        split_key(key)
        try:
            # Same constraints as the file store: the document must be JSON.
            self.documents[key] = json.loads(json.dumps(document))
        except (TypeError, ValueError) as exc:
            raise PersistenceError(f"Unable to write document {key}: {exc}") from exc

    def delete(self, key: str) -> None:
        split_key(key)
        self.documents.pop(key, None)

    def list(self, prefix: str) -> list[str]:
        split_key(prefix)
        depth = prefix.count("/") + 1
        return sorted(
            key for key in self.documents if key.startswith(prefix + "/") and key.count("/") == depth
        )

    def reset(self) -> None:
        """Drop every document (useful between tests)."""
        self.documents.clear()
