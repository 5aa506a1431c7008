"""Document store port (abstract interface).

Defines the contract every storage backend must implement. Keys are
``/``-separated relative paths such as ``carts/<user>`` or
``orders/<user>/order-3.json``; documents are JSON-compatible dicts.
"""

from abc import ABC, abstractmethod


class PersistenceError(Exception):
    """A document could not be read, written or removed."""


def split_key(key: str) -> list[str]:
    """Split a key into path segments, rejecting anything that could escape the store."""
    if not isinstance(key, str) or not key:
        raise PersistenceError(f"Invalid document key: {key!r}")

    parts = key.split("/")
    for part in parts:
        if part in ("", ".", "..") or "\\" in part or "\x00" in part:
            raise PersistenceError(f"Invalid document key: {key!r}")
    return parts


class DocumentStore(ABC):
    """Abstract key/document storage."""

    @abstractmethod
    def get(self, key: str) -> dict:
        """Return the document stored at ``key``.

        Raises ``protean.exceptions.ObjectNotFoundError`` when the document
        does not exist and ``PersistenceError`` when it cannot be read.
        """
        ...

    @abstractmethod
    def put(self, key: str, document: dict) -> None:
        """Store ``document`` at ``key``, replacing any previous version atomically."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the document at ``key``. Removing a missing document is not an error."""
        ...

    @abstractmethod
    def list(self, prefix: str) -> list[str]:
        """Return the keys of documents stored directly under ``prefix``, sorted."""
        ...


def key_segment(value) -> str:
    """Validate a value (a user id, say) that is embedded as one key segment."""
    text = str(value)
    if "/" in text:
        raise PersistenceError(f"Invalid key segment: {text!r}")
    split_key(text)
    return text
