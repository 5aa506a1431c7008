"""File-backed document store — one JSON file per document.

Writes go to a temporary file in the target directory which is then renamed
over the destination, so readers never observe a partially written document.
"""

import json
import os
import tempfile
from pathlib import Path

import structlog
from protean.exceptions import ObjectNotFoundError

from simplestore.persistence.port import DocumentStore, PersistenceError, split_key

logger = structlog.get_logger(__name__)

_DIR_MODE = 0o700
_TMP_PREFIX = ".tmp-"


class FileDocumentStore(DocumentStore):
    def __init__(self, root: str | os.PathLike) -> None:
        self.root = Path(root)

    def _path(self, key: str) -> Path:
        return self.root.joinpath(*split_key(key))

    def get(self, key: str) -> dict:
        path = self._path(key)
        try:
            with path.open("r", encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError:
            raise ObjectNotFoundError(f"Document {key} does not exist") from None
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Unable to read document {key}: {exc}") from exc

        if not isinstance(document, dict):
            raise PersistenceError(f"Document {key} is not a JSON object")
        return document

    def put(self, key: str, document: dict) -> None:
        path = self._path(key)
        try:
            path.parent.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=_TMP_PREFIX, dir=path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, path)
            except BaseException:
                try:
                    os.unlink(tmp_name)
                except FileNotFoundError:
                    pass
                raise
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Unable to write document {key}: {exc}") from exc

        logger.debug("Document written", key=key)

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise PersistenceError(f"Unable to remove document {key}: {exc}") from exc

        logger.debug("Document removed", key=key)

    def list(self, prefix: str) -> list[str]:
        directory = self._path(prefix)
        try:
            entries = sorted(directory.iterdir())
        except FileNotFoundError:
            return []
        except NotADirectoryError:
            return []
        except OSError as exc:
            raise PersistenceError(f"Unable to list documents under {prefix}: {exc}") from exc

        return [
            f"{prefix}/{entry.name}"
            for entry in entries
            if entry.is_file() and not entry.name.startswith(_TMP_PREFIX)
        ]
