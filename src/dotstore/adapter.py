import logging
from pathlib import Path
from typing import Any, List, Optional

from .accessor import delete_path, get_path, set_path
from .exceptions import (
    DocumentReadError,
    DocumentWriteError,
    NotLoadedError,
    PathTraversalError,
)
from .interfaces import Document, DocumentStoreProtocol
from .store import FileDocumentStore

log = logging.getLogger(__name__)


class DocumentAdapter:
    """
    Owns the in-memory copy of one document and keeps it in sync with
    durable storage.

    The document is loaded on construction. A missing file is an empty
    document; an unreadable one leaves the adapter unloaded, and every
    access then raises NotLoadedError until `load()` succeeds.
    """

    def __init__(self, location: Path, store: Optional[DocumentStoreProtocol] = None):
        self._location = Path(location)
        self.store = store or FileDocumentStore()
        self.data: Optional[Document] = None
        self.load()

    @property
    def location(self) -> Path:
        return self._location

    @property
    def is_loaded(self) -> bool:
        return self.data is not None

    @property
    def internal(self) -> Document:
        """
        The live top-level mapping, by reference.

        Escape hatch for bulk operations: changes made through it skip path
        validation and are persisted by the next `save()` like any other.
        """
        return self._require_data()

    @property
    def keys(self) -> List[str]:
        return list(self._require_data().keys())

    @property
    def values(self) -> List[Any]:
        return list(self._require_data().values())

    def _require_data(self) -> Document:
        if self.data is None:
            raise NotLoadedError(self._location)
        return self.data

    def _check_path(self, path: Any) -> Document:
        data = self._require_data()
        if not isinstance(path, str):
            raise TypeError(f"path must be a string, got {type(path).__name__}")
        return data

    def load(self) -> None:
        if not self.store.exists(self._location):
            self.data = {}
            return

        try:
            self.data = self.store.read_document(self._location)
        except DocumentReadError as e:
            log.error(f"Failed to load {self._location}: {e}")
            self.data = None

    def save(self) -> None:
        data = self._require_data()
        try:
            self.store.write_document(self._location, data)
        except DocumentWriteError as e:
            log.error(f"Failed to save data to {self._location}: {e}")

    def get(self, path: str, default: Any = None) -> Any:
        return get_path(self._check_path(path), path, default)

    def set(self, path: str, value: Any) -> Any:
        """
        Stores `value` at `path` and returns the value it replaced.

        Missing intermediate mappings are created. The previous value is
        None when nothing was stored there, including when an intermediate
        segment did not hold a mapping yet.
        """
        data = self._check_path(path)
        try:
            old_value = get_path(data, path)
        except PathTraversalError:
            old_value = None

        set_path(data, path, value)
        return old_value

    def delete(self, path: str) -> Any:
        """Removes the value at `path`, returning it (None if absent)."""
        return delete_path(self._check_path(path), path)

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "unloaded"
        return f"<DocumentAdapter '{self._location}' ({state})>"
