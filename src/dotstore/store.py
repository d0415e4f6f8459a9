import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional

from .exceptions import DocumentReadError, DocumentWriteError
from .handlers import JsonHandler, YamlHandler
from .interfaces import Document, DocumentHandlerProtocol, DocumentStoreProtocol

log = logging.getLogger(__name__)


class FileDocumentStore(DocumentStoreProtocol):
    def __init__(self, handlers: Optional[List[DocumentHandlerProtocol]] = None):
        self.handlers = handlers or [JsonHandler(), YamlHandler()]

    def _handler_for(self, location: Path) -> Optional[DocumentHandlerProtocol]:
        for handler in self.handlers:
            if handler.match(location):
                return handler
        return None

    def exists(self, location: Path) -> bool:
        return location.is_file()

    def read_document(self, location: Path) -> Document:
        handler = self._handler_for(location)
        if handler is None:
            raise DocumentReadError(location, "no handler for this file type")

        try:
            text = location.read_text(encoding="utf-8")
            content = handler.loads(text)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise DocumentReadError(location, str(e)) from e

        if not isinstance(content, dict):
            raise DocumentReadError(
                location, f"top level is {type(content).__name__}, not a mapping"
            )
        return content

    def write_document(self, location: Path, document: Document) -> None:
        handler = self._handler_for(location)
        if handler is None:
            raise DocumentWriteError(location, "no handler for this file type")

        try:
            new_content = handler.dumps(document)
        except (TypeError, ValueError) as e:
            raise DocumentWriteError(location, str(e)) from e

        if location.is_file():
            try:
                if location.read_text(encoding="utf-8") == new_content:
                    log.debug(f"Skipping write to {location}, content unchanged")
                    return
            except (OSError, UnicodeDecodeError):
                # Unreadable old content is simply overwritten
                pass

        try:
            location.parent.mkdir(parents=True, exist_ok=True)
            self._replace_atomically(location, new_content)
        except OSError as e:
            raise DocumentWriteError(location, str(e)) from e

    def _replace_atomically(self, location: Path, content: str) -> None:
        # A crash mid-write leaves the previous document intact
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{location.name}.", suffix=".tmp", dir=location.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, location)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
