from pathlib import Path
from typing import Any, Dict, Protocol, runtime_checkable

Document = Dict[str, Any]


@runtime_checkable
class DocumentHandlerProtocol(Protocol):
    """
    Defines the contract for a single serialization format.

    A handler only converts between text and a Document. It never touches
    the filesystem; the store owns all I/O.
    """

    def match(self, path: Path) -> bool:
        """
        Returns True if this handler is responsible for the given file.
        Example: JsonHandler matches "settings.json"
        """
        ...

    def loads(self, text: str) -> Any:
        """
        Parses raw file content.

        Raises:
            ValueError: If the content is not valid for this format.
        """
        ...

    def dumps(self, document: Document) -> str:
        """
        Serializes a document into deterministic text.

        Identical documents must produce identical text so that repeated
        saves leave the file untouched.
        """
        ...


@runtime_checkable
class DocumentStoreProtocol(Protocol):
    """
    Defines the contract for durable document storage.

    A document is always read and written as a whole.
    """

    def exists(self, location: Path) -> bool:
        """
        Returns True if a durable copy of the document exists.
        """
        ...

    def read_document(self, location: Path) -> Document:
        """
        Loads the complete document stored at `location`.

        Raises:
            DocumentReadError: If the file cannot be read, cannot be parsed,
                or does not hold a mapping at its top level.
        """
        ...

    def write_document(self, location: Path, document: Document) -> None:
        """
        Replaces the durable copy at `location` with `document`.

        Raises:
            DocumentWriteError: If serialization or the write fails.
        """
        ...
