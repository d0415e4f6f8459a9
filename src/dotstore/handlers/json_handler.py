import json
from pathlib import Path
from typing import Any

from dotstore.interfaces import Document, DocumentHandlerProtocol


class JsonHandler(DocumentHandlerProtocol):
    suffixes = (".json",)

    def match(self, path: Path) -> bool:
        return path.suffix.lower() in self.suffixes

    def loads(self, text: str) -> Any:
        # json.JSONDecodeError is a ValueError
        return json.loads(text)

    def dumps(self, document: Document) -> str:
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
