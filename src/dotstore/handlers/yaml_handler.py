from pathlib import Path
from typing import Any

import yaml

from dotstore.interfaces import Document, DocumentHandlerProtocol


class YamlHandler(DocumentHandlerProtocol):
    suffixes = (".yaml", ".yml")

    def match(self, path: Path) -> bool:
        return path.suffix.lower() in self.suffixes

    def loads(self, text: str) -> Any:
        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(str(e)) from e
        # An empty file holds an empty document
        return {} if content is None else content

    def dumps(self, document: Document) -> str:
        try:
            return yaml.safe_dump(
                document,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False,
            )
        except yaml.YAMLError as e:
            raise TypeError(str(e)) from e
