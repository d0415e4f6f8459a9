import logging
from pathlib import Path
from typing import Dict, List, Optional, TYPE_CHECKING

from .adapter import DocumentAdapter
from .interfaces import DocumentStoreProtocol
from .store import FileDocumentStore

if TYPE_CHECKING:
    from .config import StoreConfig

log = logging.getLogger(__name__)


class AdapterRegistry:
    """
    Hands out exactly one DocumentAdapter per logical document name.

    Adapters are cached under the name they were requested with, not the
    resolved file: "prefs" and "prefs.json" map to the same file but get two
    independent adapters, and the last one saved wins.
    """

    def __init__(
        self,
        base_dir: Path,
        extension: str = ".json",
        store: Optional[DocumentStoreProtocol] = None,
    ):
        self.base_dir = Path(base_dir).resolve()
        self.extension = extension
        self.store = store or FileDocumentStore()
        self._cache: Dict[str, DocumentAdapter] = {}

    @classmethod
    def from_config(
        cls, config: "StoreConfig", store: Optional[DocumentStoreProtocol] = None
    ) -> "AdapterRegistry":
        return cls(config.storage_dir, extension=config.extension, store=store)

    @property
    def names(self) -> List[str]:
        return list(self._cache)

    def resolve_location(self, name: str) -> Path:
        location = (self.base_dir / name).resolve()
        if not str(location).endswith(self.extension):
            location = location.with_name(location.name + self.extension)
        return location

    def get_adapter(self, name: str) -> DocumentAdapter:
        adapter = self._cache.get(name)
        if adapter is None:
            adapter = DocumentAdapter(self.resolve_location(name), store=self.store)
            self._cache[name] = adapter
        return adapter

    def __call__(self, name: str) -> DocumentAdapter:
        return self.get_adapter(name)

    def __contains__(self, name: object) -> bool:
        return name in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def save_all(self) -> None:
        for name, adapter in self._cache.items():
            if not adapter.is_loaded:
                log.warning(f"Skipping save of '{name}': {adapter.location} is not loaded")
                continue
            adapter.save()
