from .accessor import delete_path, get_path, set_path
from .adapter import DocumentAdapter
from .config import StoreConfig, load_config_from_path
from .exceptions import (
    ConfigError,
    DocumentReadError,
    DocumentWriteError,
    NotLoadedError,
    PathTraversalError,
    StoreError,
)
from .registry import AdapterRegistry
from .store import FileDocumentStore

__all__ = [
    "get_path",
    "set_path",
    "delete_path",
    "DocumentAdapter",
    "AdapterRegistry",
    "FileDocumentStore",
    "StoreConfig",
    "load_config_from_path",
    "StoreError",
    "ConfigError",
    "NotLoadedError",
    "PathTraversalError",
    "DocumentReadError",
    "DocumentWriteError",
]
