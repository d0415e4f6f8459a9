import logging
from pathlib import Path
from typing import Optional

from dotstore.config import load_config_from_path
from dotstore.registry import AdapterRegistry


def get_project_root() -> Path:
    return Path.cwd()


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def make_registry(storage_dir: Optional[Path] = None) -> AdapterRegistry:
    # Composition root: configuration is resolved once and injected
    config = load_config_from_path(get_project_root())
    if storage_dir is not None:
        config.storage_dir = storage_dir.resolve()
    return AdapterRegistry.from_config(config)
