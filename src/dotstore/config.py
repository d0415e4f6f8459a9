import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

from .exceptions import ConfigError

DEFAULT_STORAGE_DIR = ".dotstore"

FORMAT_EXTENSIONS = {
    "json": ".json",
    "yaml": ".yaml",
}


@dataclass
class StoreConfig:
    storage_dir: Path
    extension: str = ".json"


def _find_pyproject_toml(search_path: Path) -> Optional[Path]:
    current_dir = search_path.resolve()
    while True:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        if current_dir.parent == current_dir:
            return None
        current_dir = current_dir.parent


def _read_tool_table(search_path: Path) -> Tuple[Path, Dict[str, Any]]:
    pyproject_path = _find_pyproject_toml(search_path)
    if pyproject_path is None:
        return search_path.resolve(), {}

    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}") from e

    return pyproject_path.parent, data.get("tool", {}).get("dotstore", {})


def _extension_for(fmt: str) -> str:
    try:
        return FORMAT_EXTENSIONS[fmt.lower()]
    except KeyError:
        known = ", ".join(sorted(FORMAT_EXTENSIONS))
        raise ConfigError(f"Unknown document format '{fmt}' (expected one of: {known})")


def load_config_from_path(search_path: Path) -> StoreConfig:
    """
    Builds the store configuration for a project.

    Lookup order for each setting:
    1. Environment (DOTSTORE_DIR, DOTSTORE_FORMAT)
    2. [tool.dotstore] in the nearest pyproject.toml
    3. Defaults (".dotstore" next to the pyproject, JSON documents)

    Relative directories are resolved against the directory holding the
    pyproject.toml, or `search_path` when there is none.
    """
    project_root, tool_data = _read_tool_table(search_path)

    storage_dir = os.getenv("DOTSTORE_DIR") or tool_data.get(
        "storage_dir", DEFAULT_STORAGE_DIR
    )
    fmt = os.getenv("DOTSTORE_FORMAT") or tool_data.get("format", "json")

    return StoreConfig(
        storage_dir=(project_root / storage_dir).resolve(),
        extension=_extension_for(fmt),
    )
