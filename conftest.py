import json
from pathlib import Path

import pytest
import yaml


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("DOTSTORE_DIR", raising=False)
    monkeypatch.delenv("DOTSTORE_FORMAT", raising=False)


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    path = tmp_path / "configs"
    path.mkdir()
    return path


@pytest.fixture
def write_document():
    """Writes raw document content, serializing mappings by file suffix."""

    def _write(path: Path, content) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        elif path.suffix in (".yaml", ".yml"):
            path.write_text(yaml.safe_dump(content), encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
