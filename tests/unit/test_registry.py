import logging
from pathlib import Path
from unittest.mock import MagicMock

from dotstore import AdapterRegistry, StoreConfig


def test_same_name_returns_same_instance(storage_dir: Path):
    registry = AdapterRegistry(storage_dir)

    first = registry("foo")
    second = registry("foo")

    assert first is second
    first.set("shared.value", 1)
    assert second.get("shared.value") == 1


def test_resolve_location_appends_extension(storage_dir: Path):
    registry = AdapterRegistry(storage_dir)

    assert registry.resolve_location("foo") == storage_dir.resolve() / "foo.json"
    assert registry.resolve_location("foo.json") == storage_dir.resolve() / "foo.json"
    assert (
        registry.resolve_location("sub/bar")
        == storage_dir.resolve() / "sub" / "bar.json"
    )


def test_resolve_location_is_absolute(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    registry = AdapterRegistry(Path("relative"))

    location = registry.resolve_location("foo")

    assert location.is_absolute()
    assert location == tmp_path.resolve() / "relative" / "foo.json"


def test_yaml_extension(storage_dir: Path):
    registry = AdapterRegistry(storage_dir, extension=".yaml")

    adapter = registry("settings")
    adapter.set("a.b", 1)
    registry.save_all()

    assert (storage_dir / "settings.yaml").is_file()


def test_aliased_names_get_independent_adapters(storage_dir: Path):
    registry = AdapterRegistry(storage_dir)

    plain = registry("foo")
    suffixed = registry("foo.json")

    assert plain is not suffixed
    assert plain.location == suffixed.location
    assert registry.names == ["foo", "foo.json"]


def test_cache_tracks_names_in_creation_order(storage_dir: Path):
    registry = AdapterRegistry(storage_dir)
    registry("b")
    registry("a")
    registry("b")

    assert registry.names == ["b", "a"]
    assert len(registry) == 2
    assert "a" in registry
    assert "c" not in registry


def test_get_adapter_is_the_call_surface(storage_dir: Path):
    registry = AdapterRegistry(storage_dir)

    assert registry.get_adapter("x") is registry("x")


def test_save_all_persists_every_adapter(storage_dir: Path):
    registry = AdapterRegistry(storage_dir)
    registry("one").set("value", 1)
    registry("two").set("nested.value", 2)

    registry.save_all()

    fresh = AdapterRegistry(storage_dir)
    assert fresh("one").get("value") == 1
    assert fresh("two").get("nested.value") == 2


def test_save_all_runs_in_creation_order(storage_dir: Path):
    registry = AdapterRegistry(storage_dir)
    calls = []
    for name in ["first", "second", "last"]:
        adapter = registry(name)
        adapter.save = MagicMock(side_effect=lambda n=name: calls.append(n))

    registry.save_all()

    assert calls == ["first", "second", "last"]


def test_save_all_survives_write_errors(storage_dir: Path, caplog):
    blocker = storage_dir / "blocked"
    blocker.write_text("")
    registry = AdapterRegistry(storage_dir)
    registry("blocked/doc").set("a", 1)
    registry("good").set("a", 2)

    with caplog.at_level(logging.ERROR):
        registry.save_all()

    assert "Failed to save" in caplog.text
    assert (storage_dir / "good.json").is_file()


def test_save_all_skips_unloaded_adapters(storage_dir: Path, caplog):
    (storage_dir / "corrupt.json").write_text("{oops")
    registry = AdapterRegistry(storage_dir)
    corrupt = registry("corrupt")
    registry("fine").set("ok", True)

    with caplog.at_level(logging.WARNING, logger="dotstore.registry"):
        registry.save_all()

    assert not corrupt.is_loaded
    assert "corrupt" in caplog.text
    assert (storage_dir / "corrupt.json").read_text() == "{oops"
    assert (storage_dir / "fine.json").is_file()


def test_adapters_share_the_injected_store(storage_dir: Path):
    store = MagicMock()
    store.exists.return_value = False
    registry = AdapterRegistry(storage_dir, store=store)

    registry("doc").set("a", 1)
    registry.save_all()

    store.write_document.assert_called_once_with(
        storage_dir.resolve() / "doc.json", {"a": 1}
    )


def test_from_config(storage_dir: Path):
    config = StoreConfig(storage_dir=storage_dir, extension=".yaml")

    registry = AdapterRegistry.from_config(config)

    assert registry.base_dir == storage_dir.resolve()
    assert registry.resolve_location("x").name == "x.yaml"
