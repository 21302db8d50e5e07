from pathlib import Path

import pytest

from iostreams.base import runtime
from iostreams.base.filestore import LocalFileStore


class FakeEntryPoint:
    def __init__(self, factory):
        self._factory = factory

    def load(self):
        return self._factory


class FakeEntryPoints:
    def __init__(self, eps):
        self._eps = eps

    def select(self, group, name):
        assert (group, name) == (runtime.PLUGIN_GROUP, runtime.PLUGIN_NAME)
        return self._eps


def patch_entry_points(monkeypatch, *factories):
    eps = FakeEntryPoints([FakeEntryPoint(f) for f in factories])
    monkeypatch.setattr(runtime, "entry_points", lambda: eps)


def test_local_fallback_uses_root(reset_runtime, monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("IOSTREAMS_USE_PLUGIN", "0")
    monkeypatch.setenv("IOSTREAMS_LOCAL_ROOT", str(tmp_path))

    providers = runtime.get_providers()

    assert providers.source == "local"
    assert isinstance(providers.filestore, LocalFileStore)
    assert providers.filestore.root == Path(tmp_path).resolve()
    assert "INFO: Providers loaded from local" in capsys.readouterr().out


def test_providers_are_cached(reset_runtime, monkeypatch):
    monkeypatch.setenv("IOSTREAMS_USE_PLUGIN", "0")
    first = runtime.get_providers()
    assert runtime.get_providers() is first
    assert runtime.get_providers(force_reload=True) is not first


@pytest.mark.parametrize("wrap", [lambda fs: fs, lambda fs: {"filestore": fs}])
def test_plugin_store_is_used(reset_runtime, monkeypatch, make_store, wrap):
    store = make_store()
    patch_entry_points(monkeypatch, lambda: wrap(store))
    monkeypatch.setenv("IOSTREAMS_USE_PLUGIN", "1")

    providers = runtime.get_providers()

    assert providers.source == "plugin"
    assert runtime.get_filestore() is store


def test_unrecognized_plugin_falls_back(reset_runtime, monkeypatch, capsys):
    patch_entry_points(monkeypatch, lambda: 42)
    monkeypatch.setenv("IOSTREAMS_USE_PLUGIN", "1")

    assert runtime.get_providers().source == "local"
    assert "WARN: Plugin entrypoint" in capsys.readouterr().out


def test_broken_plugin_falls_back(reset_runtime, monkeypatch, capsys):
    def broken():
        raise RuntimeError("plugin exploded")

    patch_entry_points(monkeypatch, broken)
    monkeypatch.setenv("IOSTREAMS_USE_PLUGIN", "1")
    monkeypatch.delenv("IOSTREAMS_DEBUG_PLUGIN", raising=False)

    assert runtime.get_providers().source == "local"
    assert "IOSTREAMS_DEBUG_PLUGIN=1" in capsys.readouterr().out


def test_default_store_is_used_by_ioapi(reset_runtime, monkeypatch, tmp_path):
    from iostreams.base import ioapi as ia

    monkeypatch.setenv("IOSTREAMS_USE_PLUGIN", "0")
    monkeypatch.setenv("IOSTREAMS_LOCAL_ROOT", str(tmp_path))

    ia.bytes.write_bytes("default.bin", b"via runtime")

    assert (tmp_path / "default.bin").read_bytes() == b"via runtime"
