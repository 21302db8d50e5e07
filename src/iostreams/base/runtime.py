"""
runtime — единственная точка, где определяется:
- установлен ли плагин с собственным FileStore
- какой FileStore использовать по умолчанию (plugin или local)

Переменные окружения:
- IOSTREAMS_USE_PLUGIN=0      — не искать плагин
- IOSTREAMS_DEBUG_PLUGIN=1    — печатать traceback при ошибке загрузки плагина
- IOSTREAMS_LOCAL_ROOT=<dir>  — базовый каталог LocalFileStore для относительных путей

Доменный код не должен импортировать плагин напрямую.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib.metadata import entry_points

from iostreams.base.filestore import FileStore, LocalFileStore

PLUGIN_GROUP = "iostreams.plugin"
PLUGIN_NAME = "filestore"


@dataclass(frozen=True)
class Providers:
    filestore: FileStore
    source: str  # "plugin" | "local"


_PROVIDERS: Providers | None = None


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip() not in ("0", "false", "False", "")


def _load_plugin_providers() -> Providers | None:
    """Пытается загрузить FileStore из плагина через entry-points."""
    try:
        eps = entry_points().select(group=PLUGIN_GROUP, name=PLUGIN_NAME)
        loaded_any = False
        for ep in eps:
            loaded_any = True
            factory = ep.load()
            result = factory()
            # 1) dict{"filestore": ...}
            if isinstance(result, dict):
                fs = result.get("filestore") or result.get("store")
                if fs is not None:
                    return Providers(filestore=fs, source="plugin")
            # 2) сразу объект с open_binary
            elif callable(getattr(result, "open_binary", None)):
                return Providers(filestore=result, source="plugin")

        if loaded_any:
            # entry-point существует, но формат ответа не распознан
            print(
                "WARN: Plugin entrypoint найден, но filestore не распознан; "
                "ожидается FileStore или dict с ключом filestore"
            )
    except Exception as e:
        # Плагин может отсутствовать или быть сломан.
        # В этом случае iostreams обязан перейти на local-режим.
        if _flag("IOSTREAMS_DEBUG_PLUGIN", "0"):
            import traceback
            print("ERROR: Failed to load plugin filestore:", repr(e))
            traceback.print_exc()
        else:
            print("WARN: Plugin filestore load failed; set IOSTREAMS_DEBUG_PLUGIN=1 to see details")
        return None
    return None


def _build_local_providers() -> Providers:
    """Локальный FileStore (fallback)."""
    root = os.getenv("IOSTREAMS_LOCAL_ROOT") or None
    return Providers(filestore=LocalFileStore(root=root), source="local")


def get_providers(force_reload: bool = False) -> Providers:
    """Возвращает активные провайдеры. Кэшируется на время процесса."""
    global _PROVIDERS
    if _PROVIDERS is not None and not force_reload:
        return _PROVIDERS

    if _flag("IOSTREAMS_USE_PLUGIN", "1"):
        plugin_providers = _load_plugin_providers()
        if plugin_providers is not None:
            _PROVIDERS = plugin_providers
            print("INFO: Providers loaded from plugin")
            return _PROVIDERS

    _PROVIDERS = _build_local_providers()
    print("INFO: Providers loaded from local")
    return _PROVIDERS


def get_filestore() -> FileStore:
    return get_providers().filestore
