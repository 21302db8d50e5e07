"""
LocalFileStore — реализация FileStore для локальной файловой системы.

Используется, когда плагин с собственным FileStore не установлен.

Требования:
- отдавать сырые потоки (buffering=0), буферизацией управляет FileHandle
- работать как на Windows, так и на Linux/macOS

Замечание:
- LocalFileStore принимает POSIX-разделители ('/') в путях — pathlib это допускает.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from iostreams.base.filestore.base import FileStore
from iostreams.base.filestore.types import FileStat, IOMode


class LocalFileStore(FileStore):
    """Локальная реализация FileStore."""

    def __init__(self, root: str | None = None):
        # root используется как базовый каталог для относительных путей
        self._root = Path(root).expanduser().resolve() if root else None

    @property
    def root(self) -> Path | None:
        return self._root

    def _abs(self, path: str) -> Path:
        # Нормализация: обратные слэши приводятся к '/', pathlib на Windows это понимает.
        p = Path(str(path).replace("\\", "/"))
        if self._root and not p.is_absolute():
            p = self._root / p
        return p

    def open_binary(self, path: str, mode: IOMode) -> BinaryIO:
        p = self._abs(path)
        mode = IOMode(mode)
        if mode.creates:
            p.parent.mkdir(parents=True, exist_ok=True)
        if mode is IOMode.READ_WRITE and not p.exists():
            # r+b не создаёт файл сам.
            p.touch()
        return p.open(mode.value, buffering=0)

    def stat(self, path: str) -> FileStat:
        p = self._abs(path)
        st = p.stat()
        return FileStat(
            path=str(path),
            is_file=p.is_file(),
            is_dir=p.is_dir(),
            size=int(st.st_size),
            mtime=float(st.st_mtime),
        )
