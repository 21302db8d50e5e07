"""
FileStore — интерфейс транспорта файлов для потоков.

Принцип:
- FileStore только открывает сырые (небуферизованные) бинарные потоки
- буферизация, seek и закрытие живут в FileHandle (filestore.handle)
- InputStream/OutputStream и scoped-протокол живут выше (в ioapi)

Важно:
- open_binary должен вернуть поток без собственного буфера,
  иначе режим буферизации FileHandle перестаёт быть наблюдаемым.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol

from iostreams.base.filestore.types import FileStat, IOMode


class FileStore(Protocol):
    """Транспорт файлов."""

    def open_binary(self, path: str, mode: IOMode) -> BinaryIO:
        """Открывает сырой бинарный поток в заданном режиме."""
        ...

    def stat(self, path: str) -> FileStat:
        """Возвращает метаданные файла."""
        ...
