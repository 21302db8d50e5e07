"""
handle — файловый дескриптор поверх сырого потока FileStore.

FileHandle — это "платформенные примитивы" для ioapi:
- seek(offset)          — абсолютное позиционирование
- set_buffering(mode)   — режим буферизации записи
- read/readinto/write   — ввод-вывод
- close()               — сброс буфера и закрытие сырого потока

Политика буферизации:
- none  — write() сразу пишет в сырой поток
- line  — копит данные и сбрасывает всё до последнего b"\\n"
- block — копит данные и сбрасывает, когда накоплено >= size байт

Перед seek/read накопленные данные сбрасываются, чтобы позиция
в сыром потоке совпадала с логической.
"""

from __future__ import annotations

import os
from typing import BinaryIO

from iostreams.base.filestore.base import FileStore
from iostreams.base.filestore.types import BLOCK_BUFFERING, BufferKind, BufferMode, IOMode


class FileHandle:
    """Открытый файл. Закрывается ровно один раз, повторное закрытие — no-op."""

    def __init__(self, raw: BinaryIO, path: str, mode: IOMode):
        self._raw = raw
        self._pending = bytearray()
        self._buffering = BLOCK_BUFFERING
        self._closed = False
        self.path = path
        self.mode = mode

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"FileHandle(path={self.path!r}, mode={self.mode.value!r}, {state})"

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def buffering(self) -> BufferMode:
        return self._buffering

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError(f"I/O operation on closed file: {self.path}")

    # --- Позиционирование и настройка ---

    def seek(self, offset: int) -> int:
        """Абсолютный seek. Отрицательные смещения не фильтруются — ошибку даёт сырой поток."""
        self._check_open()
        self.flush()
        return self._raw.seek(offset, os.SEEK_SET)

    def tell(self) -> int:
        self._check_open()
        return self._raw.tell() + len(self._pending)

    def set_buffering(self, mode: BufferMode) -> None:
        """Меняет режим буферизации. Накопленное по старому режиму сбрасывается."""
        self._check_open()
        if not isinstance(mode, BufferMode):
            raise TypeError(f"Expected BufferMode, got {type(mode).__name__}")
        self.flush()
        self._buffering = mode

    # --- Чтение ---

    def read(self, size: int) -> bytes:
        """Читает до size байт. b"" — конец файла."""
        self._check_open()
        self.flush()
        return self._raw.read(size) or b""

    def readinto(self, buffer) -> int:
        """Читает в переданный буфер, возвращает число байт (0 — конец файла)."""
        self._check_open()
        self.flush()
        return self._raw.readinto(buffer) or 0

    # --- Запись ---

    def write(self, data) -> None:
        self._check_open()
        kind = self._buffering.kind

        if kind is BufferKind.NONE:
            self._write_through(data)
            return

        self._pending += data

        if kind is BufferKind.LINE:
            idx = self._pending.rfind(b"\n")
            if idx >= 0:
                chunk = bytes(self._pending[: idx + 1])
                del self._pending[: idx + 1]
                self._write_through(chunk)
        elif len(self._pending) >= self._buffering.block_size:
            self.flush()

    def flush(self) -> None:
        if not self._pending:
            return
        chunk = bytes(self._pending)
        self._pending.clear()
        self._write_through(chunk)

    def _write_through(self, data) -> None:
        view = memoryview(data)
        while view:
            n = self._raw.write(view)
            if not n:
                raise OSError(f"Short write to {self.path}: raw stream accepted no bytes")
            view = view[n:]

    # --- Закрытие ---

    def close(self) -> None:
        """Сбрасывает буфер и закрывает сырой поток.

        Сырой поток закрывается даже если сброс упал; наружу уходит ошибка
        закрытия, если она есть, иначе ошибка сброса.
        """
        if self._closed:
            return
        self._closed = True
        try:
            self.flush()
        finally:
            self._raw.close()


def open_handle(store: FileStore, path: str, mode: IOMode) -> FileHandle:
    """Открывает файл в бинарном режиме и оборачивает его в FileHandle."""
    mode = IOMode(mode)
    raw = store.open_binary(path, mode)
    return FileHandle(raw, str(path), mode)
