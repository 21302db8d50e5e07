"""
bytes — базовые операции с файлами целиком поверх scoped-потоков.

Это "универсальная база" для кода, которому не нужен потоковый доступ.
"""

from __future__ import annotations

from iostreams.base.filestore.base import FileStore
from iostreams.base.filestore.types import NO_BUFFERING, IOMode
from iostreams.base.ioapi.file import (
    with_file_as_input_starting_at,
    with_file_as_output,
    with_file_as_output_ext,
)
from iostreams.base.runtime import get_filestore
from iostreams.base.streams.types import InputStream, connect


def _join(stream: InputStream[bytes]) -> bytes:
    return b"".join(stream)


def read_bytes(path: str, store: FileStore | None = None) -> bytes:
    return with_file_as_input_starting_at(0, path, _join, store=store)


def read_bytes_from(path: str, start: int, store: FileStore | None = None) -> bytes:
    """Читает файл начиная с байта start и до конца."""
    return with_file_as_input_starting_at(start, path, _join, store=store)


def read_tail(path: str, size: int, store: FileStore | None = None) -> bytes:
    """Возвращает последние size байт файла (или весь файл, если он короче)."""
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    store = store or get_filestore()
    total = store.stat(path).size or 0
    start = max(total - size, 0)
    return with_file_as_input_starting_at(start, path, _join, store=store)


def write_bytes(path: str, data: bytes, store: FileStore | None = None) -> None:
    with_file_as_output(path, lambda out: out.write(data), store=store)


def append_bytes(path: str, data: bytes, store: FileStore | None = None) -> None:
    with_file_as_output_ext(path, IOMode.APPEND, NO_BUFFERING, lambda out: out.write(data), store=store)


def copy(src: str, dst: str, store: FileStore | None = None) -> None:
    """Копирует файл потоково, не загружая его в память целиком."""
    store = store or get_filestore()
    with_file_as_input_starting_at(
        0,
        src,
        lambda source: with_file_as_output(dst, lambda sink: connect(source, sink), store=store),
        store=store,
    )
