"""
handle — превращение FileHandle в InputStream/OutputStream.

Потоки не владеют дескриптором: закрытие остаётся за тем, кто открыл файл
(см. ioapi.file). Конец OutputStream (write(None)) только сбрасывает буфер.
"""

from __future__ import annotations

from iostreams.base.filestore.handle import FileHandle
from iostreams.base.streams.types import InputStream, OutputStream

DEFAULT_CHUNK_SIZE = 32752


def _check_chunk_size(chunk_size: int) -> int:
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ValueError(f"chunk_size must be a positive int, got {chunk_size!r}")
    return chunk_size


def handle_to_input_stream(handle: FileHandle, chunk_size: int = DEFAULT_CHUNK_SIZE) -> InputStream[bytes]:
    """Каждый чанк — новый объект bytes, его можно хранить сколько угодно."""
    chunk_size = _check_chunk_size(chunk_size)

    def produce() -> bytes | None:
        data = handle.read(chunk_size)
        return data or None

    return InputStream(produce)


def unsafe_handle_to_input_stream(
    handle: FileHandle, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> InputStream[memoryview]:
    """Чанки — memoryview поверх одного переиспользуемого bytearray.

    Чанк действителен только до следующего read(): затем буфер перезаписывается.
    Нужно сохранить данные — копировать через bytes(chunk).
    """
    chunk_size = _check_chunk_size(chunk_size)
    view = memoryview(bytearray(chunk_size))

    def produce() -> memoryview | None:
        n = handle.readinto(view)
        if not n:
            return None
        return view[:n]

    return InputStream(produce)


def handle_to_output_stream(handle: FileHandle) -> OutputStream[bytes]:
    def consume(chunk) -> None:
        if chunk is None:
            handle.flush()
        elif chunk:
            handle.write(chunk)

    return OutputStream(consume)
