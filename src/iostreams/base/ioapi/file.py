"""
file — InputStream/OutputStream для файлов со scoped-семантикой.

Все функции работают по схеме "открыть → (seek/буферизация) → поток →
вычисление → закрыть":
- файл открывается в бинарном режиме через FileStore
- дескриптор закрывается ровно один раз на любом выходе: нормальный
  возврат, исключение, KeyboardInterrupt, отмена задачи
- если упало и вычисление, и закрытие, наружу уходит ошибка ЗАКРЫТИЯ,
  а ошибка вычисления доступна как __cause__

Если нужен полный контроль над временем жизни дескриптора,
используйте filestore.open_handle + streams.handle_to_*_stream напрямую.

Пример:
    from iostreams.base import ioapi as ia

    data = ia.file.with_file_as_input("data.bin", lambda s: b"".join(s))

    with ia.file.input_file("data.bin", start=128) as stream:
        head = stream.read()
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from iostreams.base.filestore.base import FileStore
from iostreams.base.filestore.handle import FileHandle, open_handle
from iostreams.base.filestore.types import NO_BUFFERING, BufferMode, IOMode
from iostreams.base.runtime import get_filestore
from iostreams.base.streams.handle import (
    DEFAULT_CHUNK_SIZE,
    handle_to_input_stream,
    handle_to_output_stream,
    unsafe_handle_to_input_stream,
)
from iostreams.base.streams.types import InputStream, OutputStream

A = TypeVar("A")
S = TypeVar("S")


def _check_start(start: int) -> int:
    if isinstance(start, bool) or not isinstance(start, int):
        raise TypeError(f"start must be an int byte offset, got {type(start).__name__}")
    return start


def _close_after_failure(handle: FileHandle, exc: BaseException) -> None:
    try:
        handle.close()
    except BaseException as close_exc:
        # Ошибка закрытия важнее ошибки вычисления.
        raise close_exc from exc


class ScopedFile(Generic[S]):
    """Открытый на время with-блока файл, отданный наружу как поток.

    attach(handle) выполняется уже внутри scope: его ошибки (seek,
    буферизация) закрывают файл так же, как ошибки тела with.
    Ошибка закрытия заменяет любое исключение тела, включая StopIteration.
    """

    def __init__(
        self,
        path: str,
        mode: IOMode,
        attach: Callable[[FileHandle], S],
        store: FileStore | None = None,
    ):
        self._path = path
        self._mode = mode
        self._attach = attach
        self._store = store
        self._handle: FileHandle | None = None

    def __enter__(self) -> S:
        if self._handle is not None:
            raise RuntimeError(f"ScopedFile for {self._path} is already open")
        store = self._store or get_filestore()
        # Ошибка открытия уходит наружу как есть: закрывать нечего.
        handle = open_handle(store, self._path, self._mode)
        self._handle = handle
        try:
            return self._attach(handle)
        except BaseException as exc:
            self._handle = None
            _close_after_failure(handle, exc)
            raise

    def __exit__(self, exc_type, exc, tb) -> bool:
        handle, self._handle = self._handle, None
        if exc is None:
            handle.close()
        else:
            _close_after_failure(handle, exc)
        return False


# --- Контекстные менеджеры ---


def _seek_from(start: int, handle: FileHandle) -> None:
    if start != 0:
        handle.seek(start)


def input_file(
    path: str,
    start: int = 0,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    store: FileStore | None = None,
) -> ScopedFile[InputStream[bytes]]:
    """Открывает файл на чтение, при start != 0 делает абсолютный seek."""
    start = _check_start(start)

    def attach(handle: FileHandle) -> InputStream[bytes]:
        _seek_from(start, handle)
        return handle_to_input_stream(handle, chunk_size)

    return ScopedFile(path, IOMode.READ, attach, store)


def unsafe_input_file(
    path: str,
    start: int = 0,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    store: FileStore | None = None,
) -> ScopedFile[InputStream[memoryview]]:
    """Как input_file, но чанки переиспользуют один буфер.

    Чанк действителен только до следующего read(); хранить его нельзя.
    """
    start = _check_start(start)

    def attach(handle: FileHandle) -> InputStream[memoryview]:
        _seek_from(start, handle)
        return unsafe_handle_to_input_stream(handle, chunk_size)

    return ScopedFile(path, IOMode.READ, attach, store)


def output_file(
    path: str,
    mode: IOMode = IOMode.WRITE,
    buffering: BufferMode = NO_BUFFERING,
    *,
    store: FileStore | None = None,
) -> ScopedFile[OutputStream[bytes]]:
    """Открывает файл на запись; буферизация выставляется до создания потока."""

    def attach(handle: FileHandle) -> OutputStream[bytes]:
        handle.set_buffering(buffering)
        return handle_to_output_stream(handle)

    return ScopedFile(path, mode, attach, store)


# --- "with*"-функции ---


def with_file_as_input(
    path: str,
    fn: Callable[[InputStream[bytes]], A],
    *,
    store: FileStore | None = None,
) -> A:
    """Открывает файл на чтение и передаёт InputStream в fn.

    Файл закрывается на выходе: и при нормальном завершении, и при исключении.
    Если закрытие файла бросает исключение, наружу уходит именно оно,
    а не исключение из fn.
    """
    return with_file_as_input_starting_at(0, path, fn, store=store)


def with_file_as_input_starting_at(
    start: int,
    path: str,
    fn: Callable[[InputStream[bytes]], A],
    *,
    store: FileStore | None = None,
) -> A:
    """Как with_file_as_input, но сначала делает seek на start байт от начала файла."""
    with input_file(path, start, store=store) as stream:
        return fn(stream)


def unsafe_with_file_as_input_starting_at(
    start: int,
    path: str,
    fn: Callable[[InputStream[memoryview]], A],
    *,
    store: FileStore | None = None,
) -> A:
    """Как with_file_as_input_starting_at, но чанки потока переиспользуют буфер.

    Использовать можно, только если fn не хранит ссылки на полученные чанки
    после запроса следующего. Нарушение не даёт ошибки: старый чанк просто
    молча перезаписывается новыми данными.
    """
    with unsafe_input_file(path, start, store=store) as stream:
        return fn(stream)


def with_file_as_output(
    path: str,
    fn: Callable[[OutputStream[bytes]], A],
    *,
    store: FileStore | None = None,
) -> A:
    """Открывает файл на запись (с обрезкой, без буферизации) и передаёт OutputStream в fn.

    Файл закрывается при ошибке и по завершении fn.
    """
    return with_file_as_output_ext(path, IOMode.WRITE, NO_BUFFERING, fn, store=store)


def with_file_as_output_ext(
    path: str,
    mode: IOMode,
    buffering: BufferMode,
    fn: Callable[[OutputStream[bytes]], A],
    *,
    store: FileStore | None = None,
) -> A:
    """Как with_file_as_output, но с явным режимом открытия и буферизацией."""
    with output_file(path, mode, buffering, store=store) as stream:
        return fn(stream)
