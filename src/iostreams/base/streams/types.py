"""
types — InputStream / OutputStream.

InputStream[T]:
- pull-поток: read() возвращает очередной чанк или None (конец потока)
- конец потока "липкий": после первого None дальше всегда None
- unread() возвращает чанк обратно, следующий read() отдаст его первым

OutputStream[T]:
- push-поток: write(chunk) отдаёт чанк потребителю
- write(None) — признак конца потока; последующие записи игнорируются
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class InputStream(Generic[T]):
    """Pull-поток чанков."""

    def __init__(self, produce: Callable[[], T | None]):
        self._produce = produce
        self._pushback: list[T] = []
        self._eof = False

    def read(self) -> T | None:
        if self._pushback:
            return self._pushback.pop()
        if self._eof:
            return None
        chunk = self._produce()
        if chunk is None:
            self._eof = True
        return chunk

    def unread(self, chunk: T) -> None:
        self._pushback.append(chunk)

    def peek(self) -> T | None:
        chunk = self.read()
        if chunk is not None:
            self.unread(chunk)
        return chunk

    def at_eof(self) -> bool:
        return self.peek() is None

    def __iter__(self) -> Iterator[T]:
        while True:
            chunk = self.read()
            if chunk is None:
                return
            yield chunk


class OutputStream(Generic[T]):
    """Push-поток чанков."""

    def __init__(self, consume: Callable[[T | None], None]):
        self._consume = consume
        self._ended = False

    @property
    def ended(self) -> bool:
        return self._ended

    def write(self, chunk: T | None) -> None:
        if self._ended:
            return
        if chunk is None:
            self._ended = True
        self._consume(chunk)

    def write_all(self, chunks: Iterable[T]) -> None:
        """Пишет все чанки, конец потока не отправляет."""
        for chunk in chunks:
            self.write(chunk)


def connect(source: InputStream[T], sink: OutputStream[T]) -> None:
    """Перекачивает все чанки из source в sink и завершает sink."""
    sink.write_all(source)
    sink.write(None)
