"""
types — типы для FileStore и файловых дескрипторов.

Назначение:
- дать единый переносимый тип метаданных файла
- описать режим открытия (IOMode) и режим буферизации (BufferMode)
- не привязываться к конкретному backend (local/плагин)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from io import DEFAULT_BUFFER_SIZE


@dataclass(frozen=True, slots=True)
class FileStat:
    """Метаданные файла.

    Поля намеренно опциональны.
    Разные реализации FileStore могут отдавать разные поля.
    """

    path: str
    is_file: bool
    is_dir: bool
    size: int | None = None
    mtime: float | None = None


class IOMode(str, Enum):
    """Режим открытия файла. Значение — бинарный mode для open()."""

    READ = "rb"
    WRITE = "wb"  # создаёт или обрезает
    APPEND = "ab"
    READ_WRITE = "r+b"  # создаёт при отсутствии, не обрезает

    @property
    def creates(self) -> bool:
        return self is not IOMode.READ


class BufferKind(str, Enum):
    NONE = "none"
    LINE = "line"
    BLOCK = "block"


@dataclass(frozen=True, slots=True)
class BufferMode:
    """Режим буферизации записи.

    - none  — каждая запись сразу уходит в файл
    - line  — сброс до последнего перевода строки
    - block — сброс, когда накоплено size байт (size=None — размер по умолчанию)
    """

    kind: BufferKind
    size: int | None = None

    def __post_init__(self) -> None:
        if self.size is None:
            return
        if self.kind is not BufferKind.BLOCK:
            raise ValueError(f"Buffer size is only meaningful for block buffering, got kind={self.kind.value}")
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise ValueError(f"Block buffer size must be a positive int, got {self.size!r}")

    @classmethod
    def none(cls) -> "BufferMode":
        return cls(BufferKind.NONE)

    @classmethod
    def line(cls) -> "BufferMode":
        return cls(BufferKind.LINE)

    @classmethod
    def block(cls, size: int | None = None) -> "BufferMode":
        return cls(BufferKind.BLOCK, size)

    @property
    def block_size(self) -> int:
        """Фактический размер блока (для none/line — размер по умолчанию)."""
        return self.size or DEFAULT_BUFFER_SIZE


NO_BUFFERING = BufferMode.none()
LINE_BUFFERING = BufferMode.line()
BLOCK_BUFFERING = BufferMode.block()
