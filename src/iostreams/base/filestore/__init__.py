from iostreams.base.filestore.base import FileStore
from iostreams.base.filestore.handle import FileHandle, open_handle
from iostreams.base.filestore.local import LocalFileStore
from iostreams.base.filestore.types import (
    BLOCK_BUFFERING,
    LINE_BUFFERING,
    NO_BUFFERING,
    BufferKind,
    BufferMode,
    FileStat,
    IOMode,
)

__all__ = [
    "FileStore",
    "LocalFileStore",
    "FileHandle",
    "open_handle",
    "FileStat",
    "IOMode",
    "BufferKind",
    "BufferMode",
    "NO_BUFFERING",
    "LINE_BUFFERING",
    "BLOCK_BUFFERING",
]
