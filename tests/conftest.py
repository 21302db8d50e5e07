import io

import pytest

from iostreams.base import runtime
from iostreams.base.filestore import FileStat, IOMode, LocalFileStore


class RecordingRaw(io.BytesIO):
    """Сырой поток в памяти: считает seek/write/close и умеет падать по заказу."""

    def __init__(self, initial=b"", fail_seek=False, fail_close=False):
        super().__init__(initial)
        self.seeks = []
        self.writes = []
        self.close_calls = 0
        self.fail_seek = fail_seek
        self.fail_close = fail_close
        self.final = None

    def seek(self, offset, whence=0):
        self.seeks.append((offset, whence))
        if self.fail_seek:
            raise OSError("seek failed")
        return super().seek(offset, whence)

    def write(self, data):
        self.writes.append(bytes(data))
        return super().write(data)

    def close(self):
        self.close_calls += 1
        if self.close_calls == 1:
            self.final = self.getvalue()
        super().close()
        if self.fail_close and self.close_calls == 1:
            if isinstance(self.fail_close, BaseException):
                raise self.fail_close
            raise OSError("close failed")


class RecordingStore:
    """FileStore в памяти, запоминает каждый открытый сырой поток."""

    def __init__(self, files=None, fail_seek=False, fail_close=False):
        self.files = dict(files or {})
        self.opened = []
        self.fail_seek = fail_seek
        self.fail_close = fail_close

    def open_binary(self, path, mode):
        mode = IOMode(mode)
        if mode is IOMode.READ and path not in self.files:
            raise FileNotFoundError(path)
        initial = b"" if mode is IOMode.WRITE else self.files.get(path, b"")
        raw = RecordingRaw(initial, fail_seek=self.fail_seek, fail_close=self.fail_close)
        if mode is IOMode.APPEND:
            super(RecordingRaw, raw).seek(0, io.SEEK_END)
        self.opened.append((path, mode, raw))
        return raw

    def stat(self, path):
        return FileStat(path=path, is_file=True, is_dir=False, size=len(self.files[path]))

    @property
    def last(self):
        return self.opened[-1][2]


@pytest.fixture
def recording_store():
    return RecordingStore(files={"data.bin": b"ABCDEFGH"})


@pytest.fixture
def make_store():
    return RecordingStore


@pytest.fixture
def local_store(tmp_path):
    return LocalFileStore(root=str(tmp_path))


@pytest.fixture
def reset_runtime(monkeypatch):
    monkeypatch.setattr(runtime, "_PROVIDERS", None)
    yield
    monkeypatch.setattr(runtime, "_PROVIDERS", None)
