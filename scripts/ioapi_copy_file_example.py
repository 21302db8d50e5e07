"""
Пример: потоковое копирование файла через iostreams.base.ioapi.

Плюс:
- один код для local и плагина (если установлен FileStore-плагин)
- оба файла закрываются при любой ошибке

Запуск:
  python scripts/ioapi_copy_file_example.py --src "data/input.bin" --dst "data/output.bin" --start 0
"""

from __future__ import annotations

import argparse

from iostreams.base import runtime
from iostreams.base import ioapi as ia
from iostreams.base.filestore import BufferMode, IOMode
from iostreams.base.streams import connect


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--src", required=True, help="Source file path.")
    parser.add_argument("--dst", required=True, help="Destination file path.")
    parser.add_argument("--start", type=int, default=0, help="Byte offset to start reading from (default: 0).")
    parser.add_argument("--block", type=int, default=None, help="Output block buffer size (default: platform).")
    args = parser.parse_args()

    providers = runtime.get_providers()
    print(f"INFO: providers source = {providers.source}")

    def copy_from(source):
        return ia.with_file_as_output_ext(
            args.dst,
            IOMode.WRITE,
            BufferMode.block(args.block),
            lambda sink: connect(source, sink),
        )

    ia.with_file_as_input_starting_at(args.start, args.src, copy_from)

    size = providers.filestore.stat(args.dst).size
    print(f"INFO: copy ok bytes={size}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
