"""
ioapi — scoped-потоки для файлов поверх FileStore.

Рекомендованный импорт:
    from iostreams.base import ioapi as ia
"""

from iostreams.base.ioapi import bytes, file
from iostreams.base.ioapi.file import (
    input_file,
    output_file,
    unsafe_input_file,
    unsafe_with_file_as_input_starting_at,
    with_file_as_input,
    with_file_as_input_starting_at,
    with_file_as_output,
    with_file_as_output_ext,
)

__all__ = [
    "bytes",
    "file",
    "input_file",
    "unsafe_input_file",
    "output_file",
    "with_file_as_input",
    "with_file_as_input_starting_at",
    "unsafe_with_file_as_input_starting_at",
    "with_file_as_output",
    "with_file_as_output_ext",
]
