from iostreams.base.streams.handle import (
    DEFAULT_CHUNK_SIZE,
    handle_to_input_stream,
    handle_to_output_stream,
    unsafe_handle_to_input_stream,
)
from iostreams.base.streams.types import InputStream, OutputStream, connect

__all__ = [
    "InputStream",
    "OutputStream",
    "connect",
    "DEFAULT_CHUNK_SIZE",
    "handle_to_input_stream",
    "unsafe_handle_to_input_stream",
    "handle_to_output_stream",
]
