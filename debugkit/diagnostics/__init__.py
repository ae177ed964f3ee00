"""Diagnostics support primitives."""

from debugkit.diagnostics.json_codec import dumps_bytes, dumps_text, loads
from debugkit.diagnostics.ring_buffer import RingBuffer

__all__ = [
    "RingBuffer",
    "dumps_bytes",
    "dumps_text",
    "loads",
]
