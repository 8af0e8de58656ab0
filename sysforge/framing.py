"""Length-prefixed framing: a 4-byte big-endian length, then the message bytes."""

from __future__ import annotations

import struct
from typing import Iterator, Optional, Tuple

from sysforge.message import Message, ProtocolError

__all__ = ["PREFIX_SIZE", "encode_frame", "decode_frame", "iter_frames"]

_PREFIX = struct.Struct(">I")
PREFIX_SIZE = _PREFIX.size


def encode_frame(message: Message) -> bytes:
    """Wrap ``message`` in a 4-byte length-prefixed frame."""
    body = message.encode()
    return _PREFIX.pack(len(body)) + body


def decode_frame(data: bytes) -> Optional[Tuple[Message, int]]:
    """Decode the next framed message from ``data``.

    Returns ``(message, bytes_consumed)``, or None if the frame is not yet
    complete. Raises ProtocolError if a complete frame holds an invalid message.
    """
    if len(data) < PREFIX_SIZE:
        return None
    (length,) = _PREFIX.unpack_from(data)
    end = PREFIX_SIZE + length
    if len(data) < end:
        return None
    message = Message.decode(bytes(data[PREFIX_SIZE:end]))
    return message, end


def iter_frames(data: bytes) -> Iterator[Message]:
    """Yield every framed message in ``data`` in order.

    Raises ProtocolError if the data ends part-way through a frame.
    """
    view = memoryview(data)
    cursor = 0
    while cursor < len(view):
        decoded = decode_frame(view[cursor:])
        if decoded is None:
            raise ProtocolError(f"incomplete frame at offset {cursor}")
        message, consumed = decoded
        yield message
        cursor += consumed