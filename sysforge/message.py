"""Wire-format types: message type discriminant, fixed header and full message."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

__all__ = [
    "PROTOCOL_VERSION",
    "ProtocolError",
    "MessageType",
    "Header",
    "Message",
]

PROTOCOL_VERSION = 1


class ProtocolError(ValueError):
    """Raised when bytes cannot be decoded into a protocol value."""


class MessageType(IntEnum):
    """Kind of message, carried as a single non-zero byte on the wire."""

    REQUEST = 1
    RESPONSE = 2
    HEARTBEAT = 3
    ERROR = 4

    @classmethod
    def from_byte(cls, value: int) -> MessageType:
        """Map a discriminant byte to a message type; raise ValueError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"unknown message type byte: {value:#04x}") from None


_HEADER_STRUCT = struct.Struct(">BBII")


@dataclass(frozen=True)
class Header:
    """Fixed 10-byte big-endian prefix of every message.

    Layout: version (u8), message type (u8), sequence (u32), payload length (u32).
    """

    version: int
    message_type: MessageType
    sequence: int
    payload_length: int

    SIZE = _HEADER_STRUCT.size

    def encode(self) -> bytes:
        """Return the 10-byte big-endian encoding of this header."""
        try:
            return _HEADER_STRUCT.pack(
                self.version,
                int(self.message_type),
                self.sequence,
                self.payload_length,
            )
        except struct.error as exc:
            raise ProtocolError(f"header field out of range: {exc}") from exc

    @classmethod
    def decode(cls, data: bytes) -> Header:
        """Parse a header from the first 10 bytes of ``data``.

        Raises ProtocolError if ``data`` is too short or the type byte is unknown.
        """
        if len(data) < cls.SIZE:
            raise ProtocolError(
                f"header needs {cls.SIZE} bytes, got {len(data)}"
            )
        version, type_byte, sequence, payload_length = _HEADER_STRUCT.unpack_from(data)
        try:
            message_type = MessageType.from_byte(type_byte)
        except ValueError as exc:
            raise ProtocolError(str(exc)) from exc
        return cls(version, message_type, sequence, payload_length)


@dataclass(frozen=True)
class Message:
    """A header followed by its payload bytes."""

    header: Header
    payload: bytes = field(default=b"")

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def create(
        cls, message_type: MessageType, sequence: int, payload: bytes = b""
    ) -> Message:
        """Build a current-version message; the payload length is filled in."""
        payload = bytes(payload)
        header = Header(
            version=PROTOCOL_VERSION,
            message_type=MessageType(message_type),
            sequence=sequence,
            payload_length=len(payload),
        )
        return cls(header, payload)

    def encode(self) -> bytes:
        """Return header bytes followed by payload bytes."""
        return self.header.encode() + self.payload

    @classmethod
    def decode(cls, data: bytes) -> Message:
        """Decode a message from ``data``.

        Raises ProtocolError if the data is incomplete or the header is invalid.
        """
        header = Header.decode(data)
        end = Header.SIZE + header.payload_length
        if len(data) < end:
            raise ProtocolError(
                f"payload truncated: need {header.payload_length} bytes, "
                f"got {len(data) - Header.SIZE}"
            )
        return cls(header, bytes(data[Header.SIZE:end]))