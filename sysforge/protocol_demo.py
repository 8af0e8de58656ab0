"""Command-line walkthrough of message encoding and length-prefixed framing."""

from __future__ import annotations

import argparse
import struct
from typing import Optional, Sequence

from sysforge.framing import decode_frame, encode_frame, iter_frames
from sysforge.message import Header, Message, MessageType, ProtocolError

__all__ = ["main"]


class DemoFailure(RuntimeError):
    """Raised when a demo's expectation does not hold."""


def _check(condition: bool, what: str) -> None:
    if not condition:
        raise DemoFailure(what)


def _demo_message_encode_decode() -> None:
    print("[ Demo 1 ] Message encode / decode")

    payload = b"Hello, protocol!"
    original = Message.create(MessageType.REQUEST, 1, payload)
    data = original.encode()
    print(
        f"  encoded {len(data)} bytes "
        f"(header={Header.SIZE} + payload={len(payload)})"
    )

    decoded = Message.decode(data)
    _check(decoded == original, "decoded message differs from original")
    _check(decoded.header.version == 1, "unexpected version")
    _check(decoded.header.sequence == 1, "unexpected sequence")
    _check(decoded.payload == payload, "unexpected payload")
    print("  round-trip verified  ok")

    try:
        Message.decode(data[:5])
    except ProtocolError:
        print("  truncation rejected  ok")
    else:
        raise DemoFailure("truncated data decoded without error")


def _demo_frame_codec() -> None:
    print("[ Demo 2 ] Frame codec")

    message = Message.create(MessageType.RESPONSE, 42, b"frame body")
    frame = encode_frame(message)

    (prefix_len,) = struct.unpack_from(">I", frame)
    print(f"  frame size={len(frame)}, prefix says inner={prefix_len}")
    _check(prefix_len == len(frame) - 4, "length prefix mismatch")

    result = decode_frame(frame)
    _check(result is not None, "frame decode failed")
    decoded, consumed = result
    _check(decoded == message, "decoded frame differs from original")
    _check(consumed == len(frame), "consumed byte count mismatch")
    print(f"  frame round-trip verified, consumed={consumed} bytes  ok")


def _demo_multi_message_stream() -> None:
    print("[ Demo 3 ] streaming multiple framed messages")

    messages = [
        Message.create(MessageType.REQUEST, 1, b"query"),
        Message.create(MessageType.RESPONSE, 1, b"result"),
        Message.create(MessageType.HEARTBEAT, 0, b""),
        Message.create(MessageType.ERROR, 2, b"not found"),
    ]

    stream = b"".join(encode_frame(m) for m in messages)
    print(f"  stream total bytes: {len(stream)}")

    received = list(iter_frames(stream))
    _check(len(received) == len(messages), "message count mismatch")
    for index, (got, want) in enumerate(zip(received, messages)):
        _check(got == want, f"message {index} mismatch")
    print(f"  all {len(received)} messages decoded correctly  ok")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the protocol demos and return an exit status."""
    parser = argparse.ArgumentParser(
        prog="protocol-demo",
        description="Walk through message encoding and framing.",
    )
    parser.parse_args(argv)

    print("=== network-protocol integration demo ===\n")
    _demo_message_encode_decode()
    _demo_frame_codec()
    _demo_multi_message_stream()
    print("\nAll demos completed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())