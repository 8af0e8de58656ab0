import pytest

from sysforge.message import Header, Message, MessageType, ProtocolError

ALL_TYPES = [
    MessageType.REQUEST,
    MessageType.RESPONSE,
    MessageType.HEARTBEAT,
    MessageType.ERROR,
]


def sample_header() -> Header:
    return Header(
        version=1,
        message_type=MessageType.REQUEST,
        sequence=0x0102_0304,
        payload_length=0x0A0B_0C0D,
    )


# ── MessageType ──────────────────────────────────────────────────────────────


@pytest.mark.parametrize("mt", ALL_TYPES)
def test_all_message_types_roundtrip_through_byte(mt):
    byte = int(mt)
    assert byte != 0
    assert MessageType.from_byte(byte) is mt


@pytest.mark.parametrize("value", [0, 255])
def test_unknown_byte_raises(value):
    with pytest.raises(ValueError):
        MessageType.from_byte(value)


def test_discriminant_values():
    assert [MessageType.from_byte(value) for value in (1, 2, 3, 4)] == ALL_TYPES


# ── Header ───────────────────────────────────────────────────────────────────


def test_header_encodes_to_exactly_10_bytes():
    h = Header(version=1, message_type=MessageType.REQUEST, sequence=42, payload_length=128)
    assert len(h.encode()) == Header.SIZE
    assert Header.SIZE == 10


def test_header_encode_decode_roundtrip():
    original = Header(
        version=1,
        message_type=MessageType.RESPONSE,
        sequence=0xDEAD_BEEF,
        payload_length=512,
    )
    assert Header.decode(original.encode()) == original


def test_sample_header_roundtrip():
    original = sample_header()
    assert Header.decode(original.encode()) == original


def test_header_big_endian_byte_order():
    buf = sample_header().encode()
    assert buf[0] == 1
    assert buf[1] == int(MessageType.REQUEST)
    assert buf[2:6] == bytes([0x01, 0x02, 0x03, 0x04])
    assert buf[6:10] == bytes([0x0A, 0x0B, 0x0C, 0x0D])


@pytest.mark.parametrize("data", [bytes([1, 2, 3]), b""])
def test_header_decode_too_short_raises(data):
    with pytest.raises(ProtocolError):
        Header.decode(data)


def test_header_decode_unknown_type_byte_raises():
    buf = bytearray(sample_header().encode())
    buf[1] = 0xFF
    with pytest.raises(ProtocolError):
        Header.decode(bytes(buf))


def test_header_encode_out_of_range_raises():
    h = Header(version=1, message_type=MessageType.REQUEST, sequence=2**32, payload_length=0)
    with pytest.raises(ProtocolError):
        h.encode()


# ── Message ──────────────────────────────────────────────────────────────────


def test_message_create_sets_version_and_length():
    payload = b"hello"
    msg = Message.create(MessageType.REQUEST, 1, payload)
    assert msg.header.version == 1
    assert msg.header.payload_length == len(payload)
    assert msg.header.sequence == 1
    assert msg.payload == payload


def test_message_encode_decode_roundtrip():
    original = Message.create(MessageType.HEARTBEAT, 7, bytes(range(32)))
    assert Message.decode(original.encode()) == original


def test_message_empty_payload_roundtrip():
    msg = Message.create(MessageType.HEARTBEAT, 0, b"")
    decoded = Message.decode(msg.encode())
    assert decoded.payload == b""
    assert decoded == msg


@pytest.mark.parametrize("payload", [b"payload", b"full payload"])
def test_message_decode_truncated_raises(payload):
    data = Message.create(MessageType.REQUEST, 1, payload).encode()
    with pytest.raises(ProtocolError):
        Message.decode(data[: Header.SIZE])


def test_message_decode_truncated_header_raises():
    data = Message.create(MessageType.REQUEST, 1, b"Hello, protocol!").encode()
    with pytest.raises(ProtocolError):
        Message.decode(data[:5])


@pytest.mark.parametrize("payload", [b"test data", b"testing"])
def test_message_encode_length_is_header_plus_payload(payload):
    msg = Message.create(MessageType.RESPONSE, 5, payload)
    assert len(msg.encode()) == Header.SIZE + len(payload)


@pytest.mark.parametrize("mt", ALL_TYPES)
def test_all_message_types_survive_encode_decode(mt):
    original = Message.create(mt, 100, b"body")
    assert Message.decode(original.encode()) == original


def test_message_decode_ignores_trailing_bytes():
    original = Message.create(MessageType.ERROR, 2, b"not found")
    assert Message.decode(original.encode() + b"extra") == original


def test_message_payload_accepts_bytearray():
    msg = Message.create(MessageType.REQUEST, 3, bytearray(b"abc"))
    assert msg.payload == b"abc"
    assert Message.decode(msg.encode()) == msg