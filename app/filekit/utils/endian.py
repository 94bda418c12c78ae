"""Byte-order helpers.

Swaps 16/32/64-bit integers and IEEE floats between big- and little-endian,
and reads or writes little-endian ("swapped", relative to network order)
values from byte buffers and binary streams.

Integer swaps accept any int, mask it to the target width, and return the
signed result, so ``swap_short(0x0102) == 0x0201`` and
``swap_short(swap_short(x)) == x`` for every in-range x.
"""

import struct
from typing import BinaryIO

_SHORT = struct.Struct("<h")
_USHORT = struct.Struct("<H")
_INT = struct.Struct("<i")
_UINT = struct.Struct("<I")
_LONG = struct.Struct("<q")
_FLOAT = struct.Struct("<f")
_DOUBLE = struct.Struct("<d")


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _swap(value: int, size: int) -> int:
    raw = (value & ((1 << (size * 8)) - 1)).to_bytes(size, "big")
    return _to_signed(int.from_bytes(raw, "little"), size * 8)


def swap_short(value: int) -> int:
    """Swap the two bytes of a 16-bit value."""
    return _swap(value, 2)


def swap_integer(value: int) -> int:
    """Swap the four bytes of a 32-bit value."""
    return _swap(value, 4)


def swap_long(value: int) -> int:
    """Swap the eight bytes of a 64-bit value."""
    return _swap(value, 8)


def swap_float(value: float) -> float:
    """Reinterpret a 32-bit float with its bytes reversed."""
    return struct.unpack("<f", struct.pack(">f", value))[0]


def swap_double(value: float) -> float:
    """Reinterpret a 64-bit double with its bytes reversed."""
    return struct.unpack("<d", struct.pack(">d", value))[0]


# =============================================================================
# Buffer access
# =============================================================================


def read_swapped_short(data: bytes | bytearray, offset: int = 0) -> int:
    return _SHORT.unpack_from(data, offset)[0]


def read_swapped_unsigned_short(data: bytes | bytearray, offset: int = 0) -> int:
    return _USHORT.unpack_from(data, offset)[0]


def read_swapped_integer(data: bytes | bytearray, offset: int = 0) -> int:
    return _INT.unpack_from(data, offset)[0]


def read_swapped_unsigned_integer(data: bytes | bytearray, offset: int = 0) -> int:
    return _UINT.unpack_from(data, offset)[0]


def read_swapped_long(data: bytes | bytearray, offset: int = 0) -> int:
    return _LONG.unpack_from(data, offset)[0]


def read_swapped_float(data: bytes | bytearray, offset: int = 0) -> float:
    return _FLOAT.unpack_from(data, offset)[0]


def read_swapped_double(data: bytes | bytearray, offset: int = 0) -> float:
    return _DOUBLE.unpack_from(data, offset)[0]


def write_swapped_short(data: bytearray, offset: int, value: int) -> None:
    """Write a 16-bit value little-endian into data at offset."""
    _SHORT.pack_into(data, offset, _to_signed(value, 16))


def write_swapped_integer(data: bytearray, offset: int, value: int) -> None:
    """Write a 32-bit value little-endian into data at offset."""
    _INT.pack_into(data, offset, _to_signed(value, 32))


def write_swapped_long(data: bytearray, offset: int, value: int) -> None:
    """Write a 64-bit value little-endian into data at offset."""
    _LONG.pack_into(data, offset, _to_signed(value, 64))


def write_swapped_float(data: bytearray, offset: int, value: float) -> None:
    _FLOAT.pack_into(data, offset, value)


def write_swapped_double(data: bytearray, offset: int, value: float) -> None:
    _DOUBLE.pack_into(data, offset, value)


# =============================================================================
# Stream access
# =============================================================================


def _read_exactly(stream: BinaryIO, size: int) -> bytes:
    """Read size bytes from stream.

    Raises:
        EOFError: If the stream ends first.
    """
    chunk = stream.read(size)
    if chunk is None or len(chunk) < size:
        got = 0 if chunk is None else len(chunk)
        msg = f"Unexpected end of stream: wanted {size} bytes, got {got}"
        raise EOFError(msg)
    return chunk


def read_short_from(stream: BinaryIO) -> int:
    return read_swapped_short(_read_exactly(stream, 2))


def read_unsigned_short_from(stream: BinaryIO) -> int:
    return read_swapped_unsigned_short(_read_exactly(stream, 2))


def read_integer_from(stream: BinaryIO) -> int:
    return read_swapped_integer(_read_exactly(stream, 4))


def read_unsigned_integer_from(stream: BinaryIO) -> int:
    return read_swapped_unsigned_integer(_read_exactly(stream, 4))


def read_long_from(stream: BinaryIO) -> int:
    return read_swapped_long(_read_exactly(stream, 8))


def read_float_from(stream: BinaryIO) -> float:
    return read_swapped_float(_read_exactly(stream, 4))


def read_double_from(stream: BinaryIO) -> float:
    return read_swapped_double(_read_exactly(stream, 8))


def write_short_to(stream: BinaryIO, value: int) -> None:
    stream.write(_SHORT.pack(_to_signed(value, 16)))


def write_integer_to(stream: BinaryIO, value: int) -> None:
    stream.write(_INT.pack(_to_signed(value, 32)))


def write_long_to(stream: BinaryIO, value: int) -> None:
    stream.write(_LONG.pack(_to_signed(value, 64)))


def write_float_to(stream: BinaryIO, value: float) -> None:
    stream.write(_FLOAT.pack(value))


def write_double_to(stream: BinaryIO, value: float) -> None:
    stream.write(_DOUBLE.pack(value))
