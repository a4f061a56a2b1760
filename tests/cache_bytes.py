"""Byte builders for hand-made cache buffers."""
import struct

from tdcache_core.protocol import JULIAN_DAY_UNIX_EPOCH as UNIX_EPOCH_JD


def i32(v: int) -> bytes:
    return struct.pack("<i", v)


def u16(v: int) -> bytes:
    return struct.pack("<H", v)


def u32(v: int) -> bytes:
    return struct.pack("<I", v)


def u64(v: int) -> bytes:
    return struct.pack("<Q", v)


def text(s: str) -> bytes:
    raw = s.encode("utf-16-le")
    return i32(len(raw)) + raw


def timestamp(julian_day: int = UNIX_EPOCH_JD, msecs: int = 0, spec: int = 1) -> bytes:
    return struct.pack("<QIB", julian_day, msecs, spec)


def location(location_type=0x1B, dc_id=2, media_id=1, filename="a.jpg", size=100, modified=None) -> bytes:
    return (
        u32(location_type)
        + u32(dc_id)
        + u64(media_id)
        + text(filename)
        + (modified if modified is not None else timestamp())
        + u32(size)
    )


LOCATION_TERMINATOR = b"\x00" * 37


def cached_file(file_key: int, first: int, second: int, size: int) -> bytes:
    return struct.pack("<QQQi", file_key, first, second, size)


def settings(payload: bytes) -> bytes:
    return u32(len(payload) + 4) + payload
