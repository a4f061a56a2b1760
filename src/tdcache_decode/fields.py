"""Schema-driven field decoding.

decode_field consumes exactly the bytes a schema node implies and returns the
native value. Failures propagate unchanged; callers add context.
"""
from __future__ import annotations

from typing import Any

from tdcache_core.protocol import LENGTH_FMT, TIMESTAMP_FMT
from tdcache_core.qt import convert_utf16, qdatetime

from .cursor import ByteCursor
from .errors import InvalidLengthError
from .schema import Array, Bytes, FixedBytes, Node, Record, Scalar, Text, Timestamp


def decode_field(cursor: ByteCursor, node: Node) -> Any:
    if isinstance(node, Scalar):
        (value,) = cursor.unpack(node.fmt)
        return value

    if isinstance(node, FixedBytes):
        return cursor.read_fixed(node.size)

    if isinstance(node, Bytes):
        return cursor.read_length_prefixed()

    if isinstance(node, Text):
        return convert_utf16(cursor.read_length_prefixed())

    if isinstance(node, Timestamp):
        julian_day, msecs, _spec = cursor.unpack(TIMESTAMP_FMT)
        return qdatetime(julian_day, msecs)

    if isinstance(node, Array):
        start = cursor.position
        (count,) = cursor.unpack(LENGTH_FMT)
        if count < 0:
            raise InvalidLengthError(start, count)
        return tuple(decode_field(cursor, node.element) for _ in range(count))

    if isinstance(node, Record):
        values = {name: decode_field(cursor, sub) for name, sub in node.fields}
        return node.build(**values)

    raise TypeError(f"not a schema node: {node!r}")
