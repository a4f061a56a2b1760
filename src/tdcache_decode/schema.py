"""Schema nodes describing how a field is laid out on disk.

Schemas are static data, authored once per record kind and interpreted by
fields.decode_field. The node set is closed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Scalar:
    """Fixed-width number, ``fmt`` is a struct format with one field."""

    fmt: str


@dataclass(frozen=True)
class FixedBytes:
    size: int


@dataclass(frozen=True)
class Bytes:
    pass


@dataclass(frozen=True)
class Text:
    pass


@dataclass(frozen=True)
class Timestamp:
    pass


@dataclass(frozen=True)
class Array:
    """i32 element count followed by that many ``element`` values."""

    element: "Node"


@dataclass(frozen=True)
class Record:
    """Sub-fields in declaration order, assembled by ``build``."""

    build: Callable[..., Any]
    fields: tuple[tuple[str, "Node"], ...]


Node = Scalar | FixedBytes | Bytes | Text | Timestamp | Array | Record

BYTES = Bytes()
TEXT = Text()
TIMESTAMP = Timestamp()


def record(build: Callable[..., Any], *fields: tuple[str, Node]) -> Record:
    return Record(build=build, fields=tuple(fields))
