"""Connection type setting.

Only the proxies-list encoding is understood, and only when it carries no
proxy entries and proxying is not enabled. Other top-level tags are passed
through without consuming anything past the tag.
"""
from __future__ import annotations

from dataclasses import dataclass
from warnings import warn

from tdcache_core.protocol import INT32, PROXIES_LIST_HEADER_FMT, ConnectionType, ProxyMode

from .cursor import ByteCursor
from .errors import UnsupportedEncodingError


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Recognized connection setting whose details are not modeled."""

    tag: int
    count: int
    index: int
    settings: int
    calls: int


def parse_connection_type(cursor: ByteCursor) -> ConnectionDescriptor | None:
    (tag,) = cursor.unpack(INT32)

    if tag != ConnectionType.PROXIES_LIST:
        warn(f"Connection type {tag} at offset {cursor.position - 4} passed through undecoded")
        return None

    count, index, settings, calls = cursor.unpack(PROXIES_LIST_HEADER_FMT)
    if count > 0:
        raise UnsupportedEncodingError(f"not implemented: proxies list with {count} entries")
    if settings == ProxyMode.ENABLED:
        raise UnsupportedEncodingError("not implemented: enabled proxy settings")
    return ConnectionDescriptor(tag=tag, count=count, index=index, settings=settings, calls=calls)
