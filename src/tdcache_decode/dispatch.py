"""Variant dispatch: pick a record schema by key type and decode the buffer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tdcache_core.protocol import FIXED_LIST_HEADER_FMT, FULL_LEN_FMT, KeyType

from .cursor import ByteCursor
from .errors import CacheDecodeError
from .fields import decode_field
from .records import Layout, Location, RecordSchema, lookup_key_type
from .settings import UserSetting, decode_settings

CONTEXT = "error decoding cache record"


@dataclass(frozen=True)
class FixedList:
    key_type: KeyType
    full_len: int
    count: int
    entries: tuple[Any, ...]


@dataclass(frozen=True)
class LocationList:
    full_len: int
    locations: tuple[Location, ...]


@dataclass(frozen=True)
class UserSettingsList:
    full_len: int
    settings: tuple[UserSetting, ...]


@dataclass(frozen=True)
class EmptyRecord:
    """Result for a key type with no registered schema."""

    key_type: int


CacheRecord = FixedList | LocationList | UserSettingsList | EmptyRecord


def _decode_fixed_list(data: bytes, schema: RecordSchema) -> FixedList:
    cursor = ByteCursor(data)
    full_len, count = cursor.unpack(FIXED_LIST_HEADER_FMT)
    entries = []
    while not cursor.at_end():
        entries.append(decode_field(cursor, schema.entry))
    return FixedList(key_type=schema.key_type, full_len=full_len, count=count, entries=tuple(entries))


def _decode_location_list(data: bytes, schema: RecordSchema) -> LocationList:
    cursor = ByteCursor(data)
    (full_len,) = cursor.unpack(FULL_LEN_FMT)
    locations: list[Location] = []
    # Ends at a clean record boundary or at the all-zero terminator.
    while not cursor.at_end():
        location = decode_field(cursor, schema.entry)
        if location.is_terminator:
            break
        locations.append(location)
    return LocationList(full_len=full_len, locations=tuple(locations))


def _decode_user_settings(data: bytes, schema: RecordSchema) -> UserSettingsList:
    full_len, settings = decode_settings(data)
    return UserSettingsList(full_len=full_len, settings=settings)


_DECODERS = {
    Layout.FIXED_LIST: _decode_fixed_list,
    Layout.LOCATION_LIST: _decode_location_list,
    Layout.USER_SETTINGS: _decode_user_settings,
}


def parse_cache(data: bytes, key_type: int) -> CacheRecord:
    """Decode one decrypted cache buffer holding records of ``key_type``.

    Unknown key types give an EmptyRecord, not an error. Decode failures are
    re-raised with their original type and a context note.
    """
    schema = lookup_key_type(key_type)
    if schema is None:
        return EmptyRecord(key_type=key_type)
    try:
        return _DECODERS[schema.layout](data, schema)
    except CacheDecodeError as e:
        e.add_context(CONTEXT)
        raise
