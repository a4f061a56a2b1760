"""Record kinds, their entry schemas and the Key-Type Registry."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime

from tdcache_core.protocol import INT32, UINT32, UINT64, KeyType

from .schema import TEXT, TIMESTAMP, Node, Scalar, record


@dataclass(frozen=True)
class CachedFile:
    """Maps a storage location to the local file holding its content."""

    file_key: int
    location_first: int
    location_second: int
    size: int


@dataclass(frozen=True)
class ReportSpamStatus:
    peer_id: int
    status: int


@dataclass(frozen=True)
class MediaKey:
    location_type: int
    dc_id: int
    id: int


@dataclass(frozen=True)
class Location:
    media_key: MediaKey
    filename: str
    modified: datetime | None
    size: int

    @property
    def is_terminator(self) -> bool:
        """All-zero entry written after the last real location."""
        key = self.media_key
        return (
            key.location_type == 0
            and key.dc_id == 0
            and key.id == 0
            and not self.filename
            and self.size == 0
        )


CACHED_FILE = record(
    CachedFile,
    ("file_key", Scalar(UINT64)),
    ("location_first", Scalar(UINT64)),
    ("location_second", Scalar(UINT64)),
    ("size", Scalar(INT32)),
)

REPORT_SPAM_STATUS = record(
    ReportSpamStatus,
    ("peer_id", Scalar(UINT64)),
    ("status", Scalar(INT32)),
)

MEDIA_KEY = record(
    MediaKey,
    ("location_type", Scalar(UINT32)),
    ("dc_id", Scalar(UINT32)),
    ("id", Scalar(UINT64)),
)

LOCATION = record(
    Location,
    ("media_key", MEDIA_KEY),
    ("filename", TEXT),
    ("modified", TIMESTAMP),
    ("size", Scalar(UINT32)),
)


class Layout(enum.Enum):
    FIXED_LIST = "fixed_list"
    LOCATION_LIST = "location_list"
    USER_SETTINGS = "user_settings"


@dataclass(frozen=True)
class RecordSchema:
    key_type: KeyType
    layout: Layout
    entry: Node | None = None


KEY_TYPE_REGISTRY: dict[int, RecordSchema] = {
    schema.key_type: schema
    for schema in (
        RecordSchema(KeyType.IMAGES, Layout.FIXED_LIST, CACHED_FILE),
        RecordSchema(KeyType.STICKER_IMAGES, Layout.FIXED_LIST, CACHED_FILE),
        RecordSchema(KeyType.AUDIOS, Layout.FIXED_LIST, CACHED_FILE),
        RecordSchema(KeyType.REPORT_SPAM_STATUSES, Layout.FIXED_LIST, REPORT_SPAM_STATUS),
        RecordSchema(KeyType.LOCATIONS, Layout.LOCATION_LIST, LOCATION),
        RecordSchema(KeyType.USER_SETTINGS, Layout.USER_SETTINGS),
    )
}


def lookup_key_type(key_type: int) -> RecordSchema | None:
    return KEY_TYPE_REGISTRY.get(key_type)
