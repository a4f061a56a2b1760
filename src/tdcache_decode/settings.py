"""User settings: block schemas, the Block-ID Registry and the block loop.

A USER_SETTINGS buffer starts with ``full_len``, the end offset of the real
data counting its own 4 bytes, followed by (block id, value) pairs up to that
offset. There is no entry count.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tdcache_core.protocol import (
    AUTH_KEY_SIZE,
    BLOCK_ID_FMT,
    FULL_LEN_FMT,
    FULL_LEN_SIZE,
    INT32,
    INT64,
    UINT16,
    UINT32,
    UINT64,
    SettingId,
)

from .connection import parse_connection_type
from .cursor import ByteCursor
from .errors import UnknownBlockIdentifierError
from .fields import decode_field
from .schema import BYTES, TEXT, Array, FixedBytes, Node, Scalar, record


@dataclass(frozen=True)
class AuthKey:
    dc_id: int
    key: bytes


@dataclass(frozen=True)
class User:
    user_id: int
    dc_id: int


@dataclass(frozen=True)
class WindowPosition:
    x: int
    y: int
    w: int
    h: int
    moncrc: int
    maximized: int


@dataclass(frozen=True)
class DownloadPath:
    path: str
    bookmark: bytes


@dataclass(frozen=True)
class AutoDownload:
    photo: int
    audio: int
    gif: int


@dataclass(frozen=True)
class DialogsMode:
    enabled: int
    mode: int


@dataclass(frozen=True)
class ThemeKey:
    day: int
    night: int
    night_mode: int


@dataclass(frozen=True)
class CacheSettings:
    size: int
    time: int


@dataclass(frozen=True)
class RecentEmoji:
    emoji: str
    rating: int


@dataclass(frozen=True)
class EmojiVariant:
    emoji: str
    variant: int


@dataclass(frozen=True)
class RecentSticker:
    document_id: int
    rating: int


@dataclass(frozen=True)
class HiddenPinnedMessage:
    peer_id: int
    msg_id: int


@dataclass(frozen=True)
class UserSetting:
    field: SettingId
    value: Any

    @property
    def name(self) -> str:
        return self.field.name


_I32 = Scalar(INT32)
_U64 = Scalar(UINT64)

SETTING_SCHEMAS: dict[SettingId, Node] = {
    SettingId.KEY: record(AuthKey, ("dc_id", _I32), ("key", FixedBytes(AUTH_KEY_SIZE))),
    SettingId.USER: record(User, ("user_id", _I32), ("dc_id", Scalar(UINT32))),
    SettingId.CHAT_SIZE_MAX: _I32,
    SettingId.MUTE_PEER: _U64,
    SettingId.SEND_KEY: _I32,
    SettingId.AUTO_START: _I32,
    SettingId.START_MINIMIZED: _I32,
    SettingId.SOUND_NOTIFY: _I32,
    SettingId.WORK_MODE: _I32,
    SettingId.SEEN_TRAY_TOOLTIP: _I32,
    SettingId.DESKTOP_NOTIFY: _I32,
    SettingId.AUTO_UPDATE: _I32,
    SettingId.LAST_UPDATE_CHECK: _I32,
    SettingId.WINDOW_POSITION: record(
        WindowPosition,
        ("x", _I32),
        ("y", _I32),
        ("w", _I32),
        ("h", _I32),
        ("moncrc", _I32),
        ("maximized", _I32),
    ),
    SettingId.DEFAULT_ATTACH: _I32,
    SettingId.CATS_AND_DOGS: _I32,
    SettingId.REPLACE_EMOJI: _I32,
    SettingId.ASK_DOWNLOAD_PATH: _I32,
    SettingId.DOWNLOAD_PATH_OLD: TEXT,
    SettingId.SCALE: _I32,
    SettingId.LOGGED_PHONE_NUMBER: TEXT,
    SettingId.NOTIFY_VIEW: _I32,
    SettingId.SEND_TO_MENU: _I32,
    SettingId.COMPRESS_PASTED_IMAGE: _I32,
    SettingId.TILE_BACKGROUND_OLD: _I32,
    SettingId.AUTO_LOCK: _I32,
    SettingId.DIALOG_LAST_PATH: TEXT,
    SettingId.RECENT_STICKERS: Array(
        record(RecentSticker, ("document_id", _U64), ("rating", Scalar(UINT16)))
    ),
    SettingId.TRY_IPV6: _I32,
    SettingId.SONG_VOLUME: _I32,
    SettingId.INCLUDE_MUTED: _I32,
    SettingId.MEGAGROUP_SIZE_MAX: _I32,
    SettingId.DOWNLOAD_PATH: record(DownloadPath, ("path", TEXT), ("bookmark", BYTES)),
    SettingId.AUTO_DOWNLOAD: record(AutoDownload, ("photo", _I32), ("audio", _I32), ("gif", _I32)),
    SettingId.SAVED_GIFS_LIMIT: _I32,
    SettingId.AUTO_PLAY: _I32,
    SettingId.ADAPTIVE_FOR_WIDE: _I32,
    SettingId.HIDDEN_PINNED_MESSAGES: Array(
        record(HiddenPinnedMessage, ("peer_id", _U64), ("msg_id", _I32))
    ),
    SettingId.RECENT_EMOJI: Array(record(RecentEmoji, ("emoji", TEXT), ("rating", Scalar(UINT16)))),
    SettingId.EMOJI_VARIANTS: Array(record(EmojiVariant, ("emoji", TEXT), ("variant", _I32))),
    SettingId.DIALOGS_MODE: record(DialogsMode, ("enabled", _I32), ("mode", _I32)),
    SettingId.MODERATE_MODE: _I32,
    SettingId.VIDEO_VOLUME: _I32,
    SettingId.STICKERS_RECENT_LIMIT: _I32,
    SettingId.NATIVE_NOTIFICATIONS: _I32,
    SettingId.NOTIFICATIONS_COUNT: _I32,
    SettingId.NOTIFICATIONS_CORNER: _I32,
    SettingId.THEME_KEY: record(ThemeKey, ("day", _U64), ("night", _U64), ("night_mode", Scalar(UINT32))),
    SettingId.USE_EXTERNAL_VIDEO_PLAYER: _I32,
    SettingId.DC_OPTIONS: BYTES,
    SettingId.MTP_AUTHORIZATION: BYTES,
    SettingId.LAST_SEEN_WARNING_SEEN_OLD: _I32,
    SettingId.AUTH_SESSION_SETTINGS: BYTES,
    SettingId.LANG_PACK_KEY: _U64,
    SettingId.STICKERS_FAVED_LIMIT: _I32,
    SettingId.SUGGEST_STICKERS_BY_EMOJI: _I32,
    SettingId.SUGGEST_EMOJI: _I32,
    SettingId.TXT_DOMAIN_STRING: TEXT,
    SettingId.CACHE_SETTINGS: record(CacheSettings, ("size", Scalar(INT64)), ("time", _I32)),
    SettingId.ANIMATIONS_DISABLED: _I32,
    SettingId.SCALE_PERCENT: _I32,
    SettingId.PLAYBACK_SPEED: _I32,
    SettingId.LANGUAGES_KEY: _U64,
}

# Block id -> field. CONNECTION_TYPE has its own parser instead of a schema.
BLOCK_ID_REGISTRY: dict[int, SettingId] = {
    int(field): field for field in (*SETTING_SCHEMAS, SettingId.CONNECTION_TYPE)
}


def lookup_block(block_id: int) -> SettingId | None:
    return BLOCK_ID_REGISTRY.get(block_id)


def decode_setting(cursor: ByteCursor, block_id: int) -> UserSetting:
    field = lookup_block(block_id)
    if field is None:
        raise UnknownBlockIdentifierError(block_id)
    if field is SettingId.CONNECTION_TYPE:
        return UserSetting(field, parse_connection_type(cursor))
    return UserSetting(field, decode_field(cursor, SETTING_SCHEMAS[field]))


def decode_settings(data: bytes) -> tuple[int, tuple[UserSetting, ...]]:
    """Decode a USER_SETTINGS buffer into (full_len, settings in disk order).

    Bytes past the declared payload are never visited. An unregistered block
    id aborts the whole decode.
    """
    (full_len,) = ByteCursor(data).unpack(FULL_LEN_FMT)
    cursor = ByteCursor(data[FULL_LEN_SIZE:full_len])
    settings: list[UserSetting] = []
    while not cursor.at_end():
        (block_id,) = cursor.unpack(BLOCK_ID_FMT)
        settings.append(decode_setting(cursor, block_id))
    return full_len, tuple(settings)
