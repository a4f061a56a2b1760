"""tdcache protocol constants.

Single source of truth for on-disk identifiers and primitive layouts of the
decrypted local cache. Keep this file stable. Every reader in tdcache_decode
takes its widths and ids from here.
"""
from __future__ import annotations

import enum

# Primitive layouts (little-endian throughout)
FULL_LEN_FMT = "<I"
FULL_LEN_SIZE = 4
LENGTH_FMT = "<i"  # signed, negative means empty
BLOCK_ID_FMT = "<I"
FIXED_LIST_HEADER_FMT = "<II"  # full_len, count

# Timestamp: [Date(8) | Time(4) | Spec(1)] = 13 bytes
TIMESTAMP_FMT = "<QIB"

UINT16 = "<H"
INT32 = "<i"
UINT32 = "<I"
INT64 = "<q"
UINT64 = "<Q"

# Key material stored under the KEY settings block
AUTH_KEY_SIZE = 256

# Julian day of 1970-01-01, and of 0001-01-01 minus one (Python ordinal origin)
JULIAN_DAY_UNIX_EPOCH = 2440588
JULIAN_DAY_ORDINAL_OFFSET = 1721425
MSECS_PER_DAY = 86_400_000


class KeyType(enum.IntEnum):
    """Local storage key types, i.e. what a cache file holds."""

    USER_MAP = 0x00
    DRAFT = 0x01
    DRAFT_POSITION = 0x02
    IMAGES = 0x03
    LOCATIONS = 0x04
    STICKER_IMAGES = 0x05
    AUDIOS = 0x06
    RECENT_STICKERS_OLD = 0x07
    BACKGROUND_OLD = 0x08
    USER_SETTINGS = 0x09
    RECENT_HASHTAGS_AND_BOTS = 0x0A
    STICKERS_OLD = 0x0B
    SAVED_PEERS_OLD = 0x0C
    REPORT_SPAM_STATUSES = 0x0D
    SAVED_GIFS_OLD = 0x0E
    SAVED_GIFS = 0x0F
    STICKERS_KEYS = 0x10
    TRUSTED_BOTS = 0x11
    FAVED_STICKERS = 0x12
    EXPORT_SETTINGS = 0x13
    BACKGROUND = 0x14
    SELF_SERIALIZED = 0x15


class SettingId(enum.IntEnum):
    """Settings block identifiers found inside a USER_SETTINGS record."""

    KEY = 0x00
    USER = 0x01
    CHAT_SIZE_MAX = 0x03
    MUTE_PEER = 0x04
    SEND_KEY = 0x05
    AUTO_START = 0x06
    START_MINIMIZED = 0x07
    SOUND_NOTIFY = 0x08
    WORK_MODE = 0x09
    SEEN_TRAY_TOOLTIP = 0x0A
    DESKTOP_NOTIFY = 0x0B
    AUTO_UPDATE = 0x0C
    LAST_UPDATE_CHECK = 0x0D
    WINDOW_POSITION = 0x0E
    CONNECTION_TYPE_OLD = 0x0F
    DEFAULT_ATTACH = 0x11
    CATS_AND_DOGS = 0x12
    REPLACE_EMOJI = 0x13
    ASK_DOWNLOAD_PATH = 0x14
    DOWNLOAD_PATH_OLD = 0x15
    SCALE = 0x16
    LOGGED_PHONE_NUMBER = 0x19
    NOTIFY_VIEW = 0x1C
    SEND_TO_MENU = 0x1D
    COMPRESS_PASTED_IMAGE = 0x1E
    TILE_BACKGROUND_OLD = 0x21
    AUTO_LOCK = 0x22
    DIALOG_LAST_PATH = 0x23
    RECENT_STICKERS = 0x26
    TRY_IPV6 = 0x28
    SONG_VOLUME = 0x29
    INCLUDE_MUTED = 0x31
    MEGAGROUP_SIZE_MAX = 0x32
    DOWNLOAD_PATH = 0x33
    AUTO_DOWNLOAD = 0x34
    SAVED_GIFS_LIMIT = 0x35
    AUTO_PLAY = 0x37
    ADAPTIVE_FOR_WIDE = 0x38
    HIDDEN_PINNED_MESSAGES = 0x39
    RECENT_EMOJI = 0x3A
    EMOJI_VARIANTS = 0x3B
    DIALOGS_MODE = 0x40
    MODERATE_MODE = 0x41
    VIDEO_VOLUME = 0x42
    STICKERS_RECENT_LIMIT = 0x43
    NATIVE_NOTIFICATIONS = 0x44
    NOTIFICATIONS_COUNT = 0x45
    NOTIFICATIONS_CORNER = 0x46
    THEME_KEY = 0x47
    USE_EXTERNAL_VIDEO_PLAYER = 0x49
    DC_OPTIONS = 0x4A
    MTP_AUTHORIZATION = 0x4B
    LAST_SEEN_WARNING_SEEN_OLD = 0x4C
    AUTH_SESSION_SETTINGS = 0x4D
    LANG_PACK_KEY = 0x4E
    CONNECTION_TYPE = 0x4F
    STICKERS_FAVED_LIMIT = 0x50
    SUGGEST_STICKERS_BY_EMOJI = 0x51
    SUGGEST_EMOJI = 0x52
    TXT_DOMAIN_STRING = 0x53
    CACHE_SETTINGS = 0x56
    ANIMATIONS_DISABLED = 0x57
    SCALE_PERCENT = 0x58
    PLAYBACK_SPEED = 0x59
    LANGUAGES_KEY = 0x5A


class ConnectionType(enum.IntEnum):
    AUTO = 0
    HTTP_AUTO = 1  # not used
    HTTP_PROXY = 2
    TCP_PROXY = 3
    PROXIES_LIST_OLD = 4
    PROXIES_LIST = 5


class ProxyMode(enum.IntEnum):
    SYSTEM = 0
    ENABLED = 1
    DISABLED = 2

# Proxies list header: [Count(4) | Index(4) | Settings(4) | Calls(4)]
PROXIES_LIST_HEADER_FMT = "<iiii"
