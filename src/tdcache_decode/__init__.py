"""tdcache Decode - Typed decoding of decrypted cache records."""
from .connection import ConnectionDescriptor, parse_connection_type
from .cursor import ByteCursor
from .dispatch import EmptyRecord, FixedList, LocationList, UserSettingsList, parse_cache
from .errors import (
    CacheDecodeError,
    InvalidLengthError,
    TruncatedError,
    UnknownBlockIdentifierError,
    UnsupportedEncodingError,
)
from .fields import decode_field
from .records import KEY_TYPE_REGISTRY, CachedFile, Location, MediaKey, ReportSpamStatus
from .settings import BLOCK_ID_REGISTRY, UserSetting, decode_settings

__all__ = [
    "ByteCursor",
    "decode_field",
    "parse_cache",
    "parse_connection_type",
    "decode_settings",
    "ConnectionDescriptor",
    "EmptyRecord",
    "FixedList",
    "LocationList",
    "UserSettingsList",
    "UserSetting",
    "CachedFile",
    "Location",
    "MediaKey",
    "ReportSpamStatus",
    "KEY_TYPE_REGISTRY",
    "BLOCK_ID_REGISTRY",
    "CacheDecodeError",
    "TruncatedError",
    "UnknownBlockIdentifierError",
    "UnsupportedEncodingError",
    "InvalidLengthError",
]
