"""tdcache Core - On-disk constants and Qt value adapters."""
from .protocol import ConnectionType, KeyType, ProxyMode, SettingId
from .qt import convert_utf16, qdatetime

__all__ = ["ConnectionType", "KeyType", "ProxyMode", "SettingId", "convert_utf16", "qdatetime"]
