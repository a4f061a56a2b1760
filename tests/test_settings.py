import pytest

from cache_bytes import i32, settings, text, u32, u64
from tdcache_core.protocol import ConnectionType, KeyType, ProxyMode, SettingId
from tdcache_decode.connection import ConnectionDescriptor, parse_connection_type
from tdcache_decode.cursor import ByteCursor
from tdcache_decode.dispatch import UserSettingsList, parse_cache
from tdcache_decode.errors import TruncatedError, UnknownBlockIdentifierError, UnsupportedEncodingError
from tdcache_decode.settings import BLOCK_ID_REGISTRY, SETTING_SCHEMAS, ThemeKey, UserSetting, decode_settings


def proxies_list(count=0, index=0, mode=ProxyMode.SYSTEM, calls=0) -> bytes:
    return i32(ConnectionType.PROXIES_LIST) + i32(count) + i32(index) + i32(mode) + i32(calls)


def test_single_integer_setting():
    result = parse_cache(settings(u32(SettingId.AUTO_START) + i32(42)), KeyType.USER_SETTINGS)
    assert isinstance(result, UserSettingsList)
    assert result.full_len == 12
    assert result.settings == (UserSetting(SettingId.AUTO_START, 42),)
    assert result.settings[0].name == "AUTO_START"


def test_unknown_block_identifier():
    with pytest.raises(UnknownBlockIdentifierError) as exc:
        parse_cache(settings(u32(0xFFFFFFFF) + i32(0)), KeyType.USER_SETTINGS)
    assert exc.value.block_id == 0xFFFFFFFF
    assert "0xffffffff" in str(exc.value)


def test_unknown_block_after_valid_entry_fails_whole_decode():
    payload = u32(SettingId.AUTO_START) + i32(1) + u32(0x7777) + i32(0)
    with pytest.raises(UnknownBlockIdentifierError):
        decode_settings(settings(payload))


def test_settings_keep_disk_order_and_duplicates():
    payload = (
        u32(SettingId.SCALE) + i32(2)
        + u32(SettingId.LOGGED_PHONE_NUMBER) + text("+15550100")
        + u32(SettingId.THEME_KEY) + u64(11) + u64(12) + u32(1)
        + u32(SettingId.SCALE) + i32(3)
    )
    _, entries = decode_settings(settings(payload))
    assert [e.field for e in entries] == [
        SettingId.SCALE,
        SettingId.LOGGED_PHONE_NUMBER,
        SettingId.THEME_KEY,
        SettingId.SCALE,
    ]
    assert entries[1].value == "+15550100"
    assert entries[2].value == ThemeKey(day=11, night=12, night_mode=1)
    assert entries[3].value == 3


def test_bytes_past_declared_length_are_not_visited():
    data = settings(u32(SettingId.AUTO_LOCK) + i32(3600)) + b"\xff" * 12
    _, entries = decode_settings(data)
    assert entries == (UserSetting(SettingId.AUTO_LOCK, 3600),)


def test_declared_end_offset_counts_the_prefix():
    # 12 = 4 (length) + 4 (block id) + 4 (value); block padding follows.
    data = u32(12) + u32(SettingId.AUTO_START) + i32(42) + b"\xaa" * 12
    result = parse_cache(data, KeyType.USER_SETTINGS)
    assert result.full_len == 12
    assert result.settings == (UserSetting(SettingId.AUTO_START, 42),)


def test_empty_payload():
    assert decode_settings(u32(0)) == (0, ())
    assert decode_settings(u32(4) + b"\x00" * 12) == (4, ())


def test_truncated_value_fails():
    with pytest.raises(TruncatedError):
        decode_settings(settings(u32(SettingId.AUTO_START) + b"\x01\x00"))


def test_partial_block_id_fails():
    with pytest.raises(TruncatedError):
        decode_settings(settings(b"\x06\x00"))


def test_byte_array_setting_with_negative_length():
    _, entries = decode_settings(settings(u32(SettingId.DC_OPTIONS) + i32(-1)))
    assert entries == (UserSetting(SettingId.DC_OPTIONS, b""),)


def test_every_schema_id_is_registered():
    for field in SETTING_SCHEMAS:
        assert BLOCK_ID_REGISTRY[int(field)] is field
    assert BLOCK_ID_REGISTRY[SettingId.CONNECTION_TYPE] is SettingId.CONNECTION_TYPE


@pytest.mark.parametrize("mode", [ProxyMode.SYSTEM, ProxyMode.DISABLED])
def test_proxies_list_without_entries(mode):
    cur = ByteCursor(proxies_list(index=1, mode=mode, calls=1))
    value = parse_connection_type(cur)
    assert value == ConnectionDescriptor(tag=ConnectionType.PROXIES_LIST, count=0, index=1, settings=mode, calls=1)
    assert cur.at_end()


def test_proxies_list_with_entries_is_unsupported():
    with pytest.raises(UnsupportedEncodingError):
        parse_connection_type(ByteCursor(proxies_list(count=1)))


def test_enabled_proxy_is_unsupported():
    with pytest.raises(UnsupportedEncodingError):
        parse_connection_type(ByteCursor(proxies_list(mode=ProxyMode.ENABLED)))


@pytest.mark.parametrize("tag", [ConnectionType.AUTO, ConnectionType.TCP_PROXY, ConnectionType.PROXIES_LIST_OLD, 99])
def test_other_connection_tags_pass_through(tag):
    cur = ByteCursor(i32(tag) + b"\xaa\xbb")
    with pytest.warns(UserWarning, match="passed through"):
        assert parse_connection_type(cur) is None
    assert cur.position == 4


def test_connection_type_entry_in_settings():
    payload = u32(SettingId.CONNECTION_TYPE) + proxies_list() + u32(SettingId.AUTO_START) + i32(1)
    _, entries = decode_settings(settings(payload))
    assert entries[0].field is SettingId.CONNECTION_TYPE
    assert isinstance(entries[0].value, ConnectionDescriptor)
    assert entries[1] == UserSetting(SettingId.AUTO_START, 1)


def test_unsupported_connection_aborts_record():
    payload = u32(SettingId.CONNECTION_TYPE) + proxies_list(count=2)
    with pytest.raises(UnsupportedEncodingError) as exc:
        parse_cache(settings(payload), KeyType.USER_SETTINGS)
    assert str(exc.value).startswith("error decoding cache record: not implemented")
