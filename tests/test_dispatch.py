import pytest

from cache_bytes import LOCATION_TERMINATOR, cached_file, location, u32, u64, i32
from tdcache_core.protocol import KeyType
from tdcache_decode.dispatch import EmptyRecord, FixedList, LocationList, parse_cache
from tdcache_decode.errors import CacheDecodeError, TruncatedError
from tdcache_decode.records import CachedFile, ReportSpamStatus


def locations_buffer(*records: bytes) -> bytes:
    body = b"".join(records)
    return u32(len(body) + 4) + body


def test_single_location_then_terminator():
    result = parse_cache(locations_buffer(location(filename="a.jpg", size=100), LOCATION_TERMINATOR), KeyType.LOCATIONS)
    assert isinstance(result, LocationList)
    assert len(result.locations) == 1
    assert result.locations[0].filename == "a.jpg"
    assert result.locations[0].size == 100


@pytest.mark.parametrize("n", [0, 1, 5])
def test_terminator_is_never_appended(n):
    records = [location(media_id=i + 1, filename=f"f{i}.jpg") for i in range(n)]
    result = parse_cache(locations_buffer(*records, LOCATION_TERMINATOR), KeyType.LOCATIONS)
    assert [loc.filename for loc in result.locations] == [f"f{i}.jpg" for i in range(n)]


def test_records_after_terminator_are_ignored():
    data = locations_buffer(location(filename="x"), LOCATION_TERMINATOR, location(filename="y"))
    result = parse_cache(data, KeyType.LOCATIONS)
    assert [loc.filename for loc in result.locations] == ["x"]


@pytest.mark.parametrize("n", [0, 1, 3])
def test_locations_ending_at_record_boundary(n):
    records = [location(media_id=i + 1) for i in range(n)]
    result = parse_cache(locations_buffer(*records), KeyType.LOCATIONS)
    assert len(result.locations) == n


def test_terminator_ignores_modified_timestamp():
    # Zero key, empty name and zero size end the list whatever the timestamp says.
    end = location(location_type=0, dc_id=0, media_id=0, filename="", size=0)
    result = parse_cache(locations_buffer(location(), end, location()), KeyType.LOCATIONS)
    assert len(result.locations) == 1


def test_location_with_zero_size_is_not_terminator():
    rec = location(location_type=0, dc_id=0, media_id=0, filename="named", size=0)
    result = parse_cache(locations_buffer(rec, LOCATION_TERMINATOR), KeyType.LOCATIONS)
    assert len(result.locations) == 1


def test_location_cut_mid_record_fails():
    data = locations_buffer(location(), location())[:-3]
    with pytest.raises(TruncatedError) as exc:
        parse_cache(data, KeyType.LOCATIONS)
    assert str(exc.value).startswith("error decoding cache record: truncated")


def test_images_fixed_list():
    body = u32(2) + cached_file(1, 2, 3, 400) + cached_file(2**64 - 1, 5, 6, -1)
    result = parse_cache(u32(len(body) + 4) + body, KeyType.IMAGES)
    assert isinstance(result, FixedList)
    assert result.key_type == KeyType.IMAGES
    assert result.count == 2
    assert result.entries == (CachedFile(1, 2, 3, 400), CachedFile(2**64 - 1, 5, 6, -1))


@pytest.mark.parametrize("key_type", [KeyType.AUDIOS, KeyType.STICKER_IMAGES])
def test_other_file_lists_share_layout(key_type):
    body = u32(1) + cached_file(9, 8, 7, 6)
    result = parse_cache(u32(len(body) + 4) + body, key_type)
    assert result.entries == (CachedFile(9, 8, 7, 6),)


def test_report_spam_statuses():
    body = u32(2) + u64(100) + i32(1) + u64(200) + i32(2)
    result = parse_cache(u32(len(body) + 4) + body, KeyType.REPORT_SPAM_STATUSES)
    assert result.entries == (ReportSpamStatus(100, 1), ReportSpamStatus(200, 2))


def test_empty_fixed_list():
    result = parse_cache(u32(8) + u32(0), KeyType.AUDIOS)
    assert result.entries == ()


def test_fixed_list_cut_mid_record_fails():
    body = u32(1) + cached_file(1, 2, 3, 4)[:-1]
    with pytest.raises(TruncatedError):
        parse_cache(u32(len(body) + 4) + body, KeyType.IMAGES)


@pytest.mark.parametrize("key_type", [KeyType.DRAFT, KeyType.USER_MAP, 0x7F, 2**32 - 1])
@pytest.mark.parametrize("data", [b"\x01", b"\xff" * 64, b"not a cache record"])
def test_unknown_key_type_is_empty(key_type, data):
    assert parse_cache(data, key_type) == EmptyRecord(key_type=key_type)


def test_context_is_added_once_and_type_kept():
    with pytest.raises(CacheDecodeError) as exc:
        parse_cache(b"\x01", KeyType.LOCATIONS)
    assert isinstance(exc.value, TruncatedError)
    assert exc.value.context == ["error decoding cache record"]
    assert exc.value.code == "E_TRUNCATED"
