import pytest
from animal_spotter.utils import encode_path_segment, decode_name_list, decode_record, epoch_to_iso8601_utc

def test_encode_path_segment():
    assert encode_path_segment("lion") == "lion"
    assert encode_path_segment("Mountain Lion") == "Mountain%20Lion"
    assert encode_path_segment("a/b?c#d") == "a%2Fb%3Fc%23d"

def test_decode_name_list_keeps_order():
    assert decode_name_list(b'["zebra", "aardvark"]') == ["zebra", "aardvark"]
    assert decode_name_list(b"[]") == []
    for bad in (b"", b"{}", b'[1, 2]', b"nope"):
        with pytest.raises(ValueError):
            decode_name_list(bad)

def test_decode_record_requires_field():
    assert decode_record(b'{"token": "abc", "extra": 1}', "token") == {"token": "abc", "extra": 1}
    for bad in (b'{"token": 5}', b'{"token": ""}', b"[]", b""):
        with pytest.raises(ValueError):
            decode_record(bad, "token")

def test_epoch_conversions():
    # seconds
    assert epoch_to_iso8601_utc(0) == "1970-01-01T00:00:00Z"
    assert epoch_to_iso8601_utc(1_577_836_800) == "2020-01-01T00:00:00Z"
    # milliseconds
    assert epoch_to_iso8601_utc(1_577_836_800_000) == "2020-01-01T00:00:00Z"
    # fractional seconds
    assert epoch_to_iso8601_utc(1_577_836_800.5) == "2020-01-01T00:00:00.500000Z"

def test_epoch_rejects_garbage():
    assert epoch_to_iso8601_utc(None) is None
    assert epoch_to_iso8601_utc(-1) is None
    assert epoch_to_iso8601_utc("1577836800") is None
    assert epoch_to_iso8601_utc(True) is None

def test_decode_json_too_deep_is_value_error():
    with pytest.raises(ValueError):
        decode_name_list(b"[" * 200000)
