import pytest

from fillerbot.chars import to_upper
from fillerbot.cstring import (
    str_cat,
    str_clear,
    str_copy,
    str_dup,
    str_iter,
    str_iteri,
    str_lcat,
    str_len,
    str_map,
    str_mapi,
    str_ncat,
    str_ncopy,
    str_new,
)


def text_of(buf):
    return bytes(buf[: str_len(buf)])


def test_str_len_stops_at_nul():
    assert str_len(b"abc\0def") == 3


def test_str_len_without_nul_is_full_length():
    assert str_len(bytearray(b"abcdef")) == len(b"abcdef")


def test_str_len_accepts_str():
    assert str_len("hello") == 5


def test_str_new_is_zeroed_with_terminator_room():
    buf = str_new(5)
    assert len(buf) == 6
    assert set(buf) == {0}
    assert str_len(buf) == 0


def test_str_new_rejects_negative_size():
    with pytest.raises(ValueError):
        str_new(-1)


def test_str_copy_round_trip():
    buf = str_new(10)
    assert str_copy(buf, b"hello") is buf
    assert text_of(buf) == b"hello"
    assert len(buf) == 11


def test_str_copy_overflow_leaves_buffer_untouched():
    buf = str_new(3)
    with pytest.raises(ValueError):
        str_copy(buf, b"hello")
    assert set(buf) == {0}


def test_str_copy_requires_bytearray():
    with pytest.raises(TypeError):
        str_copy(b"immutable", b"x")


def test_str_ncopy_pads_with_nul():
    buf = bytearray(b"xxxxxxxx")
    str_ncopy(buf, b"ab", 5)
    assert buf[:2] == b"ab"
    assert buf[2:5] == bytes(3)
    assert buf[5:] == b"xxx"


def test_str_ncopy_truncates_without_terminator():
    buf = bytearray(b"xxxxxxxx")
    str_ncopy(buf, b"abcdef", 3)
    assert buf[:3] == b"abc"
    assert buf[3:] == b"xxxxx"


def test_str_ncopy_rejects_negative():
    with pytest.raises(ValueError):
        str_ncopy(bytearray(4), b"a", -1)


def test_str_cat_appends():
    buf = str_new(10)
    str_copy(buf, "foo")
    assert str_cat(buf, "bar") is buf
    assert text_of(buf) == b"foo" + b"bar"


def test_str_cat_overflow():
    buf = str_new(4)
    str_copy(buf, "foo")
    with pytest.raises(ValueError):
        str_cat(buf, "bar")
    assert text_of(buf) == b"foo"


def test_str_ncat_limits_appended_length():
    buf = str_new(10)
    str_copy(buf, "foo")
    str_ncat(buf, "barbaz", 3)
    assert text_of(buf) == b"foo" + b"bar"


def test_str_ncat_with_large_limit_appends_all():
    buf = str_new(10)
    str_copy(buf, "ab")
    str_ncat(buf, "cd", 100)
    assert text_of(buf) == b"ab" + b"cd"


def test_str_lcat_full_append():
    buf = str_new(20)
    str_copy(buf, "abc")
    total = str_lcat(buf, "defg", 20)
    assert total == len("abc") + len("defg")
    assert text_of(buf) == b"abc" + b"defg"


def test_str_lcat_truncates_to_size():
    buf = str_new(20)
    str_copy(buf, "abc")
    total = str_lcat(buf, "defgh", 6)
    assert total == len("abc") + len("defgh")
    assert str_len(buf) == 6 - 1
    assert text_of(buf) == b"abc" + b"de"


def test_str_lcat_size_not_above_length_writes_nothing():
    buf = str_new(10)
    str_copy(buf, "abcd")
    before = bytes(buf)
    assert str_lcat(buf, "xyz", 2) == 2 + len("xyz")
    assert bytes(buf) == before


def test_str_dup_is_independent_copy():
    original = bytearray(b"hello\0junk")
    copy = str_dup(original)
    assert text_of(copy) == b"hello"
    assert copy[-1] == 0
    original[0] = ord("j")
    assert text_of(copy) == b"hello"


def test_str_clear_zeroes_text_only():
    buf = bytearray(b"abc\0def")
    str_clear(buf)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"def"


def test_str_clear_none_is_ignored():
    assert str_clear(None) is None


def test_str_iter_visits_each_character():
    seen = []
    str_iter(bytearray(b"hey\0x"), seen.append)
    assert bytes(seen) == b"hey"


def test_str_iter_replaces_with_result():
    buf = bytearray(b"abc\0d")
    str_iter(buf, to_upper)
    assert buf == bytearray(b"ABC\0d")


def test_str_iteri_passes_indices():
    pairs = []
    str_iteri(bytearray(b"xyz"), lambda i, c: pairs.append((i, c)))
    assert pairs == list(enumerate(b"xyz"))


def test_str_iter_with_none_does_nothing():
    buf = bytearray(b"abc")
    str_iter(buf, None)
    str_iteri(None, lambda i, c: c)
    assert buf == bytearray(b"abc")


def test_str_map_returns_new_buffer():
    original = bytearray(b"hello")
    mapped = str_map(original, to_upper)
    assert text_of(mapped) == b"HELLO"
    assert len(mapped) == len(original) + 1
    assert original == bytearray(b"hello")


def test_str_map_none_inputs():
    assert str_map(None, to_upper) is None
    assert str_map(b"abc", None) is None


def test_str_mapi_uses_index():
    mapped = str_mapi(b"aaaa", lambda i, c: c + i)
    assert text_of(mapped) == bytes(ord("a") + i for i in range(4))


def test_str_mapi_none_inputs():
    assert str_mapi(None, lambda i, c: c) is None