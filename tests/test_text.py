import pytest
from hypothesis import given
from hypothesis import strategies as st

from fdfkit.text import atoi, itoa, split, strmapi, striteri, strtrim


def test_atoi_source_example_stops_at_second_sign():
    assert atoi("+---++--1234a678") == 0


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n\v\f\r-12345xyz") == -12345
    assert atoi("+12345") == 12345


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("-") == 0


def test_atoi_int_min_and_max():
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483647") == 2147483647


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_source_example():
    assert itoa(-12345) == "-12345"
    assert itoa(0) == "0"


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_split_source_example():
    assert split("Hello my name is Levi", " ") == ["Hello", "my", "name", "is", "Levi"]


def test_split_drops_empty_runs():
    assert split("  a  b ", " ") == ["a", "b"]
    assert split("    ", " ") == []
    assert split("", " ") == []


def test_split_accepts_int_separator():
    assert split("a,b", ord(",")) == ["a", "b"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@given(st.text(alphabet="ab,", max_size=30))
def test_split_join_invariant(s):
    words = split(s, ",")
    assert all(words)
    assert "".join(words) == s.replace(",", "")


def test_strtrim_source_example():
    assert strtrim("aaaaaaaaCHEEEEEFaaaaaaaaa", "a") == "CHEEEEEF"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""
    assert strtrim("", "a") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  x  ", "") == "  x  "


def test_strtrim_none_inputs():
    assert strtrim(None, "a") is None
    assert strtrim("a", None) is None


def test_strmapi_passes_index():
    assert strmapi("abc", lambda i, c: str(i)) == "012"
    assert strmapi(None, lambda i, c: c) is None
    assert strmapi("abc", None) is None


def test_striteri_modifies_in_place():
    buf = list("hello world!")
    result = striteri(buf, lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result is buf
    assert "".join(buf) == "HeLlO WoRlD!"


def test_striteri_stops_at_nul():
    buf = list("ab\0cd")
    striteri(buf, lambda i, c: c.upper())
    assert buf == ["A", "B", "\0", "c", "d"]


def test_striteri_bytearray():
    buf = bytearray(b"abc")
    striteri(buf, lambda i, c: c - 32)
    assert buf == bytearray(b"ABC")


def test_striteri_none():
    assert striteri(None, lambda i, c: c) is None