import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fdfkit.printf import (
    format_hex,
    format_int,
    format_pointer,
    format_str,
    format_unsigned,
    printf,
    render,
)


def test_null_pointer_and_string():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"
    assert format_str(None) == "(null)"
    assert render("%p %s", None, None) == "(nil) (null)"


def test_int_min_wraps():
    assert format_int(2**31) == "-2147483648"
    assert format_int(-(2**31)) == "-2147483648"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_format_int_matches_decimal_in_range(n):
    assert format_int(n) == str(n)
    assert render("%d", n) == render("%i", n) == str(n)


@given(st.integers(min_value=-(2**40), max_value=2**40))
def test_format_int_wraps_by_32_bits(n):
    assert format_int(n) == format_int(n + 2**32)
    assert -(2**31) <= int(format_int(n)) < 2**31


@given(st.integers(min_value=-(2**40), max_value=2**40))
def test_unsigned_and_hex_agree(n):
    value = int(format_unsigned(n))
    assert 0 <= value < 2**32
    assert int(format_hex(n), 16) == value
    assert format_hex(n, True) == format_hex(n).upper()
    assert format_hex(n) == format_hex(n).lower()


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_round_trip(addr):
    text = format_pointer(addr)
    assert text.startswith("0x")
    assert int(text[2:], 16) == addr


def test_unsigned_of_negative_one_is_max():
    assert format_unsigned(-1) == format_unsigned(2**32 - 1)
    assert int(format_unsigned(-1)) == 2**32 - 1


@given(st.text())
def test_string_conversion_is_identity(s):
    assert render("%s", s) == s


def test_char_conversion():
    assert render("%c", "A") == "A"
    assert render("%c", 65) == chr(65)
    assert render("%c", 65 + 256) == chr(65)


def test_percent_escape():
    assert render("100%%") == "100%"


def test_unknown_conversion_is_skipped():
    assert render("a%qb") == "ab"


def test_trailing_percent_ends_output():
    assert render("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d")


def test_non_integer_argument_raises():
    with pytest.raises(TypeError):
        render("%x", "ten")


def test_none_format():
    assert render(None) == ""
    assert printf(None) == 0


@given(st.text(), st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_printf_writes_rendered_text_and_counts_it(s, n):
    out = io.StringIO()
    count = printf("%s|%d|%x|%p", s, n, n, n, stream=out)
    expected = render("%s|%d|%x|%p", s, n, n, n)
    assert out.getvalue() == expected
    assert count == len(expected)


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s-%u", "ok", 7)
    captured = capsys.readouterr().out
    assert captured == render("%s-%u", "ok", 7)
    assert count == len(captured)