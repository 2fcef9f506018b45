import pytest

from ftkit.spec import FormatError, parse_spec
from ftkit.text import (
    encode_wchar,
    format_char,
    format_str,
    format_wchar,
    format_wstr,
    wchar_len,
)


def spec(text):
    return parse_spec(text, 0)


def test_encode_ascii():
    assert encode_wchar(ord("z"), 4) == b"z"


@pytest.mark.parametrize("char", ["\u20ac", "\u03a9", "\u65e5", "\U0001f600", "\u0100"])
def test_encode_multibyte_matches_utf8(char):
    assert encode_wchar(ord(char), 4) == char.encode("utf-8")


def test_encode_eight_bit_code_is_one_byte():
    assert encode_wchar(0xE9, 4) == bytes([0xE9])


def test_encode_zero_is_empty():
    assert encode_wchar(0, 4) == b""


@pytest.mark.parametrize("code", [0xD800, 0xDFFF, 0x110000, -1])
def test_encode_invalid_code_raises(code):
    with pytest.raises(FormatError):
        encode_wchar(code, 4)


@pytest.mark.parametrize("mb, code", [(1, 0x100), (2, 0x800), (3, 0x10000)])
def test_encode_too_long_for_locale_raises(mb, code):
    with pytest.raises(FormatError):
        encode_wchar(code, mb)


@pytest.mark.parametrize("mb, code", [(1, 0xFF), (2, 0x7FF), (3, 0xFFFF)])
def test_encode_within_locale_matches_widest(mb, code):
    assert encode_wchar(code, mb) == encode_wchar(code, 4)


def test_encode_rejects_bad_mb_cur_max():
    with pytest.raises(ValueError):
        encode_wchar(0x41, 0)


@pytest.mark.parametrize(
    "code", [0x41, 0x7F, 0x80, 0x7FF, 0x800, 0xFFFF, 0x10000, 0x10FFFF]
)
def test_wchar_len_matches_utf8(code):
    assert wchar_len(code) == len(chr(code).encode("utf-8"))


@pytest.mark.parametrize("code", [0xD800, 0x110000, -1])
def test_wchar_len_rejects_invalid(code):
    with pytest.raises(FormatError):
        wchar_len(code)


def test_format_char_plain():
    assert format_char(spec("c"), "x") == b"x"


def test_format_char_width_and_left_justify():
    assert format_char(spec("4c"), "x") == b" " * 3 + b"x"
    assert format_char(spec("-4c"), "x") == b"x" + b" " * 3


def test_format_char_keeps_low_byte():
    assert format_char(spec("c"), 0x141) == format_char(spec("c"), 0x41)


def test_format_wchar_euro():
    assert format_wchar(spec("C"), 0x20AC, 4) == "\u20ac".encode("utf-8")


def test_format_wchar_padding():
    right = format_wchar(spec("5C"), "\u20ac", 4)
    left = format_wchar(spec("-5C"), "\u20ac", 4)
    assert len(right) == 5 and right.endswith("\u20ac".encode("utf-8"))
    assert len(left) == 5 and left.startswith("\u20ac".encode("utf-8"))


def test_format_wchar_errors():
    with pytest.raises(FormatError):
        format_wchar(spec("C"), 0xD800, 4)
    with pytest.raises(FormatError):
        format_wchar(spec("C"), 0x20AC, 1)


def test_format_str_null():
    assert format_str(spec("s"), None) == b"(null)"


def test_format_str_precision_and_width():
    assert format_str(spec(".3s"), "hello") == b"hello"[:3]
    assert format_str(spec("8s"), "hello") == b"hello".rjust(8)
    assert format_str(spec("-8s"), "hello") == b"hello".ljust(8)


def test_format_str_stops_at_nul_and_accepts_bytes():
    assert format_str(spec("s"), "ab\0cd") == format_str(spec("s"), b"ab")
    assert format_str(spec("s"), b"ab") == b"ab"


def test_format_str_utf8():
    assert format_str(spec("s"), "\u00e9t\u00e9") == "\u00e9t\u00e9".encode("utf-8")


def test_format_str_rejects_int():
    with pytest.raises(TypeError):
        format_str(spec("s"), 5)


def test_format_wstr_plain():
    assert format_wstr(spec("S"), "\u65e5\u672c", 4) == "\u65e5\u672c".encode("utf-8")


def test_format_wstr_precision_keeps_whole_characters():
    assert format_wstr(spec(".3S"), "\u65e5\u672c", 4) == "\u65e5".encode("utf-8")
    assert format_wstr(spec(".2S"), "\u65e5\u672c", 4) == b""


def test_format_wstr_empty_writes_no_padding():
    assert format_wstr(spec("5S"), "", 4) == b""


def test_format_wstr_null_and_width():
    assert format_wstr(spec("S"), None, 4) == b"(null)"
    assert format_wstr(spec("10S"), "abc", 4) == b"abc".rjust(10)


def test_format_wstr_code_list_matches_text():
    text = "h\u00e9"
    assert format_wstr(spec("S"), [ord(c) for c in text], 4) == format_wstr(
        spec("S"), text, 4
    )


def test_format_wstr_error_without_precision():
    with pytest.raises(FormatError):
        format_wstr(spec("S"), [0x41, 0xD800], 4)


def test_format_wstr_error_covered_by_precision():
    assert format_wstr(spec(".1S"), [0x41, 0xD800], 4) == b"A"
    with pytest.raises(FormatError):
        format_wstr(spec(".2S"), [0x41, 0xD800], 4)


def test_format_wstr_locale_too_narrow():
    with pytest.raises(FormatError):
        format_wstr(spec("S"), "\u65e5", 1)