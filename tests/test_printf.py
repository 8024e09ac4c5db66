import io

import pytest

from ftkit.printf import fprintf, printf


def render(fmt, *args):
    buf = io.StringIO()
    count = fprintf(buf, fmt, *args)
    return buf.getvalue(), count


def test_plain_text_is_copied():
    text, count = render("hello world")
    assert text == "hello world"
    assert count == len(text)


def test_decimal_conversions():
    text, count = render("%d and %i", 42, -7)
    assert text == f"{42} and {-7}"
    assert count == len(text)


def test_int_wraps_to_32_bits():
    text, _ = render("%d", 2**31)
    assert text == str(-(2**31))


def test_string_and_none():
    text, _ = render("[%s|%s]", "abc", None)
    assert text == "[abc|(null)]"


def test_char_from_str_and_code():
    text, _ = render("%c%c", "x", ord("y"))
    assert text == "xy"


def test_hex_lower_and_upper():
    text, _ = render("%x %X", 255, 48879)
    assert text == f"{255:x} {48879:X}"


def test_unsigned_wraps_negative():
    text, _ = render("%u", -1)
    assert text == str(2**32 - 1)


def test_pointer():
    text, _ = render("%p %p", 4096, None)
    assert text == f"0x{4096:x} (nil)"


def test_float_six_digits():
    text, _ = render("%f", 2.5)
    assert text == "2.500000"


def test_percent_and_unknown_conversion():
    text, count = render("100%% %q")
    assert text == "100% q"
    assert count == len(text)


def test_count_matches_output_length():
    text, count = render("%s=%d (%x)", "key", 123, 123)
    assert count == len(text)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        render("%d")


def test_trailing_percent_raises():
    with pytest.raises(ValueError):
        render("abc%")


def test_non_string_format_raises():
    with pytest.raises(TypeError):
        fprintf(io.StringIO(), None)


def test_printf_writes_to_stdout(capsys):
    count = printf("%s-%d", "a", 1)
    out = capsys.readouterr().out
    assert out == "a-1"
    assert count == len(out)