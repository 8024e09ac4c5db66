import pytest

from ftkit.utf8 import (
    is_ascii,
    is_four_byte,
    is_three_byte,
    is_two_byte,
    join_chars,
    split_chars,
)


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(0x7F)
    assert not is_ascii(0x80)
    assert not is_ascii(0xFF)


def test_lead_byte_classes():
    assert is_two_byte(0xC3)
    assert not is_two_byte(0xE2)
    assert is_three_byte(0xE2)
    assert not is_three_byte(0xF0)
    assert is_four_byte(0xF0)
    assert not is_four_byte(0xF8)


def test_continuation_byte_is_no_lead():
    assert not is_ascii(0x80)
    assert not is_two_byte(0x80)
    assert not is_three_byte(0x80)
    assert not is_four_byte(0x80)


@pytest.mark.parametrize("value", [-1, 256])
def test_byte_out_of_range(value):
    with pytest.raises(ValueError):
        is_ascii(value)


def test_byte_wrong_type():
    with pytest.raises(TypeError):
        is_two_byte("a")


def test_split_ascii():
    assert split_chars(b"abc") == [b"a", b"b", b"c"]


def test_split_multibyte_characters():
    text = "aé€😀"
    pieces = split_chars(text.encode("utf-8"))
    assert [piece.decode("utf-8") for piece in pieces] == list(text)
    assert [len(piece) for piece in pieces] == [1, 2, 3, 4]


def test_split_empty():
    assert split_chars(b"") == []


def test_stray_continuation_byte_stands_alone():
    assert split_chars(b"a\x80b") == [b"a", b"\x80", b"b"]


def test_truncated_sequence_keeps_remainder():
    data = "€".encode("utf-8")[:2]
    assert split_chars(data) == [data]


@pytest.mark.parametrize("text", ["", "hello", "héllo wörld", "日本語", "mix 😀 ok"])
def test_round_trip(text):
    data = text.encode("utf-8")
    pieces = split_chars(data)
    assert join_chars(pieces) == data
    assert len(pieces) == len(text)


def test_join_chars_accepts_bytearrays():
    assert join_chars([bytearray(b"a"), b"\xc3\xa9"]) == "aé".encode("utf-8")