import pytest

from ftkit.split import count_words, split, split_quote, strsplit


def test_split_skips_repeated_delimiters():
    assert split("  hello   world  ", " ") == ["hello", "world"]


def test_split_with_several_delimiters():
    assert split("a,b;;c", ",;") == ["a", "b", "c"]


def test_split_only_delimiters_is_empty():
    assert split(",,,", ",") == []


def test_split_empty_string():
    assert split("", " ") == []


def test_split_no_delimiters_in_charset():
    assert split("abc def", "") == ["abc def"]


@pytest.mark.parametrize(
    "text, charset",
    [("one two three", " "), ("\tx\ny z ", " \t\n"), ("", ","), ("aaa", "a"), ("a-b", "-")],
)
def test_count_words_matches_split(text, charset):
    assert count_words(text, charset) == len(split(text, charset))


def test_split_words_rejoin_without_delimiters():
    text = "x,,yy,zzz,"
    assert "".join(split(text, ",")) == text.replace(",", "")


def test_split_quote_keeps_quoted_spaces():
    assert split_quote('echo "a b" c', " ", '"') == ["echo", '"a b"', "c"]


def test_split_quote_mixed_quotes():
    assert split_quote("say 'it \"is\" ok' now", " ", "'\"") == [
        "say",
        "'it \"is\" ok'",
        "now",
    ]


def test_split_quote_unterminated_quote_runs_to_end():
    assert split_quote('a "b c', " ", '"') == ["a", '"b c']


def test_split_quote_without_quotes_matches_split():
    text = "  many   small words here "
    assert split_quote(text, " ", "'\"") == split(text, " ")


def test_split_quote_many_words():
    words = [f"w{i}" for i in range(25)]
    assert split_quote(" ".join(words), " ", '"') == words


def test_strsplit_drops_trailing_piece():
    assert strsplit("a,b,c", ",") == ["a", "b"]


def test_strsplit_multi_char_separator():
    assert strsplit("a::b", "::") == ["a", "b"]


def test_strsplit_without_separator_is_empty():
    assert strsplit("abc", ",") == []


def test_strsplit_leading_separator():
    assert strsplit(",a", ",") == [""]