import pytest

from solong.strbuild import (
    split,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strtrim,
    substr,
)


def test_substr_inside_string():
    assert substr("lorem ipsum", 6, 5) == "ipsum"


def test_substr_length_past_end_is_clamped():
    text = "lorem"
    assert substr(text, 2, 100) == text[2:]


def test_substr_start_past_end_is_empty():
    assert substr("abc", 10, 2) == ""


def test_substr_zero_length_is_empty():
    assert substr("abc", 1, 0) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("so", "_long") == "so_long"


def test_strjoin_with_empty_keeps_other():
    assert strjoin("", "abc") == "abc"
    assert strjoin("abc", "") == "abc"


def test_strtrim_both_ends():
    assert strtrim("xyhixy", "xy") == "hi"


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_all_removed():
    assert strtrim("xxx", "x") == ""


def test_strtrim_empty_set_leaves_string():
    assert strtrim("  padded  ", "") == "  padded  "


def test_split_drops_empty_pieces():
    assert split("\n\n111\n1P1\n\n111\n", "\n") == ["111", "1P1", "111"]


def test_split_without_separator_gives_one_word():
    assert split("10001", "\n") == ["10001"]


def test_split_of_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_join_round_trip():
    words = ["ab", "c", "def"]
    assert split(" ".join(words), " ") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strmapi_uses_index():
    assert strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch) == "AbCd"


def test_strmapi_preserves_length():
    text = "hello world"
    assert len(strmapi(text, lambda i, ch: "*")) == len(text)


def test_striteri_modifies_in_place():
    chars = list("abc")
    striteri(chars, lambda i, ch: ch.upper())
    assert chars == ["A", "B", "C"]


def test_striteri_none_keeps_item():
    chars = list("abc")
    seen = []
    striteri(chars, lambda i, ch: seen.append(i))
    assert chars == ["a", "b", "c"]
    assert seen == [0, 1, 2]


def test_strlcpy_fits():
    src = "hello"
    assert strlcpy(src, 10) == (src, len(src))


def test_strlcpy_truncates_leaving_terminator_slot():
    src = "hello"
    copied, total = strlcpy(src, 3)
    assert copied == src[:2]
    assert total == len(src)


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", 5)


def test_strlcat_appends_within_size():
    dest, src = "ab", "cd"
    assert strlcat(dest, src, 10) == (dest + src, len(dest) + len(src))


def test_strlcat_truncates():
    result, total = strlcat("ab", "cdef", 4)
    assert result == "abc"
    assert total == 6


def test_strlcat_size_smaller_than_dest():
    assert strlcat("abcd", "xyz", 2) == ("abcd", 5)


def test_strlcat_size_equal_to_dest():
    dest = "abcd"
    assert strlcat(dest, "xy", len(dest)) == (dest, len(dest) + 2)