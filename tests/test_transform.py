import pytest

from minishell.transform import (
    split,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    striteri,
    strtrim,
    substr,
)


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_clamps_length():
    assert substr("hello", 0, 100) == "hello"


def test_substr_start_past_end_is_empty():
    assert substr("hello", 10, 2) == ""


def test_substr_start_at_end_is_empty():
    assert substr("abc", 3, 5) == ""


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_keeps_both_parts():
    result = strjoin("abc", "xyz")
    assert result.startswith("abc")
    assert result.endswith("xyz")
    assert len(result) == 6


def test_strjoin_with_empty():
    assert strjoin("", "abc") == "abc"
    assert strjoin("abc", "") == "abc"


def test_strtrim_both_ends():
    assert strtrim("--hi--", "-") == "hi"


def test_strtrim_keeps_inner_characters():
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_everything_removed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_leaves_string():
    assert strtrim(" abc ", "") == " abc "


def test_split_drops_empty_fields():
    assert split("  a b  c ", " ") == ["a", "b", "c"]


def test_split_empty_string():
    assert split("", " ") == []


def test_split_without_separator():
    assert split("abc", ",") == ["abc"]


def test_split_only_separators():
    assert split(",,,", ",") == []


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strmapi_passes_indexes():
    seen = []

    def record(index, ch):
        seen.append(index)
        return ch

    assert strmapi("abc", record) == "abc"
    assert seen == [0, 1, 2]


def test_strmapi_applies_function():
    result = strmapi("abc", lambda i, c: c.upper())
    assert result == "ABC"


def test_strmapi_none():
    assert strmapi(None, lambda i, c: c) is None


def test_striteri_modifies_in_place():
    chars = list("abc")
    striteri(chars, lambda i, c: str(i))
    assert chars == ["0", "1", "2"]


def test_striteri_none_func_leaves_sequence():
    chars = list("abc")
    striteri(chars, None)
    assert chars == ["a", "b", "c"]


def test_strlcpy_fits():
    result, length = strlcpy("old", "hello", 10)
    assert result == "hello"
    assert length == 5


def test_strlcpy_truncates():
    result, length = strlcpy("", "hello", 3)
    assert len(result) == 2
    assert "hello".startswith(result)
    assert length == 5


def test_strlcpy_zero_size_keeps_dst():
    assert strlcpy("keep", "hello", 0) == ("keep", 5)


def test_strlcat_fits():
    result, length = strlcat("ab", "cd", 10)
    assert result == "abcd"
    assert length == 4


def test_strlcat_truncates():
    result, length = strlcat("ab", "cdef", 4)
    assert len(result) == 3
    assert result.startswith("ab")
    assert length == 6


def test_strlcat_dst_longer_than_size():
    assert strlcat("abcdef", "xy", 3) == ("abcdef", 5)


def test_strlcat_zero_size():
    assert strlcat("ab", "xy", 0) == ("ab", 2)


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("ab", "xy", -1)