import pytest

from pushswap.libft.strings import (
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    substr,
    strtrim,
)


@pytest.mark.parametrize("a,b", [("", ""), ("abc", "de"), ("x", "")])
def test_strlen_is_additive(a, b):
    assert strlen(a + b) == strlen(a) + strlen(b)


def test_strchr_finds_first_occurrence():
    s = "banana"
    idx = strchr(s, "n")
    assert s[idx] == "n"
    assert "n" not in s[:idx]


def test_strchr_missing_and_terminator():
    assert strchr("abc", "z") is None
    assert strchr("abc", "\0") == len("abc")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last_occurrence():
    s = "banana"
    idx = strrchr(s, "a")
    assert s[idx] == "a"
    assert "a" not in s[idx + 1 :]
    assert strrchr(s, "q") is None
    assert strrchr(s, "\0") == len(s)


def test_strncmp_equal_and_order():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("anything", "else", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_antisymmetric():
    assert strncmp("hello", "help", 4) == -strncmp("help", "hello", 4)


def test_strnstr_empty_needle():
    assert strnstr("haystack", "", 3) == 0


def test_strnstr_finds_within_limit():
    hay = "lorem ipsum dolor"
    idx = strnstr(hay, "ipsum", len(hay))
    assert hay[idx : idx + len("ipsum")] == "ipsum"
    assert strnstr(hay, "ipsum", idx + len("ipsum") - 1) is None
    assert strnstr(hay, "absent", len(hay)) is None


def test_strlcpy_truncates():
    copy, total = strlcpy("hello", 3)
    assert copy == "he"
    assert total == len("hello")


def test_strlcpy_full_and_zero():
    assert strlcpy("hello", 10) == ("hello", len("hello"))
    assert strlcpy("hello", 0)[0] == ""


def test_strlcat_room_enough():
    result, total = strlcat("foo", "bar", 20)
    assert result == "foobar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates_to_size():
    result, total = strlcat("foo", "barbaz", 6)
    assert len(result) == 6 - 1
    assert result.startswith("foo")
    assert total == len("foo") + len("barbaz")


def test_strlcat_size_smaller_than_dst():
    result, total = strlcat("foobar", "xyz", 2)
    assert result == "foobar"
    assert total == len("xyz") + 2


def test_strdup_equal():
    assert strdup("copy me") == "copy me"


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 2, 100) == "llo"
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    joined = strjoin("left", "right")
    assert joined.startswith("left")
    assert joined.endswith("right")
    assert len(joined) == len("left") + len("right")


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyx", "xy") == ""
    assert strtrim("a x a", "a") == " x "
    assert strtrim("  keep  ", "") == "  keep  "


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    seen = []
    strmapi("xyz", lambda i, c: seen.append(i) or c)
    assert seen == [0, 1, 2]


def test_striteri_mutates_in_place():
    chars = list("abc")
    result = striteri(chars, lambda i, c: c.upper() if i != 1 else None)
    assert chars == ["A", "b", "C"]
    assert result is chars