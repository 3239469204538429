import pytest

from pipex.textutils import atoi, itoa, split, strncmp, strnstr, strtrim


@pytest.mark.parametrize(
    "text,sep",
    [
        ("ls -l", " "),
        ("  grep   foo  ", " "),
        ("/usr/bin:/bin::/usr/local/bin:", ":"),
        ("", " "),
        ("nosep", " "),
        (":::", ":"),
    ],
)
def test_split_invariants(text, sep):
    words = split(text, sep)
    assert all(words)
    assert all(sep not in w for w in words)
    assert "".join(words) == text.replace(sep, "")


def test_split_command():
    assert split("wc -l", " ") == ["wc", "-l"]


def test_split_leading_and_repeated_separators():
    assert split("::a::b:", ":") == ["a", "b"]


def test_split_empty_gives_no_words():
    assert split("", " ") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strnstr_finds_prefix():
    assert strnstr("PATH=/bin:/usr/bin", "PATH=", 5) == 0


def test_strnstr_not_within_limit():
    assert strnstr("MYPATH=/bin", "PATH=", 5) is None


@pytest.mark.parametrize(
    "haystack,needle,n",
    [("hello world", "world", 20), ("abcabc", "cab", 6), ("xyz", "z", 3)],
)
def test_strnstr_match_is_real(haystack, needle, n):
    i = strnstr(haystack, needle, n)
    assert haystack[i : i + len(needle)] == needle
    assert i + len(needle) <= n


def test_strnstr_empty_needle_and_zero_limit():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


def test_strnstr_missing():
    assert strnstr("abc", "d", 3) is None


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  keep  ", "") == "  keep  "


def test_atoi_basic():
    assert atoi("  \t-42abc") == -42
    assert atoi("+17") == 17


def test_atoi_no_digits():
    assert atoi("abc") == 0
    assert atoi("--5") == 0


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_minimum():
    assert itoa(-2147483648) == "-2147483648"


def test_strncmp_equal_prefix():
    assert strncmp("here_doc", "here_doc_extra", 8) == 0
    assert strncmp("abc", "abc", 100) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) < 0


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_unsigned_bytes():
    assert strncmp(b"\xff", b"\x01", 1) > 0