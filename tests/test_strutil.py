import pytest

from pipechain.strutil import (
    atoi,
    atoi_base,
    itoa,
    split,
    strcmp,
    strlcat,
    strlcpy,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


def test_split_worked_example():
    words = split("zzzhellozzmyznamezziszzalexzz", "z")
    assert words == ["hello", "my", "name", "is", "alex"]
    assert words[4] == "alex"


def test_split_command_line():
    assert split("ls -l", " ") == ["ls", "-l"]


@pytest.mark.parametrize("text", ["", "    ", "a", "  grep  -v   foo "])
def test_split_pieces_never_empty_or_contain_sep(text):
    words = split(text, " ")
    assert all(words)
    assert all(" " not in w for w in words)
    assert "".join(words) == text.replace(" ", "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strcmp_equal_and_antisymmetric():
    assert strcmp("hello", "hello") == 0
    assert strcmp("", "") == 0
    assert strcmp("helli", "hello") < 0
    assert strcmp("helli", "hello") == -strcmp("hello", "helli")


def test_strcmp_prefix_orders_shorter_first():
    assert strcmp("here", "here_doc") < 0
    assert strcmp("here_doc", "here") > 0


def test_strncmp_limits_comparison():
    assert strncmp("helli", "hello", 4) == 0
    assert strncmp("helli", "hello", 6) < 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_matches_strcmp_when_unbounded():
    assert strncmp("EOF", "EOF\n", -1) == strcmp("EOF", "EOF\n")
    assert strncmp("EOF", "EOF\n", 3) == 0


def test_strnstr_found_and_bounded():
    haystack = "etyhhellonveiosvyrbhv"
    index = strnstr(haystack, "hello", 15)
    assert index is not None
    assert haystack[index:index + 5] == "hello"
    assert strnstr(haystack, "hello", 8) is None


def test_strnstr_empty_needle_and_missing():
    assert strnstr("anything", "", 0) == 0
    assert strnstr("HOME=/root", "PATH", 10) is None
    assert strnstr("PATH=/bin", "PATH", -1) == 0


def test_atoi_parses_leading_number():
    assert atoi("  \t-42abc") == -42
    assert atoi("+7") == 7
    assert atoi("abc") == 0
    assert atoi("- 5") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 5, -1, 123456, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 65535])
def test_atoi_base_hex_round_trip(n):
    assert atoi_base(format(n, "x"), 16) == n
    assert atoi_base(format(n, "X"), 16) == n
    assert atoi_base("-" + format(n, "x"), 16) == -n


def test_atoi_base_stops_at_foreign_digit():
    assert atoi_base("1012", 2) == atoi_base("101", 2)
    assert atoi_base(format(5, "b"), 2) == 5


def test_atoi_base_rejects_bad_base():
    with pytest.raises(ValueError):
        atoi_base("10", 17)
    with pytest.raises(ValueError):
        atoi_base("10", 0)


def test_strtrim():
    assert strtrim("xxhixyx", "xy") == "hi"
    assert strtrim("", "") == ""
    assert strtrim("  a ", "") == "  a "
    assert strtrim("aaaa", "a") == ""


def test_substr():
    assert substr("hello world", 6, 5) == "world"
    assert substr("hello", 2, 100) == "llo"
    assert substr("", 1, 1) == ""
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strlcpy_truncates_and_reports_length():
    assert strlcpy("hello", 10) == ("hello", 5)
    copied, total = strlcpy("hello", 3)
    assert copied == "he"
    assert total == len("hello")
    assert strlcpy("hello", 0) == ("", 5)


def test_strlcat_fits_and_truncates():
    assert strlcat("bla", "hello", 20) == ("blahello", 8)
    joined, total = strlcat("bla", "hello", 6)
    assert joined == "blahe"
    assert total == len("bla") + len("hello")


def test_strlcat_full_buffer_leaves_dst():
    joined, total = strlcat("blabla", "hello", 3)
    assert joined == "blabla"
    assert total == 3 + len("hello")