import pytest

from shellds.search import (
    compare_bytes,
    compare_prefix,
    contains,
    ends_with,
    find_byte,
    find_char,
    find_last_char,
    find_substring,
    find_within,
)


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("abcabc", "c"), ("x=y", "=")])
def test_find_char_first_occurrence(text, ch):
    index = find_char(text, ch)
    assert text[index] == ch
    assert ch not in text[:index]


def test_find_char_accepts_code():
    assert find_char("hello", ord("e")) == find_char("hello", "e")


def test_find_char_missing():
    assert find_char("hello", "z") is None


def test_find_char_nul_gives_length():
    assert find_char("hello", "\0") == len("hello")
    assert find_char("", 0) == 0


def test_find_char_rejects_long_string():
    with pytest.raises(ValueError):
        find_char("hello", "he")


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("abcabc", "a"), ("a=b=c", "=")])
def test_find_last_char(text, ch):
    index = find_last_char(text, ch)
    assert text[index] == ch
    assert ch not in text[index + 1:]


def test_find_last_char_missing_and_nul():
    assert find_last_char("hello", "q") is None
    assert find_last_char("hello", 0) == len("hello")


def test_compare_prefix_zero_count():
    assert compare_prefix("abc", "xyz", 0) == 0


def test_compare_prefix_equal_prefix():
    assert compare_prefix("abcdef", "abcxyz", 3) == 0


def test_compare_prefix_sign():
    assert compare_prefix("abc", "abd", 3) < 0
    assert compare_prefix("abd", "abc", 3) > 0


def test_compare_prefix_shorter_string_counts_as_nul():
    assert compare_prefix("abc", "ab", 5) == ord("c")
    assert compare_prefix("ab", "abc", 5) == -ord("c")


def test_compare_prefix_equal_strings_long_count():
    assert compare_prefix("same", "same", 100) == 0


def test_compare_prefix_antisymmetric():
    assert compare_prefix("PATH", "PWD", 4) == -compare_prefix("PWD", "PATH", 4)


def test_compare_prefix_negative_count():
    with pytest.raises(ValueError):
        compare_prefix("a", "b", -1)


def test_find_within_empty_needle():
    assert find_within("anything", "", 0) == 0


def test_find_within_respects_length():
    haystack = "foo bar baz"
    index = find_within(haystack, "bar", len(haystack))
    assert haystack[index:index + 3] == "bar"
    assert find_within(haystack, "bar", index + 2) is None
    assert find_within(haystack, "bar", index + 3) == index


def test_find_within_length_beyond_text():
    assert find_within("abc", "abcd", 10) is None


def test_find_within_negative_length():
    with pytest.raises(ValueError):
        find_within("abc", "a", -3)


@pytest.mark.parametrize(
    "haystack,needle",
    [("hello world", "world"), ("aaab", "ab"), ("key=value", "=")],
)
def test_find_substring(haystack, needle):
    index = find_substring(haystack, needle)
    assert haystack.startswith(needle, index)
    assert needle not in haystack[:index + len(needle) - 1]


def test_find_substring_missing():
    assert find_substring("hello", "xyz") is None


def test_contains():
    assert contains("minishell", "shell") is True
    assert contains("minishell", "bash") is False
    assert contains("minishell", "") is True


def test_ends_with():
    assert ends_with("script.sh", ".sh") is True
    assert ends_with("script.sh", ".py") is False
    assert ends_with("abc", "") is True
    assert ends_with("sh", "script.sh") is False


def test_find_byte():
    data = b"abc\x00def"
    assert find_byte(data, 0, len(data)) == data.index(b"\x00")
    assert find_byte(data, ord("e"), 3) is None


def test_find_byte_value_wraps():
    data = bytes([1, 2, 255])
    assert find_byte(data, -1, len(data)) == 2
    assert find_byte(data, 256 + 2, len(data)) == 1


def test_find_byte_count_too_large():
    with pytest.raises(ValueError):
        find_byte(b"ab", ord("a"), 5)


def test_compare_bytes():
    assert compare_bytes(b"abc", b"xyz", 0) == 0
    assert compare_bytes(b"abcd", b"abcz", 3) == 0
    assert compare_bytes(b"abcd", b"abcz", 4) == ord("d") - ord("z")
    assert compare_bytes(bytes([200]), bytes([10]), 1) > 0


def test_compare_bytes_count_too_large():
    with pytest.raises(ValueError):
        compare_bytes(b"ab", b"abc", 3)