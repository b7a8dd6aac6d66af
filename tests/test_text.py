import pytest

from shellds.text import (
    append,
    bounded_concat,
    bounded_copy,
    duplicate,
    join,
    length,
    map_chars,
    split,
    substring,
    trim,
)


def test_length_of_text_and_none():
    assert length("minishell") == len("minishell")
    assert length("") == 0
    assert length(None) == 0


def test_duplicate_is_equal_copy():
    assert duplicate("abc") == "abc"
    assert duplicate(None) == ""


def test_append_concatenates():
    assert append("key", "=") == "key="
    assert append(None, "x") == "x"
    assert append("x", None) == "x"


def test_append_both_missing_stays_missing():
    assert append(None, None) is None


def test_join_requires_both():
    assert join("ab", "cd") == "abcd"
    assert join(None, "cd") is None
    assert join("ab", None) is None


def test_split_drops_empty_words():
    assert split("Hello    W  W W W W WW W ", " ") == [
        "Hello", "W", "W", "W", "W", "W", "WW", "W",
    ]


def test_split_only_separators_gives_empty_list():
    assert split("    ", " ") == []
    assert split("", " ") == []


def test_split_none_and_round_trip():
    assert split(None, ":") is None
    words = split("/usr/bin:/bin", ":")
    assert ":".join(words) == "/usr/bin:/bin"


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@pytest.mark.parametrize("src", ["", "a", "hello world"])
@pytest.mark.parametrize("size", [0, 1, 3, 50])
def test_bounded_copy_invariants(src, size):
    copied, total = bounded_copy(src, size)
    assert total == len(src)
    assert src.startswith(copied)
    assert len(copied) <= max(size - 1, 0)
    if size > len(src):
        assert copied == src


def test_bounded_copy_negative_size():
    with pytest.raises(ValueError):
        bounded_copy("abc", -1)


def test_bounded_concat_fits():
    result, total = bounded_concat("foo", "bar", 10)
    assert result == "foobar"
    assert total == 6


def test_bounded_concat_truncates():
    result, total = bounded_concat("foo", "barbaz", 6)
    assert result == "fooba"
    assert total == len("foo") + len("barbaz")


def test_bounded_concat_full_destination_unchanged():
    result, total = bounded_concat("abcdef", "xyz", 3)
    assert result == "abcdef"
    assert total == 3 + len("xyz")


def test_map_chars_uses_index():
    assert map_chars("abc", lambda i, c: c if i % 2 else c.upper()) == "AbC"


def test_map_chars_missing_arguments():
    assert map_chars(None, lambda i, c: c) is None
    assert map_chars("abc", None) is None


def test_map_chars_rejects_bad_result():
    with pytest.raises(ValueError):
        map_chars("ab", lambda i, c: c * 2)


def test_trim_both_ends():
    assert trim("  \tvalue \n", " \t\n") == "value"
    assert trim("xxabcxx", "x") == "abc"


def test_trim_everything():
    assert trim("aaaaaaaaaa", "a") == ""


def test_trim_missing_and_empty_set():
    assert trim(None, "a") is None
    assert trim("abc", None) is None
    assert trim(" abc ", "") == " abc "


def test_substring_ranges():
    assert substring("hello", 1, 3) == "ell"
    assert substring("hello", 2, 100) == "llo"
    assert substring("hello", 5, 2) == ""
    assert substring("hello", 6, 2) == ""
    assert substring(None, 0, 3) == ""


def test_substring_negative_arguments():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)
    with pytest.raises(ValueError):
        substring("hello", 0, -2)