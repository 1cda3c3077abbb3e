import pytest

from corekit.find_and_replace import find_and_replace


@pytest.mark.parametrize(
    "text, find, replace, expected",
    [
        ("", "foo", "bar", ""),
        ("foo", "", "bar", "foo"),
        ("foo", "foo", "", ""),
        ("foo", "foo", "bar", "bar"),
        ("foo", "bar", "baz", "foo"),
        ("foobarfoobar", "foo", "baz", "bazbarbazbar"),
        ("foofoobar", "foo", "baz", "bazbazbar"),
        ("foobar", "foo", "foo", "foobar"),
        ("foobar", "foo", "barfoo", "barfoobar"),
        ("foobar", "foobar", "bar", "bar"),
    ],
)
def test_find_and_replace(text, find, replace, expected):
    assert find_and_replace(text, find, replace) == expected


def test_find_and_replace_wide_text():
    assert find_and_replace("foobar", "foo", "bar") == "barbar"


def test_find_and_replace_bytes():
    assert find_and_replace(b"foobar", b"foo", b"bar") == b"barbar"


def test_input_is_not_modified():
    original = "foofoo"
    result = find_and_replace(original, "foo", "bar")
    assert original == "foofoo"
    assert result == "barbar"