import pytest

from packkit.title import title


@pytest.mark.parametrize(
    ("s", "expected"),
    [
        ("hello", "Hello"),
        ("hello world", "Hello World"),
    ],
)
def test_title_source_cases(s, expected):
    assert title(s) == expected


def test_title_lowers_rest_of_word():
    assert title("HELLO wORLD") == "Hello World"


def test_title_keeps_apostrophe_words_together():
    assert title("don't stop") == "Don't Stop"


def test_title_empty():
    assert title("") == ""


def test_title_preserves_separators():
    assert title("a-b  c") == "A-B  C"