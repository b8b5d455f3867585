import pytest

from packkit.funcs import file_contents, to_string_list


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (["dc1", "dc2", "dc3", "dc4"], '["dc1", "dc2", "dc3", "dc4"]'),
        (["dc1"], '["dc1"]'),
        ([], "[]"),
    ],
)
def test_to_string_list_source_cases(value, expected):
    assert to_string_list(value) == expected


def test_to_string_list_tuple():
    assert to_string_list(("dc1", "dc2")) == '["dc1", "dc2"]'


def test_to_string_list_scalar_is_wrapped():
    assert to_string_list("dc1") == '["dc1"]'


def test_to_string_list_escapes_quotes_and_newlines():
    assert to_string_list(['a"b', "c\nd"]) == '["a\\"b", "c\\nd"]'


def test_to_string_list_keeps_printable_unicode():
    assert to_string_list(["zürich"]) == '["zürich"]'


def test_to_string_list_escapes_control_characters():
    assert to_string_list(["\x01"]) == '["\\x01"]'


def test_file_contents_round_trip(tmp_path):
    path = tmp_path / "content.txt"
    path.write_text("line one\nline two\n", encoding="utf-8")
    assert file_contents(str(path)) == "line one\nline two\n"


def test_file_contents_missing(tmp_path):
    missing = str(tmp_path / "missing.txt")
    with pytest.raises(OSError, match="failed to read"):
        file_contents(missing)