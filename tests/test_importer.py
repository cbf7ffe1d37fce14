import pytest

from statlab.errors import InvalidValueError, NoNumbersFoundError, UnsupportedFileError
from statlab.importer import load_file, parse_entry, parse_numbers


def test_parse_numbers_lines_and_commas() -> None:
    text = "10, 15, 20\n25\n\n30, 35\n"
    assert parse_numbers(text) == [10, 15, 20, 25, 30, 35]


def test_parse_numbers_discards_junk_and_out_of_range() -> None:
    text = "abc, 12kg, -3.5; 1e2\n2000, -1001, 1e999, .5"
    assert parse_numbers(text) == [12, -3.5, 100, 0.5]


def test_parse_numbers_custom_bounds() -> None:
    assert parse_numbers("1 5 9", low=2, high=8) == [5]


def test_load_file(tmp_path) -> None:
    path = tmp_path / "data.csv"
    path.write_text("1,2,3\n4\n")
    assert load_file(path) == [1, 2, 3, 4]


def test_load_file_without_numbers(tmp_path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("nothing here\n")
    with pytest.raises(NoNumbersFoundError):
        load_file(path)


def test_load_file_rejects_other_formats(tmp_path) -> None:
    path = tmp_path / "data.xlsx"
    path.write_text("1")
    with pytest.raises(UnsupportedFileError):
        load_file(path)


def test_parse_entry() -> None:
    assert parse_entry("42") == 42
    assert parse_entry(" -7.25 ") == -7.25
    with pytest.raises(InvalidValueError, match="valid number"):
        parse_entry("forty")
    with pytest.raises(InvalidValueError, match="between -1000 and 1000"):
        parse_entry("1500")
