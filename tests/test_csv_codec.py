"""Unit tests for the CRLF CSV codec."""
import math

import pytest

from dataframes.utils.csv_codec import parse_csv, suggested_filename, to_csv

SALARIES = "name,age,income\r\nJohn,24,50000\r\nJenna,30,56000\r\nJill,24,30000\r\n"


# === PARSING ===


@pytest.mark.unit
def test_parse_csv_header_and_coerced_rows():
    names, rows = parse_csv(SALARIES)
    assert names == ["name", "age", "income"]
    assert rows == [
        ["John", 24.0, 50000.0],
        ["Jenna", 30.0, 56000.0],
        ["Jill", 24.0, 30000.0],
    ]


@pytest.mark.unit
def test_parse_csv_header_is_not_coerced():
    names, _ = parse_csv("1,2.5\r\n3,4\r\n")
    assert names == ["1", "2.5"]


@pytest.mark.unit
def test_parse_csv_custom_delimiter_and_decimal():
    names, rows = parse_csv("a;b\r\n1,5;x\r\n", delimiter=";", decimal=",")
    assert names == ["a", "b"]
    assert rows == [[1.5, "x"]]


@pytest.mark.unit
def test_parse_csv_skips_only_exactly_empty_lines():
    _, rows = parse_csv("a\r\n1\r\n\r\n \r\n2\r\n")
    assert rows == [[1.0], [" "], [2.0]]


@pytest.mark.unit
def test_parse_csv_without_crlf_is_a_single_header_line():
    names, rows = parse_csv("a,b\n1,2\n")
    assert names == ["a", "b\n1", "2\n"]
    assert rows == []


@pytest.mark.unit
def test_parse_csv_header_only():
    names, rows = parse_csv("a,b")
    assert names == ["a", "b"]
    assert rows == []


# === SERIALIZATION ===


@pytest.mark.unit
def test_to_csv_trailing_delimiter_on_every_row():
    text = to_csv(["day", "rain"], [[0, 20.0], [1, 4.5]])
    assert text == "day,rain\r\n0,20,\r\n1,4.5,\r\n"


@pytest.mark.unit
def test_to_csv_localized_decimal_and_delimiter():
    text = to_csv(["day", "rain"], [[1, 4.5], [2, "n.a."]], delimiter=";", decimal=",")
    assert text == "day;rain\r\n1;4,5;\r\n2;n.a.;\r\n"


@pytest.mark.unit
def test_to_csv_numeric_strings_are_localized_too():
    text = to_csv(["v"], [["1.5"]], delimiter=";", decimal=",")
    assert text == "v\r\n1,5;\r\n"


@pytest.mark.unit
def test_to_csv_comma_in_column_name_becomes_delimiter():
    text = to_csv(["a,b", "c"], [], delimiter=";")
    assert text == "a;b;c\r\n"


@pytest.mark.unit
def test_to_csv_missing_values():
    text = to_csv(["x"], [[math.nan]])
    assert text == "x\r\nNaN,\r\n"


@pytest.mark.unit
def test_to_csv_small_numbers_use_plain_or_short_exponent_form():
    text = to_csv(["x"], [[0.00005], [1e-7]], delimiter=";", decimal=",")
    assert text == "x\r\n0,00005;\r\n1e-7;\r\n"


@pytest.mark.unit
def test_csv_round_trip_keeps_values_plus_dangling_field():
    names = ["name", "age", "income"]
    rows = [["John", 24, 50000.5], ["Jill", 31, 0.25]]
    parsed_names, parsed_rows = parse_csv(to_csv(names, rows))
    assert parsed_names == names
    # the trailing delimiter reads back as one extra empty text field
    assert [row[: len(names)] for row in parsed_rows] == rows
    assert all(row[len(names):] == [""] for row in parsed_rows)


# === SUGGESTED FILENAME ===


@pytest.mark.unit
@pytest.mark.parametrize(
    "filename, expected",
    [
        ("test.csv", "test.csv"),
        ("exports/2024/test.csv", "test.csv"),
        ("exports/", "default.csv"),
        ("", "default.csv"),
    ],
)
def test_suggested_filename(filename, expected):
    assert suggested_filename(filename) == expected
