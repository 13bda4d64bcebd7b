"""Unit tests for the fixed-width text rendering."""
import math

import pytest

from dataframes import DataFrame


@pytest.mark.unit
def test_print_day_temperature_layout(day_temperature):
    expected = (
        "day temperature \n"
        "---------------\n"
        "  0          11 \n"
        "  1          12 \n"
        "  2          13 \n"
        "  3          14 \n"
        "  4          15 \n"
        "  5          16 \n"
    )
    assert day_temperature.print() == expected


@pytest.mark.unit
def test_print_separator_is_one_shorter_than_header(weather):
    header, separator = weather.print().split("\n")[:2]
    assert len(separator) == len(header) - 1
    assert set(separator) == {"-"}


@pytest.mark.unit
def test_print_weather_with_float_precision(weather):
    lines = weather.print().split("\n")
    assert lines[0] == "day temperature  rain "
    assert lines[1] == "-" * 21
    assert lines[2] == "  0          13    20 "
    assert lines[3] == "  1          16  4.50 "
    assert lines[6] == "  4          11 34.50 "
    assert lines[-1] == ""


@pytest.mark.unit
def test_print_precision_argument(weather):
    lines = weather.print(float_precision=1).split("\n")
    assert lines[0] == "day temperature rain "
    assert lines[3] == "  1          16  4.5 "


@pytest.mark.unit
def test_print_wide_values_push_header_right():
    df = DataFrame([["a long value", 1]], ["n", "x"])
    assert df.print() == (
        "           n x \n"
        "--------------\n"
        "a long value 1 \n"
    )


@pytest.mark.unit
def test_print_missing_and_text_cells():
    df = DataFrame([[1, math.nan, "yes"]], ["a", "b", "c"])
    assert df.print() == (
        "a   b   c \n"
        "---------\n"
        "1 NaN yes \n"
    )


@pytest.mark.unit
def test_print_empty_table():
    assert DataFrame([], ["a", "bb"]).print() == "a bb \n----\n"


@pytest.mark.unit
def test_str_is_the_printed_table(weather):
    assert str(weather) == weather.print()
