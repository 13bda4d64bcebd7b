import pytest

from dataframes import DataFrame

WEATHER_NAMES = ["day", "temperature", "rain"]


def weather_rows():
    return [
        [0, 13, 20.0],
        [1, 16, 4.5],
        [2, 12, 7.0],
        [3, 12, 0.0],
        [4, 11, 34.5],
        [5, 16, 0.0],
    ]


@pytest.fixture
def weather():
    return DataFrame(weather_rows(), list(WEATHER_NAMES))


@pytest.fixture
def day_temperature():
    return DataFrame([[day, temp] for day, temp in zip(range(6), range(11, 17))], ["day", "temperature"])
