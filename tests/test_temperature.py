import pytest

from pocket_tools.temperature import celsius_to_fahrenheit, fahrenheit_to_celsius


def test_freezing_point():
    assert celsius_to_fahrenheit(0) == 32.0
    assert fahrenheit_to_celsius(32) == 0


def test_minus_forty_is_fixed_point():
    assert celsius_to_fahrenheit(-40) == pytest.approx(-40)
    assert fahrenheit_to_celsius(-40) == pytest.approx(-40)


@pytest.mark.parametrize("celsius", [-273.15, -10.5, 0.0, 37.0, 100.0, 1234.5])
def test_round_trip_from_celsius(celsius):
    assert fahrenheit_to_celsius(celsius_to_fahrenheit(celsius)) == pytest.approx(celsius)


@pytest.mark.parametrize("fahrenheit", [-459.67, 0.0, 98.6, 212.0, 451.0])
def test_round_trip_from_fahrenheit(fahrenheit):
    assert celsius_to_fahrenheit(fahrenheit_to_celsius(fahrenheit)) == pytest.approx(fahrenheit)


def test_conversion_is_increasing():
    values = [-50, -1, 0, 1, 50, 500]
    fahr = [celsius_to_fahrenheit(v) for v in values]
    cels = [fahrenheit_to_celsius(v) for v in values]
    assert fahr == sorted(fahr)
    assert cels == sorted(cels)