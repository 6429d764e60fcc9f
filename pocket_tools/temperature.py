"""Celsius and Fahrenheit conversions."""

__all__ = ["celsius_to_fahrenheit", "fahrenheit_to_celsius"]


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return 1.8 * celsius + 32.0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert degrees Fahrenheit to degrees Celsius."""
    return (fahrenheit - 32) / 1.8