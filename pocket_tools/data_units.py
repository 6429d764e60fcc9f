"""Conversions between units of digital information."""

from enum import IntEnum

__all__ = ["DataConversion", "convert"]

_STEP = 0.0009765625


class DataConversion(IntEnum):
    """The available conversions, numbered as in the menu."""

    BITS_TO_BYTES = 0
    BYTES_TO_KILOBYTES = 1
    KILOBYTES_TO_MEGABYTES = 2
    MEGABYTES_TO_GIGABYTES = 3
    GIGABYTES_TO_TERABYTES = 4
    TERABYTES_TO_PETABYTES = 5
    PETABYTES_TO_EXABYTES = 6
    EXABYTES_TO_ZETTABYTES = 7
    ZETTABYTES_TO_YOTTABYTES = 8
    BITS_TO_KILOBYTES = 9
    BITS_TO_MEGABYTES = 10

    @property
    def factor(self) -> float:
        """Multiplier from the source unit to the target unit."""
        return _DETAILS[self][3]

    @property
    def label(self) -> str:
        """Menu text for this conversion."""
        return _DETAILS[self][0]

    @property
    def source_unit(self) -> str:
        """Name of the unit converted from."""
        return _DETAILS[self][1]

    @property
    def target_unit(self) -> str:
        """Name of the unit converted to."""
        return _DETAILS[self][2]


_DETAILS = {
    DataConversion.BITS_TO_BYTES: ("Bits to Bytes", "Bits", "Bytes", 0.125),
    DataConversion.BYTES_TO_KILOBYTES: ("Bytes to Kilobytes", "Bytes", "Kilobytes", _STEP),
    DataConversion.KILOBYTES_TO_MEGABYTES: ("Kilobyte to Megabyte", "Kilobytes", "Megabytes", _STEP),
    DataConversion.MEGABYTES_TO_GIGABYTES: ("Megabyte to Gigabyte", "Megabytes", "Gigabytes", _STEP),
    DataConversion.GIGABYTES_TO_TERABYTES: ("Gigabyte to Terrabyte", "Gigabytes", "Terrabytes", _STEP),
    DataConversion.TERABYTES_TO_PETABYTES: ("Terrabyte to Petabyte", "Terrabytes", "Petabyte", _STEP),
    DataConversion.PETABYTES_TO_EXABYTES: ("Petabyte to Exabytes", "Petabytes", "Exabytes", _STEP),
    DataConversion.EXABYTES_TO_ZETTABYTES: ("Exabytes to Zettabytes", "Exabytes", "Zettabytes", _STEP),
    DataConversion.ZETTABYTES_TO_YOTTABYTES: (
        "Zettabytes to Yottabytes", "Zettabytes", "Yottabytes", _STEP,
    ),
    DataConversion.BITS_TO_KILOBYTES: ("Bits to Kilobytes", "Bits", "Kilobytes", 0.0001220703125),
    DataConversion.BITS_TO_MEGABYTES: ("Bits to Megabytes", "Bits", "Megabytes", 1.1920928955078125e-7),
}


def convert(conversion, value: float) -> float:
    """Apply ``conversion`` (a DataConversion or its menu number) to ``value``.

    Raises ValueError for an unknown menu number.
    """
    return float(value) * DataConversion(conversion).factor