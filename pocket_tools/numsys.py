"""Conversions between binary, octal and decimal numbers.

Binary and octal numbers are written as ordinary integers whose decimal
digits are the digits of the number, e.g. ``1010`` for binary ten.
Digits are not checked against the base: each one is simply weighted by
the base.
"""

__all__ = ["bin_to_dec", "dec_to_bin", "oct_to_dec", "dec_to_oct", "bin_to_oct"]


def _rebase(n: int, digit_base: int, weight_base: int) -> int:
    """Split ``n`` into digits in ``digit_base`` and weight them by ``weight_base``.

    The sign of ``n`` is kept, so negative inputs give negated results.
    """
    sign = -1 if n < 0 else 1
    n = abs(int(n))
    result = 0
    weight = 1
    while n:
        n, digit = divmod(n, digit_base)
        result += digit * weight
        weight *= weight_base
    return sign * result


def bin_to_dec(n: int) -> int:
    """Read the decimal digits of ``n`` as a binary number."""
    return _rebase(n, 10, 2)


def dec_to_bin(n: int) -> int:
    """Return the binary digits of ``n`` written as a decimal integer."""
    return _rebase(n, 2, 10)


def oct_to_dec(n: int) -> int:
    """Read the decimal digits of ``n`` as an octal number."""
    return _rebase(n, 10, 8)


def dec_to_oct(n: int) -> int:
    """Return the octal digits of ``n`` written as a decimal integer."""
    return _rebase(n, 8, 10)


def bin_to_oct(n: int) -> int:
    """Convert binary digits in ``n`` to octal digits, as a decimal integer."""
    return dec_to_oct(bin_to_dec(n))