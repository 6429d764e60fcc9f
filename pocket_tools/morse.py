"""Translate lower-case text into Morse code."""

import string

__all__ = ["encode"]

_CODES = (
    ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..", ".---",
    "-.--", ".-..", "--", "-.", "---", ".--.", "--.-", ".-.", "...", "-",
    "..-", "...-", ".--", "-..-", "-.--", "--..",
)

_TABLE = dict(zip(string.ascii_lowercase, _CODES))


def encode(text: str) -> str:
    """Return the Morse code for the lower-case letters in ``text``.

    Codes are joined without separators; every other character is dropped.
    """
    return "".join(_TABLE.get(ch, "") for ch in text)