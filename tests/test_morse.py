import string

import pytest

from pocket_tools.morse import encode


@pytest.mark.parametrize(
    "letter, code",
    [("a", ".-"), ("b", "-..."), ("e", "."), ("o", "---"), ("s", "..."), ("t", "-"), ("z", "--..")],
)
def test_single_letters(letter, code):
    assert encode(letter) == code


def test_empty_text():
    assert encode("") == ""


def test_non_lowercase_characters_are_dropped():
    assert encode("ABC XYZ 123 !?") == ""


def test_mixed_text_keeps_only_lowercase():
    assert encode("S o S!") == encode("o")


@pytest.mark.parametrize("left, right", [("sos", "help"), ("abc", "xyz"), ("hello", "world")])
def test_concatenation(left, right):
    assert encode(left + right) == encode(left) + encode(right)


def test_every_letter_has_a_nonempty_code():
    for letter in string.ascii_lowercase:
        code = encode(letter)
        assert code
        assert set(code) <= {".", "-"}


def test_whole_alphabet_is_sum_of_letters():
    assert encode(string.ascii_lowercase) == "".join(encode(c) for c in string.ascii_lowercase)