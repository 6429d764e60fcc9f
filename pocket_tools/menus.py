"""Interactive text menus for the calculator, the converters and the Morse encoder."""

import argparse
import re
import sys
from collections.abc import Callable

from pocket_tools import calculator, numsys
from pocket_tools.data_units import DataConversion, convert
from pocket_tools.morse import encode
from pocket_tools.temperature import celsius_to_fahrenheit, fahrenheit_to_celsius

__all__ = [
    "calculator_menu",
    "number_system_menu",
    "temperature_menu",
    "data_unit_menu",
    "converter_menu",
    "morse_menu",
    "tools_menu",
    "main",
]

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _num(value: float) -> str:
    """Format a floating-point value the way a default stream would."""
    return f"{value:g}"


class _Console:
    """Whitespace-separated reading from one stream, writing to another."""

    def __init__(self, inp, out):
        self._inp = sys.stdin if inp is None else inp
        self._out = sys.stdout if out is None else out
        self._line = ""
        self._pos = 0

    def write(self, text: str) -> None:
        self._out.write(text)

    def clear(self) -> None:
        isatty = getattr(self._out, "isatty", None)
        if isatty is not None and isatty():
            self._out.write("\033[2J\033[H")

    def _skip_space(self) -> None:
        while True:
            while self._pos < len(self._line) and self._line[self._pos].isspace():
                self._pos += 1
            if self._pos < len(self._line):
                return
            self._out.flush()
            self._line = self._inp.readline()
            self._pos = 0
            if not self._line:
                raise EOFError("input ended")

    def _scan(self, pattern: re.Pattern, kind: str) -> str:
        self._skip_space()
        match = pattern.match(self._line, self._pos)
        if match is None:
            found = self._line[self._pos:].strip()
            raise ValueError(f"expected {kind}, got {found!r}")
        self._pos = match.end()
        return match.group()

    def read_int(self) -> int:
        return int(self._scan(_INT, "an integer"))

    def read_float(self) -> float:
        return float(self._scan(_FLOAT, "a number"))

    def read_char(self) -> str:
        self._skip_space()
        ch = self._line[self._pos]
        self._pos += 1
        return ch

    def read_line(self) -> str:
        self._skip_space()
        rest = self._line[self._pos:].rstrip("\r\n")
        self._pos = len(self._line)
        return rest

    def ask_again(self, prompt: str, rule: str) -> bool:
        self.write(prompt)
        answer = self.read_char()
        self.write(rule)
        return answer in "Yy"


# Calculator

def _add(con: _Console) -> None:
    con.clear()
    con.write("How many numbers you want to add: ")
    count = con.read_int()
    con.write("Please enter the number one by one: \n")
    total = calculator.add(con.read_int() for _ in range(count))
    con.write(f"\n Sum of the numbers = {total}\n\n")


def _read_pair(con: _Console) -> tuple[int, int]:
    con.write(" \n Enter the First number = ")
    first = con.read_int()
    con.write("\n Enter the Second number = ")
    second = con.read_int()
    return first, second


def _subtract(con: _Console) -> None:
    con.clear()
    a, b = _read_pair(con)
    con.write(f"\n Subtraction of the number = {calculator.subtract(a, b)}\n\n")


def _multiply(con: _Console) -> None:
    con.clear()
    a, b = _read_pair(con)
    con.write(f"\n Multiplication of two numbers = {calculator.multiply(a, b)}\n\n")


def _divide(con: _Console) -> None:
    con.clear()
    a, b = _read_pair(con)
    while b == 0:
        con.write("\n Divisor canot be zero\n Please enter the divisor once again: ")
        b = con.read_int()
    con.write(f"\n Division of two numbers = {calculator.divide(a, b)}\n\n")


def _square(con: _Console) -> None:
    con.clear()
    con.write(" \n Enter a number to find the Square: ")
    n = con.read_int()
    con.write(f" \n Square of {n} is : {_num(float(calculator.square(n)))}\n\n")


def _square_root(con: _Console) -> None:
    con.clear()
    con.write("\n Enter the number to find the Square Root:")
    n = con.read_int()
    con.write(f" \n Square Root of {n} is : {_num(calculator.square_root(n))}\n\n")


_CALCULATOR_ACTIONS: dict[int, Callable[[_Console], None]] = {
    1: _add,
    2: _subtract,
    3: _multiply,
    4: _divide,
    5: _square,
    6: _square_root,
}

_CALCULATOR_TEXT = (
    "Select any operation from the Calculator"
    "\n1 = Addition"
    "\n2 = Subtraction"
    "\n3 = Multiplication"
    "\n4 = Division"
    "\n5 = Square"
    "\n6 = Square Root"
    "\n7 = Exit"
    "\n \nMake a choice: "
)


def _calculator(con: _Console) -> None:
    con.clear()
    while True:
        con.write(_CALCULATOR_TEXT)
        choice = con.read_int()
        action = _CALCULATOR_ACTIONS.get(choice)
        if action is not None:
            action(con)
        elif choice == 7:
            con.write("Thank You\n\n")
        else:
            con.write("Something is wrong..!!\n\n")
        if not con.ask_again(
            "\n Do you want to Continue Calculator? Y/N :: ",
            " ------------------------------------------\n",
        ):
            break
    con.write("Thank You.\n\n")


# Number systems

_NUMBER_SYSTEM_ACTIONS: dict[int, tuple[str, str, Callable[[int], int]]] = {
    1: ("binary", "decimal", numsys.bin_to_dec),
    2: ("decimal", "binary", numsys.dec_to_bin),
    3: ("octal", "decimal", numsys.oct_to_dec),
    4: ("decimal", "octal", numsys.dec_to_oct),
    5: ("binary", "octal", numsys.bin_to_oct),
}

_NUMBER_SYSTEM_TEXT = (
    "Select the Conversion Type: \n"
    "1. Binary to Decimal"
    "\n2. Decimal to Binary"
    "\n3. Octal to Decimal"
    "\n4. Decimal to Octal"
    "\n5. Binary to Octal"
    "\n6. Exit"
    "\n \nMake a Choice: "
)


def _number_system(con: _Console) -> None:
    con.clear()
    while True:
        con.write(_NUMBER_SYSTEM_TEXT)
        choice = con.read_int()
        action = _NUMBER_SYSTEM_ACTIONS.get(choice)
        if action is not None:
            source, target, func = action
            con.clear()
            con.write(f"Enter a {source} number: \n")
            n = con.read_int()
            con.write(f"{n} in {source} = {func(n)} in {target}\n\n")
        elif choice == 6:
            con.write("Thank You\n\n")
        else:
            con.write("Invalid choice!!! Select between 1 to 6\n\n")
        if not con.ask_again(
            "\n Do you want to Continue Number System Converter? Y/N :: ",
            " -----------------------------\n",
        ):
            break
    con.write("Thank You.\n\n")


# Temperature

def _celsius_to_fahrenheit(con: _Console) -> None:
    con.clear()
    con.write("Enter the temperature in Celsius: ")
    celsius = con.read_float()
    fahrenheit = celsius_to_fahrenheit(celsius)
    con.write(f"\nTemperature in degree Fahrenheit: {_num(fahrenheit)} F\n\n")


def _fahrenheit_to_celsius(con: _Console) -> None:
    con.clear()
    con.write("Enter the temperature in Fahrenheit: ")
    fahrenheit = con.read_float()
    celsius = fahrenheit_to_celsius(fahrenheit)
    con.write(f"\nTemperature in degree Celsius: {_num(celsius)} C\n\n")


_TEMPERATURE_TEXT = (
    "Choose from following option:\n"
    "1. Celsius to Fahrenheit."
    "\n2. Fahrenheit to Celsius."
    "\n3. Exit."
    "\n \nMake a choice: "
)


def _temperature(con: _Console) -> None:
    con.clear()
    while True:
        con.write(_TEMPERATURE_TEXT)
        choice = con.read_int()
        if choice == 1:
            _celsius_to_fahrenheit(con)
        elif choice == 2:
            _fahrenheit_to_celsius(con)
        elif choice == 3:
            con.write("Thank You\n\n")
        else:
            con.write("Choose the Option between 1 to 3\n\n")
        if not con.ask_again(
            "\n Do you want to continue Temperature Unit Converter? Y/N :: ",
            " ---------------------------------------------------------------\n\n",
        ):
            break


# Data units

_DATA_EXIT = len(DataConversion)

_DATA_TEXT = (
    "Choose Choose the Operation\n"
    + "\n".join(f"{conv.value}. {conv.label}" for conv in DataConversion)
    + f"\n{_DATA_EXIT}. Exit"
    + "\n\nChoose Unit Conversion: "
)


def _data_unit(con: _Console) -> None:
    con.clear()
    while True:
        con.write(_DATA_TEXT)
        choice = con.read_int()
        con.write("\n")
        try:
            conversion = DataConversion(choice)
        except ValueError:
            conversion = None
        if conversion is not None:
            con.clear()
            con.write(f"Enter {conversion.source_unit} to be converted: ")
            value = con.read_float()
            con.write("\n")
            result = convert(conversion, value)
            con.write(
                f"{_num(value)} {conversion.source_unit} = "
                f"{_num(result)} {conversion.target_unit}\n\n"
            )
        elif choice == _DATA_EXIT:
            con.write("Thank You\n\n")
        else:
            con.write(f"Choose the Option between 1 to {_DATA_EXIT}\n\n")
        if not con.ask_again(
            "\n Do you want to Continue Data Unit Converter? Y/N :: ",
            " ---------------------------------------------------\n",
        ):
            break
    con.write("Thank You.\n\n")


# Converter

_CONVERTER_ACTIONS: dict[int, Callable[[_Console], None]] = {
    1: _number_system,
    2: _temperature,
    3: _data_unit,
}

_CONVERTER_TEXT = (
    "Select the converter: \n"
    "1. Number System Converter"
    "\n2. Temperature Unit Converter"
    "\n3. Data Unit Converter"
    "\n4. Exit"
    "\n \nMake a Choice: "
)


def _converter(con: _Console) -> None:
    con.clear()
    while True:
        con.write(_CONVERTER_TEXT)
        choice = con.read_int()
        action = _CONVERTER_ACTIONS.get(choice)
        if action is not None:
            action(con)
        elif choice == 4:
            con.write("Thank You\n\n")
        else:
            con.write("Invalid choice!!! Select between 1 to 4\n\n")
        if not con.ask_again(
            "\n Do you want to continue Converter? Y/N :: ",
            " -----------------------------\n",
        ):
            break
    con.write("Thank You.\n\n")


# Morse code

def _morse(con: _Console) -> None:
    con.clear()
    con.write("Input a message to translate into Morse code: ")
    message = con.read_line()
    con.write(f"Result: {encode(message)}\n\n")


# Tools

_TOOLS_ACTIONS: dict[int, Callable[[_Console], None]] = {
    1: _morse,
    2: _calculator,
    3: _converter,
}

_TOOLS_TEXT = (
    "Please Enter your choose Tool\n"
    "1. Moarse Code Generator"
    "\n2. Calculator"
    "\n3. Converter"
    "\n4. Exit"
    "\n \nMake a Choice: "
)


def _tools(con: _Console) -> None:
    con.clear()
    while True:
        con.write(_TOOLS_TEXT)
        choice = con.read_int()
        action = _TOOLS_ACTIONS.get(choice)
        if action is not None:
            action(con)
        elif choice == 4:
            con.write("Thank You\n\n")
        else:
            con.write("Choose the Option between 1 to 4\n\n")
        con.write("       *****************************************")
        again = con.ask_again(
            "\n\tDo you want to continue Tools? Y/N :: ",
            "\t -------------------------------------\n\t\t\tThank you\t\t\n\n",
        )
        if not again:
            break


def calculator_menu(inp=None, out=None) -> None:
    """Run the calculator menu, reading from ``inp`` and writing to ``out``.

    Raises EOFError when input runs out and ValueError on a malformed number.
    """
    _calculator(_Console(inp, out))


def number_system_menu(inp=None, out=None) -> None:
    """Run the binary/octal/decimal conversion menu."""
    _number_system(_Console(inp, out))


def temperature_menu(inp=None, out=None) -> None:
    """Run the Celsius/Fahrenheit conversion menu."""
    _temperature(_Console(inp, out))


def data_unit_menu(inp=None, out=None) -> None:
    """Run the data unit conversion menu."""
    _data_unit(_Console(inp, out))


def converter_menu(inp=None, out=None) -> None:
    """Run the menu that chooses among the converters."""
    _converter(_Console(inp, out))


def morse_menu(inp=None, out=None) -> None:
    """Read one message and write its Morse code."""
    _morse(_Console(inp, out))


def tools_menu(inp=None, out=None) -> None:
    """Run the top-level menu of all tools."""
    _tools(_Console(inp, out))


def main(argv=None) -> int:
    """Start the tools menu on standard input and output; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="pocket-tools",
        description="Calculator, number system, temperature and data unit converters, "
        "and a Morse code encoder.",
    )
    parser.parse_args(argv)
    try:
        tools_menu(sys.stdin, sys.stdout)
    except EOFError:
        return 0
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())