# pocket-tools

pocket-tools is a small console toolbox. It has these helpers:

- **Morse code generator** (`pocket_tools.morse`): turns lowercase letters into Morse code. The codes are joined with no separators. Every other character is dropped, including capitals, digits and spaces.
- **Calculator** (`pocket_tools.calculator`): works on whole numbers.
  - It adds a list of numbers.
  - It subtracts, multiplies and divides two numbers. Division truncates toward zero.
  - It squares a number and takes its square root.
- **Converters**:
  - number systems (`pocket_tools.numsys`): binary ↔ decimal, octal ↔ decimal and binary → octal
  - temperature (`pocket_tools.temperature`): Celsius ↔ Fahrenheit
  - data units (`pocket_tools.data_units`): bits, bytes, kilobytes and so on up to yottabytes, in steps of 1024

## Installation

```
pip install .
```

## Interactive use

```
pocket-tools
```

You can also run `python -m pocket_tools.menus`.

A numbered menu appears. Type the number of the tool you want and follow the prompts. After each action you are asked whether to continue. Answer `Y` or `y` to stay in the current menu. Any other answer leaves it.

Input is read as whitespace-separated tokens, so one line can hold several answers. The command exits with status 0 when input ends. If a number cannot be read, it prints an error to standard error and exits with status 1. The screen is cleared between steps only when output goes to a terminal.

Each menu is also available as a function in `pocket_tools.menus`:

- `tools_menu`
- `calculator_menu`
- `converter_menu`
- `number_system_menu`
- `temperature_menu`
- `data_unit_menu`
- `morse_menu`

Each one takes optional `inp` and `out` text streams, which default to standard input and output. Each one raises `EOFError` when input runs out and `ValueError` on a malformed number.

```python
import io
from pocket_tools.menus import temperature_menu

out = io.StringIO()
temperature_menu(io.StringIO("1 100 n\n"), out)
# out.getvalue() contains "Temperature in degree Fahrenheit: 212 F"
```

## Library use

```python
from pocket_tools import numsys, morse, calculator, temperature, data_units

numsys.bin_to_dec(1011)          # 11
numsys.dec_to_bin(11)            # 1011
numsys.oct_to_dec(17)            # 15
numsys.dec_to_oct(15)            # 17
numsys.bin_to_oct(1011)          # 13

morse.encode("sos")              # "...---..."

calculator.add([1, 2, 3])        # 6
calculator.subtract(5, 8)        # -3
calculator.multiply(4, 6)        # 24
calculator.divide(7, 2)          # 3
calculator.square(9)             # 81
calculator.square_root(16)       # 4.0

temperature.celsius_to_fahrenheit(100)   # 212.0
temperature.fahrenheit_to_celsius(32)    # 0.0

data_units.convert(data_units.DataConversion.BITS_TO_BYTES, 16)  # 2.0
data_units.convert(1, 2048)                                      # 2.0 (bytes to kilobytes)
```

Notes on edge cases:

- `calculator.divide` raises `ZeroDivisionError` when the divisor is zero.
- `calculator.square_root` returns NaN for a negative number.
- `data_units.convert` accepts a `DataConversion` member or its menu number, from 0 to 10. It raises `ValueError` for any other number.
- Each `DataConversion` member has four properties:
  - `factor`
  - `label`
  - `source_unit`
  - `target_unit`

The number-system helpers take and return ordinary integers whose decimal digits are read as digits in the other base. For example, the binary number 1011 is passed as the integer `1011`. Digits are not checked against the base: each one is just weighted by it. A negative input gives a negated result.

## What it does not do

- It has no Morse decoder.
- It does not convert decimal to or from hexadecimal.
- It does not convert octal to binary.
- It does not convert data units downward, from a larger unit to a smaller one.

## Running the tests

```
pip install .[test]
pytest
```