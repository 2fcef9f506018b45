# ftkit

A small toolkit of string, number and output helpers, together with a
printf-style formatter that follows its own fixed rules for flags, width,
precision and length modifiers. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.convert` – numbers and their text:
  - `atoi(text)` parses a leading decimal integer (whitespace and one sign
    allowed); positive values at or past the 64-bit limit give `-1`, negative
    ones past it give `0`, other results wrap to a signed 32-bit int.
  - `is_int(text)` tells whether the leading integer fits in a signed 32-bit int.
  - `itoa(n)` gives the decimal text of a signed 64-bit integer and raises
    `OverflowError` outside that range.
  - `itoa_base(value, digits)` writes an unsigned 64-bit value with the given
    digit alphabet.
  - `litoa_base(value, base)` writes a value in base 2 to 16 using lower-case
    letters; base 10 writes values from 2**63 upward as negative numbers.
- `ftkit.mathutil` – `factorial(n)` for `0 <= n <= 12` (a `ValueError`
  otherwise), `power(nb, exponent)` (a negative exponent gives `0`),
  `exact_sqrt(n)` (the root of a perfect square, else `0`), `is_neg(n)`,
  `is_positive(n)`.
- `ftkit.chars` – ASCII character classes (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`) and C-style searches and comparisons
  (`contains_char`, `contains_substring`, `strchr`, `strcmp`, `memchr`,
  `memcmp`, `memccpy`). Text arguments end at their first NUL character.
  `strchr` and `memchr` return an index or `None`; `memccpy` returns the
  copied bytes and whether the stop byte was met.
- `ftkit.output` – `putchar`, `putstr`, `putendl`, `putnbr` write to standard
  output, and `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` to any file
  descriptor. Each returns the number of bytes written; `None` as a string
  writes nothing.
- `ftkit.spec` – `parse_spec(fmt, pos)` parses one conversion specification
  into a frozen `FormatSpec` (flags, modifiers, `dot`, `precision`, `width`,
  `conversion`, `end`); `FormatSpec.has()` tests for a `Flag` or `Modifier`;
  `pad(count, fill)` repeats a fill character. `FormatError` is raised when a
  value cannot be written.
- `ftkit.integers` – `format_int`, `format_long`, `format_unsigned`,
  `format_octal`, `format_hex`, `format_binary`, `format_pointer`: each lays
  out one value under a `FormatSpec` and returns a `str`.
- `ftkit.text` – `format_char`, `format_wchar`, `format_str`, `format_wstr`
  return `bytes`; `encode_wchar(code, mb_cur_max)` gives the multibyte form of
  a wide character and `wchar_len(code)` its UTF-8 length. `mb_cur_max`
  defaults to 4.
- `ftkit.formatter` – `sformat(fmt, *args)` returns the formatted output as
  `bytes`; `printf(fmt, *args)` writes it to standard output and returns the
  number of bytes written.

## Examples

```python
from ftkit.convert import atoi, itoa_base
from ftkit.formatter import sformat

atoi("  -42abc")                    # -42
itoa_base(255, "0123456789abcdef")  # 'ff'

sformat("%5d|%-5s|%#x", 42, "ab", 255)
# b'   42|ab   |0xff'
```

## Formatting rules

Supported conversions are `d i D u U o O x X b B p c C s S %`, with the
flags `# 0 - + space`, a field width, a `.precision`, and the length
modifiers `hh h l ll j z`. Integers are reduced to the width their length
modifier implies (32 bits by default, 64 bits for `l`, `ll`, `j`, `z`,
`D`, `U`, `O`, `B`).

Some behaviour differs from the C library's printf:

- Text before an unknown or unfinished conversion is dropped.
- Width and precision cannot be taken from arguments (`*` is not supported).
- Floating-point conversions are not supported.
- Running out of arguments raises `FormatError`, as does a wide character that
  cannot be encoded under `mb_cur_max`.

## What it does not do

`ftkit` is a library only: it installs no command-line program.