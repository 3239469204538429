"""A small printf-style formatter supporting c, s, p, d, i, u, x, X and %.

Supported flags are ``-``, ``0``, ``.``, ``#``, space and ``+`` together
with a field width and a precision. Any other character between ``%`` and
the conversion letter is skipped.
"""

from __future__ import annotations

import operator
import sys
from dataclasses import dataclass, replace
from enum import Enum
from typing import IO, Any, Iterator

from pipex.numbers import split_sign, to_base

_SPECIFIERS = "csdiuxpX%"
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


class Conversion(Enum):
    """The conversion letter that ends a directive."""

    CHAR = "c"
    STRING = "s"
    POINTER = "p"
    DECIMAL = "d"
    INTEGER = "i"
    UNSIGNED = "u"
    HEX = "x"
    HEX_UPPER = "X"
    PERCENT = "%"

    @property
    def is_signed(self) -> bool:
        return self in (Conversion.DECIMAL, Conversion.INTEGER)


@dataclass
class Flags:
    """Flags, width and precision read from one directive."""

    dash: bool = False
    zero: bool = False
    dot: bool = False
    hash: bool = False
    space: bool = False
    plus: bool = False
    width: int = 0
    precision: int = 0
    negative: bool = False


def parse_directive(fmt: str, pos: int) -> tuple[Flags, Conversion | None, int]:
    """Read the directive starting at ``pos``, just after its ``%``.

    Returns the flags, the conversion (None when the format ends before a
    conversion letter) and the position following the directive.
    """
    flags = Flags()
    end = len(fmt)
    while pos < end and fmt[pos] not in _SPECIFIERS:
        ch = fmt[pos]
        if ch == ".":
            flags.dot = True
        elif ch == " ":
            flags.space = True
        elif ch == "#":
            flags.hash = True
        elif ch == "+":
            flags.plus = True
        elif ch == "-":
            flags.dash = True
        if ch == "0" and not flags.width and not flags.precision:
            flags.zero = True
        if "0" <= ch <= "9":
            if flags.dot:
                flags.precision = flags.precision * 10 + int(ch)
            else:
                flags.width = flags.width * 10 + int(ch)
        pos += 1
    if pos >= end:
        return flags, None, end
    return flags, Conversion(fmt[pos]), pos + 1


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _int_arg(arg: Any) -> int:
    try:
        return operator.index(arg)
    except TypeError:
        raise TypeError(
            f"expected an integer argument, got {type(arg).__name__}"
        ) from None


def _char_arg(arg: Any) -> str:
    if isinstance(arg, str) and len(arg) == 1:
        return arg
    if isinstance(arg, str):
        raise TypeError("%c requires a single character")
    return chr(_int_arg(arg) & 0xFF)


def _wrap_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _text(s: str, flags: Flags, conv: Conversion) -> str:
    """Lay out a character or string conversion."""
    if s.startswith(_NULL_STRING) and flags.dot and flags.precision < 6:
        return ""
    length = len(s)
    if conv is Conversion.STRING and flags.dot and flags.precision < length:
        length = flags.precision
    body = s[:length]
    if not flags.width:
        return body
    padding = " " * (flags.width - length)
    return body + padding if flags.dash else padding + body


def _layout(digits: str, flags: Flags, has_prefix: bool, prefix: str, prefix_width: int) -> str:
    """Lay out a numeric conversion with its sign or radix prefix."""
    n = len(digits)
    width = flags.width
    precision = flags.precision
    zero = flags.zero and not flags.dot
    if flags.dot and precision >= width:
        width = 0
    leading_zeros = "0" * (precision - n) if flags.dot and precision > n else ""
    shown = prefix if has_prefix else ""
    if not width:
        return shown + leading_zeros + digits
    pad = width - n - (prefix_width if has_prefix else 0)
    extra = precision - n if precision and precision > n else 0
    if flags.dash:
        return shown + leading_zeros + digits + " " * (pad - extra)
    if not zero:
        return " " * (pad - extra) + shown + leading_zeros + digits
    return shown + "0" * pad + digits


def _sign(flags: Flags, conv: Conversion) -> str:
    if not conv.is_signed:
        return ""
    if flags.negative:
        return "-"
    if flags.space:
        return " "
    if flags.plus:
        return "+"
    return ""


def _decimal(digits: str, flags: Flags, conv: Conversion) -> str:
    has_prefix = flags.negative or flags.plus or flags.space
    return _layout(digits, flags, has_prefix, _sign(flags, conv), 1)


def _hexadecimal(digits: str, flags: Flags, conv: Conversion) -> str:
    has_prefix = flags.hash and bool(digits) and not digits.startswith("0")
    prefix = "0X" if conv is Conversion.HEX_UPPER else "0x"
    return _layout(digits, flags, has_prefix, prefix, 2)


def _format_int(arg: Any, flags: Flags, conv: Conversion) -> str:
    value = _int_arg(arg)
    if conv is Conversion.UNSIGNED:
        magnitude, negative = value & _UINT_MASK, False
    else:
        magnitude, negative = split_sign(_wrap_int32(value), "d")
    digits = to_base(magnitude, "d")
    if digits == "0" and flags.dot and not flags.precision:
        digits = ""
    return _decimal(digits, replace(flags, negative=negative), conv)


def _format_hex(arg: Any, flags: Flags, conv: Conversion) -> str:
    digits = to_base(_int_arg(arg) & _UINT_MASK, conv.value)
    if digits == "0" and flags.dot and not flags.precision:
        digits = ""
    return _hexadecimal(digits, flags, conv)


def _format_pointer(arg: Any, flags: Flags) -> str:
    value = 0 if arg is None else _int_arg(arg) & _POINTER_MASK
    if not value:
        return _text(_NULL_POINTER, flags, Conversion.POINTER)
    digits = to_base(value, "x")
    return _hexadecimal(digits, replace(flags, hash=True), Conversion.POINTER)


def _render(conv: Conversion, flags: Flags, args: Iterator[Any]) -> str:
    if conv is Conversion.PERCENT:
        return "%"
    arg = _next_arg(args)
    if conv is Conversion.CHAR:
        return _text(_char_arg(arg), flags, conv)
    if conv is Conversion.STRING:
        if arg is None:
            return _text(_NULL_STRING, flags, conv)
        if not isinstance(arg, str):
            raise TypeError(f"%s requires a string, got {type(arg).__name__}")
        return _text(arg.split("\0", 1)[0], flags, conv)
    if conv is Conversion.POINTER:
        return _format_pointer(arg, flags)
    if conv in (Conversion.HEX, Conversion.HEX_UPPER):
        return _format_hex(arg, flags, conv)
    return _format_int(arg, flags, conv)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its directives replaced by the formatted ``args``."""
    pieces: list[str] = []
    remaining = iter(args)
    pos = 0
    end = len(fmt)
    while pos < end:
        cut = fmt.find("%", pos)
        if cut == -1:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:cut])
        flags, conv, pos = parse_directive(fmt, cut + 1)
        if conv is None:
            break
        pieces.append(_render(conv, flags, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: IO[str] | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default); return its length."""
    text = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)