"""Number-to-text conversion for the formatter."""

from __future__ import annotations

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF

_BASES = {
    "d": _DECIMAL,
    "i": _DECIMAL,
    "u": _DECIMAL,
    "x": _HEX_LOWER,
    "X": _HEX_UPPER,
}


def base_digits(letter: str) -> str:
    """Return the digit alphabet for a conversion letter (d, i, u, x, X)."""
    try:
        return _BASES[letter]
    except KeyError:
        raise ValueError(f"no numeric base for conversion {letter!r}") from None


def to_base(num: int, letter: str) -> str:
    """Render a non-negative integer with the digits of ``letter``'s base."""
    if num < 0:
        raise ValueError("number must be non-negative")
    digits = base_digits(letter)
    base = len(digits)
    if num == 0:
        return digits[0]
    out = []
    while num:
        num, rem = divmod(num, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def split_sign(num: int, letter: str) -> tuple[int, bool]:
    """Return ``(magnitude, is_negative)`` for a 32-bit signed value.

    For unsigned conversions (u, x, X) a negative value is reinterpreted
    as its unsigned 32-bit pattern instead of being negated.
    """
    if num >= 0:
        return num, False
    if letter in ("u", "x", "X"):
        return num & _UINT_MASK, True
    return -num, True