"""Small string helpers used for parsing commands and environment entries."""

from __future__ import annotations

_WHITESPACE = " \n\t\v\f\r"
_INT_BITS = 32


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in s.split(sep) if word]


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Return the index of ``needle`` within the first ``n`` characters of ``haystack``.

    An empty needle matches at index 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    if n <= 0:
        return None
    width = len(needle)
    for i, _ in enumerate(haystack[:n]):
        if width > n - i:
            return None
        if haystack[i : i + width] == needle:
            return i
    return None


def strtrim(s: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``s``."""
    if not chars:
        return s
    return s.strip(chars)


def atoi(s: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Characters after the digits are ignored; no digits gives 0. The result
    wraps like a 32-bit signed integer.
    """
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = []
    for ch in text:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    value = sign * int("".join(digits)) if digits else 0
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def strncmp(a: str | bytes, b: str | bytes, n: int) -> int:
    """Compare at most ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first differing bytes (as unsigned
    values), or 0 when they agree up to ``n`` or to the end of both.
    """
    left = _as_bytes(a)
    right = _as_bytes(b)
    for i in range(max(n, 0)):
        x = left[i] if i < len(left) else 0
        y = right[i] if i < len(right) else 0
        if x == 0 and y == 0:
            break
        if x != y:
            return x - y
    return 0