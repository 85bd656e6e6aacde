"""String helpers used when parsing commands and the environment."""

from __future__ import annotations

from itertools import islice, zip_longest

_SPACES = " \t\n\v\f\r"
_INT_BITS = 32


def split_words(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in s.split(sep) if word]


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit signed value."""
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = sign * int("".join(digits) or "0")
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def itoa(n: int) -> str:
    """Render an integer in decimal."""
    return str(int(n))


def strtrim(s: str, chars: str | None) -> str:
    """Remove characters in ``chars`` from both ends; ``None`` leaves ``s`` as is."""
    if chars is None:
        return s
    return s.strip(chars)


def strnstr(haystack: str, needle: str, length: int) -> int:
    """Index of ``needle`` lying wholly within the first ``length`` characters, or -1."""
    if not needle:
        return 0
    return haystack.find(needle, 0, max(length, 0))


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign tells the order."""
    for x, y in islice(zip_longest(a, b, fillvalue="\0"), max(n, 0)):
        if x != y:
            return ord(x) - ord(y)
    return 0