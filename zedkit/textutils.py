"""String and byte helpers: splitting, searching, comparing, trimming and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _char(c: str | int) -> str:
    """Normalise ``c`` to a one-character string; ints are taken as byte values."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def _cstr(s: str) -> str:
    """The part of ``s`` before the first NUL character."""
    return s.split("\0", 1)[0]


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def word_count(s: str, sep: str) -> int:
    """Count the words of ``s`` separated by runs of ``sep``.

    A word that follows a separator only counts when its first character is
    printable or a space (code 32 or above); the very first word always counts.
    """
    sep = _char(sep)
    count = 0
    previous = None
    for index, ch in enumerate(s):
        if ch != sep and (index == 0 or (previous == sep and ord(ch) >= 32)):
            count += 1
        previous = ch
    return count


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on runs of ``sep``, dropping empty pieces.

    At most :func:`word_count` pieces are returned, taken from the start.
    """
    sep = _char(sep)
    words = [piece for piece in s.split(sep) if piece]
    return words[: word_count(s, sep)]


def find_char(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``; a NUL ``c`` finds the end of the string."""
    c = _char(c)
    index = s.find(c)
    if index >= 0:
        return index
    return len(s) if c == "\0" else None


def rfind_char(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``; a NUL ``c`` finds the end of the string."""
    c = _char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of either string.

    Returns the difference of the first differing character codes, or 0.
    """
    _check_count("n", n)
    if n == 0:
        return 0
    a_text, b_text = _cstr(s1), _cstr(s2)
    for index in range(n):
        a = ord(a_text[index]) if index < len(a_text) else 0
        b = ord(b_text[index]) if index < len(b_text) else 0
        if a != b or a == 0 or b == 0 or index == n - 1:
            return a - b
    return 0


def memcmp(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; returns the difference of the first differing pair."""
    _check_count("n", n)
    if n > len(b1) or n > len(b2):
        raise ValueError(f"cannot compare {n} bytes of shorter data")
    for a, b in zip(b1[:n], b2[:n]):
        if a != b:
            return a - b
    return 0


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c & 0xFF`` among the first ``n``, or None."""
    _check_count("n", n)
    if n > len(data):
        raise ValueError(f"cannot search {n} bytes of {len(data)}-byte data")
    index = bytes(data[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def strnstr(big: str, little: str, length: int | None) -> int | None:
    """Index of ``little`` in ``big`` if it lies wholly within the first ``length`` characters.

    ``length`` of None means no limit. Only the first occurrence is considered.
    """
    big, little = _cstr(big), _cstr(little)
    if not little:
        return 0
    if length is None:
        length = len(big)
    _check_count("length", length)
    index = big.find(little)
    if index < 0 or index >= length:
        return None
    return index if index + len(little) <= length else None


def substr(s: str, start: int, length: int | None) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; None takes the rest."""
    _check_count("start", start)
    if start >= len(s):
        return ""
    if length is None:
        return s[start:]
    _check_count("length", length)
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence, func: Callable[[int, object], object]
) -> MutableSequence:
    """Call ``func(index, item)`` on each item of ``s`` in place.

    A result other than None replaces the item. Returns ``s``.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence")
    for index, item in enumerate(s):
        result = func(index, item)
        if result is not None:
            s[index] = result
    return s


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of ``s1`` and ``s2``."""
    return s1 + s2