"""A small formatted-output facility handling the ``cspdiuxX%`` conversions."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} needs an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    return ((value + 0x80000000) & _UINT_MASK) - 0x80000000


def _digits(value: int, alphabet: str) -> str:
    base = len(alphabet)
    if value == 0:
        return alphabet[0]
    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(alphabet[rem])
    return "".join(reversed(out))


def format_hex(value: int, style: str) -> str:
    """Hexadecimal text of ``value`` taken as an unsigned 32-bit number.

    ``style`` is ``"x"`` for lower-case digits or ``"X"`` for upper-case.
    """
    value = _require_int(value, "format_hex") & _UINT_MASK
    if style == "x":
        return _digits(value, _LOWER_DIGITS)
    if style == "X":
        return _digits(value, _UPPER_DIGITS)
    raise ValueError(f"wrong style for hexadecimal output: {style!r}")


def format_pointer(address: int | None) -> str:
    """``0x``-prefixed lower-case hex of an address; a null address gives ``(nil)``."""
    if address is None:
        return "(nil)"
    address = _require_int(address, "format_pointer") & _ULONG_MASK
    if address == 0:
        return "(nil)"
    return "0x" + _digits(address, _LOWER_DIGITS)


def format_unsigned(value: int) -> str:
    """Decimal text of ``value`` taken as an unsigned 32-bit number."""
    return str(_require_int(value, "format_unsigned") & _UINT_MASK)


def format_signed(value: int) -> str:
    """Decimal text of ``value`` taken as a signed 32-bit number."""
    return str(_to_int32(_require_int(value, "format_signed")))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_require_int(value, "%c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str, got {type(value).__name__}")
    return value.split("\0", 1)[0]


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_string,
    "p": format_pointer,
    "d": format_signed,
    "i": format_signed,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, "x"),
    "X": lambda value: format_hex(value, "X"),
}


def render(fmt: str, *args: Any) -> str:
    """Expand the conversions of ``fmt`` with ``args`` and return the text.

    ``%%`` gives a percent sign; an unknown conversion is kept as written.
    A lone ``%`` at the end of ``fmt`` is an error. Surplus arguments are ignored.
    """
    if fmt is None:
        raise TypeError("format must be a str, not None")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for conversion %{spec}"
                ) from None
            pieces.append(_CONVERSIONS[spec](arg))
        else:
            pieces.append("%" + spec)
    return "".join(pieces)


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write ``render(fmt, *args)`` to ``stream`` (stdout by default); return its length."""
    text = render(fmt, *args)
    _out(stream).write(text)
    return len(text)


def put_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` to ``stream``; None writes nothing. Returns the count written."""
    if text is None:
        return 0
    text = text.split("\0", 1)[0]
    _out(stream).write(text)
    return len(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` followed by a newline. Returns the count written."""
    written = put_str(text, stream)
    _out(stream).write("\n")
    return written + 1


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write the decimal text of ``n`` as a signed 32-bit number. Returns the count."""
    text = format_signed(n)
    _out(stream).write(text)
    return len(text)