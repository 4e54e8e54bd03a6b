"""Validation of date and time stamps and of file extensions."""

from __future__ import annotations

from .chars import atoi, is_digit
from .textutils import strncmp


def _cstr(text: str) -> str:
    return text.split("\0", 1)[0]


def is_leap(text: str | None) -> bool:
    """True if the year written at the very start of ``text`` is a leap year."""
    if not text:
        return False
    text = _cstr(text)
    if not text or not is_digit(text[0]):
        return False
    year = atoi(text)
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_thirty(month: int) -> bool:
    """True for the months that have thirty days."""
    return month in (4, 6, 9, 11)


def is_valid_day(leap: bool, month: int, day: str) -> bool:
    """True if the two-digit ``day`` fits ``month`` in a leap or common year."""
    if is_thirty(month) and strncmp("30", day, 2) < 0:
        return False
    if month == 2 and strncmp("29" if leap else "28", day, 2) < 0:
        return False
    if not is_thirty(month) and month != 2 and strncmp("31", day, 2) < 0:
        return False
    return True


def is_date(line: str | None) -> bool:
    """True if ``line`` begins with a date written as ``yyyy/mm/dd``."""
    if line is None:
        return False
    text = _cstr(line)
    if len(text) < 10:
        return False
    leap = is_leap(text)
    if text[4] != "/" or text[7] != "/":
        return False
    if not is_digit(text[0]) or text[0] == "0":
        return False
    if (
        not is_digit(text[5])
        or not is_digit(text[6])
        or strncmp("12", text[5:], 2) < 0
    ):
        return False
    return is_valid_day(leap, atoi(text[5:]), text[8:])


def is_time(line: str | None) -> bool:
    """True if ``line`` begins with a time written as ``hh:mm:ss``."""
    if line is None:
        return False
    text = _cstr(line)
    if len(text) < 8:
        return False
    if not is_digit(text[0]) or text[0] > "2":
        return False
    if not is_digit(text[1]) or (text[0] == "2" and text[1] > "4"):
        return False
    if text[2] != ":" or text[5] != ":":
        return False
    if any(not is_digit(text[i]) or text[i] > "5" for i in (3, 6)):
        return False
    return is_digit(text[4]) and is_digit(text[7])


def has_extension(fmt: str | None, path: str | None) -> bool:
    """True if the file name at the end of ``path`` has exactly the extension ``fmt``.

    The extension runs from the first dot of the file name to its end.
    """
    if fmt is None or path is None:
        return False
    path = _cstr(path)
    name = path[path.rfind("/") + 1 :]
    dot = name.find(".")
    extension = name[dot:] if dot >= 0 else ""
    return strncmp(fmt, extension, len(fmt) + 1) == 0