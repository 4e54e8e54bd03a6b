"""Character, text, colour, date-validation, linked-list, formatting and line-reading utilities."""

__version__ = "0.1.0"
__all__ = ["chars", "colors", "textutils", "linked", "dates", "printf", "lines"]