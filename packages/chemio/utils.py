"""Parsing helpers shared by the rule engine and the fallback probes."""

import re

_INTEGER = re.compile(r"[+-]?\d+")


def try_parse_int(token: str) -> int | None:
    """
    Parse a base-10 integer token.

    Args:
        token: Text to parse; surrounding whitespace is not accepted.

    Returns:
        The integer value, or None if the token is not an integer.
    """
    if not token or not _INTEGER.fullmatch(token):
        return None
    return int(token)


def is_digits_and_whitespace(text: str) -> bool:
    """Check that text holds only decimal digits and whitespace."""
    return all(c.isdecimal() or c.isspace() for c in text)
