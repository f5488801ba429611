"""Quoted-token matching and string helpers for generated JSON lines.

The generated documents these helpers read keep every string on one line and
never need escape handling, so a quote always ends a token, even one preceded
by a backslash.
"""

import re

# Shortest run between a pair of quotes. Empty tokens ("") are matched so that
# an empty value still occupies its ordinal position on the line.
QUOTED_TOKEN_PATTERN = re.compile(r'"(.*?)"')


def quoted_tokens(line: str) -> list[str]:
    """Return the double-quoted tokens on a line, left to right.

    Args:
        line: A single line of text.

    Returns:
        list[str]: Token contents without the enclosing quotes.
    """
    if not line:
        return []

    return QUOTED_TOKEN_PATTERN.findall(line)


def after(text: str, marker: str) -> str | None:
    """Return the text following the first occurrence of ``marker``.

    Args:
        text: Text to search.
        marker: Literal marker to look for.

    Returns:
        str | None: Everything after the marker, or None if it does not occur.
    """
    index = text.find(marker)
    if index == -1:
        return None

    return text[index + len(marker) :]


def remove_leading_and_ending_quotes(value: str) -> str:
    """Strip one layer of matching single or double quotes.

    Surrounding whitespace is ignored when checking for quotes. Values that
    are not wrapped in a matching pair are returned unchanged.

    Args:
        value: Value to unwrap.

    Returns:
        str: The unwrapped value.
    """
    if not value:
        return value

    copy = value.strip()
    if len(copy) >= 2:
        for quote in ("'", '"'):
            if copy.startswith(quote) and copy.endswith(quote):
                return copy[1:-1]

    return value
