"""Line-oriented parsers for generated component and endpoint JSON.

These parsers do not use a JSON parser. The documents they read come from a
generator with a fixed layout (one property per line, fixed nesting depth,
quoted string tokens), and the parsers lean on that layout:

- ``extract_description`` finds the property line by its ``"<name>":`` prefix
  and reads the ``"description": "..."`` value on that line.
- ``extract_option_rows`` skips the two header lines of an endpoint explain
  document and reads each option line positionally: the 1st, 3rd and 5th
  quoted tokens are the option name, value and description, the even tokens
  are the labels between them.

A generator change to either layout silently changes what these return.
"""

from collections.abc import Iterator

from packages.common.logging import get_logger
from packages.extraction.tokens import (
    after,
    quoted_tokens,
    remove_leading_and_ending_quotes,
)
from packages.extraction.types import OptionRow

logger = get_logger(__name__)

DESCRIPTION_MARKER = '"description": "'

# Header lines of an explain document: the opening brace and the endpoint line.
EXPLAIN_HEADER_LINES = 2

# Ordinal (1-based) token positions on an option line
NAME_TOKEN = 1
VALUE_TOKEN = 3
DESCRIPTION_TOKEN = 5


def extract_description(content: str | None, name: str) -> str | None:
    """Extract the description of a property from a blob of generated JSON.

    Only the first line starting with ``"<name>":`` (after trimming) is
    considered. The value is everything between the description marker and
    the last quote on that line, with one layer of wrapping quotes removed.

    Args:
        content: The blob of JSON.
        name: Name of the property whose description to extract.

    Returns:
        str | None: The description, or None if no line matches or the
            matching line has no description.
    """
    if not content:
        return None

    prefix = f'"{name}":'
    for line in content.split("\n"):
        line = line.strip()
        if not line.startswith(prefix):
            continue

        value = after(line, DESCRIPTION_MARKER)
        if value is None:
            logger.debug(f"Property {name!r} has no description")
            return None

        last_quote = value.rfind('"')
        if last_quote == -1:
            logger.debug(f"Description of {name!r} is not terminated")
            return None

        return remove_leading_and_ending_quotes(value[:last_quote])

    return None


def iter_option_rows(content: str | None) -> Iterator[OptionRow]:
    """Lazily parse the option lines of an endpoint explain document.

    Args:
        content: The explain JSON.

    Yields:
        OptionRow: One row per line whose first quoted token names an option,
            in line order.
    """
    if not content:
        return

    lines = content.split("\n")
    for line in lines[EXPLAIN_HEADER_LINES:]:
        option: str | None = None
        value: str | None = None
        description: str | None = None

        for count, token in enumerate(quoted_tokens(line), start=1):
            if count == NAME_TOKEN:
                option = token
            elif count == VALUE_TOKEN:
                value = token
            elif count == DESCRIPTION_TOKEN:
                description = token

        if option is not None:
            yield OptionRow(option, value, description)


def extract_option_rows(content: str | None) -> list[OptionRow]:
    """Parse the endpoint explain JSON.

    Args:
        content: The explain JSON.

    Returns:
        list[OptionRow]: All options, where each row contains name, value
            and description (None when absent on the line).
    """
    rows = list(iter_option_rows(content))
    logger.debug(f"Parsed {len(rows)} option row(s) from explain JSON")
    return rows
