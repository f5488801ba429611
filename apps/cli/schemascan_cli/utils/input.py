"""Input loading for CLI commands.

Commands read generated JSON either from a file or, when the path is ``-``,
from standard input. Encoding and the size ceiling come from configuration.
"""

from __future__ import annotations

import sys
from pathlib import Path

from packages.common.config import get_config
from packages.common.logging import get_logger

logger = get_logger(__name__)

STDIN_PATH = "-"


class InputError(ValueError):
    """Raised when command input cannot be read."""

    pass


def read_input(path: str) -> str:
    """Read command input from a file path or stdin.

    Args:
        path: File path, or ``-`` for standard input.

    Returns:
        str: The decoded text.

    Raises:
        InputError: If the file is missing, unreadable, not decodable with the
            configured encoding, or larger than ``max_input_bytes``.
    """
    config = get_config()

    if path == STDIN_PATH:
        data = sys.stdin.buffer.read(config.max_input_bytes + 1)
        source = "stdin"
    else:
        file_path = Path(path)
        if not file_path.is_file():
            raise InputError(f"Input file not found: {path}")
        try:
            size = file_path.stat().st_size
            if size > config.max_input_bytes:
                raise InputError(
                    f"Input file {path} is {size} bytes, limit is {config.max_input_bytes}"
                )
            data = file_path.read_bytes()
        except OSError as e:
            raise InputError(f"Cannot read {path}: {e}") from e
        source = str(file_path)

    if len(data) > config.max_input_bytes:
        raise InputError(f"Input from {source} exceeds {config.max_input_bytes} bytes")

    try:
        text = data.decode(config.input_encoding)
    except UnicodeDecodeError as e:
        raise InputError(f"Input from {source} is not valid {config.input_encoding}: {e}") from e

    logger.debug(f"Read {len(data)} bytes from {source}")
    return text
