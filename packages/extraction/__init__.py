"""Line-oriented extraction from generated component and endpoint JSON."""

from packages.extraction.parsers import (
    extract_description,
    extract_option_rows,
    iter_option_rows,
)
from packages.extraction.types import OptionRow

__all__ = ["OptionRow", "extract_description", "extract_option_rows", "iter_option_rows"]
