"""Delimited-text parsing."""

from .models import ParsedTable, ParseError, TableLoadError, EmptyOrUnheadedError
from .sniffer import detect_delimiter, DELIMITER_CANDIDATES
from .parser import TabularParser, parse_table

__all__ = [
    "ParsedTable",
    "ParseError",
    "TableLoadError",
    "EmptyOrUnheadedError",
    "detect_delimiter",
    "DELIMITER_CANDIDATES",
    "TabularParser",
    "parse_table",
]
