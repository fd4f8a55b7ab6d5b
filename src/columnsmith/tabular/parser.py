"""Quote-aware parser for delimited text."""

import logging
from typing import Optional

from .models import EmptyOrUnheadedError, ParsedTable
from .sniffer import detect_delimiter

logger = logging.getLogger(__name__)

QUOTE = '"'


class TabularParser:
    """Parse delimited text into a header row and data rows."""

    def parse(self, text: str, delimiter: Optional[str] = None) -> ParsedTable:
        """
        Parse raw text into a ParsedTable.

        Args:
            text: Decoded file contents
            delimiter: Field separator; sniffed from the text when omitted

        Returns:
            ParsedTable whose headers are the first non-blank record

        Raises:
            EmptyOrUnheadedError: If no record survives blank-line filtering
        """
        if delimiter is None:
            delimiter = detect_delimiter(text)

        records = self.tokenize(text, delimiter)
        cleaned = self.clean(records)

        if not cleaned or not cleaned[0]:
            logger.warning("Parsed text produced no header row")
            raise EmptyOrUnheadedError()

        headers, rows = cleaned[0], cleaned[1:]
        logger.info(
            f"Parsed {len(headers)} columns and {len(rows)} rows "
            f"(delimiter={delimiter!r})"
        )
        return ParsedTable(headers=headers, rows=rows)

    def tokenize(self, text: str, delimiter: str) -> list[list[str]]:
        """
        Split text into raw records without trimming or filtering.

        A double quote outside quote mode always opens quote mode, even in the
        middle of a field. Inside quote mode a doubled quote yields a literal
        quote and everything else, delimiters and line breaks included, is
        kept verbatim. CRLF counts as one line terminator; a lone CR is data.
        """
        records: list[list[str]] = []
        row: list[str] = []
        field: list[str] = []
        in_quotes = False

        i = 0
        length = len(text)
        while i < length:
            char = text[i]

            if in_quotes:
                if char == QUOTE:
                    if i + 1 < length and text[i + 1] == QUOTE:
                        field.append(QUOTE)
                        i += 1
                    else:
                        in_quotes = False
                else:
                    field.append(char)
            elif char == QUOTE:
                in_quotes = True
            elif char == delimiter:
                row.append("".join(field))
                field = []
            elif char == "\n" or (char == "\r" and i + 1 < length and text[i + 1] == "\n"):
                row.append("".join(field))
                records.append(row)
                row = []
                field = []
                if char == "\r":
                    i += 1
            else:
                field.append(char)

            i += 1

        # No trailing line terminator
        if field or row:
            row.append("".join(field))
            records.append(row)

        return records

    def clean(self, records: list[list[str]]) -> list[list[str]]:
        """Trim every cell and drop records whose cells are all blank."""
        cleaned = []
        for record in records:
            trimmed = [cell.strip() for cell in record]
            if any(trimmed):
                cleaned.append(trimmed)
        return cleaned


def parse_table(text: str, delimiter: Optional[str] = None) -> ParsedTable:
    """Parse text with a default TabularParser."""
    return TabularParser().parse(text, delimiter)
