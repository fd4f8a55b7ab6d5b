"""CSV export with formula-injection sanitization."""

import logging
from typing import Sequence

from ..columns.models import Column, resolve_cell
from ..tabular.models import ParsedTable

logger = logging.getLogger(__name__)

EXPORT_DELIMITER = ","
FORMULA_TRIGGERS = ("=", "+", "-", "@")


def sanitize_cell(value: str) -> str:
    """Prefix an apostrophe when a spreadsheet would read the value as a formula."""
    if value and value[0] in FORMULA_TRIGGERS:
        return f"'{value}"
    return value


def quote_field(value: str) -> str:
    """Sanitize, double embedded quotes and wrap in quotes."""
    sanitized = sanitize_cell(value)
    return '"' + sanitized.replace('"', '""') + '"'


def export_filename(instance_number: int) -> str:
    return f"transformed_data_instance_{instance_number}.csv"


class CsvExporter:
    """Render columns and their table back to comma-delimited text."""

    def export(self, columns: Sequence[Column], table: ParsedTable) -> str:
        """
        Serialize the table as seen through the given columns.

        Every field is quoted. The delimiter is always a comma regardless of
        what the source file used.

        Args:
            columns: Columns in display order
            table: The table the columns read from

        Returns:
            CSV document; the header line is always followed by a newline
        """
        header = self.render_header(columns)
        rows = "\n".join(self.render_row(row, columns) for row in table.rows)
        logger.info(f"Exported {len(columns)} columns and {len(table.rows)} rows")
        return f"{header}\n{rows}"

    def render_header(self, columns: Sequence[Column]) -> str:
        return EXPORT_DELIMITER.join(quote_field(column.new_name) for column in columns)

    def render_row(self, row: list[str], columns: Sequence[Column]) -> str:
        return EXPORT_DELIMITER.join(
            quote_field(resolve_cell(row, column)) for column in columns
        )
