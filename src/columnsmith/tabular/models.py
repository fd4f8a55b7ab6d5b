"""Data models for parsed delimited text."""

from pydantic import BaseModel, ConfigDict, Field


class ParsedTable(BaseModel):
    """Header row plus data rows produced by the parser.

    Every row holds at least one non-blank cell. The table is never mutated
    after parsing; column edits only change how it is read.
    """

    model_config = ConfigDict(frozen=True)

    headers: list[str]
    rows: list[list[str]] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)


class ParseError(Exception):
    """Base exception for parser failures."""

    pass


class TableLoadError(Exception):
    """Base exception for anything that prevents a table from being installed."""

    pass


class EmptyOrUnheadedError(ParseError, TableLoadError):
    """Exception raised when parsing yields no header fields."""

    def __init__(self, message: str = ""):
        super().__init__(
            message
            or "Could not parse headers. The file might be empty or in an unsupported format."
        )
