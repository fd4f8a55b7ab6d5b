"""ColumnSmith - reshape delimited files and match their columns against a reference."""

__version__ = "0.1.0"
