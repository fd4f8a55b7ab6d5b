"""Export of reshaped tables."""

from .serializer import CsvExporter, sanitize_cell, quote_field, export_filename

__all__ = ["CsvExporter", "sanitize_cell", "quote_field", "export_filename"]
