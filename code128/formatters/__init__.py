"""
Output formatters for CODE128 encoder.
"""

from .text_formatter import render_text, format_barcode_text
from .json_formatter import (
    barcode_to_dict,
    format_barcode_json,
    encode_to_json,
    annotate_symbols,
)
from .pdf_formatter import export_pdf_label, dark_runs

__all__ = [
    "render_text",
    "format_barcode_text",
    "barcode_to_dict",
    "format_barcode_json",
    "encode_to_json",
    "annotate_symbols",
    "export_pdf_label",
    "dark_runs",
]
