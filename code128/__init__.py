"""
CODE128 Barcode Encoder

Encodes ASCII text into CODE128 linear barcode bitmaps: packed 0/1
modules (dark/light) ready for a renderer or printer.

Based on ISO/IEC 15417 (CODE128 bar code symbology specification).
"""

from .core.encoder import (
    encode,
    Code128Encoder,
    CodeSet,
    EncodeOptions,
    EncodeResult,
    EncodeError,
    ErrorCode,
)
from .core.bit_sink import (
    module_is_light,
    max_symbols_numeric,
    max_symbols_text,
    bitmap_size,
    DEFAULT_QUIET_ZONE,
)
from .validators.validators import (
    calculate_checksum,
    validate_symbols,
    split_modules,
)
from .formatters.text_formatter import render_text
from .formatters.json_formatter import format_barcode_json, encode_to_json
from .address import address_to_decimal

__version__ = "1.0.0"
__all__ = [
    "encode",
    "Code128Encoder",
    "CodeSet",
    "EncodeOptions",
    "EncodeResult",
    "EncodeError",
    "ErrorCode",
    "module_is_light",
    "max_symbols_numeric",
    "max_symbols_text",
    "bitmap_size",
    "DEFAULT_QUIET_ZONE",
    "calculate_checksum",
    "validate_symbols",
    "split_modules",
    "render_text",
    "format_barcode_json",
    "encode_to_json",
    "address_to_decimal",
]
