"""
Core encoding modules for CODE128 encoder.
"""

from .encoder import (
    encode,
    Code128Encoder,
    CodeSet,
    EncodeOptions,
    EncodeResult,
    EncodeError,
    ErrorCode,
)
from .bit_sink import (
    BitSink,
    module_is_light,
    max_symbols_numeric,
    max_symbols_text,
    max_symbols_mixed,
    bitmap_size,
    DEFAULT_QUIET_ZONE,
)
from .symbol_table import symbol_pattern, symbol_for_pattern

__all__ = [
    "encode",
    "Code128Encoder",
    "CodeSet",
    "EncodeOptions",
    "EncodeResult",
    "EncodeError",
    "ErrorCode",
    "BitSink",
    "module_is_light",
    "max_symbols_numeric",
    "max_symbols_text",
    "max_symbols_mixed",
    "bitmap_size",
    "DEFAULT_QUIET_ZONE",
    "symbol_pattern",
    "symbol_for_pattern",
]
