"""
JSON Formatter for CODE128 encoder

Introspection dump of an encoded barcode:
- Input text and forced code set
- Emitted symbols, with the code set each one was read in
- Check symbol, bit length and error state
- The module string ('1' = light, '0' = dark)
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from ..core.encoder import CodeSet, EncodeResult, encode
from ..core.symbol_table import (
    CODE_A,
    CODE_B,
    CODE_C,
    START_A,
    START_B,
    START_C,
    STOP,
)


SYMBOL_NAMES = {
    CODE_C: "CODE C",
    CODE_B: "CODE B",
    CODE_A: "CODE A",
    START_A: "START A",
    START_B: "START B",
    START_C: "START C",
    STOP: "STOP",
}

_MODE_AFTER = {
    START_A: CodeSet.A,
    START_B: CodeSet.B,
    START_C: CodeSet.C,
    CODE_A: CodeSet.A,
    CODE_B: CodeSet.B,
    CODE_C: CodeSet.C,
}


def describe_symbol(symbol: int, code_set: CodeSet) -> str:
    """Human-readable meaning of a data symbol in the given code set."""
    if symbol in SYMBOL_NAMES:
        return SYMBOL_NAMES[symbol]
    if code_set is CodeSet.C:
        return f"{symbol:02d}" if symbol < 100 else f"#{symbol}"
    if symbol >= 96:
        return f"#{symbol}"
    if code_set is CodeSet.A and symbol >= 64:
        return f"^{chr(symbol)}"  # control character, caret notation
    return chr(symbol + 32)


def annotate_symbols(result: EncodeResult) -> List[Dict[str, Any]]:
    """List each symbol with its code set and meaning."""
    annotated = []
    code_set = CodeSet.NONE
    last = len(result.symbols) - 1
    for position, symbol in enumerate(result.symbols):
        is_check = (
            result.check_symbol is not None
            and position == last - 1
            and result.symbols[last] == STOP
        )
        meaning = "CHECK" if is_check else describe_symbol(symbol, code_set)
        annotated.append({
            "position": position,
            "symbol": symbol,
            "code_set": code_set.value,
            "meaning": meaning,
        })
        code_set = _MODE_AFTER.get(symbol, code_set)
    return annotated


def barcode_to_dict(result: EncodeResult, include_modules: bool = True) -> Dict[str, Any]:
    """
    Build the introspection dictionary for an encoded barcode.

    Args:
        result: Encoding result
        include_modules: Include the module string (default: True)
    """
    output = result.to_dict()
    output["symbols"] = annotate_symbols(result)
    if not include_modules:
        output.pop("modules")
    return output


def format_barcode_json(result: EncodeResult, include_modules: bool = True) -> str:
    """Format an encoded barcode as indented JSON."""
    return json.dumps(
        barcode_to_dict(result, include_modules=include_modules),
        ensure_ascii=False,
        indent=2,
    )


def encode_to_json(text: str, include_modules: bool = True, **encode_options) -> str:
    """
    Encode text and return the JSON dump.

    Example:
        >>> data = json.loads(encode_to_json("A", include_modules=False))
        >>> [s["meaning"] for s in data["symbols"]]
        ['START B', 'A', 'CHECK', 'STOP']
    """
    result = encode(text, **encode_options)
    return format_barcode_json(result, include_modules=include_modules)
