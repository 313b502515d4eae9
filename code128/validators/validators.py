"""
CODE128 Validation Functions

Checks an encoded symbol stream the way a scanner would before trusting it:
- Check symbol validation (weighted modulo 103)
- Structural validation (START first, STOP last, nothing in between)
- Splitting a packed module bitmap back into symbol codes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from ..core.bit_sink import module_is_light
from ..core.symbol_table import (
    START_A,
    START_B,
    START_C,
    STOP,
    STOP_WIDTH,
    SYMBOL_WIDTH,
    symbol_for_pattern,
)


START_SYMBOLS = frozenset({START_A, START_B, START_C})


@dataclass
class ValidationResult:
    """Result of a validation operation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


def calculate_checksum(symbols: Sequence[int]) -> int:
    """
    Calculate the CODE128 check symbol.

    Algorithm:
    1. The first symbol (START) has weight 1
    2. The symbol at position k >= 1 has weight k
    3. Check symbol = sum of weight * symbol, mod 103

    Args:
        symbols: START symbol followed by data symbols (no check, no STOP)

    Returns:
        Check symbol value (0-102)
    """
    if not symbols:
        raise ValueError("Symbol list must start with a START symbol")

    total = 0
    for position, symbol in enumerate(symbols):
        total += (position if position else 1) * symbol
    return total % 103


def validate_symbols(symbols: Sequence[int]) -> ValidationResult:
    """
    Validate a complete symbol stream (START ... check, STOP).

    Returns:
        ValidationResult with check symbol details in meta
    """
    result = ValidationResult(valid=True)

    if len(symbols) < 3:
        result.valid = False
        result.errors.append(
            f"Too few symbols: need START, check and STOP, got {len(symbols)}"
        )
        return result

    if symbols[0] not in START_SYMBOLS:
        result.valid = False
        result.errors.append(f"First symbol must be START, got {symbols[0]}")

    if symbols[-1] != STOP:
        result.valid = False
        result.errors.append(f"Last symbol must be STOP, got {symbols[-1]}")

    for position, symbol in enumerate(symbols[1:-1], 1):
        if symbol in START_SYMBOLS or symbol == STOP:
            result.valid = False
            result.errors.append(
                f"START/STOP symbol {symbol} inside data at position {position}"
            )

    if not result.valid:
        return result

    calculated = calculate_checksum(symbols[:-2])
    provided = symbols[-2]
    result.meta['calculated_check_symbol'] = calculated
    result.meta['provided_check_symbol'] = provided
    result.meta['check_symbol_valid'] = (calculated == provided)

    if calculated != provided:
        result.valid = False
        result.errors.append(
            f"Check symbol mismatch: expected {calculated}, got {provided}"
        )

    return result


def split_modules(buffer, bit_length: int, quiet_zone: int = 0) -> List[int]:
    """
    Map a packed module bitmap back to its symbol codes.

    Reads 11-module windows until STOP, whose 13-module pattern ends the
    stream. Quiet zones must be light.

    Raises:
        ValueError: On a window that is not a CODE128 symbol, a dark module
            in a quiet zone, or a stream with no STOP
    """
    for index in list(range(quiet_zone)) + list(range(bit_length - quiet_zone, bit_length)):
        if not module_is_light(buffer, index):
            raise ValueError(f"Dark module at {index} inside quiet zone")

    def read(start: int, width: int) -> int:
        pattern = 0
        for index in range(start, start + width):
            pattern = (pattern << 1) | int(module_is_light(buffer, index))
        return pattern

    end = bit_length - quiet_zone
    position = quiet_zone
    symbols: List[int] = []
    while position + STOP_WIDTH <= end:
        if position + STOP_WIDTH == end:
            try:
                symbols.append(symbol_for_pattern(read(position, STOP_WIDTH), STOP_WIDTH))
                return symbols
            except ValueError:
                pass
        symbols.append(symbol_for_pattern(read(position, SYMBOL_WIDTH), SYMBOL_WIDTH))
        position += SYMBOL_WIDTH

    raise ValueError("Module stream does not end with STOP")
