"""
Bit Sink

Capacity-bounded module writer over a caller-owned buffer, plus the sizing
formulas and module accessor shared with renderers.

Packing convention (used everywhere in this package):
- Module i is stored in byte i // 8, bit i % 8 (least significant bit first)
- A set bit is a LIGHT module (space), a clear bit is a DARK module (bar)

Overflow is sticky: once a module does not fit, the cursor stops advancing
and every later module is dropped. Nothing is ever written past capacity.
"""

from __future__ import annotations

from typing import Optional

from .symbol_table import SYMBOL_WIDTH, STOP_WIDTH


DEFAULT_QUIET_ZONE = 10

# Pattern used for quiet zones; every bit light
LIGHT_PATTERN = 0xFFFF


class BitSink:
    """
    Appends modules to a fixed-capacity bytearray.

    Attributes:
        buffer: Caller-owned output buffer (never resized)
        capacity: Number of bytes of the buffer that may be written
        offset: Write cursor, in modules
        overflowed: True once any module failed to fit
    """

    def __init__(self, buffer: bytearray, capacity: Optional[int] = None):
        if not isinstance(buffer, (bytearray, memoryview)):
            raise TypeError("Output buffer must be a bytearray or writable memoryview")
        if capacity is None:
            capacity = len(buffer)
        if capacity < 0 or capacity > len(buffer):
            raise ValueError(
                f"Capacity must be 0-{len(buffer)} bytes, got {capacity}"
            )
        self.buffer = buffer
        self.capacity = capacity
        self.offset = 0
        self.overflowed = False

    def write_modules(self, pattern: int, width: int) -> int:
        """
        Append `width` modules, most significant module of `pattern` first.

        Returns:
            The cursor after writing (total modules written so far)
        """
        for i in range(width - 1, -1, -1):
            byte_offset = self.offset // 8
            if byte_offset < self.capacity:
                mask = 1 << (self.offset & 7)
                if (pattern >> (i & 15)) & 1:
                    self.buffer[byte_offset] |= mask
                else:
                    self.buffer[byte_offset] &= ~mask & 0xFF
                self.offset += 1
            else:
                self.overflowed = True
        return self.offset

    def write_light(self, count: int) -> int:
        """Append `count` light modules (quiet zone)."""
        while count > 0:
            step = min(count, 16)
            self.write_modules(LIGHT_PATTERN, step)
            count -= step
        return self.offset

    @property
    def bit_length(self) -> int:
        return self.offset


def module_is_light(buffer, index: int) -> bool:
    """Return True if module `index` of a packed buffer is light."""
    return (buffer[index // 8] & (1 << (index & 7))) != 0


def max_symbols_numeric(digits: int) -> int:
    """
    Maximum symbols for a run of digits (strictly 0-9).

    Even runs: START, one symbol per pair, CHECKSUM, STOP.
    Odd runs add a code switch and the last single digit.
    """
    return 3 + (digits // 2) + (2 if digits & 1 else 0)


def max_symbols_text(characters: int) -> int:
    """Maximum symbols for non-control ASCII text: START, CHECKSUM, STOP plus one each."""
    return 3 + characters


def max_symbols_mixed(characters: int) -> int:
    """Worst case for arbitrary ASCII: every character may need a code switch."""
    return 3 + 2 * characters


def bitmap_modules(symbols: int, quiet_zone: int = 0) -> int:
    """Modules needed for `symbols` symbols; STOP is two modules wider than the rest."""
    return symbols * SYMBOL_WIDTH + (STOP_WIDTH - SYMBOL_WIDTH) + 2 * quiet_zone


def bitmap_size(symbols: int, quiet_zone: int = 0) -> int:
    """Bytes needed to hold the bitmap for `symbols` symbols."""
    return (bitmap_modules(symbols, quiet_zone) + 7) // 8


def bitmap_size_no_quiet(symbols: int) -> int:
    return bitmap_size(symbols, 0)


def bitmap_size_quiet(symbols: int) -> int:
    return bitmap_size(symbols, DEFAULT_QUIET_ZONE)
