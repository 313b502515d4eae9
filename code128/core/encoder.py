"""
CODE128 Barcode Encoder

Encodes ASCII text into a packed CODE128 module bitmap.

Features:
- Automatic code set selection (A for control characters, B for text,
  C for digit pairs)
- Digit-pair compaction that avoids switching into Code C for an isolated
  pair inside text
- Weighted modulo-103 check symbol
- Bounds-checked output into a caller-owned buffer with sticky overflow

Encoding never raises for bad data. Problems set a sticky error flag and
are recorded in `errors`; once flagged, the encoder writes no further
symbols, and callers must not trust the resulting barcode to scan.

Based on:
- ISO/IEC 15417 (CODE128 bar code symbology specification)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..log import logger
from .bit_sink import (
    BitSink,
    bitmap_size,
    max_symbols_mixed,
    module_is_light,
)
from .symbol_table import (
    CODE_A,
    CODE_B,
    CODE_C,
    MAX_SYMBOL,
    START_A,
    START_B,
    START_C,
    STOP,
    SYMBOL_PATTERNS,
)


class CodeSet(str, Enum):
    """Active interpretation mode of the encoder."""
    NONE = "NONE"  # Not started
    A = "A"        # ASCII control and upper-case
    B = "B"        # ASCII non-control characters
    C = "C"        # Double-digit numeric
    STOP = "STOP"  # Stopped


class ErrorCode(str, Enum):
    """Error codes recorded by the encoder."""
    INVALID_TRANSITION = "INVALID_TRANSITION"
    UNENCODABLE_BYTE = "UNENCODABLE_BYTE"
    BUFFER_OVERFLOW = "BUFFER_OVERFLOW"
    POST_TERMINAL = "POST_TERMINAL"
    INVALID_SYMBOL = "INVALID_SYMBOL"


_START_SYMBOLS = {
    CodeSet.A: START_A,
    CodeSet.B: START_B,
    CodeSet.C: START_C,
}

_SWITCH_SYMBOLS = {
    CodeSet.A: CODE_A,
    CodeSet.B: CODE_B,
    CodeSet.C: CODE_C,
}

_DIGITS = frozenset(b"0123456789")

TextInput = Union[str, bytes, bytearray]


@dataclass
class EncodeError:
    """Represents an encoding error."""
    code: str
    message: str
    at_index: Optional[int] = None
    symbol: Optional[int] = None


@dataclass
class EncodeOptions:
    """
    Configuration options for encoding.

    Attributes:
        fixed_code: Force every character into one code set (None = automatic).
            A CodeSet or a case-insensitive name; "auto" means automatic
        quiet_zone: Light modules added on each side of the symbol
        encoding: Codec used to turn str input into bytes
    """
    fixed_code: Union[None, str, CodeSet] = None
    quiet_zone: int = 0
    encoding: str = "utf-8"


@dataclass
class EncodeResult:
    """
    Complete result of encoding one barcode.

    Attributes:
        text: Input text (bytes input decoded as latin-1)
        buffer: Packed module bitmap (see bit_sink for the bit order)
        bit_length: Meaningful modules in the buffer, quiet zones included
        quiet_zone: Quiet zone width on each side
        symbols: Emitted symbols, START through STOP
        check_symbol: The check symbol value (None if never appended)
        fixed_code: Code set forced for the run, if any
        error: True if anything went wrong; do not print the barcode
        errors: Recorded errors
    """
    text: str
    buffer: bytearray
    bit_length: int
    quiet_zone: int = 0
    symbols: List[int] = field(default_factory=list)
    check_symbol: Optional[int] = None
    fixed_code: Optional[CodeSet] = None
    error: bool = False
    errors: List[EncodeError] = field(default_factory=list)

    def is_light(self, index: int) -> bool:
        """Return True if module `index` is light."""
        if not 0 <= index < self.bit_length:
            raise IndexError(f"Module index {index} out of range 0-{self.bit_length - 1}")
        return module_is_light(self.buffer, index)

    def modules(self) -> str:
        """Modules as a string, '1' = light, '0' = dark."""
        return "".join(
            "1" if module_is_light(self.buffer, i) else "0"
            for i in range(self.bit_length)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            'text': self.text,
            'fixed_code': self.fixed_code.value if self.fixed_code else None,
            'quiet_zone': self.quiet_zone,
            'symbols': list(self.symbols),
            'check_symbol': self.check_symbol,
            'bit_length': self.bit_length,
            'error': self.error,
            'errors': [
                {
                    'code': e.code,
                    'message': e.message,
                    'at_index': e.at_index,
                    'symbol': e.symbol,
                }
                for e in self.errors
            ],
            'modules': self.modules(),
        }


def coerce_code_set(value: Union[None, str, CodeSet]) -> Optional[CodeSet]:
    """
    Normalize a fixed code set argument.

    Accepts None, "auto", a CodeSet, or a case-insensitive "A"/"B"/"C".

    Raises:
        ValueError: For NONE, STOP or unknown names
    """
    if value is None:
        return None
    if isinstance(value, CodeSet):
        code = value
    else:
        name = str(value).strip().upper()
        if name in ("", "AUTO"):
            return None
        try:
            code = CodeSet(name)
        except ValueError:
            raise ValueError(f"Unknown code set: {value!r}") from None
    if code in (CodeSet.NONE, CodeSet.STOP):
        raise ValueError(f"Code set {code.value} cannot be forced")
    return code


def _to_bytes(text: TextInput, encoding: str = "utf-8") -> bytes:
    if isinstance(text, str):
        return text.encode(encoding)
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    raise TypeError(f"Text must be str or bytes, got {type(text).__name__}")


class Code128Encoder:
    """
    CODE128 state machine bound to one output buffer.

    Usage:
        encoder = Code128Encoder(buffer)
        encoder.append("ABC123")
        encoder.finalize()
        length = encoder.bit_length

    Each instance owns its state; independent encoders share nothing but
    the read-only symbol table.
    """

    def __init__(self, buffer: bytearray, capacity: Optional[int] = None):
        self.sink = BitSink(buffer, capacity)
        self.code_set = CodeSet.NONE
        self.checksum = 0
        self.symbol_count = 0
        self.check_symbol: Optional[int] = None
        self.symbols: List[int] = []
        self.errors: List[EncodeError] = []
        self._flagged = False
        self._overflow_reported = False

    @property
    def error(self) -> bool:
        return self._flagged or self.sink.overflowed

    @property
    def bit_length(self) -> int:
        return self.sink.offset

    def _flag(
        self,
        code: ErrorCode,
        message: str,
        at_index: Optional[int] = None,
        symbol: Optional[int] = None,
    ) -> None:
        self._flagged = True
        self.errors.append(EncodeError(code.value, message, at_index, symbol))
        logger.debug("%s: %s", code.value, message)

    def _check_overflow(self, symbol: Optional[int] = None) -> None:
        if self.sink.overflowed and not self._overflow_reported:
            self._overflow_reported = True
            self._flag(
                ErrorCode.BUFFER_OVERFLOW,
                f"Output buffer full after {self.sink.offset} modules "
                f"({self.sink.capacity} bytes)",
                symbol=symbol,
            )

    def add_quiet_zone(self, width: int) -> int:
        """Write `width` light modules; they do not take part in the checksum."""
        if width < 0:
            raise ValueError(f"Quiet zone width must be >= 0, got {width}")
        self.sink.write_light(width)
        self._check_overflow()
        return self.sink.offset

    def append_symbol(self, code: int) -> None:
        """
        Write one symbol and fold it into the checksum.

        The first symbol carries weight 1, the symbol at position k >= 1
        carries weight k.
        """
        if self.error or self.code_set is CodeSet.STOP:
            if not self.error:
                self._flag(
                    ErrorCode.POST_TERMINAL,
                    f"Symbol {code} appended after STOP",
                    symbol=code,
                )
            return

        if not 0 <= code <= MAX_SYMBOL:
            self._flag(
                ErrorCode.INVALID_SYMBOL,
                f"Symbol code must be 0-{MAX_SYMBOL}, got {code}",
                symbol=code,
            )
            return

        pattern, width = SYMBOL_PATTERNS[code]
        self.sink.write_modules(pattern, width)
        self._check_overflow(code)

        weight = self.symbol_count if self.symbol_count else 1
        self.checksum = (self.checksum + weight * code) % 103
        self.symbol_count += 1
        self.symbols.append(code)

    def change_code(self, target: CodeSet) -> None:
        """
        Switch to another code set.

        From NONE this emits the START symbol for the target; otherwise the
        in-stream CODE A/B/C switch. NONE and STOP are never valid targets.
        """
        if self.error or target is self.code_set:
            return

        if (
            self.code_set is CodeSet.STOP
            or target is CodeSet.NONE
            or target is CodeSet.STOP
        ):
            self._flag(
                ErrorCode.INVALID_TRANSITION,
                f"Cannot change code set from {self.code_set.value} to {target.value}",
            )
            return

        if self.code_set is CodeSet.NONE:
            self.append_symbol(_START_SYMBOLS[target])
        else:
            self.append_symbol(_SWITCH_SYMBOLS[target])
        self.code_set = target

    def append(
        self,
        text: TextInput,
        fixed_code: Union[None, str, CodeSet] = None,
        encoding: str = "utf-8",
    ) -> None:
        """
        Append text, choosing code sets automatically unless one is fixed.

        Bytes with the high bit set cannot be encoded; each one is recorded
        as an error and skipped.
        """
        data = _to_bytes(text, encoding)
        fixed = coerce_code_set(fixed_code)

        if data and self.code_set is CodeSet.STOP:
            self._flag(ErrorCode.POST_TERMINAL, "Text appended after STOP", at_index=0)
            return

        i = 0
        while i < len(data):
            c0 = data[i]
            ahead = data[i + 1:i + 4]

            if c0 >= 0x80:
                self._flag(
                    ErrorCode.UNENCODABLE_BYTE,
                    f"Byte 0x{c0:02X} at index {i} is not ASCII",
                    at_index=i,
                )
                i += 1
                continue

            required: Optional[CodeSet] = None
            if c0 < 0x20:
                required = CodeSet.A
            elif c0 >= 0x27:
                required = CodeSet.B
            if fixed is not None:
                required = fixed

            if fixed is None and self._should_compact(c0, ahead):
                self.change_code(CodeSet.C)
                self.append_symbol((c0 - 0x30) * 10 + (ahead[0] - 0x30))
                i += 2
                continue

            self.change_code(required or CodeSet.B)
            if c0 < 0x20:
                self.append_symbol(c0 + 64)
            else:
                self.append_symbol(c0 - 32)
            i += 1

    def _should_compact(self, c0: int, ahead: bytes) -> bool:
        # A pair is worth Code C unless already in A/B and fewer than four digits follow.
        if c0 not in _DIGITS or len(ahead) < 1 or ahead[0] not in _DIGITS:
            return False
        run_of_four = len(ahead) >= 3 and ahead[1] in _DIGITS and ahead[2] in _DIGITS
        if not run_of_four and self.code_set in (CodeSet.A, CodeSet.B):
            return False
        return True

    def finalize(self) -> None:
        """
        Append the check symbol and STOP.

        An empty barcode still gets START B so it scans. Calling this again
        after STOP does nothing.
        """
        if self.code_set is CodeSet.STOP:
            return

        if self.code_set is CodeSet.NONE:
            self.change_code(CodeSet.B)

        check = self.checksum
        if not self.error:
            self.check_symbol = check
        self.append_symbol(check)

        self.append_symbol(STOP)
        self.code_set = CodeSet.STOP


def encode(
    text: TextInput,
    buffer: Optional[bytearray] = None,
    *,
    options: Optional[EncodeOptions] = None,
    fixed_code: Union[None, str, CodeSet] = None,
    quiet_zone: Optional[int] = None,
    capacity: Optional[int] = None,
) -> EncodeResult:
    """
    Encode text as a CODE128 module bitmap.

    Main entry point for the encoder.

    Args:
        text: Text to encode (str is encoded with options.encoding)
        buffer: Output buffer; allocated for the worst case if omitted
        options: Optional encoding configuration
        fixed_code: Shortcut overriding options.fixed_code
        quiet_zone: Shortcut overriding options.quiet_zone
        capacity: Bytes of `buffer` that may be written (default: all)

    Returns:
        EncodeResult; check `error` before using the bitmap

    Examples:
        >>> result = encode("A")
        >>> result.symbols
        [104, 33, 34, 106]
        >>> result.bit_length
        46
    """
    opts = options or EncodeOptions()
    if fixed_code is not None:
        opts = replace(opts, fixed_code=coerce_code_set(fixed_code))
    else:
        opts = replace(opts, fixed_code=coerce_code_set(opts.fixed_code))
    if quiet_zone is not None:
        opts = replace(opts, quiet_zone=quiet_zone)
    if opts.quiet_zone < 0:
        raise ValueError(f"Quiet zone width must be >= 0, got {opts.quiet_zone}")

    data = _to_bytes(text, opts.encoding)
    if buffer is None:
        buffer = bytearray(bitmap_size(max_symbols_mixed(len(data)), opts.quiet_zone))

    encoder = Code128Encoder(buffer, capacity)
    encoder.add_quiet_zone(opts.quiet_zone)
    encoder.append(data, opts.fixed_code)
    encoder.finalize()
    encoder.add_quiet_zone(opts.quiet_zone)

    return EncodeResult(
        text=text if isinstance(text, str) else data.decode("latin-1"),
        buffer=buffer,
        bit_length=encoder.bit_length,
        quiet_zone=opts.quiet_zone,
        symbols=list(encoder.symbols),
        check_symbol=encoder.check_symbol,
        fixed_code=opts.fixed_code,
        error=encoder.error,
        errors=list(encoder.errors),
    )
