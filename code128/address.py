"""
Hardware address to decimal conversion.

Device labels carry a 6-byte address such as "01:23:45:67:89:AB". Printed
as hex it needs Code B throughout; as a 14-digit decimal it packs into
Code C pairs and gives a much shorter barcode.
"""

from __future__ import annotations

from typing import Optional


ADDRESS_LENGTH = 17
ADDRESS_BITS = 46
DECIMAL_DIGITS = 14  # 2**46 - 1 = 70368744177663

_COLON_POSITIONS = (2, 5, 8, 11, 14)


def is_address(value: str) -> bool:
    """True if value has the "xx:xx:xx:xx:xx:xx" shape."""
    return len(value) == ADDRESS_LENGTH and all(
        value[i] == ":" for i in _COLON_POSITIONS
    )


def parse_address(value: str) -> int:
    """
    Parse an address into a 46-bit integer (the top two bits are masked off).

    Raises:
        ValueError: If the value is not an address or a byte is not hex
    """
    if not is_address(value):
        raise ValueError(f"Not an address: {value!r}")

    address = 0
    for part in value.split(":"):
        address = (address << 8) | int(part, 16)
    return address & ((1 << ADDRESS_BITS) - 1)


def format_address(address: int) -> str:
    return ":".join(
        f"{(address >> shift) & 0xFF:02x}" for shift in range(40, -8, -8)
    )


def address_to_decimal(value: str) -> Optional[str]:
    """
    Convert an address to its zero-padded 14-digit decimal form.

    Returns:
        The decimal string, or None if value is not an address
    """
    if not is_address(value):
        return None
    return f"{parse_address(value):0{DECIMAL_DIGITS}d}"
