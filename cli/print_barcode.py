#!/usr/bin/env python3
"""
Simple CLI for printing a CODE128 barcode to the terminal.

Usage:
    python print_barcode.py "HELLO123456"
    python print_barcode.py "01:23:45:67:89:AB"

Output:
    Five rows of block characters with a 10-module quiet zone
"""

import sys
from pathlib import Path

# Add parent directory to path to import code128
sys.path.insert(0, str(Path(__file__).parent.parent))

from code128 import address_to_decimal, encode, render_text, DEFAULT_QUIET_ZONE


def main():
    """Main CLI entry point."""
    if len(sys.argv) != 2:
        print("ERROR: Single parameter not specified.", file=sys.stderr)
        print("\nExample:")
        print('  python print_barcode.py "HELLO123456"')
        sys.exit(1)

    value = sys.argv[1]

    decimal = address_to_decimal(value)
    if decimal is not None:
        print(f"Decimal: {decimal}")
        value = decimal

    result = encode(value, quiet_zone=DEFAULT_QUIET_ZONE)
    print(render_text(result.buffer, result.bit_length))

    if result.error:
        sys.exit(1)


if __name__ == "__main__":
    main()
