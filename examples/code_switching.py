"""
Demo script for code set selection

Compares barcode widths for inputs that exercise Code C compaction, and
prints each barcode to the terminal.
"""

from code128 import encode, render_text, DEFAULT_QUIET_ZONE


def print_barcode(title, text, fixed_code=None):
    """Print one barcode with its symbol count and width."""
    result = encode(text, fixed_code=fixed_code, quiet_zone=DEFAULT_QUIET_ZONE)

    print("\n" + "=" * 80)
    print(f"  {title}")
    print("=" * 80)
    print(f"\nInput:    {text!r}")
    print(f"Code set: {fixed_code or 'auto'}")
    print(f"Symbols:  {len(result.symbols)} {result.symbols}")
    print(f"Modules:  {result.bit_length}")
    print()
    print(render_text(result.buffer, result.bit_length, rows=3))


def main():
    print_barcode("Digits, automatic", "0123456789")
    print_barcode("Digits, forced Code B", "0123456789", fixed_code="B")
    print_barcode("Isolated pair", "ITEM12X")
    print_barcode("Four-digit run", "ITEM1234X")
    print_barcode("Odd digit count", "12345")


if __name__ == "__main__":
    main()
