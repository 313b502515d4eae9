"""
CLI interface for CODE128 encoder.

Usage:
    python -m code128 "<text>" [options]

Options:
    --code {A,B,C}     Force a single code set
    --quiet N          Quiet zone width in modules (default 10)
    --no-quiet         No quiet zone
    --rows N           Rows of text output
    --invert           Draw dark modules as blocks
    --json             Output introspection dump as JSON
    --pdf PATH         Also write a PDF label
    --no-address       Don't convert "xx:xx:xx:xx:xx:xx" addresses to decimal
    --verbose          Debug logging on stderr
"""

import argparse
import logging
import sys
from typing import Optional

from .address import address_to_decimal, format_address, parse_address
from .core.bit_sink import DEFAULT_QUIET_ZONE
from .core.encoder import EncodeOptions, EncodeResult, coerce_code_set, encode
from .formatters.json_formatter import format_barcode_json
from .formatters.pdf_formatter import export_pdf_label
from .formatters.text_formatter import format_barcode_text
from .log import configure_logging, logger


def format_errors(result: EncodeResult) -> str:
    """Format recorded errors for display."""
    lines = ["Errors:", "-" * 40]
    for error in result.errors:
        lines.append(f"  [{error.code}] {error.message}")
        if error.at_index is not None:
            lines.append(f"    at index: {error.at_index}")
    return '\n'.join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='code128',
        description='Encode text as a CODE128 barcode'
    )

    parser.add_argument(
        'text',
        help='Text to encode'
    )

    parser.add_argument(
        '--code',
        choices=['A', 'B', 'C', 'auto'],
        default='auto',
        help='Force a single code set (default: automatic)'
    )

    parser.add_argument(
        '--quiet',
        type=int,
        default=DEFAULT_QUIET_ZONE,
        help='Quiet zone width in modules on each side'
    )

    parser.add_argument(
        '--no-quiet',
        action='store_true',
        help='Omit the quiet zone'
    )

    parser.add_argument(
        '--rows',
        type=int,
        default=5,
        help='Number of text rows to print'
    )

    parser.add_argument(
        '--invert',
        action='store_true',
        help='Draw dark modules as blocks (for dark on light terminals)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output encoding details as JSON'
    )

    parser.add_argument(
        '--pdf',
        default=None,
        help='Write a PDF label to this path'
    )

    parser.add_argument(
        '--no-address',
        action='store_true',
        help='Disable address to decimal conversion'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log encoder details at debug level'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.DEBUG)

    if args.quiet < 0:
        parser.error("--quiet must be >= 0")
    if args.rows < 1:
        parser.error("--rows must be >= 1")

    text = args.text
    if not args.no_address:
        try:
            decimal = address_to_decimal(text)
        except ValueError as exc:
            parser.error(str(exc))
        if decimal is not None:
            if not args.json:
                print(f"Address: {format_address(parse_address(text))}")
                print(f"Decimal: {decimal}")
            text = decimal

    options = EncodeOptions(
        fixed_code=coerce_code_set(args.code),
        quiet_zone=0 if args.no_quiet else args.quiet,
    )

    result = encode(text, options=options)

    if args.json:
        print(format_barcode_json(result))
    else:
        print(format_barcode_text(result, rows=args.rows, invert=args.invert))

    if args.pdf:
        path = export_pdf_label(result, args.pdf)
        logger.info("Wrote %s", path)

    if result.error:
        logger.warning("Barcode produced under an error condition; it may not scan")
        if not args.json:
            print(format_errors(result), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
