"""
Text block renderer.

One character per module, repeated for a few rows so the barcode can be
scanned straight off a terminal.
"""

from __future__ import annotations

from ..core.bit_sink import module_is_light
from ..core.encoder import EncodeResult


FULL_BLOCK = "█"


def render_text(
    buffer,
    bit_length: int,
    rows: int = 5,
    light: str = FULL_BLOCK,
    dark: str = " ",
) -> str:
    """
    Render a packed bitmap as lines of text.

    The defaults draw light modules as full blocks, which suits a light on
    dark terminal. Swap `light` and `dark` for a dark on light one.

    Args:
        buffer: Packed module bitmap
        bit_length: Number of modules to draw
        rows: How many times to repeat the line
        light: Character for light modules
        dark: Character for dark modules

    Returns:
        The rendered rows joined by newlines (no trailing newline)
    """
    if rows < 1:
        raise ValueError(f"Rows must be >= 1, got {rows}")
    line = "".join(
        light if module_is_light(buffer, i) else dark
        for i in range(bit_length)
    )
    return "\n".join([line] * rows)


def format_barcode_text(result: EncodeResult, rows: int = 5, invert: bool = False) -> str:
    """Render an EncodeResult; `invert` draws dark modules as blocks instead."""
    if invert:
        return render_text(result.buffer, result.bit_length, rows, light=" ", dark=FULL_BLOCK)
    return render_text(result.buffer, result.bit_length, rows)
