"""
PDF label export (monochrome).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from reportlab.lib.units import inch, mm
from reportlab.pdfgen import canvas

from ..core.bit_sink import module_is_light
from ..core.encoder import EncodeResult


DEFAULT_MODULE_WIDTH = 0.33 * mm
DEFAULT_BAR_HEIGHT = 0.5 * inch
MARGIN = 0.125 * inch
CAPTION_SIZE = 8


def dark_runs(buffer, bit_length: int) -> Iterator[Tuple[int, int]]:
    """Yield (start, length) for each run of dark modules."""
    start = None
    for i in range(bit_length):
        if not module_is_light(buffer, i):
            if start is None:
                start = i
        elif start is not None:
            yield start, i - start
            start = None
    if start is not None:
        yield start, bit_length - start


def _draw_bars(
    c: canvas.Canvas,
    result: EncodeResult,
    x: float,
    y: float,
    module_width: float,
    bar_height: float,
) -> None:
    c.setFillGray(0)
    for start, length in dark_runs(result.buffer, result.bit_length):
        c.rect(x + start * module_width, y, length * module_width, bar_height, fill=1, stroke=0)


def export_pdf_label(
    result: EncodeResult,
    path: Union[str, Path],
    module_width: float = DEFAULT_MODULE_WIDTH,
    bar_height: float = DEFAULT_BAR_HEIGHT,
    caption: Optional[str] = None,
    show_caption: bool = True,
) -> Path:
    """
    Write the barcode as a single-page PDF label sized to fit.

    Args:
        result: Encoding result
        path: Output file
        module_width: Width of one module in points
        bar_height: Bar height in points
        caption: Human-readable line under the bars (default: the text)
        show_caption: Draw the caption

    Returns:
        The written path
    """
    if module_width <= 0 or bar_height <= 0:
        raise ValueError("Module width and bar height must be positive")

    path = Path(path)
    text = result.text if caption is None else caption
    caption_height = (CAPTION_SIZE + 4) if show_caption and text else 0

    width = result.bit_length * module_width + 2 * MARGIN
    height = bar_height + caption_height + 2 * MARGIN

    c = canvas.Canvas(str(path), pagesize=(width, height))
    c.setTitle(text or "CODE128")
    _draw_bars(c, result, MARGIN, MARGIN + caption_height, module_width, bar_height)

    if caption_height:
        c.setFont("Helvetica", CAPTION_SIZE)
        c.drawCentredString(width / 2, MARGIN + 2, text)

    c.showPage()
    c.save()
    return path
