"""
Tests for text rendering and PDF label output.
"""

import pytest
from code128 import encode, render_text
from code128.formatters import format_barcode_text, export_pdf_label, dark_runs


class TestTextOutput:
    """Test block-character rendering."""

    def test_one_character_per_module(self):
        result = encode("A")

        text = render_text(result.buffer, result.bit_length, rows=1)

        assert len(text) == 46
        assert text == result.modules().replace("1", "█").replace("0", " ")

    def test_rows_repeat(self):
        result = encode("A", quiet_zone=10)

        lines = render_text(result.buffer, result.bit_length, rows=3).split("\n")

        assert len(lines) == 3
        assert lines[0] == lines[1] == lines[2]
        assert lines[0].startswith("█" * 10)

    def test_invert(self):
        result = encode("")

        plain = format_barcode_text(result, rows=1)
        inverted = format_barcode_text(result, rows=1, invert=True)

        assert inverted == plain.translate(str.maketrans({"█": " ", " ": "█"}))

    def test_custom_characters(self):
        result = encode("")

        assert render_text(result.buffer, result.bit_length, rows=1, light="1", dark="0") == result.modules()

    def test_rows_must_be_positive(self):
        result = encode("")

        with pytest.raises(ValueError):
            render_text(result.buffer, result.bit_length, rows=0)


class TestPDFOutput:
    """Test PDF label export."""

    def test_dark_runs(self):
        result = encode("")

        runs = list(dark_runs(result.buffer, result.bit_length))

        assert runs[0] == (0, 2)
        assert sum(length for _, length in runs) == result.modules().count("0")

    def test_writes_pdf(self, tmp_path):
        result = encode("CODE128", quiet_zone=10)

        path = export_pdf_label(result, tmp_path / "label.pdf")

        assert path.exists()
        assert path.read_bytes().startswith(b"%PDF")

    def test_rejects_bad_dimensions(self, tmp_path):
        result = encode("A")

        with pytest.raises(ValueError):
            export_pdf_label(result, tmp_path / "label.pdf", module_width=0)
