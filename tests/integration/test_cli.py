"""
Tests for the command line interface and address preprocessing.
"""

import json
import logging

import pytest
from code128 import encode
from code128.__main__ import main
from code128.log import configure_logging, logger
from code128.address import (
    address_to_decimal,
    format_address,
    is_address,
    parse_address,
)


class TestAddress:
    """Tests for hex address to decimal conversion."""

    def test_address_to_decimal(self):
        assert address_to_decimal("01:23:45:67:89:AB") == "01250999896491"

    def test_top_bits_masked(self):
        """Only 46 bits are kept, so the decimal never exceeds 14 digits."""
        assert address_to_decimal("FF:FF:FF:FF:FF:FF") == "70368744177663"

    def test_not_an_address(self):
        assert address_to_decimal("HELLO") is None
        assert address_to_decimal("01-23-45-67-89-AB") is None
        assert not is_address("01:23:45:67:89:AB:CD")

    def test_bad_hex(self):
        with pytest.raises(ValueError):
            address_to_decimal("0G:23:45:67:89:AB")

    def test_format_address(self):
        assert format_address(parse_address("01:23:45:67:89:ab")) == "01:23:45:67:89:ab"


class TestCLI:
    """Tests for python -m code128."""

    def test_text_output(self, capsys):
        assert main(["A", "--no-quiet", "--rows", "1"]) == 0

        line = capsys.readouterr().out.rstrip("\n")
        expected = encode("A").modules().replace("1", "█").replace("0", " ")
        assert line == expected

    def test_quiet_zone_default(self, capsys):
        main(["A", "--rows", "1"])

        line = capsys.readouterr().out.rstrip("\n")
        assert len(line) == 66
        assert line.startswith("█" * 10)

    def test_json_output(self, capsys):
        assert main(["1234", "--json", "--no-quiet"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["symbols"][0]["meaning"] == "START C"
        assert data["quiet_zone"] == 0

    def test_fixed_code(self, capsys):
        main(["1234", "--json", "--code", "B"])

        data = json.loads(capsys.readouterr().out)
        assert data["symbols"][0]["meaning"] == "START B"

    def test_address_converted(self, capsys):
        main(["01:23:45:67:89:AB", "--rows", "1"])

        out = capsys.readouterr().out
        assert "Address: 01:23:45:67:89:ab" in out
        assert "Decimal: 01250999896491" in out

    def test_address_conversion_disabled(self, capsys):
        main(["01:23:45:67:89:AB", "--json", "--no-address"])

        data = json.loads(capsys.readouterr().out)
        assert data["text"] == "01:23:45:67:89:AB"

    def test_error_exit_code(self, capsys):
        assert main(["é"]) == 1

        assert "UNENCODABLE_BYTE" in capsys.readouterr().err

    def test_pdf_output(self, tmp_path, capsys):
        path = tmp_path / "label.pdf"

        assert main(["CODE128", "--pdf", str(path)]) == 0
        assert path.read_bytes().startswith(b"%PDF")

    def test_invalid_rows(self):
        with pytest.raises(SystemExit):
            main(["A", "--rows", "0"])

    def test_verbose_enables_debug(self, capsys):
        level = logger.level
        try:
            assert main(["A", "--json", "--verbose"]) == 0
            assert logger.level == logging.DEBUG
            json.loads(capsys.readouterr().out)
        finally:
            configure_logging(level)
