"""
Tests for JSON introspection output.

Ensures the dump carries:
- Every symbol with its code set and meaning
- Check symbol, bit length and error state
- The module string
"""

import json
from code128 import encode, encode_to_json, format_barcode_json
from code128.formatters import barcode_to_dict


class TestJSONOutput:
    """Test JSON output formatting."""

    def test_basic_json_output(self):
        data = json.loads(encode_to_json("A"))

        assert data["text"] == "A"
        assert data["check_symbol"] == 34
        assert data["bit_length"] == 46
        assert data["error"] is False
        assert len(data["modules"]) == 46

    def test_symbol_meanings(self):
        data = json.loads(encode_to_json("A"))

        assert [s["meaning"] for s in data["symbols"]] == ["START B", "A", "CHECK", "STOP"]
        assert [s["symbol"] for s in data["symbols"]] == [104, 33, 34, 106]

    def test_code_c_pairs(self):
        data = json.loads(encode_to_json("1234"))

        assert [s["meaning"] for s in data["symbols"]] == ["START C", "12", "34", "CHECK", "STOP"]
        assert data["symbols"][1]["code_set"] == "C"

    def test_control_characters(self):
        data = json.loads(encode_to_json("\n"))

        assert data["symbols"][1]["meaning"] == "^J"
        assert data["symbols"][1]["code_set"] == "A"

    def test_code_switch(self):
        data = json.loads(encode_to_json("AB1234CD"))
        meanings = [s["meaning"] for s in data["symbols"]]

        assert meanings[3] == "CODE C"
        assert meanings[6] == "CODE B"
        assert data["symbols"][7]["code_set"] == "B"

    def test_without_modules(self):
        data = barcode_to_dict(encode("A"), include_modules=False)

        assert "modules" not in data

    def test_errors_in_output(self):
        data = json.loads(format_barcode_json(encode(b"A\xff")))

        assert data["error"] is True
        assert data["errors"][0]["code"] == "UNENCODABLE_BYTE"
        assert data["errors"][0]["at_index"] == 1
        assert data["check_symbol"] is None
        assert all(s["meaning"] != "CHECK" for s in data["symbols"])

    def test_fixed_code_in_output(self):
        data = json.loads(encode_to_json("12", fixed_code="B"))

        assert data["fixed_code"] == "B"
