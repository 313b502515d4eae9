"""
Demo: JSON Introspection Output

Shows the symbol-by-symbol dump for a few typical inputs.
"""

import json
from code128 import encode_to_json


def demo_json_output():
    """Demonstrate the JSON dump for a handful of inputs."""

    print("=" * 80)
    print("  JSON INTROSPECTION DEMO")
    print("=" * 80)

    test_cases = [
        ("Empty barcode", ""),
        ("Single character", "A"),
        ("Numeric run (Code C)", "12345678"),
        ("Pair inside text (stays in Code B)", "AB12CD"),
        ("Control character (Code A)", "LINE\n2"),
    ]

    for title, text in test_cases:
        print(f"\n{title}")
        print("-" * 80)
        print(f"Input: {text!r}")

        data = json.loads(encode_to_json(text, include_modules=False))
        meanings = " ".join(s["meaning"] for s in data["symbols"])
        print(f"Symbols:  {meanings}")
        print(f"Modules:  {data['bit_length']}")
        print(f"Error:    {data['error']}")


if __name__ == "__main__":
    demo_json_output()
