"""
CODE128 Symbol Table

The 107 standard CODE128 symbols (ISO/IEC 15417), indexed by symbol code.

Each entry is written as the alternating bar/space widths of the symbol,
starting with a bar. Codes 0-105 are six elements summing to 11 modules;
code 106 (STOP) is seven elements summing to 13 modules.

The module patterns are derived once at import and never change:
- Module value 0 = dark (bar), 1 = light (space)
- The most significant bit of a pattern is the first module drawn
"""

from __future__ import annotations

from typing import Dict, Tuple


SYMBOL_WIDTH = 11
STOP_WIDTH = 13

# In-stream code set switches
CODE_C = 99
CODE_B = 100
CODE_A = 101

# Start symbols (first symbol only) and the stop symbol (last symbol only)
START_A = 103
START_B = 104
START_C = 105
STOP = 106

MAX_SYMBOL = STOP


# Bar/space widths, BSBSBS(B)
#              code  A     B     C
SYMBOL_WIDTHS: Tuple[str, ...] = (
    "212222",  #   0  SP    SP    00
    "222122",  #   1  !     !     01
    "222221",  #   2  "     "     02
    "121223",  #   3  #     #     03
    "121322",  #   4  $     $     04
    "131222",  #   5  %     %     05
    "122213",  #   6  &     &     06
    "122312",  #   7  '     '     07
    "132212",  #   8  (     (     08
    "221213",  #   9  )     )     09
    "221312",  #  10  *     *     10
    "231212",  #  11  +     +     11
    "112232",  #  12  ,     ,     12
    "122132",  #  13  -     -     13
    "122231",  #  14  .     .     14
    "113222",  #  15  /     /     15
    "123122",  #  16  0     0     16
    "123221",  #  17  1     1     17
    "223211",  #  18  2     2     18
    "221132",  #  19  3     3     19
    "221231",  #  20  4     4     20
    "213212",  #  21  5     5     21
    "223112",  #  22  6     6     22
    "312131",  #  23  7     7     23
    "311222",  #  24  8     8     24
    "321122",  #  25  9     9     25
    "321221",  #  26  :     :     26
    "312212",  #  27  ;     ;     27
    "322112",  #  28  <     <     28
    "322211",  #  29  =     =     29
    "212123",  #  30  >     >     30
    "212321",  #  31  ?     ?     31
    "232121",  #  32  @     @     32
    "111323",  #  33  A     A     33
    "131123",  #  34  B     B     34
    "131321",  #  35  C     C     35
    "112313",  #  36  D     D     36
    "132113",  #  37  E     E     37
    "132311",  #  38  F     F     38
    "211313",  #  39  G     G     39
    "231113",  #  40  H     H     40
    "231311",  #  41  I     I     41
    "112133",  #  42  J     J     42
    "112331",  #  43  K     K     43
    "132131",  #  44  L     L     44
    "113123",  #  45  M     M     45
    "113321",  #  46  N     N     46
    "133121",  #  47  O     O     47
    "313121",  #  48  P     P     48
    "211331",  #  49  Q     Q     49
    "231131",  #  50  R     R     50
    "213113",  #  51  S     S     51
    "213311",  #  52  T     T     52
    "213131",  #  53  U     U     53
    "311123",  #  54  V     V     54
    "311321",  #  55  W     W     55
    "331121",  #  56  X     X     56
    "312113",  #  57  Y     Y     57
    "312311",  #  58  Z     Z     58
    "332111",  #  59  [     [     59
    "314111",  #  60  \     \     60
    "221411",  #  61  ]     ]     61
    "431111",  #  62  ^     ^     62
    "111224",  #  63  _     _     63
    "111422",  #  64  NUL   `     64
    "121124",  #  65  SOH   a     65
    "121421",  #  66  STX   b     66
    "141122",  #  67  ETX   c     67
    "141221",  #  68  EOT   d     68
    "112214",  #  69  ENQ   e     69
    "112412",  #  70  ACK   f     70
    "122114",  #  71  BEL   g     71
    "122411",  #  72  BS    h     72
    "142112",  #  73  HT    i     73
    "142211",  #  74  LF    j     74
    "241211",  #  75  VT    k     75
    "221114",  #  76  FF    l     76
    "413111",  #  77  CR    m     77
    "241112",  #  78  SO    n     78
    "134111",  #  79  SI    o     79
    "111242",  #  80  DLE   p     80
    "121142",  #  81  DC1   q     81
    "121241",  #  82  DC2   r     82
    "114212",  #  83  DC3   s     83
    "124112",  #  84  DC4   t     84
    "124211",  #  85  NAK   u     85
    "411212",  #  86  SYN   v     86
    "421112",  #  87  ETB   w     87
    "421211",  #  88  CAN   x     88
    "212141",  #  89  EM    y     89
    "214121",  #  90  SUB   z     90
    "412121",  #  91  ESC   {     91
    "111143",  #  92  FS    |     92
    "111341",  #  93  GS    }     93
    "131141",  #  94  RS    ~     94
    "114113",  #  95  US    DEL   95
    "114311",  #  96  FNC3  FNC3  96
    "411113",  #  97  FNC2  FNC2  97
    "411311",  #  98  SHFT  SHFT  98
    "113141",  #  99  CODC  CODC  99
    "114131",  # 100  CODB  FNC4  CODB
    "311141",  # 101  FNC4  CODA  CODA
    "411131",  # 102  FNC1  FNC1  FNC1
    "211412",  # 103  STRA  STRA  STRA
    "211214",  # 104  STRB  STRB  STRB
    "211232",  # 105  STRC  STRC  STRC
    "2331112", # 106  STOP  STOP  STOP
)


def _widths_to_pattern(widths: str) -> Tuple[int, int]:
    """Expand a width string into (pattern, module_count), bars as 0 bits."""
    pattern = 0
    count = 0
    for i, width in enumerate(widths):
        light = i % 2  # even elements are bars
        for _ in range(int(width)):
            pattern = (pattern << 1) | light
            count += 1
    return pattern, count


SYMBOL_PATTERNS: Tuple[Tuple[int, int], ...] = tuple(
    _widths_to_pattern(widths) for widths in SYMBOL_WIDTHS
)

_PATTERN_TO_SYMBOL: Dict[Tuple[int, int], int] = {
    entry: code for code, entry in enumerate(SYMBOL_PATTERNS)
}


def symbol_pattern(code: int) -> Tuple[int, int]:
    """
    Look up a symbol's module pattern.

    Args:
        code: Symbol code 0-106

    Returns:
        (pattern, width) where width is 11, or 13 for STOP

    Raises:
        ValueError: If the code is outside 0-106
    """
    if not 0 <= code <= MAX_SYMBOL:
        raise ValueError(f"Symbol code must be 0-{MAX_SYMBOL}, got {code}")
    return SYMBOL_PATTERNS[code]


def symbol_for_pattern(pattern: int, width: int = SYMBOL_WIDTH) -> int:
    """
    Inverse lookup: module pattern to symbol code.

    Raises:
        ValueError: If no symbol has this pattern
    """
    try:
        return _PATTERN_TO_SYMBOL[(pattern, width)]
    except KeyError:
        raise ValueError(
            f"No CODE128 symbol with pattern {pattern:0{width}b}"
        ) from None
