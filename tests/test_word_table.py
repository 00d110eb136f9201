import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from shortscale.word_table import SENTINEL, lookup


def test_lookup_atoms():
    assert lookup(0) == "zero"
    assert lookup(19) == "nineteen"
    assert lookup(90) == "ninety"
    assert lookup(100) == "hundred"
    assert lookup(1_000_000_000_000_000) == "quadrillion"


def test_lookup_unknown_returns_sentinel():
    assert SENTINEL == "(big number)"
    assert lookup(21) == SENTINEL
    assert lookup(10**18) == SENTINEL
