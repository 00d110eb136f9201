import logging
from dataclasses import dataclass
from typing import TextIO

from shortscale.word_table import SENTINEL, lookup

logger = logging.getLogger(__name__)

MAX_SUPPORTED = 999_999_999_999_999_999

# Largest first: groups are emitted most significant to least.
SCALES = (
    1_000_000_000_000_000,
    1_000_000_000_000,
    1_000_000_000,
    1_000_000,
    1_000,
)


def _check_number(num: int) -> None:
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError(f"Expected a non-negative int, got {type(num).__name__}")
    if num < 0:
        raise ValueError("Negative numbers are not supported")


def _append_hundreds(words: list[str], num: int) -> None:
    hundreds = num // 100 % 10
    if hundreds:
        words.append(lookup(hundreds))
        words.append(lookup(100))


def _append_tens_and_units(words: list[str], num: int, and_word: bool) -> None:
    remainder = num % 100
    if remainder == 0:
        return
    if and_word:
        words.append("and")
    if remainder <= 20:
        words.append(lookup(remainder))
        return
    tens, units = divmod(remainder, 10)
    words.append(lookup(tens * 10))
    if units:
        words.append(lookup(units))


def _append_scale(words: list[str], num: int, scale: int) -> None:
    group = num // scale % 1000
    if group == 0:
        return
    _append_hundreds(words, group)
    _append_tens_and_units(words, group, and_word=group >= 100)
    words.append(lookup(scale))


def _short_scale_words(num: int) -> list[str]:
    words: list[str] = []
    for scale in SCALES:
        _append_scale(words, num, scale)
    _append_hundreds(words, num)
    _append_tens_and_units(words, num, and_word=bool(words))
    return words


def format_short_scale(num: int) -> str:
    """Spell out ``num`` in English using the short scale.

    Numbers up to 999,999,999,999,999,999 are supported. Anything larger
    returns ``"(big number)"``.

        >>> format_short_scale(420_000_999_015)
        'four hundred and twenty billion nine hundred and ninety nine thousand and fifteen'
    """
    _check_number(num)
    if num <= 20:
        return lookup(num)
    if num > MAX_SUPPORTED:
        logger.debug("Number %d is above %d; using sentinel.", num, MAX_SUPPORTED)
        return SENTINEL
    return " ".join(_short_scale_words(num))


def write_short_scale(sink: TextIO, num: int) -> None:
    """Append the words for ``num`` to ``sink`` instead of returning them."""
    sink.write(format_short_scale(num))


@dataclass(frozen=True, slots=True)
class ShortScaleWords:
    """A number that renders as its short-scale words when formatted."""

    num: int

    def __post_init__(self) -> None:
        _check_number(self.num)

    def __str__(self) -> str:
        return format_short_scale(self.num)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def write_to(self, sink: TextIO) -> None:
        write_short_scale(sink, self.num)
