# tests/test_fmt.py
from __future__ import annotations

import io

from ratio.fmt import format_ratio, format_reduction, paint, strip_ansi, use_color
from ratio.reducer import Ratio, reduce_pair
from ratio.runtime import APPLY


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_format_ratio_default_and_custom_separator():
    assert format_ratio(Ratio(3, 4)) == "3:4"
    assert format_ratio(Ratio(3, 4), sep=" to ") == "3 to 4"


def test_plain_text_off_terminal():
    assert use_color(io.StringIO()) is False
    assert paint("x", "\x1b[31m", io.StringIO()) == "x"


def test_colour_on_terminal_unless_disabled():
    tty = _Tty()
    coloured = paint("HCF:", "\x1b[36m", tty)
    assert coloured != "HCF:"
    assert strip_ansi(coloured) == "HCF:"

    APPLY({"OUTPUT": {"COLOR": False}})
    assert paint("HCF:", "\x1b[36m", tty) == "HCF:"


def test_format_reduction_strips_to_plain_lines():
    lines = format_reduction(reduce_pair(360, 480), _Tty())
    assert [strip_ansi(s) for s in lines][2:] == [
        "Common:      [1, 2, 3, 4, 5, 6, 8, 10, 12, 15, 20, 24, 30, 40, 60, 120]",
        "HCF:         120",
    ]
