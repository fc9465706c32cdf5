# src/ratio/fmt.py
from __future__ import annotations

import re
import sys
from typing import TextIO

from colorama import Fore, Style

from ratio.factors import Factors
from ratio.reducer import Ratio, Reduction
from ratio.runtime import CFG
from ratio.runtime import current as _rt_current
from ratio.utility import USAGE

# Single source of truth for ANSI stripping
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(s: str) -> str:
    return ANSI_RE.sub("", s)


def use_color(stream: TextIO | None = None) -> bool:
    """Colour only when enabled in settings and the stream is a terminal."""
    if not CFG("OUTPUT.COLOR", True):
        return False
    stream = stream if stream is not None else sys.stdout
    try:
        return bool(stream.isatty())
    except Exception:
        return False


def paint(text: str, color: str, stream: TextIO | None = None) -> str:
    if not use_color(stream):
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def format_factors(factors: Factors) -> str:
    return str(factors)


def format_ratio(ratio: Ratio, sep: str | None = None) -> str:
    if sep is None:
        sep = CFG("OUTPUT.SEPARATOR", ":")
    return f"{ratio.numerator}{sep}{ratio.denominator}"


def format_reduction(red: Reduction, stream: TextIO | None = None) -> list[str]:
    """Lines showing the working behind a reduction (for --factors)."""
    def label(s: str) -> str:
        return paint(f"{s:<12}", Fore.CYAN, stream)

    return [
        f"{label(f'Factors {red.numerator}:')} {format_factors(red.numerator_factors)}",
        f"{label(f'Factors {red.denominator}:')} {format_factors(red.denominator_factors)}",
        f"{label('Common:')} {format_factors(red.common)}",
        f"{label('HCF:')} {paint(str(red.hcf), Fore.YELLOW + Style.BRIGHT, stream)}",
    ]


def debug(msg: str) -> None:
    """One [debug] line on stderr when the runtime debug flag is set."""
    if not _rt_current().debug:
        return
    print(f"{paint('[debug]', Fore.MAGENTA, sys.stderr)} {msg}", file=sys.stderr)


def print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    if msg:
        print(msg, file=sys.stderr)


def print_usage() -> None:
    print(USAGE, file=sys.stderr)
