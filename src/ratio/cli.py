# src/ratio/cli.py

"""
ratio - reduce a numerator/denominator pair to lowest terms

    $ ratio 360 480
    3:4

Both arguments must be unsigned 32-bit integers greater than zero. The
highest common factor is found by intersecting the factor lists of both
numbers; --factors shows that working.
"""

from __future__ import annotations

import argparse
import sys

from colorama import Fore
from colorama import init as colorama_init

from ratio import __version__ as _ver
from ratio.config import ConfigError, load_settings
from ratio.fmt import debug, format_ratio, format_reduction, paint, print_usage, print_user_error, use_color
from ratio.reducer import reduce_pair
from ratio.runtime import APPLY, CFG
from ratio.runtime import reset as _rt_reset
from ratio.utility import (
    USAGE_LINE,
    InvalidNumberError,
    MissingArgumentsError,
    UserInputError,
    flatten_dotted,
    parse_positive,
    typename,
)

_TWO_ARGS = 2
_COLOR_READY = False


# ---- argparse ----
def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ratio",
        description="Reduce a numerator/denominator pair to its simplest integer ratio.",
        usage=USAGE_LINE,
    )
    p.add_argument("items", nargs="*", metavar="<numerator> <denominator>",
                   help="two positive integers (at most 4294967295)")
    p.add_argument("--factors", action="store_true",
                   help="also print both factor lists, the common factors and the HCF")
    p.add_argument("--config", default=None, metavar="PATH",
                   help="read settings from PATH instead of the workspace settings.toml")
    p.add_argument("--debug", action="store_true", help="Show settings and internal trace info on stderr")
    p.add_argument("--version", action="version", version=f"ratio {_ver}")
    return p


def _positionals(argv: list[str], items: list[str], unknown: list[str]) -> list[str]:
    """
    Merge argparse positionals and unrecognised tokens back into argv order.

    Tokens such as '-x' or '-1e3' look like options to argparse; here they
    become ordinary arguments so number parsing reports them.
    """
    items, unknown = list(items), list(unknown)
    out: list[str] = []
    for tok in argv:
        if items and tok == items[0]:
            out.append(items.pop(0))
        elif unknown and tok == unknown[0]:
            out.append(unknown.pop(0))
    return out + items + unknown


def _init_color() -> None:
    """Install colorama once, if either stream will be coloured."""
    global _COLOR_READY
    if _COLOR_READY:
        return
    if use_color(sys.stdout) or use_color(sys.stderr):
        colorama_init(autoreset=True)
        _COLOR_READY = True


def main(argv=None) -> int:
    """Thin wrapper: catch friendly errors, hide tracebacks unless debug."""
    try:
        return _main_impl(argv)
    except ConfigError as e:
        print_user_error(f"{paint('Error:', Fore.RED, sys.stderr)} {e}")
        return 2
    except UserInputError as e:
        if isinstance(e, InvalidNumberError):
            debug(f"could not parse {e.role}: {e.text!r}")
        print_user_error(str(e))
        print_usage()
        return 2
    except KeyboardInterrupt:
        print("Aborted by user.", file=sys.stderr)
        return 130
    except Exception as e:
        debug_flag = "--debug" in (argv if argv is not None else sys.argv)
        if debug_flag or CFG("BEHAVIOUR.DEBUG", False):
            raise
        print(f"Unexpected error: {e.__class__.__name__}: {e}", file=sys.stderr)
        print("Run with --debug for a full traceback.", file=sys.stderr)
        return 1


# ---- main ----
def _main_impl(argv=None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()
    args, unknown = parser.parse_known_args(argv)
    items = _positionals(argv, args.items, unknown)

    rt = _rt_reset()
    rt.debug = bool(args.debug)

    selected = load_settings(args.config)
    APPLY(selected)

    _init_color()

    if rt.debug:
        src_path = getattr(selected, "_source", None)
        debug(f"settings: {src_path if src_path else 'built-in defaults'} (profile {rt.profile_name})")
        flat = flatten_dotted(rt.settings)
        for k in sorted(flat, key=str.lower):
            v = flat[k]
            debug(f"  {k:.<30} {v!r} ({typename(v)})")

    if len(items) < _TWO_ARGS:
        raise MissingArgumentsError()
    if len(items) > _TWO_ARGS:
        debug(f"ignoring extra arguments: {' '.join(items[_TWO_ARGS:])}")

    numerator = parse_positive(items[0], "numerator")
    denominator = parse_positive(items[1], "denominator")
    debug(f"numerator={numerator} denominator={denominator}")

    red = reduce_pair(numerator, denominator)
    debug(f"hcf={red.hcf} common factors={len(red.common)}")

    if args.factors or CFG("BEHAVIOUR.SHOW_FACTORS", False):
        for line in format_reduction(red, sys.stdout):
            print(line)

    print(format_ratio(red.ratio))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
