# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

import re

U32_MAX = 4_294_967_295
USAGE_LINE = "ratio <numerator> <denominator>"
USAGE = f"Usage: {USAGE_LINE}"

# optional leading '+', ASCII digits only (no spaces, no '_', no '-')
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


class UserInputError(Exception):
    pass


class MissingArgumentsError(UserInputError):
    def __init__(self) -> None:
        super().__init__("")


class InvalidNumberError(UserInputError):
    def __init__(self, role: str, text: str | None = None):
        self.role = role
        self.text = text
        super().__init__(f"The {role} must be a positive integer.")


class ZeroInputError(UserInputError):
    def __init__(self, role: str):
        self.role = role
        super().__init__(f"The {role} must be greater than zero.")


def parse_unsigned(text: str, role: str) -> int:
    """
    Parse `text` as an unsigned 32-bit integer.

    Raises InvalidNumberError(role) for anything int() would be more lenient
    about: surrounding whitespace, underscores, signs other than '+', or a
    value above U32_MAX.
    """
    if not isinstance(text, str) or not _UNSIGNED_RE.fullmatch(text):
        raise InvalidNumberError(role, text)
    value = int(text)
    if value > U32_MAX:
        raise InvalidNumberError(role, text)
    return value


def parse_positive(text: str, role: str) -> int:
    """parse_unsigned() that also rejects 0."""
    value = parse_unsigned(text, role)
    if value == 0:
        raise ZeroInputError(role)
    return value


def typename(v: object) -> str:
    return type(v).__name__


def flatten_dotted(d: dict, prefix: str = "") -> dict[str, object]:
    out: dict[str, object] = {}
    for k, v in (d or {}).items():
        key = f"{prefix}.{k}" if prefix else str(k)
        if isinstance(v, dict):
            out.update(flatten_dotted(v, key))
        else:
            out[key] = v
    return out
