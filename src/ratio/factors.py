# -----------------------------------------------------------------------------
#  factors.py
#  Factor enumeration, common factors and the highest common factor
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from math import isqrt


@dataclass(frozen=True, slots=True)
class Factors:
    """Ordered sequence of factors, rendered as ``[1, 2, 3]``."""
    values: tuple[int, ...]

    def __init__(self, values: Iterable[int] = ()):
        object.__setattr__(self, "values", tuple(int(v) for v in values))

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, i):
        return self.values[i]

    def __contains__(self, x: object) -> bool:
        return x in self.values

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Factors):
            return self.values == other.values
        if isinstance(other, (list, tuple)):
            return list(self.values) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.values)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.values) + "]"

    def __repr__(self) -> str:
        return f"Factors({list(self.values)!r})"

    def last(self, default: int = 0) -> int:
        return self.values[-1] if self.values else default


def factors_of(n: int) -> Factors:
    """
    All positive factors of n in ascending order.

    1 always comes first and n always comes last, so factors_of(1) is
    [1, 1] and factors_of(0) is [1, 0]. Trial division stops at isqrt(n);
    each small divisor i contributes its partner n // i.
    """
    n = int(n)
    if n < 2:
        return Factors((1, n))

    low: list[int] = []
    high: list[int] = []
    for i in range(2, isqrt(n) + 1):
        if n % i == 0:
            low.append(i)
            j = n // i
            if j != i:
                high.append(j)
    high.reverse()
    return Factors([1, *low, *high, n])


def common_factors(a: Iterable[int], b: Iterable[int]) -> Factors:
    """Elements of a (order and multiplicity kept) that also occur in b."""
    other = set(b)
    return Factors(x for x in a if x in other)


def highest_common_factor(a: Iterable[int], b: Iterable[int]) -> int:
    """Last common factor; 0 if a and b share none."""
    return common_factors(a, b).last(default=0)
