# -----------------------------------------------------------------------------
#  reducer.py
#  Reduce a numerator/denominator pair by their highest common factor
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from ratio.factors import Factors, common_factors, factors_of, highest_common_factor


@dataclass(frozen=True, slots=True)
class Ratio:
    numerator: int
    denominator: int

    @classmethod
    def from_pair(cls, numerator: int, denominator: int) -> Ratio:
        """Reduce (numerator, denominator) by their highest common factor."""
        return reduce_pair(numerator, denominator).ratio

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def __str__(self) -> str:
        return f"{self.numerator}:{self.denominator}"


@dataclass(frozen=True, slots=True)
class Reduction:
    """Every intermediate value of one reduction, for display."""
    numerator: int
    denominator: int
    numerator_factors: Factors
    denominator_factors: Factors
    common: Factors
    hcf: int
    ratio: Ratio


def reduce_pair(numerator: int, denominator: int) -> Reduction:
    """
    Factor both values, intersect the factor lists and divide both values
    by the last (largest) common factor.

    No validation happens here. The only guard: a zero HCF, which needs
    both inputs to be 0, raises ZeroDivisionError.
    """
    fa = factors_of(numerator)
    fb = factors_of(denominator)
    common = common_factors(fa, fb)
    hcf = highest_common_factor(fa, fb)
    if hcf == 0:
        raise ZeroDivisionError(
            f"highest common factor of {numerator} and {denominator} is 0"
        )
    ratio = Ratio(numerator // hcf, denominator // hcf)
    return Reduction(
        numerator=numerator,
        denominator=denominator,
        numerator_factors=fa,
        denominator_factors=fb,
        common=common,
        hcf=hcf,
        ratio=ratio,
    )
