from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

# Version
try:
    __version__ = _pkg_version("ratio")
except PackageNotFoundError:
    __version__ = "0+unknown"

# Public API re-exports
from .config import load_settings
from .factors import Factors, common_factors, factors_of, highest_common_factor
from .reducer import Ratio, Reduction, reduce_pair
from .runtime import APPLY, CFG

__all__ = [
    "APPLY",
    "CFG",
    "Factors",
    "Ratio",
    "Reduction",
    "__version__",
    "common_factors",
    "factors_of",
    "highest_common_factor",
    "load_settings",
    "reduce_pair",
]
