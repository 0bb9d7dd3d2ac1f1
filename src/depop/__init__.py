"""Depop — remocao de pops de amostra unica em audio gravado."""

from __future__ import annotations

from depop.preprocessing.declick import bounds_for_bit_depth, bounds_for_dtype, detect_pops, repair

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "bounds_for_bit_depth",
    "bounds_for_dtype",
    "detect_pops",
    "repair",
]
