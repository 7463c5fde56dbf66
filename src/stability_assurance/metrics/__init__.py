"""Class metric calculators (WMC, RFC, NOC, LOCM)."""

from .locm import class_locm, evaluate_locm
from .noc import count_children, evaluate_noc
from .registry import calculator_for, run_calculators
from .rfc import class_rfc, evaluate_rfc
from .wmc import WMCMode, class_wmc, evaluate_wmc

__all__ = [
    "WMCMode",
    "evaluate_wmc",
    "evaluate_rfc",
    "evaluate_noc",
    "evaluate_locm",
    "class_wmc",
    "class_rfc",
    "class_locm",
    "count_children",
    "calculator_for",
    "run_calculators",
]
