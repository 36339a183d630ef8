from plasmafuel.optimizer.process import OptimizationResult, ProcessParameters, optimize
from plasmafuel.optimizer.rules import (
    DIAGNOSTIC_RULES,
    DiagnosticRule,
    PredictionCategory,
    classify,
)

__all__ = [
    "ProcessParameters",
    "OptimizationResult",
    "optimize",
    "PredictionCategory",
    "DiagnosticRule",
    "DIAGNOSTIC_RULES",
    "classify",
]
