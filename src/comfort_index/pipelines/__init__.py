from .cei import LEVELS, classify_level, compute_cei, validate_sample
from .report import format_cei_report

__all__ = ["LEVELS", "classify_level", "compute_cei", "validate_sample", "format_cei_report"]
