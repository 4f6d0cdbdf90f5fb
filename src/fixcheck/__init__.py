"""
Transparency fix validation.

Static text checks confirming that layout transparency defaults come from
LayoutSettingsManager instead of hardcoded fallbacks.
"""

from .checks import FixCheck, REQUIRED_CHECKS, FORBIDDEN_CHECKS
from .validator import FixValidator, ValidationResult, evaluate_content, read_target
from .report import print_report, write_json_report

__version__ = "0.1.0"

__all__ = [
    'FixCheck',
    'REQUIRED_CHECKS',
    'FORBIDDEN_CHECKS',
    'FixValidator',
    'ValidationResult',
    'evaluate_content',
    'read_target',
    'print_report',
    'write_json_report',
]
