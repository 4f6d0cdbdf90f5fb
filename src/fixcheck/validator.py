"""Fix validation for a single target source file.

Reads the target once, evaluates every check against the full text and
derives a pass/fail verdict. The target is never modified.
"""

import sys
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional, Sequence, Union

from .checks import FixCheck, REQUIRED_CHECKS, FORBIDDEN_CHECKS
from .report import print_header, print_report

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of one validation pass.

    `required` maps check name to whether the expected pattern is present,
    `forbidden` maps check name to whether an old pattern is still present.
    Both keep check order.
    """

    required: Dict[str, bool] = field(default_factory=dict)
    forbidden: Dict[str, bool] = field(default_factory=dict)

    @property
    def all_fixes_applied(self) -> bool:
        return all(self.required.values())

    @property
    def no_old_code(self) -> bool:
        return not any(self.forbidden.values())

    @property
    def success(self) -> bool:
        return self.all_fixes_applied and self.no_old_code

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-safe dictionary."""
        return {
            'required': dict(self.required),
            'forbidden': dict(self.forbidden),
            'all_fixes_applied': self.all_fixes_applied,
            'no_old_code': self.no_old_code,
            'success': self.success,
        }


def read_target(path: Union[str, Path]) -> str:
    """Read the whole target file as UTF-8 text.

    Undecodable bytes are replaced rather than raising, so odd content only
    ever fails to match.

    Args:
        path: Target file location

    Returns:
        File contents

    Raises:
        FileNotFoundError: If the file does not exist
    """
    target = Path(path)
    if not target.is_file():
        raise FileNotFoundError(f"target file not found: {target}")

    content = target.read_text(encoding='utf-8', errors='replace')
    logger.debug(f"Loaded {len(content)} characters from {target}")
    return content


def evaluate_content(content: str,
                     required: Sequence[FixCheck] = REQUIRED_CHECKS,
                     forbidden: Sequence[FixCheck] = FORBIDDEN_CHECKS) -> ValidationResult:
    """Evaluate all checks against the content.

    Every check is evaluated, even after an earlier one fails.

    Args:
        content: Full target text
        required: Checks whose patterns must be present
        forbidden: Checks whose patterns must be absent

    Returns:
        ValidationResult with one entry per check
    """
    result = ValidationResult()

    for check in required:
        result.required[check.name] = check.matches(content)
        logger.debug(f"Required check {check.name}: {result.required[check.name]}")

    for check in forbidden:
        result.forbidden[check.name] = check.matches(content)
        logger.debug(f"Forbidden check {check.name}: {result.forbidden[check.name]}")

    return result


class FixValidator:
    """Validates that a bug fix was applied to one source file."""

    def __init__(self,
                 target_path: Union[str, Path],
                 required: Sequence[FixCheck] = REQUIRED_CHECKS,
                 forbidden: Sequence[FixCheck] = FORBIDDEN_CHECKS):
        """Initialize validator.

        Args:
            target_path: File to inspect
            required: Checks for new code that must be present
            forbidden: Checks for old code that must be gone
        """
        self.target_path = Path(target_path).resolve()
        self.required = tuple(required)
        self.forbidden = tuple(forbidden)
        self.result: Optional[ValidationResult] = None

    @property
    def target_name(self) -> str:
        return self.target_path.name

    def validate(self) -> ValidationResult:
        """Read the target and evaluate every check.

        Raises:
            FileNotFoundError: If the target does not exist
        """
        content = read_target(self.target_path)
        self.result = evaluate_content(content, self.required, self.forbidden)
        logger.info(f"Validated {self.target_name}: "
                    f"{'PASSED' if self.result.success else 'FAILED'}")
        return self.result

    def run(self) -> int:
        """Validate and print the full report.

        Returns:
            Process exit code: 0 if all fixes are applied and no old code
            remains, 1 otherwise (including a missing target)
        """
        print_header(self.target_name)

        if not self.target_path.is_file():
            print(f"❌ {self.target_name} not found at: {self.target_path}", file=sys.stderr)
            return 1

        result = self.validate()
        print_report(result, self.target_name, self.required, self.forbidden)
        return result.exit_code
