"""
Literal substring checks for the layout transparency fix.

A check passes when any of its patterns occurs in the target text.
Required checks must all pass; forbidden checks must all fail.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FixCheck:
    """Named literal-substring predicate.

    Matching is case-sensitive plain containment. Multiple patterns are
    alternative spellings of the same thing and are OR-ed together.
    """

    name: str
    label: str
    patterns: Tuple[str, ...]

    def __post_init__(self):
        if not self.patterns:
            raise ValueError(f"check '{self.name}' needs at least one pattern")

    def matches(self, content: str) -> bool:
        """Return True if any pattern is a substring of content.

        Args:
            content: Full text of the target file

        Returns:
            Whether at least one spelling is present
        """
        return any(pattern in content for pattern in self.patterns)


IMPORT_MARKER = "LayoutSettingsManager"

# New code: defaults come from LayoutSettingsManager
REQUIRED_CHECKS: Tuple[FixCheck, ...] = (
    FixCheck(
        "import_marker",
        "LayoutSettingsManager imported",
        (IMPORT_MARKER,),
    ),
    FixCheck(
        "system_design_default",
        "System Design uses LayoutSettingsManager default",
        ("LayoutSettingsManager.DEFAULT_SETTINGS['system-design'].transparency",),
    ),
    FixCheck(
        "normal_default",
        "Normal uses LayoutSettingsManager default",
        ("LayoutSettingsManager.DEFAULT_SETTINGS.normal.transparency",),
    ),
    FixCheck(
        "compact_default",
        "Compact uses LayoutSettingsManager default",
        ("LayoutSettingsManager.DEFAULT_SETTINGS.compact.transparency",),
    ),
)

# Old code: hardcoded transparency fallbacks.
# NOTE: these are generic numeric fragments and also match unrelated literals.
FORBIDDEN_CHECKS: Tuple[FixCheck, ...] = (
    FixCheck(
        "old_system_design_default",
        "Contains old 0.40 hardcoded value",
        (": 0.40", ": 0.4;"),
    ),
    FixCheck(
        "old_normal_default",
        "Contains old 0.45 hardcoded value",
        (": 0.45", ": 0.45;"),
    ),
    FixCheck(
        "old_compact_default",
        "Contains old 0.60 hardcoded value",
        (": 0.60", ": 0.6;"),
    ),
)
