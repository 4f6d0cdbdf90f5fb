"""
Console and JSON reporting for fix validation results.

Console output order is fixed: import check, fix implementation, old code
check, summary banner, verdict block, closing line.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence, Union, TYPE_CHECKING

from .checks import FixCheck

if TYPE_CHECKING:
    from .validator import ValidationResult

logger = logging.getLogger(__name__)

BANNER_WIDTH = 60


def _present(found: bool) -> str:
    return '✅ YES' if found else '❌ NO'


def _absent(found: bool) -> str:
    return '❌ YES (BAD)' if found else '✅ NO (GOOD)'


def print_header(target_name: str) -> None:
    """Print the opening line, before the target is read."""
    print(f"🔍 Validating {target_name} Transparency Bug Fixes...\n")


def print_report(result: 'ValidationResult',
                 target_name: str,
                 required: Sequence[FixCheck],
                 forbidden: Sequence[FixCheck]) -> None:
    """Print per-check lines followed by the summary block.

    The first required check is the import marker; the rest are the
    per-layout fixes.

    Args:
        result: Evaluated checks
        target_name: File name shown in the summary
        required: Required checks, in report order
        forbidden: Forbidden checks, in report order
    """
    import_checks, fix_checks = required[:1], required[1:]

    print("✅ Import Check:")
    for check in import_checks:
        print(f"   {check.label}: {_present(result.required[check.name])}")

    print("\n✅ Fix Implementation:")
    for check in fix_checks:
        print(f"   {check.label}: {_present(result.required[check.name])}")

    print("\n❌ Old Code Check (should be NO):")
    for check in forbidden:
        print(f"   {check.label}: {_absent(result.forbidden[check.name])}")

    print("\n" + "=" * BANNER_WIDTH)
    print(f"🎯 {target_name.upper()} VALIDATION SUMMARY")
    print("=" * BANNER_WIDTH)

    if result.success:
        print("✅ ALL FIXES CORRECTLY APPLIED!")
        print(f"✅ {target_name} now uses LayoutSettingsManager defaults")
        print("✅ No hardcoded transparency values remain")
        print("✅ The transparency bug fix is properly implemented")
        print("\n🚀 READY FOR TESTING:")
        print("   • Transparency settings should now persist across views")
        print("   • System design layout uses 0.85 default (not 0.40)")
        print("   • All layouts use consistent LayoutSettingsManager defaults")
    else:
        print("❌ FIXES NOT FULLY APPLIED!")
        if not result.all_fixes_applied:
            print("   ⚠️  Missing LayoutSettingsManager usage in some layout modes")
        if not result.no_old_code:
            print("   ⚠️  Old hardcoded values still present in the code")
        print("\n🔧 ACTION REQUIRED:")
        print(f"   • Review the changes in {target_name}")
        print("   • Ensure all applyLayoutSpecificSettings calls use LayoutSettingsManager defaults")
        print("   • Remove any remaining hardcoded transparency values")

    print("\n🎉 Code validation complete!")


def write_json_report(result: Optional['ValidationResult'],
                      target_path: Union[str, Path],
                      output_path: Union[str, Path]) -> dict:
    """Write a machine-readable validation report.

    Args:
        result: Evaluated checks, or None if the target was missing
        target_path: File that was inspected
        output_path: Where to write the JSON document

    Returns:
        The report dictionary that was written
    """
    if result is None:
        status = "ERROR"
    else:
        status = "PASSED" if result.success else "FAILED"

    report = {
        "component": "Transparency Fix Validation",
        "target": str(target_path),
        "validation_date": datetime.now().strftime("%Y-%m-%d"),
        "result": status,
        "summary": "Target file not found" if result is None else (
            "All fixes applied and no old code remains" if result.success
            else "One or more fix checks failed"),
    }
    if result is not None:
        report.update(result.to_dict())

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, 'w') as f:
        json.dump(report, f, indent=2)

    logger.info(f"Report saved to: {output}")
    return report
