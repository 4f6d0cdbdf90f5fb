#!/usr/bin/env python3
"""
AssistantApp.js Fix Validation Script

Validates that the transparency bug fixes have been applied to
AssistantApp.js: layout defaults come from LayoutSettingsManager and the
old hardcoded fallbacks are gone.

Exit code 0 when every fix is present and no old code remains, 1 otherwise.
"""

import sys
import logging
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from src.fixcheck import FixValidator, write_json_report

DEFAULT_TARGET = PROJECT_ROOT / "src" / "components" / "app" / "AssistantApp.js"


def parse_args(argv=None):
    import argparse
    parser = argparse.ArgumentParser(description="AssistantApp.js transparency fix validation")
    parser.add_argument("target", nargs='?', default=str(DEFAULT_TARGET),
                        help="Source file to check (default: %(default)s)")
    parser.add_argument("--report", default=None,
                        help="Also write a JSON report to this path")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every check at DEBUG level")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    validator = FixValidator(args.target)
    exit_code = validator.run()

    if args.report:
        write_json_report(validator.result, validator.target_path, args.report)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
