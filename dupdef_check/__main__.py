#!/usr/bin/env python3
"""
Entry point for dupdef_check module.

Usage:
    python -m dupdef_check [--path PATH] [--format FORMAT] [--output FILE] [--verbose]
    dupdef-check [--path PATH] [--config FILE] [--ext .pyi] [--exclude vendor]

Exit codes: 0 clean, 1 duplicates found, 2 bad path or config.
"""

import argparse
import sys
from pathlib import Path

from . import DuplicateChecker
from .config import load_settings
from .report import REPORT_FORMATS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Find duplicate function definitions')
    parser.add_argument('--path', type=str, default='.', help='Folder to check')
    parser.add_argument('--config', type=str, help='Config file (default: <path>/.dupdef.yaml)')
    parser.add_argument('--format', choices=sorted(REPORT_FORMATS), default='text',
                        help='Report format')
    parser.add_argument('--output', type=str, help='Output file for report')
    parser.add_argument('--ext', action='append', default=[],
                        help='Extra file extension to scan (repeatable)')
    parser.add_argument('--exclude', action='append', default=[],
                        help='Extra directory name to skip (repeatable)')
    parser.add_argument('--no-fail', action='store_true',
                        help='Exit 0 even when duplicates are found')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    root = Path(args.path).resolve()

    if not root.is_dir():
        print(f"❌ Path not found: {root}")
        sys.exit(2)

    try:
        settings = load_settings(root, Path(args.config) if args.config else None)
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        sys.exit(2)

    settings.add_extensions(args.ext)
    settings.add_excludes(args.exclude)

    checker = DuplicateChecker(root, settings, verbose=args.verbose)
    passed = checker.run()

    if args.format == 'text' and not args.output:
        checker.print_summary()
    else:
        report = checker.get_report(args.format)
        if args.output:
            Path(args.output).write_text(report, encoding='utf-8')
            print(f"\n📄 Report written to: {args.output}")
        else:
            print("\n" + report)

    sys.exit(0 if passed or args.no_fail else 1)


if __name__ == '__main__':
    main()
