"""
Duplicate definition checker.

Scans Python-like source files and reports function names defined more
than once in the same file:
- Function locator (indentation-based, line oriented, no AST)
- Duplicate grouper (per file, first-seen order)
- Recursive discovery skipping VCS, cache and virtualenv dirs
- Text, markdown and JSON reports

Usage:
    python -m dupdef_check [--path PATH] [--format FORMAT] [--verbose]
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .config import Settings
from .models import DuplicateGroup, FunctionRecord, ScanSummary
from .scanner import scan_files
from .report import REPORT_FORMATS, print_summary
from .checks import locate_functions, find_duplicates, check_duplicate_functions


def _timestamp() -> str:
    return datetime.now().strftime('%H:%M:%S')


class DuplicateChecker:
    """Main facade for duplicate function checking."""

    def __init__(
        self,
        root_path: Path,
        settings: Optional[Settings] = None,
        verbose: bool = False,
        write: Callable[[str], None] = print
    ):
        self.root = root_path
        self.settings = settings or Settings()
        self.verbose = verbose
        self.write = write
        self.summary = ScanSummary(root=root_path)

    def log(self, msg: str) -> None:
        """Write if verbose mode."""
        if self.verbose:
            self.write(f"   {msg}")

    def warn(self, msg: str) -> None:
        self.write(f"   {msg}")

    def run(self) -> bool:
        """Scan the tree. Returns True if no duplicates were found."""
        self.write(f"[{_timestamp()}] Starting duplicate check...")
        self.write(f"📁 Selected folder: {self.root}")
        self.write("🔍 Scanning for source files...")

        files, errors = scan_files(self.root, self.settings, self.log, self.warn)
        self.summary = ScanSummary(root=self.root, read_errors=errors)

        if not files and not errors:
            self.write("⚠️ No source files found in the selected folder.")
            return True

        self.write(f"📄 Found {len(files) + len(errors)} source file(s)")
        self.summary.results = check_duplicate_functions(files, self.log)

        return not self.summary.files_with_duplicates

    def get_report(self, fmt: str = 'text') -> str:
        """Render the last run in the given format (text, markdown, json)."""
        if fmt not in REPORT_FORMATS:
            raise ValueError(f"Unknown report format: {fmt}")
        return REPORT_FORMATS[fmt](self.summary)

    def print_summary(self) -> None:
        """Write summary to the output sink."""
        self.write("")
        print_summary(self.summary, self.write)
        self.write(f"[{_timestamp()}] Check completed.")


__all__ = [
    'DuplicateChecker',
    'DuplicateGroup',
    'FunctionRecord',
    'Settings',
    'locate_functions',
    'find_duplicates',
]
