"""
File scanner for the duplicate definition checker.
Handles file discovery and reading; one unreadable file never stops a scan.
"""

import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple

from .config import Settings
from .models import FileInfo, ReadError


def iter_source_files(
    root: Path,
    settings: Settings,
    log: Callable[[str], None] = lambda x: None
) -> Iterator[Path]:
    """Yield source files under root in sorted order, pruning skipped dirs."""
    def on_error(err: OSError) -> None:
        log(f"❌ Error reading directory {err.filename}: {err.strerror}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames[:] = sorted(d for d in dirnames if d not in settings.skip_dirs)
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if path.suffix in settings.extensions:
                yield path


def read_source(path: Path) -> str:
    """Read file content as UTF-8, dropping a leading BOM. Raises OSError / UnicodeDecodeError."""
    return path.read_text(encoding='utf-8-sig')


def scan_files(
    root: Path,
    settings: Optional[Settings] = None,
    log: Callable[[str], None] = lambda x: None,
    warn: Optional[Callable[[str], None]] = None
) -> Tuple[List[FileInfo], List[ReadError]]:
    """
    Read all relevant files in the tree.

    Read failures go to `warn` (defaults to `log`) and are collected as
    ReadError entries; the walk carries on.
    """
    settings = settings or Settings()
    warn = warn or log
    files = []
    errors = []

    for path in iter_source_files(root, settings, warn):
        try:
            content = read_source(path)
        except (OSError, UnicodeDecodeError) as e:
            warn(f"❌ Error reading file {path}: {e}")
            errors.append(ReadError(path=path, error=str(e)))
            continue
        files.append(FileInfo(path=path, content=content))
        log(f"Scanned: {path}")

    return files, errors
