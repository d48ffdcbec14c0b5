"""
Data models for the duplicate definition checker.
Pure dataclasses - no business logic.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple


@dataclass(frozen=True)
class FunctionRecord:
    """One located function definition (zero-based, inclusive line span)."""
    name: str
    start_line: int
    end_line: int
    definition_snippet: str


@dataclass(frozen=True)
class DuplicateGroup:
    """A function name defined two or more times in one file."""
    name: str
    occurrences: Tuple[FunctionRecord, ...]


@dataclass
class FileInfo:
    """A source file read successfully."""
    path: Path
    content: str = ""


@dataclass
class ReadError:
    """A source file that could not be read."""
    path: Path
    error: str


@dataclass
class FileResult:
    """Check result for one file."""
    path: Path
    functions: List[FunctionRecord] = field(default_factory=list)
    duplicates: List[DuplicateGroup] = field(default_factory=list)

    @property
    def has_duplicates(self) -> bool:
        return bool(self.duplicates)


@dataclass
class ScanSummary:
    """Aggregate result of one scan run."""
    root: Path
    results: List[FileResult] = field(default_factory=list)
    read_errors: List[ReadError] = field(default_factory=list)

    @property
    def files_scanned(self) -> int:
        return len(self.results) + len(self.read_errors)

    @property
    def files_with_duplicates(self) -> List[FileResult]:
        return [r for r in self.results if r.has_duplicates]

    @property
    def duplicate_names(self) -> int:
        return sum(len(r.duplicates) for r in self.results)
