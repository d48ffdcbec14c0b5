"""
Duplicate detection - function names defined more than once per file.
"""

from typing import Callable, Dict, List, Sequence

from ..models import DuplicateGroup, FileInfo, FileResult, FunctionRecord
from .functions import locate_functions


def find_duplicates(functions: Sequence[FunctionRecord]) -> List[DuplicateGroup]:
    """Group records by name; keep names seen twice or more, in first-seen order."""
    by_name: Dict[str, List[FunctionRecord]] = {}

    for func in functions:
        by_name.setdefault(func.name, []).append(func)

    return [
        DuplicateGroup(name=name, occurrences=tuple(occurrences))
        for name, occurrences in by_name.items()
        if len(occurrences) > 1
    ]


def check_file(file_info: FileInfo) -> FileResult:
    """Run the locator and grouper over one file."""
    functions = locate_functions(file_info.content)
    return FileResult(
        path=file_info.path,
        functions=functions,
        duplicates=find_duplicates(functions)
    )


def check_duplicate_functions(
    files: List[FileInfo],
    log: Callable[[str], None] = lambda x: None
) -> List[FileResult]:
    """Check each file independently for duplicate function names."""
    results = []

    for f in files:
        result = check_file(f)
        for group in result.duplicates:
            log(f"{f.path}: '{group.name}' x{len(group.occurrences)}")
        results.append(result)

    return results
