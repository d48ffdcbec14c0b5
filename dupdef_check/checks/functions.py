"""
Function locator.
Line-oriented scan for `def` headers, using indentation as a scope proxy.
"""

import re
from typing import List

from ..config import SNIPPET_LINES
from ..models import FunctionRecord

HEADER_PATTERN = re.compile(r'^def\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\(')


def indentation(line: str) -> int:
    """Count of leading whitespace characters (a tab counts as one)."""
    return len(line) - len(line.lstrip())


def find_end_line(lines: List[str], start: int, indent: int) -> int:
    """
    Last line of the function whose header sits at `start`.

    The body stops right before the next def/class header at the same or
    lower indentation. Blank and comment lines never end a body, but they
    still extend it when nothing follows them.
    """
    end_line = start
    for j in range(start + 1, len(lines)):
        stripped = lines[j].strip()
        if stripped and not stripped.startswith('#'):
            if indentation(lines[j]) <= indent and stripped.startswith(('def ', 'class ')):
                return j - 1
        end_line = j
    return end_line


def locate_functions(text: str) -> List[FunctionRecord]:
    """Locate every `def` header in `text`, in source order."""
    functions = []
    lines = text.split('\n')

    for i, line in enumerate(lines):
        match = HEADER_PATTERN.match(line.strip())
        if not match:
            continue

        end_line = find_end_line(lines, i, indentation(line))
        snippet = '\n'.join(lines[i:min(i + SNIPPET_LINES, end_line + 1)]).strip()

        functions.append(FunctionRecord(
            name=match.group(1),
            start_line=i,
            end_line=end_line,
            definition_snippet=snippet
        ))

    return functions
