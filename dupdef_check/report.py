"""
Report generation for the duplicate definition checker.
Console, markdown and JSON output.
"""

import json
from pathlib import Path
from typing import Callable

from .models import FileResult, FunctionRecord, ScanSummary

RULE = '=' * 80


def relative_path(path: Path, root: Path) -> str:
    """Path relative to root when possible, otherwise as given."""
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def table_cell(text: str) -> str:
    """Escape pipes so text stays inside one markdown table cell."""
    return text.replace("|", "\\|")


def line_range(func: FunctionRecord) -> str:
    """1-based inclusive line range, e.g. '5-7'."""
    return f"{func.start_line + 1}-{func.end_line + 1}"


def format_text_report(summary: ScanSummary) -> str:
    """Plain-text summary: totals, then every duplicated name per file."""
    with_dups = summary.files_with_duplicates
    lines = [
        RULE,
        "📊 SUMMARY",
        RULE,
        f"Total files scanned: {summary.files_scanned}",
        f"Files with duplicates: {len(with_dups)}",
        "",
    ]

    if summary.read_errors:
        lines.append(f"❌ FILES THAT COULD NOT BE READ ({len(summary.read_errors)}):")
        for err in summary.read_errors:
            lines.append(f"   {relative_path(err.path, summary.root)}: {err.error}")
        lines.append("")

    if with_dups:
        lines.append("📋 FILES WITH DUPLICATE FUNCTIONS:")
        lines.append("")
        for result in with_dups:
            lines.append(f"📄 {relative_path(result.path, summary.root)}")
            for group in result.duplicates:
                lines.append(
                    f"   ⚠️ Function '{group.name}' appears {len(group.occurrences)} times:"
                )
                for i, occurrence in enumerate(group.occurrences, 1):
                    lines.append(f"      {i}. Line {line_range(occurrence)}")
            lines.append("")
    else:
        lines.append("✅ No duplicate functions found in any files!")

    lines.append(RULE)
    return '\n'.join(lines)


def generate_markdown_report(summary: ScanSummary) -> str:
    """Generate markdown report."""
    with_dups = summary.files_with_duplicates
    lines = [
        "# Duplicate Function Report",
        "",
        f"**Path:** `{summary.root}`",
        f"**Files scanned:** {summary.files_scanned}",
        f"**Files with duplicates:** {len(with_dups)}",
        f"**Duplicated names:** {summary.duplicate_names}",
        "",
    ]

    if summary.read_errors:
        lines.append("## Unreadable Files")
        lines.append("")
        lines.append("| File | Error |")
        lines.append("|------|-------|")
        for err in summary.read_errors:
            lines.append(f"| `{relative_path(err.path, summary.root)}` | {table_cell(err.error)} |")
        lines.append("")

    if not with_dups:
        lines.append("✅ **No duplicate functions found!**")
        return '\n'.join(lines)

    for result in with_dups:
        lines.append(f"## `{relative_path(result.path, summary.root)}`")
        lines.append("")
        lines.append("| Function | Occurrences | Lines |")
        lines.append("|----------|-------------|-------|")
        for group in result.duplicates:
            ranges = ', '.join(line_range(o) for o in group.occurrences)
            lines.append(f"| `{group.name}` | {len(group.occurrences)} | {ranges} |")
        lines.append("")

    return '\n'.join(lines)


def _result_to_dict(result: FileResult, root: Path) -> dict:
    return {
        'file': relative_path(result.path, root),
        'duplicates': [
            {
                'name': group.name,
                'occurrences': [
                    {
                        'start_line': o.start_line + 1,
                        'end_line': o.end_line + 1,
                        'definition': o.definition_snippet,
                    }
                    for o in group.occurrences
                ],
            }
            for group in result.duplicates
        ],
    }


def generate_json_report(summary: ScanSummary) -> str:
    """Machine-readable report (1-based line numbers)."""
    data = {
        'root': str(summary.root),
        'files_scanned': summary.files_scanned,
        'files_with_duplicates': len(summary.files_with_duplicates),
        'files': [_result_to_dict(r, summary.root) for r in summary.files_with_duplicates],
        'read_errors': [
            {'file': relative_path(e.path, summary.root), 'error': e.error}
            for e in summary.read_errors
        ],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


REPORT_FORMATS = {
    'text': format_text_report,
    'markdown': generate_markdown_report,
    'json': generate_json_report,
}


def print_summary(summary: ScanSummary, write: Callable[[str], None] = print) -> None:
    """Write the text summary line by line to the given sink."""
    for line in format_text_report(summary).split('\n'):
        write(line)
