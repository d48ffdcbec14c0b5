"""
Duplicate Grouper Tests
"""

from pathlib import Path

from dupdef_check.checks import (
    check_duplicate_functions,
    check_file,
    find_duplicates,
    locate_functions,
)
from dupdef_check.models import FileInfo, FunctionRecord


def record(name, start, end=None):
    return FunctionRecord(name=name, start_line=start, end_line=end or start, definition_snippet='')


class TestFindDuplicates:
    """Grouping located functions by name."""

    def test_detects_duplicate_functions(self, duplicated_source):
        """calculate_total is reported once with all three occurrences."""
        duplicates = find_duplicates(locate_functions(duplicated_source))

        assert len(duplicates) == 1, 'Should find 1 duplicate function name'
        group = duplicates[0]
        assert group.name == 'calculate_total'
        assert len(group.occurrences) == 3, 'calculate_total should appear 3 times'
        assert [o.start_line for o in group.occurrences] == [4, 12, 16]

    def test_no_duplicates_when_all_unique(self, unique_source):
        assert find_duplicates(locate_functions(unique_source)) == []

    def test_empty_input(self):
        assert find_duplicates([]) == []
        assert find_duplicates(locate_functions('')) == []

    def test_groups_follow_first_occurrence_order(self):
        """Groups come out in first-seen order, not alphabetical."""
        functions = [record('b', 0), record('a', 2), record('c', 4), record('b', 6), record('a', 8)]
        groups = find_duplicates(functions)

        assert [g.name for g in groups] == ['b', 'a']
        assert groups[0].occurrences == (functions[0], functions[3])
        assert groups[1].occurrences == (functions[1], functions[4])

    def test_never_reports_single_occurrence(self):
        functions = [record(name, i) for i, name in enumerate('abcabdd')]
        groups = find_duplicates(functions)

        assert [g.name for g in groups] == ['a', 'b', 'd']
        assert all(len(g.occurrences) >= 2 for g in groups)

    def test_records_are_shared_not_copied(self):
        functions = [record('x', 0), record('x', 3)]
        (group,) = find_duplicates(functions)
        assert group.occurrences[0] is functions[0]

    def test_does_not_mutate_input(self):
        functions = [record('x', 0), record('x', 3)]
        before = list(functions)
        find_duplicates(functions)
        assert functions == before


class TestCheckFile:
    """Per-file check wiring locator and grouper together."""

    def test_check_file(self, duplicated_source):
        result = check_file(FileInfo(path=Path('models.py'), content=duplicated_source))

        assert result.path == Path('models.py')
        assert len(result.functions) == 4
        assert result.has_duplicates
        assert result.duplicates[0].name == 'calculate_total'

    def test_check_clean_file(self, unique_source):
        result = check_file(FileInfo(path=Path('views.py'), content=unique_source))
        assert not result.has_duplicates
        assert len(result.functions) == 3

    def test_check_duplicate_functions_logs_each_group(self, duplicated_source, unique_source):
        messages = []
        files = [
            FileInfo(path=Path('models.py'), content=duplicated_source),
            FileInfo(path=Path('views.py'), content=unique_source),
        ]

        results = check_duplicate_functions(files, messages.append)

        assert [r.path for r in results] == [Path('models.py'), Path('views.py')]
        assert messages == ["models.py: 'calculate_total' x3"]
