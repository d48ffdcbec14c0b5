"""
Shared fixtures: sample sources and a throwaway project tree.
"""

import pytest

# Three calculate_total definitions around one process_data.
# Line 0 is blank, so headers sit on lines 4, 8, 12 and 16.
DUPLICATED_SOURCE = '''
class TestModel(models.Model):
    _name = 'test.model'

    def calculate_total(self):
        """First implementation"""
        return self.value * 1.1

    def process_data(self):
        """Process data"""
        pass

    def calculate_total(self):
        """Duplicate - second implementation"""
        return self.value * 1.2

    def calculate_total(self):
        """Duplicate - third implementation"""
        return self.value * 1.3
'''

UNIQUE_SOURCE = '''
class TestModel(models.Model):
    _name = 'test.model'

    def calculate_total(self):
        """Calculate total"""
        return self.value * 1.1

    def process_data(self):
        """Process data"""
        pass

    def validate_input(self):
        """Validate input"""
        return True
'''


@pytest.fixture
def duplicated_source():
    return DUPLICATED_SOURCE


@pytest.fixture
def unique_source():
    return UNIQUE_SOURCE


@pytest.fixture
def project(tmp_path):
    """
    A small tree:

        app/models.py        duplicates (calculate_total x3)
        app/views.py         clean
        app/legacy.py        undecodable bytes
        .git/hooks/dup.py    duplicates, must be skipped
        venv/lib/dup.py      duplicates, must be skipped
        node_modules/dup.py  duplicates, must be skipped
        README.txt           wrong extension
    """
    app = tmp_path / 'app'
    app.mkdir()
    (app / 'models.py').write_text(DUPLICATED_SOURCE, encoding='utf-8')
    (app / 'views.py').write_text(UNIQUE_SOURCE, encoding='utf-8')
    (app / 'legacy.py').write_bytes(b'def ok():\n    return "\xff\xfe"\n')

    for skipped in ('.git/hooks', 'venv/lib', 'node_modules'):
        d = tmp_path / skipped
        d.mkdir(parents=True)
        (d / 'dup.py').write_text(DUPLICATED_SOURCE, encoding='utf-8')

    (tmp_path / 'README.txt').write_text('def a():\ndef a():\n', encoding='utf-8')
    return tmp_path
