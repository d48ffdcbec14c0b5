"""
Check registry - exports the locator, the grouper and the per-file check.
"""

from .functions import locate_functions
from .duplicates import find_duplicates, check_file, check_duplicate_functions

__all__ = [
    'locate_functions',
    'find_duplicates',
    'check_file',
    'check_duplicate_functions',
]
