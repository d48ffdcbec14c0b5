"""
Duplicate definition checker test suite.

Organized by:
- test_functions.py: Function locator
- test_duplicates.py: Duplicate grouper and per-file check
- test_config.py: Defaults and .dupdef.yaml loading
- test_scanner.py: File discovery and read errors
- test_report.py: Text, markdown and JSON reports
- test_cli.py: Facade and command-line entry point
"""
