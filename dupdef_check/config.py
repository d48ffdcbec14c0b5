"""
Configuration for the duplicate definition checker.
Defaults plus optional per-project overrides from .dupdef.yaml.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Set

import yaml

# Directories never worth scanning (VCS metadata, dependency caches, virtualenvs)
SKIP_DIRS = {
    '.git',
    '.hg',
    '.svn',
    'node_modules',
    '__pycache__',
    '.venv',
    'venv',
    'env',
    '.tox',
    '.nox',
    '.mypy_cache',
    '.pytest_cache',
    'site-packages',
    'build',
    'dist',
    '.eggs',
}

# Extensions to analyze
ANALYZE_EXTENSIONS = {'.py'}

# Max lines kept in a function's definition snippet
SNIPPET_LINES = 5

# Per-project config file looked up in the scanned root
CONFIG_FILENAME = '.dupdef.yaml'

_CONFIG_KEYS = {'exclude', 'extensions', 'include_default_excludes'}


@dataclass
class Settings:
    """Effective scan settings."""
    skip_dirs: Set[str] = field(default_factory=lambda: set(SKIP_DIRS))
    extensions: Set[str] = field(default_factory=lambda: set(ANALYZE_EXTENSIONS))

    def add_excludes(self, names: Iterable[str]) -> None:
        self.skip_dirs.update(n.strip('/\\') for n in names if n)

    def add_extensions(self, exts: Iterable[str]) -> None:
        self.extensions.update(normalize_extension(e) for e in exts if e)


def normalize_extension(ext: str) -> str:
    """'py' and '.py' both become '.py'."""
    ext = ext.strip()
    return ext if ext.startswith('.') else f'.{ext}'


def _string_list(value, key: str, source: Path) -> list:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{source}: '{key}' must be a string or a list of strings")
    return value


def load_settings(root: Path, config_path: Optional[Path] = None) -> Settings:
    """
    Build settings for a scan of `root`.

    An explicit `config_path` must exist. Without one, `<root>/.dupdef.yaml`
    is used when present, otherwise the defaults apply unchanged.

    Recognised keys:
        exclude: [dir, ...]              added to the default skip dirs
        extensions: [.py, ...]           replaces the default extensions
        include_default_excludes: bool   false drops the default skip dirs
    """
    if config_path is None:
        candidate = root / CONFIG_FILENAME
        if not candidate.is_file():
            return Settings()
        config_path = candidate
    elif not config_path.is_file():
        raise ValueError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"{config_path}: invalid YAML ({e})") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a mapping at top level")

    unknown = set(data) - _CONFIG_KEYS
    if unknown:
        raise ValueError(f"{config_path}: unknown keys: {', '.join(sorted(unknown))}")

    settings = Settings()

    keep_defaults = data.get('include_default_excludes', True)
    if not isinstance(keep_defaults, bool):
        raise ValueError(f"{config_path}: 'include_default_excludes' must be true or false")
    if not keep_defaults:
        settings.skip_dirs = set()

    if 'exclude' in data:
        settings.add_excludes(_string_list(data['exclude'], 'exclude', config_path))

    if 'extensions' in data:
        exts = _string_list(data['extensions'], 'extensions', config_path)
        settings.extensions = {normalize_extension(e) for e in exts}

    return settings
