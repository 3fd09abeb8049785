"""Pytest configuration for the `tests/` suite.

The tests import `i18n_inflector` directly. In CI the package is installed
(editable); for a plain checkout we add the repository root to `sys.path`
so the suite also runs without an install.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _prepend_sys_path(path: Path) -> None:
    if not path.exists() or not path.is_dir():
        return

    path_str = str(path.resolve())
    if path_str not in sys.path:
        sys.path.insert(0, path_str)


_REPO_ROOT = Path(__file__).resolve().parents[1]

_prepend_sys_path(_REPO_ROOT)


@pytest.fixture(autouse=True)
def isolated_config_env(monkeypatch, tmp_path):
    """Keep the developer's own inflector settings out of every test."""
    monkeypatch.delenv("I18N_INFLECTOR_LOG_LEVEL", raising=False)
    monkeypatch.setenv("I18N_INFLECTOR_CONFIG", str(tmp_path / "absent.yaml"))
