"""Shared fixtures for npm-package tests."""

import json
import logging
from pathlib import Path

import pytest

from npm_package import Options
from npm_package.path_resolver import working_directory

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_options():
    """Options pointing at the checked-in fixture store."""
    return Options(cwd=str(FIXTURES_DIR))


@pytest.fixture
def make_store(tmp_path):
    """Factory writing node_modules/<name>/package.json under tmp_path.

    ``manifest`` may be a dict (dumped as JSON) or raw text.
    """
    def _make(name, manifest):
        pkg_dir = tmp_path / "node_modules" / name
        pkg_dir.mkdir(parents=True, exist_ok=True)
        text = manifest if isinstance(manifest, str) else json.dumps(manifest, indent=2)
        (pkg_dir / "package.json").write_text(text, encoding="utf-8")
        return pkg_dir

    return _make


@pytest.fixture
def store_options(tmp_path):
    """Options resolving against tmp_path."""
    return Options(cwd=str(tmp_path))


@pytest.fixture(autouse=True)
def _reset_logging_and_cwd():
    """Drop CLI-installed log handlers and the cwd snapshot after each test."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_npm_package_handler", False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)
    working_directory.cache_clear()
