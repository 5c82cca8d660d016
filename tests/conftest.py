"""Shared test configuration and fixtures for bun_path lib tests."""
import os
import sys
from pathlib import Path

import pytest


def pytest_collection_modifyitems(config, items):
    """Auto-skip E2E tests unless BUN_PATH_E2E=1 is set."""
    if os.environ.get("BUN_PATH_E2E") == "1":
        return
    skip_e2e = pytest.mark.skip(reason="Set BUN_PATH_E2E=1 to run E2E tests")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)

# Add repo lib directory to sys.path for imports
_LIB_DIR = str(Path(__file__).resolve().parent.parent / "lib")
if _LIB_DIR not in sys.path:
    sys.path.insert(0, _LIB_DIR)

FAKE_HOME = Path("/home/tester")


@pytest.fixture
def fake_home(monkeypatch):
    """Pin Path.home() so candidate lists never depend on the real user."""
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: FAKE_HOME))
    return FAKE_HOME


@pytest.fixture
def fake_fs(monkeypatch):
    """
    Replace Path.exists with a lookup in a set of path strings.

    Tests add paths to the returned set to make them "exist".
    """
    existing = set()
    monkeypatch.setattr(Path, "exists", lambda self, *args, **kwargs: str(self) in existing)
    return existing
