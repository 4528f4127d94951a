"""Root test configuration: isolate each test from ambient config and env"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test in an empty directory with no RICHMD_* variables set."""
    for name in list(os.environ):
        if name.startswith("RICHMD_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
