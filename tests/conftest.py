"""Shared test fixtures for shccn tests."""

import os
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def fixtures_dir():
    """Directory holding the sample scripts."""
    return FIXTURES


@pytest.fixture
def two_functions_script():
    """Two functions with one for loop each, no top-level statements."""
    return FIXTURES / "two_functions.sh"


@pytest.fixture
def mixed_script():
    """Functions, a case statement and top-level code."""
    return FIXTURES / "mixed.sh"


@pytest.fixture
def quoted_script():
    """Keywords and braces that only appear inside strings."""
    return FIXTURES / "quoted.sh"


@pytest.fixture
def write_script(tmp_path):
    """Write a script under tmp_path and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep config discovery away from the real home and working directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("SHCCN_"):
            monkeypatch.delenv(key)
    return tmp_path
