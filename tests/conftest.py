"""Pytest configuration and shared fixtures for the dataconv test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest

from dataconv.tree import MappingValue, NumberValue, Value

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by hypothesis")


@pytest.fixture
def people_json() -> str:
    """Provide a small JSON array of flat objects.

    Returns
    -------
    str
        Two people with an int id, a name and a boolean flag.

    """
    return '[{"id": 1, "name": "John", "active": true}, {"id": 2, "name": "Jane", "active": false}]'


@pytest.fixture
def people_csv() -> str:
    """Provide the CSV form of :func:`people_json`."""
    return "id,name,active\n1,John,true\n2,Jane,false"


@pytest.fixture
def isolated_config_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty working directory with no config file discoverable.

    Returns
    -------
    Path
        The working directory, which is also used as the home directory.

    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.delenv("DATACONV_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def restore_root_logging():
    """Put back the root logger's handlers and level after a CLI run reconfigures them."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def deep_mapping():
    """Provide a builder for chains of single-key mappings.

    ``deep_mapping(depth)`` returns ``{"a": {"a": ... 1}}`` nested ``depth``
    levels, built without recursion.

    """

    def build(depth: int) -> Value:
        value: Value = NumberValue(1)
        for _ in range(depth):
            value = MappingValue({"a": value})
        return value

    return build
