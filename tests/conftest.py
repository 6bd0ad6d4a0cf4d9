"""Shared test fixtures for the pmlogctl test suite."""

import io
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from pmlogctl.backend import MemoryRegistry
from pmlogctl.lib.log_lib import OutputManager
from pmlogctl.registry import ContextRegistryClient


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent


# ---------------------------------------------------------------------------
# Temporary directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.pmlogctl/."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory so no .pmlogctl.json is picked up."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


# ---------------------------------------------------------------------------
# Registry fixtures
# ---------------------------------------------------------------------------
# network=err, network.wifi=notice, ui=crit
SCENARIO = {"network": 3, "network.wifi": 5, "ui": 2}


@pytest.fixture
def registry():
    """A MemoryRegistry holding the global context plus SCENARIO."""
    return MemoryRegistry(dict(SCENARIO))


@pytest.fixture
def client(registry):
    return ContextRegistryClient(registry)


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def stdout():
    return io.StringIO()


@pytest.fixture
def stderr():
    return io.StringIO()


@pytest.fixture
def out(stdout, stderr):
    """An OutputManager writing to StringIO buffers (verbosity=0)."""
    return OutputManager(verbosity=0, file=stdout, err_file=stderr)


@pytest.fixture(autouse=True)
def _import_hints():
    """Ensure pmlogctl hints are registered."""
    import pmlogctl.hints  # noqa: F401
