"""Fixtures for driving the ``pkgcfg`` command through Click's CliRunner.

Every invocation runs in an isolated working directory, writes its flight
recorder to ``pkgcfg.log`` there (never to the user's log directory) and
renders console logs wide enough that Rich does not wrap them.
"""

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name

LOG_FILE = "pkgcfg.log"


@pytest.fixture
def runner():
    """Return a CliRunner with a local flight-recorder path and a wide console."""
    return CliRunner(env={"PKGCFG_LOG_PATH": LOG_FILE, "COLUMNS": "200"})


@pytest.fixture
def fs(runner):
    """Run the test inside a fresh temporary working directory."""
    with runner.isolated_filesystem():
        yield
