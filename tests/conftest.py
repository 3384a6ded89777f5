"""Global pytest fixtures for PKGCFG."""

from __future__ import annotations

import os

import pytest

ENV_PREFIX = "PKGCFG_"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ``PKGCFG_*`` variables so the developer's shell cannot leak in."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
