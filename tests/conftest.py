"""Root test configuration - isolate tests from local config and environment"""

import os

import pytest

from txtventure.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop TXTVENTURE_* env vars so a developer's shell cannot leak into settings."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
