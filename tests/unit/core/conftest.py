"""Shared fixtures for core unit tests"""

import pytest

from txtventure.config import Settings
from txtventure.core.paths import PathResolver


SAMPLE_SCRIPT = """\
Welcome, traveller. This part has no header and is never written.
***
## The Dark Cave

It is dark. Go back to the <#Entrance Hall>, or press on to the <#Dark Cave Pool>.
***
## Entrance Hall

A draughty hall. The <#The Dark Cave> yawns to the north.
"""


@pytest.fixture(name="resolver")
def resolver_fixture():
    return PathResolver("http://example.com", destination="game", base_path="out")


@pytest.fixture(name="settings")
def settings_fixture(tmp_path):
    """Settings writing under tmp_path with the default path mapping and logging off."""
    return Settings(
        hostname="http://example.com",
        destination="game",
        base_path=str(tmp_path / "out"),
        path_map={},
        logging=False,
    )


@pytest.fixture(name="script")
def script_fixture():
    return SAMPLE_SCRIPT
