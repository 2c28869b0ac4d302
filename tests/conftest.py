"""
Shared fixtures.
"""

import pytest

from almantzod.core.config import Config, reset_config


@pytest.fixture(autouse=True)
def config():
    """Fresh global configuration, isolated from ALMANTZOD_* variables."""
    cfg = reset_config(Config(environ={}))
    yield cfg
    reset_config(Config(environ={}))
