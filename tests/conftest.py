# tests/conftest.py
import pytest

import falta
from falta.config import FaltaConfig


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against code defaults, never a user's ~/.falta/config.yml"""
    falta.set_config(FaltaConfig.default())
    yield
    falta.set_config(None)
