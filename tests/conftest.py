"""Shared fixtures: settings, the Flask app, and its test client."""

import pytest
from loguru import logger

from simpleapp.config import Settings, get_settings
from simpleapp.main import create_app


@pytest.fixture(autouse=True)
def _reset_state():
    """Drop cached settings and Loguru sinks between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger.remove()


@pytest.fixture
def settings():
    return Settings(_env_file=None, log_level="WARNING")


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
