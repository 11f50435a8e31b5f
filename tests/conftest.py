import importlib

import pytest

import config
from registry import load_config


def _reload_config():
    return importlib.reload(config)


@pytest.fixture
def undeployed_env(monkeypatch):
    for name in config.REQUIRED_KEYS:
        monkeypatch.delenv(name, raising=False)
    _reload_config()
    yield
    monkeypatch.undo()
    _reload_config()


@pytest.fixture
def deployed_env(monkeypatch):
    monkeypatch.setenv("PROJECT_ID", "review-insights-prod")
    monkeypatch.setenv("SCHEMA_NAME", "reviews")
    monkeypatch.setenv("REMOTE_CONNECTION", "review-insights-prod.us.vertex-ai")
    _reload_config()
    yield
    monkeypatch.undo()
    _reload_config()


@pytest.fixture
def cfg(deployed_env):
    return load_config(validate=True)
