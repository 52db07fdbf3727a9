"""Shared test fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the default config file inside the test's temp directory."""
    config_path = tmp_path / "config_home" / "namefit" / "config.yaml"
    monkeypatch.setattr("namefit.config.default_config_path", lambda: config_path)
    monkeypatch.delenv("NAMEFIT_CONFIG", raising=False)
    return config_path


@pytest.fixture
def never_exists():
    return lambda candidate: False
