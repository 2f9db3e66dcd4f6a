"""Test configuration and fixtures."""

import os

import logfire
import pytest


@pytest.fixture(scope="session", autouse=True)
def offline_logfire():
    """Keep Logfire local and silent for the whole test session."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run each test without CREDGEN_* variables or a stray .env file."""
    for key in list(os.environ):
        if key.startswith("CREDGEN_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
