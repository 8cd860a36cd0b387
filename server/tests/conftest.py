"""
Pytest configuration and fixtures for building generation tests.
"""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Add server directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Try multiple paths for .env file
env_paths = [
    Path(".env"),  # Current directory
    Path(__file__).parent.parent / ".env",  # server/.env
    Path(__file__).parent.parent.parent / ".env",  # project root .env
]

for env_path in env_paths:
    if env_path.exists():
        load_dotenv(env_path, override=False)
        break

# Variables read by internal.citygen.config
CONFIG_ENV_VARS = ["BUILDINGS_SEED"]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables so defaults apply."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep load_dotenv from reading a developer .env during the test
    monkeypatch.setattr("internal.citygen.config.load_dotenv", lambda *args, **kwargs: False)
    yield


@pytest.fixture
def seed_env(clean_env, monkeypatch):
    """Set the environment seed."""

    def set_seed(seed):
        monkeypatch.setenv("BUILDINGS_SEED", str(seed))

    return set_seed


@pytest.fixture
def tmp_env_file(tmp_path, monkeypatch):
    """Write a .env file into a temporary working directory."""

    def write(**values):
        env_file = tmp_path / ".env"
        env_file.write_text("".join(f"{key}={value}\n" for key, value in values.items()))
        monkeypatch.chdir(tmp_path)
        return env_file

    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield write
    # load_dotenv writes straight into os.environ
    for name in CONFIG_ENV_VARS:
        os.environ.pop(name, None)
