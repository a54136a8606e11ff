"""Shared fixtures for yamnet tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from yamnet.auth import TokenAuth

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def token_auth() -> TokenAuth:
    """Return a TokenAuth instance with a static test token."""
    return TokenAuth("test-token-123")


@pytest.fixture
def current_user_json() -> dict:
    """Load the current_user fixture JSON."""
    return json.loads((FIXTURES_DIR / "current_user.json").read_text())


@pytest.fixture
def users_json() -> list[dict]:
    """Load the users fixture JSON."""
    return json.loads((FIXTURES_DIR / "users.json").read_text())
