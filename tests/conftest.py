"""
Pytest fixtures for Docuflow tests.

Provides an isolated environment for Settings and helpers for building
HTTP responses without a network.
"""
import os
import pytest
import requests

# Variables read by docuflow; cleared for every test so a developer's
# shell or .env.local does not leak into assertions
DOCUFLOW_ENV_VARS = [
    "NEXT_PUBLIC_SUPABASE_URL",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_PROJECT_REF",
    "DATABASE_URL",
    "MIGRATIONS_DIR",
    "REQUEST_TIMEOUT",
    "CLI_TIMEOUT",
    "ENCRYPTION_KEY",
    "NEXT_PUBLIC_ENCRYPTION_KEY",
    "MICROSOFT_CLIENT_ID",
    "MICROSOFT_CLIENT_SECRET",
    "MICROSOFT_REDIRECT_URI",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
]


@pytest.fixture(autouse=True)
def isolated_env():
    """Remove Docuflow variables and restore the environment afterwards."""
    original_env = os.environ.copy()
    for name in DOCUFLOW_ENV_VARS:
        os.environ.pop(name, None)
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def make_response():
    """Build a requests.Response with a given status and body."""
    def _make(status_code: int = 200, text: str = "", reason: str = "") -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response._content = text.encode("utf-8")
        response.encoding = "utf-8"
        response.reason = reason or ("OK" if status_code < 400 else "Error")
        return response
    return _make
