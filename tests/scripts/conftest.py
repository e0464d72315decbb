"""
Pytest fixtures for Docuflow script tests.

Provides common fixtures for testing the operator scripts including:
- Temporary directories and files
- Supabase credentials in the environment
- Sample migration files
"""
import os
import pytest
import tempfile
from pathlib import Path
from unittest.mock import MagicMock


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_file(temp_dir):
    """Create a temporary file, including parent directories."""
    def _create_file(name: str, content: str = "") -> Path:
        file_path = temp_dir / name
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)
        return file_path
    return _create_file


@pytest.fixture
def supabase_env():
    """Set Supabase credentials in the environment."""
    test_env = {
        "SUPABASE_URL": "https://abcdefghijklmnop.supabase.co",
        "SUPABASE_SERVICE_ROLE_KEY": "service-role-key-0123456789abcdef",
    }
    os.environ.update(test_env)
    return test_env


@pytest.fixture
def sample_migration_sql():
    """Sample migration with a function body containing semicolons."""
    return """-- Link a user to an organization
CREATE TABLE IF NOT EXISTS organization_members (
    user_id uuid NOT NULL,
    organization_id uuid NOT NULL
);

CREATE OR REPLACE FUNCTION link_organization(p_user uuid, p_org uuid)
RETURNS void AS $$
BEGIN
    INSERT INTO organization_members VALUES (p_user, p_org);
END;
$$ LANGUAGE plpgsql SECURITY DEFINER;
"""


@pytest.fixture
def migration_file(temp_file, sample_migration_sql):
    """Write the sample migration under supabase/migrations."""
    return temp_file(
        "supabase/migrations/20240101000006_create_link_organization_function.sql",
        sample_migration_sql,
    )


@pytest.fixture
def mock_cli():
    """A SupabaseCLI stand-in where every command succeeds."""
    cli = MagicMock()
    cli.project_ref = "abcdefghijklmnop"
    cli.is_installed.return_value = True
    cli.is_authenticated.return_value = True
    cli.login.return_value = True
    cli.link.return_value = True
    return cli
