#!/usr/bin/env python3
"""
Unit tests for the read-only migration scripts:
scripts/migrations/show_migration.py,
scripts/migrations/run_document_requests_delete_migration.py and
scripts/migrations/run_employee_directory_migration.py

These scripts print SQL for the SQL Editor and never execute it.
"""

import pytest
from pathlib import Path
from unittest.mock import patch

import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent.parent / "scripts"))

from migrations import (
    run_document_requests_delete_migration,
    run_employee_directory_migration,
    show_migration,
)
from docuflow.core.settings import Settings


class TestShowMigration:
    """Tests for show_migration.main."""

    @patch('migrations.show_migration.configure_script_logging')
    @patch('migrations.show_migration.load_settings')
    def test_prints_by_name(self, mock_load, mock_logging, migration_file, capsys):
        """Test looking a migration up by stem in the migrations directory."""
        mock_load.return_value = Settings(
            supabase_project_ref="abc",
            migrations_dir=str(migration_file.parent),
        )

        with patch.object(sys, 'argv', [
            'show_migration.py', '20240101000006_create_link_organization_function'
        ]):
            assert show_migration.main() == 0

        out = capsys.readouterr().out
        assert "Migration: 20240101000006_create_link_organization_function" in out
        assert "CREATE OR REPLACE FUNCTION link_organization" in out
        assert "https://supabase.com/dashboard/project/abc/sql/new" in out
        assert "supabase db push" not in out

    @patch('migrations.show_migration.configure_script_logging')
    @patch('migrations.show_migration.load_settings')
    def test_cli_hint_and_title(self, mock_load, mock_logging, migration_file, capsys):
        """Test the custom title and the CLI alternative."""
        mock_load.return_value = Settings()

        with patch.object(sys, 'argv', [
            'show_migration.py', str(migration_file), '--title', 'Link Orgs', '--cli-hint'
        ]):
            assert show_migration.main() == 0

        out = capsys.readouterr().out
        assert out.startswith("Link Orgs")
        assert "supabase db push" in out

    @patch('migrations.show_migration.configure_script_logging')
    @patch('migrations.show_migration.load_settings')
    def test_missing(self, mock_load, mock_logging, temp_dir, capsys):
        """Test exit code 1 for a missing file."""
        mock_load.return_value = Settings(migrations_dir=str(temp_dir))

        with patch.object(sys, 'argv', ['show_migration.py', 'nope']):
            assert show_migration.main() == 1

        assert str(temp_dir / "nope.sql") in capsys.readouterr().out


class TestDocumentRequestsDeleteMigration:
    """Tests for run_document_requests_delete_migration.main."""

    @patch('migrations.run_document_requests_delete_migration.configure_script_logging')
    def test_prints_policy(self, mock_logging, temp_file, temp_dir, capsys):
        """Test that the policy SQL is printed with the dashboard link."""
        temp_file(
            str(run_document_requests_delete_migration.MIGRATION_FILE),
            "CREATE POLICY delete_own ON document_requests FOR DELETE USING (true);\n",
        )

        with patch.object(sys, 'argv', ['prog', '--root', str(temp_dir)]):
            assert run_document_requests_delete_migration.main() == 0

        out = capsys.readouterr().out
        assert out.startswith(run_document_requests_delete_migration.TITLE)
        assert "CREATE POLICY delete_own" in out
        assert "https://app.supabase.com" in out
        assert run_document_requests_delete_migration.FOOTER in out

    @patch('migrations.run_document_requests_delete_migration.configure_script_logging')
    def test_missing_file(self, mock_logging, temp_dir, capsys, caplog):
        """Test exit code 1 with the expected location."""
        with patch.object(sys, 'argv', ['prog', '--root', str(temp_dir)]):
            assert run_document_requests_delete_migration.main() == 1

        assert "Error reading migration file" in caplog.text
        out = capsys.readouterr().out
        assert "20250104000001_add_document_requests_delete_policy.sql" in out


class TestEmployeeDirectoryMigration:
    """Tests for run_employee_directory_migration.main."""

    @patch('migrations.run_employee_directory_migration.configure_script_logging')
    def test_prints_with_cli_alternative(self, mock_logging, temp_file, temp_dir, capsys):
        """Test that the SQL and the supabase db push alternative are printed."""
        temp_file(
            str(run_employee_directory_migration.MIGRATION_FILE),
            "ALTER TABLE profiles ADD COLUMN job_title text;\n",
        )

        with patch.object(sys, 'argv', ['prog', '--root', str(temp_dir)]):
            assert run_employee_directory_migration.main() == 0

        out = capsys.readouterr().out
        assert "ALTER TABLE profiles ADD COLUMN job_title text;" in out
        assert "supabase db push" in out
        assert "employee directory will be fully functional" in out

    @patch('migrations.run_employee_directory_migration.configure_script_logging')
    def test_missing_file(self, mock_logging, temp_dir):
        """Test exit code 1 when the file is absent."""
        with patch.object(sys, 'argv', ['prog', '--root', str(temp_dir)]):
            assert run_employee_directory_migration.main() == 1
