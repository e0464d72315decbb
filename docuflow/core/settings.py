import re
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROJECT_REF = "nneyhfhdthpxmkemyenm"

PROJECT_REF_PATTERN = re.compile(r"https://([^.]+)\.supabase\.co")

# Environment variable names reported when a value is missing
ENV_NAMES = {
    "project_url": "NEXT_PUBLIC_SUPABASE_URL or SUPABASE_URL",
    "supabase_service_role_key": "SUPABASE_SERVICE_ROLE_KEY",
    "database_url": "DATABASE_URL",
}


class ConfigurationError(Exception):
    """Raised when configuration values are missing or cannot be parsed."""

    def __init__(
        self,
        missing: Optional[list[str]] = None,
        invalid: Optional[list[str]] = None,
    ):
        self.missing = missing or []
        self.invalid = invalid or []
        parts = []
        if self.missing:
            parts.append(f"Missing configuration: {', '.join(self.missing)}")
        if self.invalid:
            parts.append(f"Invalid configuration: {', '.join(self.invalid)}")
        super().__init__("; ".join(parts))


class Settings(BaseSettings):
    """Settings for the Docuflow operator scripts.

    Required (checked per script):
      - NEXT_PUBLIC_SUPABASE_URL or SUPABASE_URL
      - SUPABASE_SERVICE_ROLE_KEY

    Optional:
      - SUPABASE_PROJECT_REF: project used by the CLI (derived from the URL
        when unset)
      - DATABASE_URL: direct Postgres connection for running migrations
      - MIGRATIONS_DIR: where migration files live
    """

    model_config = SettingsConfigDict(extra="ignore")

    next_public_supabase_url: Optional[str] = None
    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None
    supabase_project_ref: Optional[str] = None

    database_url: Optional[str] = None

    migrations_dir: str = "supabase/migrations"

    request_timeout: int = Field(
        default=60,
        description="HTTP request timeout in seconds",
    )
    cli_timeout: int = Field(
        default=600,
        description="Timeout for Supabase CLI commands in seconds",
    )

    @field_validator(
        "next_public_supabase_url",
        "supabase_url",
        "supabase_service_role_key",
        "supabase_project_ref",
        "database_url",
        mode="before",
    )
    @classmethod
    def _blank_as_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def project_url(self) -> Optional[str]:
        """Supabase URL, preferring NEXT_PUBLIC_SUPABASE_URL."""
        url = self.next_public_supabase_url or self.supabase_url
        return url.rstrip("/") if url else None

    @property
    def project_ref(self) -> str:
        """Project reference: explicit, parsed from the URL, or the default."""
        if self.supabase_project_ref:
            return self.supabase_project_ref
        url = self.project_url
        if url:
            match = PROJECT_REF_PATTERN.match(url)
            if match:
                return match.group(1)
        return DEFAULT_PROJECT_REF

    def url_or_default(self) -> str:
        """Configured URL, or the hosted URL for the project reference."""
        return self.project_url or f"https://{self.project_ref}.supabase.co"

    def missing(self, *keys: str) -> list[str]:
        """Return env var names for the given keys that have no value."""
        return [ENV_NAMES.get(key, key.upper()) for key in keys if not getattr(self, key)]

    def require(self, *keys: str) -> None:
        """Raise ConfigurationError naming every key that has no value."""
        missing = self.missing(*keys)
        if missing:
            raise ConfigurationError(missing)
