"""
Environment and configuration management.

This module locates the web app's .env.local files, loads them into the
process environment and builds Settings for Docuflow scripts.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from docuflow.core.settings import ENV_NAMES, ConfigurationError, Settings

logger = logging.getLogger(__name__)

# Searched in order; the first one found is loaded
ENV_FILE_CANDIDATES = (
    Path("apps/web/.env.local"),
    Path(".env.local"),
)


def find_env_file(root: Optional[Path] = None) -> Optional[Path]:
    """
    Find the first env file that exists under root.

    Args:
        root: Repository root (default: current directory)

    Returns:
        Path to the env file, or None if none exist
    """
    root = Path(root) if root else Path.cwd()

    for candidate in ENV_FILE_CANDIDATES:
        env_path = root / candidate
        if env_path.is_file():
            return env_path

    return None


def load_env_files(root: Optional[Path] = None) -> Optional[Path]:
    """
    Load the first env file found under root into os.environ.

    Variables that are already exported are not overridden.

    Args:
        root: Repository root (default: current directory)

    Returns:
        Path of the loaded file, or None if no file was found
    """
    env_path = find_env_file(root)
    if env_path is None:
        logger.debug("No .env.local file found")
        return None

    load_dotenv(env_path, override=False)
    logger.debug(f"Loaded environment from {env_path}")
    return env_path


def build_settings() -> Settings:
    """
    Build Settings from the process environment.

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If an environment value cannot be parsed
    """
    try:
        return Settings()
    except ValidationError as e:
        invalid = []
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "settings"
            invalid.append(f"{ENV_NAMES.get(field, field.upper())} ({error['msg']})")
        raise ConfigurationError(invalid=invalid) from e


def load_settings(root: Optional[Path] = None) -> Settings:
    """
    Load env files and build a fresh Settings instance.

    Args:
        root: Repository root (default: current directory)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If an environment value cannot be parsed
    """
    load_env_files(root)
    return build_settings()


def get_config_value(key: str, default: Any = None) -> Any:
    """
    Get a single configuration value.

    Args:
        key: Configuration key (environment variable name)
        default: Default value if not set or empty

    Returns:
        Configuration value
    """
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value


def mask_secret(value: Optional[str], visible: int = 20) -> str:
    """Show only the first characters of a secret."""
    if not value:
        return ""
    return f"{value[:visible]}..."


def mask_tail(value: Optional[str], visible: int = 4) -> str:
    """Show only the last characters of a secret."""
    if not value:
        return ""
    return f"***{value[-visible:]}"
