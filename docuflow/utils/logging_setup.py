"""
Logging for Docuflow scripts.

Status messages go to stderr through logging; SQL, response bodies and
instructions are printed to stdout by the scripts themselves.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_script_logging(
    verbose: bool = False,
    log_file: Optional[Path] = None,
    format_string: str = DEFAULT_FORMAT,
) -> None:
    """
    Configure root logging for a script run.

    Args:
        verbose: Log at DEBUG instead of INFO
        log_file: Optional file to append log records to
        format_string: Log message format

    Example:
        >>> configure_script_logging(verbose=True)
        >>> logging.getLogger(__name__).debug("Visible")
    """
    level = logging.DEBUG if verbose else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=handlers,
    )
