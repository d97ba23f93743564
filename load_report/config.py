r"""
Rendering configuration and environment lookup.

Settings can be overridden with ``LOAD_REPORT_*`` environment variables,
optionally kept in a ``.env`` file:

    - LOAD_REPORT_OUTPUT: default output mode for the CLI ("" or "csv")
    - LOAD_REPORT_LOG_LEVEL: CLI log level (default WARNING)

    from load_report.config import BAR_WIDTH, get_env

    mode = get_env("OUTPUT", default="")
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Look for .env in current dir, then the project root
_env_file = Path(".env")
if not _env_file.exists():
    _env_file = Path(__file__).parent.parent / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

__all__ = [
    "BAR_CHAR",
    "BAR_WIDTH",
    "ENV_PREFIX",
    "OUTPUT_MODES",
    "default_log_level",
    "default_output",
    "get_env",
]

ENV_PREFIX = "LOAD_REPORT_"

# Histogram bar for the most populated bucket
BAR_WIDTH = 40
BAR_CHAR = "■"

# Built-in output modes. Any other non-empty value is a template body.
OUTPUT_MODES: dict[str, str] = {
    "": "Human-readable summary with histogram and latency distribution",
    "csv": "One CSV row per request, timings in milliseconds",
}


def get_env(key: str, *, default: str | None = None) -> str | None:
    """Get environment variable with LOAD_REPORT_ prefix.

    Args:
        key: Variable name without prefix (e.g., "OUTPUT").
        default: Default value if not set.

    Returns:
        Environment variable value or default.
    """
    return os.environ.get(f"{ENV_PREFIX}{key}", default)


def default_output() -> str:
    """Output mode used when the caller does not choose one."""
    return get_env("OUTPUT", default="") or ""


def default_log_level() -> str:
    """Log level used by the CLI when not verbose."""
    return (get_env("LOG_LEVEL", default="WARNING") or "WARNING").upper()
