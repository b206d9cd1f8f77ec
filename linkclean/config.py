"""Centralised settings for linkclean.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag such as ``LINKCLEAN_VERBOSE=1`` from the environment."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP resolver
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("LINKCLEAN_REQUEST_TIMEOUT", "30.0"))
    )
    max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("LINKCLEAN_MAX_REDIRECTS", "20"))
    )
    max_meta_refresh_hops: int = field(
        default_factory=lambda: int(os.environ.get("LINKCLEAN_MAX_META_REFRESH_HOPS", "5"))
    )

    # ------------------------------------------------------------------
    # Retry / backoff
    # ------------------------------------------------------------------
    retry_max: int = field(
        default_factory=lambda: int(os.environ.get("LINKCLEAN_RETRY_MAX", "3"))
    )
    retry_base_delay: float = field(
        default_factory=lambda: float(os.environ.get("LINKCLEAN_RETRY_BASE_DELAY", "1.0"))
    )

    # ------------------------------------------------------------------
    # Cleaning
    # ------------------------------------------------------------------
    generic_fallback: bool = field(
        default_factory=lambda: _env_bool("LINKCLEAN_GENERIC_FALLBACK", False)
    )

    # ------------------------------------------------------------------
    # CLI
    # ------------------------------------------------------------------
    copy_to_clipboard: bool = field(
        default_factory=lambda: _env_bool("LINKCLEAN_COPY", True)
    )
    clipboard_command: str = field(
        default_factory=lambda: os.environ.get("LINKCLEAN_CLIPBOARD_COMMAND", "")
    )
    verbose: bool = field(
        default_factory=lambda: _env_bool("LINKCLEAN_VERBOSE", False)
    )


# Module-level singleton; import this everywhere:
#   from linkclean.config import settings
settings = Settings()
