"""Centralised settings for the page-info service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Initial page fetch
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("PAGEINFO_REQUEST_TIMEOUT", "15.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "PAGEINFO_USER_AGENT",
            "Mozilla/5.0 (compatible; PageInfo-Bot/1.0)",
        )
    )

    # ------------------------------------------------------------------
    # Reachability probing
    # ------------------------------------------------------------------
    probe_timeout: float = field(
        default_factory=lambda: float(os.environ.get("PAGEINFO_PROBE_TIMEOUT", "10.0"))
    )
    probe_deadline: float = field(
        default_factory=lambda: float(os.environ.get("PAGEINFO_PROBE_DEADLINE", "60.0"))
    )
    probe_concurrency: int = field(
        default_factory=lambda: int(os.environ.get("PAGEINFO_PROBE_CONCURRENCY", "16"))
    )

    # ------------------------------------------------------------------
    # HTTP service
    # ------------------------------------------------------------------
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.environ.get("PAGEINFO_CORS_ORIGINS", "*"))
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("PAGEINFO_LOG_LEVEL", "INFO").upper()
    )


def configure_logging(level: str | int | None = None) -> None:
    """Install the root handler once; later calls only adjust the level."""
    resolved = level if level is not None else settings.log_level
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=resolved, format=_LOG_FORMAT)
    else:
        root.setLevel(resolved)


# Module-level singleton - import this everywhere:
#   from pageinfo.config import settings
settings = Settings()
