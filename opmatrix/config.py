"""Centralised settings for the opcode-matrix scraper.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlsplit

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def origin_of(url: str) -> str:
    """Return ``scheme://host`` of *url*."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}"


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Source wiki
    # ------------------------------------------------------------------
    index_url: str = field(
        default_factory=lambda: os.environ.get(
            "OPMATRIX_INDEX_URL", "https://sneslab.net/wiki/65c816_Opcode_Matrix"
        )
    )

    @property
    def base_url(self) -> str:
        """``scheme://host`` of :attr:`index_url`; detail links are joined to it."""
        return origin_of(self.index_url)

    # ------------------------------------------------------------------
    # Page cache
    # ------------------------------------------------------------------
    cache_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("OPMATRIX_CACHE_DIR", "ops"))
    )
    cache_encoding: str = field(
        default_factory=lambda: os.environ.get("OPMATRIX_CACHE_ENCODING", "utf-8")
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    rate_limit_delay: float = field(
        default_factory=lambda: float(os.environ.get("RATE_LIMIT_DELAY", "0.0"))
    )

    def ensure_cache_dir(self, cache_dir: Path | None = None) -> Path:
        """Create the cache directory if it does not exist and return it."""
        path = cache_dir if cache_dir is not None else self.cache_dir
        path.mkdir(parents=True, exist_ok=True)
        return path


# Module-level singleton, import this everywhere:
#   from opmatrix.config import settings
settings = Settings()
