"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with the standard one million item catalog when no
variables are set.  Tests and embedding applications may construct
their own ``Settings`` instance and hand it to ``create_app``.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Virtual Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Number of synthetic items in the catalog.  Ids run from 1 to
    # ``catalog_size`` inclusive.
    catalog_size: int = int(os.getenv("CATALOG_SIZE", "1000000"))

    # A search scan stops once this many matches have been collected.
    search_result_cap: int = int(os.getenv("SEARCH_RESULT_CAP", "1000"))

    # Maximum number of memoized search terms.  ``0`` keeps every term
    # until the next order change.
    search_cache_size: int = int(os.getenv("SEARCH_CACHE_SIZE", "0"))

    # When enabled, search results are arranged by the custom order
    # instead of plain ascending id order.
    search_respects_custom_order: bool = _env_bool("SEARCH_RESPECTS_CUSTOM_ORDER")

    default_page_limit: int = int(os.getenv("DEFAULT_PAGE_LIMIT", "20"))
    max_page_limit: int = int(os.getenv("MAX_PAGE_LIMIT", "100"))

    # Comma‑separated list of allowed CORS origins.  ``*`` allows all.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))

    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` split into a list of origins."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at import time, environment variables should be
# set before importing this module.
settings = Settings()
