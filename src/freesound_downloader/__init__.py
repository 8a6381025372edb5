"""Freesound Downloader -- search and download sounds from the Freesound API.

Core modules:
    config  -- Client configuration via pydantic-settings (FREESOUND_* env vars,
               .env / .env.local). Resolves the API key once at construction.
    errors  -- Exception hierarchy. Only configuration failures raise; request
               failures are reported as None/False by the client.
    models  -- Constants and request value objects (search, download)

Subpackages:
    api     -- Freesound HTTP client (text search, advanced search, download)
"""

from .api.client import FreesoundClient
from .config import FreesoundConfig
from .errors import ConfigError, FreesoundError

__all__ = ["ConfigError", "FreesoundClient", "FreesoundConfig", "FreesoundError"]
