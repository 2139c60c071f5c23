"""Cache module for storing the TMDB configuration locally."""
import json
import logging
import time
from pathlib import Path
from typing import Any

from .settings import app_data_dir
from .tmdb import IMAGE_BASE_URL

log = logging.getLogger(__name__)


CACHE_FILE = "tmdb_config.json"
DEFAULT_MAX_AGE_DAYS = 7


class ConfigCache:
    """Local JSON copy of the TMDB ``/configuration`` response."""

    def __init__(self, cache_dir: Path | None = None, max_age_days: float = DEFAULT_MAX_AGE_DAYS):
        """
        Initialize the cache.

        Args:
            cache_dir: Directory to store cache file. Defaults to the app data directory.
            max_age_days: A stored copy older than this is fetched again.
        """
        if cache_dir is None:
            cache_dir = app_data_dir()
        self.cache_path = Path(cache_dir) / CACHE_FILE
        self.max_age_days = max_age_days

    def is_fresh(self) -> bool:
        """Whether a stored copy exists and is younger than ``max_age_days``."""
        try:
            age = time.time() - self.cache_path.stat().st_mtime
        except OSError:
            return False
        return age < self.max_age_days * 86400

    def _load(self) -> dict[str, Any] | None:
        """Load the stored configuration, or None if unreadable."""
        try:
            with open(self.cache_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (ValueError, OSError):
            log.debug("Cached configuration unreadable, refetching")
            return None
        return data if isinstance(data, dict) else None

    def _save(self, configuration: dict[str, Any]) -> None:
        """Save configuration to disk."""
        try:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.cache_path, 'w', encoding='utf-8') as f:
                json.dump(configuration, f, indent=2, ensure_ascii=False)
        except IOError as e:
            log.warning("Could not write %s: %s", self.cache_path, e)

    def get_configuration(self, client) -> dict[str, Any]:
        """
        Return the TMDB configuration, fetching it when stale or missing.

        Args:
            client: Anything with a ``get_configuration()`` method

        Returns:
            The configuration mapping
        """
        if self.is_fresh():
            cached = self._load()
            if cached is not None:
                return cached

        log.debug("Fetching TMDB configuration")
        configuration = client.get_configuration()
        self._save(configuration)
        return configuration

    def clear(self) -> None:
        """Remove the stored configuration."""
        self.cache_path.unlink(missing_ok=True)


def image_base_url(configuration: dict[str, Any] | None) -> str:
    """Pick the image base URL out of a TMDB configuration, ending with '/'."""
    images = (configuration or {}).get("images") or {}
    base = images.get("secure_base_url") or images.get("base_url") or IMAGE_BASE_URL
    if not base.endswith("/"):
        base += "/"
    return base
