"""TMDB API client module."""
import logging
import os
import time
from pathlib import Path
from typing import Any

import requests
from dotenv import load_dotenv

from .models import MovieResult, ShowResult, SeasonDetails
from .settings import SettingsManager

log = logging.getLogger(__name__)


TMDB_BASE_URL = "https://api.themoviedb.org/3"
IMAGE_BASE_URL = "https://image.tmdb.org/t/p/"
DEFAULT_TIMEOUT = 10
RATE_LIMIT_DELAY = 0.25  # 250ms between requests to avoid rate limiting
DEFAULT_LANGUAGE = "en-US"
MAX_ATTEMPTS = 3  # only HTTP 429 responses are retried


def load_api_key(settings: SettingsManager | None = None) -> str | None:
    """
    Load TMDB API key from environment, .env file or saved settings.

    Priority:
    1. TMDB_API_KEY environment variable
    2. .env file in current directory
    3. .env file in user home directory
    4. ``tmdb_api_key`` in the settings file

    Returns:
        API key string or None if not found
    """
    api_key = os.environ.get("TMDB_API_KEY")
    if api_key:
        return api_key

    for env_path in (Path.cwd() / ".env", Path.home() / ".env"):
        if env_path.exists():
            load_dotenv(env_path)
            api_key = os.environ.get("TMDB_API_KEY")
            if api_key:
                return api_key

    if settings is None:
        settings = SettingsManager()
    return settings.get("tmdb_api_key") or None


class TMDBError(Exception):
    """Exception raised for TMDB API errors."""
    pass


class TMDBClient:
    """Client for TMDB API.

    Results are returned in the order TMDB ranks them; no re-scoring is
    done here.
    """

    def __init__(
        self,
        api_key: str | None = None,
        language: str | None = None,
        settings: SettingsManager | None = None,
    ):
        """
        Initialize TMDB client.

        Args:
            api_key: TMDB API key. If not provided, attempts to load from env/.env/settings.
            language: TMDB API language tag (e.g. "en-US"). Falls back to
                      DEFAULT_LANGUAGE when *None*.
            settings: Settings to read the API key from.

        Raises:
            TMDBError: If API key is not found
        """
        self.api_key = api_key or load_api_key(settings)
        if not self.api_key:
            raise TMDBError(
                "TMDB API key not found.\n"
                "Set it using one of these methods:\n"
                "  1. Environment variable: export TMDB_API_KEY=your_key\n"
                "  2. Create a .env file with: TMDB_API_KEY=your_key\n"
                "Get your free API key at: https://www.themoviedb.org/settings/api"
            )
        self.language = language or DEFAULT_LANGUAGE
        self._last_request_time = 0.0
        log.debug("Using TMDB language: %s", self.language)

    def _rate_limit(self) -> None:
        """Apply rate limiting between requests."""
        elapsed = time.time() - self._last_request_time
        if elapsed < RATE_LIMIT_DELAY:
            time.sleep(RATE_LIMIT_DELAY - elapsed)
        self._last_request_time = time.time()

    def _request(
        self,
        endpoint: str,
        params: dict | None = None,
        allow_missing: bool = False,
    ) -> dict | None:
        """
        Make a request to the TMDB API.

        Args:
            endpoint: API endpoint (e.g., '/search/movie')
            params: Query parameters
            allow_missing: Return None instead of raising on HTTP 404

        Returns:
            JSON response

        Raises:
            TMDBError: On transport errors, HTTP errors or undecodable bodies
        """
        url = f"{TMDB_BASE_URL}{endpoint}"
        all_params = {
            "api_key": self.api_key,
            "language": self.language,
            **(params or {})
        }

        # Log the request (hide API key)
        log_params = {k: v for k, v in all_params.items() if k != "api_key"}
        log.debug("GET %s params=%s", endpoint, log_params)

        for attempt in range(MAX_ATTEMPTS):
            self._rate_limit()
            try:
                response = requests.get(url, params=all_params, timeout=DEFAULT_TIMEOUT)
            except requests.exceptions.RequestException as e:
                raise TMDBError(f"Request to {endpoint} failed: {e}") from e

            log.debug("Response status: %s", response.status_code)

            if response.status_code == 429:  # Rate limited
                try:
                    retry_after = max(int(response.headers.get("Retry-After", 1)), 0)
                except (TypeError, ValueError):
                    # HTTP-date form
                    retry_after = 1
                log.debug(
                    "Rate limited, waiting %ss (attempt %d/%d)",
                    retry_after, attempt + 1, MAX_ATTEMPTS,
                )
                time.sleep(retry_after)
                continue

            if response.status_code == 404 and allow_missing:
                return None

            try:
                response.raise_for_status()
                data = response.json()
            except requests.exceptions.HTTPError as e:
                raise TMDBError(f"TMDB returned HTTP {response.status_code} for {endpoint}") from e
            except ValueError as e:
                raise TMDBError(f"Invalid JSON from {endpoint}") from e

            if "results" in data:
                log.debug("Found %d results", len(data["results"]))
            return data

        raise TMDBError(f"Rate limited by TMDB on {endpoint}")

    def search_movies(self, query: str) -> list[MovieResult]:
        """
        Search for movies on TMDB.

        Args:
            query: Movie title to search for

        Returns:
            Matching movies, most relevant first
        """
        data = self._request("/search/movie", {"query": query})
        return [MovieResult.from_api(item) for item in data.get("results") or []]

    def search_shows(self, query: str) -> list[ShowResult]:
        """
        Search for TV series on TMDB.

        Args:
            query: Series name to search for

        Returns:
            Matching shows, most relevant first
        """
        data = self._request("/search/tv", {"query": query})
        return [ShowResult.from_api(item) for item in data.get("results") or []]

    def get_season_details(self, show_id: int, season_number: int) -> SeasonDetails | None:
        """
        Get a season and its episodes from TMDB.

        Args:
            show_id: TMDB series ID
            season_number: Season number

        Returns:
            SeasonDetails, or None if TMDB has no such season
        """
        data = self._request(f"/tv/{show_id}/season/{season_number}", allow_missing=True)
        if not data:
            return None
        return SeasonDetails.from_api(data)

    def get_configuration(self) -> dict[str, Any]:
        """Fetch the TMDB API configuration (image base URLs and sizes)."""
        return self._request("/configuration")
