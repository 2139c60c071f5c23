"""Settings management for tmdbfiles."""
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Platform-appropriate settings directory
# ---------------------------------------------------------------------------

APP_DIR_NAME = "TMDbFiles"


def app_data_dir() -> Path:
    """Return the platform settings directory, creating it if needed."""
    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home()))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    d = base / APP_DIR_NAME
    d.mkdir(parents=True, exist_ok=True)
    return d


SETTINGS_FILE_NAME = "settings.json"


# ---------------------------------------------------------------------------
# Default values for every known key
# ---------------------------------------------------------------------------

# {0} show name, {1} season name, {2} episode number, {3} episode name
DEFAULT_EPISODE_TITLE_FORMAT = "{0} {1}, Episode {2} - {3}"

DEFAULT_SETTINGS: dict[str, Any] = {
    # TMDB
    "tmdb_api_key": "",
    "tmdb_language": "en-US",

    # Artwork
    "image_size": "original",

    # Configuration cache
    "config_max_age_days": 7,

    # Titles
    "episode_title_format": DEFAULT_EPISODE_TITLE_FORMAT,
}


# ---------------------------------------------------------------------------
# SettingsManager -- reads / writes one settings file
# ---------------------------------------------------------------------------

class SettingsManager:
    """Settings store backed by a JSON file.

    Usage:
        mgr = SettingsManager()
        key = mgr.get("tmdb_api_key")
        mgr.set("tmdb_api_key", "abc123")
        mgr.save()
    """

    def __init__(self, path: Path | None = None):
        self.path = path or app_data_dir() / SETTINGS_FILE_NAME
        self._data: dict[str, Any] = self._load()

    # -- public API -------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        fallback = DEFAULT_SETTINGS.get(key, default)
        return self._data.get(key, fallback)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def save(self) -> bool:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            return True
        except IOError as e:
            log.warning("Could not save settings to %s: %s", self.path, e)
            return False

    def all(self) -> dict[str, Any]:
        """Return a merged view: defaults + saved values."""
        merged = DEFAULT_SETTINGS.copy()
        merged.update(self._data)
        return merged

    def reload(self) -> None:
        self._data = self._load()

    # -- private ----------------------------------------------------------

    def _load(self) -> dict[str, Any]:
        if self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
            except (json.JSONDecodeError, IOError):
                log.warning("Ignoring unreadable settings file %s", self.path)
        return {}


# ---------------------------------------------------------------------------
# Template helpers
# ---------------------------------------------------------------------------

def get_sample_episode() -> tuple[str, str, int, str]:
    return ("The Night Manager", "Season 1", 5, "Episode 5")


def validate_title_format(template: str) -> tuple[bool, str]:
    """Check that *template* renders with the four episode title fields."""
    if not template or not template.strip():
        return False, "Template cannot be empty"
    try:
        result = template.format(*get_sample_episode())
        if not result:
            return False, "Template produced empty result"
        return True, ""
    except IndexError:
        return False, "Template uses more than four fields"
    except KeyError as e:
        return False, f"Unknown variable: {e}"
    except ValueError as e:
        return False, f"Format error: {e}"
