"""Parser module for extracting search terms and numbers from names.

Only the last path component is ever inspected: the directory name for
season lookups, the file name for episode numbers.
"""
import os
import re
from pathlib import Path


# Search-string cleanup rules (order matters - season markers must go
# before the blanket digit strip)
SEARCH_STRIP_RULES = [
    (re.compile(r'Season [0-9]+', re.IGNORECASE), ''),
    (re.compile(r'S [0-9]+', re.IGNORECASE), ''),
    (re.compile(r'S[0-9]+', re.IGNORECASE), ''),
    (re.compile(r'[0-9]+'), ''),
]

SEASON_PATTERN = re.compile(r'-?[0-9]+')

# Episode patterns (order matters - markers beat a bare number, which
# may be a resolution or a year)
EPISODE_PATTERNS = [
    re.compile(r'E([0-9]+)', re.IGNORECASE),
    re.compile(r'X([0-9]+)', re.IGNORECASE),
    re.compile(r'([0-9]+)'),
]

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def last_component(path: str | Path) -> str:
    """Return the final segment of *path*, resolving ``.`` and ``..`` first."""
    return Path(os.path.abspath(path)).name


def parse_int32(text: str) -> int | None:
    """Parse a signed 32-bit integer, or return None if *text* is out of range."""
    try:
        value = int(text)
    except ValueError:
        return None
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def apply_strip_rules(name: str, rules=SEARCH_STRIP_RULES) -> str:
    """Apply each ``(pattern, replacement)`` rule in order, trimming after each."""
    result = name
    for pattern, replacement in rules:
        result = pattern.sub(replacement, result).strip()
    return result


def derive_search_string(path: str | Path) -> str:
    """
    Build a TV show search string from a season directory name.

    Args:
        path: Path to the season directory, e.g. ``/shows/Breaking Bad Season 3``

    Returns:
        The directory name with season markers and digits removed
    """
    return apply_strip_rules(last_component(path))


def derive_season_number(path: str | Path) -> int:
    """
    Extract the season number from a season directory name.

    The first (optionally signed) digit run wins.

    Returns:
        The season number, or -1 if the name holds no number
    """
    match = SEASON_PATTERN.search(last_component(path))
    if not match:
        return -1
    value = parse_int32(match.group(0))
    return -1 if value is None else value


def derive_episode_number(name: str | Path) -> int:
    """
    Extract an episode number from a file name or path.

    Tries ``E<digits>``, then ``X<digits>``, then any digit run.

    Returns:
        The episode number, or -1 if nothing matched
    """
    text = last_component(name)
    for pattern in EPISODE_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        value = parse_int32(match.group(1))
        if value is not None:
            return value
    return -1
