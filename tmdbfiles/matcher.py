"""Pair a TMDB season/episode number with a local file."""
import logging
from typing import Iterable, Sequence

from .models import FileEntry

log = logging.getLogger(__name__)


# Naming styles tried in order (most specific first).  Each is formatted
# with (season, episode) and matched against the lowercased base name.
EPISODE_NAMING_STYLES = (
    "s{0:02d}e{1:02d}",  # Show S01E01
    "s{0}e{1}",          # Show S1E1
    "s{0}e{1:02d}",      # Show S1E01
    "s{0:02d}e{1}",      # Show S01E1
    "{0:02d}x{1:02d}",   # Show 01x01
    "{0}x{1:02d}",       # Show 1x01
    "{0}x{1}",           # Show 1x1
    "{0:02d}x{1}",       # Show 01x1
)


def find_episode_file(
    entries: Iterable[FileEntry],
    season: int,
    episode: int,
    naming_styles: Sequence[str] = EPISODE_NAMING_STYLES,
) -> FileEntry | None:
    """
    Find the file that most plausibly holds a season/episode pair.

    The first naming style that matches any file wins, and within a style
    the first file in *entries* order wins.  When no style matches, the
    first file whose name contains the bare episode number is returned.

    Args:
        entries: Candidate files
        season: Season number
        episode: Episode number
        naming_styles: Ordered format templates

    Returns:
        The matching FileEntry, or None
    """
    entries = list(entries)

    for style in naming_styles:
        try:
            token = style.format(season, episode)
        except (ValueError, IndexError, KeyError) as e:
            log.warning("Skipping naming style %r: %s", style, e)
            continue

        for entry in entries:
            if token in entry.name.lower():
                log.debug("s%se%s -> %s (style %r)", season, episode, entry.name, style)
                return entry

    # Last try is just the episode number
    number = str(episode)
    for entry in entries:
        if number in entry.name:
            log.debug("s%se%s -> %s (bare number)", season, episode, entry.name)
            return entry

    log.debug("No file for s%se%s", season, episode)
    return None
