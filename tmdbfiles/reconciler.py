"""Reconcile local movie files and season directories with TMDB.

The async functions are the implementation; ``match_movies`` and
``match_season`` are blocking adapters for callers without an event loop.
The catalog client is always passed in by the caller.
"""
import asyncio
import inspect
import logging
from pathlib import Path

from .errors import EmptyInputError, SeasonNotDeterminedError
from .matcher import find_episode_file
from .models import CatalogClient, FileEntry, MediaDetail, MovieResult, SeasonDetails, ShowResult
from .parser import (
    derive_episode_number,
    derive_search_string,
    derive_season_number,
    last_component,
)
from .scanner import list_video_files_async
from .settings import DEFAULT_EPISODE_TITLE_FORMAT
from .tmdb import IMAGE_BASE_URL

log = logging.getLogger(__name__)


DEFAULT_SIZE_TOKEN = "original"


async def _call_catalog(method, *args):
    """Await coroutine methods; run plain ones in a worker thread."""
    if inspect.iscoroutinefunction(method):
        return await method(*args)
    return await asyncio.to_thread(method, *args)


def build_artwork_url(path: str | None, size_token: str, image_base: str = IMAGE_BASE_URL) -> str | None:
    """Join image base, size token and a TMDB image path; None without a path."""
    if not path:
        return None
    return f"{image_base}{size_token}{path}"


# ---------------------------------------------------------------------------
# Movies
# ---------------------------------------------------------------------------

def movie_detail(
    entry: FileEntry,
    results: list[MovieResult],
    size_token: str = DEFAULT_SIZE_TOKEN,
    image_base: str = IMAGE_BASE_URL,
) -> MediaDetail:
    """Build the detail for one movie file from its search results.

    The first result is taken as the match.  Without results the file
    name stands in for both title and description.
    """
    if not results:
        return MediaDetail(
            file_name=entry.path,
            title=entry.name,
            description=entry.name,
        )

    best = results[0]
    return MediaDetail(
        file_name=entry.path,
        id=best.id,
        title=best.title,
        description=best.overview,
        poster_or_still_url=build_artwork_url(best.poster_path, size_token, image_base),
    )


async def match_movies_async(
    client: CatalogClient,
    path: str | Path,
    size_token: str = DEFAULT_SIZE_TOKEN,
    *,
    image_base: str = IMAGE_BASE_URL,
) -> list[MediaDetail]:
    """
    Look up every movie file under *path* on TMDB.

    Each file name (without extension) should hold just the movie title.

    Args:
        client: Catalog client
        path: Directory to scan recursively
        size_token: TMDB poster size (e.g. "w500", "original")
        image_base: Image base URL, ending with '/'

    Returns:
        One MediaDetail per file, in file order
    """
    entries = await list_video_files_async(path)

    details = []
    for entry in entries:
        results = await _call_catalog(client.search_movies, entry.name)
        if not results:
            log.debug("No TMDB match for movie %r", entry.name)
        details.append(movie_detail(entry, results or [], size_token, image_base))

    log.info("Matched %d movie file(s) under %s", len(details), path)
    return details


# ---------------------------------------------------------------------------
# TV seasons
# ---------------------------------------------------------------------------

def fallback_episode_details(entries: list[FileEntry], season: int) -> list[MediaDetail]:
    """Details built from file names only, used when no show is found."""
    return [
        MediaDetail(
            file_name=entry.path,
            title=entry.name,
            season=season,
            episode=derive_episode_number(entry.name),
        )
        for entry in entries
    ]


def season_episode_details(
    entries: list[FileEntry],
    show: ShowResult,
    season_details: SeasonDetails | None,
    season: int,
    size_token: str = DEFAULT_SIZE_TOKEN,
    image_base: str = IMAGE_BASE_URL,
    title_format: str = DEFAULT_EPISODE_TITLE_FORMAT,
) -> list[MediaDetail]:
    """
    Pair each TMDB episode of a season with a local file.

    Episodes without a local file are skipped.

    Returns:
        One MediaDetail per matched episode, in TMDB episode order
    """
    if season_details is None or not season_details.episodes:
        log.debug("No episodes for %r season %d", show.name, season)
        return []

    details = []
    for episode in season_details.episodes:
        entry = find_episode_file(entries, season, episode.episode_number)
        if entry is None:
            log.debug("No local file for %r episode %d", show.name, episode.episode_number)
            continue

        details.append(MediaDetail(
            file_name=entry.path,
            id=show.id,
            season_id=season_details.id,
            episode_id=episode.id,
            title=title_format.format(
                show.name, season_details.name, episode.episode_number, episode.name
            ),
            description=season_details.overview or episode.overview,
            detail_description=episode.overview,
            poster_or_still_url=build_artwork_url(
                episode.still_path or season_details.poster_path, size_token, image_base
            ),
            season=season,
            episode=episode.episode_number,
        ))
    return details


def season_search_terms(path: str | Path, entries: list[FileEntry]) -> tuple[str, int]:
    """
    Check a season directory's input and derive its search string and season.

    No catalog call is made, so callers can run this before any remote work.

    Raises:
        EmptyInputError: If *entries* is empty
        SeasonNotDeterminedError: If the directory name holds no season number
    """
    # Don't query TMDB for an empty directory
    if not entries:
        raise EmptyInputError(f"No video files were found under {path}")

    season = derive_season_number(path)
    if season == -1:
        raise SeasonNotDeterminedError(f"No season number in {last_component(path)!r}")
    return derive_search_string(path), season


async def match_season_async(
    client: CatalogClient,
    path: str | Path,
    size_token: str = DEFAULT_SIZE_TOKEN,
    *,
    image_base: str = IMAGE_BASE_URL,
    title_format: str = DEFAULT_EPISODE_TITLE_FORMAT,
) -> list[MediaDetail]:
    """
    Look up a TV show season directory on TMDB.

    The directory name gives both the show search string and the season
    number, e.g. ``Breaking Bad Season 3``.

    Args:
        client: Catalog client
        path: Season directory, scanned recursively
        size_token: TMDB still/poster size (e.g. "w300", "original")
        image_base: Image base URL, ending with '/'
        title_format: Episode title format taking show name, season name,
                      episode number and episode name positionally

    Returns:
        MediaDetail list (see module docs for ordering)

    Raises:
        EmptyInputError: If the directory holds no video files
        SeasonNotDeterminedError: If the directory name holds no season number
    """
    entries = await list_video_files_async(path)
    search_string, season = season_search_terms(path, entries)

    log.debug("Searching show %r season %d", search_string, season)
    shows = await _call_catalog(client.search_shows, search_string)
    if not shows:
        log.info("No TMDB show for %r, using file names", search_string)
        return fallback_episode_details(entries, season)

    show = shows[0]
    season_details = await _call_catalog(client.get_season_details, show.id, season)

    details = season_episode_details(
        entries, show, season_details, season, size_token, image_base, title_format
    )
    log.info("Matched %d of %d file(s) for %r season %d",
             len(details), len(entries), show.name, season)
    return details


# ---------------------------------------------------------------------------
# Blocking adapters
# ---------------------------------------------------------------------------

def match_movies(
    client: CatalogClient,
    path: str | Path,
    size_token: str = DEFAULT_SIZE_TOKEN,
    **kwargs,
) -> list[MediaDetail]:
    """Blocking form of :func:`match_movies_async`."""
    return asyncio.run(match_movies_async(client, path, size_token, **kwargs))


def match_season(
    client: CatalogClient,
    path: str | Path,
    size_token: str = DEFAULT_SIZE_TOKEN,
    **kwargs,
) -> list[MediaDetail]:
    """Blocking form of :func:`match_season_async`."""
    return asyncio.run(match_season_async(client, path, size_token, **kwargs))
