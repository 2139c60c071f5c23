"""
tmdbfiles - TMDB File Matcher

Match movie files and TV season directories with TMDB metadata.
"""
from .models import (
    MediaDetail,
    FileEntry,
    MovieResult,
    ShowResult,
    EpisodeRecord,
    SeasonDetails,
    CatalogClient,
)
from .errors import MatchError, EmptyInputError, SeasonNotDeterminedError
from .parser import (
    derive_search_string,
    derive_season_number,
    derive_episode_number,
)
from .matcher import find_episode_file, EPISODE_NAMING_STYLES
from .scanner import list_video_files, list_video_files_async
from .reconciler import (
    match_movies,
    match_movies_async,
    match_season,
    match_season_async,
)
from .tmdb import TMDBClient, TMDBError
from .cache import ConfigCache

__version__ = "0.1.0"
__all__ = [
    "MediaDetail",
    "FileEntry",
    "MovieResult",
    "ShowResult",
    "EpisodeRecord",
    "SeasonDetails",
    "CatalogClient",
    "MatchError",
    "EmptyInputError",
    "SeasonNotDeterminedError",
    "derive_search_string",
    "derive_season_number",
    "derive_episode_number",
    "find_episode_file",
    "EPISODE_NAMING_STYLES",
    "list_video_files",
    "list_video_files_async",
    "match_movies",
    "match_movies_async",
    "match_season",
    "match_season_async",
    "TMDBClient",
    "TMDBError",
    "ConfigCache",
]
