"""
Shared fixtures for the tmdbfiles tests.
"""

from pathlib import Path

import pytest

from tmdbfiles.models import EpisodeRecord, MovieResult, SeasonDetails, ShowResult


class StubCatalog:
    """Deterministic in-memory catalog that records every call."""

    def __init__(self, movies=None, shows=None, seasons=None):
        self.movies = movies or {}
        self.shows = shows or {}
        self.seasons = seasons or {}
        self.calls = []

    def search_movies(self, query):
        self.calls.append(("search_movies", query))
        return list(self.movies.get(query, []))

    def search_shows(self, query):
        self.calls.append(("search_shows", query))
        return list(self.shows.get(query, []))

    def get_season_details(self, show_id, season_number):
        self.calls.append(("get_season_details", show_id, season_number))
        return self.seasons.get((show_id, season_number))


class AsyncStubCatalog(StubCatalog):
    """Same stub with coroutine methods."""

    async def search_movies(self, query):
        return StubCatalog.search_movies(self, query)

    async def search_shows(self, query):
        return StubCatalog.search_shows(self, query)

    async def get_season_details(self, show_id, season_number):
        return StubCatalog.get_season_details(self, show_id, season_number)


@pytest.fixture
def make_files():
    """Create empty files below a directory and return the directory."""

    def _make(root: Path, *names: str) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for name in names:
            target = root / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(b"")
        return root

    return _make


@pytest.fixture
def breaking_bad_season():
    """TMDB data for a three-episode season."""
    show = ShowResult(id=1396, name="Breaking Bad")
    season = SeasonDetails(
        id=3575,
        name="Season 3",
        overview="Walt faces a new threat.",
        poster_path="/season3.jpg",
        episodes=(
            EpisodeRecord(id=62092, episode_number=1, name="No Más",
                          overview="Walt moves out.", still_path="/ep1.jpg"),
            EpisodeRecord(id=62093, episode_number=2, name="Caballo sin Nombre",
                          overview="Walt is pulled over.", still_path=None),
            EpisodeRecord(id=62094, episode_number=3, name="I.F.T.",
                          overview="Skyler tells Walt.", still_path="/ep3.jpg"),
        ),
    )
    return show, season


@pytest.fixture
def matrix_movie():
    return MovieResult(id=603, title="The Matrix", overview="A hacker learns the truth.",
                       poster_path="/matrix.jpg")
