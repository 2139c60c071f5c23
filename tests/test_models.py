"""
Tests for the data models.
"""

import dataclasses

import pytest

from tmdbfiles.models import EpisodeRecord, FileEntry, MediaDetail, MovieResult, SeasonDetails, ShowResult


class TestMediaDetail:

    def test_defaults(self):
        detail = MediaDetail(file_name="/m/a.mkv")
        assert detail.id == -1
        assert detail.season_id == -1
        assert detail.episode_id == -1
        assert detail.title == ""
        assert detail.detail_description == ""
        assert detail.poster_or_still_url is None
        assert detail.season == 0
        assert detail.episode == -1

    def test_requires_file_name(self):
        with pytest.raises(ValueError):
            MediaDetail(file_name="")

    def test_immutable(self):
        detail = MediaDetail(file_name="/m/a.mkv")
        with pytest.raises(dataclasses.FrozenInstanceError):
            detail.title = "changed"

    def test_to_dict(self):
        detail = MediaDetail(file_name="/m/a.mkv", id=5, title="A")
        data = detail.to_dict()
        assert data["file_name"] == "/m/a.mkv"
        assert data["id"] == 5
        assert data["poster_or_still_url"] is None


class TestFromApi:

    def test_file_entry_from_path(self, tmp_path):
        entry = FileEntry.from_path(tmp_path / "Show.S01E01.mkv")
        assert entry.name == "Show.S01E01"
        assert entry.path == str(tmp_path / "Show.S01E01.mkv")

    def test_movie_missing_fields(self):
        movie = MovieResult.from_api({"id": 1, "title": "A", "overview": None})
        assert movie.overview == ""
        assert movie.poster_path is None

    def test_show(self):
        assert ShowResult.from_api({"id": 2, "name": "B", "popularity": 3.0}) == ShowResult(2, "B")

    def test_season_with_episodes(self):
        season = SeasonDetails.from_api({
            "id": 10,
            "name": "Season 1",
            "overview": "",
            "poster_path": "/p.jpg",
            "episodes": [
                {"id": 100, "episode_number": 1, "name": "Pilot", "overview": "o", "still_path": None},
                {"id": 101, "episode_number": 2, "name": "Two"},
            ],
        })
        assert season.episodes == (
            EpisodeRecord(100, 1, "Pilot", "o", None),
            EpisodeRecord(101, 2, "Two", "", None),
        )

    def test_season_without_episodes(self):
        assert SeasonDetails.from_api({"id": 10, "episodes": None}).episodes == ()
