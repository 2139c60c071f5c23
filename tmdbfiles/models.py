"""Data models for the tmdbfiles package."""
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Protocol


@dataclass(frozen=True)
class FileEntry:
    """One video file discovered under a root path."""
    path: str
    name: str

    @classmethod
    def from_path(cls, path: str | Path) -> "FileEntry":
        p = Path(path).absolute()
        return cls(path=str(p), name=p.stem)


@dataclass(frozen=True)
class MediaDetail:
    """A local file reconciled with TMDB metadata.

    ``-1`` marks an unknown id or episode number.  ``season`` is ``0``
    for movies.
    """
    file_name: str
    id: int = -1
    season_id: int = -1
    episode_id: int = -1
    title: str = ""
    description: str = ""
    detail_description: str = ""
    poster_or_still_url: str | None = None
    season: int = 0
    episode: int = -1

    def __post_init__(self) -> None:
        if not self.file_name:
            raise ValueError("MediaDetail requires a local file name")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MovieResult:
    """Represents a movie search result from TMDB."""
    id: int
    title: str
    overview: str = ""
    poster_path: str | None = None

    @classmethod
    def from_api(cls, data: dict) -> "MovieResult":
        return cls(
            id=data["id"],
            title=data.get("title") or "",
            overview=data.get("overview") or "",
            poster_path=data.get("poster_path"),
        )


@dataclass(frozen=True)
class ShowResult:
    """Represents a TV show search result from TMDB."""
    id: int
    name: str

    @classmethod
    def from_api(cls, data: dict) -> "ShowResult":
        return cls(id=data["id"], name=data.get("name") or "")


@dataclass(frozen=True)
class EpisodeRecord:
    """Represents one episode of a TMDB season."""
    id: int
    episode_number: int
    name: str = ""
    overview: str = ""
    still_path: str | None = None

    @classmethod
    def from_api(cls, data: dict) -> "EpisodeRecord":
        return cls(
            id=data["id"],
            episode_number=data["episode_number"],
            name=data.get("name") or "",
            overview=data.get("overview") or "",
            still_path=data.get("still_path"),
        )


@dataclass(frozen=True)
class SeasonDetails:
    """Represents a TMDB season with its episodes."""
    id: int
    name: str = ""
    overview: str = ""
    poster_path: str | None = None
    episodes: tuple[EpisodeRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, data: dict) -> "SeasonDetails":
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            overview=data.get("overview") or "",
            poster_path=data.get("poster_path"),
            episodes=tuple(
                EpisodeRecord.from_api(ep) for ep in data.get("episodes") or []
            ),
        )


class CatalogClient(Protocol):
    """What the reconcilers need from a catalog.

    Implementations may expose plain methods or coroutine methods.
    """

    def search_movies(self, query: str) -> list[MovieResult]: ...

    def search_shows(self, query: str) -> list[ShowResult]: ...

    def get_season_details(
        self, show_id: int, season_number: int
    ) -> SeasonDetails | None: ...
