#!/usr/bin/env python3
"""
tmdbfiles - Match local media files with TMDB

Command line front end for the movie and season matchers.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from .cache import ConfigCache, image_base_url
from .errors import MatchError
from .models import MediaDetail
from .reconciler import match_movies, match_season, season_search_terms
from .scanner import list_video_files
from .settings import SettingsManager, validate_title_format
from .tmdb import IMAGE_BASE_URL, TMDBClient, TMDBError


def print_detail(detail: MediaDetail) -> None:
    """Print one detail record."""
    print(f"{detail.title}")
    print(f"  File: {detail.file_name}")
    if detail.id != -1:
        print(f"  TMDB: {detail.id}")
    if detail.season:
        print(f"  Season {detail.season}, episode {detail.episode}")
    if detail.poster_or_still_url:
        print(f"  Image: {detail.poster_or_still_url}")


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    settings = SettingsManager()

    parser = argparse.ArgumentParser(
        prog="tmdbfiles",
        description="Match movie files or a TV season directory with TMDB."
    )
    parser.add_argument(
        "mode",
        choices=("movies", "season"),
        help="'movies' for a directory of movie files, 'season' for one TV season directory"
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Directory to process (scanned recursively)"
    )
    parser.add_argument(
        "--size",
        type=str,
        default=settings.get("image_size"),
        help="TMDB image size token (default: %(default)s)"
    )
    parser.add_argument(
        "--language",
        type=str,
        default=settings.get("tmdb_language"),
        help="Language for TMDB results (default: %(default)s)"
    )
    parser.add_argument(
        "--cache-dir",
        type=Path,
        default=None,
        help="Directory for the TMDB configuration cache (default: app data directory)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed debug information"
    )

    parsed_args = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.WARNING,
        format="  [%(levelname)s] %(name)s: %(message)s",
    )

    if not parsed_args.path.is_dir():
        print(f"Error: Not a directory: {parsed_args.path}")
        return 1

    title_format = settings.get("episode_title_format")
    ok, message = validate_title_format(title_format)
    if not ok:
        print(f"Error: Invalid episode_title_format setting: {message}")
        return 1

    try:
        # Input errors are raised before any remote call
        entries = list_video_files(parsed_args.path)
        if parsed_args.mode == "season":
            season_search_terms(parsed_args.path, entries)

        client = TMDBClient(language=parsed_args.language, settings=settings)
        if entries:
            cache = ConfigCache(parsed_args.cache_dir, settings.get("config_max_age_days"))
            image_base = image_base_url(cache.get_configuration(client))
        else:
            image_base = IMAGE_BASE_URL

        if parsed_args.mode == "movies":
            details = match_movies(
                client, parsed_args.path, parsed_args.size, image_base=image_base
            )
        else:
            details = match_season(
                client, parsed_args.path, parsed_args.size,
                image_base=image_base, title_format=title_format,
            )
    except (MatchError, TMDBError) as e:
        print(f"Error: {e}")
        return 1

    if parsed_args.json:
        print(json.dumps([d.to_dict() for d in details], indent=2, ensure_ascii=False))
    else:
        for detail in details:
            print_detail(detail)
        print("-" * 50)
        print(f"Records: {len(details)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
