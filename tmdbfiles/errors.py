"""Exceptions raised by the matching pipeline.

Remote failures surface as :class:`tmdbfiles.tmdb.TMDBError` and
filesystem failures as :class:`OSError`; neither is wrapped here.
"""


class MatchError(Exception):
    """Base class for errors raised before any catalog lookup."""
    pass


class EmptyInputError(MatchError):
    """No video files were found under the given path."""
    pass


class SeasonNotDeterminedError(MatchError):
    """The season number could not be parsed from the directory name."""
    pass
