"""Enumerate video files under a root directory."""
import asyncio
import logging
from pathlib import Path

from .models import FileEntry

log = logging.getLogger(__name__)


# Containers VLC can play
VIDEO_EXTENSIONS = {
    '.3g2', '.3gp', '.3gp2', '.3gpp', '.amv', '.asf', '.avi', '.bik',
    '.divx', '.drc', '.dv', '.f4v', '.flv', '.gvi', '.gxf', '.m1v',
    '.m2t', '.m2ts', '.m2v', '.m4v', '.mkv', '.mov', '.mp2', '.mp2v',
    '.mp4', '.mp4v', '.mpe', '.mpeg', '.mpeg1', '.mpeg2', '.mpeg4',
    '.mpg', '.mpv2', '.mts', '.mtv', '.mxf', '.nsv', '.nuv', '.ogm',
    '.ogv', '.ogx', '.ps', '.rec', '.rm', '.rmvb', '.rpl', '.thp',
    '.tod', '.ts', '.tts', '.vob', '.vro', '.webm', '.wm', '.wmv',
    '.wtv', '.xesc',
}

# Disc images and executables are never listed
EXCLUDED_EXTENSIONS = {'.bin', '.iso', '.img', '.exe'}


def is_video_file(filepath: Path) -> bool:
    """Check if file is a video file based on extension."""
    suffix = filepath.suffix.lower()
    return suffix in VIDEO_EXTENSIONS and suffix not in EXCLUDED_EXTENSIONS


def list_video_files(root: str | Path) -> list[FileEntry]:
    """
    Recursively list video files under *root*.

    Args:
        root: Directory to scan

    Returns:
        FileEntry list sorted by path

    Raises:
        FileNotFoundError: If *root* does not exist
        NotADirectoryError: If *root* is not a directory
    """
    root = Path(root).absolute()
    if not root.exists():
        raise FileNotFoundError(f"Path does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    files = [
        item for item in root.rglob("*")
        if item.is_file() and is_video_file(item)
    ]
    entries = [FileEntry.from_path(item) for item in sorted(files)]
    log.debug("Found %d video file(s) under %s", len(entries), root)
    return entries


async def list_video_files_async(root: str | Path) -> list[FileEntry]:
    """Run :func:`list_video_files` in a worker thread."""
    return await asyncio.to_thread(list_video_files, root)
