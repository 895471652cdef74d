"""
Recursive directory listing.
"""

from __future__ import annotations

import asyncio
import os
import re
from collections.abc import Sequence
from pathlib import Path

from hoshi.logging_config import get_logger
from hoshi.utils import should_exclude

logger = get_logger(__name__)

Pattern = str | re.Pattern[str]


def _matches(name: str, pattern: Pattern) -> bool:
    if isinstance(pattern, str):
        return name == pattern
    return pattern.search(name) is not None


def _has_extension(name: str, extensions: Sequence[Pattern]) -> bool:
    suffix = Path(name).suffix
    return any(
        suffix == ext if isinstance(ext, str) else ext.search(name) is not None
        for ext in extensions
    )


def readdir_sync(
    path: str | os.PathLike[str],
    extensions: Sequence[Pattern] = (),
    exclude: Sequence[Pattern] = (),
) -> list[str]:
    """
    List every file below ``path``, descending into sub-directories.

    Symlinks to directories are not followed, so a link pointing back
    up the tree cannot recurse forever; the link itself is listed as a
    file. FIFOs and other non-directory entries are listed as files.

    Args:
        path: Directory to list (relative or absolute)
        extensions: Keep only files whose suffix equals one of the strings
            (e.g. ".py") or whose name matches one of the regexes
        exclude: Skip files and directories whose name equals one of the
            strings or matches one of the regexes

    Returns:
        Full paths of the files, sorted by name within each directory

    Raises:
        FileNotFoundError: If ``path`` does not exist
    """
    results: list[str] = []
    with os.scandir(path) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)

    for entry in ordered:
        if should_exclude(exclude, lambda pattern: _matches(entry.name, pattern)):
            continue

        if entry.is_dir(follow_symlinks=False):
            results.extend(readdir_sync(entry.path, extensions, exclude))
            continue

        if extensions and not _has_extension(entry.name, extensions):
            continue
        results.append(entry.path)

    return results


async def readdir(
    path: str | os.PathLike[str],
    extensions: Sequence[Pattern] = (),
    exclude: Sequence[Pattern] = (),
) -> list[str]:
    """Async counterpart of :func:`readdir_sync`, run in a worker thread."""
    files = await asyncio.to_thread(readdir_sync, path, extensions, exclude)
    logger.debug("directory_listed", path=str(path), files=len(files))
    return files
