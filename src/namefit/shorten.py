"""Collision-avoiding filename shortening: the public entry points."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Collection, Mapping
from pathlib import Path

from namefit.candidate import MAX_FILENAME_BYTES, new_candidate_filename
from namefit.config import DEFAULT_MAX_RETRIES, ShortenerConfig, load_config
from namefit.errors import FilenameNotFound, RetriesExhausted
from namefit.utils import normalize_tag

logger = logging.getLogger(__name__)


def _decode_filename(name: str) -> str:
    """Replace undecodable bytes (surrogate escapes) with U+FFFD."""
    return os.fsencode(name).decode("utf-8", errors="replace")


def shorten_filename(
    filename: str,
    path_exists: Callable[[str], bool],
    ignored_tags: Collection[str] = frozenset(),
    tag_conversions: Mapping[str, str] | None = None,
    *,
    max_retries: int | None = DEFAULT_MAX_RETRIES,
) -> str:
    """Return the first candidate for filename that path_exists reports free.

    Candidates are generated for retry counters 0, 1, 2, ... and checked one
    at a time. path_exists receives the candidate filename only; bind the
    destination directory in the callable. Raises RetriesExhausted once
    max_retries numbered candidates have also been rejected (None = no cap).
    """
    if not filename:
        raise FilenameNotFound(filename)
    filename = _decode_filename(filename)

    ignored = {normalize_tag(tag) for tag in ignored_tags}
    conversions = {normalize_tag(k): v for k, v in (tag_conversions or {}).items()}

    n_retries = 0
    while True:
        candidate = new_candidate_filename(filename, ignored, conversions, n_retries)
        logger.debug("New candidate filename: %s", candidate)
        if not path_exists(candidate):
            return candidate
        if max_retries is not None and n_retries >= max_retries:
            raise RetriesExhausted(filename, n_retries + 1)
        n_retries += 1


def new_filename(
    path: str | os.PathLike,
    dst_dir: str | os.PathLike | None = None,
    config: ShortenerConfig | None = None,
    path_exists: Callable[[Path], bool] | None = None,
) -> str:
    """Choose the filename `path` should get inside dst_dir.

    Without dst_dir the file stays in its own directory; a name that already
    fits is then returned as-is without touching the filesystem.
    """
    path = Path(path)
    if path.name in ("", ".", ".."):
        raise FilenameNotFound(path)

    if config is None:
        config = load_config()
    if path_exists is None:
        path_exists = Path.exists

    if dst_dir is None:
        dst_dir, to_same_dir = path.parent, True
    else:
        dst_dir, to_same_dir = Path(dst_dir), False

    # Names that already fit are kept byte for byte
    if len(os.fsencode(path.name)) <= MAX_FILENAME_BYTES:
        if to_same_dir:
            return path.name
        if not path_exists(dst_dir / path.name):
            return path.name
        logger.debug("%s already exists in %s", path.name, dst_dir)

    return shorten_filename(
        path.name,
        lambda candidate: path_exists(dst_dir / candidate),
        config.ignored_tags,
        config.conversions,
        max_retries=config.max_retries,
    )
