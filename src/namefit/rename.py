"""Apply a chosen filename on disk.

The name is chosen first and the rename happens afterwards, so another
process can claim the same name in between; the rename then fails (or, on
POSIX, replaces the newcomer). Callers that race on one directory must
serialize themselves.
"""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path

from namefit.errors import RenameError, SameFileError

logger = logging.getLogger(__name__)


def move_file(src: Path, dst_dir: Path, new_name: str) -> Path:
    """Rename src to dst_dir/new_name, creating dst_dir if needed.

    Raises SameFileError when nothing would change, RenameError on OS failure.
    """
    src = Path(src)
    dst_dir = Path(dst_dir)
    dst = dst_dir / new_name

    if not os.path.lexists(src):
        missing = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(src))
        raise RenameError(src, dst, missing)
    if src.parent.resolve() / src.name == dst_dir.resolve() / dst.name:
        raise SameFileError(src, dst)

    try:
        dst_dir.mkdir(parents=True, exist_ok=True)
        src.rename(dst)
    except OSError as e:
        raise RenameError(src, dst, e) from e

    logger.debug("Renamed: %s -> %s", src, dst)
    return dst
