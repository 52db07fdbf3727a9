"""Candidate filename generation: extension handling plus slug allocation."""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping

from namefit.allocator import ByteBudget, allocate_slug
from namefit.components import split_into_components
from namefit.utils import utf8_len

logger = logging.getLogger(__name__)

MAX_FILENAME_BYTES = 255
MAX_EXTENSION_BYTES = 5


def split_extension(filename: str) -> tuple[str, str | None]:
    """Split filename into (slug, extension).

    Dotfiles and names without a dot have no extension. A trailing segment
    longer than MAX_EXTENSION_BYTES is not treated as an extension and stays
    in the slug.
    """
    assert filename, "filename must not be empty"
    rest, dot, tail = filename.rpartition(".")
    if not dot or not rest:
        return filename, None
    if utf8_len(tail) > MAX_EXTENSION_BYTES:
        return filename, None
    return rest, tail


def format_extension(extension: str | None, n_retries: int) -> str | None:
    """Insert the retry counter in front of the extension (or use it alone)."""
    if n_retries == 0:
        return extension
    if extension is None:
        return str(n_retries)
    return f"{n_retries}.{extension}"


def new_candidate_filename(
    filename: str,
    ignored_tags: Collection[str] = frozenset(),
    tag_conversions: Mapping[str, str] | None = None,
    n_retries: int = 0,
) -> str:
    """Compute the candidate filename for one retry attempt.

    Pure: the same arguments always give the same candidate, and the result
    is at most MAX_FILENAME_BYTES long in UTF-8.
    """
    slug, extension = split_extension(filename)
    extension = format_extension(extension, n_retries)

    if extension is None:
        suffix = ""
    else:
        suffix = "." + extension
    assert utf8_len(suffix) <= MAX_FILENAME_BYTES, f"extension too long: {suffix!r}"
    budget = ByteBudget(MAX_FILENAME_BYTES - utf8_len(suffix))
    logger.debug("Remaining slug bytes (subtract extension): %d", budget.remaining)

    first_component, components = split_into_components(slug, tag_conversions)
    new_slug = allocate_slug(first_component, components, ignored_tags, budget)

    new_filename = new_slug + suffix
    logger.debug("New filename: (%d) %s", utf8_len(new_filename), new_filename)
    assert utf8_len(new_filename) <= MAX_FILENAME_BYTES
    return new_filename
