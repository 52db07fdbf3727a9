"""Unicode normalization and UTF-8 byte accounting."""

import unicodedata


def normalize_tag(text: str) -> str:
    """Canonical decomposed (NFD) form, used only as a lookup key."""
    return unicodedata.normalize("NFD", text)


def utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


def truncate_utf8(text: str, n_bytes: int) -> str:
    """Return the longest whole-character prefix of text fitting in n_bytes."""
    used = 0
    for i, char in enumerate(text):
        size = utf8_len(char)
        if used + size > n_bytes:
            return text[:i]
        used += size
    return text
