"""Split a slug into its leading component and dot-delimited tags."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from namefit.utils import normalize_tag, utf8_len

DELIMITERS = (".",)


@dataclass(frozen=True)
class SlugComponent:
    delimiter: str
    tag: str

    @property
    def byte_length(self) -> int:
        return utf8_len(self.tag) + utf8_len(self.delimiter)

    def __str__(self) -> str:
        return f"{self.delimiter}{self.tag}"


def split_into_components(
    slug: str,
    tag_conversions: Mapping[str, str] | None = None,
) -> tuple[str, list[SlugComponent]]:
    """Split slug into (first_component, components).

    The first character never opens a component, so a leading dot stays part
    of the first component (".foo.bar" -> ".foo", [".bar"]). Every later
    delimiter starts a new component; consecutive delimiters yield an empty
    tag. Tags found in tag_conversions (by normalized key) are replaced.
    """
    assert slug, "slug must not be empty"
    conversions = tag_conversions or {}

    boundaries = [i for i, char in enumerate(slug) if i > 0 and char in DELIMITERS]
    if not boundaries:
        return slug, []

    first_component = slug[:boundaries[0]]
    components = []
    for start, end in zip(boundaries, boundaries[1:] + [len(slug)]):
        tag = slug[start + 1:end]
        tag = conversions.get(normalize_tag(tag), tag)
        components.append(SlugComponent(delimiter=slug[start], tag=tag))
    return first_component, components
