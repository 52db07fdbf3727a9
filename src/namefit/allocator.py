"""Byte-budget allocation across slug components."""

from __future__ import annotations

import logging
from collections.abc import Collection

from namefit.components import SlugComponent
from namefit.utils import normalize_tag, truncate_utf8, utf8_len

logger = logging.getLogger(__name__)


class ByteBudget:
    """Running count of UTF-8 bytes still available for the slug."""

    def __init__(self, remaining: int):
        assert remaining >= 0, f"negative budget: {remaining}"
        self.remaining = remaining

    def take(self, n_bytes: int) -> None:
        assert n_bytes <= self.remaining, f"budget underflow: {n_bytes} > {self.remaining}"
        self.remaining -= n_bytes

    def fits(self, n_bytes: int) -> bool:
        return n_bytes <= self.remaining

    def take_prefix(self, text: str) -> str:
        """Debit and return the longest whole-character prefix of text that fits."""
        prefix = truncate_utf8(text, self.remaining)
        self.take(utf8_len(prefix))
        return prefix


def allocate_slug(
    first_component: str,
    components: list[SlugComponent],
    ignored_tags: Collection[str],
    budget: ByteBudget,
) -> str:
    """Build the shortened slug within budget.

    The first component is kept whole when it fits; otherwise it is truncated
    and nothing else is kept. Remaining components are considered shortest
    first (ties keep filename order), skipping ignored and already-kept tags.
    The first component that doesn't fit is partially kept and ends the scan.
    Kept components are emitted in their original order.
    """
    if not budget.fits(utf8_len(first_component)):
        return budget.take_prefix(first_component)

    budget.take(utf8_len(first_component))

    order = sorted(range(len(components)), key=lambda i: components[i].byte_length)
    slots = [""] * len(components)
    seen_tags: set[str] = set()

    for i in order:
        component = components[i]
        normalized = normalize_tag(component.tag)
        if normalized in ignored_tags or normalized in seen_tags:
            continue
        if budget.remaining == 0:
            break
        if not budget.fits(component.byte_length):
            if not budget.fits(utf8_len(component.delimiter)):
                break
            budget.take(utf8_len(component.delimiter))
            slots[i] = component.delimiter + budget.take_prefix(component.tag)
            break
        budget.take(component.byte_length)
        slots[i] = str(component)
        seen_tags.add(normalized)

    slug = first_component
    for slot in slots:
        slug += slot
        logger.debug("New slug pushed (%d) %s", utf8_len(slug), slug)
    return slug
