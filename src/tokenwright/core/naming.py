"""
Token name assembly.

Turns a map of slot values into a single delimited name, following the
slot order stored in a NamingConfig. Casing is applied per segment; the
separator only ever appears between segments (and after the prefix).
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from .ir.naming import Casing, NamingConfig

# Element name abbreviations used when NamingConfig.abbreviate is set.
# Unknown element names pass through unchanged.
ELEMENT_ABBREVIATIONS: dict[str, str] = {
    "background": "bg",
    "text": "text",
    "border": "border",
    "icon": "icon",
    "shadow": "shadow",
}

_WORD_BREAKS = re.compile(r"[\s_-]+")


def apply_casing(segment: str, casing: Casing | str) -> str:
    """Apply a casing mode to one name segment.

    The segment is lowercased and split on runs of whitespace,
    underscores and hyphens before re-joining:

    - kebab / none: words joined with ``-``
    - snake: words joined with ``_``
    - camel: first word as-is, following words capitalized, no joiner
    """
    words = _WORD_BREAKS.sub(" ", segment.lower()).split(" ")
    if casing == Casing.CAMEL:
        return words[0] + "".join(w[:1].upper() + w[1:] for w in words[1:])
    if casing == Casing.SNAKE:
        return "_".join(words)
    return "-".join(words)


def build_token_name(parts: Iterable[str], naming: NamingConfig) -> str:
    """Case and join raw segments, prepending the prefix when configured.

    Empty segments are dropped.
    """
    cased = [apply_casing(p, naming.casing) for p in parts if p]
    name = naming.separator.join(cased)
    if naming.prefix:
        return f"{naming.prefix}{naming.separator}{name}"
    return name


def build_token_from_slots(slot_values: Mapping[str, str | None], naming: NamingConfig) -> str:
    """Build a token name from slot values.

    Slots are visited in the configuration's stored order. Disabled
    slots and slots without a value are skipped. With ``abbreviate`` on,
    the element value goes through ELEMENT_ABBREVIATIONS and a
    ``property`` of ``"color"`` is dropped.

    Args:
        slot_values: Slot id -> value. Missing or empty values are skipped.
        naming: Naming configuration.

    Returns:
        The assembled token name.
    """
    parts: list[str] = []

    for slot in naming.slots:
        if not slot.enabled:
            continue
        value = slot_values.get(slot.id)
        if not value:
            continue

        if naming.abbreviate:
            if slot.id == "property" and value == "color":
                continue
            if slot.id == "element":
                value = ELEMENT_ABBREVIATIONS.get(value, value)

        parts.append(value)

    return build_token_name(parts, naming)


def preview_name(naming: NamingConfig) -> str:
    """Example name built from each slot's ``selected_example``."""
    return build_token_from_slots(
        {slot.id: slot.selected_example for slot in naming.slots}, naming
    )
