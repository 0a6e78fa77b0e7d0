"""Default phrase tables for colorizing and iconizing button labels.

Each table has two groups:
    exact     → labels that must equal the phrase, checked first
    contains  → phrases looked for anywhere in the label, checked last

Order inside ``contains`` is the match priority: specific verbs such as
"Confirm" or "Filter" come before generic ones such as "Add" or "Save".
Phrases are in English and go through a translation callable when a table
is built.
"""

from collections.abc import Callable
from enum import Enum


class TableKind(str, Enum):
    """The two lookup tables a theme provides."""
    CSS_CLASS = "css_class"
    ICON = "icon"


# ── Colorize: Bootstrap contextual classes ─────────

CSS_CLASS_PATTERNS: dict[str, list[tuple[str, str]]] = {
    "exact": [
        # Primary class.
        ("Download feature", "primary"),
        # Success class.
        ("Add effect", "success"),
        ("Add and configure", "success"),
        # Info class.
        ("Save and add", "info"),
        ("Add another item", "info"),
        ("Update style", "info"),
    ],
    "contains": [
        # Primary class.
        ("Confirm", "primary"),
        ("Filter", "primary"),
        ("Submit", "primary"),
        ("Search", "primary"),
        # Success class.
        ("Add", "success"),
        ("Create", "success"),
        ("Save", "success"),
        ("Write", "success"),
        # Warning class.
        ("Export", "warning"),
        ("Import", "warning"),
        ("Restore", "warning"),
        ("Rebuild", "warning"),
        # Info class.
        ("Apply", "info"),
        ("Update", "info"),
        # Danger class.
        ("Delete", "danger"),
        ("Remove", "danger"),
    ],
}

# ── Iconize: glyphicon names ───────────────────────

ICON_PATTERNS: dict[str, list[tuple[str, str]]] = {
    "exact": [],
    "contains": [
        ("Manage", "cog"),
        ("Configure", "cog"),
        ("Download", "download"),
        ("Export", "export"),
        ("Filter", "filter"),
        ("Import", "import"),
        ("Save", "ok"),
        ("Update", "ok"),
        ("Edit", "pencil"),
        ("Add", "plus"),
        ("Write", "plus"),
        ("Cancel", "remove"),
        ("Delete", "trash"),
        ("Remove", "trash"),
        ("Upload", "upload"),
    ],
}

DEFAULT_PATTERNS: dict[TableKind, dict[str, list[tuple[str, str]]]] = {
    TableKind.CSS_CLASS: CSS_CLASS_PATTERNS,
    TableKind.ICON: ICON_PATTERNS,
}


def _identity(text: str) -> str:
    return text


def build_draft(
    kind: TableKind,
    translate: Callable[[str], str] | None = None,
) -> dict[str, dict[str, str]]:
    """Return a fresh, mutable copy of a default table with translated phrases.

    Two phrases translating to the same text collapse into one entry; the
    later category wins and the entry keeps its first position.
    """
    translate = translate or _identity
    patterns = DEFAULT_PATTERNS[TableKind(kind)]
    return {
        group: {translate(phrase): category for phrase, category in entries}
        for group, entries in patterns.items()
    }
