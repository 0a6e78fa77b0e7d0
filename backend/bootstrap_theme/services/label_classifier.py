"""Label classifier.

Guesses a category (a Bootstrap CSS class, a glyphicon name ...) from the
visible text of a UI control by walking a two-group pattern table:

    exact     → full, case-sensitive equality, checked first
    contains  → case-insensitive substring, checked in insertion order

Examples:
    "Add another item"  → exact hit          → "info"
    "SAVE CHANGES"      → contains "Save"    → "success"
    "Confirm and Add"   → contains "Confirm" → "primary" (listed before "Add")
    "Random text"       → no hit             → default
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

EXACT = "exact"
CONTAINS = "contains"
GROUPS: tuple[str, ...] = (EXACT, CONTAINS)


@dataclass(frozen=True)
class PatternTable:
    """An immutable phrase → category lookup table.

    The ``contains`` group keeps insertion order: it is the match priority.
    """

    exact: Mapping[str, str] = field(default_factory=dict)
    contains: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy into read-only views so callers cannot mutate a built table.
        object.__setattr__(self, "exact", MappingProxyType(dict(self.exact)))
        object.__setattr__(self, "contains", MappingProxyType(dict(self.contains)))
        # Lowercased contains keys, computed once per table.
        object.__setattr__(
            self,
            "_contains_folded",
            tuple((pattern.lower(), category) for pattern, category in self.contains.items()),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, str]]) -> "PatternTable":
        return cls(exact=data.get(EXACT, {}), contains=data.get(CONTAINS, {}))

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {EXACT: dict(self.exact), CONTAINS: dict(self.contains)}

    @property
    def has_empty_pattern(self) -> bool:
        """True if an empty ``contains`` key would match every label."""
        return "" in self.contains

    def __hash__(self) -> int:
        return hash((tuple(self.exact.items()), tuple(self.contains.items())))


def normalize_label(label: object) -> str | None:
    """Return the label as plain text, or None if it has no text form.

    Accepts plain strings and render-able wrappers (translated strings,
    markup objects) exposing ``render()`` or ``__html__()``.
    """
    if isinstance(label, str):
        return label
    for method_name in ("render", "__html__"):
        method = getattr(label, method_name, None)
        if callable(method):
            try:
                text = method()
            except Exception:
                return None
            return text if isinstance(text, str) else None
    return None


def classify(label: object, table: PatternTable, default=""):
    """Return the category matched by ``label`` in ``table``, or ``default``.

    Exact matches win over substring matches; among ``contains`` patterns
    the first one in table order wins.
    """
    text = normalize_label(label)
    if text is None:
        return default

    category = table.exact.get(text)
    if category is not None:
        return category

    folded = text.lower()
    for pattern, category in table._contains_folded:
        if pattern in folded:
            return category

    return default


def match(label: object, table: PatternTable) -> str | None:
    """Like :func:`classify` but returns None when nothing matched."""
    return classify(label, table, default=None)
