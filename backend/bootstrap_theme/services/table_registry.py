"""Process-wide pattern tables with an init-once / invalidate lifecycle.

A table is built the first time it is asked for:

    default phrases → translate → theme alters → validate → freeze

and then shared read-only until ``clear()`` starts a new cache epoch.
"""

import threading
from collections.abc import Callable

import structlog

from bootstrap_theme.core.exceptions import TableConfigurationError
from bootstrap_theme.services.label_classifier import GROUPS, PatternTable
from bootstrap_theme.services.pattern_tables import TableKind, build_draft
from bootstrap_theme.services.theme_alters import HOOK_FOR_KIND, AlterRegistry, ThemeContext

logger = structlog.get_logger()


def validate_draft(draft: object, kind: TableKind) -> None:
    """Reject anything that is not ``{group: {str: str}}``."""
    if not isinstance(draft, dict):
        raise TableConfigurationError("table must be a mapping of groups", source=kind.value)
    for group, entries in draft.items():
        if group not in GROUPS:
            raise TableConfigurationError(f"unknown group {group!r}", source=kind.value)
        if not isinstance(entries, dict):
            raise TableConfigurationError(f"group {group!r} must be a mapping", source=kind.value)
        for phrase, category in entries.items():
            if not isinstance(phrase, str):
                raise TableConfigurationError(
                    f"{group} pattern {phrase!r} is not a string", source=kind.value
                )
            if not isinstance(category, str):
                raise TableConfigurationError(
                    f"{group} category for {phrase!r} is not a string", source=kind.value
                )


class TableRegistry:
    def __init__(
        self,
        context: ThemeContext,
        alters: AlterRegistry | None = None,
        translate: Callable[[str], str] | None = None,
    ):
        self.context = context
        self.alters = alters or AlterRegistry()
        self.translate = translate
        self.epoch = 0
        self._tables: dict[TableKind, PatternTable] = {}
        self._lock = threading.Lock()

    def get(self, kind: TableKind) -> PatternTable:
        """Return the table for ``kind``, building it on first use."""
        kind = TableKind(kind)
        table = self._tables.get(kind)
        if table is not None:
            return table

        with self._lock:
            # Another thread may have built it while we waited.
            table = self._tables.get(kind)
            if table is None:
                table = self._build(kind)
                self._tables[kind] = table
        return table

    def is_built(self, kind: TableKind) -> bool:
        return TableKind(kind) in self._tables

    def clear(self) -> int:
        """Drop every built table and start a new epoch. Returns the new epoch."""
        with self._lock:
            self._tables.clear()
            self.epoch += 1
        logger.info("pattern_tables_cleared", epoch=self.epoch)
        return self.epoch

    def _build(self, kind: TableKind) -> PatternTable:
        draft = build_draft(kind, self.translate)
        hook = HOOK_FOR_KIND[kind]
        self.alters.apply(self.context, hook, draft)
        validate_draft(draft, kind)

        table = PatternTable.from_dict(draft)
        if table.has_empty_pattern:
            logger.warning(
                "empty_contains_pattern",
                kind=kind.value,
                category=table.contains[""],
                detail="an empty pattern matches every label not caught earlier",
            )
        logger.info(
            "pattern_table_built",
            kind=kind.value,
            theme=self.context.name,
            epoch=self.epoch,
            exact=len(table.exact),
            contains=len(table.contains),
        )
        return table
