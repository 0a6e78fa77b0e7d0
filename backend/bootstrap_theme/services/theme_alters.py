"""Theme alter hooks for the pattern tables.

Sub-themes customize the colorize/iconize tables by registering alter
strategies against an ``AlterHook``. A strategy receives the mutable draft
table ``{"exact": {...}, "contains": {...}}`` and edits it in place.

Resolution order is most specific first (active theme, then its base
themes). Strategies are applied in the reverse order, so the active theme
runs last and its writes win over its ancestors'.
"""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import structlog

from bootstrap_theme.core.exceptions import TableConfigurationError
from bootstrap_theme.services.label_classifier import GROUPS
from bootstrap_theme.services.pattern_tables import TableKind

logger = structlog.get_logger()

Draft = dict[str, dict[str, str]]
AlterStrategy = Callable[[Draft], None]


class AlterHook(str, Enum):
    COLORIZE_TEXT = "bootstrap_colorize_text"
    ICONIZE_TEXT = "bootstrap_iconize_text"


HOOK_FOR_KIND: dict[TableKind, AlterHook] = {
    TableKind.CSS_CLASS: AlterHook.COLORIZE_TEXT,
    TableKind.ICON: AlterHook.ICONIZE_TEXT,
}


@dataclass(frozen=True)
class ThemeContext:
    """The active theme and what it inherits from."""
    name: str = "bootstrap"
    base_themes: tuple[str, ...] = ()  # root base theme first
    framework_version: str = "3.3.5"
    glyphicons_enabled: bool = True

    @property
    def ancestry(self) -> tuple[str, ...]:
        """Base themes first, active theme last."""
        return (*self.base_themes, self.name)


@dataclass
class AlterRegistry:
    """Alter strategies keyed by (theme name, hook)."""
    _strategies: dict[tuple[str, AlterHook], list[AlterStrategy]] = field(default_factory=dict)

    def register(self, theme: str, hook: AlterHook, strategy: AlterStrategy) -> None:
        self._strategies.setdefault((theme, AlterHook(hook)), []).append(strategy)

    def resolve(self, context: ThemeContext, hook: AlterHook) -> list[tuple[str, AlterStrategy]]:
        """Return (theme, strategy) pairs, most specific theme first."""
        resolved = []
        for theme in reversed(context.ancestry):
            for strategy in self._strategies.get((theme, AlterHook(hook)), []):
                resolved.append((theme, strategy))
        return resolved

    def apply(self, context: ThemeContext, hook: AlterHook, draft: Draft) -> Draft:
        """Run every strategy for ``hook`` on ``draft``, least specific first."""
        hook = AlterHook(hook)
        for theme, strategy in reversed(self.resolve(context, hook)):
            try:
                strategy(draft)
            except TableConfigurationError:
                raise
            except Exception as e:
                raise TableConfigurationError(
                    f"alter for {hook.value} failed: {e}", source=theme
                ) from e
            logger.debug("alter_applied", theme=theme, hook=hook.value)
        return draft


# ── Overrides file ─────────────────────────────────


def load_theme_overrides(path: str | Path) -> dict[TableKind, dict[str, dict[str, str | None]]]:
    """Load a JSON overrides file.

    Format::

        {
            "css_class": {"exact": {"Publish": "primary"}, "contains": {"Archive": "warning"}},
            "icon": {"contains": {"Archive": "folder-close", "Upload": null}}
        }

    A ``null`` category removes the phrase from the table.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise TableConfigurationError("overrides file not found", source=str(path)) from e
    except json.JSONDecodeError as e:
        raise TableConfigurationError(f"invalid JSON: {e}", source=str(path)) from e

    if not isinstance(data, dict):
        raise TableConfigurationError("top level must be an object", source=str(path))

    overrides = {}
    for kind_name, groups in data.items():
        try:
            kind = TableKind(kind_name)
        except ValueError:
            raise TableConfigurationError(f"unknown table '{kind_name}'", source=str(path)) from None
        if not isinstance(groups, dict):
            raise TableConfigurationError(f"'{kind_name}' must be an object", source=str(path))
        for group, entries in groups.items():
            if group not in GROUPS:
                raise TableConfigurationError(
                    f"unknown group '{group}' in '{kind_name}'", source=str(path)
                )
            if not isinstance(entries, dict):
                raise TableConfigurationError(
                    f"'{kind_name}.{group}' must be an object", source=str(path)
                )
            for phrase, category in entries.items():
                if category is not None and not isinstance(category, str):
                    raise TableConfigurationError(
                        f"category for '{phrase}' must be a string or null", source=str(path)
                    )
        overrides[kind] = groups

    logger.info("theme_overrides_loaded", path=str(path), tables=[k.value for k in overrides])
    return overrides


def overrides_alter(groups: Mapping[str, Mapping[str, str | None]]) -> AlterStrategy:
    """Turn one table's overrides into an alter strategy."""

    def alter(draft: Draft) -> None:
        for group, entries in groups.items():
            target = draft.setdefault(group, {})
            for phrase, category in entries.items():
                if category is None:
                    target.pop(phrase, None)
                else:
                    target[phrase] = category

    return alter


def register_overrides(
    registry: AlterRegistry,
    theme: str,
    overrides: Mapping[TableKind, Mapping[str, Mapping[str, str | None]]],
) -> None:
    for kind, groups in overrides.items():
        registry.register(theme, HOOK_FOR_KIND[kind], overrides_alter(groups))
