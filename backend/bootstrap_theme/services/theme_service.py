"""Theme service: presentation hints for the active Bootstrap theme.

Holds the theme context, its pattern tables and its glyphicon set, and
answers the questions a template asks while rendering a control:
which contextual class does this button get, which icon goes with it.
"""

from collections.abc import Callable
from urllib.parse import quote

import structlog

from bootstrap_theme.config import Settings
from bootstrap_theme.core.exceptions import TableConfigurationError
from bootstrap_theme.schemas.icon import IconElement
from bootstrap_theme.services import glyphicons as glyphicon_catalogue
from bootstrap_theme.services.label_classifier import PatternTable, classify, match
from bootstrap_theme.services.pattern_tables import TableKind
from bootstrap_theme.services.table_registry import TableRegistry
from bootstrap_theme.services.theme_alters import (
    AlterRegistry,
    ThemeContext,
    load_theme_overrides,
    register_overrides,
)

logger = structlog.get_logger()

DEFAULT_DOCUMENTATION = "http://drupal-bootstrap.org"
DEFAULT_BRANCH = "8.x-3.x"


class ThemeService:
    def __init__(
        self,
        context: ThemeContext | None = None,
        alters: AlterRegistry | None = None,
        translate: Callable[[str], str] | None = None,
        documentation: str = DEFAULT_DOCUMENTATION,
        branch: str = DEFAULT_BRANCH,
    ):
        self.context = context or ThemeContext()
        if self.context.framework_version not in glyphicon_catalogue.GLYPHICON_VERSIONS:
            raise TableConfigurationError(
                f"unsupported Bootstrap version {self.context.framework_version!r}",
                source="framework_version",
            )
        self.tables = TableRegistry(self.context, alters, translate)
        self.documentation = documentation
        self.branch = branch

    @classmethod
    def from_settings(cls, settings: Settings) -> "ThemeService":
        """Build the service for the theme described by ``settings``.

        Loads the overrides file, if any, as the active theme's alters.
        """
        context = ThemeContext(
            name=settings.theme_name,
            base_themes=tuple(settings.base_themes_list),
            framework_version=settings.framework_version,
            glyphicons_enabled=settings.glyphicons_enabled,
        )
        alters = AlterRegistry()
        if settings.theme_overrides_path:
            overrides = load_theme_overrides(settings.theme_overrides_path)
            register_overrides(alters, context.name, overrides)

        logger.info(
            "theme_service_ready",
            theme=context.name,
            ancestry=list(context.ancestry),
            framework_version=context.framework_version,
        )
        return cls(
            context,
            alters,
            documentation=settings.project_documentation,
            branch=settings.project_branch,
        )

    @property
    def alters(self) -> AlterRegistry:
        return self.tables.alters

    def table(self, kind: TableKind) -> PatternTable:
        return self.tables.get(kind)

    # ── Colorize ───────────────────────────────────────

    def css_class_from_string(self, label: object, default: str = "") -> str:
        """Bootstrap contextual class for ``label``, or ``default``."""
        return classify(label, self.tables.get(TableKind.CSS_CLASS), default)

    def match_css_class(self, label: object) -> str | None:
        return match(label, self.tables.get(TableKind.CSS_CLASS))

    # ── Iconize ────────────────────────────────────────

    def glyphicons(self, version: str | None = None):
        """Icon set for ``version``; the theme's framework version when omitted."""
        return glyphicon_catalogue.glyphicons(version or self.context.framework_version)

    def glyphicon(self, name: str, default=None):
        """Icon element for ``name`` if the theme can render it, else ``default``."""
        if not self.context.glyphicons_enabled:
            return default
        if not glyphicon_catalogue.has_glyphicon(name, self.context.framework_version):
            return default
        return glyphicon_catalogue.icon_element(name)

    def glyphicon_from_string(self, label: object, default=None) -> IconElement | None:
        """Icon element guessed from ``label``, or ``default``."""
        name = match(label, self.tables.get(TableKind.ICON))
        if name is None:
            return default
        return self.glyphicon(name, default)

    # ── Misc ───────────────────────────────────────────

    def api_search_url(self, query: str = "") -> str:
        """Documentation search URL for ``query``."""
        return f"{self.documentation}/api/bootstrap/{self.branch}/search/{quote(query, safe='')}"

    def clear_cache(self) -> int:
        return self.tables.clear()
