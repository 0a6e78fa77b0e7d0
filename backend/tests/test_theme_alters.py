"""Theme alter registry and overrides file tests."""

import json

import pytest

from bootstrap_theme.core.exceptions import TableConfigurationError
from bootstrap_theme.services.pattern_tables import TableKind
from bootstrap_theme.services.theme_alters import (
    AlterHook,
    AlterRegistry,
    ThemeContext,
    load_theme_overrides,
    overrides_alter,
    register_overrides,
)


@pytest.fixture
def overrides_file(tmp_path):
    def write(data):
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return path

    return write


class TestThemeContext:
    def test_ancestry(self):
        context = ThemeContext(name="child", base_themes=("bootstrap", "parent"))
        assert context.ancestry == ("bootstrap", "parent", "child")

    def test_defaults(self):
        context = ThemeContext()
        assert context.ancestry == ("bootstrap",)
        assert context.framework_version == "3.3.5"
        assert context.glyphicons_enabled


class TestAlterRegistry:
    def test_resolve_most_specific_first(self):
        registry = AlterRegistry()
        context = ThemeContext(name="child", base_themes=("bootstrap", "parent"))
        for theme in ("bootstrap", "parent", "child"):
            registry.register(theme, AlterHook.ICONIZE_TEXT, lambda draft: None)

        themes = [theme for theme, _ in registry.resolve(context, AlterHook.ICONIZE_TEXT)]

        assert themes == ["child", "parent", "bootstrap"]

    def test_apply_least_specific_first(self):
        registry = AlterRegistry()
        context = ThemeContext(name="child", base_themes=("bootstrap",))
        order = []
        registry.register("child", "bootstrap_colorize_text", lambda d: order.append("child"))
        registry.register("bootstrap", "bootstrap_colorize_text", lambda d: order.append("bootstrap"))

        registry.apply(context, "bootstrap_colorize_text", {"exact": {}, "contains": {}})

        assert order == ["bootstrap", "child"]

    @pytest.mark.parametrize(
        "error",
        [IndexError("list index out of range"), KeyError("missing"), RuntimeError("boom"), ZeroDivisionError()],
    )
    def test_failing_strategy_raises_configuration_error(self, error):
        registry = AlterRegistry()
        context = ThemeContext(name="child", base_themes=("bootstrap",))

        def alter(draft):
            raise error

        registry.register("child", AlterHook.COLORIZE_TEXT, alter)

        with pytest.raises(TableConfigurationError, match="child") as exc_info:
            registry.apply(context, AlterHook.COLORIZE_TEXT, {"exact": {}, "contains": {}})
        assert exc_info.value.source == "child"
        assert exc_info.value.__cause__ is error


class TestOverridesAlter:
    def test_adds_replaces_and_removes(self):
        draft = {"exact": {}, "contains": {"Save": "success", "Delete": "danger"}}
        alter = overrides_alter({"contains": {"Save": "primary", "Delete": None, "Archive": "warning"}})

        alter(draft)

        assert draft["contains"] == {"Save": "primary", "Archive": "warning"}

    def test_register_overrides(self):
        registry = AlterRegistry()
        register_overrides(registry, "bootstrap", {TableKind.ICON: {"contains": {"Archive": "folder-close"}}})

        assert len(registry.resolve(ThemeContext(), AlterHook.ICONIZE_TEXT)) == 1
        assert registry.resolve(ThemeContext(), AlterHook.COLORIZE_TEXT) == []


class TestLoadThemeOverrides:
    def test_load(self, overrides_file):
        path = overrides_file({
            "css_class": {"exact": {"Publish": "primary"}},
            "icon": {"contains": {"Upload": None}},
        })

        overrides = load_theme_overrides(path)

        assert overrides[TableKind.CSS_CLASS] == {"exact": {"Publish": "primary"}}
        assert overrides[TableKind.ICON] == {"contains": {"Upload": None}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(TableConfigurationError, match="not found"):
            load_theme_overrides(tmp_path / "nope.json")

    @pytest.mark.parametrize(
        "data, message",
        [
            ("{not json", "invalid JSON"),
            ([], "top level"),
            ({"buttons": {}}, "unknown table"),
            ({"icon": []}, "must be an object"),
            ({"icon": {"startswith": {}}}, "unknown group"),
            ({"icon": {"contains": ["Save"]}}, "must be an object"),
            ({"icon": {"contains": {"Save": 1}}}, "string or null"),
        ],
    )
    def test_malformed_file(self, overrides_file, data, message):
        path = overrides_file(data)
        with pytest.raises(TableConfigurationError, match=message):
            load_theme_overrides(path)
