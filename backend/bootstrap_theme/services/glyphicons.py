"""Bootstrap Framework Glyphicons, per framework version.

Icon sets are keyed by class name (``glyphicon-<name>``) → name. Versions
without their own additions repeat the previous version's set.
"""

from types import MappingProxyType

from bootstrap_theme.schemas.icon import IconElement

FRAMEWORK_VERSION = "3.3.5"

_BASE_ICONS: tuple[str, ...] = (
    "adjust", "align-center", "align-justify", "align-left", "align-right", "arrow-down",
    "arrow-left", "arrow-right", "arrow-up", "asterisk", "backward", "ban-circle",
    "barcode", "bell", "bold", "book", "bookmark", "briefcase",
    "bullhorn", "calendar", "camera", "certificate", "check", "chevron-down",
    "chevron-left", "chevron-right", "chevron-up", "circle-arrow-down", "circle-arrow-left", "circle-arrow-right",
    "circle-arrow-up", "cloud", "cloud-download", "cloud-upload", "cog", "collapse-down",
    "collapse-up", "comment", "compressed", "copyright-mark", "credit-card", "cutlery",
    "dashboard", "download", "download-alt", "earphone", "edit", "eject",
    "envelope", "euro", "exclamation-sign", "expand", "export", "eye-close",
    "eye-open", "facetime-video", "fast-backward", "fast-forward", "file", "film",
    "filter", "fire", "flag", "flash", "floppy-disk", "floppy-open",
    "floppy-remove", "floppy-save", "floppy-saved", "folder-close", "folder-open", "font",
    "forward", "fullscreen", "gbp", "gift", "glass", "globe",
    "hand-down", "hand-left", "hand-right", "hand-up", "hd-video", "hdd",
    "header", "headphones", "heart", "heart-empty", "home", "import",
    "inbox", "indent-left", "indent-right", "info-sign", "italic", "leaf",
    "link", "list", "list-alt", "lock", "log-in", "log-out",
    "magnet", "map-marker", "minus", "minus-sign", "move", "music",
    "new-window", "off", "ok", "ok-circle", "ok-sign", "open",
    "paperclip", "pause", "pencil", "phone", "phone-alt", "picture",
    "plane", "play", "play-circle", "plus", "plus-sign", "print",
    "pushpin", "qrcode", "question-sign", "random", "record", "refresh",
    "registration-mark", "remove", "remove-circle", "remove-sign", "repeat", "resize-full",
    "resize-horizontal", "resize-small", "resize-vertical", "retweet", "road", "save",
    "saved", "screenshot", "sd-video", "search", "send", "share",
    "share-alt", "shopping-cart", "signal", "sort", "sort-by-alphabet", "sort-by-alphabet-alt",
    "sort-by-attributes", "sort-by-attributes-alt", "sort-by-order", "sort-by-order-alt", "sound-5-1", "sound-6-1",
    "sound-7-1", "sound-dolby", "sound-stereo", "star", "star-empty", "stats",
    "step-backward", "step-forward", "stop", "subtitles", "tag", "tags",
    "tasks", "text-height", "text-width", "th", "th-large", "th-list",
    "thumbs-down", "thumbs-up", "time", "tint", "tower", "transfer",
    "trash", "tree-conifer", "tree-deciduous", "unchecked", "upload", "usd",
    "user", "volume-down", "volume-off", "volume-up", "warning-sign", "wrench",
    "zoom-in", "zoom-out",
)

# Icons added by 3.3.0.
_ADDED_3_3_0: tuple[str, ...] = (
    "eur",
)

# Icons added by 3.3.2.
_ADDED_3_3_2: tuple[str, ...] = (
    "alert", "apple", "baby-formula", "bed", "bishop", "bitcoin",
    "blackboard", "cd", "console", "copy", "duplicate", "education",
    "equalizer", "erase", "grain", "hourglass", "ice-lolly", "ice-lolly-tasted",
    "king", "knight", "lamp", "level-up", "menu-down", "menu-hamburger",
    "menu-left", "menu-right", "menu-up", "modal-window", "object-align-bottom", "object-align-horizontal",
    "object-align-left", "object-align-right", "object-align-top", "object-align-vertical", "oil", "open-file",
    "option-horizontal", "option-vertical", "paste", "pawn", "piggy-bank", "queen",
    "ruble", "save-file", "scale", "scissors", "subscript", "sunglasses",
    "superscript", "tent", "text-background", "text-color", "text-size", "triangle-bottom",
    "triangle-left", "triangle-right", "triangle-top", "yen",
)

# Icons added by 3.3.4.
_ADDED_3_3_4: tuple[str, ...] = (
    "btc", "jpy", "rub", "xbt",
)


def _icon_set(*names: tuple[str, ...]) -> MappingProxyType:
    icons = {}
    for group in names:
        for name in group:
            icons[f"glyphicon-{name}"] = name
    return MappingProxyType(icons)


def _build_versions() -> dict[str, MappingProxyType]:
    versions = {}
    versions["3.0.0"] = _icon_set(_BASE_ICONS)
    for version in ("3.0.1", "3.0.2", "3.0.3", "3.1.0", "3.1.1", "3.2.0"):
        versions[version] = versions["3.0.0"]
    versions["3.3.0"] = _icon_set(_BASE_ICONS, _ADDED_3_3_0)
    versions["3.3.1"] = versions["3.3.0"]
    versions["3.3.2"] = _icon_set(_BASE_ICONS, _ADDED_3_3_0, _ADDED_3_3_2)
    versions["3.3.4"] = _icon_set(_BASE_ICONS, _ADDED_3_3_0, _ADDED_3_3_2, _ADDED_3_3_4)
    versions["3.3.5"] = versions["3.3.4"]
    return versions


GLYPHICON_VERSIONS: dict[str, MappingProxyType] = _build_versions()


def resolve_version(version: str | None = None) -> str:
    """Return the framework version whose icon set is served for ``version``."""
    if version is not None and version in GLYPHICON_VERSIONS:
        return version
    return FRAMEWORK_VERSION


def glyphicons(version: str | None = None) -> MappingProxyType:
    """Return the icon set of ``version``, or of the latest framework version."""
    return GLYPHICON_VERSIONS[resolve_version(version)]


def has_glyphicon(name: str, version: str | None = None) -> bool:
    return f"glyphicon-{name}" in glyphicons(version)


def icon_element(name: str) -> IconElement:
    """Build the element a template renders for glyphicon ``name``."""
    return IconElement(
        name=name,
        classes=["icon", "glyphicon", f"glyphicon-{name}"],
        attributes={"aria-hidden": "true"},
    )
