"""Static light and dark style tables keyed by ``(mode, role)``.

The palettes below are the single source of truth for every colour the browser
shell uses. :func:`build_style_table` flattens them into a :class:`StyleTable`
and refuses to build one unless both modes cover exactly the same, complete
set of :class:`~example_browser.theme.models.SemanticRole` members, so a
missing entry fails at import time instead of at render time.

Examples
--------
>>> from example_browser.theme.models import ColorMode, SemanticRole
>>> from example_browser.theme.tables import DEFAULT_TABLE
>>> DEFAULT_TABLE.lookup(ColorMode.DARK, SemanticRole.NOTICE_BANNER).foreground
'#ffffff'
"""

from __future__ import annotations

import typing as typ
from types import MappingProxyType

import structlog

from .models import ColorMode, SemanticRole, ThemeTableError, VisualStyle

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = structlog.get_logger(__name__)

StyleKey = tuple[ColorMode, SemanticRole]

LIGHT_PALETTE: dict[SemanticRole, VisualStyle] = {
    SemanticRole.NAV_PANE: VisualStyle("#f6f8fa", "#1f2328", "#d0d7de"),
    SemanticRole.CONTENT_PANE: VisualStyle("#ffffff", "#1f2328"),
    SemanticRole.NAV_LINK: VisualStyle("#f6f8fa", "#0969da"),
    SemanticRole.NAV_LINK_HOVER: VisualStyle("#eaeef2", "#0550ae"),
    SemanticRole.NAV_LINK_ACTIVE: VisualStyle("#ddf4ff", "#0a3069", "#54aeff"),
    SemanticRole.NAV_LINK_PANICKED: VisualStyle("#ffebe9", "#82071e", "#ff8182"),
    SemanticRole.SECTION_DIVIDER: VisualStyle("#eaeef2", "#57606a", "#d0d7de"),
    SemanticRole.NOTICE_BANNER: VisualStyle("#cf222e", "#ffffff", "#a40e26"),
    SemanticRole.CODE_BLOCK: VisualStyle("#f6f8fa", "#1f2328", "#d0d7de"),
    SemanticRole.CODE_KEYWORD: VisualStyle("#f6f8fa", "#cf222e"),
    SemanticRole.CODE_TYPE: VisualStyle("#f6f8fa", "#953800"),
    SemanticRole.CODE_FUNCTION: VisualStyle("#f6f8fa", "#8250df"),
    SemanticRole.CODE_CLASS: VisualStyle("#f6f8fa", "#953800"),
    SemanticRole.CODE_BUILTIN: VisualStyle("#f6f8fa", "#0550ae"),
    SemanticRole.CODE_ATTRIBUTE: VisualStyle("#f6f8fa", "#0550ae"),
    SemanticRole.CODE_TAG: VisualStyle("#f6f8fa", "#116329"),
    SemanticRole.CODE_VARIABLE: VisualStyle("#f6f8fa", "#953800"),
    SemanticRole.CODE_MACRO: VisualStyle("#f6f8fa", "#8250df"),
    SemanticRole.CODE_STRING: VisualStyle("#f6f8fa", "#0a3069"),
    SemanticRole.CODE_ESCAPE: VisualStyle("#f6f8fa", "#116329"),
    SemanticRole.CODE_NUMBER: VisualStyle("#f6f8fa", "#0550ae"),
    SemanticRole.CODE_OPERATOR: VisualStyle("#f6f8fa", "#cf222e"),
    SemanticRole.CODE_PUNCTUATION: VisualStyle("#f6f8fa", "#1f2328"),
    SemanticRole.CODE_COMMENT: VisualStyle("#f6f8fa", "#6e7781"),
}

DARK_PALETTE: dict[SemanticRole, VisualStyle] = {
    SemanticRole.NAV_PANE: VisualStyle("#161b22", "#e6edf3", "#30363d"),
    SemanticRole.CONTENT_PANE: VisualStyle("#0d1117", "#e6edf3"),
    SemanticRole.NAV_LINK: VisualStyle("#161b22", "#4493f8"),
    SemanticRole.NAV_LINK_HOVER: VisualStyle("#21262d", "#79c0ff"),
    SemanticRole.NAV_LINK_ACTIVE: VisualStyle("#1f6feb", "#ffffff", "#388bfd"),
    SemanticRole.NAV_LINK_PANICKED: VisualStyle("#490202", "#ffa198", "#f85149"),
    SemanticRole.SECTION_DIVIDER: VisualStyle("#21262d", "#8d96a0", "#30363d"),
    SemanticRole.NOTICE_BANNER: VisualStyle("#da3633", "#ffffff", "#f85149"),
    SemanticRole.CODE_BLOCK: VisualStyle("#161b22", "#e6edf3", "#30363d"),
    SemanticRole.CODE_KEYWORD: VisualStyle("#161b22", "#ff7b72"),
    SemanticRole.CODE_TYPE: VisualStyle("#161b22", "#ffa657"),
    SemanticRole.CODE_FUNCTION: VisualStyle("#161b22", "#d2a8ff"),
    SemanticRole.CODE_CLASS: VisualStyle("#161b22", "#ffa657"),
    SemanticRole.CODE_BUILTIN: VisualStyle("#161b22", "#79c0ff"),
    SemanticRole.CODE_ATTRIBUTE: VisualStyle("#161b22", "#79c0ff"),
    SemanticRole.CODE_TAG: VisualStyle("#161b22", "#7ee787"),
    SemanticRole.CODE_VARIABLE: VisualStyle("#161b22", "#ffa657"),
    SemanticRole.CODE_MACRO: VisualStyle("#161b22", "#d2a8ff"),
    SemanticRole.CODE_STRING: VisualStyle("#161b22", "#a5d6ff"),
    SemanticRole.CODE_ESCAPE: VisualStyle("#161b22", "#7ee787"),
    SemanticRole.CODE_NUMBER: VisualStyle("#161b22", "#79c0ff"),
    SemanticRole.CODE_OPERATOR: VisualStyle("#161b22", "#ff7b72"),
    SemanticRole.CODE_PUNCTUATION: VisualStyle("#161b22", "#e6edf3"),
    SemanticRole.CODE_COMMENT: VisualStyle("#161b22", "#8b949e"),
}


class StyleTable:
    """Immutable style lookup over every ``(ColorMode, SemanticRole)`` pair."""

    __slots__ = ("_styles",)

    def __init__(self, styles: cabc.Mapping[StyleKey, VisualStyle]) -> None:
        """Validate ``styles`` and freeze it.

        Raises
        ------
        ThemeTableError
            If any mode lacks a role, or the modes disagree on their roles.
        """
        _check_exhaustive(styles)
        self._styles: cabc.Mapping[StyleKey, VisualStyle] = MappingProxyType(
            dict(styles)
        )

    def lookup(self, mode: ColorMode, role: SemanticRole) -> VisualStyle:
        """Return the style stored for ``(mode, role)``."""
        return self._styles[(mode, role)]

    def roles(self, mode: ColorMode) -> frozenset[SemanticRole]:
        """Return the set of roles resolvable under ``mode``."""
        return frozenset(role for key_mode, role in self._styles if key_mode == mode)

    def palette(self, mode: ColorMode) -> dict[SemanticRole, VisualStyle]:
        """Return every role's style for ``mode`` in declaration order."""
        return {role: self._styles[(mode, role)] for role in SemanticRole}

    def with_overrides(
        self, overrides: cabc.Mapping[StyleKey, VisualStyle]
    ) -> StyleTable:
        """Return a new table with ``overrides`` replacing matching entries."""
        if not overrides:
            return self
        unknown = [key for key in overrides if key not in self._styles]
        if unknown:
            names = ", ".join(f"{mode}/{role}" for mode, role in unknown)
            msg = f"Style overrides reference unknown keys: {names}"
            raise ThemeTableError(msg)
        merged = dict(self._styles)
        merged.update(overrides)
        logger.debug("style_overrides_applied", count=len(overrides))
        return StyleTable(merged)

    def __len__(self) -> int:
        return len(self._styles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleTable):
            return NotImplemented
        return dict(self._styles) == dict(other._styles)

    __hash__ = None  # type: ignore[assignment]


def _check_exhaustive(styles: cabc.Mapping[StyleKey, VisualStyle]) -> None:
    """Raise ThemeTableError unless every mode maps exactly the full role set."""
    unknown = [
        f"{mode!r}/{role!r}"
        for mode, role in styles
        if not isinstance(mode, ColorMode) or not isinstance(role, SemanticRole)
    ]
    if unknown:
        msg = f"Theme tables contain unknown keys: {', '.join(unknown)}"
        raise ThemeTableError(msg)
    by_mode: dict[ColorMode, set[SemanticRole]] = {mode: set() for mode in ColorMode}
    for mode, role in styles:
        by_mode[mode].add(role)
    # Keys are typed above, so a mode missing nothing holds exactly ``expected``.
    expected = set(SemanticRole)
    problems: list[str] = []
    for mode, roles in by_mode.items():
        missing = sorted(expected - roles)
        if missing:
            problems.append(f"'{mode}' is missing roles: {', '.join(missing)}")
    if problems:
        msg = "Theme tables are not exhaustive; " + "; ".join(problems)
        raise ThemeTableError(msg)


def build_style_table(
    palettes: cabc.Mapping[ColorMode, cabc.Mapping[SemanticRole, VisualStyle]],
) -> StyleTable:
    """Flatten per-mode palettes into one validated :class:`StyleTable`.

    Parameters
    ----------
    palettes : Mapping[ColorMode, Mapping[SemanticRole, VisualStyle]]
        One palette per colour mode.

    Returns
    -------
    StyleTable
        Table keyed by ``(mode, role)``.

    Raises
    ------
    ThemeTableError
        If a mode has no palette, or the palettes do not each cover every
        semantic role.
    """
    absent = [mode.value for mode in ColorMode if mode not in palettes]
    if absent:
        msg = f"No palette defined for colour modes: {', '.join(absent)}"
        raise ThemeTableError(msg)
    flattened: dict[StyleKey, VisualStyle] = {}
    for mode, palette in palettes.items():
        for role, style in palette.items():
            try:
                key = (ColorMode(mode), SemanticRole(role))
            except ValueError as exc:
                msg = f"Unknown theme key {mode!r}/{role!r}: {exc}"
                raise ThemeTableError(msg) from exc
            flattened[key] = style
    return StyleTable(flattened)


DEFAULT_TABLE = build_style_table(
    {ColorMode.LIGHT: LIGHT_PALETTE, ColorMode.DARK: DARK_PALETTE}
)


__all__ = [
    "DARK_PALETTE",
    "DEFAULT_TABLE",
    "LIGHT_PALETTE",
    "StyleKey",
    "StyleTable",
    "build_style_table",
]
