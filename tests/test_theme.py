"""Unit tests for the light/dark theme resolution layer.

These tests cover the exhaustive ``(mode, role)`` style table, the resolver,
the code-token role mapping onto Pygments classes, and the generated
stylesheet.

Usage
-----
Run ``pytest tests/test_theme.py -v``.
"""

from __future__ import annotations

import typing as typ

import pytest
from pygments.formatters.html import HtmlFormatter
from pygments.token import STANDARD_TYPES

from example_browser.theme import (
    CODE_TOKEN_TYPES,
    DEFAULT_TABLE,
    ColorMode,
    ColorScheme,
    SemanticRole,
    StyleTable,
    ThemeResolver,
    ThemeTableError,
    VisualStyle,
    build_pygments_style,
    build_style_table,
    build_stylesheet,
    resolve,
    role_class,
)
from example_browser.theme.tables import DARK_PALETTE, LIGHT_PALETTE


def test_panicked_link_resolves_distinctly_per_mode() -> None:
    """The panicked link has a defined, different style in each mode."""
    light = resolve(ColorMode.LIGHT, SemanticRole.NAV_LINK_PANICKED)
    dark = resolve(ColorMode.DARK, SemanticRole.NAV_LINK_PANICKED)
    assert isinstance(light, VisualStyle), "expected a light VisualStyle"
    assert isinstance(dark, VisualStyle), "expected a dark VisualStyle"
    assert light != dark, "expected light and dark panicked styles to differ"


def test_light_and_dark_share_the_full_role_set() -> None:
    """Both modes resolve exactly the complete set of semantic roles."""
    light_roles = DEFAULT_TABLE.roles(ColorMode.LIGHT)
    dark_roles = DEFAULT_TABLE.roles(ColorMode.DARK)
    assert light_roles == dark_roles, "expected identical role sets per mode"
    assert light_roles == frozenset(SemanticRole), "expected every role covered"


@pytest.mark.parametrize("mode", list(ColorMode))
@pytest.mark.parametrize("role", list(SemanticRole))
def test_resolution_is_total(mode: ColorMode, role: SemanticRole) -> None:
    """Every ``(mode, role)`` pair maps to a style with both colours set."""
    style = ThemeResolver().resolve(mode, role)
    assert style.background.startswith("#"), f"no background for {mode}/{role}"
    assert style.foreground.startswith("#"), f"no foreground for {mode}/{role}"


def test_missing_role_is_a_construction_error() -> None:
    """Dropping a role from one palette fails when the table is built."""
    dark = dict(DARK_PALETTE)
    del dark[SemanticRole.CODE_COMMENT]
    with pytest.raises(ThemeTableError, match="'dark' is missing roles: code-comment"):
        build_style_table({ColorMode.LIGHT: LIGHT_PALETTE, ColorMode.DARK: dark})


def test_missing_mode_is_a_construction_error() -> None:
    """A table without a dark palette cannot be built."""
    with pytest.raises(ThemeTableError, match="dark"):
        build_style_table({ColorMode.LIGHT: LIGHT_PALETTE})


def test_style_table_rejects_partial_mapping() -> None:
    """Constructing a StyleTable directly also enforces exhaustiveness."""
    styles = {
        (ColorMode.LIGHT, role): style for role, style in LIGHT_PALETTE.items()
    }
    with pytest.raises(ThemeTableError):
        StyleTable(styles)


def _full_styles() -> dict[typ.Any, VisualStyle]:
    return {
        (mode, role): DEFAULT_TABLE.lookup(mode, role)
        for mode in ColorMode
        for role in SemanticRole
    }


def test_style_table_rejects_extra_role_in_one_mode() -> None:
    """A key outside the role set breaks the shared key set and is rejected."""
    styles = _full_styles()
    styles[(ColorMode.LIGHT, "bogus-role")] = VisualStyle("#000000", "#ffffff")
    with pytest.raises(ThemeTableError, match="bogus-role"):
        StyleTable(styles)


def test_style_table_rejects_unknown_mode() -> None:
    """A key whose mode is not a colour mode raises a table error."""
    styles = _full_styles()
    styles[("sepia", SemanticRole.NAV_LINK)] = VisualStyle("#000000", "#ffffff")
    with pytest.raises(ThemeTableError, match="sepia"):
        StyleTable(styles)


def test_build_style_table_rejects_unknown_palette_role() -> None:
    """Palettes naming an unknown role fail with a table error."""
    light = {**LIGHT_PALETTE, "bogus-role": VisualStyle("#000000", "#ffffff")}
    with pytest.raises(ThemeTableError, match="bogus-role"):
        build_style_table({ColorMode.LIGHT: light, ColorMode.DARK: DARK_PALETTE})


def test_overrides_return_a_new_table() -> None:
    """Overrides replace one entry and leave the source table untouched."""
    custom = VisualStyle("#000000", "#ffffff", "#ff0000")
    key = (ColorMode.DARK, SemanticRole.NAV_LINK_ACTIVE)
    table = DEFAULT_TABLE.with_overrides({key: custom})
    assert table.lookup(*key) == custom, "expected the override to apply"
    assert DEFAULT_TABLE.lookup(*key) != custom, "default table must not change"
    assert len(table) == len(DEFAULT_TABLE), "expected the same key count"


def test_resolve_all_covers_every_role_without_caching() -> None:
    """A mode change re-resolves every role from the current table."""
    resolver = ThemeResolver()
    light = resolver.resolve_all(ColorMode.LIGHT)
    dark = resolver.resolve_all(ColorMode.DARK)
    assert set(light) == set(dark) == set(SemanticRole), "expected all roles"
    resolver.table = DEFAULT_TABLE.with_overrides(
        {(ColorMode.DARK, SemanticRole.NAV_LINK): VisualStyle("#111111", "#eeeeee")}
    )
    refreshed = resolver.resolve_all(ColorMode.DARK)
    assert refreshed[SemanticRole.NAV_LINK] == VisualStyle("#111111", "#eeeeee"), (
        "expected resolution to read the current table on every call"
    )


def test_resolve_all_limits_to_requested_roles() -> None:
    """Passing roles restricts the result to those roles."""
    roles = [SemanticRole.NAV_LINK, SemanticRole.NOTICE_BANNER]
    result = ThemeResolver().resolve_all(ColorMode.DARK, roles)
    assert list(result) == roles, f"unexpected roles {list(result)!r}"


@pytest.mark.parametrize("role", list(CODE_TOKEN_TYPES))
def test_code_token_roles_round_trip_through_css_classes(
    role: SemanticRole,
) -> None:
    """Each code-token role maps to a Pygments class and back unchanged."""
    css_class = role.token_class
    assert css_class == STANDARD_TYPES[CODE_TOKEN_TYPES[role]], (
        f"unexpected css class {css_class!r} for {role}"
    )
    assert SemanticRole.from_token_class(css_class) is role, (
        f"expected {css_class!r} to map back to {role}"
    )


def test_code_token_set_is_closed() -> None:
    """Fifteen distinct highlighter classes are covered and others rejected."""
    classes = {role.token_class for role in CODE_TOKEN_TYPES}
    assert len(classes) == 15, f"expected 15 distinct classes, got {len(classes)}"
    with pytest.raises(ValueError, match="no-such-class"):
        SemanticRole.from_token_class("no-such-class")
    with pytest.raises(ValueError, match="not a code-token role"):
        _ = SemanticRole.NAV_LINK.token_type


@pytest.mark.parametrize(
    ("preference", "expected"),
    [
        ("dark", ColorMode.DARK),
        ("Light", ColorMode.LIGHT),
        ("no-preference", ColorMode.LIGHT),
        (None, ColorMode.LIGHT),
    ],
)
def test_color_mode_from_preference(
    preference: str | None, expected: ColorMode
) -> None:
    """Ambient preference strings resolve to a concrete mode."""
    assert ColorMode.from_preference(preference) is expected, (
        f"unexpected mode for {preference!r}"
    )


def test_color_mode_rejects_unknown_preference() -> None:
    """Unknown ambient preferences are rejected."""
    with pytest.raises(ValueError, match="sepia"):
        ColorMode.from_preference("sepia")


def test_visual_style_projections() -> None:
    """Styles render as CSS declarations and Pygments style strings."""
    style = VisualStyle("#ffffff", "#000000", "#cccccc")
    assert style.css_declarations() == (
        "background-color: #ffffff; color: #000000; border: 1px solid #cccccc;"
    ), "unexpected css declarations"
    assert style.pygments_spec(base_background="#ffffff") == "#000000 border:#cccccc"
    assert VisualStyle("#eeeeee", "#111111").pygments_spec() == "#111111 bg:#eeeeee"


def test_pygments_style_uses_table_colours() -> None:
    """The generated Pygments style reflects the code-token rows."""
    style = build_pygments_style(DEFAULT_TABLE, ColorMode.DARK)
    keyword = DEFAULT_TABLE.lookup(ColorMode.DARK, SemanticRole.CODE_KEYWORD)
    block = DEFAULT_TABLE.lookup(ColorMode.DARK, SemanticRole.CODE_BLOCK)
    assert style.background_color == block.background, "unexpected background"
    token_style = style.style_for_token(SemanticRole.CODE_KEYWORD.token_type)
    assert token_style["color"] == keyword.foreground.lstrip("#"), (
        "expected keyword colour from the dark table"
    )
    css = HtmlFormatter(style=style, cssclass="codehilite").get_style_defs(
        ".codehilite"
    )
    assert f".codehilite .k {{ color: {keyword.foreground} }}" in css, (
        "expected keyword rule in formatter CSS"
    )


def test_auto_stylesheet_wraps_dark_rules_in_media_query() -> None:
    """The auto scheme emits light rules first and dark rules in a media query."""
    css = build_stylesheet(DEFAULT_TABLE, ColorScheme.AUTO)
    light_active = DEFAULT_TABLE.lookup(ColorMode.LIGHT, SemanticRole.NAV_LINK_ACTIVE)
    dark_active = DEFAULT_TABLE.lookup(ColorMode.DARK, SemanticRole.NAV_LINK_ACTIVE)
    media_at = css.index("@media (prefers-color-scheme: dark)")
    assert css.index(light_active.css_declarations()) < media_at, (
        "expected light rules before the media query"
    )
    assert css.index(dark_active.css_declarations()) > media_at, (
        "expected dark rules inside the media query"
    )
    assert ".role-nav-link:hover" in css, "expected hover variant selector"


def test_forced_scheme_emits_a_single_mode() -> None:
    """A pinned scheme renders one mode and no media query."""
    css = build_stylesheet(DEFAULT_TABLE, ColorScheme.DARK)
    dark_banner = DEFAULT_TABLE.lookup(ColorMode.DARK, SemanticRole.NOTICE_BANNER)
    assert "@media" not in css, "expected no media query for a forced scheme"
    assert (
        f".{role_class(SemanticRole.NOTICE_BANNER)} {{ "
        f"{dark_banner.css_declarations()} }}"
    ) in css, "expected the dark notice banner rule"
