"""Utility helpers shared by the browser configuration loader."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from example_browser.numbering import NavEntry, NavKind
from example_browser.theme import DEFAULT_TABLE, ColorMode, ColorScheme, SemanticRole

from .models import BrowserConfigError

if typ.TYPE_CHECKING:
    from example_browser.theme import VisualStyle
    from example_browser.theme.tables import StyleKey

HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")
STYLE_FIELDS = ("background", "foreground", "border")
NAV_KIND_KEYS: dict[str, NavKind] = {kind.value: kind for kind in NavKind}


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_bool(value: object, *, field: str) -> bool:
    """Return ``value`` as a bool, rejecting anything YAML did not type as one."""
    match value:
        case bool():
            return value
        case None:
            return False
        case _:
            msg = f"'{field}' must be true or false, got {value!r}."
            raise BrowserConfigError(msg)


def _parse_color_scheme(value: object | None) -> ColorScheme:
    """Return the configured colour scheme, defaulting to ``auto``."""
    text = _optional_str(value)
    if text is None:
        return ColorScheme.AUTO
    try:
        return ColorScheme(text.lower())
    except ValueError as exc:
        allowed = ", ".join(scheme.value for scheme in ColorScheme)
        msg = f"Unknown color_scheme '{text}'. Expected one of: {allowed}."
        raise BrowserConfigError(msg) from exc


def _parse_color(value: object, *, where: str) -> str:
    """Return a validated hex colour string."""
    text = _optional_str(value)
    if text is None or not HEX_COLOR_PATTERN.match(text):
        msg = f"{where} must be a hex colour such as '#1f2328', got {value!r}."
        raise BrowserConfigError(msg)
    return text


def _build_nav_entries(entries: object) -> list[NavEntry]:
    """Build navigation entries from the ``navigation`` list, in order."""
    match entries:
        case None:
            return []
        case list() as items:
            iterable = items
        case _:
            msg = "'navigation' must be a list of entries."
            raise BrowserConfigError(msg)
    nav: list[NavEntry] = []
    for order, entry in enumerate(iterable):
        position = order + 1
        match entry:
            case dict():
                kinds = [key for key in entry if key in NAV_KIND_KEYS]
            case _:
                msg = f"Navigation entry {position} must be a mapping."
                raise BrowserConfigError(msg)
        if len(kinds) != 1:
            allowed = ", ".join(NAV_KIND_KEYS)
            msg = f"Navigation entry {position} must declare exactly one of: {allowed}."
            raise BrowserConfigError(msg)
        kind_key = kinds[0]
        title = _optional_str(entry[kind_key])
        if title is None:
            msg = f"Navigation entry {position} has an empty '{kind_key}' title."
            raise BrowserConfigError(msg)
        nav.append(
            NavEntry(
                kind=NAV_KIND_KEYS[kind_key],
                order=order,
                title=title,
                href=_optional_str(entry.get("href")),
                is_current=_parse_bool(
                    entry.get("current", False), field=f"navigation[{position}].current"
                ),
            )
        )
    return nav


def _build_style_override(
    mode: ColorMode, role: SemanticRole, payload: object
) -> VisualStyle:
    """Merge a single override mapping onto the default style for the key."""
    where = f"theme.{mode.value}.{role.value}"
    match payload:
        case dict():
            pass
        case _:
            msg = f"{where} must be a mapping of {', '.join(STYLE_FIELDS)}."
            raise BrowserConfigError(msg)
    unknown = sorted(str(key) for key in payload if key not in STYLE_FIELDS)
    if unknown:
        msg = f"{where} has unknown fields: {', '.join(unknown)}."
        raise BrowserConfigError(msg)
    changes: dict[str, str | None] = {}
    for field in ("background", "foreground"):
        if field in payload:
            changes[field] = _parse_color(payload[field], where=f"{where}.{field}")
    if "border" in payload:
        border = payload["border"]
        changes["border"] = (
            None if border is None else _parse_color(border, where=f"{where}.border")
        )
    return dc.replace(DEFAULT_TABLE.lookup(mode, role), **changes)


def _build_theme_overrides(payload: object) -> dict[StyleKey, VisualStyle]:
    """Build ``(mode, role)`` overrides from the ``theme`` mapping."""
    match payload:
        case None:
            return {}
        case dict():
            pass
        case _:
            msg = "'theme' must be a mapping of colour modes."
            raise BrowserConfigError(msg)
    overrides: dict[StyleKey, VisualStyle] = {}
    for mode_key, roles in payload.items():
        try:
            mode = ColorMode(str(mode_key).lower())
        except ValueError as exc:
            msg = f"Unknown theme mode '{mode_key}'. Expected 'light' or 'dark'."
            raise BrowserConfigError(msg) from exc
        if not roles:
            continue
        if not isinstance(roles, dict):
            msg = f"theme.{mode.value} must be a mapping of roles."
            raise BrowserConfigError(msg)
        for role_key, style_payload in roles.items():
            try:
                role = SemanticRole(str(role_key))
            except ValueError as exc:
                msg = f"Unknown theme role '{role_key}' under theme.{mode.value}."
                raise BrowserConfigError(msg) from exc
            overrides[(mode, role)] = _build_style_override(mode, role, style_payload)
    return overrides


__all__ = [
    "HEX_COLOR_PATTERN",
    "NAV_KIND_KEYS",
    "_build_nav_entries",
    "_build_theme_overrides",
    "_optional_str",
    "_parse_bool",
    "_parse_color",
    "_parse_color_scheme",
]
