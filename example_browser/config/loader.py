"""Load browser configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import structlog
from ruamel.yaml import YAML

from example_browser.theme import ThemeTableError

from .helpers import (
    _build_nav_entries,
    _build_theme_overrides,
    _optional_str,
    _parse_bool,
    _parse_color_scheme,
)
from .models import DEFAULT_NOTICE, BrowserConfig, BrowserConfigError

logger = structlog.get_logger(__name__)


def load_browser_config(path: Path) -> BrowserConfig:
    """Load the YAML configuration describing the browser shell.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``browser.yaml``).

    Returns
    -------
    BrowserConfig
        Parsed configuration, including the navigation entries in document
        order, the colour scheme, the panicked flag, and any theme overrides.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    BrowserConfigError
        If required fields are missing or invalid (for example, no title, an
        unknown navigation kind, or an override naming an unknown role).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from example_browser.config import load_browser_config
    >>> config = load_browser_config(Path("browser.yaml"))  # doctest: +SKIP
    >>> [entry.title for entry in config.entries][:1]  # doctest: +SKIP
    ['Basics']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    title = _optional_str(raw.get("title"))
    if title is None:
        msg = "Browser configuration requires a 'title'."
        raise BrowserConfigError(msg)

    entries = _build_nav_entries(raw.get("navigation"))
    if not entries:
        msg = "Browser navigation requires at least one entry."
        raise BrowserConfigError(msg)

    config = BrowserConfig(
        title=title,
        entries=entries,
        output=Path(raw.get("output") or "public/index.html"),
        color_scheme=_parse_color_scheme(raw.get("color_scheme")),
        panicked=_parse_bool(raw.get("panicked", False), field="panicked"),
        notice=_optional_str(raw.get("notice")) or DEFAULT_NOTICE,
        theme_overrides=_build_theme_overrides(raw.get("theme")),
    )
    try:
        config.style_table()
    except ThemeTableError as exc:
        msg = f"Theme overrides in '{path}' produce an invalid style table: {exc}"
        raise BrowserConfigError(msg) from exc
    logger.debug(
        "browser_config_loaded",
        path=str(path),
        entries=len(entries),
        color_scheme=config.color_scheme.value,
        overrides=len(config.theme_overrides),
    )
    return config


__all__ = ["load_browser_config"]
