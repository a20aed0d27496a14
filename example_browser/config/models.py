"""Typed dataclasses describing an example browser definition."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from example_browser.numbering import NavEntry  # noqa: TC001 - runtime field type
from example_browser.theme import DEFAULT_TABLE, ColorScheme, StyleTable
from example_browser.theme.models import VisualStyle  # noqa: TC001
from example_browser.theme.tables import StyleKey  # noqa: TC001

DEFAULT_NOTICE = (
    "This example panicked. Open the browser console to see the error, then "
    "reload the page to start again."
)


class BrowserConfigError(ValueError):
    """Raised when the browser configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class BrowserConfig:
    """A fully resolved browser shell definition sourced from YAML config."""

    title: str
    entries: list[NavEntry]
    output: Path = Path("public/index.html")
    color_scheme: ColorScheme = ColorScheme.AUTO
    panicked: bool = False
    notice: str = DEFAULT_NOTICE
    theme_overrides: dict[StyleKey, VisualStyle] = dc.field(default_factory=dict)

    @property
    def current_entry(self) -> NavEntry | None:
        """Return the first entry flagged as current, if any."""
        return next((entry for entry in self.entries if entry.is_current), None)

    def style_table(self) -> StyleTable:
        """Return the default style table with this config's overrides applied."""
        return DEFAULT_TABLE.with_overrides(self.theme_overrides)


__all__ = ["DEFAULT_NOTICE", "BrowserConfig", "BrowserConfigError"]
