"""Example browser shell rendering pipeline.

This module turns a :class:`~example_browser.config.BrowserConfig` into the
static two-pane ``index.html``: a numbered navigation list on the left and a
content pane that frames the current entry on the right. It wires the
numbering engine, the theme resolver, and the notice gate into a Jinja2
template. The main entry point is :class:`ShellPageBuilder`.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from example_browser.config import load_browser_config
>>> builder = ShellPageBuilder(load_browser_config(Path("browser.yaml")))  # doctest: +SKIP
>>> output_path = builder.run()  # doctest: +SKIP
>>> print(output_path)  # doctest: +SKIP
public/index.html

Templates are read from ``example_browser/templates`` unless a custom
directory is provided. Side effects are limited to reading templates and
writing the rendered HTML in :meth:`ShellPageBuilder.run`.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import structlog
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .numbering import NavEntry, NavKind, label_pairs
from .notice import notice_state, visible
from .theme import SemanticRole, build_stylesheet, role_class

if typ.TYPE_CHECKING:
    from .config import BrowserConfig

logger = structlog.get_logger(__name__)


@dc.dataclass(slots=True)
class NavItem:
    """Structured data passed to the navigation template.

    Attributes
    ----------
    entry : NavEntry
        Source navigation entry.
    label : str
        Numeric label such as ``"1.2 "``; empty for unnumbered entries.
    role : SemanticRole
        Role that styles the entry.
    css_class : str
        Role class applied to the rendered element.
    """

    entry: NavEntry
    label: str
    role: SemanticRole
    css_class: str

    @property
    def is_divider(self) -> bool:
        """Return True when the item renders as a section divider."""
        return self.entry.kind is NavKind.SECTION


def role_for_entry(entry: NavEntry, *, panicked: bool) -> SemanticRole:
    """Return the semantic role for ``entry`` given the host's panicked flag."""
    if entry.kind is NavKind.SECTION:
        return SemanticRole.SECTION_DIVIDER
    if entry.is_current:
        return (
            SemanticRole.NAV_LINK_PANICKED if panicked else SemanticRole.NAV_LINK_ACTIVE
        )
    return SemanticRole.NAV_LINK


def build_nav_items(
    entries: list[NavEntry], *, panicked: bool = False
) -> list[NavItem]:
    """Label and classify ``entries`` in document order."""
    items: list[NavItem] = []
    for entry, label in label_pairs(entries):
        role = role_for_entry(entry, panicked=panicked)
        items.append(
            NavItem(entry=entry, label=label, role=role, css_class=role_class(role))
        )
    return items


class ShellPageBuilder:
    """Render the two-pane browser shell from structured config data."""

    def __init__(
        self, config: BrowserConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        config : BrowserConfig
            Parsed browser definition; provides navigation entries, colour
            scheme, panicked flag, notice copy, and theme overrides.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``example_browser/templates`` when not supplied.

        Raises
        ------
        ThemeTableError
            If the configured overrides do not yield an exhaustive table.
        """
        self.config = config
        self.table = config.style_table()
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("shell.jinja")

    def render(self) -> str:
        """Return the shell HTML for the current configuration."""
        config = self.config
        current = config.current_entry
        context = {
            "config": config,
            "nav_items": build_nav_items(config.entries, panicked=config.panicked),
            "current": current,
            "content_href": current.href if current else None,
            "stylesheet": build_stylesheet(self.table, config.color_scheme),
            "notice_visible": visible(config.panicked),
            "notice_state": notice_state(config.panicked).value,
            "role_class": role_class,
            "roles": SemanticRole,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output: Path | None = None) -> Path:
        """Render and write the shell HTML, returning the output path.

        Parameters
        ----------
        output : Path, optional
            Destination overriding ``config.output``.

        Returns
        -------
        Path
            Filesystem path to the rendered HTML file.
        """
        output_path = output or self.config.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        html = self.render()
        output_path.write_text(html, encoding="utf-8")
        logger.info(
            "shell_written",
            path=str(output_path),
            entries=len(self.config.entries),
            panicked=self.config.panicked,
        )
        return output_path


__all__ = ["NavItem", "ShellPageBuilder", "build_nav_items", "role_for_entry"]
