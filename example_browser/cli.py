"""Cyclopts CLI entrypoint for rendering the example browser shell.

The ``browser`` console script defined here renders the two-pane HTML shell
from a YAML definition, lists the numbered navigation labels, and prints the
resolved style of every semantic role for a colour mode. Every option can also
be supplied through ``INPUT_*`` environment variables, which is how CI jobs
pass the host's panicked flag and colour-scheme preference.

Examples
--------
Render the shell for the default configuration:

>>> from example_browser.cli import main
>>> main()  # doctest: +SKIP

Render a dark-only shell into a custom file:

>>> from example_browser.cli import app
>>> app.run(
...     ["render", "--color-scheme", "dark", "--output", "dist/index.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_browser_config
from .log import configure_logging
from .numbering import label_pairs
from .shell import ShellPageBuilder
from .theme import DEFAULT_TABLE, ColorMode, ColorScheme, ThemeResolver

DEFAULT_CONFIG = Path("config/browser.yaml")

app = App(name="browser", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the two-pane browser shell to HTML.")
def render(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to browser config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="INPUT_OUTPUT"),
    ] = None,
    color_scheme: typ.Annotated[
        ColorScheme | None,
        Parameter(
            help="Override the colour scheme (auto, light, dark)",
            env_var="INPUT_COLOR_SCHEME",
        ),
    ] = None,
    panicked: typ.Annotated[
        bool | None,
        Parameter(help="Override the host's panicked flag", env_var="INPUT_PANICKED"),
    ] = None,
) -> None:
    """Render the browser shell for the requested configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``browser.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output : Path or None, optional
        Destination file; defaults to the configured ``output``.
    color_scheme : ColorScheme or None, optional
        Replaces the configured colour scheme when given.
    panicked : bool or None, optional
        Replaces the configured panicked flag when given.

    Returns
    -------
    None
        Writes the rendered shell and prints its path.
    """
    browser_config = load_browser_config(config)
    changes: dict[str, typ.Any] = {}
    if color_scheme is not None:
        changes["color_scheme"] = color_scheme
    if panicked is not None:
        changes["panicked"] = panicked
    if changes:
        browser_config = dc.replace(browser_config, **changes)
    written = ShellPageBuilder(browser_config).run(output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Print the numbered label of every navigation entry.")
def labels(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to browser config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print one ``<label><title>`` line per navigation entry in document order."""
    browser_config = load_browser_config(config)
    for entry, label in label_pairs(browser_config.entries):
        print(f"{label}{entry.title}")


@app.command(help="Print the resolved style of every role for a colour mode.")
def styles(
    *,
    mode: typ.Annotated[
        ColorMode, Parameter(help="Colour mode (light or dark)", env_var="INPUT_MODE")
    ] = ColorMode.LIGHT,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Optional browser config with theme overrides"),
    ] = None,
) -> None:
    """Print ``role: css`` for each semantic role under ``mode``.

    Parameters
    ----------
    mode : ColorMode, optional
        Colour mode to resolve; defaults to light.
    config : Path or None, optional
        When given, theme overrides from this configuration are applied.
    """
    table = load_browser_config(config).style_table() if config else DEFAULT_TABLE
    resolver = ThemeResolver(table)
    for role, style in resolver.resolve_all(mode).items():
        print(f"{role.value}: {style.css_declarations()}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``browser`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    configure_logging()
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
