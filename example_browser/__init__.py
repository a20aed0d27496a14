"""Presentation rules and shell rendering for an example/documentation browser.

This package numbers navigation entries, resolves light/dark styles for every
semantic role, gates the "panicked" notice banner, and exposes the CLI entry
points used by ``browser render``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from example_browser import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
