"""Shared fixtures for example browser tests."""

from __future__ import annotations

import copy
import typing as typ

import pytest
from ruamel.yaml import YAML

from example_browser.log import configure_logging

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

BASE_CONFIG: dict[str, typ.Any] = {
    "title": "Sample Examples",
    "color_scheme": "auto",
    "panicked": False,
    "navigation": [
        {"section": "Basics"},
        {"example": "Counter", "href": "counter/index.html", "current": True},
        {"subexample": "Counter (isomorphic)", "href": "counter-isomorphic/index.html"},
        {
            "subexample": "Counter (without macros)",
            "href": "counter-without-macros/index.html",
        },
        {"example": "Counters", "href": "counters/index.html"},
        {"subexample": "Counters (stable)", "href": "counters-stable/index.html"},
        {"section": "More"},
        {"link": "About", "href": "about.html"},
    ],
}


@pytest.fixture(autouse=True)
def _configure_logging() -> None:
    """Configure logging as ``main`` does so logs go to stderr, not stdout."""
    configure_logging(force=True)


@pytest.fixture
def write_config(tmp_path: Path) -> cabc.Callable[..., Path]:
    """Return a helper that writes a browser YAML file under ``tmp_path``.

    Keyword arguments replace top-level keys of ``BASE_CONFIG``; a value of
    ``None`` removes the key. ``output`` always points inside ``tmp_path``.
    """

    def _write(**overrides: object) -> Path:
        payload = copy.deepcopy(BASE_CONFIG)
        payload["output"] = str(tmp_path / "public" / "index.html")
        for key, value in overrides.items():
            if value is None:
                payload.pop(key, None)
            else:
                payload[key] = value
        path = tmp_path / "browser.yaml"
        dumper = YAML(typ="safe")
        dumper.default_flow_style = False
        with path.open("w", encoding="utf-8") as handle:
            dumper.dump(payload, handle)
        return path

    return _write
