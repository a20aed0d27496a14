"""Render a style table as the shell's CSS.

Each semantic role becomes a ``.role-<name>`` rule. For the ``auto`` scheme
the light rules are emitted unqualified and the dark rules inside a
``prefers-color-scheme: dark`` media query, so when the ambient preference
flips the browser restyles every element at once rather than a subset. Code
token colours come from a Pygments ``HtmlFormatter`` driven by the same table.
"""

from __future__ import annotations

import typing as typ

from pygments.formatters.html import HtmlFormatter

from .models import ColorScheme, SemanticRole
from .pygments_style import build_pygments_style

if typ.TYPE_CHECKING:
    from .models import ColorMode
    from .tables import StyleTable

ROLE_CLASS_PREFIX = "role-"
CODE_CSS_CLASS = "codehilite"
DARK_MEDIA_QUERY = "@media (prefers-color-scheme: dark)"

# Hover is a role variant; bind it to the pseudo-class of the base link role.
_ROLE_SELECTORS: dict[SemanticRole, str] = {
    SemanticRole.NAV_LINK_HOVER: ".role-nav-link:hover, .role-nav-link-hover",
}


def role_class(role: SemanticRole) -> str:
    """Return the CSS class that binds an element to ``role``."""
    return f"{ROLE_CLASS_PREFIX}{role.value}"


def _selector(role: SemanticRole) -> str:
    return _ROLE_SELECTORS.get(role, f".{role_class(role)}")


def _mode_rules(table: StyleTable, mode: ColorMode) -> str:
    """Return every rule for ``mode``: role classes then highlighter tokens."""
    rules = [
        f"{_selector(role)} {{ {style.css_declarations()} }}"
        for role, style in table.palette(mode).items()
        if not role.is_code_token
    ]
    formatter = HtmlFormatter(
        style=build_pygments_style(table, mode), cssclass=CODE_CSS_CLASS
    )
    rules.append(formatter.get_style_defs(f".{CODE_CSS_CLASS}"))
    return "\n".join(rules)


def _indent(text: str, prefix: str = "  ") -> str:
    return "\n".join(f"{prefix}{line}" if line else line for line in text.splitlines())


def build_stylesheet(table: StyleTable, scheme: ColorScheme) -> str:
    """Return the CSS for ``scheme`` rendered from ``table``.

    Parameters
    ----------
    table : StyleTable
        Validated style table.
    scheme : ColorScheme
        ``AUTO`` emits both modes (dark behind the media query); ``LIGHT`` or
        ``DARK`` pin the shell to a single mode.

    Returns
    -------
    str
        Stylesheet text ending in a newline.
    """
    first, *rest = scheme.modes
    blocks = [_mode_rules(table, first)]
    if scheme is ColorScheme.AUTO:
        (dark,) = rest
        blocks.append(f"{DARK_MEDIA_QUERY} {{\n{_indent(_mode_rules(table, dark))}\n}}")
    return "\n".join(blocks) + "\n"


__all__ = [
    "CODE_CSS_CLASS",
    "DARK_MEDIA_QUERY",
    "ROLE_CLASS_PREFIX",
    "build_stylesheet",
    "role_class",
]
