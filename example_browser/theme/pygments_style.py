"""Build Pygments styles from the code-token rows of a style table."""

from __future__ import annotations

import typing as typ

from pygments.style import Style
from pygments.token import Token

from .models import CODE_TOKEN_TYPES, ColorMode, SemanticRole

if typ.TYPE_CHECKING:
    from .tables import StyleTable


def build_pygments_style(table: StyleTable, mode: ColorMode) -> type[Style]:
    """Return a Pygments ``Style`` subclass coloured from ``table`` for ``mode``.

    Parameters
    ----------
    table : StyleTable
        Validated table providing the code block and token role styles.
    mode : ColorMode
        Colour mode whose column is read.

    Returns
    -------
    type[Style]
        Style class suitable for ``HtmlFormatter(style=...)``.
    """
    block = table.lookup(mode, SemanticRole.CODE_BLOCK)
    hover = table.lookup(mode, SemanticRole.NAV_LINK_HOVER)
    styles = {Token: block.foreground}
    for role, token_type in CODE_TOKEN_TYPES.items():
        styles[token_type] = table.lookup(mode, role).pygments_spec(
            base_background=block.background
        )
    attrs = {
        "name": f"example-browser-{mode.value}",
        "background_color": block.background,
        "highlight_color": hover.background,
        "styles": styles,
    }
    return typ.cast("type[Style]", type(f"{mode.name.title()}CodeStyle", (Style,), attrs))


__all__ = ["build_pygments_style"]
