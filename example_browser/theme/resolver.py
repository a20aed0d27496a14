"""Resolve ``(mode, role)`` pairs into visual styles.

The resolver is a plain lookup over a :class:`StyleTable`. It keeps no cache:
when the ambient colour preference changes, callers invoke
:meth:`ThemeResolver.resolve_all` with the new mode and restyle every visible
element from the result.

Examples
--------
>>> from example_browser.theme import ColorMode, SemanticRole, resolve
>>> resolve(ColorMode.LIGHT, SemanticRole.NAV_LINK_ACTIVE).border
'#54aeff'
"""

from __future__ import annotations

import typing as typ

from .tables import DEFAULT_TABLE, StyleTable

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import ColorMode, SemanticRole, VisualStyle


class ThemeResolver:
    """Look up visual styles in a validated style table."""

    def __init__(self, table: StyleTable | None = None) -> None:
        self.table = table or DEFAULT_TABLE

    def resolve(self, mode: ColorMode, role: SemanticRole) -> VisualStyle:
        """Return the style for ``role`` under ``mode``."""
        return self.table.lookup(mode, role)

    def resolve_all(
        self,
        mode: ColorMode,
        roles: cabc.Iterable[SemanticRole] | None = None,
    ) -> dict[SemanticRole, VisualStyle]:
        """Resolve every role in ``roles`` (all roles by default) under ``mode``.

        Parameters
        ----------
        mode : ColorMode
            Colour mode to resolve against.
        roles : Iterable[SemanticRole], optional
            Roles of the currently visible elements. ``None`` resolves the
            complete role set.

        Returns
        -------
        dict[SemanticRole, VisualStyle]
            Fresh mapping; nothing is retained between calls.
        """
        if roles is None:
            return self.table.palette(mode)
        return {role: self.table.lookup(mode, role) for role in roles}


def resolve(
    mode: ColorMode, role: SemanticRole, *, table: StyleTable | None = None
) -> VisualStyle:
    """Return the style for ``(mode, role)`` from ``table`` or the default table."""
    return (table or DEFAULT_TABLE).lookup(mode, role)


__all__ = ["ThemeResolver", "resolve"]
