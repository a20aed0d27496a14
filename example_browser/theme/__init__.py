"""Light/dark theme resolution for the example browser shell."""

from .models import (
    CODE_TOKEN_TYPES,
    ColorMode,
    ColorScheme,
    SemanticRole,
    ThemeTableError,
    VisualStyle,
)
from .pygments_style import build_pygments_style
from .resolver import ThemeResolver, resolve
from .stylesheet import build_stylesheet, role_class
from .tables import DEFAULT_TABLE, StyleTable, build_style_table

__all__ = [
    "CODE_TOKEN_TYPES",
    "DEFAULT_TABLE",
    "ColorMode",
    "ColorScheme",
    "SemanticRole",
    "StyleTable",
    "ThemeResolver",
    "ThemeTableError",
    "VisualStyle",
    "build_pygments_style",
    "build_style_table",
    "build_stylesheet",
    "resolve",
    "role_class",
]
