"""Value types shared by the theme resolution layer."""

from __future__ import annotations

import dataclasses as dc
import enum

from pygments.token import STANDARD_TYPES, Token, _TokenType


class ThemeTableError(ValueError):
    """Raised when the light and dark style tables do not share one key set."""


class ColorMode(enum.StrEnum):
    """Resolved colour mode for a single render."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_preference(cls, preference: str | None) -> ColorMode:
        """Interpret an ambient ``prefers-color-scheme`` value.

        ``"no-preference"`` and an empty signal resolve to light, matching how
        browsers apply the unqualified stylesheet.
        """
        normalized = (preference or "").strip().lower()
        if normalized in {"", "no-preference"}:
            return cls.LIGHT
        try:
            return cls(normalized)
        except ValueError as exc:
            msg = f"Unknown colour-scheme preference '{preference}'."
            raise ValueError(msg) from exc


class ColorScheme(enum.StrEnum):
    """Configured colour scheme; ``AUTO`` defers to the ambient preference."""

    AUTO = "auto"
    LIGHT = "light"
    DARK = "dark"

    @property
    def modes(self) -> tuple[ColorMode, ...]:
        """Return the colour modes a stylesheet for this scheme must cover."""
        if self is ColorScheme.AUTO:
            return (ColorMode.LIGHT, ColorMode.DARK)
        return (ColorMode(self.value),)


class SemanticRole(enum.StrEnum):
    """Closed set of tags naming what kind of element is being styled."""

    NAV_PANE = "nav-pane"
    CONTENT_PANE = "content-pane"
    NAV_LINK = "nav-link"
    NAV_LINK_HOVER = "nav-link-hover"
    NAV_LINK_ACTIVE = "nav-link-active"
    NAV_LINK_PANICKED = "nav-link-panicked"
    SECTION_DIVIDER = "section-divider"
    NOTICE_BANNER = "notice-banner"
    CODE_BLOCK = "code-block"
    CODE_KEYWORD = "code-keyword"
    CODE_TYPE = "code-type"
    CODE_FUNCTION = "code-function"
    CODE_CLASS = "code-class"
    CODE_BUILTIN = "code-builtin"
    CODE_ATTRIBUTE = "code-attribute"
    CODE_TAG = "code-tag"
    CODE_VARIABLE = "code-variable"
    CODE_MACRO = "code-macro"
    CODE_STRING = "code-string"
    CODE_ESCAPE = "code-escape"
    CODE_NUMBER = "code-number"
    CODE_OPERATOR = "code-operator"
    CODE_PUNCTUATION = "code-punctuation"
    CODE_COMMENT = "code-comment"

    @property
    def is_code_token(self) -> bool:
        """Return True when the role stands for a highlighter token class."""
        return self in CODE_TOKEN_TYPES

    @property
    def token_type(self) -> _TokenType:
        """Return the Pygments token type backing a code-token role."""
        try:
            return CODE_TOKEN_TYPES[self]
        except KeyError as exc:
            msg = f"Role '{self.value}' is not a code-token role."
            raise ValueError(msg) from exc

    @property
    def token_class(self) -> str:
        """Return the short CSS class Pygments emits for this token role."""
        return STANDARD_TYPES[self.token_type]

    @classmethod
    def from_token_class(cls, css_class: str) -> SemanticRole:
        """Map a highlighter CSS class (``"k"``, ``"nf"``...) back to its role."""
        for role in CODE_TOKEN_TYPES:
            if role.token_class == css_class:
                return role
        msg = f"No code-token role uses the CSS class '{css_class}'."
        raise ValueError(msg)


CODE_TOKEN_TYPES: dict[SemanticRole, _TokenType] = {
    SemanticRole.CODE_KEYWORD: Token.Keyword,
    SemanticRole.CODE_TYPE: Token.Keyword.Type,
    SemanticRole.CODE_FUNCTION: Token.Name.Function,
    SemanticRole.CODE_CLASS: Token.Name.Class,
    SemanticRole.CODE_BUILTIN: Token.Name.Builtin,
    SemanticRole.CODE_ATTRIBUTE: Token.Name.Attribute,
    SemanticRole.CODE_TAG: Token.Name.Tag,
    SemanticRole.CODE_VARIABLE: Token.Name.Variable,
    SemanticRole.CODE_MACRO: Token.Name.Decorator,
    SemanticRole.CODE_STRING: Token.String,
    SemanticRole.CODE_ESCAPE: Token.String.Escape,
    SemanticRole.CODE_NUMBER: Token.Number,
    SemanticRole.CODE_OPERATOR: Token.Operator,
    SemanticRole.CODE_PUNCTUATION: Token.Punctuation,
    SemanticRole.CODE_COMMENT: Token.Comment,
}


@dc.dataclass(frozen=True, slots=True)
class VisualStyle:
    """Resolved visual attributes for one element.

    Attributes
    ----------
    background : str
        Background colour as a hex string.
    foreground : str
        Text colour as a hex string.
    border : str or None
        Border colour, or ``None`` when the element draws no border.
    """

    background: str
    foreground: str
    border: str | None = None

    def css_declarations(self) -> str:
        """Return the style as a CSS declaration block body."""
        parts = [f"background-color: {self.background}", f"color: {self.foreground}"]
        if self.border:
            parts.append(f"border: 1px solid {self.border}")
        return "; ".join(parts) + ";"

    def pygments_spec(self, *, base_background: str | None = None) -> str:
        """Return the style as a Pygments style string.

        The background is omitted when it matches ``base_background`` so token
        rules do not paint over the code block.
        """
        parts = [self.foreground]
        if self.background != base_background:
            parts.append(f"bg:{self.background}")
        if self.border:
            parts.append(f"border:{self.border}")
        return " ".join(parts)


__all__ = [
    "CODE_TOKEN_TYPES",
    "ColorMode",
    "ColorScheme",
    "SemanticRole",
    "ThemeTableError",
    "VisualStyle",
]
