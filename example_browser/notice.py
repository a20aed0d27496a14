"""Visibility of the "panicked" notice banner."""

from __future__ import annotations

import enum


class NoticeState(enum.StrEnum):
    """Display state of the notice banner."""

    HIDDEN = "hidden"
    VISIBLE = "visible"


def visible(panicked: bool) -> bool:  # noqa: FBT001 - mirrors the host flag
    """Return True when the banner should be shown for ``panicked``."""
    return bool(panicked)


def notice_state(panicked: bool) -> NoticeState:  # noqa: FBT001
    """Return the banner state for ``panicked``; transitions are immediate."""
    return NoticeState.VISIBLE if visible(panicked) else NoticeState.HIDDEN


__all__ = ["NoticeState", "notice_state", "visible"]
