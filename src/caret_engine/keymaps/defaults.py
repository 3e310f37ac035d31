"""Built-in navigation bindings for a conventional code editor."""

from __future__ import annotations

from typing import Iterable, Optional

from .models import KeyStroke, NavigationCommand
from .registry import NavigationKeymap

# (key, modifiers, direction, unit, description)
_MOVES: tuple[tuple[str, tuple[str, ...], str, str, str], ...] = (
    ("left", (), "left", "character", "Move left one character"),
    ("right", (), "right", "character", "Move right one character"),
    ("up", (), "up", "character", "Move up one line"),
    ("down", (), "down", "character", "Move down one line"),
    ("left", ("ctrl",), "left", "word", "Move left by word"),
    ("right", ("ctrl",), "right", "word", "Move right by word"),
    ("home", (), "left", "line", "Move to line start"),
    ("end", (), "right", "line", "Move to line end"),
    ("pageup", (), "up", "page", "Move up one page"),
    ("pagedown", (), "down", "page", "Move down one page"),
    ("home", ("ctrl",), "up", "document", "Move to document start"),
    ("end", ("ctrl",), "down", "document", "Move to document end"),
)


def default_bindings() -> list[tuple[KeyStroke, NavigationCommand, str]]:
    """Every plain move plus its ``shift`` variant, and ``ctrl+a``."""

    bindings: list[tuple[KeyStroke, NavigationCommand, str]] = []
    for key, modifiers, direction, unit, description in _MOVES:
        bindings.append(
            (
                KeyStroke(key, modifiers),
                NavigationCommand.move(direction, unit),
                description,
            )
        )
        bindings.append(
            (
                KeyStroke(key, modifiers + ("shift",)),
                NavigationCommand.move(direction, unit, select=True),
                description.replace("Move", "Select", 1),
            )
        )
    bindings.append(
        (KeyStroke("a", ("ctrl",)), NavigationCommand.select_all(), "Select all")
    )
    return bindings


def load_default_keymap(
    keymap: NavigationKeymap,
    *,
    include: Optional[Iterable[str]] = None,
    replace: bool = False,
) -> NavigationKeymap:
    """Seed ``keymap`` with the defaults, optionally limited to ``include`` tokens."""

    allowed = {KeyStroke.parse(token).token for token in include} if include else None
    for stroke, command, description in default_bindings():
        if allowed is not None and stroke.token not in allowed:
            continue
        keymap.bind(stroke, command, description=description, replace=replace)
    return keymap


__all__ = ["default_bindings", "load_default_keymap"]
