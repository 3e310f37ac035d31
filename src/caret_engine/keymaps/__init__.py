"""Key strokes, navigation commands and the default editor keymap."""

from .defaults import default_bindings, load_default_keymap
from .models import CommandKind, KeyStroke, NavigationCommand
from .registry import KeyBinding, KeymapConflictError, NavigationKeymap

__all__ = [
    "CommandKind",
    "KeyStroke",
    "NavigationCommand",
    "KeyBinding",
    "KeymapConflictError",
    "NavigationKeymap",
    "default_bindings",
    "load_default_keymap",
]
