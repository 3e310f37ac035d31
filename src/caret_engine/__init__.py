"""UI-agnostic editor cursor and selection engine."""

__all__ = [
    "adapters",
    "buffer",
    "cursors",
    "keymaps",
    "runtime",
    "selections",
    "session",
]

__version__ = "0.1.0"
