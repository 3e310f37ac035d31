"""Dataclasses describing key strokes and the navigation commands they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

from caret_engine.cursors.models import validate_move

CommandKind = Literal["move", "select_all"]

_MODIFIER_ALIASES = {"control": "ctrl", "option": "alt", "meta": "alt"}


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = (m.strip().lower() for m in modifiers if m.strip())
    values = (_MODIFIER_ALIASES.get(m, m) for m in values)
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press such as ``shift+pageup``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key or not self.key.strip():
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.strip().lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, token: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+shift+home"`` style tokens."""

        parts = [part for part in token.split("+") if part.strip()]
        if not parts:
            raise ValueError(f"Invalid key token '{token}'")
        return cls(parts[-1], tuple(parts[:-1]))


@dataclass(frozen=True, slots=True)
class NavigationCommand:
    """What a bound key does to the cursor set."""

    kind: CommandKind = "move"
    direction: str | None = None
    unit: str | None = None
    select: bool = False

    def __post_init__(self) -> None:
        if self.kind == "move":
            if self.direction is None or self.unit is None:
                raise ValueError("move commands need a direction and a unit")
            validate_move(self.direction, self.unit)
        elif self.kind != "select_all":
            raise ValueError(f"Unknown command kind '{self.kind}'")

    @classmethod
    def move(cls, direction: str, unit: str, *, select: bool = False) -> "NavigationCommand":
        return cls(kind="move", direction=direction, unit=unit, select=select)

    @classmethod
    def select_all(cls) -> "NavigationCommand":
        return cls(kind="select_all")


__all__ = ["CommandKind", "KeyStroke", "NavigationCommand"]
