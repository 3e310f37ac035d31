"""Keymap registry mapping key strokes to navigation commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from caret_engine.runtime import telemetry

from .models import KeyStroke, NavigationCommand


@dataclass(frozen=True, slots=True)
class KeyBinding:
    stroke: KeyStroke
    command: NavigationCommand
    description: str = ""


class KeymapConflictError(RuntimeError):
    """Raised when a stroke is bound twice without ``replace=True``."""

    def __init__(self, binding: KeyBinding, existing: KeyBinding) -> None:
        super().__init__(
            f"Key '{binding.stroke.token}' is already bound to {existing.command!r}"
        )
        self.binding = binding
        self.existing = existing


class NavigationKeymap:
    """Owns key bindings and resolves strokes to commands."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, KeyBinding] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def bind(
        self,
        stroke: KeyStroke | str,
        command: NavigationCommand,
        *,
        description: str = "",
        replace: bool = False,
    ) -> KeyBinding:
        stroke = _coerce(stroke)
        binding = KeyBinding(stroke=stroke, command=command, description=description)
        with telemetry.span(
            "keymaps::bind",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"key": stroke.token},
        ) as handle:
            existing = self._bindings.get(stroke.token)
            if existing is not None and not replace:
                handle.add_metadata("conflict", existing.command)
                raise KeymapConflictError(binding, existing)
            self._bindings[stroke.token] = binding
            self._revision += 1
            return binding

    def unbind(self, stroke: KeyStroke | str) -> Optional[KeyBinding]:
        binding = self._bindings.pop(_coerce(stroke).token, None)
        if binding is not None:
            self._revision += 1
        return binding

    def resolve(self, stroke: KeyStroke | str) -> Optional[NavigationCommand]:
        binding = self._bindings.get(_coerce(stroke).token)
        return binding.command if binding else None

    def bindings(self) -> Iterator[KeyBinding]:
        yield from self._bindings.values()

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, stroke: object) -> bool:
        if not isinstance(stroke, (KeyStroke, str)):
            return False
        return _coerce(stroke).token in self._bindings


def _coerce(stroke: KeyStroke | str) -> KeyStroke:
    if isinstance(stroke, KeyStroke):
        return stroke
    return KeyStroke.parse(stroke)


__all__ = ["KeyBinding", "KeymapConflictError", "NavigationKeymap"]
