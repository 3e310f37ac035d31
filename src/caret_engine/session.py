"""Session object binding both managers to a host line source."""

from __future__ import annotations

from typing import Optional, cast

from caret_engine.buffer import LineSource
from caret_engine.cursors import Cursor, CursorManager
from caret_engine.keymaps import (
    KeyStroke,
    NavigationCommand,
    NavigationKeymap,
    load_default_keymap,
)
from caret_engine.runtime import EventBus, telemetry
from caret_engine.selections import SelectionManager, SelectionRange

CURSOR_MOVED = "cursor.moved"
SELECTION_CHANGED = "selection.changed"


class EditorSession:
    """Drives cursor navigation against one buffer and publishes the results.

    Cursor anchors are the authoritative record of navigation-driven
    selections. ``SelectionManager`` keeps its own range set; it only picks
    up cursor selections when ``sync_selections`` is called.
    """

    def __init__(
        self,
        source: LineSource,
        *,
        cursors: CursorManager | None = None,
        selections: SelectionManager | None = None,
        keymap: NavigationKeymap | None = None,
        bus: EventBus | None = None,
        logger_name: str | None = None,
    ) -> None:
        self.source = source
        self.cursors = cursors or CursorManager(logger_name=logger_name)
        self.selections = selections or SelectionManager(logger_name=logger_name)
        if keymap is None:
            keymap = load_default_keymap(NavigationKeymap(logger_name=logger_name))
        self.keymap = keymap
        self.bus = bus or EventBus()
        self._logger_name = logger_name

    def move(
        self, direction: str, unit: str, select: bool = False
    ) -> tuple[Cursor, ...]:
        self.cursors.move_all(
            direction,
            unit,
            self.source.line_count,
            self.source.line_length,
            select,
        )
        self._emit_cursors()
        return self.cursors.get_all()

    def select_all(self) -> Cursor:
        self.cursors.select_all(self.source.line_count, self.source.line_length)
        self._emit_cursors()
        return self.cursors.get_primary()

    def execute(self, command: NavigationCommand) -> None:
        if command.kind == "select_all":
            self.select_all()
            return
        self.move(
            cast(str, command.direction), cast(str, command.unit), command.select
        )

    def handle_key(self, stroke: KeyStroke | str) -> bool:
        """Run the command bound to ``stroke``; ``False`` when it is unbound."""

        command = self.keymap.resolve(stroke)
        token = stroke.token if isinstance(stroke, KeyStroke) else stroke
        if command is None:
            telemetry.record_event(
                "session.unbound_key",
                level="debug",
                data={"key": token},
                logger_name=self._logger_name,
            )
            return False
        with telemetry.span(
            "session::handle_key",
            logger_name=self._logger_name,
            component="session",
            metadata={"key": token, "command": command.kind},
        ):
            self.execute(command)
        return True

    def cursor_selections(self) -> list[SelectionRange]:
        """Project every anchored cursor onto a selection range."""

        projected: list[SelectionRange] = []
        for cursor in self.cursors.get_all():
            if cursor.selection_anchor is None:
                continue
            projected.append(
                SelectionRange.between(
                    cursor.selection_anchor.as_tuple(), cursor.position.as_tuple()
                )
            )
        return projected

    def sync_selections(self) -> tuple[SelectionRange, ...]:
        """Replace the range set with the cursor projection, merging overlaps."""

        self.selections.clear_selections()
        for selection in self.cursor_selections():
            self.selections.add_selection(
                selection.anchor_line,
                selection.anchor_column,
                selection.active_line,
                selection.active_column,
            )
        current = self.selections.get_selections()
        self.bus.emit(
            SELECTION_CHANGED,
            {
                "selections": [
                    (norm.start, norm.end)
                    for norm in map(SelectionManager.normalize, current)
                ]
            },
        )
        return current

    def selected_text(self, selection: Optional[SelectionRange] = None) -> str:
        """Text of ``selection``, or of every managed selection joined by newlines."""

        if selection is not None:
            return self.selections.get_selected_text(selection, self.source.get_line)
        return "\n".join(
            self.selections.get_selected_text(current, self.source.get_line)
            for current in self.selections.get_selections()
        )

    def _emit_cursors(self) -> None:
        cursors = self.cursors.get_all()
        self.bus.emit(
            CURSOR_MOVED,
            {
                "primary": cursors[0].position.as_tuple(),
                "cursors": [cursor.position.as_tuple() for cursor in cursors],
            },
        )


__all__ = ["EditorSession", "CURSOR_MOVED", "SELECTION_CHANGED"]
