"""Bridge between a Textual ``TextArea`` and an ``EditorSession``."""

from __future__ import annotations

from typing import Any, Optional

from textual.widgets.text_area import Selection

from caret_engine.runtime import telemetry
from caret_engine.session import EditorSession


class TextAreaLineSource:
    """Expose a ``TextArea`` document through the ``LineSource`` protocol."""

    def __init__(self, text_area: Any) -> None:
        self._text_area = text_area

    @property
    def line_count(self) -> int:
        return self._text_area.document.line_count

    def get_line(self, index: int) -> str:
        return self._text_area.document.get_line(index)

    def line_length(self, index: int) -> int:
        return len(self.get_line(index))


class TextualCursorBridge:
    """Feeds Textual key names to the session and mirrors the primary cursor back.

    ``TextArea`` renders a single selection, so only the primary cursor is
    pushed to the widget. Selections the widget changed on its own (mouse
    clicks, drags) are pulled back before the next key is handled.
    """

    def __init__(
        self,
        text_area: Any,
        session: Optional[EditorSession] = None,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.text_area = text_area
        self.session = session or EditorSession(
            TextAreaLineSource(text_area), logger_name=logger_name
        )
        self._logger_name = logger_name
        self._last_pushed: Optional[Selection] = None
        self.pull_selection()

    def handle_key(self, key: str) -> bool:
        """Dispatch a Textual key name such as ``"shift+pageup"``."""

        if self.text_area.selection != self._last_pushed:
            self.pull_selection()
        handled = self.session.handle_key(key)
        telemetry.record_event(
            "textual.key",
            level="debug",
            data={"key": key, "handled": handled},
            logger_name=self._logger_name,
        )
        if handled:
            self.push_selection()
        return handled

    def push_selection(self) -> Selection:
        primary = self.session.cursors.get_primary()
        anchor = primary.selection_anchor or primary.position
        selection = Selection(
            start=anchor.as_tuple(), end=primary.position.as_tuple()
        )
        self.text_area.selection = selection
        self._last_pushed = selection
        return selection

    def pull_selection(self) -> None:
        """Collapse the session to the widget's current selection."""

        current = self.text_area.selection
        (anchor_line, anchor_column), (line, column) = current.start, current.end
        self.session.cursors.set_selection(anchor_line, anchor_column, line, column)
        self._last_pushed = current


__all__ = ["TextAreaLineSource", "TextualCursorBridge"]
