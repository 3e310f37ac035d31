import random

import pytest

from caret_engine.cursors import CursorManager, Position


def fixed_length(length: int = 10):
    return lambda _line: length


def lengths_of(*lengths: int):
    return lambda line: lengths[line]


def positions(manager: CursorManager) -> list[tuple[int, int]]:
    return [cursor.position.as_tuple() for cursor in manager.get_all()]


def test_new_manager_has_primary_at_origin() -> None:
    manager = CursorManager()

    primary = manager.get_primary()

    assert primary.id == "primary"
    assert primary.position == Position(0, 0)
    assert primary.selection_anchor is None
    assert primary.desired_column == 0
    assert manager.page_size == 30


def test_move_left_character_updates_desired_column() -> None:
    manager = CursorManager()
    manager.set_position(2, 5)

    manager.move_all("left", "character", 5, fixed_length(10), False)

    primary = manager.get_primary()
    assert primary.position == Position(2, 4)
    assert primary.desired_column == 4


def test_move_right_line_jumps_to_line_end() -> None:
    manager = CursorManager()
    manager.set_position(2, 5)
    manager.move_all("left", "character", 5, fixed_length(10), False)

    manager.move_all("right", "line", 5, fixed_length(10), False)

    primary = manager.get_primary()
    assert primary.position == Position(2, 10)
    assert primary.desired_column == 10


def test_add_cursor_twice_returns_same_cursor() -> None:
    manager = CursorManager()

    first = manager.add_cursor(3, 7)
    second = manager.add_cursor(3, 7)

    assert second is first
    assert len(manager.get_all()) == 2


def test_add_cursor_ids_are_unique_and_not_reused() -> None:
    manager = CursorManager()
    first = manager.add_cursor(1, 0)
    second = manager.add_cursor(2, 0)

    manager.remove_cursor(second.id)
    third = manager.add_cursor(2, 0)

    assert len({first.id, second.id, third.id}) == 3


def test_add_cursor_clamps_negative_coordinates() -> None:
    manager = CursorManager()
    manager.set_position(4, 4)

    cursor = manager.add_cursor(-2, -9)

    assert cursor.position == Position(0, 0)
    assert cursor.desired_column == 0


def test_add_cursor_at_primary_position_returns_primary() -> None:
    manager = CursorManager()

    assert manager.add_cursor(0, 0) is manager.get_primary()
    assert len(manager) == 1


def test_remove_primary_is_rejected() -> None:
    manager = CursorManager()
    manager.add_cursor(1, 1)
    before = manager.get_all()

    assert manager.remove_cursor("primary") is False
    assert manager.get_all() == before


def test_remove_unknown_and_secondary_cursor() -> None:
    manager = CursorManager()
    secondary = manager.add_cursor(1, 1)

    assert manager.remove_cursor("cursor-missing") is False
    assert manager.remove_cursor(secondary.id) is True
    assert positions(manager) == [(0, 0)]


def test_clear_secondary_keeps_primary() -> None:
    manager = CursorManager()
    manager.add_cursor(1, 1)
    manager.add_cursor(2, 2)

    manager.clear_secondary()

    assert [cursor.id for cursor in manager.get_all()] == ["primary"]


def test_set_position_collapses_and_clamps() -> None:
    manager = CursorManager()
    manager.add_cursor(1, 1)
    manager.move_all("right", "character", 3, fixed_length(5), True)

    manager.set_position(-3, -1)

    primary = manager.get_primary()
    assert positions(manager) == [(0, 0)]
    assert primary.selection_anchor is None
    assert primary.desired_column == 0


def test_vertical_moves_keep_desired_column() -> None:
    manager = CursorManager()
    manager.set_position(0, 8)
    line_length = lengths_of(10, 3, 10)

    manager.move_all("down", "character", 3, line_length)
    assert manager.get_primary().position == Position(1, 3)

    manager.move_all("down", "character", 3, line_length)
    primary = manager.get_primary()
    assert primary.position == Position(2, 8)
    assert primary.desired_column == 8


def test_word_unit_moves_vertically_by_one_line() -> None:
    manager = CursorManager()
    manager.set_position(1, 2)

    manager.move_all("up", "word", 3, fixed_length(5))
    assert manager.get_primary().position == Position(0, 2)

    manager.move_all("down", "word", 3, fixed_length(5))
    assert manager.get_primary().position == Position(1, 2)


def test_up_on_first_line_is_noop() -> None:
    manager = CursorManager()
    manager.set_position(0, 3)

    manager.move_all("up", "character", 3, fixed_length(5))

    assert manager.get_primary().position == Position(0, 3)


def test_down_on_last_line_is_noop() -> None:
    manager = CursorManager()
    manager.set_position(2, 3)

    manager.move_all("down", "line", 3, fixed_length(5))

    assert manager.get_primary().position == Position(2, 3)


def test_document_moves() -> None:
    manager = CursorManager()
    manager.set_position(1, 1)
    line_length = lengths_of(4, 6, 9)

    manager.move_all("down", "document", 3, line_length)
    assert manager.get_primary().position == Position(2, 9)

    manager.move_all("up", "document", 3, line_length)
    assert manager.get_primary().position == Position(0, 0)


def test_page_moves_clamp_to_buffer() -> None:
    manager = CursorManager(page_size=2)
    manager.set_position(0, 4)
    line_length = lengths_of(5, 5, 1, 5, 5)

    manager.move_all("down", "page", 5, line_length)
    assert manager.get_primary().position == Position(2, 1)

    manager.move_all("down", "page", 5, line_length)
    manager.move_all("down", "page", 5, line_length)
    assert manager.get_primary().position == Position(4, 4)

    manager.page_size = 10
    manager.move_all("up", "page", 5, line_length)
    assert manager.get_primary().position == Position(0, 4)


def test_page_size_setter_clamps_to_one() -> None:
    manager = CursorManager()

    manager.page_size = 0
    assert manager.page_size == 1

    manager.page_size = -5
    assert manager.page_size == 1


def test_left_wraps_to_previous_line_end() -> None:
    manager = CursorManager()
    manager.set_position(1, 0)

    manager.move_all("left", "character", 2, lengths_of(7, 3))

    primary = manager.get_primary()
    assert primary.position == Position(0, 7)
    assert primary.desired_column == 7


def test_left_at_document_start_stays() -> None:
    manager = CursorManager()

    manager.move_all("left", "character", 2, fixed_length(3))

    assert manager.get_primary().position == Position(0, 0)


def test_left_line_unit_goes_to_column_zero() -> None:
    manager = CursorManager()
    manager.set_position(1, 4)

    manager.move_all("left", "line", 2, fixed_length(6))

    assert manager.get_primary().position == Position(1, 0)


def test_right_wraps_to_next_line_start() -> None:
    manager = CursorManager()
    manager.set_position(0, 3)

    manager.move_all("right", "character", 2, lengths_of(3, 8))

    assert manager.get_primary().position == Position(1, 0)


def test_right_at_document_end_stays() -> None:
    manager = CursorManager()
    manager.set_position(1, 8)

    manager.move_all("right", "character", 2, lengths_of(3, 8))

    assert manager.get_primary().position == Position(1, 8)


def test_select_captures_anchor_once_and_plain_move_clears_it() -> None:
    manager = CursorManager()
    manager.set_position(1, 2)

    manager.move_all("right", "character", 3, fixed_length(5), True)
    manager.move_all("down", "character", 3, fixed_length(5), True)
    primary = manager.get_primary()
    assert primary.selection_anchor == Position(1, 2)
    assert primary.position == Position(2, 3)
    assert primary.has_selection

    manager.move_all("left", "character", 3, fixed_length(5), False)
    assert manager.get_primary().selection_anchor is None


def test_converging_cursors_are_merged_keeping_primary() -> None:
    manager = CursorManager()
    manager.add_cursor(0, 1)

    manager.move_all("left", "character", 1, fixed_length(5))

    assert [cursor.id for cursor in manager.get_all()] == ["primary"]
    assert positions(manager) == [(0, 0)]


def test_merge_keeps_first_seen_order() -> None:
    manager = CursorManager()
    manager.set_position(0, 5)
    first = manager.add_cursor(1, 2)
    manager.add_cursor(2, 2)
    manager.add_cursor(1, 5)

    manager.move_all("left", "line", 3, fixed_length(6))

    assert positions(manager) == [(0, 0), (1, 0), (2, 0)]
    assert manager.get_all()[1].id == first.id


def test_select_all_anchors_primary_and_drops_secondaries() -> None:
    manager = CursorManager()
    manager.add_cursor(1, 1)

    manager.select_all(3, lengths_of(4, 2, 6))

    primary = manager.get_primary()
    assert len(manager.get_all()) == 1
    assert primary.selection_anchor == Position(0, 0)
    assert primary.position == Position(2, 6)


def test_set_selection_collapses_with_anchor() -> None:
    manager = CursorManager()
    manager.add_cursor(3, 3)

    manager.set_selection(0, 1, 2, 4)

    primary = manager.get_primary()
    assert len(manager.get_all()) == 1
    assert primary.selection_anchor == Position(0, 1)
    assert primary.position == Position(2, 4)
    assert primary.desired_column == 4

    manager.set_selection(1, 1, 1, 1)
    assert manager.get_primary().selection_anchor is None


def test_get_all_is_not_a_live_view() -> None:
    manager = CursorManager()
    view = manager.get_all()

    manager.add_cursor(1, 1)

    assert isinstance(view, tuple)
    assert len(view) == 1


@pytest.mark.parametrize(
    ("direction", "unit"),
    [("sideways", "character"), ("left", "paragraph")],
)
def test_unknown_direction_or_unit_raises(direction: str, unit: str) -> None:
    manager = CursorManager()

    with pytest.raises(ValueError):
        manager.move_all(direction, unit, 1, fixed_length(1))


def test_random_navigation_keeps_invariants() -> None:
    rng = random.Random(1234)
    lines = [rng.randint(0, 12) for _ in range(20)]
    line_length = lengths_of(*lines)
    manager = CursorManager(page_size=4)
    for _ in range(6):
        line = rng.randrange(len(lines))
        manager.add_cursor(line, rng.randint(0, lines[line]))

    directions = ("up", "down", "left", "right")
    units = ("character", "word", "line", "page", "document")
    for _ in range(300):
        manager.move_all(
            rng.choice(directions),
            rng.choice(units),
            len(lines),
            line_length,
            rng.random() < 0.3,
        )
        cursors = manager.get_all()
        assert cursors and cursors[0].id == "primary"
        seen = [cursor.position for cursor in cursors]
        assert len(seen) == len(set(seen))
        for cursor in cursors:
            assert 0 <= cursor.position.line < len(lines)
            assert 0 <= cursor.position.column <= lines[cursor.position.line]
