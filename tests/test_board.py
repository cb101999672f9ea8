import pytest

from board import (
    Board,
    BoardConfigError,
    BoardStateError,
    Cell,
    CellState,
    create_whole_year_board,
    date_labels,
    mark_date,
)


def _small_board() -> Board:
    return Board(
        ["##.", "###"],
        [["a", "b", None], ["c", "d", "e"]],
    )


def test_fillable_cells_are_row_major():
    board = _small_board()
    assert board.fillable_cells() == [Cell(0, 0), Cell(0, 1), Cell(1, 0), Cell(1, 1), Cell(1, 2)]
    assert board.state(0, 2) is CellState.OFF_BOARD
    assert not board.is_fillable(0, 2)
    assert not board.is_fillable(-1, 0)
    assert not board.is_fillable(5, 5)


@pytest.mark.parametrize(
    "shape, labels",
    [
        ([], []),
        (["##", "#"], [["a", "b"], ["c", None]]),
        (["##"], [["a", "b"], ["c", "d"]]),
        (["##"], [["a"]]),
        (["##"], [["a", None]]),
    ],
)
def test_inconsistent_configuration_is_rejected(shape, labels):
    with pytest.raises(BoardConfigError):
        Board(shape, labels)


def test_out_of_bounds_queries_raise():
    board = _small_board()
    with pytest.raises(IndexError):
        board.state(2, 0)
    with pytest.raises(IndexError):
        board.label(0, -1)


def test_target_and_block_transitions():
    board = _small_board()
    board.set_target(0, 0)
    board.block(1, 1)

    assert board.state(0, 0) is CellState.TARGET
    assert board.state(1, 1) is CellState.BLOCKED
    assert Cell(0, 0) not in board.fillable_cells()
    assert Cell(1, 1) not in board.fillable_cells()

    with pytest.raises(BoardStateError):
        board.block(0, 0)
    with pytest.raises(BoardStateError):
        board.block(1, 1)
    with pytest.raises(BoardStateError):
        board.block(0, 2)
    with pytest.raises(BoardStateError):
        board.set_target(0, 0)
    with pytest.raises(BoardStateError):
        board.set_target(0, 2)


def test_reset_clears_targets_but_keeps_blocked_cells():
    board = _small_board()
    board.set_target(0, 0)
    board.block(1, 2)
    board.reset()

    assert board.state(0, 0) is CellState.FILLABLE
    assert board.state(1, 2) is CellState.BLOCKED
    assert board.state(0, 2) is CellState.OFF_BOARD


def test_block_shape_skips_cells_it_cannot_block():
    board = _small_board()
    board.set_target(1, 0)
    board.block_shape([Cell(0, 0), Cell(0, 1), Cell(1, 0)], 0, 1)

    assert str(board) == "#X.\nTX#"


def test_copy_is_independent():
    board = _small_board()
    clone = board.copy()
    clone.block(0, 0)

    assert board.state(0, 0) is CellState.FILLABLE
    assert clone.state(0, 0) is CellState.BLOCKED
    assert clone.label(0, 0) == "a"


def test_find_cell_by_label_only_sees_fillable_cells():
    board = _small_board()
    assert board.find_cell_by_label("d") == Cell(1, 1)
    board.set_target(1, 1)
    assert board.find_cell_by_label("d") is None
    assert board.find_cell_by_label("zz") is None


def test_whole_year_board_layout():
    board = create_whole_year_board()
    assert (board.rows, board.cols) == (7, 9)
    assert len(board.fillable_cells()) == 43
    assert board.label(0, 1) == "Jan"
    assert board.label(6, 5) == "31"


def test_mark_date_sets_two_targets():
    board = create_whole_year_board()
    month_cell, day_cell = mark_date(board, 10, 19)

    assert board.label(*month_cell) == "Oct"
    assert board.label(*day_cell) == "19"
    assert board.cells_in_state(CellState.TARGET) == sorted([month_cell, day_cell])
    assert len(board.fillable_cells()) == 41

    # A new date replaces the previous targets.
    mark_date(board, 1, 1)
    assert {board.label(*c) for c in board.cells_in_state(CellState.TARGET)} == {"Jan", "1"}


def test_date_lookup_errors():
    assert date_labels(2, 29) == ("Feb", "29")
    with pytest.raises(BoardConfigError):
        date_labels(13, 1)
    with pytest.raises(BoardConfigError):
        mark_date(create_whole_year_board(), 1, 32)
