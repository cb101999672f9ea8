import pytest

from board import Cell
from pieces import (
    PIECE_TEMPLATES,
    Piece,
    PieceDefinitionError,
    generate_orientations,
    load_all_pieces,
    load_simple_pieces,
)


def _rotate(cells):
    return {(c, -r) for r, c in cells}


def _normalized(cells):
    min_r = min(r for r, _ in cells)
    min_c = min(c for _, c in cells)
    return frozenset((r - min_r, c - min_c) for r, c in cells)


def _all_symmetries(cells):
    variants = set()
    for shape in (set(cells), {(r, -c) for r, c in cells}):
        for _ in range(4):
            variants.add(_normalized(shape))
            shape = _rotate(shape)
    return variants


@pytest.mark.parametrize(
    "piece_id, expected",
    [
        ("S1", 1),
        ("Cross", 1),
        ("T1", 4),
        ("Lightning", 4),
        ("Bridge", 4),
        ("LightningBig", 4),
        ("L_small", 8),
        ("L_big", 8),
        ("SquarePlus", 8),
    ],
)
def test_orientation_counts(piece_id, expected):
    piece = Piece.from_ascii(piece_id, PIECE_TEMPLATES[piece_id])
    assert len(piece.orientations()) == expected


def test_orientations_are_distinct_normalized_symmetries():
    for piece in load_all_pieces():
        orientations = piece.orientations()
        as_sets = [frozenset(o) for o in orientations]

        assert 1 <= len(orientations) <= 8
        assert len(set(as_sets)) == len(as_sets)
        assert set(as_sets) == _all_symmetries(piece.cells)
        assert orientations[0] == piece.cells
        for shape in orientations:
            assert min(r for r, _ in shape) == 0
            assert min(c for _, c in shape) == 0
            assert len(shape) == piece.size


def test_rotation_is_clockwise():
    # "#." / "##" rotated clockwise is "##" / "#."
    shape = (Cell(0, 0), Cell(1, 0), Cell(1, 1))
    orientations = generate_orientations(shape, 2, 2)
    assert orientations[1] == (Cell(0, 0), Cell(0, 1), Cell(1, 0))


def test_from_ascii_normalizes_and_measures():
    piece = Piece.from_ascii("T1", (".#.", "###", "..."))
    assert piece.cells == (Cell(0, 1), Cell(1, 0), Cell(1, 1), Cell(1, 2))
    assert (piece.height, piece.width, piece.size) == (2, 3, 4)

    shifted = Piece("x", (Cell(3, 5), Cell(3, 6)))
    assert shifted.cells == (Cell(0, 0), Cell(0, 1))


def test_malformed_pieces_are_rejected():
    with pytest.raises(PieceDefinitionError):
        Piece.from_ascii("empty", ("..", ".."))
    with pytest.raises(PieceDefinitionError):
        Piece.from_ascii("ragged", ("##", "#"))
    with pytest.raises(PieceDefinitionError):
        Piece.from_ascii("none", ())
    with pytest.raises(PieceDefinitionError):
        Piece("dup", (Cell(0, 0), Cell(0, 0)))


def test_catalogues():
    pieces = load_all_pieces()
    assert [p.id for p in pieces] == list(PIECE_TEMPLATES)
    assert sum(p.size for p in pieces) == 41
    assert load_all_pieces() is not pieces

    simple = load_simple_pieces()
    assert [(p.id, p.size) for p in simple] == [("Square", 4), ("Domino", 2)]
