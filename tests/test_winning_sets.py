import pytest

from tictactoe_nxn.errors import InvalidSize
from tictactoe_nxn.game_basics import (
    Coordinate,
    generate_winning_sets,
    has_any_winning_set,
    is_winning,
    winning_sets_by_kind,
)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 7])
def test_count_and_length(n):
    sets = generate_winning_sets(n)
    assert len(sets) == 2 * n + 2
    assert all(len(ws) == n for ws in sets)


def test_three_by_three_lines():
    sets = generate_winning_sets(3)
    assert sets[0] == ((0, 0), (0, 1), (0, 2))
    assert sets[3] == ((0, 0), (1, 0), (2, 0))
    assert sets[6] == ((0, 0), (1, 1), (2, 2))
    assert sets[7] == ((2, 0), (1, 1), (0, 2))


def test_single_cell_board_has_four_identical_sets():
    sets = generate_winning_sets(1)
    assert sets == (((0, 0),),) * 4


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
def test_every_cell_covered_once_by_row_and_col(n):
    by_kind = winning_sets_by_kind(n)
    for r in range(n):
        for c in range(n):
            assert sum((r, c) in ws for ws in by_kind['row']) == 1
            assert sum((r, c) in ws for ws in by_kind['col']) == 1
            diag = sum((r, c) in ws for ws in by_kind['diag'])
            if n % 2 == 1 and r == c == n // 2:
                assert diag == 2
            else:
                assert diag in (0, 1)


def test_lines_have_distinct_cells():
    for ws in generate_winning_sets(5):
        assert len(set(ws)) == 5


def test_result_is_cached_and_immutable():
    assert generate_winning_sets(4) is generate_winning_sets(4)
    assert isinstance(generate_winning_sets(4), tuple)
    with pytest.raises(TypeError):
        winning_sets_by_kind(4)['row'] = ()


def test_coordinates_are_value_equal_to_tuples():
    assert Coordinate(1, 2) == (1, 2)
    assert (1, 2) in {Coordinate(1, 2)}


@pytest.mark.parametrize("bad", [0, -5, True, 2.0, "3", None])
def test_invalid_sizes_rejected(bad):
    with pytest.raises(InvalidSize):
        generate_winning_sets(bad)


def test_is_winning_is_superset_test():
    row0 = generate_winning_sets(3)[0]
    assert is_winning(frozenset(row0), row0)
    assert is_winning(frozenset(row0) | {(2, 2)}, row0)
    assert not is_winning(frozenset(row0[:2]), row0)


def test_has_any_winning_set():
    sets = generate_winning_sets(3)
    assert not has_any_winning_set(frozenset(), sets)
    assert has_any_winning_set(frozenset({(2, 0), (1, 1), (0, 2)}), sets)
    assert not has_any_winning_set(frozenset({(0, 0), (0, 1), (1, 2)}), sets)
