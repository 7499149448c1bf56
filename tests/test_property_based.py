import pytest

try:
    from hypothesis import given, strategies as st  # type: ignore
    HAS_HYP = True
except ModuleNotFoundError:  # pragma: no cover - test infra
    HAS_HYP = False
    import pytest as _pytest  # type: ignore
    _pytest.skip("Hypothesis not installed", allow_module_level=True)

from tictactoe_nxn.engine import place_mark, start_game
from tictactoe_nxn.errors import InvalidTransition
from tictactoe_nxn.game_basics import Player, generate_winning_sets, is_winning


@st.composite
def games(draw):
    n = draw(st.integers(min_value=1, max_value=5))
    cells = [(r, c) for r in range(n) for c in range(n)]
    order = draw(st.permutations(cells))
    return n, order


def _brute_force_winner(marks, n):
    lines = [[(r, c) for c in range(n)] for r in range(n)]
    lines += [[(r, c) for r in range(n)] for c in range(n)]
    lines.append([(k, k) for k in range(n)])
    lines.append([(n - 1 - k, k) for k in range(n)])
    return any(all(cell in marks for cell in line) for line in lines)


@given(st.integers(min_value=1, max_value=12))
def test_winning_set_shape(n):
    sets = generate_winning_sets(n)
    assert len(sets) == 2 * n + 2
    for ws in sets:
        assert len(ws) == n
        assert all(0 <= r < n and 0 <= c < n for r, c in ws)


@given(st.integers(min_value=1, max_value=6), st.data())
def test_winning_is_monotone(n, data):
    sets = generate_winning_sets(n)
    cells = [(r, c) for r in range(n) for c in range(n)]
    marks = frozenset(data.draw(st.lists(st.sampled_from(cells))))
    extra = data.draw(st.sampled_from(cells))
    for ws in sets:
        assert is_winning(marks, ws) == set(ws).issubset(marks)
        if is_winning(marks, ws):
            assert is_winning(marks | {extra}, ws)


@given(games())
def test_random_games_respect_invariants(game):
    n, order = game
    state = start_game(n)
    expected = Player.X
    for cell in order:
        if state.phase.is_ended:
            before = (state.x_marks, state.o_marks)
            with pytest.raises(InvalidTransition):
                place_mark(state, cell)
            assert (state.x_marks, state.o_marks) == before
            break
        assert state.to_move is expected
        state = place_mark(state, cell)
        expected = expected.other

        assert not (state.x_marks & state.o_marks)
        assert state.move_count <= n * n
        x_won = _brute_force_winner(state.x_marks, n)
        o_won = _brute_force_winner(state.o_marks, n)
        full = state.move_count == n * n
        assert state.phase.is_ended == (x_won or o_won or full)
    assert state.phase.is_ended
