# tests/test_sudoku_9x9_generator.py
import numpy as np

from sudoku_9x9_generator import generate_daily_game, get_chunks, verify_sudoku
from boards import SOLUTION


def test_daily_game_is_valid_and_consistent():
    game = generate_daily_game(20250101)
    solution = np.asarray(game['solution'])
    puzzle = np.asarray(game['puzzle'])

    assert verify_sudoku(solution)
    assert 40 <= int((puzzle == 0).sum()) <= 50
    given = puzzle != 0
    assert np.array_equal(puzzle[given], solution[given])
    assert game['chunks'] == get_chunks(solution)


def test_same_seed_same_game():
    a = generate_daily_game(777)
    b = generate_daily_game(777)
    assert np.array_equal(a['solution'], b['solution'])
    assert np.array_equal(a['puzzle'], b['puzzle'])


def test_chunks_in_box_order():
    chunks = get_chunks(SOLUTION)
    assert len(chunks) == 9
    assert chunks[0] == [[5, 3, 4], [6, 7, 2], [1, 9, 8]]
    assert chunks[5] == [[4, 2, 3], [7, 9, 1], [8, 5, 6]]


def test_verify_rejects_broken_grids():
    broken = SOLUTION.copy()
    broken[0, 0], broken[0, 1] = broken[0, 1], broken[0, 0]
    assert not verify_sudoku(broken)
    assert not verify_sudoku(np.zeros((9, 9), dtype=int))
