# tests/boards.py - Fixed grids shared by the tests

import numpy as np

SOLUTION = np.array([
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
])


def fixed_game(seed):
    """Stand-in for the Sudoku generator: always the same board"""
    puzzle = SOLUTION.copy()
    puzzle[::2, ::2] = 0
    chunks = [SOLUTION[r:r+3, c:c+3].tolist() for r in (0, 3, 6) for c in (0, 3, 6)]
    return {'solution': SOLUTION.copy(), 'puzzle': puzzle, 'chunks': chunks}


def block_all_but(cells):
    """Topology that turns every cell outside `cells` into a wall"""
    keep = set(cells)
    return {idx: 'peak' for idx in range(81) if idx not in keep}
