# sudoku_9x9_generator.py - Seeded solved grid, masked puzzle and 3x3 chunks

import random

import numpy as np


def generate_9x9_sudoku(rng, max_attempts=100):
    """Generate a valid 9×9 Sudoku puzzle and solution from a random.Random"""

    def is_valid(grid, row, col, num):
        # Check row
        if num in grid[row]:
            return False
        # Check column
        if num in grid[:, col]:
            return False
        # Check 3×3 box
        box_row, box_col = 3 * (row // 3), 3 * (col // 3)
        if num in grid[box_row:box_row+3, box_col:box_col+3]:
            return False
        return True

    def solve(grid):
        for i in range(9):
            for j in range(9):
                if grid[i, j] == 0:
                    nums = list(range(1, 10))
                    rng.shuffle(nums)
                    for num in nums:
                        if is_valid(grid, i, j, num):
                            grid[i, j] = num
                            if solve(grid):
                                return True
                            grid[i, j] = 0
                    return False
        return True

    for attempt in range(max_attempts):
        solution = np.zeros((9, 9), dtype=np.int32)
        if solve(solution):
            # Remove 40-50 numbers (leaving 31-41 clues)
            puzzle = solution.copy()
            positions = [(i, j) for i in range(9) for j in range(9)]
            rng.shuffle(positions)
            num_to_remove = rng.randint(40, 50)
            for i in range(num_to_remove):
                row, col = positions[i]
                puzzle[row, col] = 0

            return puzzle, solution

    raise Exception(f"Failed to generate valid sudoku after {max_attempts} attempts")


def get_chunks(board):
    """The nine 3×3 boxes, row-major box order, as nested lists"""
    board = np.asarray(board)
    chunks = []
    for box_r in range(3):
        for box_c in range(3):
            chunks.append(board[3*box_r:3*box_r+3, 3*box_c:3*box_c+3].tolist())
    return chunks


def verify_sudoku(solution):
    """Verify that a solution is valid"""
    solution = np.asarray(solution).reshape(9, 9)

    # Check all numbers are 1-9
    if not np.all((solution >= 1) & (solution <= 9)):
        return False

    # Check rows
    for row in solution:
        if len(set(row)) != 9:
            return False

    # Check columns
    for col in solution.T:
        if len(set(col)) != 9:
            return False

    # Check 3x3 boxes
    for box_r in [0, 3, 6]:
        for box_c in [0, 3, 6]:
            box = solution[box_r:box_r+3, box_c:box_c+3].flatten()
            if len(set(box)) != 9:
                return False

    return True


def generate_daily_game(seed):
    """
    Deterministic per seed.
    Returns: {'solution': 9x9 array, 'puzzle': 9x9 array with 0 holes, 'chunks': 9 solved 3x3 boxes}
    """
    rng = random.Random(seed)
    puzzle, solution = generate_9x9_sudoku(rng)
    return {
        'solution': solution,
        'puzzle': puzzle,
        'chunks': get_chunks(solution),
    }


if __name__ == "__main__":
    game = generate_daily_game(20250101)
    print("Puzzle:")
    print(game['puzzle'])
    print("\nSolution:")
    print(game['solution'])
    print(f"\nSolution valid: {verify_sudoku(game['solution'])}")
