# variants.py - The four symmetry variants every daily board is played in

import numpy as np

VARIANT_KEYS = ('0', 'LR', 'TB', 'HV')


def swap_stacks(board):
    """Swap the outer column triples (cols 0-2 <-> cols 6-8)"""
    board = np.array(board, copy=True)
    board[:, [0, 1, 2, 6, 7, 8]] = board[:, [6, 7, 8, 0, 1, 2]]
    return board


def swap_bands(board):
    """Swap the outer row triples (rows 0-2 <-> rows 6-8)"""
    board = np.array(board, copy=True)
    board[[0, 1, 2, 6, 7, 8]] = board[[6, 7, 8, 0, 1, 2]]
    return board


def build_variants(solution):
    """identity, column mirror, row mirror and both, keyed as stored in the daily file"""
    solution = np.asarray(solution)
    return {
        '0': np.array(solution, copy=True),
        'LR': swap_stacks(solution),
        'TB': swap_bands(solution),
        'HV': swap_bands(swap_stacks(solution)),
    }
