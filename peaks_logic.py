# peaks_logic.py - Peak / valley classification shared by every stage

import numpy as np

SIZE = 9
N_CELLS = SIZE * SIZE

PEAK = 'peak'
VALLEY = 'valley'


def to_index(row, col):
    """Cell index used everywhere in the generator (row * 9 + col)"""
    return row * SIZE + col


def to_rc(idx):
    return divmod(idx, SIZE)


def _build_neighbors(offsets):
    table = []
    for idx in range(N_CELLS):
        r, c = to_rc(idx)
        cells = []
        for dr, dc in offsets:
            nr, nc = r + dr, c + dc
            if 0 <= nr < SIZE and 0 <= nc < SIZE:
                cells.append(to_index(nr, nc))
        table.append(tuple(cells))
    return tuple(table)


# 8-neighbourhood, used for topology
NEIGHBORS = _build_neighbors(
    [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]
)
# Up, down, left, right; paths only move along these
ORTHOGONAL = _build_neighbors([(-1, 0), (1, 0), (0, -1), (0, 1)])


def classify_cell(board, idx):
    """Return 'peak', 'valley' or None for a single cell"""
    flat = np.asarray(board).reshape(-1)
    val = flat[idx]
    values = [flat[n] for n in NEIGHBORS[idx]]

    if all(v < val for v in values):
        return PEAK
    if all(v > val for v in values):
        return VALLEY
    return None


def is_peak_or_valley(board, idx):
    return classify_cell(board, idx) is not None


def get_all_targets(board):
    """
    Classify the whole board.
    Returns: (topology, peak_count, valley_count) where topology maps
    cell index -> 'peak' / 'valley' and plain cells are absent.
    """
    board = np.asarray(board)
    topology = {}
    peak_count = 0
    valley_count = 0

    for idx in range(N_CELLS):
        kind = classify_cell(board, idx)
        if kind is None:
            continue
        topology[idx] = kind
        if kind == PEAK:
            peak_count += 1
        else:
            valley_count += 1

    return topology, peak_count, valley_count
