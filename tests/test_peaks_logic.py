# tests/test_peaks_logic.py
import numpy as np

from peaks_logic import (NEIGHBORS, ORTHOGONAL, PEAK, VALLEY, classify_cell,
                         get_all_targets, to_index, to_rc)
from boards import SOLUTION


def test_index_round_trip_and_neighbour_tables():
    assert to_index(4, 7) == 43
    assert to_rc(43) == (4, 7)
    assert len(NEIGHBORS[0]) == 3
    assert len(NEIGHBORS[to_index(4, 4)]) == 8
    assert ORTHOGONAL[0] == (9, 1)
    assert ORTHOGONAL[to_index(4, 4)] == (31, 49, 39, 41)


def test_peak_valley_and_ties():
    board = np.full((9, 9), 5)
    board[4, 4] = 9
    board[0, 0] = 1
    topology, peaks, valleys = get_all_targets(board)

    assert topology == {to_index(4, 4): PEAK, 0: VALLEY}
    assert (peaks, valleys) == (1, 1)
    # Neighbour of the peak ties with the other fives
    assert classify_cell(board, to_index(3, 3)) is None


def test_topology_matches_definition_on_solved_grid():
    topology, peaks, valleys = get_all_targets(SOLUTION)
    flat = SOLUTION.reshape(-1)

    for idx in range(81):
        values = [flat[n] for n in NEIGHBORS[idx]]
        if all(v < flat[idx] for v in values):
            assert topology.get(idx) == PEAK
        elif all(v > flat[idx] for v in values):
            assert topology.get(idx) == VALLEY
        else:
            assert idx not in topology
    assert peaks + valleys == len(topology)
    # The 9 at r1c4 is surrounded by smaller values
    assert topology[to_index(1, 4)] == PEAK
