# tests/test_orphans.py
from orphans import absorb_orphans, find_orphans
from boards import block_all_but


def test_orphans_attach_to_head_and_tail():
    topology = block_all_but(range(0, 5))
    sequences = [[1, 2, 3]]

    assert find_orphans(sequences, [], topology) == [0, 4]
    assert absorb_orphans(sequences, [], topology) == []
    assert sequences == [[0, 1, 2, 3, 4]]


def test_reserved_cells_are_not_orphans():
    topology = block_all_but(range(0, 5))
    sequences = [[1, 2, 3]]

    assert absorb_orphans(sequences, [4], topology) == []
    assert sequences == [[0, 1, 2, 3]]


def test_full_sequence_does_not_grow():
    topology = block_all_but(range(0, 7))
    sequences = [[1, 2, 3, 4, 5, 6]]

    assert absorb_orphans(sequences, [], topology) == [0]
    assert sequences == [[1, 2, 3, 4, 5, 6]]
    assert absorb_orphans(sequences, [], topology, max_length=None) == []
    assert sequences == [[0, 1, 2, 3, 4, 5, 6]]


def test_stuck_neighbours_become_a_pair():
    # Row 0 holds the sequence, row 2 two loose cells, row 1 is wall
    topology = block_all_but([0, 1, 2, 18, 19])
    sequences = [[0, 1, 2]]

    assert absorb_orphans(sequences, [], topology) == []
    assert sequences == [[0, 1, 2], [18, 19]]


def test_pair_grows_on_later_passes():
    topology = block_all_but([0, 1, 2, 18, 19, 20])
    sequences = [[0, 1, 2]]

    assert absorb_orphans(sequences, [], topology) == []
    assert sequences == [[0, 1, 2], [18, 19, 20]]


def test_cell_next_to_a_middle_stays_orphan():
    topology = block_all_but([0, 1, 2, 10, 40])
    sequences = [[0, 1, 2]]

    assert absorb_orphans(sequences, [], topology) == [10, 40]
    assert sequences == [[0, 1, 2]]
