# carving.py - Punch the Simon values out of the search sequences

import random

import numpy as np

from islands import MIN_SEQUENCE_LENGTH


def _try_remove(seqs, s_idx, c_idx):
    """Remove one cell in place if every surviving fragment keeps the minimum length"""
    seq = seqs[s_idx]

    # Head / tail: just trim
    if c_idx == 0 or c_idx == len(seq) - 1:
        if len(seq) - 1 < MIN_SEQUENCE_LENGTH:
            return False
        seq.pop(c_idx)
        return True

    # Interior: split in two
    left = seq[:c_idx]
    right = seq[c_idx + 1:]
    if len(left) < MIN_SEQUENCE_LENGTH or len(right) < MIN_SEQUENCE_LENGTH:
        return False
    seqs[s_idx] = left
    seqs.append(right)
    return True


def carve_holes(sequences, board, target_values, rng=None):
    """
    Remove one occurrence of every target value from the sequences.

    Values are handled one at a time, greedily, on a copy of the sequences;
    if some value has no legal removal the input is returned untouched.
    Returns: (success, sequences, removed cell indices)
    """
    rng = rng if rng is not None else random.Random()
    flat = np.asarray(board).reshape(-1)
    seqs = [list(seq) for seq in sequences]
    removed = []

    for target in target_values:
        candidates = [
            (s_idx, c_idx)
            for s_idx, seq in enumerate(seqs)
            for c_idx, idx in enumerate(seq)
            if flat[idx] == target
        ]
        rng.shuffle(candidates)

        carved = False
        for s_idx, c_idx in candidates:
            cell = seqs[s_idx][c_idx]
            if _try_remove(seqs, s_idx, c_idx):
                removed.append(cell)
                carved = True
                break

        if not carved:
            return False, sequences, []

    return True, seqs, removed
