# orphans.py - Close the gaps the search left behind

from peaks_logic import N_CELLS, ORTHOGONAL

MAX_SEQUENCE_LENGTH = 6


def find_orphans(sequences, reserved, topology):
    """Plain cells that are neither in a sequence nor reserved"""
    taken = set(reserved) | set(topology)
    for seq in sequences:
        taken.update(seq)
    return [idx for idx in range(N_CELLS) if idx not in taken]


def _adjacent(a, b):
    return b in ORTHOGONAL[a]


def absorb_orphans(sequences, reserved, topology, max_length=MAX_SEQUENCE_LENGTH):
    """
    Merge leftover cells into the sequences, in place, until nothing changes.

    Phase A hooks each orphan onto the head or tail of a neighbouring
    sequence. Only when a pass makes no progress does phase B pair two
    adjacent orphans into a new 2-cell sequence, which later passes can grow.
    Returns the orphans that could not be absorbed.
    """
    while True:
        orphans = find_orphans(sequences, reserved, topology)
        if not orphans:
            return []

        changed = False
        remaining = []

        # Phase A: attach to an end
        for orphan in orphans:
            attached = False
            for seq in sequences:
                if max_length is not None and len(seq) >= max_length:
                    continue
                if _adjacent(seq[0], orphan):
                    seq.insert(0, orphan)
                    attached = True
                    break
                if _adjacent(seq[-1], orphan):
                    seq.append(orphan)
                    attached = True
                    break
            if attached:
                changed = True
            else:
                remaining.append(orphan)

        # Phase B: start a new sequence from two stuck neighbours
        if not changed and len(remaining) >= 2:
            for i, a in enumerate(remaining):
                partner = next((b for b in remaining[i + 1:] if _adjacent(a, b)), None)
                if partner is not None:
                    sequences.append([a, partner])
                    changed = True
                    break

        if not changed:
            return remaining
