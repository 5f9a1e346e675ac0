# validation.py - Sanity checks run on a variant before it is accepted

from peaks_logic import N_CELLS, ORTHOGONAL, to_index


def check_search_targets(targets, min_length=2):
    """
    Check serialized targets the way the game client does before trusting them.
    targets: list of {'path': [{'r':.., 'c':..}, ...], ...}
    """
    issues = []
    seen = set()

    for t_idx, target in enumerate(targets):
        path = target.get('path') or []
        if len(path) < min_length:
            issues.append({'type': 'too_short', 'target': t_idx, 'length': len(path)})
            continue

        cells = [to_index(p['r'], p['c']) for p in path]
        for i, idx in enumerate(cells):
            if idx in seen:
                issues.append({'type': 'overlap', 'target': t_idx, 'cell': path[i]})
            seen.add(idx)
            if i + 1 < len(cells) and cells[i + 1] not in ORTHOGONAL[idx]:
                issues.append({'type': 'not_orthogonal', 'target': t_idx,
                               'cell': path[i], 'next': path[i + 1]})

    return {'ok': len(issues) == 0, 'issues': issues}


def check_coverage(sequences, topology, reserved, removed=()):
    """Every cell must be exactly one of: sequence, peak/valley, reserved island, carved hole"""
    issues = []
    blocked = set(topology) | set(reserved) | set(removed)
    owners = {}

    for s_idx, seq in enumerate(sequences):
        for idx in seq:
            if idx in blocked:
                issues.append({'type': 'covers_blocked', 'sequence': s_idx, 'cell': idx})
            if idx in owners:
                issues.append({'type': 'double_use', 'sequence': s_idx, 'cell': idx})
            owners[idx] = s_idx

    uncovered = [idx for idx in range(N_CELLS) if idx not in owners and idx not in blocked]
    if uncovered:
        issues.append({'type': 'uncovered', 'cells': uncovered})

    total = sum(len(seq) for seq in sequences) + len(topology) + len(reserved) + len(removed)
    if total != N_CELLS:
        issues.append({'type': 'count', 'total': total})

    return {'ok': len(issues) == 0, 'issues': issues}
