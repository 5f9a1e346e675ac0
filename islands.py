# islands.py - Unreachable pockets: single trapped cells and too-small components

from peaks_logic import N_CELLS, ORTHOGONAL

MIN_SEQUENCE_LENGTH = 3


def find_islands(topology, used=None):
    """
    Plain, unused cells that no path can ever enter.
    A cell is an island when every orthogonal neighbour is off-board,
    a peak/valley, or already used.
    """
    used = used if used is not None else ()
    blocked = set(topology) | set(used)

    islands = []
    for idx in range(N_CELLS):
        if idx in blocked:
            continue
        free_neighbors = sum(1 for n in ORTHOGONAL[idx] if n not in blocked)
        if free_neighbors == 0:
            islands.append(idx)
    return islands


def component_sizes(open_cells):
    """Sizes of the orthogonal components of the open cells (81-long bool mask)"""
    visited = [False] * N_CELLS
    sizes = []

    for start in range(N_CELLS):
        if not open_cells[start] or visited[start]:
            continue
        visited[start] = True
        stack = [start]
        size = 0
        while stack:
            idx = stack.pop()
            size += 1
            for n in ORTHOGONAL[idx]:
                if open_cells[n] and not visited[n]:
                    visited[n] = True
                    stack.append(n)
        sizes.append(size)

    return sizes


def small_component_cells(open_cells, min_size=MIN_SEQUENCE_LENGTH):
    """Number of open cells stuck in components too small to host a sequence"""
    return sum(size for size in component_sizes(open_cells) if size < min_size)


def cell_component_sizes(open_cells):
    """Size of the component each open cell belongs to, 0 for closed cells"""
    sizes = [0] * N_CELLS

    for start in range(N_CELLS):
        if not open_cells[start] or sizes[start]:
            continue
        members = [start]
        sizes[start] = -1
        stack = [start]
        while stack:
            idx = stack.pop()
            for n in ORTHOGONAL[idx]:
                if open_cells[n] and not sizes[n]:
                    sizes[n] = -1
                    members.append(n)
                    stack.append(n)
        for idx in members:
            sizes[idx] = len(members)

    return sizes
