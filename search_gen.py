# search_gen.py - Partition the plain cells into orthogonal search sequences

import random

import numpy as np

from peaks_logic import N_CELLS, ORTHOGONAL
from islands import MIN_SEQUENCE_LENGTH, cell_component_sizes, small_component_cells

SEQUENCE_LENGTHS = (3, 4, 5, 6)
DEFAULT_BUFFER = 5  # plain cells allowed to stay outside every sequence


class SearchContext:
    """
    Working state of one backtracking search.
    Cells are blocked (peak/valley or reserved) or used by a placed sequence;
    every place() is undone by the matching undo().
    """

    def __init__(self, blocked, node_budget=None):
        self.blocked = [False] * N_CELLS
        for idx in blocked:
            self.blocked[idx] = True
        self.used = [False] * N_CELLS
        self.sequences = []
        self.used_count = 0
        self.node_budget = node_budget
        self.nodes = 0

    def is_free(self, idx):
        return not (self.blocked[idx] or self.used[idx])

    def free_cells(self):
        return [idx for idx in range(N_CELLS) if self.is_free(idx)]

    def open_mask(self):
        return [self.is_free(idx) for idx in range(N_CELLS)]

    def place(self, path):
        for idx in path:
            self.used[idx] = True
        self.sequences.append(list(path))
        self.used_count += len(path)

    def undo(self):
        path = self.sequences.pop()
        for idx in path:
            self.used[idx] = False
        self.used_count -= len(path)
        return path

    @property
    def exhausted(self):
        return self.node_budget is not None and self.nodes >= self.node_budget


def find_paths(start, length, is_free):
    """All simple orthogonal paths of exactly `length` cells beginning at `start`"""
    result = []
    path = [start]
    on_path = {start}

    def dfs(curr):
        if len(path) == length:
            result.append(list(path))
            return
        for n in ORTHOGONAL[curr]:
            if n in on_path or not is_free(n):
                continue
            on_path.add(n)
            path.append(n)
            dfs(n)
            path.pop()
            on_path.discard(n)

    dfs(start)
    return result


def paths_through(cell, length, is_free):
    """All simple orthogonal paths of exactly `length` cells containing `cell`, each listed once"""
    arms = [[path[1:] for path in find_paths(cell, k + 1, is_free)] for k in range(length)]

    result = []
    for k in range(length):
        for left in arms[k]:
            for right in arms[length - 1 - k]:
                if set(left) & set(right):
                    continue
                path = left[::-1] + [cell] + right
                # Both directions get built, keep one
                if path <= path[::-1]:
                    result.append(path)
    return result


def _pick_anchor(starts, open_cells):
    """
    Most constrained cell of `starts`: smallest component first, then fewest
    free neighbours. Cells of pockets too small for a sequence are skipped.
    """
    sizes = cell_component_sizes(open_cells)
    anchor, best = None, None
    for idx in starts:
        if sizes[idx] < MIN_SEQUENCE_LENGTH:
            continue
        key = (sizes[idx], sum(1 for n in ORTHOGONAL[idx] if open_cells[n]))
        if best is None or key < best:
            anchor, best = idx, key
    return anchor


def backtrack(ctx, target_used_count, buffer, rng, anchored=False):
    # Base case
    if ctx.used_count == target_used_count:
        return True
    if ctx.exhausted:
        return False
    ctx.nodes += 1

    # Cells in components of size < 3 can never be covered, they must fit in the buffer
    open_cells = ctx.open_mask()
    if small_component_cells(open_cells) > buffer:
        return False

    starts = ctx.free_cells()
    if not starts:
        return False
    rng.shuffle(starts)

    if anchored:
        # Branch only on the most constrained cell, every path through it
        anchor = _pick_anchor(starts, open_cells)
        if anchor is None:
            return False
        starts = [anchor]

    for start in starts:
        lengths = list(SEQUENCE_LENGTHS)
        rng.shuffle(lengths)

        for length in lengths:
            # Don't overshoot the target
            if ctx.used_count + length > target_used_count:
                continue

            if anchored:
                paths = paths_through(start, length, ctx.is_free)
            else:
                paths = find_paths(start, length, ctx.is_free)
            rng.shuffle(paths)

            for path in paths:
                ctx.place(path)
                if backtrack(ctx, target_used_count, buffer, rng, anchored):
                    return True
                ctx.undo()
                if ctx.exhausted:
                    return False

    return False


def generate_search_sequences(board, topology, seed, target_used_count=None,
                              reserved=(), node_budget=None, anchored=False):
    """
    Randomized backtracking cover of the plain, non-reserved cells.

    board: 9x9 solved grid (only its shape matters to the search)
    topology: cell index -> 'peak' / 'valley'
    seed: drives every shuffle, same inputs give the same sequences
    target_used_count: cells to cover, defaults to eligible - DEFAULT_BUFFER
    reserved: cell indices that must stay out of every sequence
    node_budget: optional cap on explored search nodes
    anchored: branch on the most constrained free cell instead of every start;
        exhaustive when the target leaves out only cells of small pockets

    Returns: (success, sequences) with sequences as lists of cell indices
    """
    if np.asarray(board).size != N_CELLS:
        raise ValueError("board must be 9x9")

    rng = random.Random(seed)
    ctx = SearchContext(set(topology) | set(reserved), node_budget=node_budget)

    eligible = len(ctx.free_cells())
    if target_used_count is None:
        target_used_count = max(0, eligible - DEFAULT_BUFFER)
    buffer = eligible - target_used_count
    if buffer < 0:
        return False, []

    if not backtrack(ctx, target_used_count, buffer, rng, anchored):
        return False, []

    return True, [list(seq) for seq in ctx.sequences]
