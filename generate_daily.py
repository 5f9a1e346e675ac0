# generate_daily.py - Build and save the daily board (Island-Constraint strategy)

import argparse
import json
import os
import random
import re
import sys
import time
from datetime import date, timedelta
from pathlib import Path

import numpy as np
from tqdm import tqdm

from peaks_logic import N_CELLS, get_all_targets, to_rc
from islands import find_islands, small_component_cells
from search_gen import generate_search_sequences
from orphans import absorb_orphans
from carving import carve_holes
from variants import VARIANT_KEYS, build_variants
from validation import check_coverage, check_search_targets
from sudoku_9x9_generator import generate_daily_game, verify_sudoku
from logger import GenerationLogger

# --- CONFIG ---
MAX_ATTEMPTS = 100
SEED_STRIDE = 777          # attempt seed = base + attempt * SEED_STRIDE
COVER_SEED_OFFSET = 100    # search seed = attempt seed + offset (+ retry)
COVER_RETRIES = 8          # cover seeds tried per variant while carving fails
SEARCH_NODE_BUDGET = 20000  # nodes per anchored cover search
SIMON_COUNT = 3
DEFAULT_CUSTOM_SEED = 12345
PUZZLE_VERSION = '3.3-island-hybrid'
PUZZLES_DIR = Path('public') / 'puzzles'


class AttemptBudgetExhausted(Exception):
    """Every top-level attempt failed; nothing was written"""

    def __init__(self, attempts):
        super().__init__(f"Could not generate valid puzzle after {attempts} attempts.")
        self.attempts = attempts


def resolve_seed(seed_arg=None, today=None):
    """
    Returns: (seed_int, date_str)
    No argument -> tomorrow; 8 digits -> YYYYMMDD; anything else -> custom seed.
    """
    if seed_arg is None or str(seed_arg) == '':
        tomorrow = (today or date.today()) + timedelta(days=1)
        return int(tomorrow.strftime('%Y%m%d')), tomorrow.strftime('%Y-%m-%d')

    seed_arg = str(seed_arg)
    if re.fullmatch(r'[0-9]{8}', seed_arg):
        return int(seed_arg), f"{seed_arg[:4]}-{seed_arg[4:6]}-{seed_arg[6:]}"

    # Leading integer, like the old web tooling did
    match = re.match(r'\s*([+-]?[0-9]+)', seed_arg)
    seed_int = int(match.group(1)) if match else 0
    return seed_int or DEFAULT_CUSTOM_SEED, f"custom-{seed_arg}"


def pick_simon_values(forced_values, rng, count=SIMON_COUNT):
    """Forced values first, padded with random unused digits"""
    values = sorted(int(v) for v in forced_values)
    pool = [n for n in range(1, 10) if n not in forced_values]
    rng.shuffle(pool)
    while len(values) < count:
        values.append(pool.pop())
    return values


def to_cells(indices):
    return [dict(zip(('r', 'c'), to_rc(idx))) for idx in indices]


def serialize_targets(sequences, board):
    flat = np.asarray(board).reshape(-1)
    return [
        {'id': s_idx, 'path': to_cells(seq), 'numbers': [int(flat[idx]) for idx in seq]}
        for s_idx, seq in enumerate(sequences)
    ]


def generate_full_cover(board, topology, reserved, seed, node_budget=SEARCH_NODE_BUDGET):
    """
    Exact cover of the plain, non-reserved cells.
    The anchored search tiles every component that can host a sequence; the
    tolerance left to the absorber is the 2-cell pockets, which it pairs up.
    Returns the sequences when every such cell is covered, else None.
    """
    blocked = set(topology) | set(reserved)
    open_cells = [idx not in blocked for idx in range(N_CELLS)]
    tolerance = small_component_cells(open_cells)

    success, sequences = generate_search_sequences(
        board, topology, seed, target_used_count=sum(open_cells) - tolerance,
        reserved=reserved, node_budget=node_budget, anchored=True,
    )
    if not success:
        return None

    leftovers = absorb_orphans(sequences, reserved, topology)
    return None if leftovers else sequences


def build_variant_targets(board, topology, islands, simon_values, seed, rng,
                          cover_retries=COVER_RETRIES, node_budget=SEARCH_NODE_BUDGET):
    """
    Full cover, carve and validate one variant.
    A cover the carver cannot use is redrawn with the next seed.
    Returns: (outcome, payload) where payload is None unless outcome is 'success'
    """
    flat = np.asarray(board).reshape(-1)

    # Islands already provide their own values as holes
    satisfied = {int(flat[idx]) for idx in islands}
    to_carve = [v for v in simon_values if v not in satisfied]

    for retry in range(cover_retries):
        sequences = generate_full_cover(board, topology, islands, seed + retry,
                                        node_budget=node_budget)
        if sequences is None:
            # The board does not tile, another seed only reorders the search
            return 'cover_failed', None

        carved, sequences, removed = carve_holes(sequences, board, to_carve, rng)
        if carved:
            break
    else:
        return 'carve_failed', None

    targets = serialize_targets(sequences, board)
    report = check_coverage(sequences, topology, islands, removed)
    if not report['ok'] or not check_search_targets(targets)['ok']:
        return 'invalid', None

    return 'success', {'targets': targets, 'simon': to_cells(list(islands) + removed)}


def generate_daily_puzzle(seed, generator=generate_daily_game, max_attempts=MAX_ATTEMPTS,
                          cover_retries=COVER_RETRIES, node_budget=SEARCH_NODE_BUDGET,
                          logger=None, show_progress=True):
    """
    Retry loop over fresh Sudoku grids until all four variants succeed.
    Returns: (game, simon_values, search_targets)
    Raises: AttemptBudgetExhausted
    """
    progress = tqdm(range(1, max_attempts + 1), desc='Attempts', disable=not show_progress)

    for attempt in progress:
        start_time = time.time()
        current_seed = seed + attempt * SEED_STRIDE
        rng = random.Random(current_seed)

        # 1. New Sudoku
        game = generator(current_seed)
        if not verify_sudoku(game['solution']):
            raise ValueError(f"Sudoku generator returned an invalid solution for seed {current_seed}")

        # 2. Variants and their topology
        variants = {}
        forced_values = set()
        for key, board in build_variants(game['solution']).items():
            topology, peak_count, valley_count = get_all_targets(board)
            islands = find_islands(topology)
            forced_values.update(int(board.flat[idx]) for idx in islands)
            variants[key] = (board, topology, islands)
            if logger is not None:
                logger.log_topology(attempt, key, peak_count, valley_count, len(islands))

        # 3. Max 3 distinct forced numbers
        if len(forced_values) > SIMON_COUNT:
            progress.set_postfix_str(f"too many forced islands ({len(forced_values)})")
            if logger is not None:
                logger.log_attempt(attempt, current_seed, forced_values, [],
                                   'forced_overflow', time.time() - start_time)
            continue

        # 4. Simon values
        simon_values = pick_simon_values(forced_values, rng)
        progress.set_postfix_str(f"targets {simon_values} (forced {len(forced_values)})")

        # 5. Fill and carve every variant
        outcome = 'success'
        failed_variant = None
        search_targets = {}
        for key in VARIANT_KEYS:
            board, topology, islands = variants[key]
            outcome, payload = build_variant_targets(
                board, topology, islands, simon_values,
                current_seed + COVER_SEED_OFFSET, rng,
                cover_retries=cover_retries, node_budget=node_budget,
            )
            if payload is None:
                failed_variant = key
                break
            search_targets[key] = payload

        if logger is not None:
            logger.log_attempt(attempt, current_seed, forced_values, simon_values,
                               outcome, time.time() - start_time, failed_variant)

        if outcome == 'success':
            progress.close()
            return game, simon_values, search_targets

        progress.set_postfix_str(f"{outcome} in variant {failed_variant}")

    progress.close()
    raise AttemptBudgetExhausted(max_attempts)


def build_document(game, simon_values, search_targets, date_str, seed):
    return {
        'meta': {'version': PUZZLE_VERSION, 'date': date_str, 'seed': seed},
        'data': {
            'solution': np.asarray(game['solution']).tolist(),
            'puzzle': np.asarray(game['puzzle']).tolist(),
            'simonValues': [int(v) for v in simon_values],
            'searchTargets': search_targets,
        },
        'chunks': [np.asarray(chunk).tolist() for chunk in game['chunks']],
    }


def save_puzzle(document, out_dir, date_str):
    """Write daily-<date>.json atomically"""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"daily-{date_str}.json"
    tmp = path.with_suffix('.json.tmp')

    try:
        with open(tmp, 'w') as f:
            json.dump(document, f, indent=2)
        os.replace(tmp, path)  # atomic replace
    except Exception:
        tmp.unlink(missing_ok=True)
        raise
    return path


def run(seed_arg=None, out_dir=PUZZLES_DIR, max_attempts=MAX_ATTEMPTS,
        generator=generate_daily_game, logger=None, show_progress=True, today=None):
    """Resolve the seed, generate, and persist once on success"""
    seed, date_str = resolve_seed(seed_arg, today=today)
    print(f"Target Date: {date_str}, Seed: {seed}")

    if logger is not None:
        logger.log_config({
            'seed': seed,
            'date': date_str,
            'max_attempts': max_attempts,
            'seed_stride': SEED_STRIDE,
            'cover_seed_offset': COVER_SEED_OFFSET,
            'cover_retries': COVER_RETRIES,
            'search_node_budget': SEARCH_NODE_BUDGET,
            'simon_count': SIMON_COUNT,
            'version': PUZZLE_VERSION,
        })

    try:
        game, simon_values, search_targets = generate_daily_puzzle(
            seed, generator=generator, max_attempts=max_attempts,
            logger=logger, show_progress=show_progress,
        )
    finally:
        if logger is not None:
            logger.generate_summary()

    document = build_document(game, simon_values, search_targets, date_str, seed)
    path = save_puzzle(document, out_dir, date_str)
    print(f"Puzzle saved: {path.name}")
    return document, path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate the daily puzzle board.")
    parser.add_argument('seed', nargs='?', default=None,
                        help="YYYYMMDD date, or any custom seed (default: tomorrow)")
    parser.add_argument('--out', default=str(PUZZLES_DIR), help="Output directory")
    parser.add_argument('--max-attempts', type=int, default=MAX_ATTEMPTS)
    parser.add_argument('--log-dir', default=None,
                        help="Write attempt history, summary and plot here")
    parser.add_argument('--quiet', action='store_true', help="Hide the progress bar")
    args = parser.parse_args(argv)

    logger = None
    if args.log_dir:
        logger = GenerationLogger(log_dir=args.log_dir)

    try:
        run(args.seed, out_dir=args.out, max_attempts=args.max_attempts,
            logger=logger, show_progress=not args.quiet)
    except AttemptBudgetExhausted as e:
        print(f"Fatal Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        if logger is not None:
            logger.plot_attempts()


if __name__ == "__main__":
    main()
