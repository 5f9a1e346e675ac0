# tests/test_logger.py
import json

import pytest

from logger import GenerationLogger


def test_history_config_and_summary(tmp_path):
    logger = GenerationLogger(log_dir=tmp_path, experiment_name='exp')
    logger.log_config({'seed': 1})
    logger.log_topology(1, '0', 10, 9, 1)
    logger.log_attempt(1, 778, {5, 2}, [], 'forced_overflow', 0.5)
    logger.log_attempt(2, 1555, {4}, [4, 1, 8], 'success', 1.5)

    run_dir = tmp_path / 'exp'
    assert json.loads((run_dir / 'config.json').read_text()) == {'seed': 1}
    history = json.loads((run_dir / 'history.json').read_text())
    assert history['forced_values'] == [[2, 5], [4]]
    assert history['outcome'] == ['forced_overflow', 'success']
    topology = json.loads((run_dir / 'topology.json').read_text())
    assert topology['attempt_1']['0'] == {'peaks': 10, 'valleys': 9, 'islands': 1}

    summary = logger.generate_summary()
    assert summary['winning_attempt'] == 2
    assert summary['n_forced_overflow'] == 1
    assert summary['total_time'] == pytest.approx(2.0)

    logger.plot_attempts()
    assert (run_dir / 'attempts.png').exists()


def test_unknown_outcome_rejected(tmp_path):
    logger = GenerationLogger(log_dir=tmp_path, experiment_name='exp')
    with pytest.raises(ValueError):
        logger.log_attempt(1, 1, set(), [], 'maybe', 0.0)
