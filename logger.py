# logger.py - Per-attempt logging for the daily puzzle generator

import json
import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path
from datetime import datetime

OUTCOMES = ('success', 'forced_overflow', 'cover_failed', 'carve_failed', 'invalid')


class GenerationLogger:
    """Logs every generation attempt, the run configuration, and a final summary"""

    def __init__(self, log_dir='logs', experiment_name=None):
        if experiment_name is None:
            experiment_name = f"daily_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

        self.log_dir = Path(log_dir) / experiment_name
        self.log_dir.mkdir(parents=True, exist_ok=True)

        # One entry per attempt
        self.history = {
            'attempt': [],
            'seed': [],
            'forced_values': [],
            'simon_values': [],
            'outcome': [],
            'failed_variant': [],
            'time_per_attempt': [],
        }

        # Topology stats per attempt and variant
        self.topology = {}

        self.config = {}

        print(f"Logging to: {self.log_dir}")

    def log_config(self, config):
        """Save generator configuration"""
        self.config = config
        with open(self.log_dir / 'config.json', 'w') as f:
            json.dump(config, f, indent=2)

    def log_topology(self, attempt, variant, peak_count, valley_count, island_count):
        self.topology.setdefault(f'attempt_{attempt}', {})[variant] = {
            'peaks': peak_count,
            'valleys': valley_count,
            'islands': island_count,
        }

    def log_attempt(self, attempt, seed, forced_values, simon_values, outcome,
                    attempt_time, failed_variant=None):
        """Log the result of one attempt"""
        if outcome not in OUTCOMES:
            raise ValueError(f"Unknown outcome: {outcome}")

        self.history['attempt'].append(attempt)
        self.history['seed'].append(seed)
        self.history['forced_values'].append(sorted(int(v) for v in forced_values))
        self.history['simon_values'].append([int(v) for v in simon_values])
        self.history['outcome'].append(outcome)
        self.history['failed_variant'].append(failed_variant)
        self.history['time_per_attempt'].append(attempt_time)

        # Save history after each attempt
        self.save_history()

    def save_history(self):
        """Save attempt history to JSON"""
        with open(self.log_dir / 'history.json', 'w') as f:
            json.dump(self.history, f, indent=2)

        with open(self.log_dir / 'topology.json', 'w') as f:
            json.dump(self.topology, f, indent=2)

    def plot_attempts(self, save=True):
        """Outcome counts and time per attempt"""
        if not self.history['attempt']:
            print("No attempts to plot")
            return

        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

        counts = [self.history['outcome'].count(o) for o in OUTCOMES]
        ax1.bar(range(len(OUTCOMES)), counts, color='steelblue')
        ax1.set_xticks(range(len(OUTCOMES)))
        ax1.set_xticklabels(OUTCOMES, rotation=30, ha='right')
        ax1.set_ylabel('Attempts')
        ax1.set_title('Attempt Outcomes')
        ax1.grid(True, alpha=0.3, axis='y')

        ax2.plot(self.history['attempt'], self.history['time_per_attempt'],
                 linewidth=2, marker='o', markersize=3, color='orange')
        ax2.set_xlabel('Attempt')
        ax2.set_ylabel('Time (seconds)')
        ax2.set_title('Time per Attempt')
        ax2.grid(True, alpha=0.3)

        plt.tight_layout()

        if save:
            plt.savefig(self.log_dir / 'attempts.png', dpi=150, bbox_inches='tight')
            print(f"Saved attempt plot to {self.log_dir / 'attempts.png'}")
        plt.close(fig)

        return fig

    def generate_summary(self):
        """Generate a summary report"""
        if not self.history['attempt']:
            print("No attempts to summarize")
            return

        outcomes = self.history['outcome']
        summary = {
            'experiment_name': self.log_dir.name,
            'total_attempts': len(outcomes),
            'succeeded': 'success' in outcomes,
            'winning_attempt': (self.history['attempt'][outcomes.index('success')]
                                if 'success' in outcomes else None),
            'total_time': sum(self.history['time_per_attempt']),
            'avg_time_per_attempt': float(np.mean(self.history['time_per_attempt'])),
        }
        for outcome in OUTCOMES:
            summary[f'n_{outcome}'] = outcomes.count(outcome)

        with open(self.log_dir / 'summary.json', 'w') as f:
            json.dump(summary, f, indent=2)

        print("\n" + "="*60)
        print("GENERATION SUMMARY")
        print("="*60)
        for key, value in summary.items():
            if isinstance(value, float):
                print(f"{key:.<40} {value:.4f}")
            else:
                print(f"{key:.<40} {value}")
        print("="*60 + "\n")

        return summary
