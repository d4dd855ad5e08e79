"""Statistics and exporter.

`Statistics` holds the hit/miss/eviction counters of one run. The exporters
write them out in the formats the tool supports: the one-line results file
read by graders, CSV, JSON and a PDF bar chart.
"""
import csv
import json
from typing import Dict, Tuple

RESULTS_FILE = '.csim_results'


class Statistics:
    def __init__(self):
        self.reset()

    def reset(self):
        # counters start from zero
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def record_access(self, hit: bool, evicted: bool = False):
        # call this once for every cache access
        if hit:
            self.hits += 1
        else:
            self.misses += 1
            if evicted:
                self.evictions += 1

    @property
    def accesses(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self):
        return (self.hits / self.accesses) if self.accesses else 0.0

    @property
    def miss_rate(self):
        return (self.misses / self.accesses) if self.accesses else 0.0

    def summary(self) -> Tuple[int, int, int]:
        """The (hits, misses, evictions) triple."""
        return self.hits, self.misses, self.evictions

    def as_dict(self) -> Dict[str, float]:
        return {
            'hits': self.hits,
            'misses': self.misses,
            'evictions': self.evictions,
            'accesses': self.accesses,
            'hit_rate': self.hit_rate,
            'miss_rate': self.miss_rate,
        }

    def __repr__(self):
        return f"Statistics(hits={self.hits}, misses={self.misses}, evictions={self.evictions})"


def format_summary(stats: Statistics) -> str:
    return f"hits:{stats.hits} misses:{stats.misses} evictions:{stats.evictions}"


def export_chart_json(stats: Statistics, fpath: str) -> str:
    """Export the counters and derived rates to a JSON file. Returns the path."""
    with open(fpath, 'w', encoding='utf-8') as fh:
        json.dump({'stats': stats.as_dict()}, fh, indent=2)
    return fpath


def export_chart_pdf(stats: Statistics, fpath: str, title: str = 'Cache simulation') -> str:
    """Render hits/misses/evictions as a bar chart and save it as a PDF.
    Returns the saved file path.
    """
    # Use matplotlib without a display
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    labels = ['hits', 'misses', 'evictions']
    values = list(stats.summary())
    fig, ax = plt.subplots(figsize=(6, 3))
    bars = ax.bar(labels, values, color=['#4CAF50', '#FFA500', '#E53935'])
    for bar, value in zip(bars, values):
        ax.annotate(str(value), (bar.get_x() + bar.get_width() / 2, bar.get_height()),
                    ha='center', va='bottom', fontsize=8)
    ax.set_ylabel('Count')
    ax.set_title(f"{title} (hit rate {stats.hit_rate:.3f})")
    ax.grid(False)
    fig.tight_layout()
    fig.savefig(fpath, format='pdf', dpi=150)
    plt.close(fig)
    return fpath


class Exporter:
    @staticmethod
    def write_results(stats: Statistics, path: str = RESULTS_FILE):
        # "<hits> <misses> <evictions>" on a single line
        with open(path, 'w') as f:
            f.write(f"{stats.hits} {stats.misses} {stats.evictions}\n")

    @staticmethod
    def read_results(path: str = RESULTS_FILE) -> Tuple[int, int, int]:
        with open(path) as f:
            hits, misses, evictions = (int(v) for v in f.read().split())
        return hits, misses, evictions

    @staticmethod
    def export_stats_csv(path: str, stats: Statistics):
        with open(path, 'w', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(['accesses', 'hits', 'misses', 'evictions', 'hit_rate', 'miss_rate'])
            writer.writerow([
                stats.accesses, stats.hits, stats.misses, stats.evictions,
                stats.hit_rate, stats.miss_rate,
            ])
