"""
recorder.py — Run Recorder & Analytics
========================================
Generates a complete step log through the dispatcher, then computes the
metrics the Analytics panel and Comparison Mode need.

Usage:
    rec = Recorder()
    metrics = rec.record(AlgorithmType.BFS, array, grid=grid)
    rec.export()                     # serialisable snapshot for save/replay

Comparison Mode:
    Two Recorders, one per algorithm, each recorded on the SAME input,
    then compare(rec1, rec2) → ComparisonResult.
"""

import random
import sys
import time
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from algorithms import AlgoInfo, get_algorithm
from algorithms.dispatcher import generate_steps
from algorithms.step import AnimationStep, StepType
from model.grid import Grid


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    total_steps:   int   = 0
    compares:      int   = 0
    swaps:         int   = 0
    overwrites:    int   = 0
    visits:        int   = 0
    path_length:   int   = 0          # number of cells on the final path
    found_count:   int   = 0          # number of `found` steps
    wall_time_ms:  float = 0.0        # time to generate the log
    memory_bytes:  int   = 0          # approx size of the step buffer
    path_found:    bool  = False


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:    str = ""   # which run needed fewer steps
    winner_compares: str = ""
    winner_writes:   str = ""   # swaps + overwrites
    winner_visits:   str = ""
    winner_path:     str = ""   # shorter path; a run with no path loses

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps       : Full step log of the recorded run.
        metrics     : Computed RunMetrics (available after record()).
    """

    def __init__(self):
        self.steps:    List[AnimationStep]  = []
        self.metrics:  Optional[RunMetrics] = None
        self._algo_info: Optional[AlgoInfo] = None

    def record(
        self,
        algorithm,
        array: Sequence[int] = (),
        grid: Optional[Grid] = None,
        strings: Optional[Tuple[str, str]] = None,
        rng: Optional[random.Random] = None,
    ) -> RunMetrics:
        """Generate the full log and compute metrics."""
        info = get_algorithm(algorithm)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algorithm}")
        self._algo_info = info

        started    = time.monotonic()
        self.steps = generate_steps(info.key, array, grid=grid, strings=strings, rng=rng)
        wall_ms    = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key.value if self._algo_info else "",
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info   = self._algo_info
        counts = Counter(s.type for s in self.steps)

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s)

        return RunMetrics(
            algo_key=info.key.value if info else "",
            algo_label=info.label if info else "",
            total_steps=len(self.steps),
            compares=counts[StepType.COMPARE],
            swaps=counts[StepType.SWAP],
            overwrites=counts[StepType.OVERWRITE],
            visits=counts[StepType.VISIT],
            path_length=counts[StepType.PATH],
            found_count=counts[StepType.FOUND],
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            path_found=counts[StepType.PATH] > 0,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two recorded runs, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.algo_label if l_val < r_val else r.algo_label

    if l.path_found != r.path_found:
        winner_path = l.algo_label if l.path_found else r.algo_label
    else:
        winner_path = winner(l.path_length, r.path_length)

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps   =winner(l.total_steps, r.total_steps),
        winner_compares=winner(l.compares, r.compares),
        winner_writes  =winner(l.swaps + l.overwrites, r.swaps + r.overwrites),
        winner_visits  =winner(l.visits, r.visits),
        winner_path    =winner_path,
    )
