"""
pseudocode.py — Step → Pseudocode Line
========================================
The side panel shows an algorithm's PSEUDOCODE and highlights the line
the current step belongs to.  Every algorithm module ships a LINE_MAP
from StepType to a line index; anything the map does not name falls
back to DEFAULT_LINE (the procedure header).
"""

from typing import List, Optional

from algorithms import get_algorithm
from algorithms.step import AnimationStep

DEFAULT_LINE = 0


def lines_for(algorithm) -> List[str]:
    info = get_algorithm(algorithm)
    return list(info.pseudocode) if info else []


def line_for(algorithm, step: Optional[AnimationStep]) -> int:
    """Line index for `step` under `algorithm`; total, never raises."""
    info = get_algorithm(algorithm)
    if info is None or step is None:
        return DEFAULT_LINE
    line = info.line_map.get(step.type, DEFAULT_LINE)
    if not 0 <= line < len(info.pseudocode):
        return DEFAULT_LINE
    return line
