"""
topological_sort.py — Topological Sort (DFS finish order)
==========================================================
DFS from every unvisited node; a node is pushed once all of its
successors have finished.  Reversing the finish order gives an order in
which every edge u → v has u before v.

A successor that is still on the DFS stack closes a cycle, and a cyclic
graph has no topological order: the walk completes but no ranks are
emitted and the generator returns None.

Node positions in `graph.nodes` are the step indices.

Yields:
    updateAux(i, −1)  – initialisation, one per node
    highlight(i)      – node entered by the DFS
    updateAux(i, r)   – node placed at rank r of the final order
    found(i)          – node coloured as placed

Returns the ordered node ids, or None for a cyclic graph.
"""

from typing import Dict, Generator, List, Optional, Set

from model.graph import DirectedGraph
from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure topologicalSort(G)",                 # 0
    "  for each node u not visited: dfs(u)",        # 1
    "    for each v in succ(u): if v on stack: cycle", # 2
    "    dfs pushes u on stack when finished",      # 3
    "  r ← 0",                                      # 4
    "  while stack not empty:",                     # 5
    "    rank[stack.pop()] ← r; r ← r + 1",         # 6
]

LINE_MAP: Dict[StepType, int] = {
    StepType.HIGHLIGHT:  1,
    StepType.UPDATE_AUX: 6,
    StepType.FOUND:      6,
}


def topological_sort(graph: DirectedGraph) -> Generator[AnimationStep, None, Optional[List[str]]]:
    index = graph.index_of()
    for i in range(len(graph)):
        yield AnimationStep.update_aux(i, -1)

    order:    List[str] = []
    visited:  Set[str]  = set()
    on_stack: Set[str]  = set()
    cyclic = False
    for node in graph.nodes:
        if node.id not in visited:
            cyclic = (yield from _finish(graph, node.id, index, visited, on_stack, order)) or cyclic

    if cyclic:
        yield AnimationStep.highlight()
        return None

    ranked = list(reversed(order))
    for rank, node_id in enumerate(ranked):
        yield AnimationStep.update_aux(index[node_id], rank)
        yield AnimationStep.found(index[node_id])
    return ranked


def _finish(
    graph: DirectedGraph,
    node_id: str,
    index: Dict[str, int],
    visited: Set[str],
    on_stack: Set[str],
    order: List[str],
) -> Generator[AnimationStep, None, bool]:
    visited.add(node_id)
    on_stack.add(node_id)
    yield AnimationStep.highlight(index[node_id])

    cyclic = False
    for nxt in graph.successors(node_id):
        if nxt in on_stack:
            cyclic = True
        elif nxt not in visited:
            cyclic = (yield from _finish(graph, nxt, index, visited, on_stack, order)) or cyclic

    on_stack.discard(node_id)
    order.append(node_id)
    return cyclic
