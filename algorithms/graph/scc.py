"""
scc.py — Strongly Connected Components (Kosaraju)
==================================================
Pass 1: DFS over the original graph, pushing each node when it
finishes.  Pass 2: DFS over the transposed graph in reverse finish
order; every tree grown in pass 2 is exactly one strongly connected
component.

Node positions in `graph.nodes` are the step indices.  The aux array
holds one slot per node: −1 until its component id is known.

Yields:
    updateAux(i, −1)  – initialisation, one per node
    highlight(i)      – node entered during pass 1
    updateAux(i, k)   – node assigned to component k in pass 2
    found(i)          – node permanently coloured
"""

from typing import Dict, Generator, List, Set

from model.graph import DirectedGraph
from algorithms.step import AnimationStep, StepType


PSEUDOCODE: List[str] = [
    "procedure kosaraju(G)",                        # 0
    "  for each node u not visited: dfs1(u)",       # 1
    "    dfs1 pushes u on stack when finished",     # 2
    "  Gᵀ ← transpose(G)",                          # 3
    "  while stack not empty:",                     # 4
    "    u ← stack.pop()",                          # 5
    "    if u unassigned: dfs2(u, k); k ← k + 1",   # 6
    "    dfs2 labels every node it reaches in Gᵀ with k",  # 7
]

LINE_MAP: Dict[StepType, int] = {
    StepType.HIGHLIGHT:  1,
    StepType.UPDATE_AUX: 7,
    StepType.FOUND:      7,
}


def scc(graph: DirectedGraph) -> Generator[AnimationStep, None, None]:
    index = graph.index_of()
    for i in range(len(graph)):
        yield AnimationStep.update_aux(i, -1)

    order:   List[str] = []
    visited: Set[str]  = set()
    for node in graph.nodes:
        if node.id not in visited:
            yield from _finish_order(graph, node.id, index, visited, order)

    transposed = graph.transpose()
    component: Dict[str, int] = {}
    k = 0
    for node_id in reversed(order):
        if node_id not in component:
            yield from _assign(transposed, node_id, k, index, component)
            k += 1


def _finish_order(
    graph: DirectedGraph,
    node_id: str,
    index: Dict[str, int],
    visited: Set[str],
    order: List[str],
) -> Generator[AnimationStep, None, None]:
    visited.add(node_id)
    yield AnimationStep.highlight(index[node_id])
    for nxt in graph.successors(node_id):
        if nxt not in visited:
            yield from _finish_order(graph, nxt, index, visited, order)
    order.append(node_id)


def _assign(
    transposed: DirectedGraph,
    node_id: str,
    k: int,
    index: Dict[str, int],
    component: Dict[str, int],
) -> Generator[AnimationStep, None, None]:
    component[node_id] = k
    yield AnimationStep.update_aux(index[node_id], k)
    yield AnimationStep.found(index[node_id])
    for nxt in transposed.successors(node_id):
        if nxt not in component:
            yield from _assign(transposed, nxt, k, index, component)
