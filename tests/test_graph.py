import random

import pytest

from algorithms import AlgorithmType
from algorithms.dispatcher import generate_steps
from algorithms.graph.scc import scc
from algorithms.graph.topological_sort import topological_sort
from algorithms.step import StepType
from model.graph import DirectedGraph, GraphNode
from model.grid import Grid


def components_grid():
    return Grid.from_strings([
        "..#.#.",
        "..#.#.",
        "###.#.",
        "....#.",
    ])


def count_open(grid):
    return sum(1 for n in grid if not n.is_wall)


def test_kruskal_union_count_is_spanning_forest():
    """Each successful union adds one tree edge: open cells minus components."""
    grid = components_grid()
    steps = generate_steps(AlgorithmType.KRUSKALS, [], grid=grid, rng=random.Random(1))
    unions = [s for s in steps if s.type is StepType.PATH]
    # two path steps per accepted edge
    assert len(unions) // 2 == count_open(grid) - 3


def test_kruskal_examines_each_edge_with_two_compares():
    grid = Grid.from_strings(["...", "..."])
    steps = generate_steps(AlgorithmType.KRUSKALS, [], grid=grid, rng=random.Random(0))
    compares = [s for s in steps if s.type is StepType.COMPARE]
    # 2x3 grid has 7 adjacencies
    assert len(compares) == 14


def test_prims_reaches_every_cell_of_root_component():
    grid = Grid.from_strings([
        "S..#..",
        "...#..",
        "...#..",
    ])
    steps = generate_steps(AlgorithmType.PRIMS, [], grid=grid, rng=random.Random(3))
    visited = [(s.indices[0], s.indices[1]) for s in steps if s.type is StepType.VISIT]

    assert visited[0] == (0, 0)
    assert len(visited) == len(set(visited)) == 9
    assert all(c < 3 for _, c in visited)


def test_connected_components_labels_every_open_cell():
    grid = components_grid()
    steps = generate_steps(AlgorithmType.CONNECTED_COMPONENTS, [], grid=grid)
    visits = [s for s in steps if s.type is StepType.VISIT]
    sizes = [s.value for s in steps if s.type is StepType.UPDATE_AUX]

    assert len(visits) == count_open(grid)
    assert sorted(sizes) == [4, 4, 7]
    assert sum(sizes) == count_open(grid)


def test_connected_components_fully_walled_grid():
    grid = Grid.from_strings(["##", "##"])
    assert generate_steps(AlgorithmType.CONNECTED_COMPONENTS, [], grid=grid) == []


def build_graph(n, edges):
    g = DirectedGraph()
    for i in range(n):
        g.add_node(GraphNode(str(i), i))
    for a, b in edges:
        g.add_edge(str(a), str(b))
    return g


def component_ids(graph):
    """Last aux value written per node index."""
    ids = {}
    for step in scc(graph):
        if step.type is StepType.UPDATE_AUX:
            ids[step.indices[0]] = step.value
    return ids


def test_scc_known_graph():
    # 0 -> 1 -> 2 -> 0 is one cycle; 3 -> 4 -> 3 another; 2 -> 3 joins them one way
    graph = build_graph(6, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 3), (4, 5)])
    ids = component_ids(graph)

    assert ids[0] == ids[1] == ids[2]
    assert ids[3] == ids[4]
    assert len({ids[0], ids[3], ids[5]}) == 3
    assert all(v >= 0 for v in ids.values())


@pytest.mark.parametrize("seed", range(5))
def test_scc_matches_mutual_reachability(seed):
    graph = DirectedGraph.generate_random(10, rng=random.Random(seed))
    ids = component_ids(graph)
    reach = {node.id: graph.reachable_from(node.id) for node in graph.nodes}

    for a in graph.nodes:
        for b in graph.nodes:
            same = ids[int(a.id)] == ids[int(b.id)]
            mutual = b.id in reach[a.id] and a.id in reach[b.id]
            assert same == mutual, (a.id, b.id)


def test_scc_step_shape():
    graph = build_graph(3, [(0, 1), (1, 0)])
    steps = list(scc(graph))

    assert [s.type for s in steps[:3]] == [StepType.UPDATE_AUX] * 3
    assert all(s.value == -1 for s in steps[:3])
    found = [s for s in steps if s.type is StepType.FOUND]
    assert sorted(s.indices[0] for s in found) == [0, 1, 2]


def test_scc_empty_graph():
    assert list(scc(DirectedGraph())) == []


# ---------------------------------------------------------------------------
# Topological sort
# ---------------------------------------------------------------------------
def ranks(graph):
    """Final rank per node index, read back from the aux updates."""
    out = {}
    for step in topological_sort(graph):
        if step.type is StepType.UPDATE_AUX and step.value >= 0:
            out[step.indices[0]] = step.value
    return out


def drain(gen):
    while True:
        try:
            next(gen)
        except StopIteration as stop:
            return stop.value


def test_topological_sort_known_dag():
    graph = build_graph(5, [(3, 1), (1, 0), (3, 4), (4, 0), (2, 4)])
    order = drain(topological_sort(graph))

    assert sorted(order) == ["0", "1", "2", "3", "4"]
    pos = {node_id: i for i, node_id in enumerate(order)}
    for edge in graph.edges:
        assert pos[edge.source] < pos[edge.target]


@pytest.mark.parametrize("seed", range(5))
def test_topological_sort_on_generated_dags(seed):
    graph = DirectedGraph.generate_random(10, rng=random.Random(seed), acyclic=True)
    rank = ranks(graph)

    assert sorted(rank.values()) == list(range(10))
    index = graph.index_of()
    for edge in graph.edges:
        assert rank[index[edge.source]] < rank[index[edge.target]]


def test_topological_sort_rejects_cycles():
    graph = build_graph(4, [(0, 1), (1, 2), (2, 0), (2, 3)])
    steps = []
    gen = topological_sort(graph)
    while True:
        try:
            steps.append(next(gen))
        except StopIteration as stop:
            assert stop.value is None
            break

    assert not any(s.type is StepType.FOUND for s in steps)
    assert steps[-1].type is StepType.HIGHLIGHT and steps[-1].indices == ()


def test_acyclic_generator_keeps_backbone_connected():
    graph = DirectedGraph.generate_random(12, rng=random.Random(3), acyclic=True)
    assert len(graph) == 12
    assert len(graph.edges) >= 11

    undirected = {n.id: set() for n in graph.nodes}
    for e in graph.edges:
        undirected[e.source].add(e.target)
        undirected[e.target].add(e.source)
    seen, stack = {"0"}, ["0"]
    while stack:
        for nxt in undirected[stack.pop()]:
            if nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    assert len(seen) == 12


def test_topological_sort_through_state(state):
    state.set_algorithm(AlgorithmType.TOPOLOGICAL_SORT)
    state.generate_graph(8)
    steps = state.ds_action("run")

    assert sum(1 for s in steps if s.type is StepType.FOUND) == 8
    assert generate_steps(AlgorithmType.TOPOLOGICAL_SORT, []) == []
