"""
graph.py — Directed Graph Container & Generator
================================================
The graph behind the strongly-connected-components and topological-sort
views.

Responsibilities:
  1. Node / edge storage                    (add / get)
  2. Adjacency queries                      (successors, transpose)
  3. Random generation                      (spanning backbone + extras)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes are kept in insertion order; algorithms address them by that
    position so step indices stay small integers.
  - Edges are directed and carry node ids, not node references.
  - `_adj` is maintained incrementally so successor queries are O(degree).
"""

import math
import random
from typing import Dict, List, Optional, Set, Tuple

from model.presets import GRAPH_NODE_RANGE, GRAPH_WEIGHT_RANGE, GRAPH_CANVAS


# ---------------------------------------------------------------------------
# GraphNode / GraphEdge
# ---------------------------------------------------------------------------
class GraphNode:
    __slots__ = ("id", "value", "x", "y")

    def __init__(self, node_id: str, value: int, x: float = 0.0, y: float = 0.0):
        self.id:    str   = node_id
        self.value: int   = value
        self.x:     float = x
        self.y:     float = y

    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "GraphNode":
        return cls(data["id"], data["value"], data.get("x", 0.0), data.get("y", 0.0))

    def __repr__(self) -> str:
        return f"GraphNode({self.id!r})"


class GraphEdge:
    __slots__ = ("source", "target", "weight")

    def __init__(self, source: str, target: str, weight: Optional[int] = None):
        self.source: str           = source
        self.target: str           = target
        self.weight: Optional[int] = weight

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "GraphEdge":
        return cls(data["source"], data["target"], data.get("weight"))

    def __repr__(self) -> str:
        return f"GraphEdge({self.source!r} → {self.target!r})"


# ---------------------------------------------------------------------------
# DirectedGraph
# ---------------------------------------------------------------------------
class DirectedGraph:
    """
    Attributes:
        nodes : [GraphNode, …] in insertion order
        edges : [GraphEdge, …]
        _adj  : {node_id: [successor_id, …]}
    """

    def __init__(self):
        self.nodes: List[GraphNode]      = []
        self.edges: List[GraphEdge]      = []
        self._adj:  Dict[str, List[str]] = {}

    # ==================================================================
    # CRUD
    # ==================================================================
    def add_node(self, node: GraphNode) -> GraphNode:
        self.nodes.append(node)
        self._adj.setdefault(node.id, [])
        return node

    def add_edge(self, source: str, target: str, weight: Optional[int] = None) -> GraphEdge:
        edge = GraphEdge(source, target, weight)
        self.edges.append(edge)
        self._adj.setdefault(source, []).append(target)
        return edge

    def has_edge(self, source: str, target: str) -> bool:
        return target in self._adj.get(source, [])

    # ==================================================================
    # QUERIES
    # ==================================================================
    def index_of(self) -> Dict[str, int]:
        return {n.id: i for i, n in enumerate(self.nodes)}

    def successors(self, node_id: str) -> List[str]:
        return list(self._adj.get(node_id, []))

    def transpose(self) -> "DirectedGraph":
        t = DirectedGraph()
        for n in self.nodes:
            t.add_node(GraphNode(n.id, n.value, n.x, n.y))
        for e in self.edges:
            t.add_edge(e.target, e.source, e.weight)
        return t

    def reachable_from(self, node_id: str) -> Set[str]:
        seen  = {node_id}
        stack = [node_id]
        while stack:
            cur = stack.pop()
            for nxt in self._adj.get(cur, []):
                if nxt not in seen:
                    seen.add(nxt)
                    stack.append(nxt)
        return seen

    def __len__(self) -> int:
        return len(self.nodes)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DirectedGraph":
        g = cls()
        for nd in data.get("nodes", []):
            g.add_node(GraphNode.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(ed["source"], ed["target"], ed.get("weight"))
        return g

    # ==================================================================
    # GENERATOR
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        num_nodes: Optional[int] = None,
        rng: Optional[random.Random] = None,
        weight_range: Tuple[int, int] = GRAPH_WEIGHT_RANGE,
        canvas: Tuple[int, int] = GRAPH_CANVAS,
        acyclic: bool = False,
    ) -> "DirectedGraph":
        """
        Random directed graph.  Every node i > 0 first receives an edge
        from some earlier node (spanning backbone, so nothing is
        isolated), then random extra edges are added until there are
        about 1.5 × n edges.  No self-loops, no parallel edges.

        With `acyclic`, nodes get a hidden random rank and every edge
        points from the lower rank to the higher one, so the result is a
        DAG whose topological order is not simply the node order.
        """
        rng = rng or random.Random()
        n   = num_nodes if num_nodes is not None else rng.randint(*GRAPH_NODE_RANGE)
        g   = cls()

        canvas_w, canvas_h = canvas
        cx, cy = canvas_w / 2, canvas_h / 2
        radius = min(canvas_w, canvas_h) * 0.35
        for i in range(n):
            angle = 2 * math.pi * i / max(n, 1)
            g.add_node(GraphNode(
                node_id=str(i),
                value=i,
                x=round(cx + radius * math.cos(angle), 2),
                y=round(cy + radius * math.sin(angle), 2),
            ))

        rank = list(range(n))
        if acyclic:
            rng.shuffle(rank)

        def orient(a: int, b: int) -> Tuple[str, str]:
            if acyclic and rank[a] > rank[b]:
                a, b = b, a
            return str(a), str(b)

        # spanning backbone
        for i in range(1, n):
            j = rng.randrange(i)
            g.add_edge(*orient(j, i), rng.randint(*weight_range))

        # extras
        target_edges = int(n * 1.5)
        attempts     = 0
        while len(g.edges) < target_edges and attempts < n * n * 4:
            attempts += 1
            a, b = rng.randrange(n), rng.randrange(n)
            source, target = orient(a, b)
            if a == b or g.has_edge(source, target):
                continue
            g.add_edge(source, target, rng.randint(*weight_range))

        return g
