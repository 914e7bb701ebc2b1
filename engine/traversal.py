"""
traversal.py — Tree Traversal Player
======================================
A miniature replay loop for inorder / preorder / postorder walks.  It is
separate from the step log: the walk is just a list of node ids, played
one node per TRAVERSAL_DELAY_MS.

Per node:
    node becomes active, its value is appended to the result string
    …delay…
    node joins the visited list, the next node becomes active
"""

import logging
import time
from typing import Callable, Dict, List, Optional

from algorithms.tree.traversal import TRAVERSALS
from model.presets import TRAVERSAL_DELAY_MS

logger = logging.getLogger(__name__)


class TraversalPlayer:

    def __init__(self, state, clock: Callable[[], float] = time.monotonic,
                 delay_ms: int = TRAVERSAL_DELAY_MS):
        self.state      = state
        self.delay_ms   = delay_ms
        self.order:     List[str]       = []
        self.index:     int             = -1
        self._values:   Dict[str, int]  = {}
        self._result:   List[int]       = []
        self._clock     = clock
        self._last_tick = 0.0

    @property
    def is_active(self) -> bool:
        return 0 <= self.index < len(self.order)

    def start(self, kind: str) -> bool:
        """Begin a walk.  False for an unknown kind, an empty tree or a busy state."""
        walk = TRAVERSALS.get(kind)
        root = self.state.tree_root
        if walk is None or root is None or self.state.is_playing:
            return False

        self.order   = walk(root)
        self._values = {node.id: node.value for node in root}
        self._result = []
        self.state.visited_node_ids = []
        self.state.traversal_result = ""
        self.state.is_playing = True
        logger.debug("%s traversal over %d nodes", kind, len(self.order))

        self.index = 0
        self._activate()
        self._last_tick = self._clock()
        return True

    def advance(self) -> bool:
        """Finish the active node and move to the next.  False once done."""
        if not self.is_active:
            return False
        self.state.visited_node_ids.append(self.order[self.index])
        self.index += 1
        if self.is_active:
            self._activate()
        else:
            self.state.active_node_id = None
            self.state.is_playing = False
        self.state.notify()
        return True

    def stop(self) -> bool:
        """Abandon the walk and release the play flag.  False when none is running."""
        if not self.is_active:
            return False
        logger.debug("Traversal stopped at node %d of %d", self.index, len(self.order))
        self.order = []
        self.index = -1
        self._result = []
        self.state.active_node_id = None
        self.state.visited_node_ids = []
        self.state.traversal_result = ""
        self.state.is_playing = False
        self.state.notify()
        return True

    def tick(self, now: Optional[float] = None) -> bool:
        if not self.is_active:
            return False
        now = self._clock() if now is None else now
        if (now - self._last_tick) * 1000 < self.delay_ms:
            return False
        self._last_tick = now
        return self.advance()

    def run(self, sleep: Callable[[float], None] = time.sleep) -> None:
        while self.is_active:
            sleep(self.delay_ms / 1000)
            self.advance()

    def _activate(self) -> None:
        node_id = self.order[self.index]
        self.state.active_node_id = node_id
        self._result.append(self._values[node_id])
        self.state.traversal_result = " -> ".join(str(v) for v in self._result)
        self.state.notify()
