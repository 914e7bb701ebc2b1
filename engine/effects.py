"""
effects.py — Applying One Step to the Live State
=================================================
`apply_step` is the only place a step touches the state store.  Each step
type maps to exactly one mutation; steps must be applied strictly in
their recorded order.

    compare        highlight ← indices, swap marks cleared
    swap           array[i] ⇄ array[j], swap marks ← indices
    overwrite      array[i] ← value (if any), highlight ← indices
    highlight      char state (string matchers) or highlight ← indices
    visit / path   grid cell status flip
    wall           grid cell becomes a wall (never start / finish)
    found / target terminal marks
    replace        whole array swapped for new_array
    updateAux      aux[i] ← value, growing aux as needed
    moveToBucket   value appended to bucket, source index hidden
    restore        array[i] ← value, bucket head dropped, index shown
    updateTable    DP cell write

`finish_run` and `cancel_run` are the two ways a replay ends.
"""

from algorithms.step import AnimationStep, StepType
from model.grid import NodeStatus


def apply_step(state, step: AnimationStep) -> None:
    t, idx = step.type, step.indices

    if t is StepType.COMPARE:
        state.highlight_indices = list(idx)
        state.swap_indices = []

    elif t is StepType.SWAP:
        i, j = idx
        a = state.array
        if 0 <= i < len(a) and 0 <= j < len(a):
            a[i], a[j] = a[j], a[i]
        state.swap_indices = list(idx)
        state.highlight_indices = []

    elif t is StepType.OVERWRITE:
        if step.value is not None and 0 <= idx[0] < len(state.array):
            state.array[idx[0]] = step.value
        state.highlight_indices = list(idx)
        state.swap_indices = []

    elif t is StepType.HIGHLIGHT:
        if step.value is not None and idx:
            state.char_states[idx[0]] = step.value
        else:
            state.highlight_indices = list(idx)

    elif t in (StepType.VISIT, StepType.PATH):
        node = state.grid[(idx[0], idx[1])]
        node.is_visited = True
        if not (node.is_start or node.is_finish):
            node.status = NodeStatus.VISITED if t is StepType.VISIT else NodeStatus.PATH

    elif t is StepType.WALL:
        node = state.grid[(idx[0], idx[1])]
        if not (node.is_start or node.is_finish):
            node.set_wall(True)

    elif t is StepType.FOUND:
        state.found_indices = list(idx)
        state.highlight_indices = []
        state.swap_indices = []

    elif t is StepType.TARGET:
        state.target_indices = list(idx)

    elif t is StepType.REPLACE:
        if step.new_array is not None:
            state.array = list(step.new_array)

    elif t is StepType.UPDATE_AUX:
        i = idx[0]
        if len(state.aux_array) <= i:
            state.aux_array.extend([0] * (i + 1 - len(state.aux_array)))
        state.aux_array[i] = step.value

    elif t is StepType.MOVE_TO_BUCKET:
        b = step.bucket_index
        while len(state.buckets) <= b:
            state.buckets.append([])
        state.buckets[b].append(step.value)
        state.hidden_indices.add(idx[0])

    elif t is StepType.RESTORE:
        i = idx[0]
        if 0 <= i < len(state.array):
            state.array[i] = step.value
        b = step.bucket_index
        if b is not None and b < len(state.buckets) and state.buckets[b]:
            state.buckets[b].pop(0)
        state.hidden_indices.discard(i)

    elif t is StepType.UPDATE_TABLE:
        if state.dp_table is not None:
            state.dp_table.set(step.row, step.col, step.val)


def clear_marks(state) -> None:
    state.highlight_indices = []
    state.swap_indices = []


def finish_run(state) -> None:
    """Natural completion: transient marks go, terminal colouring stays."""
    clear_marks(state)
    state.is_playing = False
    state.is_sorted = True


def cancel_run(state) -> None:
    """Cancellation: applied mutations persist, every overlay is dropped."""
    clear_marks(state)
    state.found_indices = []
    state.target_indices = []
    state.aux_array = []
    state.buckets = [[] for _ in range(len(state.buckets) or 10)]
    state.hidden_indices = set()
    state.is_playing = False
    state.is_sorted = False
