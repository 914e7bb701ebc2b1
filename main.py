"""
main.py — Algorithm Visualizer Flask App
==========================================
JSON API in front of the step-generation and replay engines.  A renderer
(browser, notebook, test) polls /api/state and draws whatever it finds.

Routes:
  GET  /api/algorithms          – registry cards, optionally ?tag= or ?family=
  GET  /api/state               – full state snapshot + replay status
  GET  /api/pseudocode          – lines, active line, log text for the current step
  POST /api/config/algo         – select algorithm
  POST /api/config/speed        – playback speed 1..100
  POST /api/config/strings      – text/pattern (KMP, Rabin-Karp) or LCS pair
  POST /api/array/reset         – fresh initial data for the selected algorithm
  POST /api/grid/mouse          – wall painting: down / enter / up
  POST /api/grid/clear          – clear board or path
  POST /api/run                 – generate the log and start replaying it
  POST /api/stop                – cancel the replay
  POST /api/step/next           – apply one step
  POST /api/step/goto           – scrub to step N
  POST /api/step/play           – toggle pause / resume
  POST /api/tick                – timer tick: applies a step once the delay elapsed
  POST /api/tree/insert         – BST / AVL insert
  POST /api/tree/delete         – BST / AVL delete
  POST /api/tree/traverse       – start an inorder / preorder / postorder walk
  POST /api/tree/tick           – traversal timer tick
  POST /api/ds/<action>         – stack / queue / list / heap action, SCC / topological sort "run"
  POST /api/graph/generate      – new random directed graph
  POST /api/compare             – record two algorithms on the same input

State management:
  Live objects (VisualizerState, ReplayEngine, TraversalPlayer) cannot be
  serialised into the cookie, so the Flask session only carries a random
  id; the objects live in an in-process LRU table keyed by it, capped at
  MAX_WORKSPACES entries.

Configuration:
  Defaults below, overridable with VISUALIZER_* environment variables
  (VISUALIZER_SECRET_KEY, VISUALIZER_DEFAULT_SPEED, VISUALIZER_RNG_SEED,
  VISUALIZER_MAX_WORKSPACES).
"""

import logging
import random
import secrets
import threading
from collections import OrderedDict
from dataclasses import dataclass

from flask import Flask, jsonify, request, session

from algorithms import (AlgorithmType, Family, algorithms_by_family, algorithms_by_tag, get_algorithm, list_algorithms,
                        parse_algorithm)
from algorithms.describe import describe
from algorithms.pseudocode import line_for
from engine import (ReplayBusyError, ReplayEngine, ReplayState, Recorder, TraversalPlayer, VisualizerState,
                    DEFAULT_SPEED, compare)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.update(
    SECRET_KEY=secrets.token_hex(32),
    DEFAULT_SPEED=DEFAULT_SPEED,
    RNG_SEED=None,
    MAX_WORKSPACES=256,
)
app.config.from_prefixed_env("VISUALIZER")


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
@dataclass
class Workspace:
    state:     VisualizerState
    engine:    ReplayEngine
    traversal: TraversalPlayer


_workspaces: "OrderedDict[str, Workspace]" = OrderedDict()
_workspaces_lock = threading.Lock()


def _new_workspace() -> Workspace:
    seed  = app.config.get("RNG_SEED")
    state = VisualizerState(rng=random.Random(seed))
    state.set_speed(app.config.get("DEFAULT_SPEED", DEFAULT_SPEED))
    return Workspace(state=state, engine=ReplayEngine(state), traversal=TraversalPlayer(state))


def get_workspace() -> Workspace:
    """
    The caller's workspace, created on first use.  The table holds at
    most MAX_WORKSPACES entries; the least recently used one goes first.
    """
    sid = session.get("sid")
    with _workspaces_lock:
        if sid is not None and sid in _workspaces:
            _workspaces.move_to_end(sid)
            return _workspaces[sid]

        sid = secrets.token_hex(16)
        session["sid"] = sid
        ws = _workspaces[sid] = _new_workspace()
        logger.debug("New workspace %s", sid)

        limit = max(1, int(app.config.get("MAX_WORKSPACES", 256)))
        while len(_workspaces) > limit:
            old, _ = _workspaces.popitem(last=False)
            logger.info("Evicted workspace %s", old)
        return ws


def _body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _int_field(data: dict, name: str):
    value = data.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _ensure_idle(ws: Workspace) -> None:
    if ws.engine.is_live or ws.state.is_playing:
        raise ReplayBusyError("a replay is already running")


def _state_payload(ws: Workspace) -> dict:
    snap = ws.state.snapshot()
    snap["replay"] = {
        "status":     ws.engine.status.value,
        "position":   ws.engine.position,
        "totalSteps": len(ws.engine.steps),
        "delayMs":    ws.engine.delay_ms,
    }
    return snap


@app.errorhandler(ReplayBusyError)
def handle_busy(err):
    return jsonify({"error": str(err)}), 409


# ---------------------------------------------------------------------------
# API: Catalogue & State
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    tag, family = request.args.get("tag"), request.args.get("family")
    if tag:
        cards = algorithms_by_tag(tag)
    elif family:
        try:
            cards = algorithms_by_family(Family(family))
        except ValueError:
            return jsonify({"error": f"Unknown family {family!r}"}), 404
    else:
        cards = list_algorithms()
    return jsonify([info.to_dict() for info in cards])


@app.route("/api/state")
def api_state():
    return jsonify(_state_payload(get_workspace()))


@app.route("/api/pseudocode")
def api_pseudocode():
    ws   = get_workspace()
    info = get_algorithm(ws.state.algorithm)
    idx  = ws.state.current_step
    step = ws.engine.steps[idx] if 0 <= idx < len(ws.engine.steps) else None
    return jsonify({
        "label":       info.label,
        "lines":       list(info.pseudocode),
        "currentLine": line_for(info.key, step) if step else -1,
        "log":         describe(step, info.key) if step else "",
    })


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    ws   = get_workspace()
    algo = parse_algorithm(_body().get("algorithm", ""))
    if algo is None:
        return jsonify({"error": "Unknown algorithm"}), 404
    _ensure_idle(ws)
    ws.state.set_algorithm(algo)
    return jsonify(_state_payload(ws))


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    ws    = get_workspace()
    speed = _int_field(_body(), "speed")
    if speed is None:
        return jsonify({"error": "speed must be an integer"}), 400
    ws.state.set_speed(speed)
    return jsonify({"speed": ws.state.speed, "delayMs": ws.engine.delay_ms})


@app.route("/api/config/strings", methods=["POST"])
def api_config_strings():
    ws   = get_workspace()
    data = _body()
    first, second = data.get("first"), data.get("second")
    if not isinstance(first, str) or not isinstance(second, str):
        return jsonify({"error": "first and second must be strings"}), 400
    _ensure_idle(ws)
    ws.state.set_strings(first, second)
    return jsonify(_state_payload(ws))


@app.route("/api/array/reset", methods=["POST"])
def api_array_reset():
    ws = get_workspace()
    _ensure_idle(ws)
    ws.state.reset_array()
    return jsonify(_state_payload(ws))


# ---------------------------------------------------------------------------
# API: Grid
# ---------------------------------------------------------------------------
@app.route("/api/grid/mouse", methods=["POST"])
def api_grid_mouse():
    ws    = get_workspace()
    data  = _body()
    event = data.get("event")
    if event == "up":
        ws.state.mouse_up()
        return jsonify({"ok": True})

    row, col = _int_field(data, "row"), _int_field(data, "col")
    if event not in ("down", "enter") or row is None or col is None:
        return jsonify({"error": "Expected event down/enter/up with integer row and col"}), 400
    if event == "down":
        ws.state.mouse_down(row, col)
    else:
        ws.state.mouse_enter(row, col)
    node = ws.state.grid[(row, col)] if ws.state.grid.in_bounds(row, col) else None
    return jsonify({"cell": node.to_dict() if node else None})


@app.route("/api/grid/clear", methods=["POST"])
def api_grid_clear():
    ws   = get_workspace()
    what = _body().get("what", "board")
    if what not in ("board", "path"):
        return jsonify({"error": "what must be 'board' or 'path'"}), 400
    _ensure_idle(ws)
    if what == "board":
        ws.state.clear_board()
    else:
        ws.state.clear_path()
    return jsonify(_state_payload(ws))


# ---------------------------------------------------------------------------
# API: Run & Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    ws = get_workspace()
    _ensure_idle(ws)
    steps = ws.state.prepare_run()
    ws.engine.start(steps)
    if _body().get("paused"):
        ws.engine.pause()
    return jsonify({
        "totalSteps": len(steps),
        "status":     ws.engine.status.value,
        "delayMs":    ws.engine.delay_ms,
    })


@app.route("/api/stop", methods=["POST"])
def api_stop():
    ws = get_workspace()
    ws.engine.stop()
    ws.traversal.stop()
    return jsonify(_state_payload(ws))


@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    ws = get_workspace()
    if not ws.engine.is_live:
        return jsonify({"error": "No replay in progress"}), 400
    ws.engine.pause()
    applied = ws.engine.step()
    return jsonify({"applied": applied, "currentStep": ws.state.current_step,
                    "status": ws.engine.status.value})


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    ws    = get_workspace()
    index = _int_field(_body(), "index")
    if index is None or not ws.engine.seek(index):
        return jsonify({"error": "Invalid step index"}), 400
    return jsonify(_state_payload(ws))


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    ws = get_workspace()
    if ws.engine.status is ReplayState.RUNNING:
        ws.engine.pause()
    else:
        ws.engine.resume()
    return jsonify({"status": ws.engine.status.value})


@app.route("/api/tick", methods=["POST"])
def api_tick():
    ws = get_workspace()
    applied = ws.engine.tick()
    return jsonify({"applied": applied, "currentStep": ws.state.current_step,
                    "status": ws.engine.status.value})


# ---------------------------------------------------------------------------
# API: Trees
# ---------------------------------------------------------------------------
def _tree_value(ws: Workspace):
    if ws.state.algorithm not in (AlgorithmType.BST, AlgorithmType.AVL):
        return None, (jsonify({"error": "Select BST or AVL first"}), 400)
    value = _int_field(_body(), "value")
    if value is None:
        return None, (jsonify({"error": "value must be an integer"}), 400)
    _ensure_idle(ws)
    return value, None


@app.route("/api/tree/insert", methods=["POST"])
def api_tree_insert():
    ws = get_workspace()
    value, error = _tree_value(ws)
    if error:
        return error
    ws.state.tree_insert(value)
    return jsonify(_state_payload(ws))


@app.route("/api/tree/delete", methods=["POST"])
def api_tree_delete():
    ws = get_workspace()
    value, error = _tree_value(ws)
    if error:
        return error
    ws.state.tree_delete(value)
    return jsonify(_state_payload(ws))


@app.route("/api/tree/traverse", methods=["POST"])
def api_tree_traverse():
    ws   = get_workspace()
    kind = _body().get("kind", "inorder")
    if not ws.traversal.start(kind):
        return jsonify({"error": "Cannot start traversal"}), 400
    return jsonify(_state_payload(ws))


@app.route("/api/tree/tick", methods=["POST"])
def api_tree_tick():
    ws = get_workspace()
    advanced = ws.traversal.tick()
    return jsonify({
        "advanced":        advanced,
        "activeNodeId":    ws.state.active_node_id,
        "visitedNodeIds":  list(ws.state.visited_node_ids),
        "traversalResult": ws.state.traversal_result,
    })


# ---------------------------------------------------------------------------
# API: Data structures & graph
# ---------------------------------------------------------------------------
@app.route("/api/ds/<action>", methods=["POST"])
def api_ds(action: str):
    ws   = get_workspace()
    info = get_algorithm(ws.state.algorithm)
    if action not in info.operations:
        return jsonify({"error": f"{info.label} has no action {action!r}"}), 400
    _ensure_idle(ws)
    steps = ws.state.ds_action(action, _int_field(_body(), "value"))
    ws.engine.start(steps)
    return jsonify({"totalSteps": len(steps), "status": ws.engine.status.value})


@app.route("/api/graph/generate", methods=["POST"])
def api_graph_generate():
    ws = get_workspace()
    num_nodes = _int_field(_body(), "nodes")
    if num_nodes is not None and num_nodes < 1:
        return jsonify({"error": "nodes must be positive"}), 400
    _ensure_idle(ws)
    ws.state.generate_graph(num_nodes)
    return jsonify(ws.state.graph.to_dict())


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    ws   = get_workspace()
    data = _body()
    left, right = get_algorithm(data.get("left", "")), get_algorithm(data.get("right", ""))
    if left is None or right is None:
        return jsonify({"error": "Unknown algorithm"}), 404

    seed = ws.state.rng.randrange(2 ** 32)
    recorders = []
    for info in (left, right):
        rec = Recorder()
        strings = ws.state.lcs_strings if info.key is AlgorithmType.LCS else (ws.state.text, ws.state.pattern)
        rec.record(info.key, ws.state.array, grid=ws.state.grid, strings=strings,
                   rng=random.Random(seed))
        recorders.append(rec)
    return jsonify(compare(*recorders).to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Algorithm Visualizer on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)
