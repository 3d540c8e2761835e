"""
main.py — Graph Tutor Step-Trace API (Flask)
=============================================
JSON API in front of the step-trace engine.

Routes:
  GET  /api/algorithms                       – algorithm catalogue
  GET  /api/algorithms/<key>/default-graph   – built-in sample graph
  POST /api/run                              – run an algorithm, return every step
  POST /api/step/next                        – advance one step
  POST /api/step/prev                        – rewind one step
  POST /api/step/goto                        – jump to step N (0-based)
  GET  /api/state                            – current session state
  POST /api/config/speed                     – playback speed preset
  POST /api/compare                          – run two algorithms on one graph

State management:
  The Flask session holds only the run PARAMETERS (algorithm, start
  vertex, graph dict) plus the cursor position.  Runs are deterministic,
  so navigation re-derives the step list from those parameters instead
  of storing it in the cookie.
"""

from flask import Flask, jsonify, request, session

from algorithms import get_algorithm, list_algorithms
from config import settings
from engine import SPEED_PRESETS, Recorder, Stepper, compare
from graph import resolve_graph
from utils.logging import get_logger, setup_logging

log = get_logger(__name__)

setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

app = Flask(__name__)
app.secret_key = settings.SECRET_KEY


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
@app.errorhandler(ValueError)
def handle_value_error(exc: ValueError):
    log.info("bad_request", path=request.path, error=str(exc))
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_payload() -> dict:
    return request.get_json(silent=True) or {}


def get_state() -> dict:
    return {
        "algorithm":    session.get("algorithm"),
        "start_vertex": session.get("start_vertex"),
        "current_step": session.get("current_step", 0),
        "total_steps":  session.get("total_steps", 0),
        "speed":        session.get("speed", settings.DEFAULT_SPEED),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def load_stepper() -> Stepper:
    """Re-derive the session's run and position a Stepper on the saved index."""
    if not session.get("algorithm"):
        raise ValueError("No run in progress; POST /api/run first")
    rec = Recorder()
    rec.run(session["algorithm"], session.get("start_vertex"), session.get("graph"))
    stepper = Stepper(rec.steps, speed=session.get("speed", settings.DEFAULT_SPEED))
    stepper.goto_step(session.get("current_step", 0))
    return stepper


def step_response(stepper: Stepper):
    set_state(current_step=stepper.current_idx)
    return jsonify({
        "step":         stepper.current_step.to_dict(),
        "current_step": stepper.current_idx,
        "total_steps":  stepper.total_steps,
        "is_final":     stepper.current_step.is_final,
    })


# ---------------------------------------------------------------------------
# API: Catalogue
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


@app.route("/api/algorithms/<key>/default-graph")
def api_default_graph(key: str):
    info = get_algorithm(key)
    if info is None:
        return jsonify({"error": f"Unknown algorithm: {key}"}), 404
    return jsonify({"graph": info.default_graph().to_dict()})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data = get_payload()
    algo_key = data.get("algorithm", "bfs")
    info = get_algorithm(algo_key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {algo_key}")

    start = data.get("startVertex")
    graph = resolve_graph(data.get("graph"), info.default_graph)
    if not info.supports(graph) and not data.get("force"):
        raise ValueError(
            f"{info.label} does not support {graph.graph_type} graphs "
            f"(supported: {', '.join(info.supported_graph_types)})"
        )

    rec = Recorder()
    rec.run(info.key, start, graph)
    exported = rec.export()

    session["graph"] = data.get("graph")
    set_state(
        algorithm=info.key,
        start_vertex=start,
        current_step=0,
        total_steps=len(rec.steps),
    )

    return jsonify({
        "algorithm":    info.key,
        "start_vertex": exported["start_vertex"],
        "graph":        exported["graph"],
        "steps":        exported["steps"],
        "summary":      exported["summary"],
        "current_step": 0,
        "total_steps":  len(rec.steps),
    })


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    stepper = load_stepper()
    if not stepper.next_step():
        return jsonify({"error": "Already at last step"}), 400
    return step_response(stepper)


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    stepper = load_stepper()
    if not stepper.prev_step():
        return jsonify({"error": "Already at first step"}), 400
    return step_response(stepper)


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    stepper = load_stepper()
    idx = get_payload().get("index", 0)
    if not isinstance(idx, int) or not stepper.goto_step(idx):
        return jsonify({"error": "Invalid step index"}), 400
    return step_response(stepper)


@app.route("/api/state")
def api_state():
    return jsonify(get_state())


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    speed = get_payload().get("speed", settings.DEFAULT_SPEED)
    if speed not in SPEED_PRESETS:
        raise ValueError(f"Unknown speed preset: {speed}")
    set_state(speed=speed)
    return jsonify({"speed": speed, "seconds_per_step": SPEED_PRESETS[speed]})


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = get_payload()
    left_info = get_algorithm(data.get("left", ""))
    right_info = get_algorithm(data.get("right", ""))
    if left_info is None or right_info is None:
        raise ValueError("Both 'left' and 'right' must name known algorithms")

    graph = resolve_graph(data.get("graph"), left_info.default_graph)
    start = data.get("startVertex")

    left, right = Recorder(), Recorder()
    left.run(left_info.key, start, graph)
    right.run(right_info.key, start, graph)
    return jsonify(compare(left, right).to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    log.info("server_starting", host=settings.HOST, port=settings.PORT)
    app.run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG)
