"""
main.py — Step Debugger JSON API
=================================
The web server in front of the engine.

Routes:
  GET  /api/algorithms         – registry listing (metadata + pseudocode)
  POST /api/generate           – build a trace from {algorithm, array, target}
  POST /api/array/random       – random input {size, seed}
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/step/reset         – back to step 0
  POST /api/step/play          – start playback
  POST /api/step/pause         – stop playback
  POST /api/config/speed       – playback speed preset
  GET  /api/state              – current session state and step
  POST /api/compare            – run two algorithms on one input
  POST /api/merge-tree         – merge-sort recursion tree
  POST /api/quick-tree         – quick-sort partition tree

State management:
  Only the inputs live in the Flask session:
    • algorithm
    • array_input / target_input
    • cursor / state / speed
  Traces are deterministic, so each request regenerates the trace from
  the inputs and restores the cursor.
"""

import logging
import secrets

from flask import Flask, jsonify, request, session

from algorithms import list_algorithms
from algorithms.merge_tree import build_merge_tree
from algorithms.quick_tree import build_quick_tree
from engine import SPEED_PRESETS, Comparison, DebuggerContext, StepperState
from engine.context import (
    DEFAULT_ALGORITHM,
    DEFAULT_ARRAY,
    DEFAULT_TARGET,
    parse_array_input,
    parse_target,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["SECRET_KEY"] = secrets.token_hex(32)
app.config.from_prefixed_env("DEBUGGER")


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_state():
    """Return the stored session inputs as a dict."""
    return {
        "algorithm":    session.get("algorithm", DEFAULT_ALGORITHM),
        "array_input":  session.get("array_input", DEFAULT_ARRAY),
        "target_input": session.get("target_input", DEFAULT_TARGET),
        "generated":    session.get("generated", False),
        "cursor":       session.get("cursor", 0),
        "state":        session.get("state", StepperState.IDLE.value),
        "speed":        session.get("speed", "medium"),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def load_context() -> DebuggerContext:
    """Rebuild the session's DebuggerContext, trace included."""
    state = get_state()
    ctx = DebuggerContext(state["algorithm"], state["array_input"], state["target_input"])
    ctx.stepper.set_speed(state["speed"])
    if state["generated"] and ctx.generate():
        ctx.restore(state["cursor"], state["state"])
    return ctx


def save_context(ctx: DebuggerContext):
    set_state(
        algorithm=ctx.algorithm,
        array_input=ctx.array_input,
        target_input=ctx.target_input,
        generated=bool(ctx.steps),
        cursor=ctx.stepper.current_idx,
        state=ctx.stepper.state.value,
    )


def json_body():
    """Parsed JSON object from the request, or None if it is not one."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def bad_request(message: str):
    return jsonify({"error": message}), 400


def as_text(value) -> str:
    """Accept either "1,2,3" or [1, 2, 3] for array fields."""
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return "" if value is None else str(value)


def session_payload(ctx: DebuggerContext, **extra):
    payload = ctx.to_dict()
    payload["speed"] = get_state()["speed"]
    payload.update(extra)
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


# ---------------------------------------------------------------------------
# API: Generate
# ---------------------------------------------------------------------------
@app.route("/api/generate", methods=["POST"])
def api_generate():
    data = json_body()
    if data is None:
        return bad_request("Expected a JSON object")

    ctx = load_context()
    if "algorithm" in data:
        try:
            ctx.select_algorithm(data["algorithm"])
        except ValueError as e:
            return bad_request(str(e))
    if "array" in data:
        ctx.array_input = as_text(data["array"])
    if "target" in data:
        ctx.target_input = as_text(data["target"])

    generated = ctx.generate()
    save_context(ctx)
    logger.info("generate %s: %d steps", ctx.algorithm, len(ctx.steps))
    return session_payload(ctx, generated=generated, steps=[s.to_dict() for s in ctx.steps])


@app.route("/api/array/random", methods=["POST"])
def api_array_random():
    data = json_body() or {}
    try:
        size = int(data.get("size", 7))
    except (TypeError, ValueError):
        return bad_request("size must be an integer")

    seed = data.get("seed")
    if seed is not None and not isinstance(seed, int):
        return bad_request("seed must be an integer")

    ctx = load_context()
    values = ctx.randomize(size, seed)
    save_context(ctx)
    return session_payload(ctx, array=values)


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    ctx = load_context()
    moved = ctx.stepper.next_step()
    save_context(ctx)
    return session_payload(ctx, moved=moved)


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    ctx = load_context()
    moved = ctx.stepper.prev_step()
    save_context(ctx)
    return session_payload(ctx, moved=moved)


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    data = json_body()
    if data is None:
        return bad_request("Expected a JSON object")
    try:
        idx = int(data.get("index", 0))
    except (TypeError, ValueError):
        return bad_request("index must be an integer")

    ctx = load_context()
    moved = ctx.stepper.seek(idx)
    save_context(ctx)
    return session_payload(ctx, moved=moved)


@app.route("/api/step/reset", methods=["POST"])
def api_step_reset():
    ctx = load_context()
    ctx.stepper.reset()
    save_context(ctx)
    return session_payload(ctx)


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    ctx = load_context()
    ctx.stepper.play()
    save_context(ctx)
    return session_payload(ctx, interval_s=ctx.stepper.speed)


@app.route("/api/step/pause", methods=["POST"])
def api_step_pause():
    ctx = load_context()
    ctx.stepper.pause()
    save_context(ctx)
    return session_payload(ctx)


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    data = json_body() or {}
    speed = data.get("speed", "medium")
    if speed not in SPEED_PRESETS:
        return bad_request(f"Unknown speed: {speed}")
    set_state(speed=speed)
    return jsonify({"speed": speed, "interval_s": SPEED_PRESETS[speed]})


@app.route("/api/state", methods=["GET"])
def api_state():
    return session_payload(load_context())


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = json_body()
    if data is None:
        return bad_request("Expected a JSON object")

    array = parse_array_input(as_text(data.get("array", DEFAULT_ARRAY)))
    target = parse_target(as_text(data["target"]) if "target" in data else None, array)
    try:
        interval_ms = float(data.get("interval_ms", 1200))
        comparison = Comparison(
            data.get("left", "bubble-sort"),
            data.get("right", "selection-sort"),
            interval_ms=interval_ms,
        )
        frame_ms = float(data.get("frame_ms", 1000 / 60))
        if not comparison.generate(array, target):
            return bad_request("Array must contain at least one integer")
        comparison.scheduler.simulate(frame_ms=frame_ms)
    except (TypeError, ValueError) as e:
        return bad_request(str(e))

    logger.info(
        "compare %s vs %s on %d values",
        comparison.left.algorithm, comparison.right.algorithm, len(array),
    )
    return jsonify(comparison.to_dict())


@app.route("/api/merge-tree", methods=["POST"])
def api_merge_tree():
    data = json_body()
    if data is None:
        return bad_request("Expected a JSON object")
    values = parse_array_input(as_text(data.get("array", DEFAULT_ARRAY)))
    if not values:
        return bad_request("Array must contain at least one integer")
    return jsonify({"tree": build_merge_tree(values).to_dict()})


@app.route("/api/quick-tree", methods=["POST"])
def api_quick_tree():
    data = json_body()
    if data is None:
        return bad_request("Expected a JSON object")
    values = parse_array_input(as_text(data.get("array", DEFAULT_ARRAY)))
    if not values:
        return bad_request("Array must contain at least one integer")
    return jsonify(build_quick_tree(values).to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Sorting & Searching Step Debugger on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)
