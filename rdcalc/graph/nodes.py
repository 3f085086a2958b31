from enum import Enum
import logging
from rdcalc.calculator import evaluate
from rdcalc.diagnostics import render_error
from rdcalc.graph.state import State, build_initial_state
from rdcalc.guards.policy import apply_guards
from rdcalc.observability.telemetry import log_node_entry, log_node_exit
from rdcalc.parser.state import ErrorKind

logger = logging.getLogger(__name__)


class NodeName(str, Enum):
    INITIALIZE = "initialize"
    GUARD = "guard"
    EVALUATE = "evaluate"
    FINALIZE = "finalize"


def _enter(node: NodeName, state: State):
    if state.get("trace"):
        log_node_entry(node.value, state)


def _exit(node: NodeName, state: State):
    if state.get("trace"):
        log_node_exit(node.value, state)


def initialize_node(state: State) -> State:
    """Initialize the state."""
    state = build_initial_state(state["expression"], trace=state.get("trace", False))
    _enter(NodeName.INITIALIZE, state)
    _exit(NodeName.INITIALIZE, state)
    return state


def guard_node(state: State) -> State:
    """Check guards and set the refusal message if the expression is rejected."""
    _enter(NodeName.GUARD, state)
    passed, refusal_msg = apply_guards(state["expression"])
    if not passed:
        logger.warning(f"Expression refused by guard: {refusal_msg}")
        state["refusal"] = refusal_msg
    _exit(NodeName.GUARD, state)
    return state


def route_after_guard(state: State) -> str:
    """Skip evaluation for refused expressions."""
    if state.get("refusal"):
        return NodeName.FINALIZE.value
    return NodeName.EVALUATE.value


def evaluate_node(state: State) -> State:
    _enter(NodeName.EVALUATE, state)
    expression = state["expression"]

    value, kind, offset = evaluate(expression, trace=state.get("trace", False))
    if kind is ErrorKind.NONE:
        logger.info(f"Evaluated '{expression[:100]}' = {value}")
        state["result"] = value
        state["succeeded"] = True
    else:
        logger.warning(
            f"Evaluation of '{expression[:100]}' failed: {kind.value} at offset {offset}")
        state["error_kind"] = kind
        state["error_offset"] = offset

    _exit(NodeName.EVALUATE, state)
    return state


def finalize_node(state: State) -> State:
    """Turn the outcome into the text shown to the user."""
    _enter(NodeName.FINALIZE, state)
    if state["succeeded"]:
        state["final_answer"] = str(state["result"])
    elif state.get("refusal"):
        state["final_answer"] = state["refusal"]
    else:
        state["final_answer"] = render_error(
            state["expression"], state["error_offset"], state["error_kind"])
    _exit(NodeName.FINALIZE, state)
    return state
