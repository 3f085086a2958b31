"""CLI interface for the evaluator."""
import sys
from rdcalc.graph.build_graph import build_graph
from rdcalc.graph.state import State, build_initial_state
from rdcalc.config import LOG_LEVEL, SHOW_TRACE
from rdcalc.observability.telemetry import format_trace_summary, clear_trace
from rdcalc.observability.logging_config import configure_logging


def run_expression(graph, expression: str, trace: bool = SHOW_TRACE) -> State:
    """Evaluate one expression through the pipeline, printing the trace if asked."""
    clear_trace()  # Clear trace for fresh run
    result = graph.invoke(build_initial_state(expression, trace=trace))
    if trace:
        print(format_trace_summary())
    return result


def interactive(graph):
    while True:
        try:
            expression = input("Enter expression (or 'q' to quit): ")
        except EOFError:
            break
        if expression.strip().lower() == "q":
            break
        print(run_expression(graph, expression)["final_answer"])


def main(argv=None) -> int:
    # Configure logging
    configure_logging(LOG_LEVEL)
    args = sys.argv[1:] if argv is None else argv

    graph = build_graph()
    if not args:
        interactive(graph)
        return 0

    # Stop at the first expression that fails
    for expression in args:
        result = run_expression(graph, expression)
        print(result["final_answer"])
        if not result["succeeded"]:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
