"""Build the LangGraph evaluation pipeline."""
from langgraph.graph import StateGraph, END, START
from rdcalc.graph.state import State
from rdcalc.graph.nodes import (
    NodeName, route_after_guard,
    initialize_node, guard_node,
    evaluate_node, finalize_node
)


def build_graph():
    """Build and return the compiled evaluation graph."""
    graph = StateGraph(State)

    graph.add_node(NodeName.INITIALIZE.value, initialize_node)
    graph.add_node(NodeName.GUARD.value, guard_node)
    graph.add_node(NodeName.EVALUATE.value, evaluate_node)
    graph.add_node(NodeName.FINALIZE.value, finalize_node)

    graph.add_edge(START, NodeName.INITIALIZE.value)
    graph.add_edge(NodeName.INITIALIZE.value, NodeName.GUARD.value)
    graph.add_conditional_edges(
        NodeName.GUARD.value,
        route_after_guard,
        {
            NodeName.EVALUATE.value: NodeName.EVALUATE.value,
            NodeName.FINALIZE.value: NodeName.FINALIZE.value,
        }
    )
    graph.add_edge(NodeName.EVALUATE.value, NodeName.FINALIZE.value)
    graph.add_edge(NodeName.FINALIZE.value, END)

    return graph.compile()


if __name__ == "__main__":
    graph = build_graph()
    print("Graph built successfully!")
    print(f"Nodes: {list(graph.nodes.keys())}")
