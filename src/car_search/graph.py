"""
LangGraph workflow definition and compilation.
"""

from langgraph.graph import StateGraph, START, END

from .types import State
from .nodes import encode_node, infer_node, parse_node, accept_node, reject_node
from .routing import route_from_parse

def create_graph() -> StateGraph:
    """Create the extraction workflow: encode → infer → parse → accept/reject."""
    graph = StateGraph(State)

    graph.add_node("encode", encode_node)
    graph.add_node("infer", infer_node)
    graph.add_node("parse", parse_node)
    graph.add_node("accept", accept_node)
    graph.add_node("reject", reject_node)

    graph.add_edge(START, "encode")
    graph.add_edge("encode", "infer")
    graph.add_edge("infer", "parse")
    graph.add_conditional_edges("parse", route_from_parse, {
        "accept": "accept",
        "reject": "reject",
    })
    graph.add_edge("accept", END)
    graph.add_edge("reject", END)

    return graph

def compile_graph():
    """Compile the graph. No checkpointer: every run is independent."""
    return create_graph().compile()
