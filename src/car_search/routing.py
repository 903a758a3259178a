"""
Routing logic for the LangGraph workflow.
"""

from .types import State

def route_from_parse(state: State) -> str:
    """Parsed attributes → accept; parse error → reject."""
    if state.get("attributes") is not None and not state.get("error"):
        return "accept"
    return "reject"
