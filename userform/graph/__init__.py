"""Submit workflow graph."""

from userform.graph.submit_graph import create_submit_graph, get_submit_graph

__all__ = ["create_submit_graph", "get_submit_graph"]
