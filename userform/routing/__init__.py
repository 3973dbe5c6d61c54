"""Conditional routing for the submit graph."""

from userform.routing.conditional_edges import route_after_form_validation

__all__ = ["route_after_form_validation"]
