"""Predicates over node status."""

from __future__ import annotations

from nodescaler.model import CONDITION_TRUE, NODE_READY, Node, NodeCondition


def is_ready(node: Node) -> bool:
    return get_condition(node.conditions, NODE_READY).status == CONDITION_TRUE


def get_condition(conditions: list[NodeCondition], match: str) -> NodeCondition:
    """Return the first condition of the given type, or an empty condition."""
    return next((c for c in conditions if c.type == match), NodeCondition())