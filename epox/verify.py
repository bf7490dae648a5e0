"""
Epox Verification System

Structural checks for node trees, whether produced by the parser or
assembled by hand (for example by a genetic operator).
"""

from typing import List, Optional, Tuple

from .config import get_config
from .core import Node, iter_nodes


def tree_depth(root: Node) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    children = [child for child in root.children if child is not None]
    if not children:
        return 1
    return 1 + max(tree_depth(child) for child in children)


def node_count(root: Node) -> int:
    return sum(1 for _ in iter_nodes(root))


def check_arity(root: Node) -> Tuple[bool, List[str]]:
    """
    Check that every node has all of its child slots filled.

    Args:
        root: The tree to check

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []

    for _, _, node in iter_nodes(root):
        missing = [i for i, child in enumerate(node.children) if child is None]
        if missing:
            errors.append(f"{node.identifier} expects {node.arity} arguments, "
                          f"missing slots {missing}")

    return len(errors) == 0, errors


def check_depth(root: Node, max_depth: int) -> Tuple[bool, List[str]]:
    errors = []
    actual_depth = tree_depth(root)
    if actual_depth > max_depth:
        errors.append(f"Tree depth {actual_depth} exceeds maximum allowed depth {max_depth}")
    return len(errors) == 0, errors


def check_node_count(root: Node, max_nodes: int) -> Tuple[bool, List[str]]:
    errors = []
    count = node_count(root)
    if count > max_nodes:
        errors.append(f"Tree has {count} nodes, exceeds maximum allowed {max_nodes}")
    return len(errors) == 0, errors


def verify_tree(root: Node, max_depth: Optional[int] = None,
                max_nodes: Optional[int] = None) -> Tuple[bool, List[str]]:
    """
    Perform comprehensive verification of a tree.

    Args:
        root: The tree to verify
        max_depth: Maximum allowed depth (defaults to the configured limit)
        max_nodes: Maximum allowed number of nodes (defaults to the configured limit)

    Returns:
        Tuple of (is_valid, error_messages)
    """
    if not isinstance(root, Node):
        return False, ["Tree root must be a Node"]

    limits = get_config().verifier
    if max_depth is None:
        max_depth = limits.max_depth
    if max_nodes is None:
        max_nodes = limits.max_nodes

    all_errors = []
    checks = [
        check_arity(root),
        check_depth(root, max_depth),
        check_node_count(root, max_nodes),
    ]

    for is_valid, errors in checks:
        if not is_valid:
            all_errors.extend(errors)

    return len(all_errors) == 0, all_errors
