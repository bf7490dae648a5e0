"""
Epox Core Node Model

This module defines the node types that make up an Epox program tree,
along with helpers for traversing, cloning and rendering trees.
"""

import copy
import math
from typing import Any, Iterator, List, Optional, Tuple


class Node:
    """
    Base class for every node of an Epox program tree.

    A node has a fixed arity set at construction time and exactly that many
    ordered child slots. Slots start empty and are filled by the parser (or
    by hand) through set_child().
    """

    def __init__(self, identifier: str, arity: int = 0):
        if arity < 0:
            raise ValueError(f"Arity must be non-negative, got {arity}")
        self._identifier = identifier
        self._arity = arity
        self._children: List[Optional['Node']] = [None] * arity

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def children(self) -> Tuple[Optional['Node'], ...]:
        return tuple(self._children)

    def get_child(self, index: int) -> Optional['Node']:
        return self._children[index]

    def set_child(self, index: int, child: 'Node') -> None:
        """
        Attach a child at the given slot.

        Raises:
            IndexError: If index is outside the node's arity
        """
        if not 0 <= index < self._arity:
            raise IndexError(f"{self._identifier} has arity {self._arity}, no child slot {index}")
        self._children[index] = child

    def is_terminal(self) -> bool:
        return self._arity == 0

    def evaluate(self) -> Any:
        raise NotImplementedError(f"{type(self).__name__} does not implement evaluate()")

    def _evaluate_child(self, index: int) -> Any:
        child = self._children[index]
        if child is None:
            raise RuntimeError(f"Child {index} of {self._identifier} is not set")
        return child.evaluate()

    def __repr__(self):
        return to_source(self)


class FunctionNode(Node):
    """A node whose children are its arguments."""


class TerminalNode(Node):
    """A node with no children."""

    def __init__(self, identifier: str):
        super().__init__(identifier, 0)


class Literal(TerminalNode):
    """An immutable constant value parsed from program source."""

    def __init__(self, value: Any, identifier: str):
        super().__init__(identifier)
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def evaluate(self) -> Any:
        return self._value


class BooleanLiteral(Literal):
    def __init__(self, value: bool):
        value = bool(value)
        super().__init__(value, 'true' if value else 'false')


class DoubleLiteral(Literal):
    def __init__(self, value: float):
        value = float(value)
        super().__init__(value, _format_double(value))


class Variable(TerminalNode):
    """
    A named terminal with a mutable value slot.

    Variables are shared by reference: every occurrence of a variable in a
    tree is the same object, so assigning to value is seen everywhere.
    """

    def __init__(self, identifier: str, value: Any = None):
        super().__init__(identifier)
        self.value = value

    def evaluate(self) -> Any:
        return self.value


def _format_double(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    return repr(value)


def iter_nodes(root: Node) -> Iterator[Tuple[Optional[Node], Optional[int], Node]]:
    """
    Generator that yields (parent, child_idx, node) for every node in the tree.

    Performs a depth-first, left-to-right traversal. Empty child slots are
    skipped. A shared Variable is yielded once per occurrence.

    Args:
        root: The root node to traverse

    Yields:
        Tuple of (parent, child_idx, node); parent and child_idx are None for the root
    """
    def _traverse(node: Node, parent: Optional[Node] = None, child_idx: Optional[int] = None):
        yield (parent, child_idx, node)
        for idx, child in enumerate(node.children):
            if child is not None:
                yield from _traverse(child, node, idx)

    yield from _traverse(root)


def clone_tree(node: Node) -> Node:
    """
    Create a deep copy of a tree.

    Function nodes and literals are copied; Variable nodes are not, so the
    clone observes the same variable values as the original. Any context
    object bound into a node (such as an ant) is also shared.

    Args:
        node: The root of the tree to clone

    Returns:
        The root of the copied tree
    """
    if isinstance(node, Variable):
        return node

    cloned = copy.copy(node)
    cloned._children = [clone_tree(child) if child is not None else None
                        for child in node.children]
    return cloned


def to_source(node: Node) -> str:
    """
    Render a tree back into parseable program source.

    Args:
        node: The root node to render

    Returns:
        A string such as "AND(x, NOT(true))"; empty child slots render as "?"
    """
    if isinstance(node, TerminalNode):
        return node.identifier

    args = ', '.join(to_source(child) if child is not None else '?'
                     for child in node.children)
    return f"{node.identifier}({args})"
