"""
Epox: expression parsing for tree-based genetic programming.

This package parses nested function-call program source such as
"AND(x, NOT(y))" into trees of executable nodes, resolving function
names through an extensible registry and terminals through literals
and a shared variable environment.
"""

from .core import (
    Node, FunctionNode, TerminalNode, Literal, BooleanLiteral, DoubleLiteral, Variable,
    iter_nodes, clone_tree, to_source,
)
from .errors import EpoxError, MalformedProgramError, UnknownFunctionError, MissingContextError
from .registry import FunctionRegistry, RegistryEntry
from .variables import VariableEnvironment
from .splitter import split_arguments
from .terminals import TerminalResolver
from .parser import EpoxParser
from .ant import Ant, AntLandscape, Orientation
from .life import Life, PoolSelectionAdapter, PoolSelectionListener
from .verify import verify_tree

__version__ = "0.1.0"
__all__ = [
    "Node", "FunctionNode", "TerminalNode", "Literal", "BooleanLiteral", "DoubleLiteral", "Variable",
    "iter_nodes", "clone_tree", "to_source",
    "EpoxError", "MalformedProgramError", "UnknownFunctionError", "MissingContextError",
    "FunctionRegistry", "RegistryEntry", "VariableEnvironment", "split_arguments",
    "TerminalResolver", "EpoxParser", "Ant", "AntLandscape", "Orientation",
    "Life", "PoolSelectionAdapter", "PoolSelectionListener", "verify_tree",
]
