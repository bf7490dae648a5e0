"""
Epox Expression Parser

This module turns function-call style program source such as
"IF(GT(x, 0.5), MOVE(), TURN-LEFT())" into a tree of nodes.

Grammar:
    expr     := terminal | identifier "(" arglist ")"
    arglist  := <empty> | expr (sep expr)*
    sep      := (SPACE | ",")+
    terminal := BOOLEAN_LITERAL | VARIABLE_IDENT | NUMERIC_LITERAL
"""

import logging
from typing import Any, Callable, Iterable, Optional

from .config import ParserConfig, get_config
from .core import Node, Variable
from .errors import MalformedProgramError, UnknownFunctionError
from .registry import FunctionRegistry
from .splitter import find_matching_paren, split_arguments
from .terminals import TerminalResolver
from .variables import VariableEnvironment

logger = logging.getLogger(__name__)


class EpoxParser:
    """
    Parser for nested function-call program source.

    Function identifiers are resolved against a FunctionRegistry and
    terminals against literals and a VariableEnvironment. Every node is
    arity-checked as it is built; any failure aborts the whole parse.

    A parser holds mutable state (registry, variables, context) and is not
    safe to share between threads without external locking.
    """

    def __init__(self, registry: Optional[FunctionRegistry] = None,
                 variables: Optional[Iterable[Variable]] = None,
                 context: Any = None, config: Optional[ParserConfig] = None):
        """
        Initialize the parser.

        Args:
            registry: Function registry (defaults to one seeded with the built-ins)
            variables: Variables available to terminals, in lookup order
            context: Context object for functions that need one, e.g. an Ant
            config: Parser settings (defaults to the global configuration)
        """
        self.registry = registry if registry is not None else FunctionRegistry()
        self.variables = VariableEnvironment(variables)
        self.terminals = TerminalResolver(self.variables)
        self.context = context
        self.config = config if config is not None else get_config().parser

    def register(self, name: str, factory: Callable[..., Node], needs_context: bool = False) -> None:
        self.registry.register(name, factory, needs_context)

    def set_available_variables(self, variables: Iterable[Variable]) -> None:
        self.variables.set_all(variables)

    def add_available_variable(self, variable: Variable) -> None:
        self.variables.add(variable)

    def clear_available_variables(self) -> None:
        self.variables.clear()

    def set_context(self, context: Any) -> None:
        self.context = context

    def parse(self, source: Optional[str], context: Any = None) -> Optional[Node]:
        """
        Parse program source into a node tree.

        Args:
            source: Program text, or None
            context: Context object for this parse; falls back to the
                parser's own context when omitted

        Returns:
            The root of the built tree, or None when source is None

        Raises:
            UnknownFunctionError: If a function identifier is not registered
            MalformedProgramError: If an arity does not match its arguments,
                a terminal cannot be resolved, or parentheses are malformed
            MissingContextError: If a function needing a context is used
                and no context is available
        """
        if source is None:
            return None

        if context is None:
            context = self.context

        root = self._parse(source.strip(), context, 1)
        logger.debug(f"Parsed program: {source}")
        return root

    def _parse(self, source: str, context: Any, depth: int) -> Node:
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            raise MalformedProgramError(f"Program nesting exceeds maximum depth {max_depth}")

        opening = source.find('(')

        # No bracket means a terminal
        if opening == -1:
            node = self.terminals.resolve(source)
            if node is None:
                raise MalformedProgramError(f"Unrecognised terminal {source!r}")
            return node

        identifier = source[:opening]
        closing = self._find_closing(source, opening)
        args = split_arguments(source[opening + 1:closing])

        node = self.registry.resolve(identifier, context)
        if node is None:
            raise UnknownFunctionError(identifier)

        if node.arity != len(args):
            raise MalformedProgramError(
                f"Function {identifier} expects {node.arity} arguments, got {len(args)}")

        for i, arg in enumerate(args):
            node.set_child(i, self._parse(arg, context, depth + 1))

        return node

    def _find_closing(self, source: str, opening: int) -> int:
        if not self.config.strict_parens:
            # Lenient: the last ')' in the text, ignoring anything after it
            closing = source.rfind(')')
            if closing < opening:
                raise MalformedProgramError(f"Missing closing parenthesis in {source!r}")
            return closing

        closing = find_matching_paren(source, opening)
        if closing == -1:
            raise MalformedProgramError(f"Missing closing parenthesis in {source!r}")
        trailing = source[closing + 1:].strip()
        if trailing:
            raise MalformedProgramError(f"Unexpected text after closing parenthesis: {trailing!r}")
        return closing
