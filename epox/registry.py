"""
Epox Function Registry

Maps function names to factories that build fresh function nodes.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .core import Node
from .errors import MissingContextError
from .functions import builtin_functions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    """A registered function: its factory and whether it needs a context."""
    name: str
    factory: Callable[..., Node]
    needs_context: bool = False

    def create(self, context: Any = None) -> Node:
        if self.needs_context:
            if context is None:
                raise MissingContextError(self.name)
            return self.factory(context)
        return self.factory()


class FunctionRegistry:
    """
    Name-keyed table of node factories.

    Lookups are exact and case-sensitive. Registering an existing name
    silently replaces the previous entry; trees that were already built
    are unaffected.
    """

    def __init__(self, builtins: bool = True):
        self._entries: Dict[str, RegistryEntry] = {}
        if builtins:
            for name, (factory, needs_context) in builtin_functions().items():
                self._entries[name] = RegistryEntry(name, factory, needs_context)

    def register(self, name: str, factory: Callable[..., Node], needs_context: bool = False) -> None:
        """
        Register or replace the factory for a function name.

        Args:
            name: Case-sensitive function identifier
            factory: Callable returning a fresh node; called with the context
                object when needs_context is True, with no arguments otherwise
            needs_context: Whether the factory requires a context object
        """
        if name in self._entries:
            logger.debug(f"Overwriting function {name}")
        else:
            logger.debug(f"Registering function {name}")
        self._entries[name] = RegistryEntry(name, factory, needs_context)

    def unregister(self, name: str) -> None:
        self._entries.pop(name, None)

    def entry(self, name: str) -> Optional[RegistryEntry]:
        return self._entries.get(name)

    def resolve(self, name: str, context: Any = None) -> Optional[Node]:
        """
        Build a fresh node for the named function.

        Args:
            name: Function identifier
            context: Object handed to factories that need a context

        Returns:
            A new node, or None if the name is not registered

        Raises:
            MissingContextError: If the function needs a context and none is given
        """
        entry = self._entries.get(name)
        if entry is None:
            return None
        return entry.create(context)

    def names(self) -> List[str]:
        return sorted(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
