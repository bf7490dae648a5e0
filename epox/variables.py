"""
Epox Variable Environment

The ordered collection of variables a parser may bind terminals to.
"""

from typing import Iterable, Iterator, List, Optional

from .core import Variable


class VariableEnvironment:
    """
    Ordered, mutable sequence of Variable nodes.

    Identifiers need not be unique; lookup scans in insertion order and
    returns the first match, so later duplicates are never reachable.
    """

    def __init__(self, variables: Optional[Iterable[Variable]] = None):
        self._variables: List[Variable] = list(variables) if variables is not None else []

    def add(self, variable: Variable) -> None:
        self._variables.append(variable)

    def set_all(self, variables: Iterable[Variable]) -> None:
        self._variables = list(variables)

    def clear(self) -> None:
        self._variables.clear()

    def lookup(self, identifier: str) -> Optional[Variable]:
        for variable in self._variables:
            if variable.identifier == identifier:
                return variable
        return None

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)
