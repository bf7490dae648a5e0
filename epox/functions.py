"""
Epox Built-in Functions

Function nodes for boolean logic, double arithmetic, action sequencing
and the artificial ant. The double functions follow IEEE-754 semantics:
invalid operations produce NaN or infinity rather than raising.
"""

import math
from typing import Any, Callable, Dict, Tuple

import numpy as np

from .ant import Ant
from .core import FunctionNode, Node


class OperatorFunction(FunctionNode):
    """
    Function node that evaluates all of its children and applies an operation.
    """

    def __init__(self, identifier: str, arity: int, operation: Callable[..., Any]):
        super().__init__(identifier, arity)
        self._operation = operation

    def evaluate(self) -> Any:
        args = [self._evaluate_child(i) for i in range(self.arity)]
        return self._operation(*args)


class IfFunction(FunctionNode):
    """IF(condition, then, else); only the chosen branch is evaluated."""

    def __init__(self):
        super().__init__('IF', 3)

    def evaluate(self) -> Any:
        if self._evaluate_child(0):
            return self._evaluate_child(1)
        return self._evaluate_child(2)


class SeqFunction(FunctionNode):
    """Evaluates each child in order, for its side effects."""

    def __init__(self, arity: int):
        super().__init__(f"SEQ{arity}", arity)

    def evaluate(self) -> None:
        for i in range(self.arity):
            self._evaluate_child(i)


class AntFunction(FunctionNode):
    """Function node bound to the ant it acts upon."""

    def __init__(self, identifier: str, arity: int, ant: Ant):
        super().__init__(identifier, arity)
        self.ant = ant


class IfFoodAheadFunction(AntFunction):
    def __init__(self, ant: Ant):
        super().__init__('IF-FOOD-AHEAD', 2, ant)

    def evaluate(self) -> Any:
        if self.ant.is_food_ahead():
            return self._evaluate_child(0)
        return self._evaluate_child(1)


class AntAction(AntFunction):
    """Zero-arity ant action such as MOVE or TURN-LEFT."""

    def __init__(self, identifier: str, ant: Ant, action: Callable[[Ant], None]):
        super().__init__(identifier, 0, ant)
        self._action = action

    def evaluate(self) -> None:
        self._action(self.ant)


def _ieee(func: Callable[..., Any]) -> Callable[..., float]:
    """Wrap a numpy expression so it returns a plain float without warnings."""
    def wrapped(*args):
        with np.errstate(all='ignore'):
            return float(func(*(np.float64(arg) for arg in args)))
    return wrapped


def _factorial(x: float) -> float:
    if math.isnan(x):
        return math.nan
    if math.isinf(x):
        return math.inf if x > 0 else 1.0
    n = round(x)
    if n > 170:
        return math.inf
    return float(math.factorial(n)) if n > 1 else 1.0


BOOLEAN_OPERATIONS: Dict[str, Tuple[int, Callable[..., bool]]] = {
    'AND': (2, lambda a, b: bool(a and b)),
    'IFF': (2, lambda a, b: bool(a) == bool(b)),
    'IMPLIES': (2, lambda a, b: bool(not a or b)),
    'NAND': (2, lambda a, b: not (a and b)),
    'NOR': (2, lambda a, b: not (a or b)),
    'NOT': (1, lambda a: not a),
    'OR': (2, lambda a, b: bool(a or b)),
    'XOR': (2, lambda a, b: bool(a) != bool(b)),
}

DOUBLE_OPERATIONS: Dict[str, Tuple[int, Callable[..., Any]]] = {
    'ABS': (1, _ieee(np.abs)),
    'ADD': (2, _ieee(lambda a, b: a + b)),
    'ACOS': (1, _ieee(np.arccos)),
    'ASIN': (1, _ieee(np.arcsin)),
    'ATAN': (1, _ieee(np.arctan)),
    'CVP': (3, _ieee(lambda c, x, y: c * np.power(x, y))),
    'COSEC': (1, _ieee(lambda a: 1.0 / np.sin(a))),
    'COS': (1, _ieee(np.cos)),
    'COT': (1, _ieee(lambda a: 1.0 / np.tan(a))),
    'CUBE': (1, _ieee(lambda a: a * a * a)),
    'EXP': (1, _ieee(np.exp)),
    'FACTORIAL': (1, lambda a: _factorial(float(a))),
    'GT': (2, lambda a, b: float(a) > float(b)),
    'COSH': (1, _ieee(np.cosh)),
    'SINH': (1, _ieee(np.sinh)),
    'TANH': (1, _ieee(np.tanh)),
    'INV': (1, _ieee(lambda a: 1.0 / a)),
    'LOG-10': (1, _ieee(np.log10)),
    'LN': (1, _ieee(np.log)),
    'LT': (2, lambda a, b: float(a) < float(b)),
    'MAX': (2, _ieee(np.maximum)),
    'MIN': (2, _ieee(np.minimum)),
    # Protected: a zero divisor returns the dividend
    'MOD': (2, _ieee(lambda a, b: a if b == 0 else np.fmod(a, b))),
    'MUL': (2, _ieee(lambda a, b: a * b)),
    'POW': (2, _ieee(np.power)),
    # Protected: a zero divisor returns zero
    'PDIV': (2, _ieee(lambda a, b: 0.0 if b == 0 else a / b)),
    'SEC': (1, _ieee(lambda a: 1.0 / np.cos(a))),
    'SGN': (1, _ieee(np.sign)),
    'SIN': (1, _ieee(np.sin)),
    'SQUARE': (1, _ieee(lambda a: a * a)),
    'SQRT': (1, _ieee(np.sqrt)),
    'SUB': (2, _ieee(lambda a, b: a - b)),
    'TAN': (1, _ieee(np.tan)),
}

ANT_ACTIONS: Dict[str, Callable[[Ant], None]] = {
    'MOVE': Ant.move,
    'TURN-LEFT': Ant.turn_left,
    'TURN-RIGHT': Ant.turn_right,
    'SKIP': Ant.skip,
}


def _operator_factory(name: str, arity: int, operation: Callable[..., Any]) -> Callable[[], Node]:
    return lambda: OperatorFunction(name, arity, operation)


def _ant_action_factory(name: str, action: Callable[[Ant], None]) -> Callable[[Ant], Node]:
    return lambda ant: AntAction(name, ant, action)


def builtin_functions() -> Dict[str, Tuple[Callable[..., Node], bool]]:
    """
    Build the table of built-in functions.

    Returns:
        Dict mapping function name to (factory, needs_context); factories
        flagged with needs_context take the context object as their argument
    """
    table: Dict[str, Tuple[Callable[..., Node], bool]] = {}

    for name, (arity, operation) in BOOLEAN_OPERATIONS.items():
        table[name] = (_operator_factory(name, arity, operation), False)
    table['IF'] = (IfFunction, False)

    for name, (arity, operation) in DOUBLE_OPERATIONS.items():
        table[name] = (_operator_factory(name, arity, operation), False)

    for arity in (2, 3, 4):
        table[f"SEQ{arity}"] = (lambda arity=arity: SeqFunction(arity), False)

    table['IF-FOOD-AHEAD'] = (IfFoodAheadFunction, True)
    for name, action in ANT_ACTIONS.items():
        table[name] = (_ant_action_factory(name, action), True)

    return table
