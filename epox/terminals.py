"""
Epox Terminal Resolver

Turns a bare terminal token into a literal or variable node. Resolution
is tried in a fixed order: boolean literal, bound variable, numeric
literal. The first rule that matches wins.
"""

import math
import re
from typing import Optional

from .core import BooleanLiteral, DoubleLiteral, Node
from .variables import VariableEnvironment

_DIGITS = r'(?:[0-9]+)'
_HEX_DIGITS = r'(?:[0-9a-fA-F]+)'
_EXP = r'[eE][+-]?' + _DIGITS

# Accepts the same text as Java's Double.valueOf: optional sign, NaN,
# Infinity, decimal and hexadecimal floating forms, an optional type
# suffix, and surrounding ASCII control/space characters.
FLOAT_PATTERN = re.compile(
    r'[\x00-\x20]*'
    r'[+-]?(?:'
    r'NaN|Infinity|'
    r'(?:(?:'
    + _DIGITS + r'(?:\.)?(?:' + _DIGITS + r'?)(?:' + _EXP + r')?|'
    r'\.(?:' + _DIGITS + r')(?:' + _EXP + r')?|'
    r'(?:0[xX]' + _HEX_DIGITS + r'(?:\.)?|0[xX]' + _HEX_DIGITS + r'?\.' + _HEX_DIGITS + r')'
    r'[pP][+-]?' + _DIGITS +
    r')[fFdD]?)'
    r')[\x00-\x20]*'
)

_ASCII_WHITESPACE = ''.join(chr(i) for i in range(0x21))


def is_numeric_literal(token: str) -> bool:
    return FLOAT_PATTERN.fullmatch(token) is not None


def parse_double(token: str) -> Optional[float]:
    """
    Convert a numeric literal token to a float.

    Args:
        token: Candidate literal, e.g. "3.14", "1e10", "0x1.8p3" or "2.0f"

    Returns:
        The float value, or None if token is not a numeric literal
    """
    if not is_numeric_literal(token):
        return None

    text = token.strip(_ASCII_WHITESPACE)
    if text[-1] in 'fFdD':
        text = text[:-1]

    if 'x' in text or 'X' in text:
        try:
            return float.fromhex(text)
        except OverflowError:
            return -math.inf if text.startswith('-') else math.inf
    return float(text)


def parse_boolean(token: str) -> Optional[bool]:
    lowered = token.lower()
    if lowered == 'true':
        return True
    if lowered == 'false':
        return False
    return None


class TerminalResolver:
    """
    Resolves terminal tokens against literals and a variable environment.

    Boolean literals shadow variables: a variable named "true" can never
    be reached through a terminal token.
    """

    def __init__(self, variables: VariableEnvironment):
        self.variables = variables

    def resolve(self, token: str) -> Optional[Node]:
        """
        Resolve a terminal token.

        Args:
            token: The terminal text

        Returns:
            A BooleanLiteral, the shared Variable bound to token, a
            DoubleLiteral, or None if no rule matches
        """
        boolean = parse_boolean(token)
        if boolean is not None:
            return BooleanLiteral(boolean)

        variable = self.variables.lookup(token)
        if variable is not None:
            return variable

        number = parse_double(token)
        if number is not None:
            return DoubleLiteral(number)

        return None
