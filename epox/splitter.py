"""
Epox Argument Splitter

Depth-aware splitting of a function call's argument text into its
top-level arguments.
"""

from typing import List

from .errors import MalformedProgramError

SEPARATORS = (' ', ',')


def split_arguments(arg_str: str) -> List[str]:
    """
    Split the text between a call's parentheses into top-level arguments.

    Spaces and commas separate arguments only at parenthesis depth 0. Runs
    of spaces collapse and may surround a single comma, but a comma must sit
    between two arguments: an empty argument between commas, or a leading or
    trailing comma, is an error. Inside nested parentheses every character,
    separators included, is kept as part of the current argument.

    Args:
        arg_str: Argument text without the surrounding parentheses

    Returns:
        List of argument strings; empty for an empty argument list

    Raises:
        MalformedProgramError: If the parentheses are unbalanced or a comma
            has no argument on one side

    Example:
        >>> split_arguments("f(1,2), g(3)")
        ['f(1,2)', 'g(3)']
    """
    args = []
    buffer = []
    depth = 0
    # A comma was seen since the last completed argument
    comma_pending = False

    for c in arg_str.strip():
        if c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
            if depth < 0:
                raise MalformedProgramError(f"Unbalanced ')' in arguments: {arg_str!r}")

        if c in SEPARATORS and depth == 0:
            if buffer:
                args.append(''.join(buffer))
                buffer = []
                comma_pending = c == ','
            elif c == ',':
                if not args or comma_pending:
                    raise MalformedProgramError(f"Empty argument in {arg_str!r}")
                comma_pending = True
        else:
            buffer.append(c)
            comma_pending = False

    if depth != 0:
        raise MalformedProgramError(f"Unbalanced '(' in arguments: {arg_str!r}")

    if buffer:
        args.append(''.join(buffer))
    elif comma_pending:
        raise MalformedProgramError(f"Trailing comma in arguments: {arg_str!r}")

    return args


def find_matching_paren(text: str, start: int) -> int:
    """
    Find the ')' that closes the '(' at text[start].

    Returns:
        Index of the matching ')', or -1 if it is never closed
    """
    depth = 0
    for i in range(start, len(text)):
        if text[i] == '(':
            depth += 1
        elif text[i] == ')':
            depth -= 1
            if depth == 0:
                return i
    return -1
