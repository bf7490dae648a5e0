"""
Epox Errors

Exceptions raised while turning program source into node trees.
"""


class EpoxError(ValueError):
    """Base class for all parse failures."""


class MalformedProgramError(EpoxError):
    """Raised when program source does not describe a well-formed tree."""

    def __init__(self, message: str = "Malformed program"):
        super().__init__(message)


class UnknownFunctionError(MalformedProgramError):
    """Raised when a function identifier has no registry entry."""

    def __init__(self, name: str):
        super().__init__(f"Unknown function {name} encountered")
        self.name = name


class MissingContextError(EpoxError):
    """Raised when a context-bound function is parsed without a context."""

    def __init__(self, name: str):
        super().__init__(f"Function {name} requires a context object but none was set")
        self.name = name
