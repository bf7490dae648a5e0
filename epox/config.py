"""
Epox Configuration

This module provides configuration settings for the parser,
tree verification limits, and logging.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'
PACKAGE_LOGGER = 'epox'


def _positive(name: str, value: Optional[int]) -> None:
    if value is not None and value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def resolve_level(level: Union[str, int]) -> int:
    """
    Turn a level name such as "debug" or a numeric level into a logging level.

    Raises:
        ValueError: If level is not a known level name
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


@dataclass
class ParserConfig:
    """Configuration for the expression parser."""
    strict_parens: bool = False
    max_depth: Optional[int] = None

    def __post_init__(self):
        _positive('max_depth', self.max_depth)


@dataclass
class VerifierConfig:
    """Configuration for tree verification."""
    max_depth: int = 32
    max_nodes: int = 1000

    def __post_init__(self):
        _positive('max_depth', self.max_depth)
        _positive('max_nodes', self.max_nodes)


@dataclass
class EpoxConfig:
    """Main configuration for the Epox package."""
    parser: ParserConfig = None
    verifier: VerifierConfig = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.parser is None:
            self.parser = ParserConfig()
        if self.verifier is None:
            self.verifier = VerifierConfig()
        resolve_level(self.log_level)


_active = EpoxConfig()


def get_config() -> EpoxConfig:
    return _active


def set_config(config: Optional[EpoxConfig]) -> EpoxConfig:
    """
    Replace the active configuration.

    Parsers created afterwards without an explicit config use the new parser
    section; parsers that already exist keep the section they were built with.

    Args:
        config: New configuration, or None to restore the defaults

    Returns:
        The configuration that was active before the call
    """
    global _active
    previous = _active
    _active = config if config is not None else EpoxConfig()
    return previous


def setup_logging(level: Union[str, int, None] = None) -> logging.Logger:
    """
    Configure logging for the epox package.

    The level goes on the package logger, so DEBUG output from the parser
    and registry can be switched on without touching other libraries. A
    root handler is installed only if the root logger has none yet.

    Args:
        level: Level name or number; defaults to the active config's log_level

    Returns:
        The package logger
    """
    if level is None:
        level = get_config().log_level
    numeric = resolve_level(level)

    logging.basicConfig(format=LOG_FORMAT)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric)
    return logger
