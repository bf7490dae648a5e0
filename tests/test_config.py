#!/usr/bin/env python3
"""
Unit tests for configuration sections, the active config and logging setup.
"""

import logging
import unittest

from epox import EpoxParser
from epox.config import (
    PACKAGE_LOGGER, EpoxConfig, ParserConfig, VerifierConfig, get_config,
    resolve_level, set_config, setup_logging,
)


class TestConfigSections(unittest.TestCase):
    """Test cases for the config dataclasses."""

    def test_defaults(self):
        config = EpoxConfig()
        self.assertFalse(config.parser.strict_parens)
        self.assertIsNone(config.parser.max_depth)
        self.assertEqual(config.verifier.max_depth, 32)
        self.assertEqual(config.verifier.max_nodes, 1000)
        self.assertEqual(config.log_level, "INFO")

    def test_sections_not_shared(self):
        self.assertIsNot(EpoxConfig().parser, EpoxConfig().parser)

    def test_limits_must_be_positive(self):
        for build in (lambda: ParserConfig(max_depth=0),
                      lambda: VerifierConfig(max_depth=-1),
                      lambda: VerifierConfig(max_nodes=0)):
            with self.subTest(build=build):
                with self.assertRaises(ValueError):
                    build()

    def test_unknown_log_level(self):
        with self.assertRaises(ValueError):
            EpoxConfig(log_level="LOUD")


class TestActiveConfig(unittest.TestCase):
    """Test cases for get_config and set_config."""

    def setUp(self):
        """Set up test fixtures."""
        self.original = get_config()

    def tearDown(self):
        set_config(self.original)

    def test_set_config_returns_previous(self):
        replacement = EpoxConfig(log_level="DEBUG")
        previous = set_config(replacement)
        self.assertIs(previous, self.original)
        self.assertIs(get_config(), replacement)

    def test_set_config_none_restores_defaults(self):
        set_config(EpoxConfig(parser=ParserConfig(strict_parens=True)))
        set_config(None)
        self.assertEqual(get_config(), EpoxConfig())

    def test_existing_parser_keeps_its_section(self):
        parser = EpoxParser()
        set_config(EpoxConfig(parser=ParserConfig(strict_parens=True)))
        self.assertFalse(parser.config.strict_parens)
        self.assertTrue(EpoxParser().config.strict_parens)


class TestSetupLogging(unittest.TestCase):
    """Test cases for setup_logging."""

    def setUp(self):
        """Set up test fixtures."""
        self.logger = logging.getLogger(PACKAGE_LOGGER)
        self.saved_level = self.logger.level
        self.original = get_config()

    def tearDown(self):
        self.logger.setLevel(self.saved_level)
        set_config(self.original)

    def test_sets_package_logger_level(self):
        logger = setup_logging("debug")
        self.assertIs(logger, self.logger)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertTrue(logging.getLogger("epox.parser").isEnabledFor(logging.DEBUG))

    def test_numeric_level(self):
        setup_logging(logging.ERROR)
        self.assertEqual(self.logger.level, logging.ERROR)

    def test_defaults_to_config_level(self):
        set_config(EpoxConfig(log_level="WARNING"))
        setup_logging()
        self.assertEqual(self.logger.level, logging.WARNING)

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            setup_logging("chatty")

    def test_resolve_level(self):
        self.assertEqual(resolve_level("info"), logging.INFO)
        self.assertEqual(resolve_level(15), 15)


if __name__ == '__main__':
    unittest.main()
