"""Tests for rich logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from commit_story.logging_config import ROOT_LOGGER, get_logger, setup_logging


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbosity, level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_level_follows_verbosity(self, verbosity, level):
        logger = setup_logging(verbosity)
        assert logger.name == ROOT_LOGGER
        assert logger.level == level

    def test_rich_handler_installed(self):
        setup_logging()
        assert any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)


class TestGetLogger:
    def test_module_names_are_namespaced(self):
        assert get_logger("gitlog.parser").name == "commit_story.gitlog.parser"

    def test_package_names_kept(self):
        assert get_logger("commit_story.upload").name == "commit_story.upload"

    def test_root(self):
        assert get_logger().name == ROOT_LOGGER
