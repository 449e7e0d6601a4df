"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from arc_git.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbose,quiet,level",
        [
            (False, False, logging.WARNING),
            (True, False, logging.DEBUG),
            (False, True, logging.ERROR),
            (True, True, logging.ERROR),
        ],
    )
    def test_levels(self, verbose, quiet, level):
        logger = setup_logging(verbose=verbose, quiet=quiet)
        assert logger.name == "arc_git"
        assert logger.level == level

    def test_single_rich_handler_on_stderr(self):
        setup_logging()
        setup_logging(verbose=True)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)
        assert handlers[0].console.stderr

    def test_litellm_kept_at_warning_when_verbose(self):
        setup_logging(verbose=True)
        assert logging.getLogger("LiteLLM").level == logging.WARNING

    def test_litellm_follows_quiet(self):
        setup_logging(quiet=True)
        assert logging.getLogger("LiteLLM").level == logging.ERROR


class TestGetLogger:
    def test_prefixes_foreign_names(self):
        assert get_logger("pipeline").name == "arc_git.pipeline"

    def test_keeps_package_names(self):
        assert get_logger("arc_git.git.repository").name == "arc_git.git.repository"

    def test_default_is_package_logger(self):
        assert get_logger().name == "arc_git"
