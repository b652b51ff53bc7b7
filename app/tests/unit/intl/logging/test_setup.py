"""Tests for intl.logging.setup module."""

import logging

from intl.logging import configure_logging, get_module_logger
from intl.logging.setup import _is_test_environment


def test_test_environment_detected():
    assert _is_test_environment()


def test_configure_logging_silences_tests():
    """Logging is suppressed while running under pytest."""
    configure_logging()
    assert logging.root.level == logging.CRITICAL + 1


def test_get_module_logger_binds_module_path():
    log = get_module_logger()
    assert log._context["module_path"] == __name__
    assert log._context["component"] == __name__.split(".")[-1]
