"""Tests for package logging setup."""

import logging

from sharebnb.logger import PACKAGE_LOGGER, get_logger


class TestGetLogger:

    def test_module_loggers_hang_off_the_package_logger(self):
        logger = get_logger("sharebnb.repositories.user_repository")

        assert logger.name == "sharebnb.repositories.user_repository"
        assert logger.parent.name.startswith(PACKAGE_LOGGER)

    def test_package_logger_configured_once(self):
        get_logger("sharebnb.a")
        get_logger("sharebnb.b")

        package = logging.getLogger(PACKAGE_LOGGER)
        assert len(package.handlers) == 1
        assert package.propagate is False

    def test_sql_statements_not_logged_outside_debug(self):
        get_logger("sharebnb.c")

        assert logging.getLogger("sqlalchemy.engine").getEffectiveLevel() >= logging.WARNING
