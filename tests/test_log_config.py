"""Tests for logging setup."""

import logging

from hostbench.util.log_config import configure_package_logging, setup_logger


def file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


class TestLogConfig:
    def test_logger_does_not_propagate(self):
        logger = setup_logger("hostbench.tests.sample")
        assert logger.propagate is False
        assert len(logger.handlers) == 1

    def test_setup_twice_does_not_duplicate_handlers(self):
        setup_logger("hostbench.tests.twice")
        logger = setup_logger("hostbench.tests.twice")
        assert len(logger.handlers) == 1

    def test_package_log_file_receives_debug(self, tmp_path, restore_package_logging):
        log_file = tmp_path / "logs" / "run.log"
        logger = setup_logger("hostbench.tests.file")

        configure_package_logging(level=logging.WARNING, log_file=log_file)
        logger.debug("detail line")
        for handler in logger.handlers:
            handler.flush()

        assert "detail line" in log_file.read_text(encoding="utf-8")

    def test_repeated_configuration_shares_one_file_handler(self, tmp_path, restore_package_logging):
        log_file = tmp_path / "run.log"
        first = setup_logger("hostbench.tests.shared_a")
        second = setup_logger("hostbench.tests.shared_b")

        configure_package_logging(level=logging.INFO, log_file=log_file)
        configure_package_logging(level=logging.INFO, log_file=log_file)

        assert len(file_handlers(first)) == 1
        assert file_handlers(first) == file_handlers(second)

        first.info("written once")
        file_handlers(first)[0].flush()
        assert log_file.read_text(encoding="utf-8").count("written once") == 1
