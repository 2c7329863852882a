"""Tests for infrastructure/logging.py."""

import logging

import structlog

from layercheck.infrastructure.logging import LOGGER_NAME, configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_level_is_warning(self) -> None:
        configure_logging()

        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)

        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_single_root_handler(self) -> None:
        configure_logging()
        configure_logging(log_json=True)

        assert len(logging.getLogger().handlers) == 1

    def test_json_output(self, capsys) -> None:
        configure_logging(verbose=True, log_json=True)

        structlog.get_logger("layercheck.test").warning("snapshot.built", units=3)

        err = capsys.readouterr().err
        assert '"event": "snapshot.built"' in err
        assert '"units": 3' in err

    def test_module_loggers_follow_configured_level(self, capsys) -> None:
        log = get_logger("layercheck.application.services.checker")

        log.debug("check.complete", status="CONFORMANT")
        assert capsys.readouterr().out == ""

        configure_logging(verbose=True, log_json=True)
        log.debug("check.complete", status="CONFORMANT")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"event": "check.complete"' in captured.err


class TestGetLogger:
    """Tests for get_logger before any configuration."""

    def test_debug_is_not_printed(self, capsys) -> None:
        get_logger("layercheck.test").debug("snapshot.built", units=3)

        assert capsys.readouterr().out == ""
