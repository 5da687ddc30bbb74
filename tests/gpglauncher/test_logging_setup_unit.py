"""Tests for structlog configuration."""

import json
import logging
import sys

import structlog

from gpglauncher.logging_setup import configure_logging, ensure_logging
from gpglauncher.result import Success
from gpglauncher.runner.process import ProcessRunner


class TestConfigureLogging:

    def teardown_method(self):
        structlog.reset_defaults()
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(logging.WARNING)

    def test_json_output(self, capsys):
        configure_logging("INFO", "json")
        structlog.get_logger("gpglauncher.test").info("Running external tool", command="gpg --version")

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record["event"] == "Running external tool"
        assert record["command"] == "gpg --version"
        assert record["level"] == "info"
        assert record["logger"] == "gpglauncher.test"

    def test_level_filtering(self, capsys):
        configure_logging("WARNING", "json")
        structlog.get_logger("gpglauncher.test").info("hidden")

        assert "hidden" not in capsys.readouterr().err
        assert logging.getLogger().level == logging.WARNING


class TestEnsureLogging:

    def teardown_method(self):
        structlog.reset_defaults()
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(logging.WARNING)

    def test_runner_logs_never_reach_stdout(self, capsys):
        structlog.reset_defaults()

        result = ProcessRunner(executable=sys.executable).run(["-c", "print('payload')"])

        assert result == Success("payload")
        assert structlog.is_configured()
        assert "Running external tool" not in capsys.readouterr().out

    def test_existing_configuration_kept(self, capsys):
        configure_logging("DEBUG", "json")
        handlers = list(logging.getLogger().handlers)

        ensure_logging()

        assert logging.getLogger().handlers == handlers
        assert logging.getLogger().level == logging.DEBUG

    def test_existing_root_handlers_not_replaced(self):
        structlog.reset_defaults()
        marker = logging.NullHandler()
        logging.getLogger().addHandler(marker)

        ensure_logging()

        assert marker in logging.getLogger().handlers
