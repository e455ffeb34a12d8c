"""Unit tests for the structlog helpers."""

from __future__ import annotations

import json
import logging

import structlog

from resource_cache.kernel.identity import Identifier
from resource_cache.observability import IdentifierRenderer, configure_logging, get_logger


class TestIdentifierRenderer:
    def test_renders_identifier_fields(self) -> None:
        event = {"event": "x", "identifier": Identifier("post-likes", "3:17"), "count": 2}
        rendered = IdentifierRenderer()(None, "info", event)
        assert rendered == {"event": "x", "identifier": "post-likes:3:17", "count": 2}

    def test_one_off_identifier(self) -> None:
        rendered = IdentifierRenderer()(None, "info", {"task_id": Identifier.one_off("abc")})
        assert rendered["task_id"] == "~:abc"


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("tests", component="binding").info("hello", n=1)
        assert logs == [{"component": "binding", "n": 1, "event": "hello", "log_level": "info"}]


class TestConfigureLogging:
    def teardown_method(self) -> None:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def test_json_output(self, capsys) -> None:
        configure_logging("debug")
        get_logger("tests.json").info("cache.ready", identifier=Identifier("posts", "1"))
        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "cache.ready"
        assert record["identifier"] == "posts:1"
        assert record["level"] == "info"
        assert record["logger"] == "tests.json"

    def test_level_filters(self, capsys) -> None:
        configure_logging(logging.WARNING)
        get_logger("tests.level").info("quiet")
        assert "quiet" not in capsys.readouterr().err
        assert logging.getLogger().level == logging.WARNING
