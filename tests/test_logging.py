"""Tests for logging setup."""

import json

import pytest
import structlog

from x_news_search.utils.logging import setup_logging


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_logs_go_to_stderr(capsys, reset_structlog):
    setup_logging("INFO", json_output=True)

    structlog.get_logger().info("news_search_complete", stories=2)

    captured = capsys.readouterr()
    assert captured.out == ""
    entry = json.loads(captured.err.strip())
    assert entry["event"] == "news_search_complete"
    assert entry["stories"] == 2
    assert entry["level"] == "info"
    assert "timestamp" in entry


def test_level_filters_events(capsys, reset_structlog):
    setup_logging("WARNING")

    structlog.get_logger().info("starting_search")
    structlog.get_logger().warning("post_search_failed", error="boom")

    err = capsys.readouterr().err
    assert "starting_search" not in err
    assert "post_search_failed" in err
