"""Tests for the contextual logging setup."""

import importlib
import io
import logging
import uuid
from logging.handlers import RotatingFileHandler

import pytest

from bitbucket_cloud.logging_config import (
    ContextualLogger,
    log_operation,
    setup_logger,
)


@pytest.fixture
def logger_and_stream():
    """A fresh contextual logger writing to an in-memory stream."""
    name = f"bitbucket-cloud-test-{uuid.uuid4().hex[:8]}"
    logger = setup_logger(name=name, level="DEBUG", log_format="%(context)s|%(message)s")
    stream = io.StringIO()
    handler = logger.handlers[0]
    handler.setStream(stream)
    yield logger, stream
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_setup_logger_returns_contextual_logger(logger_and_stream):
    logger, _ = logger_and_stream

    assert isinstance(logger, ContextualLogger)
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_setup_logger_twice_keeps_one_handler(logger_and_stream):
    logger, _ = logger_and_stream

    again = setup_logger(name=logger.name, level="ERROR")

    assert again is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR


def test_file_handler_added_after_console_setup(logger_and_stream, tmp_path):
    logger, _ = logger_and_stream

    log_dir = tmp_path / "logs"
    for _ in range(2):
        setup_logger(
            name=logger.name,
            level="DEBUG",
            log_to_file=True,
            log_dir=str(log_dir),
            log_format="%(context)s|%(message)s",
        )

    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert len(logger.handlers) == 2
    assert (log_dir / f"{logger.name}.log").exists()

    logger.info("to the file")
    file_handlers[0].flush()

    assert "no-context|to the file" in (log_dir / f"{logger.name}.log").read_text()


def test_records_without_context(logger_and_stream):
    logger, stream = logger_and_stream

    logger.info("hello")

    assert stream.getvalue() == "no-context|hello\n"


def test_child_logger_records_get_empty_context(logger_and_stream):
    logger, stream = logger_and_stream

    logging.getLogger(f"{logger.name}.child").warning("from child")

    assert stream.getvalue() == "no-context|from child\n"


def test_set_and_clear_context(logger_and_stream):
    logger, stream = logger_and_stream

    logger.set_context(repository="mercurial")
    logger.info("with context")
    logger.clear_context()
    logger.info("without")

    assert stream.getvalue().splitlines() == [
        "repository=mercurial|with context",
        "no-context|without",
    ]


def test_log_operation_restores_previous_context(logger_and_stream):
    logger, stream = logger_and_stream
    logger.set_context(user="alice")

    with log_operation(logger, "list_commits", trace_id="abc123"):
        assert logger.context == {
            "user": "alice",
            "operation": "list_commits",
            "trace_id": "abc123",
        }

    assert logger.context == {"user": "alice"}
    lines = stream.getvalue().splitlines()
    assert lines[0] == (
        "user=alice,trace_id=abc123,operation=list_commits"
        "|Operation started: list_commits"
    )
    assert lines[1].endswith("s")
    assert "Operation completed: list_commits" in lines[1]


def test_log_operation_logs_failures(logger_and_stream):
    logger, stream = logger_and_stream

    with pytest.raises(RuntimeError):
        with log_operation(logger, "get_repository"):
            raise RuntimeError("kaboom")

    assert "Operation failed: get_repository" in stream.getvalue()
    assert "kaboom" in stream.getvalue()
    assert logger.context == {}


@pytest.mark.parametrize(
    "module",
    [
        "bitbucket_cloud.bitbucket.client",
        "bitbucket_cloud.bitbucket.pagination",
        "bitbucket_cloud.models.base",
        "bitbucket_cloud.models.commit",
        "bitbucket_cloud.models.pull_request",
        "bitbucket_cloud.models.repository",
        "bitbucket_cloud.utils.decorators",
    ],
)
def test_module_loggers_share_the_application_tree(module):
    module_logger = importlib.import_module(module).logger

    assert module_logger.name.startswith("bitbucket-cloud.")
