"""Tests for ccswitch logger setup."""

from __future__ import annotations

import logging

import pytest

from ccswitch.utils.log import parse_level, setup_logger


@pytest.fixture
def pkg_logger():
    logger = logging.getLogger("ccswitch")

    def _reset():
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    _reset()
    yield logger
    _reset()


def _console_handlers(logger):
    return [h for h in logger.handlers if type(h) is logging.StreamHandler]


def _file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


@pytest.mark.parametrize(
    "level,expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        (logging.ERROR, logging.ERROR),
        ("", logging.WARNING),
        ("nonsense", logging.WARNING),
    ],
)
def test_parse_level(level, expected):
    assert parse_level(level) == expected


def test_repeated_setup_does_not_stack_handlers(pkg_logger, tmp_path):
    log_file = tmp_path / "debug.log"
    setup_logger("warning", log_file)
    setup_logger("debug", log_file)

    consoles = _console_handlers(pkg_logger)
    assert len(consoles) == 1
    assert consoles[0].level == logging.DEBUG
    assert len(_file_handlers(pkg_logger)) == 1


def test_console_writes_to_current_stderr(pkg_logger, tmp_path, capsys):
    setup_logger("warning", tmp_path / "debug.log")
    logging.getLogger("ccswitch.test").warning("disk is full")
    logging.getLogger("ccswitch.test").info("quiet")

    err = capsys.readouterr().err
    assert "disk is full" in err
    assert "quiet" not in err


def test_file_handler_follows_new_path(pkg_logger, tmp_path):
    setup_logger("warning", tmp_path / "a" / "debug.log")
    setup_logger("warning", tmp_path / "b" / "debug.log")
    logging.getLogger("ccswitch.test").debug("into b")

    handlers = _file_handlers(pkg_logger)
    assert len(handlers) == 1
    handlers[0].flush()
    text = (tmp_path / "b" / "debug.log").read_text(encoding="utf-8")
    assert "into b" in text
