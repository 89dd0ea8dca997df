"""Tests for logging utilities."""

import logging
from io import StringIO

from logger import configure_logging, get_logger, is_level_name, set_log_level


def test_get_logger_is_namespaced_and_cached():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "searchlab.test_module"
    assert get_logger("test_module") is logger
    assert get_logger("searchlab.test_module") is logger


def test_different_modules_get_different_loggers():
    assert get_logger("module1") is not get_logger("module2")


def test_logger_output_format():
    captured = StringIO()
    log = get_logger("test_module")
    try:
        configure_logging(level=logging.INFO, stream=captured)
        log.info("engine ready")
        assert captured.getvalue() == "[INFO] searchlab.test_module: engine ready\n"
    finally:
        configure_logging(level=logging.WARNING)


def test_set_log_level_filters_messages():
    captured = StringIO()
    log = get_logger("level_test")
    try:
        configure_logging(level="WARNING", stream=captured)
        log.info("hidden")
        set_log_level("INFO")
        log.info("shown")
        assert "hidden" not in captured.getvalue()
        assert "shown" in captured.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_engine_logs_terminal_transition(standard):
    from engine import create

    captured = StringIO()
    try:
        get_logger("engine.search")
        configure_logging(level="INFO", stream=captured)
        engine = create(standard, "ucs")
        engine.run()
        assert "UCS on 'standard' solved" in captured.getvalue()
        assert "S-A-C-G cost 11" in captured.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_stepper_warns_on_cap(standard):
    from engine import Stepper, create

    captured = StringIO()
    try:
        configure_logging(level="WARNING", stream=captured)
        stepper = Stepper(max_steps=1)
        stepper.start(create(standard, "bfs"))
        stepper.jump_to_end()
        assert "[WARNING]" in captured.getvalue()
        assert "1-step cap" in captured.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_non_level_names_coerce_to_warning():
    captured = StringIO()
    log = get_logger("coerce_test")
    try:
        configure_logging(level="basic_format", stream=captured)
        log.info("hidden")
        log.warning("shown")
        assert captured.getvalue() == "[WARNING] searchlab.coerce_test: shown\n"
    finally:
        configure_logging(level=logging.WARNING)


def test_is_level_name():
    assert is_level_name("debug")
    assert is_level_name("WARNING")
    assert not is_level_name("basic_format")
    assert not is_level_name("root")
