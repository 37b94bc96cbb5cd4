import io

import pytest

from touchflow import logger
from touchflow.logger import Logger, LogLevel


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


@pytest.fixture
def fresh_singleton(monkeypatch):
    monkeypatch.setattr(logger, "_logger", None)


def test_defaults_enable_all_but_debug():
    log = Logger()
    assert log.enabled(LogLevel.ERROR)
    assert log.enabled(LogLevel.WARNING)
    assert log.enabled(LogLevel.INFO)
    assert not log.enabled(LogLevel.DEBUG)


def test_debug_enables_debug_level():
    assert Logger(debug=True).enabled(LogLevel.DEBUG)


def test_quiet_disables_everything_even_with_debug():
    log = Logger(debug=True, quiet=True)
    assert not any(log.enabled(level) for level in LogLevel)


def test_errors_go_to_error_stream(streams):
    out, err = streams
    log = Logger(out=out, err=err)
    log.log(LogLevel.ERROR, "broken")
    log.log(LogLevel.INFO, "hello")
    assert err.getvalue() == "broken\n"
    assert out.getvalue() == "hello\n"


def test_disabled_levels_write_nothing(streams):
    out, err = streams
    log = Logger(out=out, err=err)
    log.log(LogLevel.DEBUG, "hidden")
    assert out.getvalue() == ""
    assert err.getvalue() == ""


def test_quiet_logger_is_silent(streams):
    out, err = streams
    log = Logger(quiet=True, out=out, err=err)
    for level in LogLevel:
        log.log(level, "message")
    assert out.getvalue() + err.getvalue() == ""


def test_configure_applies_only_first_time(fresh_singleton):
    first = logger.configure(quiet=True)
    second = logger.configure(debug=True)
    assert first is second
    assert not second.enabled(LogLevel.INFO)
    assert logger.get_logger() is first


def test_module_functions_use_shared_logger(fresh_singleton, capsys):
    logger.configure(debug=True)
    logger.info("info message")
    logger.warning("warning message")
    logger.debug("debug message")
    logger.error("error message")
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "info message",
        "warning message",
        "debug message",
    ]
    assert captured.err == "error message\n"


def test_default_shared_logger_hides_debug(fresh_singleton, capsys):
    logger.debug("not shown")
    assert capsys.readouterr().out == ""