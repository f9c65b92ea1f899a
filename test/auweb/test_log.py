import io
import logging
import sys

from auweb import log


def test_formatter():
    f = log.AuwebFormatter()
    record = logging.LogRecord("x", logging.WARNING, "", 0, "hello %s", ("world",), None)
    assert f.format(record).endswith("] hello world")
    assert f.format(record).startswith("[")


def test_formatter_exc_info():
    f = log.AuwebFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, "", 0, "failed", (), sys.exc_info())
    assert "ValueError: boom" in f.format(record)


def test_setup_logging():
    stream = io.StringIO()
    handler = log.setup_logging("info", stream)
    try:
        logging.getLogger("auweb.test").debug("hidden")
        logging.getLogger("auweb.test").info("shown")
    finally:
        handler.uninstall()
    assert "shown" in stream.getvalue()
    assert "hidden" not in stream.getvalue()
    assert handler not in logging.getLogger().handlers


def test_log_tier():
    assert log.log_tier("error") == logging.ERROR
    assert log.log_tier("warn") == logging.WARNING
    assert log.log_tier("debug") == logging.DEBUG
