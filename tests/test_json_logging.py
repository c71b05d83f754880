import json
import logging
import warnings

from simulift.config.load_config import LoggingCfg
from simulift.errors import RangeWarning
from simulift.observability.logging import JsonLogFormatter, setup_json_logging, setup_logging


def test_json_formatter_fields():
    rec = logging.LogRecord("simulift.test", logging.WARNING, __file__, 1, "wind %s", ("high",), None)
    out = json.loads(JsonLogFormatter().format(rec))
    assert out["level"] == "WARNING"
    assert out["logger"] == "simulift.test"
    assert out["msg"] == "wind high"
    assert "ts" in out


def test_json_logging_goes_to_stderr(capsys):
    setup_json_logging("INFO")
    logging.getLogger("simulift.test").info("hello")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert json.loads(captured.err.strip().splitlines()[-1])["msg"] == "hello"


def test_warnings_are_logged(capsys):
    setup_logging(LoggingCfg(level="WARNING", json_logs=True))
    with warnings.catch_warnings():
        warnings.simplefilter("always")
        warnings.warn("scale 14 out of range", RangeWarning)
    line = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert line["logger"] == "py.warnings"
    assert "scale 14 out of range" in line["msg"]


def test_plain_logging_level(capsys):
    setup_logging(LoggingCfg(level="ERROR"))
    logging.getLogger("simulift.test").warning("quiet")
    assert capsys.readouterr().err == ""
