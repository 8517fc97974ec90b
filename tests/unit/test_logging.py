"""Unit tests for core/logging.py and core/context.py"""

import json
import logging

from collabnotes.core.context import RequestContext, resolve_logger
from collabnotes.core.logging import ColoredFormatter, JSONFormatter, get_logger


def _record(msg="hello", **extra):
    record = logging.LogRecord("collabnotes.test", logging.INFO, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_extras():
    out = json.loads(JSONFormatter().format(_record(request_id="r1", note_id=3)))
    assert out["message"] == "hello"
    assert out["level"] == "INFO"
    assert out["extra"] == {"request_id": "r1", "note_id": 3}


def test_colored_formatter_prefixes_request_id_without_mutating_record():
    record = _record(request_id="r1")
    line = ColoredFormatter("%(message)s").format(record)
    assert line.endswith("[r1] hello")
    assert record.msg == "hello"


def test_get_logger_namespace():
    assert get_logger("notes").name == "collabnotes.notes"


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_context_logger_stamps_request_id():
    # the collabnotes logger does not propagate, so caplog cannot see it
    handler = ListHandler()
    target = logging.getLogger("collabnotes.notes")
    target.addHandler(handler)
    try:
        RequestContext.for_logger("notes", "req-9").logger.info("Note created", extra={"note_id": 1})
    finally:
        target.removeHandler(handler)

    record = handler.records[-1]
    assert record.request_id == "req-9"
    assert record.note_id == 1


def test_resolve_logger_without_context():
    log = resolve_logger(None, "notes")
    assert log.logger.name == "collabnotes.notes"
    assert log.extra == {"request_id": None}
