import json
import logging

from mis_backend.observability import JSONFormatter


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord(
        name="mis_backend.api.errors",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="%s failed",
        args=("save user",),
        exc_info=None,
    )
    record.operation = "save user"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "ERROR"
    assert payload["message"] == "save user failed"
    assert payload["operation"] == "save user"
    assert "user_id" not in payload
