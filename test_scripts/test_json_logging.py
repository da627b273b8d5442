# Tests for the JSON log formatter used across the app
import json
import logging

from app.config import setup_json_logging


def _lines(capsys):
    out = capsys.readouterr().out
    return [json.loads(line) for line in out.splitlines() if line.strip()]


def test_basic_logging(capsys):
    setup_json_logging(logging.INFO)
    logging.getLogger("app.test").info("Basic log message without extra fields")

    (record,) = _lines(capsys)
    assert record["message"] == "Basic log message without extra fields"
    assert record["levelname"] == "INFO"
    assert record["name"] == "app.test"
    # Unset extra fields are dropped instead of rendered as null
    assert "framework" not in record
    assert "brief_id" not in record


def test_logging_with_extra(capsys):
    setup_json_logging(logging.DEBUG)
    logger = logging.getLogger("app.test")
    logger.info(
        "brief_review.submitted",
        extra={"org_id": 1, "brief_id": 7, "framework": "ice", "priority": 1},
    )
    logger.warning(
        "prioritization.unknown_framework",
        extra={"requested_framework": "bogus", "framework": "simple", "reason": "unknown"},
    )

    submitted, unknown = _lines(capsys)
    assert submitted["framework"] == "ice"
    assert submitted["brief_id"] == 7
    assert submitted["priority"] == 1
    assert "reviewed_by" not in submitted
    assert unknown["levelname"] == "WARNING"
    assert unknown["requested_framework"] == "bogus"


def test_level_filters_debug(capsys):
    setup_json_logging(logging.INFO)
    logging.getLogger("app.test").debug("priority_input.changed", extra={"framework": "ice"})
    assert _lines(capsys) == []


def test_setup_is_idempotent(capsys):
    setup_json_logging()
    setup_json_logging()
    logging.getLogger("app.test").info("once")
    assert len(_lines(capsys)) == 1
