from __future__ import annotations

import logging

import httpx
from loguru import logger as _logger

from zillow.api.base import ZillowClient
from zillow.util.log import configure_logging, get_logger, shutdown_logging


def _messages(records: list) -> list[str]:
    return [record["message"] for record in records]


def test_level_filters_debug() -> None:
    records = []
    configure_logging(level="WARNING", sink=lambda message: records.append(message.record))

    log = get_logger("zillow-test")
    log.debug("hidden")
    log.warning("shown")

    assert _messages(records) == ["shown"]


def test_debug_level_shows_requests() -> None:
    records = []
    configure_logging(level="DEBUG", sink=lambda message: records.append(message.record))
    transport = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<root/>"))
    )

    ZillowClient("X1-secret").set_client(transport).execute("GetZestimate", {"zpid": 1})

    messages = _messages(records)
    assert any(m.startswith("Sending request: GET") for m in messages)
    assert any(m.startswith("Received response: 200") for m in messages)
    assert not any("X1-secret" in m for m in messages)
    assert all(r["extra"]["logger_name"] == "ZillowClient" for r in records)


def test_failed_call_logged_once() -> None:
    records = []
    configure_logging(level="DEBUG", sink=lambda message: records.append(message.record))
    transport = httpx.Client(
        transport=httpx.MockTransport(lambda request: httpx.Response(500, text="boom"))
    )

    client = ZillowClient("X1-test").set_client(transport)
    client.set_logger(get_logger("app"))
    client.execute("GetZestimate", {"zpid": 1})

    failed = [m for m in _messages(records) if m.startswith("Failed Zillow call")]
    assert len(failed) == 1


def test_intercept_transport() -> None:
    records = []
    configure_logging(
        level="DEBUG",
        sink=lambda message: records.append(message.record),
        intercept_transport=True,
    )

    logging.getLogger("httpx").info("HTTP Request: GET http://example.test")
    shutdown_logging()

    assert _messages(records) == ["HTTP Request: GET http://example.test"]
    assert records[0]["extra"]["logger_name"] == "httpx"
    assert logging.getLogger("httpx").propagate is True
    assert logging.getLogger("httpx").handlers == []


def test_reconfigure_replaces_sink() -> None:
    first, second = [], []
    configure_logging(level="INFO", sink=lambda message: first.append(message.record))
    configure_logging(level="INFO", sink=lambda message: second.append(message.record))

    get_logger("zillow-test").info("once")

    assert first == []
    assert _messages(second) == ["once"]


def test_get_logger_binds_name() -> None:
    records = []
    handler_id = _logger.add(lambda message: records.append(message.record), level="INFO")

    get_logger("zillow-test", call="GetZestimate").info("bound")

    _logger.remove(handler_id)
    assert records[0]["extra"]["logger_name"] == "zillow-test"
    assert records[0]["extra"]["call"] == "GetZestimate"
