from __future__ import annotations

import logging

import pytest

from read_receipts.api.responses import GuardedPlainTextResponse

SCOPE = {"type": "http", "method": "GET", "path": "/api/v1/hello", "headers": []}


async def _receive():
    return {"type": "http.request", "body": b"", "more_body": False}


def _failing_send(sent: list, fail_on: str, times: int = 1):
    remaining = {"n": times}

    async def send(message):
        if message["type"] == fail_on and remaining["n"] > 0:
            remaining["n"] -= 1
            raise OSError("connection reset by peer")
        sent.append(message)

    return send


@pytest.mark.asyncio
async def test_writes_greeting():
    sent: list = []
    await GuardedPlainTextResponse(b"Hello, world!")(SCOPE, _receive, _failing_send(sent, "never"))

    assert sent[0]["status"] == 200
    assert sent[1]["body"] == b"Hello, world!"


@pytest.mark.asyncio
async def test_failure_before_status_sends_500(caplog):
    sent: list = []
    with caplog.at_level(logging.ERROR, logger="read_receipts.api.responses"):
        await GuardedPlainTextResponse(b"Hello, world!")(
            SCOPE, _receive, _failing_send(sent, "http.response.start"),
        )

    assert sent[0]["status"] == 500
    assert sent[1]["body"] == b"connection reset by peer"
    record = caplog.records[0]
    assert record.getMessage() == "Failed to write response"
    assert record.error == "connection reset by peer"


@pytest.mark.asyncio
async def test_failure_after_status_only_logs(caplog):
    sent: list = []
    with caplog.at_level(logging.ERROR, logger="read_receipts.api.responses"):
        await GuardedPlainTextResponse(b"Hello, world!")(
            SCOPE, _receive, _failing_send(sent, "http.response.body"),
        )

    assert [m["type"] for m in sent] == ["http.response.start"]
    assert sent[0]["status"] == 200
    assert caplog.records[0].error == "connection reset by peer"
