"""
Configuracion de fixtures para pytest.
"""
from __future__ import annotations

from typing import Any, Optional

import pytest
from loguru import logger

from lark_ats.infrastructure.external.lark_base.client import LarkBaseClient, LarkCredentials


class DummyResponse:
    def __init__(self, payload: Any, status_code: int = 200, text: Optional[str] = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else str(payload)
        self.headers: dict[str, str] = {}

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class DummySession:
    """
    Sustituto de requests.Session: registra cada llamada y responde en orden.

    La llamada al endpoint de token se responde sola y no consume la cola.
    """

    def __init__(self, responses: Optional[list[DummyResponse]] = None) -> None:
        self.responses = list(responses or [])
        self.calls: list[dict[str, Any]] = []
        self.token_calls: list[dict[str, Any]] = []

    def request(self, **kwargs: Any) -> DummyResponse:
        if kwargs["url"].endswith("/tenant_access_token/internal"):
            self.token_calls.append(kwargs)
            return DummyResponse({"code": 0, "msg": "ok", "tenant_access_token": "t-123", "expire": 7200})
        self.calls.append(kwargs)
        return self.responses.pop(0)


def ok(data: Optional[dict[str, Any]] = None) -> DummyResponse:
    return DummyResponse({"code": 0, "msg": "success", "data": data or {}})


def fail(code: int, msg: str, status_code: int = 400) -> DummyResponse:
    return DummyResponse({"code": code, "msg": msg}, status_code=status_code)


@pytest.fixture
def session() -> DummySession:
    return DummySession()


@pytest.fixture
def client(session: DummySession) -> LarkBaseClient:
    return LarkBaseClient(
        LarkCredentials(app_id="cli_test", app_secret="secret"),
        session=session,
        base_url="https://open.larksuite.com",
    )


@pytest.fixture
def log_messages():
    """Captura los mensajes emitidos por loguru durante el test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def lark_ok():
    """Fabrica de respuestas exitosas ({code: 0, data})."""
    return ok


@pytest.fixture
def lark_fail():
    """Fabrica de respuestas con code != 0."""
    return fail
