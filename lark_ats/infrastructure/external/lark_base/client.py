"""
Cliente minimo de la Open API de Lark Base (sin SDKs externos).

Requisitos cubiertos:
- requests
- tenant_access_token de app self-built, cacheado hasta poco antes de expirar
- sobre de respuesta {code, msg, data}: code != 0 es error, msg se propaga intacto
- acceso memoizado a un unico cliente por proceso

No hay reintentos ni backoff: cualquier fallo sube al caller.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

import requests
from loguru import logger

from lark_ats.core.config import Settings, settings
from lark_ats.shared.exceptions import ConfigurationException, LarkApiError

TOKEN_PATH = "/open-apis/auth/v3/tenant_access_token/internal"

# Se renueva el token este margen (segundos) antes de su expiracion.
TOKEN_REFRESH_MARGIN_S = 180


@dataclass(frozen=True)
class LarkCredentials:
    app_id: str
    app_secret: str

    @classmethod
    def from_settings(cls, config: Settings) -> "LarkCredentials":
        """
        Construye credenciales desde la configuracion.

        Falla de inmediato (antes de cualquier request) si falta alguna.
        """
        if not config.LARK_APP_ID or not config.LARK_APP_SECRET:
            raise ConfigurationException(
                "LARK_APP_ID",
                "LARK_APP_ID y LARK_APP_SECRET deben estar definidas en las variables de entorno",
            )
        return cls(app_id=config.LARK_APP_ID, app_secret=config.LARK_APP_SECRET)


class LarkBaseClient:
    """
    Cliente HTTP de Lark. Expone `request`, que devuelve el `data` del sobre.

    Importante:
    - No interpreta los campos de los registros: eso lo hace ATSOperations.
    - Errores de red de requests (timeout, conexion) se propagan tal cual.
    """

    def __init__(
        self,
        credentials: LarkCredentials,
        *,
        session: Optional[requests.Session] = None,
        base_url: str = "https://open.larksuite.com",
        timeout_s: int = 30,
    ) -> None:
        self._creds = credentials
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._session = session or requests.Session()
        self._token: Optional[str] = None
        self._token_expires_at = 0.0

    @property
    def base_url(self) -> str:
        return self._base_url

    def request(
        self,
        method: str,
        path: str,
        *,
        action: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Ejecuta una llamada autenticada y retorna `data` del sobre ({} si no viene).

        Args:
            method: Verbo HTTP
            path: Ruta bajo la URL base, e.g. /open-apis/bitable/v1/...
            action: Descripcion corta para el mensaje de error ("crear el registro")
            params: Query string; las claves con None se omiten
            json: Body JSON

        Raises:
            LarkApiError: si code != 0 o la respuesta no es un sobre JSON
        """
        headers = {
            "Authorization": f"Bearer {self._tenant_access_token()}",
            "Content-Type": "application/json; charset=utf-8",
        }
        query = {k: v for k, v in (params or {}).items() if v is not None}

        logger.debug(f"Lark {method} {path}")
        payload = self._request_json(method, path, action=action, headers=headers, params=query, json=json)
        return payload.get("data") or {}

    def _tenant_access_token(self) -> str:
        """
        Retorna el tenant_access_token vigente, pidiendo uno nuevo si expira pronto.
        """
        if self._token and time.monotonic() < self._token_expires_at:
            return self._token

        payload = self._request_json(
            "POST",
            TOKEN_PATH,
            action="obtener el tenant_access_token",
            headers={"Content-Type": "application/json; charset=utf-8"},
            params=None,
            json={"app_id": self._creds.app_id, "app_secret": self._creds.app_secret},
        )
        token = payload.get("tenant_access_token")
        if not token:
            raise LarkApiError("Lark no devolvio tenant_access_token")

        expire_s = int(payload.get("expire") or 0)
        self._token = token
        self._token_expires_at = time.monotonic() + max(0, expire_s - TOKEN_REFRESH_MARGIN_S)
        logger.debug(f"Nuevo tenant_access_token obtenido (expira en {expire_s}s)")
        return token

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        action: str,
        headers: dict[str, str],
        params: Optional[dict[str, Any]],
        json: Optional[dict[str, Any]],
    ) -> dict[str, Any]:
        """
        Request HTTP y validacion del sobre.

        Lark responde errores de negocio con HTTP 4xx y sobre JSON; por eso
        se decide por `code` y solo se usa el status HTTP cuando no hay sobre.
        """
        resp = self._session.request(
            method=method,
            url=f"{self._base_url}{path}",
            params=params,
            json=json,
            headers=headers,
            timeout=self._timeout_s,
        )

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if not isinstance(payload, dict) or "code" not in payload:
            raise LarkApiError(
                f"No se pudo {action}: respuesta HTTP {resp.status_code} sin sobre JSON: {resp.text}",
                http_status=resp.status_code,
            )

        code = payload.get("code")
        if code != 0:
            msg = payload.get("msg", "")
            raise LarkApiError(
                f"No se pudo {action}: {msg}",
                code=code,
                remote_message=msg,
                http_status=resp.status_code,
            )
        return payload


def build_client_from_settings(config: Settings = settings) -> LarkBaseClient:
    """
    Constructor "oficial" del cliente leyendo la configuracion.

    Env vars requeridas:
    - LARK_APP_ID
    - LARK_APP_SECRET
    """
    return LarkBaseClient(
        LarkCredentials.from_settings(config),
        base_url=config.lark_base_url,
        timeout_s=config.LARK_HTTP_TIMEOUT,
    )


@lru_cache(maxsize=1)
def get_lark_client() -> LarkBaseClient:
    """
    Cliente compartido del proceso: se construye en el primer acceso y se reutiliza.

    Ningun otro componente debe construir su propio cliente.
    """
    return build_client_from_settings(settings)


def get_base_app_token(config: Settings = settings) -> str:
    """Retorna el app token de la Base destino (LARK_BASE_APP_TOKEN)."""
    if not config.LARK_BASE_APP_TOKEN:
        raise ConfigurationException(
            "LARK_BASE_APP_TOKEN",
            "LARK_BASE_APP_TOKEN debe estar definida en las variables de entorno",
        )
    return config.LARK_BASE_APP_TOKEN
