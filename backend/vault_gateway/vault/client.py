from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from vault_gateway.errors import ServiceError
from vault_gateway.logger import gateway_logger as logger

TOKEN_HEADER = "X-Vault-Token"


class VaultClient:
    """
    Thin POST-only client for the Vault HTTP API.

    Holds no state beyond the address and token. Every call is a single
    attempt: no retry, no caching. Non-2xx responses raise ServiceError
    carrying Vault's own ``errors`` list when it sent one.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._session = session or requests.Session()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/v1/{path.lstrip('/')}"

    def call(self, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = self.url_for(path)
        try:
            response = self._session.post(
                url,
                json=body or {},
                headers={"Content-Type": "application/json", TOKEN_HEADER: self._token},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning(f"Vault request to {path} failed: {exc}")
            raise ServiceError(f"Vault request failed: {exc}") from exc

        payload = _decode_body(response)
        if not 200 <= response.status_code < 300:
            message = _error_message(payload, response.status_code)
            logger.warning(f"Vault rejected {path} with status {response.status_code}: {message}")
            raise ServiceError(message)
        return payload


def _decode_body(response: requests.Response) -> Dict[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        # Keep whatever Vault sent so it can still be inspected.
        return {"raw": response.text}
    if not isinstance(payload, dict):
        return {"raw": response.text}
    return payload


def _error_message(payload: Dict[str, Any], status_code: int) -> str:
    errors = payload.get("errors")
    if isinstance(errors, list):
        joined = "; ".join(str(e) for e in errors)
        if joined:
            return joined
    return f"Vault error {status_code}"


def response_field(payload: Dict[str, Any], field: str) -> Any:
    """Pull ``data.<field>`` out of a successful Vault response."""
    data = payload.get("data")
    if not isinstance(data, dict) or field not in data:
        raise ServiceError(f"Vault response missing data.{field}")
    return data[field]


__all__ = ["VaultClient", "TOKEN_HEADER", "response_field"]
