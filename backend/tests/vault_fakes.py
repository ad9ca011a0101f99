"""In-process stand-in for the Vault HTTP API used by the gateway tests."""

from __future__ import annotations

import base64
import json
from typing import Any, Dict, List, Optional

VAULT_ADDR = "http://vault.test:8200"
VAULT_TOKEN = "root-token"
TWEAK_B64 = "ZGVtby10dw=="  # b"demo-tw"
OTHER_TWEAK_B64 = "YWJjZGVmZw=="  # b"abcdefg"

FPE_NAME = "ssn_fpe"
TOKENIZE_NAME = "ssn_tokenize"
MASK_NAME = "ssn_mask"


class FakeResponse:
    def __init__(self, status_code: int, payload: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self._payload = payload
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    def json(self) -> Any:
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


def _error(status: int, *messages: str) -> FakeResponse:
    return FakeResponse(status, {"errors": list(messages)})


def _shift_digits(value: str, shift: int) -> str:
    return "".join(
        str((int(ch) + shift) % 10) if ch.isdigit() else ch
        for ch in value
    )


def _tweak_shift(tweak_b64: str) -> int:
    return sum(base64.b64decode(tweak_b64)) % 9 + 1


class FakeVaultSession:
    """
    Records every POST and answers like Vault's transit and transform engines.

    Transit ciphertext is ``vault:v1:<base64 plaintext>`` so encrypt/decrypt
    are an identity pair. FPE shifts digits by an amount derived from the
    tweak, so decoding with a different tweak gives a different value.
    """

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.fail_with: Optional[FakeResponse] = None
        self.raise_exc: Optional[Exception] = None
        self._tokens: Dict[str, str] = {}

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.raise_exc is not None:
            raise self.raise_exc
        if self.fail_with is not None:
            return self.fail_with
        if (headers or {}).get("X-Vault-Token") != VAULT_TOKEN:
            return _error(403, "permission denied")

        path = url.split("/v1/", 1)[1]
        engine, op, name = path.split("/", 2)
        body = json or {}
        if engine == "transit":
            return self._transit(op, body)
        if engine == "transform":
            return self._transform(op, body)
        return _error(404, f"no handler for route '{path}'")

    def _transit(self, op: str, body: Dict[str, Any]) -> FakeResponse:
        if op == "encrypt":
            return FakeResponse(200, {"data": {"ciphertext": f"vault:v1:{body['plaintext']}", "key_version": 1}})
        ciphertext = body.get("ciphertext", "")
        if not ciphertext.startswith("vault:v1:"):
            return _error(400, "invalid ciphertext: no prefix")
        return FakeResponse(200, {"data": {"plaintext": ciphertext[len("vault:v1:"):]}})

    def _transform(self, op: str, body: Dict[str, Any]) -> FakeResponse:
        value = body["value"]
        transformation = body["transformation"]
        if transformation == FPE_NAME:
            if "tweak" not in body:
                return _error(400, "tweak is required for this transformation")
            shift = _tweak_shift(body["tweak"])
            result = _shift_digits(value, shift if op == "encode" else -shift)
        elif transformation == TOKENIZE_NAME:
            if op == "encode":
                result = f"tok_{len(self._tokens) + 1:06d}"
                self._tokens[result] = value
            elif value in self._tokens:
                result = self._tokens[value]
            else:
                return _error(400, "unable to decode token")
        elif transformation == MASK_NAME:
            if op == "decode":
                return _error(400, "masking transformations cannot be decoded")
            result = "###-##-" + value[-4:]
        else:
            return _error(400, f"unknown transformation '{transformation}'")
        field = "encoded_value" if op == "encode" else "decoded_value"
        return FakeResponse(200, {"data": {field: result}})
