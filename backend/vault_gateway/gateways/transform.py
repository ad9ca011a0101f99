from __future__ import annotations

from typing import Any, Dict

from vault_gateway.errors import ValidationError, require
from vault_gateway.logger import gateway_logger as logger
from vault_gateway.transformations import Transformation, TransformCatalog
from vault_gateway.vault.client import VaultClient, response_field
from vault_gateway.vault.tweak import TweakProvisioner


class TransformGateway:
    """
    Encode/decode against Vault's transform engine for one role.

    FPE transformations get the pre-shared tweak on both directions; the
    value must be byte-identical or decode will not recover the input.
    """

    def __init__(
        self,
        client: VaultClient,
        role_name: str,
        catalog: TransformCatalog,
        tweaks: TweakProvisioner,
    ) -> None:
        self._client = client
        self.role_name = role_name
        self._catalog = catalog
        self._tweaks = tweaks

    def encode(self, value: str, transformation: str) -> str:
        resolved = self._prepare(value, transformation)
        payload = self._client.call(
            f"transform/encode/{self.role_name}", self._request_body(value, resolved)
        )
        logger.info(f"Encoded value with {resolved.name} on role {self.role_name}")
        return response_field(payload, "encoded_value")

    def decode(self, value: str, transformation: str) -> str:
        resolved = self._prepare(value, transformation)
        if not resolved.supports_decode:
            raise ValidationError(f"transformation {resolved.name} does not support decode")
        payload = self._client.call(
            f"transform/decode/{self.role_name}", self._request_body(value, resolved)
        )
        logger.info(f"Decoded value with {resolved.name} on role {self.role_name}")
        return response_field(payload, "decoded_value")

    def _prepare(self, value: str, transformation: str) -> Transformation:
        require(value, "value")
        require(transformation, "transformation")
        return self._catalog.resolve(transformation)

    def _request_body(self, value: str, transformation: Transformation) -> Dict[str, Any]:
        body: Dict[str, Any] = {"value": value, "transformation": transformation.name}
        if transformation.requires_tweak:
            body["tweak"] = self._tweaks.provide().encoded
        return body


__all__ = ["TransformGateway"]
