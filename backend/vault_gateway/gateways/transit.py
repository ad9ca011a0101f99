from __future__ import annotations

import base64
import binascii
from typing import List

from vault_gateway.errors import ServiceError, require
from vault_gateway.logger import gateway_logger as logger
from vault_gateway.store import TransitRecord, TransitRecordStore
from vault_gateway.vault.client import VaultClient, response_field

DEFAULT_LIST_LIMIT = 50
MAX_LIST_LIMIT = 200
REDACTED_PLAINTEXT = "[redacted]"


def clamp_limit(limit: int) -> int:
    return max(1, min(MAX_LIST_LIMIT, limit))


class TransitGateway:
    """
    Encrypt-and-store / decrypt against Vault's transit engine.

    With ``store_plaintext`` on (demo audit mode) the plaintext is persisted
    next to its ciphertext so the demo can show both tables. A hardened
    deployment turns it off and only ciphertext is meaningful in the log.
    """

    def __init__(
        self,
        client: VaultClient,
        store: TransitRecordStore,
        key_name: str,
        *,
        store_plaintext: bool = True,
    ) -> None:
        self._client = client
        self._store = store
        self.key_name = key_name
        self._store_plaintext = store_plaintext

    def encrypt_and_store(self, plaintext: str) -> TransitRecord:
        require(plaintext, "plaintext")
        encoded = base64.b64encode(plaintext.encode("utf-8")).decode("ascii")
        payload = self._client.call(f"transit/encrypt/{self.key_name}", {"plaintext": encoded})
        ciphertext = response_field(payload, "ciphertext")

        stored_plaintext = plaintext if self._store_plaintext else REDACTED_PLAINTEXT
        record = self._store.append(stored_plaintext, ciphertext)
        logger.info(f"Transit entry {record.id} encrypted with key {self.key_name}")
        return record

    def decrypt(self, ciphertext: str) -> str:
        require(ciphertext, "ciphertext")
        payload = self._client.call(f"transit/decrypt/{self.key_name}", {"ciphertext": ciphertext})
        encoded = response_field(payload, "plaintext")
        try:
            plaintext = base64.b64decode(encoded, validate=True).decode("utf-8")
        except (binascii.Error, ValueError, TypeError) as exc:
            raise ServiceError("Vault returned plaintext that is not base64 UTF-8") from exc
        logger.info(f"Transit ciphertext decrypted with key {self.key_name}")
        return plaintext

    def list_recent(self, limit: int = DEFAULT_LIST_LIMIT) -> List[TransitRecord]:
        return self._store.list_recent(clamp_limit(limit))

    def delete_all(self) -> int:
        deleted = self._store.clear()
        logger.info(f"Deleted {deleted} transit entries")
        return deleted


__all__ = [
    "DEFAULT_LIST_LIMIT",
    "MAX_LIST_LIMIT",
    "REDACTED_PLAINTEXT",
    "TransitGateway",
    "clamp_limit",
]
