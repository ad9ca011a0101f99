from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from vault_gateway.errors import ConfigurationError

# Vault's FF3-1 transformations take a 56-bit tweak.
TWEAK_LENGTH = 7


@dataclass(frozen=True)
class TweakMaterial:
    encoded: str
    raw: bytes


class TweakProvisioner:
    """
    Holds the pre-shared FPE tweak for the lifetime of the process.

    The value is only checked when an FPE operation asks for it, so a
    missing tweak never blocks tokenization, masking or transit calls.
    """

    def __init__(self, encoded: str) -> None:
        self._encoded = (encoded or "").strip()

    @property
    def configured(self) -> bool:
        return bool(self._encoded)

    def provide(self) -> TweakMaterial:
        if not self._encoded:
            raise ConfigurationError("tweak required for deterministic FPE")
        try:
            raw = base64.b64decode(self._encoded, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ConfigurationError("SSN_TWEAK_B64 is not valid base64") from exc
        if len(raw) != TWEAK_LENGTH:
            raise ConfigurationError(
                f"SSN_TWEAK_B64 must decode to {TWEAK_LENGTH} bytes, got {len(raw)}"
            )
        return TweakMaterial(encoded=self._encoded, raw=raw)


__all__ = ["TWEAK_LENGTH", "TweakMaterial", "TweakProvisioner"]
