from vault_gateway.vault.client import TOKEN_HEADER, VaultClient, response_field
from vault_gateway.vault.tweak import TWEAK_LENGTH, TweakMaterial, TweakProvisioner

__all__ = [
    "TOKEN_HEADER",
    "VaultClient",
    "response_field",
    "TWEAK_LENGTH",
    "TweakMaterial",
    "TweakProvisioner",
]
