from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from vault_gateway.core.settings import Settings, get_settings
from vault_gateway.db import get_db
from vault_gateway.errors import ConfigurationError
from vault_gateway.gateways import TransformGateway, TransitGateway
from vault_gateway.store import TransitRecordStore
from vault_gateway.transformations import TransformCatalog
from vault_gateway.vault import TweakProvisioner, VaultClient


def get_vault_client(settings: Settings = Depends(get_settings)) -> VaultClient:
    missing = settings.missing_vault_settings()
    if missing:
        raise ConfigurationError(f"Missing {' or '.join(missing)} env vars.")
    return VaultClient(settings.vault_addr, settings.vault_token, timeout=settings.vault_timeout)


def get_record_store(db: Session = Depends(get_db)) -> TransitRecordStore:
    return TransitRecordStore(db)


def get_transform_catalog(settings: Settings = Depends(get_settings)) -> TransformCatalog:
    return TransformCatalog(fpe=settings.tf_fpe, tokenize=settings.tf_tok, mask=settings.tf_mask)


def get_tweak_provisioner(settings: Settings = Depends(get_settings)) -> TweakProvisioner:
    return TweakProvisioner(settings.ssn_tweak_b64)


def get_transit_gateway(
    client: VaultClient = Depends(get_vault_client),
    store: TransitRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
) -> TransitGateway:
    return TransitGateway(
        client,
        store,
        settings.transit_key,
        store_plaintext=settings.demo_plaintext_audit,
    )


def get_transform_gateway(
    client: VaultClient = Depends(get_vault_client),
    catalog: TransformCatalog = Depends(get_transform_catalog),
    tweaks: TweakProvisioner = Depends(get_tweak_provisioner),
    settings: Settings = Depends(get_settings),
) -> TransformGateway:
    return TransformGateway(client, settings.transform_role, catalog, tweaks)
