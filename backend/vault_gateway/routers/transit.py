from typing import Optional

from fastapi import APIRouter, Depends, Query

from vault_gateway.deps import get_transit_gateway
from vault_gateway.gateways.transit import DEFAULT_LIST_LIMIT, TransitGateway
from vault_gateway.models import (
    DecryptRequest,
    DecryptResponse,
    DeleteAllResponse,
    EncryptStoreRequest,
    EncryptStoreResponse,
    EntriesResponse,
    TransitEntryOut,
)

router = APIRouter(prefix="/api/transit", tags=["transit"])

DEMO_NOTE = "Plaintext is stored only to support the demo plaintext table."


@router.post("/encrypt-store", response_model=EncryptStoreResponse)
def encrypt_store(
    payload: Optional[EncryptStoreRequest] = None,
    gateway: TransitGateway = Depends(get_transit_gateway),
):
    plaintext = (payload.plaintext if payload else None) or ""
    record = gateway.encrypt_and_store(plaintext)
    return EncryptStoreResponse(
        key=gateway.key_name,
        id=record.id,
        created_at=record.created_at,
        ciphertext=record.ciphertext,
        note=DEMO_NOTE,
    )


@router.get("/entries", response_model=EntriesResponse)
def list_entries(
    limit: int = Query(DEFAULT_LIST_LIMIT),
    gateway: TransitGateway = Depends(get_transit_gateway),
):
    records = gateway.list_recent(limit)
    return EntriesResponse(entries=[
        TransitEntryOut(
            id=r.id,
            created_at=r.created_at,
            plaintext=r.plaintext,
            ciphertext=r.ciphertext,
        )
        for r in records
    ])


@router.post("/decrypt", response_model=DecryptResponse)
def decrypt(
    payload: Optional[DecryptRequest] = None,
    gateway: TransitGateway = Depends(get_transit_gateway),
):
    ciphertext = (payload.ciphertext if payload else None) or ""
    plaintext = gateway.decrypt(ciphertext)
    return DecryptResponse(key=gateway.key_name, plaintext=plaintext)


@router.post("/delete-all", response_model=DeleteAllResponse)
def delete_all(gateway: TransitGateway = Depends(get_transit_gateway)):
    return DeleteAllResponse(deleted_rows=gateway.delete_all())
