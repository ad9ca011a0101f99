from typing import Optional

from fastapi import APIRouter, Depends

from vault_gateway.deps import get_transform_gateway
from vault_gateway.gateways.transform import TransformGateway
from vault_gateway.models import DecodeResponse, EncodeResponse, TransformRequest

router = APIRouter(prefix="/api/transform", tags=["transform"])


def _fields(payload: Optional[TransformRequest]) -> tuple[str, str]:
    if payload is None:
        return "", ""
    return payload.value or "", payload.transformation or ""


@router.post("/encode", response_model=EncodeResponse)
def encode(
    payload: Optional[TransformRequest] = None,
    gateway: TransformGateway = Depends(get_transform_gateway),
):
    value, transformation = _fields(payload)
    encoded = gateway.encode(value, transformation)
    return EncodeResponse(role=gateway.role_name, transformation=transformation, encoded=encoded)


@router.post("/decode", response_model=DecodeResponse)
def decode(
    payload: Optional[TransformRequest] = None,
    gateway: TransformGateway = Depends(get_transform_gateway),
):
    value, transformation = _fields(payload)
    decoded = gateway.decode(value, transformation)
    return DecodeResponse(role=gateway.role_name, transformation=transformation, decoded=decoded)
