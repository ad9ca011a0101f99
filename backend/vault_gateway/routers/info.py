from fastapi import APIRouter, Depends

from vault_gateway.core.settings import Settings, get_settings
from vault_gateway.deps import get_tweak_provisioner
from vault_gateway.models import InfoResponse
from vault_gateway.vault import TweakProvisioner

router = APIRouter(prefix="/api", tags=["info"])


@router.get("/info", response_model=InfoResponse)
def info(
    settings: Settings = Depends(get_settings),
    tweaks: TweakProvisioner = Depends(get_tweak_provisioner),
):
    # Names only; the tweak and token never leave the server.
    return InfoResponse(
        transit_key=settings.transit_key,
        transform_role=settings.transform_role,
        transformations={
            "fpe": settings.tf_fpe,
            "tokenize": settings.tf_tok,
            "mask": settings.tf_mask,
        },
        db_path=settings.db_path,
        tweak_configured=tweaks.configured,
        plaintext_audit=settings.demo_plaintext_audit,
    )
