from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, field_validator


def _scalar_to_text(v):
    # Numbers and booleans are accepted as their text form; objects and lists are not.
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (int, float)):
        return str(v)
    return v

# Request bodies: missing fields arrive as None and are rejected by the gateways.

class EncryptStoreRequest(BaseModel):
    plaintext: Optional[str] = None

    coerce_text = field_validator("plaintext", mode="before")(_scalar_to_text)

class DecryptRequest(BaseModel):
    ciphertext: Optional[str] = None

    coerce_text = field_validator("ciphertext", mode="before")(_scalar_to_text)

class TransformRequest(BaseModel):
    value: Optional[str] = None
    transformation: Optional[str] = None

    coerce_text = field_validator("value", "transformation", mode="before")(_scalar_to_text)

# Responses

class TransitEntryOut(BaseModel):
    id: int
    created_at: datetime
    plaintext: str
    ciphertext: str

class EncryptStoreResponse(BaseModel):
    engine: str = "transit"
    key: str
    id: int
    created_at: datetime
    ciphertext: str
    note: Optional[str] = None

class EntriesResponse(BaseModel):
    entries: List[TransitEntryOut]

class DecryptResponse(BaseModel):
    engine: str = "transit"
    key: str
    plaintext: str

class DeleteAllResponse(BaseModel):
    deleted_rows: int

class EncodeResponse(BaseModel):
    engine: str = "transform"
    role: str
    transformation: str
    encoded: str

class DecodeResponse(BaseModel):
    engine: str = "transform"
    role: str
    transformation: str
    decoded: str

class InfoResponse(BaseModel):
    transit_key: str
    transform_role: str
    transformations: Dict[str, str]
    db_path: str
    tweak_configured: bool
    plaintext_audit: bool
