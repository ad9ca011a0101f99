from __future__ import annotations

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from vault_gateway.errors import ConfigurationError

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    vault_addr: Optional[str] = Field(default=None)
    vault_token: Optional[str] = Field(default=None)
    vault_timeout: Optional[float] = Field(default=None)
    transit_key: str = Field(default="demo-key")
    transform_role: str = Field(default="ssn-demo")
    tf_fpe: str = Field(default="ssn_fpe")
    tf_tok: str = Field(default="ssn_tokenize")
    tf_mask: str = Field(default="ssn_mask")
    ssn_tweak_b64: str = Field(default="")
    db_path: str = Field(default="demo.db")
    # Keeps plaintext next to ciphertext for the demo tables. Never enable in a hardened deployment.
    demo_plaintext_audit: bool = Field(default=True)
    allowed_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    rate_limit: str = Field(default="120/minute")
    log_file: str = Field(default="gateway.log")

    def missing_vault_settings(self) -> List[str]:
        missing = []
        if not self.vault_addr:
            missing.append("VAULT_ADDR")
        if not self.vault_token:
            missing.append("VAULT_TOKEN")
        return missing


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name, default)
    if value == "":
        return default
    return value


def _split_origins(raw: Optional[str]) -> List[str]:
    """
    ALLOWED_ORIGINS="https://demo.example.com,https://localhost:3000"
    """
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return origins or list(DEFAULT_ALLOWED_ORIGINS)


def _seconds(name: str, raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value


def _load_settings() -> Settings:
    env = _env
    vault_addr = env("VAULT_ADDR")
    if vault_addr:
        vault_addr = vault_addr.rstrip("/")
    timeout = env("VAULT_TIMEOUT")
    return Settings(
        vault_addr=vault_addr,
        vault_token=env("VAULT_TOKEN"),
        vault_timeout=_seconds("VAULT_TIMEOUT", timeout),
        transit_key=env("TRANSIT_KEY", "demo-key"),
        transform_role=env("TRANSFORM_ROLE", "ssn-demo"),
        tf_fpe=env("TF_FPE", "ssn_fpe"),
        tf_tok=env("TF_TOK", "ssn_tokenize"),
        tf_mask=env("TF_MASK", "ssn_mask"),
        ssn_tweak_b64=(env("SSN_TWEAK_B64", "") or "").strip(),
        db_path=env("DB_PATH", "demo.db"),
        demo_plaintext_audit=env("DEMO_PLAINTEXT_AUDIT", "1") == "1",
        allowed_origins=_split_origins(env("ALLOWED_ORIGINS")),
        rate_limit=env("RATE_LIMIT", "120/minute"),
        log_file=env("LOG_FILE", "gateway.log"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return _load_settings()


def reload_settings() -> Settings:
    get_settings.cache_clear()
    return get_settings()


__all__ = ["Settings", "get_settings", "reload_settings"]
