import os
import tempfile

# The gateway logger opens its file at import time; keep it out of the source tree.
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "vault-gateway-tests.log"))
os.environ.setdefault("RATE_LIMIT", "1000/minute")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from vault_gateway.core.settings import get_settings
from vault_gateway.db import get_engine
from vault_gateway.deps import get_vault_client
from vault_gateway.main import app
from vault_gateway.store import TransitRecordStore
from vault_gateway.vault import VaultClient

from vault_fakes import TWEAK_B64, VAULT_ADDR, VAULT_TOKEN, FakeVaultSession


@pytest.fixture
def fake_vault():
    return FakeVaultSession()


@pytest.fixture
def vault_client(fake_vault):
    return VaultClient(VAULT_ADDR, VAULT_TOKEN, session=fake_vault)


@pytest.fixture
def db_session(tmp_path):
    session = Session(get_engine(str(tmp_path / "records.db")))
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def record_store(db_session):
    return TransitRecordStore(db_session)


@pytest.fixture
def gateway_env(tmp_path, monkeypatch):
    monkeypatch.setenv("VAULT_ADDR", VAULT_ADDR)
    monkeypatch.setenv("VAULT_TOKEN", VAULT_TOKEN)
    monkeypatch.setenv("DB_PATH", str(tmp_path / "demo.db"))
    monkeypatch.setenv("SSN_TWEAK_B64", TWEAK_B64)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def client(gateway_env, vault_client):
    app.dependency_overrides[get_vault_client] = lambda: vault_client
    limiter = getattr(app.state, "limiter", None)
    if limiter is not None:
        limiter.reset()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
