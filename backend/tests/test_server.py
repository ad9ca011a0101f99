import sys
import types

import pytest

from vault_gateway import server
from vault_gateway.core.settings import get_settings


@pytest.fixture
def fake_uvicorn(monkeypatch):
    calls = []
    module = types.ModuleType("uvicorn")
    module.run = lambda app, **kwargs: calls.append((app, kwargs))
    monkeypatch.setitem(sys.modules, "uvicorn", module)
    return calls


@pytest.mark.parametrize("missing", ["VAULT_ADDR", "VAULT_TOKEN"])
def test_exits_when_vault_settings_missing(gateway_env, fake_uvicorn, missing):
    gateway_env.delenv(missing)
    get_settings.cache_clear()

    with pytest.raises(SystemExit) as exc:
        server.main([])
    assert exc.value.code == 1
    assert fake_uvicorn == []


def test_runs_uvicorn_when_configured(gateway_env, fake_uvicorn):
    server.main(["--host", "0.0.0.0", "--port", "8080"])
    assert fake_uvicorn == [("vault_gateway.main:app", {"host": "0.0.0.0", "port": 8080})]


def test_default_bind():
    args = server.parse_args([])
    assert (args.host, args.port) == ("127.0.0.1", 3000)


def test_exits_on_malformed_timeout(gateway_env, fake_uvicorn, capsys):
    gateway_env.setenv("VAULT_TIMEOUT", "soon")
    get_settings.cache_clear()

    with pytest.raises(SystemExit) as exc:
        server.main([])
    assert exc.value.code == 1
    assert "VAULT_TIMEOUT" in capsys.readouterr().err
    assert fake_uvicorn == []
