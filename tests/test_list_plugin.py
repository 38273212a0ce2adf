import pytest

from cliplugins.list_plugin import ListPlugin, container_endpoint, default_headers, new_session
from cliplugins.plugin import CFContext, PluginContext
from cliplugins.ui import decolorize


def test_container_endpoint_with_scheme():
    assert container_endpoint("https://api.example.com") == "https://containers-api.example.com"


def test_container_endpoint_without_scheme():
    assert container_endpoint("api.example.com") == "containers-api.example.com"


def test_default_headers_refresh_token():
    cf = CFContext(uaa_token="old", token_refresher=lambda: "Bearer token")
    assert default_headers(cf) == {"Authorization": "Bearer token"}


def test_default_headers_refresh_failure_keeps_token(capsys):
    def fail():
        raise RuntimeError("refresh failed")

    cf = CFContext(uaa_token="Bearer token", token_refresher=fail)
    assert default_headers(cf) == {"Authorization": "Bearer token"}
    assert "refresh failed" in capsys.readouterr().out


def test_new_session_settings():
    session = new_session(PluginContext(http_timeout=30, ssl_disabled=True))
    assert session.verify is False
    assert session.timeout == 30


def test_metadata():
    meta = ListPlugin().get_metadata()
    assert meta.name == "ibmcloud-list"
    assert [c.name for c in meta.commands] == ["list"]


def test_run_fails_without_target(capsys):
    context = PluginContext(locale="en_US", cf=CFContext())
    with pytest.raises(SystemExit) as exc:
        ListPlugin().run(context, ["list"])
    assert exc.value.code == 1
    err = decolorize(capsys.readouterr().err)
    assert "FAILED" in err
    assert "No CF API endpoint set" in err