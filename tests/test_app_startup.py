"""
Application startup tests.

These run the real lifespan (TestClient used as a context manager) with no
dependency overrides, so the submitter the routes see is the one built from
settings at startup. httpx.AsyncClient.post is replaced by a recorder so no
request leaves the process.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from backend.app.core.config import settings
from backend.app.main import app
from backend.app.services.brands import UnknownBrandError
from backend.app.services.contact import CONFIG_ERROR_MESSAGE

FORM = {"name": "Ada Lovelace", "email": "ada@company.com", "message": "Hello from startup tests."}


@pytest.fixture
def outbound(monkeypatch):
    """Record every outbound relay POST and answer success=true."""
    calls = []

    async def fake_post(self, url, **kwargs):
        calls.append((str(url), kwargs))
        return httpx.Response(200, json={"success": True}, request=httpx.Request("POST", url))

    app.dependency_overrides.clear()
    monkeypatch.setattr(httpx.AsyncClient, "post", fake_post)
    return calls


class TestCredentialInjection:
    """The access key is read from settings once, when the app starts."""

    @pytest.mark.unit
    def test_missing_key_at_startup_makes_no_call(self, monkeypatch, outbound):
        monkeypatch.setattr(settings, "web3forms_access_key", "")

        with TestClient(app) as client:
            assert client.app.state.contact_submitter.configured is False
            resp = client.post("/landing/teaminsight/contact", data=FORM)

        assert resp.status_code == 503
        assert CONFIG_ERROR_MESSAGE in resp.text
        assert outbound == []

    @pytest.mark.unit
    def test_configured_key_reaches_the_relay(self, monkeypatch, outbound):
        monkeypatch.setattr(settings, "web3forms_access_key", "startup-key")
        monkeypatch.setattr(settings, "web3forms_endpoint", "https://relay.example.org/submit")

        with TestClient(app) as client:
            resp = client.post("/landing/teaminsight/contact", data=FORM)

        assert resp.status_code == 200
        assert len(outbound) == 1
        url, kwargs = outbound[0]
        assert url == "https://relay.example.org/submit"
        assert kwargs["files"]["access_key"] == (None, "startup-key")

    @pytest.mark.unit
    def test_key_changes_after_startup_are_ignored(self, monkeypatch, outbound):
        monkeypatch.setattr(settings, "web3forms_access_key", "")

        with TestClient(app) as client:
            monkeypatch.setattr(settings, "web3forms_access_key", "late-key")
            resp = client.post("/landing/teaminsight/contact", data=FORM)

        assert resp.status_code == 503
        assert outbound == []


class TestSiteBrandCheck:

    @pytest.mark.unit
    def test_unknown_site_brand_fails_startup(self, monkeypatch, outbound):
        monkeypatch.setattr(settings, "site_brand", "acme")

        with pytest.raises(UnknownBrandError):
            with TestClient(app):
                pass

    @pytest.mark.unit
    def test_known_site_brand_starts(self, monkeypatch, outbound):
        monkeypatch.setattr(settings, "site_brand", "orgsight")

        with TestClient(app) as client:
            resp = client.get("/landing")

        assert resp.status_code == 200
        assert "OrgSightXAI" in resp.text
