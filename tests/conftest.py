"""
Shared fixtures for the landing-site test suite.

Outbound Web3Forms calls never leave the process: every submitter under test
talks to an httpx.MockTransport that records the requests it receives.
"""

import io
import os
import sys

import httpx
import pytest
from python_multipart import parse_form

# Ensure the project root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from backend.app.services.contact import ContactFormSubmitter  # noqa: E402

TEST_ACCESS_KEY = "test-access-key-1234"


def parse_multipart(request: httpx.Request) -> dict[str, str]:
    """Decode a multipart/form-data request body into {field: value}."""
    fields = {}

    def on_field(field):
        fields[field.field_name.decode()] = (field.value or b"").decode()

    parse_form(
        {
            "Content-Type": request.headers["content-type"].encode(),
            "Content-Length": str(len(request.content)).encode(),
        },
        io.BytesIO(request.content),
        on_field,
        None,
    )
    return fields


class FakeRelay:
    """Stands in for api.web3forms.com and remembers every request."""

    def __init__(self, status_code: int = 200, body=None, error: Exception | None = None):
        self.status_code = status_code
        self.body = {"success": True, "message": "Email sent successfully!"} if body is None else body
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=str(self.body))

    @property
    def calls(self) -> int:
        return len(self.requests)

    def fields(self, index: int = -1) -> dict[str, str]:
        return parse_multipart(self.requests[index])

    def submitter(self, access_key: str | None = TEST_ACCESS_KEY) -> ContactFormSubmitter:
        return ContactFormSubmitter(access_key, transport=httpx.MockTransport(self))


@pytest.fixture
def relay():
    """A relay that accepts every submission."""
    return FakeRelay()


@pytest.fixture
def make_client():
    """
    Build a TestClient whose contact submitter talks to the given relay.
    Dependency overrides are cleared afterwards.
    """
    from fastapi.testclient import TestClient

    from backend.app.core.deps import get_contact_submitter
    from backend.app.main import app

    def _make(relay: FakeRelay, access_key: str | None = TEST_ACCESS_KEY) -> TestClient:
        submitter = relay.submitter(access_key)
        app.dependency_overrides[get_contact_submitter] = lambda: submitter
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
