"""
Contact form submitter — relays landing-page inquiries to Web3Forms.

Web3Forms is a hosted form backend: we POST the visitor's fields plus our
access key, it emails the inquiry on to the team and answers with
{"success": bool, "message": str}.

One submit() call is one outbound request. There is no retry, no queue and
no deduplication; two overlapping submissions are two independent POSTs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated

import httpx
import structlog
from pydantic import AfterValidator, BaseModel, Field
from pydantic.networks import validate_email

log = structlog.get_logger(__name__)

WEB3FORMS_ENDPOINT = "https://api.web3forms.com/submit"

CONFIG_ERROR_MESSAGE = "Error: Web3Forms key not configured correctly."
FAILURE_MESSAGE = "Submission failed. Please check your network and try again."
DEFAULT_SUCCESS_MESSAGE = "Thank you for your interest! We will be in touch shortly."


# ─── Schemas ──────────────────────────────────────────────────────────────────

def _check_email_shape(value: str) -> str:
    """Reject malformed addresses but relay exactly what the visitor typed."""
    validate_email(value)
    return value


ContactEmail = Annotated[str, AfterValidator(_check_email_shape)]


class Inquiry(BaseModel):
    """One contact-form submission attempt. Never persisted."""

    model_config = {"str_strip_whitespace": True}

    name: str = Field(..., min_length=1)
    email: ContactEmail
    message: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)


class SubmissionOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    CONFIG_ERROR = "config_error"


@dataclass(frozen=True)
class SubmissionResult:
    outcome: SubmissionOutcome
    message: str
    remote_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is SubmissionOutcome.SUCCESS


# ─── Submitter ────────────────────────────────────────────────────────────────

class ContactFormSubmitter:
    """
    Sends an Inquiry to the form relay endpoint.

    The access key is handed in once at startup and never changes afterwards.
    `transport` exists so tests can swap in an httpx.MockTransport.
    """

    def __init__(
        self,
        access_key: str | None,
        endpoint: str = WEB3FORMS_ENDPOINT,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._access_key = (access_key or "").strip()
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self._access_key)

    def build_fields(self, inquiry: Inquiry) -> dict[str, str]:
        """Form fields for the outbound POST: the inquiry plus the access key."""
        return {
            "name": inquiry.name,
            "email": inquiry.email,
            "message": inquiry.message,
            "subject": inquiry.subject,
            "access_key": self._access_key,
        }

    async def submit(
        self,
        inquiry: Inquiry,
        success_message: str = DEFAULT_SUCCESS_MESSAGE,
    ) -> SubmissionResult:
        if not self.configured:
            log.warning("contact_not_configured", subject=inquiry.subject)
            return SubmissionResult(SubmissionOutcome.CONFIG_ERROR, CONFIG_ERROR_MESSAGE)

        # (None, value) tuples force multipart/form-data without any file parts
        files = {key: (None, value) for key, value in self.build_fields(inquiry).items()}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.endpoint, files=files)
        except httpx.HTTPError as exc:
            log.warning("contact_transport_error", endpoint=self.endpoint, error=str(exc))
            return SubmissionResult(SubmissionOutcome.FAILURE, FAILURE_MESSAGE)

        try:
            body = resp.json()
        except ValueError:
            body = None
        if not isinstance(body, dict):
            body = {}

        remote_message = body.get("message")
        if remote_message is not None:
            remote_message = str(remote_message)

        if resp.is_success and body.get("success") is True:
            log.info("contact_submitted", subject=inquiry.subject, status=resp.status_code)
            return SubmissionResult(SubmissionOutcome.SUCCESS, success_message, remote_message)

        log.warning(
            "contact_failed",
            subject=inquiry.subject,
            status=resp.status_code,
            remote_message=remote_message,
        )
        return SubmissionResult(SubmissionOutcome.FAILURE, FAILURE_MESSAGE, remote_message)
