"""
Brand landing page — hero, module cards and the contact form.

The page is server-rendered from one Jinja template per request; the brand
profile supplies all of the copy. The contact form posts back here, we relay
it through the ContactFormSubmitter and re-render with a notice:
- success → fields cleared
- failure / missing key → fields kept so the visitor can resubmit
"""

from datetime import datetime
from pathlib import Path

import structlog
from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from backend.app.core.deps import OUTCOME_STATUS, BrandDep, SubmitterDep
from backend.app.services.brands import BrandProfile, default_brand
from backend.app.services.contact import Inquiry, SubmissionResult

log = structlog.get_logger(__name__)
router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))

EMPTY_FIELDS = {"name": "", "email": "", "message": ""}


def _render(
    request: Request,
    brand: BrandProfile,
    values: dict[str, str] | None = None,
    errors: dict[str, str] | None = None,
    notice: SubmissionResult | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "landing.html",
        {
            "brand": brand,
            "values": values or EMPTY_FIELDS,
            "errors": errors or {},
            "notice": notice,
            "year": datetime.now().year,
        },
        status_code=status_code,
    )


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "form"
        if field == "email":
            errors.setdefault(field, "Please enter a valid email address.")
        else:
            errors.setdefault(field, "Please fill out this field.")
    return errors


# ─── Routes ───────────────────────────────────────────────────────────────────

@router.get("", response_class=HTMLResponse)
async def landing(request: Request):
    return _render(request, default_brand())


@router.get("/{slug}", response_class=HTMLResponse)
async def brand_landing(request: Request, brand: BrandDep):
    return _render(request, brand)


@router.post("/{slug}/contact", response_class=HTMLResponse)
async def submit_contact(
    request: Request,
    brand: BrandDep,
    submitter: SubmitterDep,
    name: str = Form(""),
    email: str = Form(""),
    message: str = Form(""),
):
    """Relay the contact form and re-render the page with the outcome."""
    values = {"name": name, "email": email, "message": message}

    try:
        inquiry = Inquiry(name=name, email=email, message=message, subject=brand.subject)
    except ValidationError as exc:
        errors = _field_errors(exc)
        log.info("contact_form_invalid", brand=brand.slug, fields=sorted(errors))
        return _render(
            request, brand,
            values=values,
            errors=errors,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    result = await submitter.submit(inquiry, success_message=brand.success_message)

    return _render(
        request, brand,
        values=EMPTY_FIELDS if result.ok else values,
        notice=result,
        status_code=OUTCOME_STATUS[result.outcome],
    )
