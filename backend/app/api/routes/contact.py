"""
Contact API — JSON flavour of the landing-page form.

Same relay as the HTML form, for script-driven pages that submit with
fetch() and show the result themselves.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from backend.app.core.config import settings
from backend.app.core.deps import OUTCOME_STATUS, SubmitterDep, resolve_brand
from backend.app.services.contact import ContactEmail, Inquiry

router = APIRouter()


# ─── Schemas ──────────────────────────────────────────────────────────────────

class ContactRequest(BaseModel):
    model_config = {"str_strip_whitespace": True}

    brand: str | None = Field(default=None, description="Brand slug; defaults to the site brand")
    name: str = Field(..., min_length=1)
    email: ContactEmail
    message: str = Field(..., min_length=1)


class ContactResponse(BaseModel):
    success: bool
    message: str


# ─── Routes ───────────────────────────────────────────────────────────────────

@router.post("", response_model=ContactResponse)
async def submit_contact(body: ContactRequest, submitter: SubmitterDep):
    brand = resolve_brand(body.brand or settings.site_brand)
    inquiry = Inquiry(
        name=body.name,
        email=body.email,
        message=body.message,
        subject=brand.subject,
    )

    result = await submitter.submit(inquiry, success_message=brand.success_message)

    return JSONResponse(
        status_code=OUTCOME_STATUS[result.outcome],
        content=ContactResponse(success=result.ok, message=result.message).model_dump(),
    )
