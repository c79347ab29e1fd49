"""
Shared FastAPI dependencies.

The contact submitter is built once in the app lifespan and parked on
app.state; routes pull it from there so tests can override it.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from backend.app.services.brands import BrandProfile, UnknownBrandError, get_brand
from backend.app.services.contact import ContactFormSubmitter, SubmissionOutcome

# HTTP status for each relay outcome, shared by the HTML form and JSON API
OUTCOME_STATUS = {
    SubmissionOutcome.SUCCESS: status.HTTP_200_OK,
    SubmissionOutcome.FAILURE: status.HTTP_502_BAD_GATEWAY,
    SubmissionOutcome.CONFIG_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_contact_submitter(request: Request) -> ContactFormSubmitter:
    return request.app.state.contact_submitter


def resolve_brand(slug: str) -> BrandProfile:
    """Look up a brand from a path/body slug, 404 if we don't serve it."""
    try:
        return get_brand(slug)
    except UnknownBrandError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )


# Type aliases for dependency injection
SubmitterDep = Annotated[ContactFormSubmitter, Depends(get_contact_submitter)]
BrandDep = Annotated[BrandProfile, Depends(resolve_brand)]
