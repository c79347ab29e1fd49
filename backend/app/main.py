"""
FastAPI application factory.

Boots the brand landing site:
- Renders the TeaminsightXAI / OrgSightXAI landing page from brand profiles
- Relays contact-form inquiries to Web3Forms
- Builds the contact submitter once on startup, with the access key read from config
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from backend.app.core.config import settings
from backend.app.services.brands import BRANDS, UnknownBrandError, default_brand
from backend.app.services.contact import ContactFormSubmitter

# ─── Structured logging ───────────────────────────────────────────────────────

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if settings.app_env == "development"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, settings.log_level.upper(), logging.INFO)
    ),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

log = structlog.get_logger()


# ─── Lifespan ─────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    # ── Startup ──
    log.info("starting", env=settings.app_env, port=settings.app_port, brand=settings.site_brand)

    # Unknown SITE_BRAND fails startup instead of every "/landing" request
    try:
        default_brand()
    except UnknownBrandError:
        log.error("unknown_site_brand", site_brand=settings.site_brand, known=sorted(BRANDS))
        raise

    app.state.contact_submitter = ContactFormSubmitter(
        settings.web3forms_access_key,
        endpoint=settings.web3forms_endpoint,
        timeout=settings.contact_timeout_seconds,
    )
    if settings.contact_form_configured:
        log.info("contact_form_ready", endpoint=settings.web3forms_endpoint)
    else:
        log.warning("contact_form_not_configured", hint="set WEB3FORMS_ACCESS_KEY")

    log.info("startup_complete")

    yield

    # ── Shutdown ──
    log.info("shutdown_complete")


# ─── App ──────────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Brand Landing Site",
    description="TeaminsightXAI / OrgSightXAI landing pages with a Web3Forms contact relay.",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ─── CORS ─────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ─── Routers ──────────────────────────────────────────────────────────────────

from backend.app.api.routes.contact import router as contact_router
from backend.app.api.routes.landing import router as landing_router

app.include_router(contact_router, prefix="/api/v1/contact", tags=["contact"])
app.include_router(landing_router, prefix="/landing", tags=["landing"])


# ─── Health ───────────────────────────────────────────────────────────────────

@app.get("/health", tags=["system"])
async def health_check():
    return {
        "status": "healthy",
        "version": settings.app_version,
        "env": settings.app_env,
        "contact_form_configured": settings.contact_form_configured,
    }


@app.get("/", tags=["system"], response_class=RedirectResponse)
async def root():
    return RedirectResponse(url="/landing")
