"""
Brand profiles for the landing page.

The TeaminsightXAI and OrgSightXAI sites share one template; everything that
differs between them (name, hero copy, the module cards, contact copy) lives
in a BrandProfile record here.
"""

from dataclasses import dataclass, field

from backend.app.core.config import settings


class UnknownBrandError(LookupError):
    """Raised when a brand slug has no profile."""

    def __init__(self, slug: str):
        super().__init__(f"Unknown brand: {slug!r}")
        self.slug = slug


@dataclass(frozen=True)
class Module:
    title: str
    body: str


@dataclass(frozen=True)
class BrandProfile:
    slug: str
    brand_name: str
    hero_title: str
    hero_copy: str
    demo_url: str
    cta_text: str
    cta_hover_text: str
    modules: tuple[Module, ...] = field(default_factory=tuple)
    modules_heading: str = "Our Core Pillars"
    contact_blurb: str = "We'd love to hear about your team's biggest challenges."
    message_placeholder: str = "Tell us about your team's current needs or inquire about a demo..."

    @property
    def subject(self) -> str:
        """Fixed subject line attached to every inquiry from this site."""
        return f"New Inquiry from {self.brand_name} Website"

    @property
    def success_message(self) -> str:
        return f"Thank you for your interest in {self.brand_name}! We will be in touch shortly."

    @property
    def contact_heading(self) -> str:
        return f"Get in Touch with {self.brand_name}"


# ─── Catalogue ────────────────────────────────────────────────────────────────

TEAMINSIGHT = BrandProfile(
    slug="teaminsight",
    brand_name="TeaminsightXAI",
    hero_title="TeaminsightXAI: Transforming Team Performance with AI",
    hero_copy=(
        "Our mission is to surface hidden productivity killers and team friction points "
        "using advanced AI analytics, powering better collaboration and results."
    ),
    demo_url="https://your-managerxai-demo-link.com",
    cta_text="Explore ManagerXAI Demo",
    cta_hover_text="Click to See Insights Now!",
    modules=(
        Module(
            "Purpose",
            "To enable managers with unbiased data to foster equitable and "
            "high-performing teams, moving beyond intuition.",
        ),
        Module(
            "Team Resource",
            "Built by a diverse team of AI specialists and former engineering leaders "
            "who understand real-world team dynamics.",
        ),
        Module(
            "Mission",
            "To be the trusted AI layer for every modern workplace, translating "
            "complexity into actionable team wisdom.",
        ),
    ),
)

ORGSIGHT = BrandProfile(
    slug="orgsight",
    brand_name="OrgSightXAI",
    hero_title="OrgSightXAI: Seeing Your Whole Organization Clearly with AI",
    hero_copy=(
        "Our mission is to reveal the bottlenecks and hidden friction between teams "
        "using advanced AI analytics, so leaders can act on evidence instead of guesswork."
    ),
    demo_url="https://your-managerxai-demo-link.com",
    cta_text="Explore ManagerXAI Demo",
    cta_hover_text="Click to See Insights Now!",
    modules=(
        Module(
            "Purpose",
            "To give leadership unbiased, organization-wide data for building "
            "equitable and high-performing teams.",
        ),
        Module(
            "Team Resource",
            "Built by AI specialists and former engineering and operations leaders "
            "who have scaled real organizations.",
        ),
        Module(
            "Mission",
            "To be the trusted AI layer across every department, turning "
            "organizational complexity into clear next steps.",
        ),
    ),
    modules_heading="Our Core Modules",
    contact_blurb="We'd love to hear about your organization's biggest challenges.",
    message_placeholder="Tell us about your organization's current needs or inquire about a demo...",
)

BRANDS: dict[str, BrandProfile] = {b.slug: b for b in (TEAMINSIGHT, ORGSIGHT)}


def get_brand(slug: str) -> BrandProfile:
    try:
        return BRANDS[slug.lower()]
    except KeyError:
        raise UnknownBrandError(slug) from None


def default_brand() -> BrandProfile:
    return get_brand(settings.site_brand)


def list_brands() -> list[BrandProfile]:
    return list(BRANDS.values())
