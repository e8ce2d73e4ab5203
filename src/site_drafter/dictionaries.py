from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from .models.brief import DEFAULT_ARCHETYPE, DEFAULT_INDUSTRY
from .models.dsl import ContentItem, PricingTier

SECTION_ORDER: Sequence[str] = ("hero", "value", "services", "proof", "pricing", "cta", "contact")


@dataclass(frozen=True)
class Playbook:
    key: str
    hero_kind: str
    motion_profile: str
    primary_cta: str
    secondary_cta: str
    services_title: str
    services: Sequence[ContentItem]
    sections: Sequence[str] = SECTION_ORDER


@dataclass(frozen=True)
class Archetype:
    key: str
    hero_variant: str
    needs_hero_image: bool


PLAYBOOKS: Mapping[str, Playbook] = {
    "law": Playbook(
        key="law",
        hero_kind="editorial",
        motion_profile="calm",
        primary_cta="Book consultation",
        secondary_cta="Download brochure",
        services_title="Services",
        services=(
            ContentItem(title="M&A & Transactions", text="Structure, diligence, closing."),
            ContentItem(title="Commercial Contracts", text="Clear, enforceable agreements."),
            ContentItem(title="Privacy & Compliance", text="Practical guidance on obligations."),
        ),
    ),
    "clinic": Playbook(
        key="clinic",
        hero_kind="image",
        motion_profile="crisp",
        primary_cta="Book appointment",
        secondary_cta="Call clinic",
        services_title="Services",
        services=(
            ContentItem(title="Primary care", text="Accessible care with fast booking."),
            ContentItem(title="Specialists", text="Targeted expertise and clear referrals."),
            ContentItem(title="Diagnostics", text="Modern equipment and gentle guidance."),
        ),
    ),
    "gym": Playbook(
        key="gym",
        hero_kind="image",
        motion_profile="kinetic",
        primary_cta="Start trial",
        secondary_cta="View programs",
        services_title="Programs",
        services=(
            ContentItem(title="Elite Coaching", text="High-intensity progress."),
            ContentItem(title="Strength Builder", text="Progressive overload."),
            ContentItem(title="Conditioning Lab", text="Cardio & mobility."),
        ),
    ),
    "saas": Playbook(
        key="saas",
        hero_kind="product",
        motion_profile="crisp",
        primary_cta="Start demo",
        secondary_cta="Talk to sales",
        services_title="Features",
        services=(
            ContentItem(title="Onboarding flows", text="Frictionless time-to-value."),
            ContentItem(title="Pricing architecture", text="Plans & entitlements that convert."),
            ContentItem(title="Docs & SEO", text="Content that compounds organic growth."),
        ),
    ),
}

DEFAULT_PLAYBOOK = PLAYBOOKS[DEFAULT_INDUSTRY]


ARCHETYPES: Mapping[str, Archetype] = {
    "editorial": Archetype(key="editorial", hero_variant="editorial", needs_hero_image=False),
    "boutique": Archetype(key="boutique", hero_variant="image", needs_hero_image=True),
    "clinical": Archetype(key="clinical", hero_variant="split", needs_hero_image=False),
    "modern": Archetype(key="modern", hero_variant="product", needs_hero_image=True),
}

DEFAULT_ARCHETYPE_PRESET = ARCHETYPES[DEFAULT_ARCHETYPE]


DEFAULT_MUST_HAVE_PAGES: Sequence[str] = ("home", "services", "pricing", "contact")

FALLBACK_COMPANY_NAME = "Your company"
FALLBACK_SUBTITLE = "We make websites pay for themselves."
LOCATION_SEPARATOR = " · "

MAX_DIFFERENTIATORS = 6
VALUE_TITLE = "What you get with us"
VALUE_ITEM_TEXT = "Baked into our day-to-day process."

PRICING_TITLE = "Packages"
PRICING_NOTE = "Transparent estimates. Fixed-fee options available."
PRICING_TIERS: Sequence[PricingTier] = (
    PricingTier(name="Starter", price="$900", items=("2–3 pages", "Responsive", "Lead form")),
    PricingTier(
        name="Growth",
        price="$2,300",
        items=("5–7 pages", "SEO + schema", "Booking & Maps", "Integrations"),
    ),
    PricingTier(
        name="Scale",
        price="$7,000",
        items=("10+ pages", "Strategy + funnel", "Advanced SEO/analytics", "CRM / e-com"),
    ),
)

CTA_TITLE = "Ready to move faster?"
CONTACT_TITLE = "Contact"
CONTACT_EMAIL = "contact@citeks.net"


__all__ = [
    "ARCHETYPES",
    "Archetype",
    "CONTACT_EMAIL",
    "CONTACT_TITLE",
    "CTA_TITLE",
    "DEFAULT_ARCHETYPE_PRESET",
    "DEFAULT_MUST_HAVE_PAGES",
    "DEFAULT_PLAYBOOK",
    "FALLBACK_COMPANY_NAME",
    "FALLBACK_SUBTITLE",
    "LOCATION_SEPARATOR",
    "MAX_DIFFERENTIATORS",
    "PLAYBOOKS",
    "PRICING_NOTE",
    "PRICING_TIERS",
    "PRICING_TITLE",
    "Playbook",
    "SECTION_ORDER",
    "VALUE_ITEM_TEXT",
    "VALUE_TITLE",
]
