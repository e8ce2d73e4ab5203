from __future__ import annotations

from typing import Annotated, Literal, Sequence, Union

from pydantic import BaseModel, EmailStr, Field

from .brief import Metric, Testimonial


class DslModel(BaseModel):
    class Config:
        frozen = True


class CtaLink(DslModel):
    label: str
    href: str = "#contact"


class ContentItem(DslModel):
    title: str
    text: str


class HeroSection(DslModel):
    type: Literal["hero"] = "hero"
    variant: str
    title: str
    subtitle: str
    badge: str = ""
    primary_cta: CtaLink
    secondary_cta: CtaLink | None = None
    hero_image: str = Field(default="", description="Empty means the renderer paints a brand gradient")


class ValueSection(DslModel):
    type: Literal["value"] = "value"
    title: str
    items: Sequence[ContentItem]


class ServicesSection(DslModel):
    type: Literal["services"] = "services"
    title: str
    items: Sequence[ContentItem]


class ProofSection(DslModel):
    type: Literal["proof"] = "proof"
    title: str = "Proof"
    logos: Sequence[str] = Field(default_factory=list)
    testimonials: Sequence[Testimonial] = Field(default_factory=list)
    metrics: Sequence[Metric] = Field(default_factory=list)


class PricingTier(DslModel):
    name: str
    price: str
    items: Sequence[str]


class PricingSection(DslModel):
    type: Literal["pricing"] = "pricing"
    title: str
    note: str = ""
    tiers: Sequence[PricingTier]


class CtaSection(DslModel):
    type: Literal["cta"] = "cta"
    title: str
    cta: CtaLink


class ContactSection(DslModel):
    type: Literal["contact"] = "contact"
    title: str
    email: EmailStr
    locations: Sequence[str] = Field(default_factory=list)


Section = Annotated[
    Union[
        HeroSection,
        ValueSection,
        ServicesSection,
        ProofSection,
        PricingSection,
        CtaSection,
        ContactSection,
    ],
    Field(discriminator="type"),
]


class MetaColors(DslModel):
    primary: str
    secondary: str
    accent: str


class BrandMeta(DslModel):
    name: str
    tagline: str = ""
    colors: MetaColors
    hero_image: str = ""


class SiteMeta(DslModel):
    brand: BrandMeta
    industry: str
    archetype: str | None = None
    hero_variant: str
    motion: str
    density: str = "comfortable"
    layout_variant: Literal["A", "B"] = "A"


class SiteDocument(DslModel):
    meta: SiteMeta
    sections: Sequence[Section]

    def section_types(self) -> list[str]:
        return [section.type for section in self.sections]

    def find(self, section_type: str) -> Section | None:
        for section in self.sections:
            if section.type == section_type:
                return section
        return None


__all__ = [
    "BrandMeta",
    "ContactSection",
    "ContentItem",
    "CtaLink",
    "CtaSection",
    "HeroSection",
    "MetaColors",
    "PricingSection",
    "PricingTier",
    "ProofSection",
    "Section",
    "ServicesSection",
    "SiteDocument",
    "SiteMeta",
    "ValueSection",
]
