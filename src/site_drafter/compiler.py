from __future__ import annotations

import logging
from typing import Callable, Mapping, Sequence

from .dictionaries import (
    ARCHETYPES,
    CONTACT_EMAIL,
    CONTACT_TITLE,
    CTA_TITLE,
    DEFAULT_ARCHETYPE_PRESET,
    DEFAULT_PLAYBOOK,
    FALLBACK_COMPANY_NAME,
    FALLBACK_SUBTITLE,
    LOCATION_SEPARATOR,
    MAX_DIFFERENTIATORS,
    PLAYBOOKS,
    PRICING_NOTE,
    PRICING_TIERS,
    PRICING_TITLE,
    VALUE_ITEM_TEXT,
    VALUE_TITLE,
    Archetype,
    Playbook,
)
from .models.brief import Brief
from .models.dsl import (
    BrandMeta,
    ContactSection,
    ContentItem,
    CtaLink,
    CtaSection,
    HeroSection,
    MetaColors,
    PricingSection,
    PricingTier,
    ProofSection,
    Section,
    ServicesSection,
    SiteDocument,
    SiteMeta,
    ValueSection,
)

logger = logging.getLogger(__name__)

SectionBuilder = Callable[[Brief, Playbook, "Archetype | None"], "Section | None"]


def layout_variant(key: str) -> str:
    """Stable A/B pick for ``key``; the builtin ``hash`` is salted per process."""
    h = 0
    for ch in key:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    return "A" if h % 2 == 0 else "B"


class SiteCompiler:
    """Compiles a Brief into the section DSL. Pure and total over valid Briefs."""

    def __init__(
        self,
        *,
        playbooks: Mapping[str, Playbook] = PLAYBOOKS,
        archetypes: Mapping[str, Archetype] = ARCHETYPES,
        pricing_tiers: Sequence[PricingTier] = PRICING_TIERS,
    ) -> None:
        self._playbooks = playbooks
        self._archetypes = archetypes
        self._pricing_tiers = tuple(pricing_tiers)
        self._builders: Mapping[str, SectionBuilder] = {
            "hero": self._build_hero,
            "value": self._build_value,
            "services": self._build_services,
            "proof": self._build_proof,
            "pricing": self._build_pricing,
            "cta": self._build_cta,
            "contact": self._build_contact,
        }

    def compile(self, brief: Brief) -> SiteDocument:
        playbook = self._playbooks.get(brief.company.industry, DEFAULT_PLAYBOOK)
        archetype = self._resolve_archetype(brief)

        sections: list[Section] = []
        for section_type in playbook.sections:
            builder = self._builders.get(section_type)
            if builder is None:
                continue
            section = builder(brief, playbook, archetype)
            if section is not None:
                sections.append(section)

        meta = self._build_meta(brief, playbook, archetype)
        logger.debug(
            "Compiled brief",
            extra={
                "industry": playbook.key,
                "archetype": archetype.key if archetype else None,
                "sections": [section.type for section in sections],
                "layout_variant": meta.layout_variant,
            },
        )
        return SiteDocument(meta=meta, sections=sections)

    def _build_meta(self, brief: Brief, playbook: Playbook, archetype: Archetype | None) -> SiteMeta:
        brand = brief.company.brand
        return SiteMeta(
            brand=BrandMeta(
                name=self._company_name(brief),
                tagline=brief.company.tagline,
                colors=MetaColors(primary=brand.primary, secondary=brand.secondary, accent=brand.accent),
                hero_image=brand.hero_image,
            ),
            industry=playbook.key,
            archetype=archetype.key if archetype else None,
            hero_variant=self._hero_variant(playbook, archetype),
            motion=brief.motion or playbook.motion_profile,
            density=brief.density,
            layout_variant=layout_variant(brief.company.name),
        )

    def _build_hero(self, brief: Brief, playbook: Playbook, archetype: Archetype | None) -> HeroSection:
        secondary_goals = [goal for goal in brief.goals.secondary if goal.strip()]
        return HeroSection(
            variant=self._hero_variant(playbook, archetype),
            title=self._company_name(brief),
            subtitle=brief.company.tagline.strip() or FALLBACK_SUBTITLE,
            badge=LOCATION_SEPARATOR.join(brief.company.locations),
            primary_cta=CtaLink(label=self._primary_cta_label(brief, playbook)),
            secondary_cta=CtaLink(label=secondary_goals[0]) if secondary_goals else None,
            hero_image=brief.company.brand.hero_image,
        )

    def _build_value(self, brief: Brief, playbook: Playbook, archetype: Archetype | None) -> ValueSection | None:
        items = [
            ContentItem(title=differentiator, text=VALUE_ITEM_TEXT)
            for differentiator in brief.differentiators[:MAX_DIFFERENTIATORS]
        ]
        if not items:
            return None
        return ValueSection(title=VALUE_TITLE, items=items)

    def _build_services(self, brief: Brief, playbook: Playbook, archetype: Archetype | None) -> ServicesSection:
        return ServicesSection(title=playbook.services_title, items=list(playbook.services))

    def _build_proof(self, brief: Brief, playbook: Playbook, archetype: Archetype | None) -> ProofSection | None:
        proof = brief.proof
        if not (proof.logos or proof.testimonials or proof.metrics):
            return None
        return ProofSection(
            logos=list(proof.logos),
            testimonials=list(proof.testimonials),
            metrics=list(proof.metrics),
        )

    def _build_pricing(self, brief: Brief, playbook: Playbook, archetype: Archetype | None) -> PricingSection | None:
        if "pricing" not in brief.pages.must_have:
            return None
        return PricingSection(title=PRICING_TITLE, note=PRICING_NOTE, tiers=list(self._pricing_tiers))

    def _build_cta(self, brief: Brief, playbook: Playbook, archetype: Archetype | None) -> CtaSection:
        return CtaSection(title=CTA_TITLE, cta=CtaLink(label=self._primary_cta_label(brief, playbook)))

    def _build_contact(self, brief: Brief, playbook: Playbook, archetype: Archetype | None) -> ContactSection:
        return ContactSection(title=CONTACT_TITLE, email=CONTACT_EMAIL, locations=list(brief.company.locations))

    def _resolve_archetype(self, brief: Brief) -> Archetype | None:
        if brief.archetype is None:
            return None
        return self._archetypes.get(brief.archetype, DEFAULT_ARCHETYPE_PRESET)

    def _hero_variant(self, playbook: Playbook, archetype: Archetype | None) -> str:
        return archetype.hero_variant if archetype else playbook.hero_kind

    def _company_name(self, brief: Brief) -> str:
        return brief.company.name.strip() or FALLBACK_COMPANY_NAME

    def _primary_cta_label(self, brief: Brief, playbook: Playbook) -> str:
        return brief.goals.primary.strip() or playbook.primary_cta


_default_compiler = SiteCompiler()


def compile_brief(brief: Brief) -> SiteDocument:
    return _default_compiler.compile(brief)


__all__ = ["SiteCompiler", "compile_brief", "layout_variant"]
