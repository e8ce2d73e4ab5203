from __future__ import annotations

import re
from typing import Iterable

from pydantic import BaseModel, Field

from .dictionaries import DEFAULT_MUST_HAVE_PAGES
from .models.brief import Brief, Metric, Testimonial

_AUTHOR_DASH = re.compile(r"\s*[—–]\s*")
_QUOTE_MARKS = "\"'“”‘’«»"


class BriefForm(BaseModel):
    """Raw strings exactly as a brief form submits them."""

    name: str = ""
    tagline: str = ""
    locations: str = Field(default="", description="Comma separated")
    industry: str = "saas"
    archetype: str = ""
    primary: str = ""
    secondary: str = ""
    accent: str = ""
    hero_image: str = ""
    goal: str = ""
    secondary_goals: str = Field(default="", description="Comma separated")
    differentiators: str = Field(default="", description="One per line")
    testimonials: str = Field(default="", description="`quote — author`, one per line")
    logos: str = Field(default="", description="Comma separated")
    metrics: str = Field(default="", description="`Label: Value`, one per line")
    pages: str = Field(default=", ".join(DEFAULT_MUST_HAVE_PAGES), description="Comma separated")
    motion: str = ""
    density: str = "comfortable"


def split_comma_list(text: str | None) -> list[str]:
    if not text:
        return []
    return [item.strip() for item in text.split(",") if item.strip()]


def split_lines(text: str | None) -> list[str]:
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_testimonials(text: str | None) -> list[Testimonial]:
    testimonials: list[Testimonial] = []
    for line in split_lines(text):
        parts = _AUTHOR_DASH.split(line, maxsplit=1)
        quote = parts[0].strip().strip(_QUOTE_MARKS).strip()
        author = parts[1].strip() if len(parts) > 1 else ""
        if not quote:
            continue
        testimonials.append(Testimonial(quote=quote, author=author))
    return testimonials


def parse_metrics(text: str | None) -> list[Metric]:
    metrics: list[Metric] = []
    for line in split_lines(text):
        label, sep, value = line.partition(":")
        label, value = label.strip(), value.strip()
        if not sep or not label or not value:
            continue
        metrics.append(Metric(label=label, value=value))
    return metrics


def normalize_form(form: BriefForm) -> Brief:
    """Build a fully-defaulted Brief from raw form strings.

    Colour, industry and archetype fallbacks are applied by the Brief model
    itself, so blank or unknown values never reach the compiler.
    """
    return Brief.model_validate(
        {
            "company": {
                "name": form.name.strip(),
                "tagline": form.tagline.strip(),
                "locations": split_comma_list(form.locations),
                "industry": form.industry,
                "brand": {
                    "primary": form.primary,
                    "secondary": form.secondary,
                    "accent": form.accent,
                    "heroImage": form.hero_image,
                },
            },
            "goals": {
                "primary": form.goal.strip(),
                "secondary": split_comma_list(form.secondary_goals),
            },
            "differentiators": split_lines(form.differentiators),
            "proof": {
                "logos": split_comma_list(form.logos),
                "testimonials": parse_testimonials(form.testimonials),
                "metrics": parse_metrics(form.metrics),
            },
            "pages": {"mustHave": split_comma_list(form.pages)},
            "archetype": form.archetype,
            "motion": form.motion.strip(),
            "density": form.density,
        }
    )


def _join_lines(lines: Iterable[str]) -> str:
    return "\n".join(lines)


def brief_to_form(brief: Brief) -> BriefForm:
    """Inverse of :func:`normalize_form`, used to repopulate a form from a saved draft."""
    company = brief.company
    return BriefForm(
        name=company.name,
        tagline=company.tagline,
        locations=", ".join(company.locations),
        industry=company.industry,
        archetype=brief.archetype or "",
        primary=company.brand.primary,
        secondary=company.brand.secondary,
        accent=company.brand.accent,
        hero_image=company.brand.hero_image,
        goal=brief.goals.primary,
        secondary_goals=", ".join(brief.goals.secondary),
        differentiators=_join_lines(brief.differentiators),
        testimonials=_join_lines(
            f"{t.quote} — {t.author}" if t.author else t.quote for t in brief.proof.testimonials
        ),
        logos=", ".join(brief.proof.logos),
        metrics=_join_lines(f"{m.label}: {m.value}" for m in brief.proof.metrics),
        pages=", ".join(brief.pages.must_have),
        motion=brief.motion,
        density=brief.density,
    )


__all__ = [
    "BriefForm",
    "brief_to_form",
    "normalize_form",
    "parse_metrics",
    "parse_testimonials",
    "split_comma_list",
    "split_lines",
]
