from __future__ import annotations

from typing import Any, Literal, Sequence

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

Industry = Literal["law", "clinic", "gym", "saas"]
ArchetypeKey = Literal["editorial", "boutique", "clinical", "modern"]
Density = Literal["comfortable", "compact"]

INDUSTRIES: tuple[str, ...] = ("law", "clinic", "gym", "saas")
ARCHETYPE_KEYS: tuple[str, ...] = ("editorial", "boutique", "clinical", "modern")

DEFAULT_INDUSTRY = "saas"
DEFAULT_ARCHETYPE = "editorial"
DEFAULT_PRIMARY = "#0F172A"
DEFAULT_SECONDARY = "#F7F7F7"
DEFAULT_ACCENT = "#0EA5E9"

_COLOR_DEFAULTS = {
    "primary": DEFAULT_PRIMARY,
    "secondary": DEFAULT_SECONDARY,
    "accent": DEFAULT_ACCENT,
}


class BriefModel(BaseModel):
    """Base for brief records: immutable, camelCase aliases, nulls mean "absent"."""

    class Config:
        frozen = True
        populate_by_name = True

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class BrandColors(BriefModel):
    primary: str = DEFAULT_PRIMARY
    secondary: str = Field(default=DEFAULT_SECONDARY, description="Neutral background colour")
    accent: str = DEFAULT_ACCENT
    hero_image: str = Field(default="", alias="heroImage")

    @field_validator("primary", "secondary", "accent", mode="before")
    @classmethod
    def _default_blank_color(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, str) and not value.strip():
            return _COLOR_DEFAULTS[info.field_name]
        return value.strip() if isinstance(value, str) else value

    @field_validator("hero_image", mode="before")
    @classmethod
    def _strip_hero(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class CompanyInfo(BriefModel):
    name: str = ""
    tagline: str = ""
    locations: Sequence[str] = Field(default_factory=list)
    industry: Industry = DEFAULT_INDUSTRY
    brand: BrandColors = Field(default_factory=BrandColors)

    @field_validator("industry", mode="before")
    @classmethod
    def _known_industry(cls, value: Any) -> Any:
        if isinstance(value, str) and value.strip().lower() in INDUSTRIES:
            return value.strip().lower()
        return DEFAULT_INDUSTRY


class Goals(BriefModel):
    primary: str = ""
    secondary: Sequence[str] = Field(default_factory=list)


class Testimonial(BriefModel):
    quote: str
    author: str = ""


class Metric(BriefModel):
    label: str
    value: str

    @field_validator("value", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class Proof(BriefModel):
    logos: Sequence[str] = Field(default_factory=list)
    testimonials: Sequence[Testimonial] = Field(default_factory=list)
    metrics: Sequence[Metric] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.logos) + len(self.testimonials) + len(self.metrics)


class Pages(BriefModel):
    must_have: Sequence[str] = Field(default_factory=list, alias="mustHave")


class Brief(BriefModel):
    company: CompanyInfo = Field(default_factory=CompanyInfo)
    goals: Goals = Field(default_factory=Goals)
    differentiators: Sequence[str] = Field(default_factory=list)
    proof: Proof = Field(default_factory=Proof)
    pages: Pages = Field(default_factory=Pages)
    archetype: ArchetypeKey | None = Field(default=None, description="Styling preset; None leaves the hero to the playbook")
    motion: str = ""
    density: Density = "comfortable"

    class Config:
        frozen = True
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "company": {
                    "name": "Harbor & Sage Law",
                    "tagline": "Practical counsel for complex transactions",
                    "locations": ["Oslo", "New York", "Amsterdam"],
                    "industry": "law",
                    "brand": {
                        "primary": "#0F172A",
                        "secondary": "#F7F7F7",
                        "accent": "#0369A1",
                        "heroImage": "",
                    },
                },
                "goals": {"primary": "Book consultation", "secondary": []},
                "differentiators": ["Clear fee structures", "Bench of ex-in-house lawyers"],
                "proof": {
                    "logos": ["Aldin Capital", "Meridian Partners"],
                    "testimonials": [
                        {"quote": "They guided a complex cross-border deal with clarity.", "author": "COO, Meridian"}
                    ],
                    "metrics": [{"label": "Deals advised", "value": "220"}],
                },
                "pages": {"mustHave": ["home", "services", "pricing", "contact"]},
                "archetype": "editorial",
            }
        }

    @field_validator("archetype", mode="before")
    @classmethod
    def _known_archetype(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        if isinstance(value, str) and value.strip().lower() in ARCHETYPE_KEYS:
            return value.strip().lower()
        return DEFAULT_ARCHETYPE

    @field_validator("density", mode="before")
    @classmethod
    def _known_density(cls, value: Any) -> Any:
        return "compact" if value == "compact" else "comfortable"


__all__ = [
    "Brief",
    "BrandColors",
    "CompanyInfo",
    "Goals",
    "Metric",
    "Pages",
    "Proof",
    "Testimonial",
    "Industry",
    "ArchetypeKey",
    "DEFAULT_PRIMARY",
    "DEFAULT_SECONDARY",
    "DEFAULT_ACCENT",
]
