from __future__ import annotations

import logging
import re
from datetime import date
from html import escape
from typing import Callable, Mapping

from .colors import hex_to_rgb
from .models.checklist import Checklist
from .models.dsl import (
    ContactSection,
    CtaSection,
    HeroSection,
    PricingSection,
    ProofSection,
    Section,
    ServicesSection,
    SiteDocument,
    ValueSection,
)

logger = logging.getLogger(__name__)


class ExportBlockedError(RuntimeError):
    def __init__(self, failing: list[str]) -> None:
        self.failing = failing
        super().__init__(f"Export blocked by failing checks: {', '.join(failing)}")


BASE_CSS = """
:root{--panel:#ffffff;--muted:#475569;--hair:#e5e7eb;
  --p:16px;--h6:18px;--h5:20px;--h3:31.25px;--h2:39.06px;--h1:48.83px}
*{box-sizing:border-box}
body{margin:0;background:var(--bg);color:var(--ink);font-family:ui-sans-serif,system-ui,-apple-system,"Segoe UI",Roboto,Arial}
.site{max-width:1120px;margin:0 auto;padding:16px}
.panel{background:var(--panel);border:1px solid var(--hair);border-radius:16px;box-shadow:0 10px 30px rgba(0,0,0,.04);padding:16px;margin-top:16px}
.grid{display:grid;gap:12px;grid-template-columns:repeat(auto-fit,minmax(240px,1fr));margin-top:12px}
.btn{display:inline-flex;background:var(--accent);color:#fff;padding:10px 14px;border-radius:999px;text-decoration:none;margin-top:12px}
.btn.sec{background:var(--ink)}
.ts-h6{font-size:var(--h6);line-height:1.3}
.ts-h5{font-size:var(--h5);line-height:1.3;font-weight:600}
.ts-h3{font-size:var(--h3);line-height:1.2;font-weight:700;color:var(--accent)}
.ts-h2{font-size:var(--h2);line-height:1.1;font-weight:700;margin:0}
.ts-h1{font-size:var(--h1);line-height:1.0;font-weight:700;margin:8px 0 0}
.muted{color:var(--muted)}
.hero{position:relative;overflow:hidden;border-radius:16px;aspect-ratio:2/1;margin-top:16px}
.hero-bg,.hero-scrim{position:absolute;inset:0;width:100%;height:100%;object-fit:cover}
.hero-scrim{background:linear-gradient(180deg,rgba(0,0,0,.45),rgba(0,0,0,.25))}
.hero-copy{position:relative;color:#fff;padding:24px;max-width:720px}
.badge{display:inline-block;padding:4px 10px;border-radius:999px;background:rgba(255,255,255,.18);font-size:14px}
.logo-chip{padding:10px 12px;border:1px solid var(--hair);border-radius:12px;text-align:center}
nav a{margin-left:16px;color:var(--ink);text-decoration:none}
header,footer{display:flex;align-items:center;justify-content:space-between}
""".strip()


def css_color(value: str) -> str:
    """Re-serialise a brand colour so arbitrary input never reaches the stylesheet."""
    r, g, b = hex_to_rgb(value)
    return f"#{r:02x}{g:02x}{b:02x}"


# header-safe ASCII only; anything else collapses to a single "-"
_UNSAFE_FILENAME = re.compile(r"[^a-z0-9&._-]+")


def export_filename(project_name: str | None, extension: str = "html") -> str:
    slug = _UNSAFE_FILENAME.sub("-", (project_name or "").strip().lower()).strip("-") or "site"
    return f"{slug}.{extension}"


def _items(items) -> str:
    cards = "".join(
        f'<div class="panel"><div class="ts-h5">{escape(item.title)}</div>'
        f'<div class="ts-h6 muted">{escape(item.text)}</div></div>'
        for item in items
    )
    return f'<div class="grid">{cards}</div>'


def _hero(section: HeroSection, document: SiteDocument) -> str:
    colors = document.meta.brand.colors
    if section.hero_image:
        background = f'<img class="hero-bg" src="{escape(section.hero_image)}" alt="">'
    else:
        background = (
            '<div class="hero-bg" style="background:linear-gradient(120deg, '
            f'{css_color(colors.primary)}, {css_color(colors.accent)})"></div>'
        )
    badge = f'<div class="badge">{escape(section.badge)}</div>' if section.badge else ""
    ctas = f'<a class="btn" href="{escape(section.primary_cta.href)}">{escape(section.primary_cta.label)}</a>'
    if section.secondary_cta:
        ctas += (
            f' <a class="btn sec" href="{escape(section.secondary_cta.href)}">'
            f"{escape(section.secondary_cta.label)}</a>"
        )
    return (
        f'<section id="hero" class="hero hero-{escape(section.variant)}">{background}'
        f'<div class="hero-scrim"></div><div class="hero-copy">{badge}'
        f'<h1 class="ts-h1">{escape(section.title)}</h1>'
        f'<p class="ts-h6">{escape(section.subtitle)}</p><div>{ctas}</div></div></section>'
    )


def _value(section: ValueSection, document: SiteDocument) -> str:
    return f'<section id="value" class="panel"><h2 class="ts-h2">{escape(section.title)}</h2>{_items(section.items)}</section>'


def _services(section: ServicesSection, document: SiteDocument) -> str:
    return f'<section id="services" class="panel"><h2 class="ts-h2">{escape(section.title)}</h2>{_items(section.items)}</section>'


def _proof(section: ProofSection, document: SiteDocument) -> str:
    parts = [f'<h2 class="ts-h2">{escape(section.title)}</h2>']
    if section.logos:
        chips = "".join(f'<div class="logo-chip">{escape(logo)}</div>' for logo in section.logos)
        parts.append(f'<div class="grid">{chips}</div>')
    if section.testimonials:
        quotes = "".join(
            f'<figure class="panel"><blockquote class="ts-h6">“{escape(t.quote)}”</blockquote>'
            f'<figcaption class="ts-h6 muted">{escape(t.author)}</figcaption></figure>'
            for t in section.testimonials
        )
        parts.append(f'<div class="grid">{quotes}</div>')
    if section.metrics:
        metrics = "".join(
            f'<div class="panel"><div class="ts-h3">{escape(m.value)}</div>'
            f'<div class="ts-h6 muted">{escape(m.label)}</div></div>'
            for m in section.metrics
        )
        parts.append(f'<div class="grid">{metrics}</div>')
    return f'<section id="proof" class="panel">{"".join(parts)}</section>'


def _pricing(section: PricingSection, document: SiteDocument) -> str:
    tiers = "".join(
        f'<div class="panel"><div class="ts-h5">{escape(tier.name)}</div>'
        f'<div class="ts-h3">{escape(tier.price)}</div><ul class="ts-h6 muted">'
        + "".join(f"<li>{escape(item)}</li>" for item in tier.items)
        + f'</ul><a class="btn" href="#contact">Choose {escape(tier.name)}</a></div>'
        for tier in section.tiers
    )
    return (
        f'<section id="pricing" class="panel"><h2 class="ts-h2">{escape(section.title)}</h2>'
        f'<p class="ts-h6 muted">{escape(section.note)}</p><div class="grid">{tiers}</div></section>'
    )


def _cta(section: CtaSection, document: SiteDocument) -> str:
    return (
        f'<section id="cta" class="panel" style="text-align:center"><h2 class="ts-h2">{escape(section.title)}</h2>'
        f'<a class="btn" href="{escape(section.cta.href)}">{escape(section.cta.label)}</a></section>'
    )


def _contact(section: ContactSection, document: SiteDocument) -> str:
    locations = " · ".join(escape(location) for location in section.locations)
    email = escape(str(section.email))
    return (
        f'<section id="contact" class="panel"><h2 class="ts-h2">{escape(section.title)}</h2>'
        f'<p class="ts-h6"><a href="mailto:{email}">{email}</a></p>'
        f'<p class="ts-h6 muted">{locations}</p></section>'
    )


SECTION_RENDERERS: Mapping[str, Callable[[Section, SiteDocument], str]] = {
    "hero": _hero,
    "value": _value,
    "services": _services,
    "proof": _proof,
    "pricing": _pricing,
    "cta": _cta,
    "contact": _contact,
}


def render_standalone_html(document: SiteDocument, checklist: Checklist, *, year: int | None = None) -> str:
    """Render a single self-contained HTML page: inline CSS, no scripts.

    Raises ExportBlockedError while any hard-blocking check fails.
    """
    if checklist.export_blocked:
        failing = [check.id for check in checklist.blocking_failures]
        logger.warning("Export blocked", extra={"failing": failing})
        raise ExportBlockedError(failing)

    brand = document.meta.brand
    name = escape(brand.name)
    variables = (
        f":root{{--bg:{css_color(brand.colors.secondary)};"
        f"--ink:{css_color(brand.colors.primary)};--accent:{css_color(brand.colors.accent)}}}"
    )
    body = "\n".join(SECTION_RENDERERS[section.type](section, document) for section in document.sections)
    nav = "".join(
        f'<a href="#{section_type}">{label}</a>'
        for section_type, label in (("services", "Services"), ("pricing", "Pricing"), ("contact", "Contact"))
        if section_type in document.section_types()
    )
    html = f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<meta name="viewport" content="width=device-width,initial-scale=1"/>
<title>{name}</title>
<style>{BASE_CSS}
{variables}</style>
</head>
<body class="layout-{document.meta.layout_variant.lower()} density-{escape(document.meta.density)}">
<div class="site">
<header class="panel"><div class="ts-h6"><strong>{name}</strong></div><nav class="ts-h6">{nav}</nav></header>
<main>
{body}
</main>
<footer class="panel"><div class="ts-h6 muted">© {year or date.today().year} {name}</div></footer>
</div>
</body>
</html>
"""
    logger.info("Rendered standalone HTML", extra={"brand": brand.name, "bytes": len(html)})
    return html


__all__ = ["BASE_CSS", "ExportBlockedError", "css_color", "export_filename", "render_standalone_html"]
