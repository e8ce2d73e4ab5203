import pytest

from site_drafter.compiler import compile_brief
from site_drafter.exporter import ExportBlockedError, css_color, export_filename, render_standalone_html
from site_drafter.guardrails import evaluate_brief
from site_drafter.models.brief import Brief


def test_export_ready_brief_renders_standalone_page(harbor_brief):
    html = render_standalone_html(compile_brief(harbor_brief), evaluate_brief(harbor_brief), year=2026)

    assert html.startswith("<!doctype html>")
    assert "<script" not in html
    assert "<title>Harbor &amp; Sage Law</title>" in html
    assert "© 2026 Harbor &amp; Sage Law" in html
    assert "linear-gradient(120deg, #0f172a, #0369a1)" in html
    for anchor in ("hero", "value", "services", "proof", "pricing", "cta", "contact"):
        assert f'id="{anchor}"' in html
    assert "mailto:contact@citeks.net" in html


def test_blocked_brief_cannot_export(acme_brief):
    checklist = evaluate_brief(acme_brief)
    with pytest.raises(ExportBlockedError) as exc_info:
        render_standalone_html(compile_brief(acme_brief), checklist)
    assert "min_proof" in exc_info.value.failing


def test_text_is_escaped(harbor_brief):
    brief = harbor_brief.model_copy(
        update={"differentiators": ["<script>alert(1)</script>"]},
    )
    html = render_standalone_html(compile_brief(brief), evaluate_brief(brief), year=2026)
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_hero_image_is_rendered_as_img(harbor_brief):
    brand = harbor_brief.company.brand.model_copy(update={"hero_image": "/hero/waterfall.jpg"})
    company = harbor_brief.company.model_copy(update={"brand": brand})
    brief = harbor_brief.model_copy(update={"company": company})
    html = render_standalone_html(compile_brief(brief), evaluate_brief(brief), year=2026)
    assert '<img class="hero-bg" src="/hero/waterfall.jpg" alt="">' in html


def test_css_color_sanitises():
    assert css_color("#ABC") == "#aabbcc"
    assert css_color("red;} body{display:none") == "#0f172a"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Harbor & Sage  Law", "harbor-&-sage-law.html"),
        ("My \"best\" draft", "my-best-draft.html"),
        ("東京 Law", "law.html"),
        ("東京", "site.html"),
        ("", "site.html"),
        (None, "site.html"),
    ],
)
def test_export_filename(name, expected):
    assert export_filename(name) == expected


def test_empty_brief_export_is_blocked():
    brief = Brief()
    with pytest.raises(ExportBlockedError):
        render_standalone_html(compile_brief(brief), evaluate_brief(brief))
