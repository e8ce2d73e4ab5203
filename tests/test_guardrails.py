from site_drafter.guardrails import GuardrailEvaluator, completeness_score, evaluate_brief
from site_drafter.models.brief import Brief
from site_drafter.models.checklist import CheckResult, CheckStatus

CHECK_ORDER = [
    "contrast_body",
    "contrast_accent",
    "headline_length",
    "subtitle_length",
    "min_proof",
    "hero_asset",
    "company_name",
    "primary_goal",
]


def _brief(**overrides) -> Brief:
    data = {
        "company": {
            "name": "Harbor & Sage Law",
            "brand": {"primary": "#0F172A", "secondary": "#F7F7F7", "accent": "#0369A1"},
        },
        "goals": {"primary": "Consultation"},
        "proof": {"logos": ["Aldin", "Koto"]},
    }
    data.update(overrides)
    return Brief.model_validate(data)


def test_harbor_brief_is_export_ready(harbor_brief):
    checklist = GuardrailEvaluator().evaluate(harbor_brief)

    assert [check.id for check in checklist.checks] == CHECK_ORDER
    assert all(check.passed for check in checklist.checks)
    assert checklist.completeness == 100
    assert checklist.export_blocked is False
    assert "Export: ready" in checklist.decision_log


def test_acme_scenario(acme_brief):
    checklist = evaluate_brief(acme_brief)

    min_proof = checklist.get("min_proof")
    assert min_proof.passed is False
    assert min_proof.hint == "0"
    assert checklist.get("headline_length").passed is True
    assert checklist.get("headline_length").hint == "1"
    assert checklist.export_blocked is True
    assert "At least 2 proof items" in checklist.decision_log


def test_default_accent_ratio_is_reported(acme_brief):
    first = evaluate_brief(acme_brief).get("contrast_accent")
    second = evaluate_brief(acme_brief).get("contrast_accent")
    assert first == second
    assert first.hint == "2.59"
    assert first.passed is False


def test_empty_brief_is_total():
    checklist = evaluate_brief(Brief())
    assert len(checklist.checks) == len(CHECK_ORDER)
    assert checklist.export_blocked is True
    assert 0 <= checklist.completeness <= 100


def test_adding_proof_never_breaks_min_proof():
    one = _brief(proof={"logos": ["Aldin"]})
    two = _brief(proof={"logos": ["Aldin"], "metrics": [{"label": "Deals", "value": "220"}]})
    three = _brief(proof={"logos": ["Aldin", "Koto"], "metrics": [{"label": "Deals", "value": "220"}]})

    assert evaluate_brief(one).get("min_proof").passed is False
    assert evaluate_brief(two).get("min_proof").passed is True
    assert evaluate_brief(three).get("min_proof").passed is True


def test_removing_company_name_fails_presence():
    for name in ("", " ", "A"):
        brief = _brief(company={"name": name})
        assert evaluate_brief(brief).get("company_name").passed is False
    assert evaluate_brief(_brief()).get("company_name").passed is True


def test_headline_word_limits():
    long_name = " ".join(["word"] * 10)
    assert evaluate_brief(_brief(company={"name": long_name})).get("headline_length").passed is False
    nine = " ".join(["word"] * 9)
    assert evaluate_brief(_brief(company={"name": nine})).get("headline_length").passed is True


def test_subtitle_is_advisory():
    brief = _brief(company={"name": "Harbor & Sage Law", "tagline": "Too short"})
    checklist = evaluate_brief(brief)
    subtitle = checklist.get("subtitle_length")

    assert subtitle.passed is False
    assert subtitle.must is False
    assert subtitle.status == CheckStatus.warn
    assert checklist.warnings == [subtitle]
    assert subtitle not in checklist.blocking_failures


def test_empty_subtitle_is_fine():
    assert evaluate_brief(_brief()).get("subtitle_length").passed is True


def test_hero_asset_gate_follows_archetype():
    boutique = _brief(archetype="boutique")
    checklist = evaluate_brief(boutique)
    assert checklist.get("hero_asset").passed is False
    assert checklist.get("hero_asset").status == CheckStatus.failed
    assert checklist.export_blocked is True

    with_image = _brief(
        archetype="boutique",
        company={
            "name": "Harbor & Sage Law",
            "brand": {"accent": "#0369A1", "heroImage": "/hero/waterfall.jpg"},
        },
    )
    assert evaluate_brief(with_image).get("hero_asset").passed is True
    assert evaluate_brief(_brief(archetype="clinical")).get("hero_asset").passed is True

    no_preset = evaluate_brief(_brief()).get("hero_asset")
    assert no_preset.passed is True
    assert no_preset.hint == "optional"


def test_malformed_colors_are_still_scored():
    brief = _brief(company={"name": "Harbor", "brand": {"primary": "nope", "secondary": "#0F172A"}})
    body = evaluate_brief(brief).get("contrast_body")
    assert body.passed is False
    assert body.hint == "1.00"


def test_missing_goal_blocks_export():
    checklist = evaluate_brief(_brief(goals={"primary": "  "}))
    assert checklist.get("primary_goal").passed is False
    assert checklist.export_blocked is True


def test_completeness_rounds_half_up():
    hard_pass = CheckResult(id="a", label="a", passed=True)
    hard_fail = CheckResult(id="b", label="b", passed=False)
    advisory_fail = CheckResult(id="c", label="c", passed=False, must=False)

    assert completeness_score([hard_pass, hard_fail]) == 50
    assert completeness_score([hard_pass, hard_pass, hard_fail]) == 67
    assert completeness_score([hard_pass] * 7 + [hard_fail]) == 88  # 87.5
    assert completeness_score([hard_pass, advisory_fail]) == 100
    assert completeness_score([]) == 100
