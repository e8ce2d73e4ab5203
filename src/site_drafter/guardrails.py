from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from .colors import contrast_ratio
from .dictionaries import ARCHETYPES, DEFAULT_ARCHETYPE_PRESET, Archetype
from .models.brief import Brief
from .models.checklist import CheckResult, Checklist

logger = logging.getLogger(__name__)

BODY_CONTRAST_MIN = 4.5
ACCENT_CONTRAST_MIN = 3.0
HEADLINE_WORDS = (1, 9)
SUBTITLE_WORDS = (8, 24)
MIN_PROOF_ITEMS = 2
MIN_NAME_LENGTH = 2


@dataclass
class GuardrailContext:
    archetype: Archetype | None = None


@dataclass
class GuardrailRule:
    id: str
    label: str
    must: bool
    check: Callable[[Brief, GuardrailContext], "tuple[bool, str]"]

    def evaluate(self, brief: Brief, context: GuardrailContext) -> CheckResult:
        passed, hint = self.check(brief, context)
        return CheckResult(id=self.id, label=self.label, passed=passed, hint=hint, must=self.must)


def word_count(text: str) -> int:
    return len(text.split())


def _body_contrast(brief: Brief, ctx: GuardrailContext) -> tuple[bool, str]:
    brand = brief.company.brand
    ratio = contrast_ratio(brand.primary, brand.secondary)
    return ratio >= BODY_CONTRAST_MIN, f"{ratio:.2f}"


def _accent_contrast(brief: Brief, ctx: GuardrailContext) -> tuple[bool, str]:
    brand = brief.company.brand
    ratio = contrast_ratio(brand.accent, brand.secondary)
    return ratio >= ACCENT_CONTRAST_MIN, f"{ratio:.2f}"


def _headline_length(brief: Brief, ctx: GuardrailContext) -> tuple[bool, str]:
    words = word_count(brief.company.name)
    low, high = HEADLINE_WORDS
    return low <= words <= high, str(words)


def _subtitle_length(brief: Brief, ctx: GuardrailContext) -> tuple[bool, str]:
    words = word_count(brief.company.tagline)
    if words == 0:
        return True, "empty"
    low, high = SUBTITLE_WORDS
    return low <= words <= high, str(words)


def _min_proof(brief: Brief, ctx: GuardrailContext) -> tuple[bool, str]:
    count = brief.proof.count
    return count >= MIN_PROOF_ITEMS, str(count)


def _hero_asset(brief: Brief, ctx: GuardrailContext) -> tuple[bool, str]:
    if ctx.archetype is None or not ctx.archetype.needs_hero_image:
        return True, "optional"
    if brief.company.brand.hero_image.strip():
        return True, "provided"
    return False, f"{ctx.archetype.key} style needs a hero image"


def _company_name(brief: Brief, ctx: GuardrailContext) -> tuple[bool, str]:
    length = len(brief.company.name.strip())
    return length >= MIN_NAME_LENGTH, f"{length} chars"


def _primary_goal(brief: Brief, ctx: GuardrailContext) -> tuple[bool, str]:
    goal = brief.goals.primary.strip()
    return bool(goal), goal


DEFAULT_RULES: Sequence[GuardrailRule] = (
    GuardrailRule(
        id="contrast_body",
        label="Contrast (body text vs background) ≥ 4.5:1",
        must=True,
        check=_body_contrast,
    ),
    GuardrailRule(
        id="contrast_accent",
        label="Contrast (accent vs background) ≥ 3:1",
        must=True,
        check=_accent_contrast,
    ),
    GuardrailRule(id="headline_length", label="Headline is 1–9 words", must=True, check=_headline_length),
    GuardrailRule(id="subtitle_length", label="Subtitle is 8–24 words", must=False, check=_subtitle_length),
    GuardrailRule(
        id="min_proof",
        label="At least 2 proof items (logos + testimonials + metrics)",
        must=True,
        check=_min_proof,
    ),
    GuardrailRule(
        id="hero_asset",
        label="Hero image provided when the style needs one",
        must=True,
        check=_hero_asset,
    ),
    GuardrailRule(id="company_name", label="Company name present", must=True, check=_company_name),
    GuardrailRule(id="primary_goal", label="Primary goal selected", must=True, check=_primary_goal),
)


def completeness_score(checks: Sequence[CheckResult]) -> int:
    hard = [check for check in checks if check.must]
    if not hard:
        return 100
    passed = sum(1 for check in hard if check.passed)
    # half-up, not banker's rounding
    return int(math.floor(100 * passed / len(hard) + 0.5))


def format_decision_log(checks: Sequence[CheckResult], completeness: int, export_blocked: bool) -> str:
    failing = [check for check in checks if check.must and not check.passed]
    warnings = [check for check in checks if not check.must and not check.passed]

    def _line(check: CheckResult) -> str:
        return f"- {check.label} ({check.hint})" if check.hint else f"- {check.label}"

    lines = [
        "## Checklist",
        f"- Completeness: {completeness}%",
        f"- Export: {'blocked' if export_blocked else 'ready'}",
        "",
        "## Blocking",
        "\n".join(_line(check) for check in failing) if failing else "- none",
        "",
        "## Warnings",
        "\n".join(_line(check) for check in warnings) if warnings else "- none",
    ]
    return "\n".join(lines)


class GuardrailEvaluator:
    def __init__(
        self,
        *,
        rules: Sequence[GuardrailRule] = DEFAULT_RULES,
        archetypes: Mapping[str, Archetype] = ARCHETYPES,
    ) -> None:
        self._rules = tuple(rules)
        self._archetypes = archetypes

    def evaluate(self, brief: Brief) -> Checklist:
        archetype = None
        if brief.archetype is not None:
            archetype = self._archetypes.get(brief.archetype, DEFAULT_ARCHETYPE_PRESET)
        context = GuardrailContext(archetype=archetype)
        checks = [rule.evaluate(brief, context) for rule in self._rules]
        completeness = completeness_score(checks)
        export_blocked = any(check.must and not check.passed for check in checks)
        logger.debug(
            "Evaluated guardrails",
            extra={
                "completeness": completeness,
                "export_blocked": export_blocked,
                "failing": [check.id for check in checks if not check.passed],
            },
        )
        return Checklist(
            checks=checks,
            completeness=completeness,
            export_blocked=export_blocked,
            decision_log=format_decision_log(checks, completeness, export_blocked),
        )


_default_evaluator = GuardrailEvaluator()


def evaluate_brief(brief: Brief) -> Checklist:
    return _default_evaluator.evaluate(brief)


__all__ = [
    "DEFAULT_RULES",
    "GuardrailContext",
    "GuardrailEvaluator",
    "GuardrailRule",
    "completeness_score",
    "evaluate_brief",
    "format_decision_log",
    "word_count",
]
