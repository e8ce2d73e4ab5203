from pathlib import Path

import pytest

from site_drafter.brief_io import load_brief
from site_drafter.models.brief import Brief

FIXTURES = Path(__file__).resolve().parent.parent / "data" / "briefs"


def load_fixture(name: str) -> Brief:
    return load_brief((FIXTURES / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture
def harbor_brief() -> Brief:
    return load_fixture("harbor-sage-law")


@pytest.fixture
def acme_brief() -> Brief:
    return load_fixture("acme-minimal")
