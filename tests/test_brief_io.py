import pytest

from site_drafter.brief_io import BriefImportError, dump_brief, load_brief, read_brief_file, write_brief_file
from site_drafter.models.brief import Brief
from site_drafter.normalizer import BriefForm, normalize_form


def test_round_trip(harbor_brief):
    assert load_brief(dump_brief(harbor_brief)) == harbor_brief


def test_round_trip_from_form():
    brief = normalize_form(BriefForm(name="Acme", testimonials="Nice — Bob", metrics="Users: 10"))
    assert load_brief(dump_brief(brief)) == brief


def test_dump_uses_camel_case_keys(harbor_brief):
    text = dump_brief(harbor_brief)
    assert '"heroImage"' in text
    assert '"mustHave"' in text


def test_missing_and_null_fields_take_defaults():
    brief = load_brief('{"company": {"name": "Acme", "brand": {"accent": null}}, "goals": null, "extra": 1}')
    assert brief.company.brand.accent == "#0EA5E9"
    assert brief.goals.primary == ""
    assert brief == Brief.model_validate({"company": {"name": "Acme"}})


@pytest.mark.parametrize("text", ["{not json", "", "[1, 2]", '"brief"'])
def test_malformed_documents_are_rejected(text):
    with pytest.raises(BriefImportError) as exc_info:
        load_brief(text)
    assert str(exc_info.value).startswith("Invalid")


def test_wrong_shapes_are_rejected():
    with pytest.raises(BriefImportError, match="company"):
        load_brief('{"company": "Acme"}')


def test_files(tmp_path, harbor_brief):
    path = tmp_path / "nested" / "brief.json"
    write_brief_file(path, harbor_brief)
    assert read_brief_file(path) == harbor_brief
    with pytest.raises(FileNotFoundError):
        read_brief_file(tmp_path / "missing.json")
