import pytest

from resume_builder.client.document import (
    IdentityPatch,
    Section,
    SectionReplace,
    apply_update,
    empty_document,
    synchronize,
)
from resume_builder.schemas.resume import DOCUMENT_FIELDS, EducationEntry, ExperienceEntry, ResumeDocument

from conftest import make_resume


@pytest.fixture
def document():
    return ResumeDocument(**make_resume())


def test_empty_document_defaults():
    doc = empty_document()
    assert doc.name == "" and doc.email == ""
    assert doc.experiences == [ExperienceEntry(company="", position="", duration="", responsibilities=[""])]
    assert doc.education == [EducationEntry()]
    assert doc.skills == []
    assert doc.id is None and doc.created_at is None


@pytest.mark.parametrize("patch", [
    {"name": "Grace Hopper"},
    {"title": "Rear Admiral", "phone": "555-0100"},
    {"email": "grace@example.com", "website": ""},
    {"summary": "Compiler pioneer", "skills": ["COBOL"]},
])
def test_patch_overwrites_named_fields_and_keeps_the_rest(document, patch):
    result = synchronize(document, patch=patch)
    for field in DOCUMENT_FIELDS:
        if field in patch:
            assert getattr(result, field) == patch[field]
        else:
            assert getattr(result, field) is getattr(document, field)


@pytest.mark.parametrize("section,value", [
    (Section.EXPERIENCES, [ExperienceEntry(company="Navy", position="Officer", duration="1943")]),
    (Section.EDUCATION, [EducationEntry(institution="Yale", degree="PhD", year="1934")]),
    (Section.SKILLS, ["FLOW-MATIC"]),
    (Section.SUMMARY, "Amazing Grace"),
])
def test_section_replace_changes_only_that_section(document, section, value):
    result = synchronize(document, section=section, value=value)
    assert getattr(result, section.value) is value
    for field in DOCUMENT_FIELDS:
        if field != section.value:
            assert getattr(result, field) is getattr(document, field)


def test_input_document_is_not_mutated(document):
    before = document.model_copy(deep=True)
    synchronize(document, patch={"name": "Someone Else"})
    synchronize(document, section="skills", value=[])
    assert document == before


def test_required_fields_survive_unrelated_updates(document):
    result = apply_update(document, SectionReplace(Section.SKILLS, []))
    result = apply_update(result, IdentityPatch({"location": "Arlington"}))
    assert result.name == document.name
    assert result.email == document.email


def test_unknown_patch_field_is_rejected(document):
    with pytest.raises(ValueError):
        synchronize(document, patch={"nickname": "Ada"})


def test_unknown_section_is_rejected(document):
    with pytest.raises(ValueError):
        synchronize(document, section="name", value="Ada")


def test_patch_and_section_are_exclusive(document):
    with pytest.raises(ValueError):
        synchronize(document, patch={"name": "x"}, section=Section.SKILLS, value=[])
    with pytest.raises(ValueError):
        synchronize(document)
