"""Tests for the section type and field type catalogs."""

import pytest

from landing_builder.catalog import (
  ITEM_SCHEMAS,
  SECTION_LIBRARY,
  TYPE_DEFAULTS,
  SectionType,
  check_exhaustive,
  default_attributes,
  library,
)
from landing_builder.fields import CHOICE_TYPES, field_types_as_dicts, get_field_type
from landing_builder.renderer import SECTION_TEMPLATES


class TestSectionType:
  """Tests for the SectionType enumeration."""

  def test_parse_known(self) -> None:
    assert SectionType.parse("project-showcase") is SectionType.PROJECT_SHOWCASE

  def test_parse_unknown(self) -> None:
    assert SectionType.parse("countdown") is None
    assert SectionType.parse(None) is None

  def test_tables_cover_every_type(self) -> None:
    """Library, defaults and renderer tables all list every type."""
    for table in (SECTION_LIBRARY, TYPE_DEFAULTS, SECTION_TEMPLATES):
      assert set(table) == set(SectionType)

  def test_check_exhaustive_rejects_gaps(self) -> None:
    partial = {SectionType.HERO: "x"}
    with pytest.raises(TypeError, match="features"):
      check_exhaustive(partial, "partial")


class TestLibrary:
  """Tests for the add-section library."""

  def test_hero_not_offered(self) -> None:
    types = [info.type for info in library()]
    assert SectionType.HERO not in types
    assert len(types) == len(SectionType) - 1

  def test_names(self) -> None:
    assert SECTION_LIBRARY[SectionType.FORM].name == "Custom Form"
    assert SECTION_LIBRARY[SectionType.CUSTOM].name == "Custom HTML"


class TestDefaultAttributes:
  """Tests for default_attributes."""

  def test_defaults_are_fresh_copies(self) -> None:
    """Two sections never share nested default containers."""
    a = default_attributes("faq")
    b = default_attributes("faq")
    a["faqItems"].append({"id": "x"})
    a["layout"]["columns"] = 1
    assert b["faqItems"] == []
    assert b["layout"]["columns"] == 3

  def test_project_showcase(self) -> None:
    attrs = default_attributes("project-showcase")
    assert attrs["projectDetails"] == {}
    assert attrs["contactInfo"] == {}
    assert attrs["developer"] == ""

  def test_item_schema_assigns_ids(self) -> None:
    item = ITEM_SCHEMAS["faqItems"].new_item(question="Q")
    assert item["question"] == "Q"
    assert item["answer"] == ""
    assert item["id"].startswith("item_")


class TestFieldCatalog:
  """Tests for the field primitive catalog."""

  def test_choice_types(self) -> None:
    assert CHOICE_TYPES == {"select", "radio", "checkbox"}

  def test_lookup(self) -> None:
    info = get_field_type("tel")
    assert info is not None
    assert info.label == "Phone"
    assert get_field_type("signature") is None

  def test_json_rows(self) -> None:
    rows = field_types_as_dicts()
    assert [r["value"] for r in rows] == [
      "text",
      "email",
      "tel",
      "textarea",
      "select",
      "checkbox",
      "radio",
      "number",
      "date",
    ]
    assert {r["value"] for r in rows if r["hasOptions"]} == CHOICE_TYPES
