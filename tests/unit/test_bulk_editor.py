"""Tests for the bulk text editor."""

from landing_builder.bulk_editor import editable_fields, field_label, matches
from landing_builder.session import BuilderSession


def _fill(session: BuilderSession) -> tuple[str, str, str]:
  faq = session.add_section("faq")
  session.update_section(faq, {"title": "Questions", "subtitle": "Ask us"})
  cta = session.add_section("cta")
  session.update_section(cta, {"title": "Book now", "ctaText": "Call"})
  hidden = session.add_section("text")
  session.update_section(hidden, {"content": "Hidden QUESTIONS here"})
  session.toggle_visibility(hidden)
  return faq, cta, hidden


class TestMatching:
  """Tests for section text matching."""

  def test_case_insensitive(self) -> None:
    assert matches({"title": "Spring Launch"}, "spring")
    assert matches({"ctaLink": "/BOOK"}, "book")
    assert not matches({"title": "Spring"}, "autumn")

  def test_empty_query_matches_everything(self) -> None:
    assert matches({}, "")

  def test_ignores_non_text_attributes(self) -> None:
    assert not matches({"faqItems": [{"question": "spring"}]}, "spring")

  def test_editable_fields(self) -> None:
    section = {"title": "A", "subtitle": "", "ctaText": "Go", "content": None}
    assert editable_fields(section) == ["title", "ctaText"]
    assert field_label("ctaText") == "CTA Text"


class TestBulkTextEditor:
  """Tests for BulkTextEditor against a live session."""

  def test_query_includes_hidden_sections(self, session: BuilderSession) -> None:
    faq, cta, hidden = _fill(session)
    bulk = session.bulk_editor()

    assert [s["id"] for s in bulk.matching_sections()] == [faq, cta, hidden]

    bulk.query = "questions"
    assert [s["id"] for s in bulk.matching_sections()] == [faq, hidden]

  def test_commit_writes_through(self, session: BuilderSession) -> None:
    faq, _, _ = _fill(session)
    bulk = session.bulk_editor()

    assert bulk.start_edit(faq, "subtitle")
    assert bulk.is_editing
    assert bulk.draft_value == "Ask us"

    bulk.set_draft("Ask anything")
    bulk.commit()

    assert not bulk.is_editing
    section = session.get_section(faq)
    assert section is not None
    assert section["subtitle"] == "Ask anything"
    assert section["title"] == "Questions"

  def test_cancel_discards(self, session: BuilderSession) -> None:
    faq, _, _ = _fill(session)
    bulk = session.bulk_editor()
    bulk.start_edit(faq, "title")
    bulk.set_draft("Changed")
    bulk.cancel()

    assert not bulk.is_editing
    assert session.get_section(faq)["title"] == "Questions"  # type: ignore[index]

  def test_start_edit_rejects_bad_targets(self, session: BuilderSession) -> None:
    faq, _, _ = _fill(session)
    bulk = session.bulk_editor()

    assert not bulk.start_edit("missing", "title")
    assert not bulk.start_edit(faq, "faqItems")
    assert not bulk.is_editing
