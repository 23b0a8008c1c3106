"""Search and edit the plain text of every section in one place."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from .session import BuilderSession

TEXT_FIELDS = ("title", "subtitle", "content", "ctaText", "ctaLink")

FIELD_LABELS = {
  "title": "Title",
  "subtitle": "Subtitle",
  "content": "Content",
  "ctaText": "CTA Text",
  "ctaLink": "CTA Link",
}


def field_label(field: str) -> str:
  return FIELD_LABELS.get(field, field)


def editable_fields(section: dict[str, Any]) -> list[str]:
  """Text attributes of a section that currently hold a value."""
  return [f for f in TEXT_FIELDS if section.get(f)]


def matches(section: dict[str, Any], query: str) -> bool:
  """Case-insensitive substring match on any text attribute."""
  needle = query.lower()
  if not needle:
    return True
  for f in TEXT_FIELDS:
    value = section.get(f)
    if isinstance(value, str) and needle in value.lower():
      return True
  return False


class BulkTextEditor:
  """Filter sections by text and edit one text attribute at a time.

  Holds only the query and the single in-flight edit; committed edits go
  straight to the session.
  """

  def __init__(self, session: "BuilderSession") -> None:
    self.session = session
    self.query = ""
    self.editing_section: str | None = None
    self.editing_field = ""
    self.draft_value = ""

  def matching_sections(self) -> list[dict[str, Any]]:
    candidates = self.session.sections_for_render(include_hidden=True)
    return [s for s in candidates if matches(s, self.query)]

  @property
  def is_editing(self) -> bool:
    return self.editing_section is not None

  def start_edit(self, section_id: str, field: str) -> bool:
    """Begin editing ``field`` of a section with its current value as draft."""
    if field not in TEXT_FIELDS:
      return False
    section = self.session.get_section(section_id)
    if section is None:
      return False
    self.editing_section = section_id
    self.editing_field = field
    self.draft_value = section.get(field) or ""
    return True

  def set_draft(self, value: str) -> None:
    self.draft_value = value

  def commit(self) -> None:
    """Write the draft through to the section and clear the edit."""
    if self.editing_section and self.editing_field:
      updates = {self.editing_field: self.draft_value}
      self.session.update_section(self.editing_section, updates)
    self._clear()

  def cancel(self) -> None:
    """Drop the draft without touching the document."""
    self._clear()

  def _clear(self) -> None:
    self.editing_section = None
    self.editing_field = ""
    self.draft_value = ""
