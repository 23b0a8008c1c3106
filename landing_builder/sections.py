"""Section collection manager.

Operations over the ordered ``content.sections`` list of a page document. Each
takes a document and returns a new one; an id that matches no section leaves
the section list as it was.
"""

import copy
from typing import Any, Literal

from .catalog import SectionType, default_attributes
from .document import get_sections, with_sections
from .ids import new_section_id

Direction = Literal["up", "down"]


def _index_of(sections: list[dict[str, Any]], section_id: str) -> int:
  for i, section in enumerate(sections):
    if section.get("id") == section_id:
      return i
  return -1


def _renumber(sections: list[dict[str, Any]]) -> list[dict[str, Any]]:
  """Reassign ``order`` from array position for every section."""
  return [
    s if s.get("order") == i else {**s, "order": i} for i, s in enumerate(sections)
  ]


def get_section(doc: dict[str, Any], section_id: str) -> dict[str, Any] | None:
  """Return the section with ``section_id``, if any."""
  sections = get_sections(doc)
  index = _index_of(sections, section_id)
  return sections[index] if index >= 0 else None


def add_section(doc: dict[str, Any], section_type: str) -> tuple[dict[str, Any], str]:
  """Append a new section of ``section_type``.

  Returns the updated document and the new section's id so the caller can open
  it for editing. The hero is a fixed part of the page and cannot be added.
  """
  if section_type == SectionType.HERO.value:
    raise ValueError("The hero is part of every page; edit it with update_hero")

  sections = get_sections(doc)
  section = default_attributes(section_type)
  section["id"] = new_section_id()
  section["order"] = len(sections)
  section["isVisible"] = True
  return with_sections(doc, [*sections, section]), section["id"]


def update_section(
  doc: dict[str, Any], section_id: str, updates: dict[str, Any]
) -> dict[str, Any]:
  """Shallow-merge ``updates`` into a section; ``id`` and ``order`` are kept."""
  sections = get_sections(doc)
  index = _index_of(sections, section_id)
  if index < 0:
    return doc
  changes = {k: v for k, v in updates.items() if k not in ("id", "order")}
  sections[index] = {**sections[index], **changes}
  return with_sections(doc, sections)


def delete_section(doc: dict[str, Any], section_id: str) -> dict[str, Any]:
  """Remove a section and close the gap it leaves in ``order``."""
  sections = get_sections(doc)
  index = _index_of(sections, section_id)
  if index < 0:
    return doc
  del sections[index]
  return with_sections(doc, _renumber(sections))


def move_section(
  doc: dict[str, Any], section_id: str, direction: Direction
) -> dict[str, Any]:
  """Swap a section with its neighbour, then renumber the whole list."""
  sections = get_sections(doc)
  index = _index_of(sections, section_id)
  if index < 0:
    return doc

  if direction == "up" and index > 0:
    sections[index], sections[index - 1] = sections[index - 1], sections[index]
  elif direction == "down" and index < len(sections) - 1:
    sections[index], sections[index + 1] = sections[index + 1], sections[index]

  return with_sections(doc, _renumber(sections))


def duplicate_section(
  doc: dict[str, Any], section_id: str
) -> tuple[dict[str, Any], str | None]:
  """Append a deep copy of a section under a new id.

  A non-empty title gets a ``" (Copy)"`` suffix. Returns the new id, or None if
  ``section_id`` was not found.
  """
  sections = get_sections(doc)
  index = _index_of(sections, section_id)
  if index < 0:
    return doc, None

  copied = copy.deepcopy(sections[index])
  copied["id"] = new_section_id()
  copied["order"] = len(sections)
  if copied.get("title"):
    copied["title"] = f"{copied['title']} (Copy)"
  return with_sections(doc, [*sections, copied]), copied["id"]


def toggle_visibility(doc: dict[str, Any], section_id: str) -> dict[str, Any]:
  """Flip a section's ``isVisible`` flag."""
  section = get_section(doc, section_id)
  if section is None:
    return doc
  visible = section.get("isVisible", True)
  return update_section(doc, section_id, {"isVisible": not visible})


def replace_sections(
  doc: dict[str, Any], sections: list[dict[str, Any]]
) -> dict[str, Any]:
  """Swap in a whole edited section list, as the bulk editor does."""
  return with_sections(doc, list(sections))
