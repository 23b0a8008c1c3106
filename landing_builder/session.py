"""Builder session: the one editable page document and its load/save cycle."""

import logging
from typing import Any, Literal, Protocol

from . import document, sections
from .bulk_editor import BulkTextEditor
from .editor import SectionEditor
from .errors import BuilderError, PersistenceError
from .store import PageStore

logger = logging.getLogger(__name__)

SessionState = Literal["loading", "ready", "not-found"]


class Notifier(Protocol):
  """Where the session reports load/save outcomes (toasts in the UI shell)."""

  def success(self, message: str) -> None: ...

  def error(self, message: str) -> None: ...


class LoggingNotifier:
  """Notifier that only logs."""

  def success(self, message: str) -> None:
    logger.info(message)

  def error(self, message: str) -> None:
    logger.warning(message)


class BuilderSession:
  """Owns the page document for one editing session.

  UI actions call the methods here; each one replaces ``self.document`` with
  the result of a pure operation from ``sections``/``document``. Only
  ``save`` talks to the store, and a failed save leaves the draft as it was.
  """

  def __init__(
    self,
    store: PageStore,
    page_id: str | None = None,
    notifier: Notifier | None = None,
  ) -> None:
    self.store = store
    self.page_id = page_id
    self.notifier: Notifier = notifier or LoggingNotifier()
    self.document: dict[str, Any] | None = None
    self.state: SessionState = "loading"

  def open(self) -> SessionState:
    """Load the page, or start from the default template for a new page."""
    if self.page_id is None:
      self.document = document.new_page_document()
      self.state = "ready"
      return self.state

    try:
      loaded = self.store.load_page(self.page_id)
    except PersistenceError as e:
      logger.error("Error fetching landing page %s: %s", self.page_id, e)
      loaded = None

    if loaded is None:
      self.document = None
      self.state = "not-found"
      self.notifier.error("Failed to load landing page")
    else:
      self.document = loaded
      self.state = "ready"
    return self.state

  def save(self) -> bool:
    """Write the whole document to the store. Returns True on success."""
    doc = self._require_document()
    creating = self.page_id is None
    try:
      page_id, stored = self.store.save_page(self.page_id, doc)
    except PersistenceError as e:
      logger.error("Error saving landing page %s: %s", self.page_id, e)
      self.notifier.error("Failed to save landing page")
      return False

    self.page_id = page_id
    self.document = stored
    if creating:
      self.notifier.success("Landing page created successfully")
    else:
      self.notifier.success("Landing page updated successfully")
    return True

  def _require_document(self) -> dict[str, Any]:
    if self.document is None:
      raise BuilderError("No landing page is open")
    return self.document

  def _apply(self, new_doc: dict[str, Any]) -> None:
    self.document = new_doc

  # Sections

  def add_section(self, section_type: str) -> str:
    """Append a section of ``section_type`` and return its id."""
    new_doc, section_id = sections.add_section(self._require_document(), section_type)
    self._apply(new_doc)
    return section_id

  def update_section(self, section_id: str, updates: dict[str, Any]) -> None:
    self._apply(sections.update_section(self._require_document(), section_id, updates))

  def delete_section(self, section_id: str) -> None:
    self._apply(sections.delete_section(self._require_document(), section_id))

  def move_section(self, section_id: str, direction: sections.Direction) -> None:
    self._apply(sections.move_section(self._require_document(), section_id, direction))

  def duplicate_section(self, section_id: str) -> str | None:
    new_doc, new_id = sections.duplicate_section(self._require_document(), section_id)
    self._apply(new_doc)
    return new_id

  def toggle_visibility(self, section_id: str) -> None:
    self._apply(sections.toggle_visibility(self._require_document(), section_id))

  def replace_sections(self, new_sections: list[dict[str, Any]]) -> None:
    self._apply(sections.replace_sections(self._require_document(), new_sections))

  def get_section(self, section_id: str) -> dict[str, Any] | None:
    return sections.get_section(self._require_document(), section_id)

  def sections_for_render(self, include_hidden: bool = False) -> list[dict[str, Any]]:
    return document.sections_for_render(self._require_document(), include_hidden)

  # Hero and page-level settings

  def update_hero(self, updates: dict[str, Any]) -> None:
    self._apply(document.update_hero(self._require_document(), updates))

  def update_footer(self, updates: dict[str, Any]) -> None:
    self._apply(document.update_footer(self._require_document(), updates))

  def update_page_settings(self, updates: dict[str, Any]) -> None:
    self._apply(document.update_page_settings(self._require_document(), updates))

  def update_styling(self, updates: dict[str, Any]) -> None:
    self._apply(document.update_styling(self._require_document(), updates))

  def update_seo(self, updates: dict[str, Any]) -> None:
    self._apply(document.update_seo(self._require_document(), updates))

  # Editors

  def open_editor(self, section_id: str) -> SectionEditor | None:
    """Start editing a section (or the hero) on a private draft."""
    doc = self._require_document()
    if section_id == document.HERO_ID:
      return SectionEditor(document.get_hero(doc))
    section = sections.get_section(doc, section_id)
    return SectionEditor(section) if section is not None else None

  def commit_editor(self, editor: SectionEditor) -> None:
    """Merge an editor's draft back into the document."""
    if editor.section_id == document.HERO_ID:
      self.update_hero(editor.result())
    else:
      self.update_section(editor.section_id, editor.result())

  def bulk_editor(self) -> BulkTextEditor:
    return BulkTextEditor(self)
