"""Section composition model for the landing page builder."""

from .catalog import SectionType
from .document import dump_document, load_document, new_page_document
from .editor import SectionEditor, ruleset_for
from .session import BuilderSession
from .store import PageStore

__all__ = [
  "BuilderSession",
  "PageStore",
  "SectionEditor",
  "SectionType",
  "dump_document",
  "load_document",
  "new_page_document",
  "ruleset_for",
]
