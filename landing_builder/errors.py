"""Exception types raised by the builder."""


class BuilderError(Exception):
  """Base class for builder errors."""


class PersistenceError(BuilderError):
  """The page store could not read or write a document."""


class PageNotFoundError(BuilderError):
  """No stored document exists for the requested page id."""

  def __init__(self, page_id: str) -> None:
    super().__init__(f"Landing page {page_id} not found")
    self.page_id = page_id


class EditorTabError(BuilderError):
  """A section editor tab was used for a section type that does not have it."""
