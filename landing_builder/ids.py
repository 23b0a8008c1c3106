"""Identifier allocation for sections, items and form fields."""

import uuid


def new_id(prefix: str) -> str:
  """Return a fresh identifier such as ``section_3f2a...``."""
  return f"{prefix}_{uuid.uuid4().hex}"


def new_section_id() -> str:
  """Allocate an id for a page section."""
  return new_id("section")


def new_item_id() -> str:
  """Allocate an id for an entry in a nested section collection."""
  return new_id("item")


def new_field_token() -> str:
  """Short token shared by a form field's ``id`` and ``name``."""
  return uuid.uuid4().hex[:12]
