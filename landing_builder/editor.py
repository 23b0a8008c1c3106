"""Section editor dispatch: which attributes a section type exposes, and where.

``RULESETS`` maps every section type to the attributes of its content tab.
Adding a section type means adding one row here; the import-time exhaustiveness
check refuses a table with a missing type.
"""

import copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from . import form_builder
from .catalog import ITEM_SCHEMAS, SectionType, check_exhaustive
from .errors import EditorTabError


@dataclass(frozen=True)
class EditorRuleset:
  """Attributes an editing view exposes for one section type."""

  scalars: tuple[str, ...]
  collections: tuple[str, ...] = ()
  records: tuple[str, ...] = ()

  def exposes(self, name: str) -> bool:
    return name in self.scalars or name in self.collections or name in self.records


GENERIC_RULESET = EditorRuleset(("title", "subtitle", "content"))

_HEADED = ("title", "subtitle")

RULESETS: dict[SectionType, EditorRuleset] = {
  SectionType.HERO: EditorRuleset(("title", "subtitle", "ctaText", "ctaLink")),
  SectionType.FEATURES: EditorRuleset(_HEADED, collections=("features",)),
  SectionType.PROPERTIES: GENERIC_RULESET,
  SectionType.TESTIMONIALS: EditorRuleset(_HEADED, collections=("testimonials",)),
  SectionType.CONTACT: GENERIC_RULESET,
  SectionType.LEAD_MAGNET: GENERIC_RULESET,
  SectionType.CUSTOM: GENERIC_RULESET,
  SectionType.TEXT: EditorRuleset(("title", "content")),
  SectionType.IMAGE: GENERIC_RULESET,
  SectionType.VIDEO: GENERIC_RULESET,
  SectionType.CTA: GENERIC_RULESET,
  SectionType.PRICING: GENERIC_RULESET,
  SectionType.FAQ: EditorRuleset(_HEADED, collections=("faqItems",)),
  SectionType.TEAM: GENERIC_RULESET,
  SectionType.STATS: GENERIC_RULESET,
  SectionType.GALLERY: GENERIC_RULESET,
  SectionType.FORM: GENERIC_RULESET,
  SectionType.PROJECT_SHOWCASE: EditorRuleset(
    ("title", "subtitle", "developer", "content"),
    records=("projectDetails", "contactInfo"),
  ),
}

check_exhaustive(RULESETS, "RULESETS")

# The bulk data editor covers only the types with nested data
DATA_EDITOR_RULESETS: dict[SectionType, EditorRuleset] = {
  SectionType.PROJECT_SHOWCASE: RULESETS[SectionType.PROJECT_SHOWCASE],
  SectionType.FAQ: EditorRuleset((), collections=("faqItems",)),
  SectionType.FEATURES: EditorRuleset((), collections=("features",)),
  SectionType.TESTIMONIALS: EditorRuleset((), collections=("testimonials",)),
}

FORM_BUILDER_TYPES = frozenset({SectionType.FORM, SectionType.CONTACT})

DESIGN_ATTRIBUTES = ("backgroundColor", "textColor", "padding", "margin")

LAYOUT_CHOICES: dict[str, tuple[Any, ...]] = {
  "columns": (1, 2, 3, 4, 6),
  "alignment": ("left", "center", "right"),
  "spacing": ("tight", "normal", "loose"),
}


def ruleset_for(section_type: str) -> EditorRuleset:
  """Content-tab ruleset for a type; unrecognized types get the generic one."""
  known = SectionType.parse(section_type)
  if known is None:
    return GENERIC_RULESET
  return RULESETS[known]


def data_editor_ruleset(section_type: str) -> EditorRuleset | None:
  """Ruleset of the bulk data editor, or None if the type has none."""
  known = SectionType.parse(section_type)
  return DATA_EDITOR_RULESETS.get(known) if known is not None else None


def has_data_editor(section_type: str) -> bool:
  return data_editor_ruleset(section_type) is not None


def has_form_builder(section_type: str) -> bool:
  return SectionType.parse(section_type) in FORM_BUILDER_TYPES


def editor_tabs(section_type: str) -> list[str]:
  """Tabs of the section editor, in display order."""
  tabs = ["content"]
  if has_form_builder(section_type):
    tabs.append("form-builder")
  tabs.extend(["design", "layout"])
  return tabs


def ruleset_as_dict(ruleset: EditorRuleset) -> dict[str, list[str]]:
  """JSON shape of a ruleset for the UI shell."""
  return {
    "scalars": list(ruleset.scalars),
    "collections": list(ruleset.collections),
    "records": list(ruleset.records),
  }


def _is_form_config(value: Any) -> bool:
  return isinstance(value, dict) and isinstance(value.get("fields"), list)


class SectionEditor:
  """Draft of one section open in the editor.

  Every tab edits the same draft. Nothing reaches the page document until the
  owning session commits ``result()``; dropping the editor discards the draft.
  """

  def __init__(self, section: dict[str, Any]) -> None:
    self.section_id: str = section.get("id", "")
    self.section_type: str = section.get("type", "")
    self.ruleset = ruleset_for(self.section_type)
    self._draft = copy.deepcopy(section)

  @property
  def tabs(self) -> list[str]:
    return editor_tabs(self.section_type)

  @property
  def data_ruleset(self) -> EditorRuleset | None:
    return data_editor_ruleset(self.section_type)

  def result(self) -> dict[str, Any]:
    """The edited section."""
    return copy.deepcopy(self._draft)

  def get(self, name: str, default: Any = None) -> Any:
    return self._draft.get(name, default)

  def _nested_rulesets(self) -> list[EditorRuleset]:
    rulesets = [self.ruleset]
    if self.data_ruleset is not None:
      rulesets.append(self.data_ruleset)
    return rulesets

  # Content tab

  def set_value(self, name: str, value: Any) -> None:
    """Set a top-level attribute, e.g. ``title`` or ``ctaLink``."""
    if name in ("id", "type", "order"):
      return
    self._draft[name] = value

  def set_record_value(self, record: str, key: str, value: Any) -> None:
    """Set one key of a nested record such as ``projectDetails``."""
    if not any(record in r.records for r in self._nested_rulesets()):
      raise EditorTabError(f"{self.section_type!r} sections have no {record!r} record")
    self._draft[record] = {**(self._draft.get(record) or {}), key: value}

  def _check_collection(self, collection: str) -> None:
    if not any(collection in r.collections for r in self._nested_rulesets()):
      raise EditorTabError(
        f"{self.section_type!r} sections have no {collection!r} collection"
      )

  def items(self, collection: str) -> list[dict[str, Any]]:
    return list(self._draft.get(collection) or [])

  def add_item(self, collection: str, **values: Any) -> str:
    """Append an item built from the collection's schema; returns its id."""
    self._check_collection(collection)
    item = ITEM_SCHEMAS[collection].new_item(**values)
    self._draft[collection] = [*self.items(collection), item]
    return item["id"]

  def update_item_at(
    self, collection: str, index: int, updates: dict[str, Any]
  ) -> None:
    """Shallow-merge ``updates`` into the item at ``index``."""
    self._check_collection(collection)
    items = self.items(collection)
    if not 0 <= index < len(items):
      return
    changes = {k: v for k, v in updates.items() if k != "id"}
    items[index] = {**items[index], **changes}
    self._draft[collection] = items

  def remove_item_at(self, collection: str, index: int) -> None:
    self._check_collection(collection)
    items = self.items(collection)
    if not 0 <= index < len(items):
      return
    del items[index]
    self._draft[collection] = items

  # Design and layout tabs

  def set_design(self, name: str, value: str) -> None:
    if name not in DESIGN_ATTRIBUTES:
      raise EditorTabError(f"{name!r} is not a design attribute")
    self._draft[name] = value

  def set_layout(self, name: str, value: Any) -> None:
    if name not in LAYOUT_CHOICES:
      raise EditorTabError(f"{name!r} is not a layout attribute")
    self._draft["layout"] = {**(self._draft.get("layout") or {}), name: value}

  # Form builder tab

  @property
  def form_config(self) -> dict[str, Any]:
    return {"fields": [], **(self._draft.get("formConfig") or {})}

  def update_form(
    self, operation: Callable[..., Any], *args: Any
  ) -> Any:
    """Apply a ``form_builder`` operation to the draft's ``formConfig``.

    Operations returning ``(config, value)`` have ``value`` passed back.
    """
    if not has_form_builder(self.section_type):
      raise EditorTabError(f"{self.section_type!r} sections have no form builder")
    outcome = operation(self.form_config, *args)
    if isinstance(outcome, tuple) and len(outcome) == 2 and _is_form_config(outcome[0]):
      self._draft["formConfig"], value = outcome
      return value
    if _is_form_config(outcome):
      self._draft["formConfig"] = outcome
      return None
    raise TypeError(
      f"{getattr(operation, '__name__', operation)!r} does not return a form config"
    )

  def add_field(self, field_type: str) -> str:
    return self.update_form(form_builder.add_field, field_type)
