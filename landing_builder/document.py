"""The page document: the unit the builder loads and saves.

A page document is the JSON object the store holds, kept as a plain dict so
attributes the builder does not know about survive a load, edit, save cycle
untouched. Helpers here never mutate their input.
"""

import copy
import json
from typing import Any

HERO_ID = "hero"

PAGE_SETTINGS = ("title", "slug", "description", "template", "isPublished", "isActive")

DEFAULT_PAGE: dict[str, Any] = {
  "title": "New Landing Page",
  "slug": "new-landing-page",
  "description": "",
  "template": "custom",
  "content": {
    "hero": {
      "title": "Welcome to Our Platform",
      "subtitle": "Discover amazing properties and find your dream home",
      "ctaText": "Get Started",
      "ctaLink": "#contact",
      "backgroundColor": "#3B82F6",
      "textColor": "#FFFFFF",
    },
    "sections": [],
    "footer": {
      "text": "Your trusted partner in real estate",
      "links": [],
      "socialLinks": [],
      "backgroundColor": "#1E293B",
      "textColor": "#FFFFFF",
    },
  },
  "styling": {
    "primaryColor": "#3B82F6",
    "secondaryColor": "#1E40AF",
    "fontFamily": "Inter",
    "customCss": "",
  },
  "seo": {
    "metaTitle": "",
    "metaDescription": "",
    "keywords": [],
  },
  "isPublished": False,
  "isActive": True,
}


def new_page_document() -> dict[str, Any]:
  """Fresh document for a page that has never been saved."""
  return copy.deepcopy(DEFAULT_PAGE)


def load_document(raw: str | bytes) -> dict[str, Any]:
  """Parse a stored page document."""
  doc = json.loads(raw)
  if not isinstance(doc, dict):
    raise ValueError("Page document must be a JSON object")
  return doc


def dump_document(doc: dict[str, Any]) -> str:
  """Serialize a page document for the store."""
  return json.dumps(doc, indent=2, ensure_ascii=False)


def get_content(doc: dict[str, Any]) -> dict[str, Any]:
  return doc.get("content") or {}


def get_sections(doc: dict[str, Any]) -> list[dict[str, Any]]:
  """The section list in array order (not necessarily sorted by ``order``)."""
  return list(get_content(doc).get("sections") or [])


def with_content(doc: dict[str, Any], **changes: Any) -> dict[str, Any]:
  """Copy of ``doc`` with keys of ``content`` replaced."""
  return {**doc, "content": {**get_content(doc), **changes}}


def with_sections(
  doc: dict[str, Any], sections: list[dict[str, Any]]
) -> dict[str, Any]:
  """Copy of ``doc`` with its section list replaced."""
  return with_content(doc, sections=sections)


def get_hero(doc: dict[str, Any]) -> dict[str, Any]:
  """The hero as an editable pseudo-section with its fixed identity."""
  return {**(get_content(doc).get("hero") or {}), "id": HERO_ID, "type": "hero"}


def update_hero(doc: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
  """Merge ``updates`` into ``content.hero``.

  The pseudo-section identity (``id``/``type``) added by ``get_hero`` is not
  written back.
  """
  changes = {k: v for k, v in updates.items() if k not in ("id", "type")}
  hero = {**(get_content(doc).get("hero") or {}), **changes}
  return with_content(doc, hero=hero)


def update_footer(doc: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
  """Merge ``updates`` into ``content.footer``."""
  footer = {**(get_content(doc).get("footer") or {}), **updates}
  return with_content(doc, footer=footer)


def update_page_settings(
  doc: dict[str, Any], updates: dict[str, Any]
) -> dict[str, Any]:
  """Merge top-level page settings (title, slug, description, ...)."""
  changes = {k: v for k, v in updates.items() if k in PAGE_SETTINGS}
  return {**doc, **changes}


def update_styling(doc: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
  """Merge page-level styling (colors, font family, custom CSS)."""
  return {**doc, "styling": {**(doc.get("styling") or {}), **updates}}


def update_seo(doc: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
  """Merge SEO metadata."""
  return {**doc, "seo": {**(doc.get("seo") or {}), **updates}}


def _order_key(section: dict[str, Any]) -> float:
  order = section.get("order")
  return order if isinstance(order, int | float) else float("inf")


def sections_for_render(
  doc: dict[str, Any], include_hidden: bool = False
) -> list[dict[str, Any]]:
  """Sections stably sorted by ``order``, hidden ones dropped unless asked for."""
  sections = sorted(get_sections(doc), key=_order_key)
  if include_hidden:
    return sections
  return [s for s in sections if s.get("isVisible", True)]
