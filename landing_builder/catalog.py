"""Section types, their library entries, and their default attributes."""

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .ids import new_item_id


class SectionType(str, Enum):
  """Closed set of section kinds the builder knows how to edit and render."""

  HERO = "hero"
  FEATURES = "features"
  PROPERTIES = "properties"
  TESTIMONIALS = "testimonials"
  CONTACT = "contact"
  LEAD_MAGNET = "lead-magnet"
  CUSTOM = "custom"
  TEXT = "text"
  IMAGE = "image"
  VIDEO = "video"
  CTA = "cta"
  PRICING = "pricing"
  FAQ = "faq"
  TEAM = "team"
  STATS = "stats"
  GALLERY = "gallery"
  FORM = "form"
  PROJECT_SHOWCASE = "project-showcase"

  @classmethod
  def parse(cls, value: Any) -> "SectionType | None":
    """Map a raw ``type`` string to a member, or None when unrecognized."""
    try:
      return cls(value)
    except ValueError:
      return None


def check_exhaustive(table: Mapping[SectionType, Any], name: str) -> None:
  """Fail at import time if a per-type table misses a section type."""
  missing = [t.value for t in SectionType if t not in table]
  if missing:
    raise TypeError(f"{name} has no entry for: {', '.join(missing)}")


@dataclass(frozen=True)
class SectionTypeInfo:
  """An entry in the section library shown when adding a section."""

  type: SectionType
  name: str
  description: str
  # The hero is a fixed pseudo-section and is never added to the list
  addable: bool = True


@dataclass(frozen=True)
class ItemSchema:
  """Shape of one entry in a nested section collection."""

  collection: str
  label: str
  defaults: dict[str, Any] = field(default_factory=dict)

  def new_item(self, **values: Any) -> dict[str, Any]:
    """Build a new item with a fresh id, defaults filled in."""
    item = {**copy.deepcopy(self.defaults), **values}
    item["id"] = new_item_id()
    return item


@dataclass(frozen=True)
class RecordSchema:
  """Flat key/value record nested in a section."""

  name: str
  label: str
  keys: tuple[str, ...]


SECTION_LIBRARY: dict[SectionType, SectionTypeInfo] = {
  SectionType.HERO: SectionTypeInfo(
    SectionType.HERO,
    "Hero Section",
    "Eye-catching banner with title, subtitle, and CTA",
    addable=False,
  ),
  SectionType.FEATURES: SectionTypeInfo(
    SectionType.FEATURES,
    "Features",
    "Highlight key features with icons and descriptions",
  ),
  SectionType.PROPERTIES: SectionTypeInfo(
    SectionType.PROPERTIES,
    "Properties",
    "Showcase featured properties in a grid layout",
  ),
  SectionType.CONTACT: SectionTypeInfo(
    SectionType.CONTACT,
    "Contact Form",
    "Contact form with company information",
  ),
  SectionType.TEXT: SectionTypeInfo(
    SectionType.TEXT,
    "Text Content",
    "Rich text content with title and description",
  ),
  SectionType.IMAGE: SectionTypeInfo(
    SectionType.IMAGE,
    "Image",
    "Single image with optional title and caption",
  ),
  SectionType.VIDEO: SectionTypeInfo(
    SectionType.VIDEO,
    "Video",
    "Embedded video with title and description",
  ),
  SectionType.CTA: SectionTypeInfo(
    SectionType.CTA,
    "Call to Action",
    "Prominent CTA button with title and subtitle",
  ),
  SectionType.PRICING: SectionTypeInfo(
    SectionType.PRICING,
    "Pricing",
    "Pricing plans with features and CTA buttons",
  ),
  SectionType.FAQ: SectionTypeInfo(
    SectionType.FAQ,
    "FAQ",
    "Frequently asked questions with expandable answers",
  ),
  SectionType.TEAM: SectionTypeInfo(
    SectionType.TEAM,
    "Team",
    "Team members with photos and social links",
  ),
  SectionType.STATS: SectionTypeInfo(
    SectionType.STATS,
    "Statistics",
    "Key statistics and numbers with icons",
  ),
  SectionType.GALLERY: SectionTypeInfo(
    SectionType.GALLERY,
    "Gallery",
    "Image gallery with lightbox functionality",
  ),
  SectionType.FORM: SectionTypeInfo(
    SectionType.FORM,
    "Custom Form",
    "Customizable form with various field types",
  ),
  SectionType.TESTIMONIALS: SectionTypeInfo(
    SectionType.TESTIMONIALS,
    "Testimonials",
    "Customer testimonials with ratings and photos",
  ),
  SectionType.LEAD_MAGNET: SectionTypeInfo(
    SectionType.LEAD_MAGNET,
    "Lead Magnet",
    "Lead capture form with downloadable content",
  ),
  SectionType.PROJECT_SHOWCASE: SectionTypeInfo(
    SectionType.PROJECT_SHOWCASE,
    "Project Showcase",
    "Real estate project showcase with tabs and details",
  ),
  SectionType.CUSTOM: SectionTypeInfo(
    SectionType.CUSTOM,
    "Custom HTML",
    "Custom HTML and CSS content",
  ),
}


ITEM_SCHEMAS: dict[str, ItemSchema] = {
  "features": ItemSchema(
    "features",
    "Feature",
    {"title": "", "description": "", "icon": "star"},
  ),
  "faqItems": ItemSchema("faqItems", "FAQ", {"question": "", "answer": ""}),
  "testimonials": ItemSchema(
    "testimonials",
    "Testimonial",
    {"name": "", "role": "", "content": "", "rating": 5, "avatar": ""},
  ),
}

RECORD_SCHEMAS: dict[str, RecordSchema] = {
  "projectDetails": RecordSchema(
    "projectDetails",
    "Project Details",
    ("totalUnits", "landArea", "unitTypes", "startingPrice"),
  ),
  "contactInfo": RecordSchema(
    "contactInfo", "Contact Information", ("phone", "whatsapp")
  ),
}


def _form_config(success_message: str) -> dict[str, Any]:
  return {
    "fields": [],
    "submitText": "Send Message",
    "successMessage": success_message,
    "redirectUrl": "",
  }


# Type-specific attributes layered over the common section defaults
TYPE_DEFAULTS: dict[SectionType, dict[str, Any]] = {
  SectionType.HERO: {"ctaText": "", "ctaLink": ""},
  SectionType.FEATURES: {"features": []},
  SectionType.PROPERTIES: {"properties": []},
  SectionType.TESTIMONIALS: {"testimonials": []},
  SectionType.CONTACT: {
    "formConfig": _form_config(
      "Thank you for your interest! We will contact you soon."
    ),
  },
  SectionType.LEAD_MAGNET: {"leadMagnet": None},
  SectionType.CUSTOM: {"customHtml": "", "customCss": ""},
  SectionType.TEXT: {},
  SectionType.IMAGE: {"imageUrl": "", "altText": ""},
  SectionType.VIDEO: {"videoUrl": "", "thumbnailUrl": ""},
  SectionType.CTA: {"ctaText": "", "ctaLink": ""},
  SectionType.PRICING: {"plans": []},
  SectionType.FAQ: {"faqItems": []},
  SectionType.TEAM: {"team": []},
  SectionType.STATS: {"stats": []},
  SectionType.GALLERY: {"images": []},
  SectionType.FORM: {
    "formConfig": _form_config("Thank you! Your message has been sent successfully."),
  },
  SectionType.PROJECT_SHOWCASE: {
    "developer": "",
    "projectDetails": {},
    "contactInfo": {},
  },
}

check_exhaustive(SECTION_LIBRARY, "SECTION_LIBRARY")
check_exhaustive(TYPE_DEFAULTS, "TYPE_DEFAULTS")


def common_defaults() -> dict[str, Any]:
  """Attributes every new section starts with, whatever its type."""
  return {
    "title": "",
    "subtitle": "",
    "content": "",
    "backgroundColor": "transparent",
    "textColor": "#1E293B",
    "padding": "2rem 0",
    "margin": "0",
    "isVisible": True,
    "styling": {},
    "layout": {"columns": 3, "alignment": "center", "spacing": "normal"},
  }


def default_attributes(section_type: str) -> dict[str, Any]:
  """Default attributes for a new section of ``section_type``.

  Unknown types get only the common defaults; the raw type string is kept so
  the section round-trips and the editor falls back to its generic ruleset.
  """
  attrs = common_defaults()
  known = SectionType.parse(section_type)
  if known is not None:
    attrs.update(copy.deepcopy(TYPE_DEFAULTS[known]))
  attrs["type"] = section_type
  return attrs


def library() -> list[SectionTypeInfo]:
  """Section types offered by the "Add Section" library."""
  return [info for info in SECTION_LIBRARY.values() if info.addable]


def schemas_as_dicts() -> dict[str, Any]:
  """Item and record shapes for the UI shell's collection and record inputs."""
  return {
    "items": {
      name: {"label": s.label, "defaults": s.defaults}
      for name, s in ITEM_SCHEMAS.items()
    },
    "records": {
      name: {"label": s.label, "keys": list(s.keys)}
      for name, s in RECORD_SCHEMAS.items()
    },
  }
