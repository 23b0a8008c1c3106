"""HTML preview of a page document."""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError

from .catalog import SectionType, check_exhaustive
from .document import get_content, get_hero, sections_for_render

SECTION_TEMPLATES: dict[SectionType, str] = {
  SectionType.HERO: "sections/hero.html",
  SectionType.FEATURES: "sections/features.html",
  SectionType.PROPERTIES: "sections/generic.html",
  SectionType.TESTIMONIALS: "sections/testimonials.html",
  SectionType.CONTACT: "sections/form.html",
  SectionType.LEAD_MAGNET: "sections/generic.html",
  SectionType.CUSTOM: "sections/custom.html",
  SectionType.TEXT: "sections/text.html",
  SectionType.IMAGE: "sections/image.html",
  SectionType.VIDEO: "sections/video.html",
  SectionType.CTA: "sections/cta.html",
  SectionType.PRICING: "sections/generic.html",
  SectionType.FAQ: "sections/faq.html",
  SectionType.TEAM: "sections/generic.html",
  SectionType.STATS: "sections/generic.html",
  SectionType.GALLERY: "sections/gallery.html",
  SectionType.FORM: "sections/form.html",
  SectionType.PROJECT_SHOWCASE: "sections/project_showcase.html",
}

check_exhaustive(SECTION_TEMPLATES, "SECTION_TEMPLATES")

UNKNOWN_TEMPLATE = "sections/unknown.html"


def template_for(section_type: str) -> str:
  known = SectionType.parse(section_type)
  return SECTION_TEMPLATES[known] if known is not None else UNKNOWN_TEMPLATE


class PageRenderer:
  """Render page documents to standalone HTML for preview."""

  def __init__(self, templates_dir: Path | None = None) -> None:
    self.templates_dir = templates_dir or Path(__file__).parent / "templates"
    self.jinja_env = Environment(
      loader=FileSystemLoader(str(self.templates_dir)),
      autoescape=True,
    )

  def render_section(self, section: dict[str, Any]) -> str:
    """Render one section; a broken template yields an inline error block."""
    section_type = section.get("type", "")
    try:
      template = self.jinja_env.get_template(template_for(section_type))
      return template.render(section=section, layout=section.get("layout") or {})
    except TemplateError as e:
      return f'<div class="section-error">Section {section_type} error: {e}</div>'

  def render_page(self, doc: dict[str, Any]) -> str:
    """Render the hero, visible sections in order, and the footer."""
    content = get_content(doc)
    rendered = [self.render_section(s) for s in sections_for_render(doc)]
    hero = self.render_section(get_hero(doc)) if content.get("hero") else ""

    page_template = self.jinja_env.get_template("page.html")
    return page_template.render(
      page=doc,
      styling=doc.get("styling") or {},
      seo=doc.get("seo") or {},
      hero=hero,
      sections=rendered,
      footer=content.get("footer") or {},
    )
