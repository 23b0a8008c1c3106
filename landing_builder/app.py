"""Flask JSON API the builder UI shell talks to."""

import logging
from typing import Any

from flask import Flask, Response, current_app, jsonify, request

from . import document
from .catalog import SECTION_LIBRARY, schemas_as_dicts
from .config import BuilderConfig
from .editor import (
  DESIGN_ATTRIBUTES,
  LAYOUT_CHOICES,
  data_editor_ruleset,
  editor_tabs,
  ruleset_as_dict,
  ruleset_for,
)
from .errors import PageNotFoundError, PersistenceError
from .fields import field_types_as_dicts
from .renderer import PageRenderer
from .store import PageStore

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
  """Map builder errors to JSON error responses."""

  @app.errorhandler(PageNotFoundError)
  def handle_not_found(error: PageNotFoundError) -> Any:
    return jsonify({"error": "Landing page not found"}), 404

  @app.errorhandler(PersistenceError)
  def handle_persistence_error(error: PersistenceError) -> Any:
    # Store details stay in the log
    logger.error("Persistence failure: %s", error)
    return jsonify({"error": str(error)}), 500


def get_store() -> PageStore:
  return current_app.extensions["page_store"]


def get_renderer() -> PageRenderer:
  return current_app.extensions["page_renderer"]


def _json_body() -> dict[str, Any] | None:
  data = request.get_json(silent=True)
  return data if isinstance(data, dict) else None


def section_types() -> Any:
  """API: section library with each type's editor layout."""
  types = []
  for section_type, info in SECTION_LIBRARY.items():
    data_ruleset = data_editor_ruleset(section_type.value)
    types.append(
      {
        "type": section_type.value,
        "name": info.name,
        "description": info.description,
        "addable": info.addable,
        "tabs": editor_tabs(section_type.value),
        "ruleset": ruleset_as_dict(ruleset_for(section_type.value)),
        "dataEditor": ruleset_as_dict(data_ruleset) if data_ruleset else None,
      }
    )
  return jsonify(
    {
      "sectionTypes": types,
      "schemas": schemas_as_dicts(),
      "design": list(DESIGN_ATTRIBUTES),
      "layout": {name: list(choices) for name, choices in LAYOUT_CHOICES.items()},
    }
  )


def field_types() -> Any:
  """API: form field primitives for the form builder."""
  return jsonify({"fieldTypes": field_types_as_dicts()})


def new_landing_page() -> Any:
  """API: default document for a page that has not been saved yet."""
  return jsonify(document.new_page_document())


def get_landing_page(page_id: str) -> Any:
  """API: load a stored page document."""
  doc = get_store().load_page(page_id)
  if doc is None:
    raise PageNotFoundError(page_id)
  return jsonify(doc)


def create_landing_page() -> Any:
  """API: store a new page document under a fresh id."""
  data = _json_body()
  if data is None:
    return jsonify({"error": "No data provided"}), 400

  page_id, stored = get_store().save_page(None, data)
  return (
    jsonify(
      {
        "success": True,
        "message": "Landing page created successfully",
        "id": page_id,
        "page": stored,
      }
    ),
    201,
  )


def update_landing_page(page_id: str) -> Any:
  """API: overwrite an existing page document."""
  data = _json_body()
  if data is None:
    return jsonify({"error": "No data provided"}), 400

  store = get_store()
  existing = store.load_page(page_id)
  if existing is None:
    raise PageNotFoundError(page_id)
  if "createdAt" in existing:
    data = {**data, "createdAt": existing["createdAt"]}

  _, stored = store.save_page(page_id, data)
  return jsonify(
    {
      "success": True,
      "message": "Landing page updated successfully",
      "id": page_id,
      "page": stored,
    }
  )


def preview_landing_page() -> Any:
  """API: render an unsaved page document to HTML."""
  data = _json_body()
  if data is None:
    return jsonify({"error": "No data provided"}), 400
  return Response(get_renderer().render_page(data), mimetype="text/html")


def create_app(
  config: BuilderConfig | None = None,
  store: PageStore | None = None,
) -> Flask:
  """Build the Flask app; ``store`` is injectable for tests."""
  config = config or BuilderConfig.load()
  logging.getLogger(__package__).setLevel(config.log_level)

  app = Flask(__name__)
  app.extensions["page_store"] = store or PageStore.from_config(config)
  app.extensions["page_renderer"] = PageRenderer()

  app.add_url_rule("/builder/section-types", view_func=section_types)
  app.add_url_rule("/builder/field-types", view_func=field_types)
  app.add_url_rule("/builder/landing-pages/new", view_func=new_landing_page)
  app.add_url_rule(
    "/builder/landing-pages",
    view_func=create_landing_page,
    methods=["POST"],
  )
  app.add_url_rule("/builder/landing-pages/<page_id>", view_func=get_landing_page)
  app.add_url_rule(
    "/builder/landing-pages/<page_id>",
    endpoint="update_landing_page",
    view_func=update_landing_page,
    methods=["PUT"],
  )
  app.add_url_rule(
    "/builder/preview",
    view_func=preview_landing_page,
    methods=["POST"],
  )

  register_error_handlers(app)
  logger.info("Builder API ready (bucket=%s)", config.bucket)
  return app


if __name__ == "__main__":
  logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
  )
  create_app().run(debug=True, host="0.0.0.0", port=8000)
