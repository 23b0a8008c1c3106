"""Form sub-builder: the ordered field list inside a section's ``formConfig``.

Every function takes a ``formConfig`` dict and returns a new one. Addresses
that do not resolve (unknown field id, option index out of range) leave the
config unchanged; these calls come straight from UI event handlers, so they
never raise.
"""

from typing import Any, Literal

from .fields import DEFAULT_OPTIONS, field_label, has_options
from .ids import new_field_token

Direction = Literal["up", "down"]

FORM_SETTINGS = ("submitText", "successMessage", "redirectUrl")


def _fields(config: dict[str, Any]) -> list[dict[str, Any]]:
  return list(config.get("fields") or [])


def _with_fields(
  config: dict[str, Any], fields: list[dict[str, Any]]
) -> dict[str, Any]:
  return {**config, "fields": fields}


def _find(fields: list[dict[str, Any]], field_id: str) -> int:
  for i, f in enumerate(fields):
    if f.get("id") == field_id:
      return i
  return -1


def new_field(field_type: str) -> dict[str, Any]:
  """Build a field definition for ``field_type`` with a fresh id and name."""
  token = new_field_token()
  return {
    "id": f"field_{token}",
    "name": f"field_{field_type}_{token}",
    "type": field_type,
    "label": f"New {field_label(field_type)}",
    "placeholder": "",
    "required": False,
    "options": list(DEFAULT_OPTIONS) if has_options(field_type) else [],
  }


def add_field(config: dict[str, Any], field_type: str) -> tuple[dict[str, Any], str]:
  """Append a new field. Returns the new config and the field's id."""
  field = new_field(field_type)
  return _with_fields(config, [*_fields(config), field]), field["id"]


def get_field(config: dict[str, Any], field_id: str) -> dict[str, Any] | None:
  """Return the field with ``field_id``, if any."""
  fields = _fields(config)
  index = _find(fields, field_id)
  return fields[index] if index >= 0 else None


def update_field(
  config: dict[str, Any], field_id: str, updates: dict[str, Any]
) -> dict[str, Any]:
  """Shallow-merge ``updates`` into the field. The field id is never changed."""
  fields = _fields(config)
  index = _find(fields, field_id)
  if index < 0:
    return config
  changes = {k: v for k, v in updates.items() if k != "id"}
  fields[index] = {**fields[index], **changes}
  return _with_fields(config, fields)


def delete_field(config: dict[str, Any], field_id: str) -> dict[str, Any]:
  """Remove the field with ``field_id``."""
  fields = _fields(config)
  if _find(fields, field_id) < 0:
    return config
  return _with_fields(config, [f for f in fields if f.get("id") != field_id])


def move_field(
  config: dict[str, Any], field_id: str, direction: Direction
) -> dict[str, Any]:
  """Swap the field with its neighbour. Array position is the field order."""
  fields = _fields(config)
  index = _find(fields, field_id)
  if index < 0:
    return config

  if direction == "up" and index > 0:
    fields[index], fields[index - 1] = fields[index - 1], fields[index]
  elif direction == "down" and index < len(fields) - 1:
    fields[index], fields[index + 1] = fields[index + 1], fields[index]
  else:
    return config

  return _with_fields(config, fields)


def add_option(config: dict[str, Any], field_id: str) -> dict[str, Any]:
  """Append ``"Option N"`` to the field's options."""
  field = get_field(config, field_id)
  if field is None:
    return config
  options = list(field.get("options") or [])
  options.append(f"Option {len(options) + 1}")
  return update_field(config, field_id, {"options": options})


def update_option(
  config: dict[str, Any], field_id: str, index: int, value: str
) -> dict[str, Any]:
  """Replace the option at ``index``."""
  field = get_field(config, field_id)
  if field is None:
    return config
  options = list(field.get("options") or [])
  if not 0 <= index < len(options):
    return config
  options[index] = value
  return update_field(config, field_id, {"options": options})


def remove_option(config: dict[str, Any], field_id: str, index: int) -> dict[str, Any]:
  """Drop the option at ``index``. An emptied list is left empty."""
  field = get_field(config, field_id)
  if field is None:
    return config
  options = list(field.get("options") or [])
  if not 0 <= index < len(options):
    return config
  del options[index]
  return update_field(config, field_id, {"options": options})


def update_form_settings(
  config: dict[str, Any], updates: dict[str, Any]
) -> dict[str, Any]:
  """Merge submit text, success message and redirect URL."""
  changes = {k: v for k, v in updates.items() if k in FORM_SETTINGS}
  return {**config, **changes}
