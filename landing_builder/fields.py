"""Field primitive types available to the form sub-builder."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldTypeInfo:
  """A supported form field primitive."""

  value: str
  label: str
  icon: str
  has_options: bool = False


FIELD_TYPES: tuple[FieldTypeInfo, ...] = (
  FieldTypeInfo("text", "Text Input", "📝"),
  FieldTypeInfo("email", "Email", "📧"),
  FieldTypeInfo("tel", "Phone", "📞"),
  FieldTypeInfo("textarea", "Text Area", "📄"),
  FieldTypeInfo("select", "Dropdown", "📋", has_options=True),
  FieldTypeInfo("checkbox", "Checkbox", "☑️", has_options=True),
  FieldTypeInfo("radio", "Radio Button", "🔘", has_options=True),
  FieldTypeInfo("number", "Number", "🔢"),
  FieldTypeInfo("date", "Date", "📅"),
)

_BY_VALUE = {ft.value: ft for ft in FIELD_TYPES}

CHOICE_TYPES = frozenset(ft.value for ft in FIELD_TYPES if ft.has_options)

# Seed values for a newly added choice field
DEFAULT_OPTIONS = ("Option 1", "Option 2")


def get_field_type(value: str) -> FieldTypeInfo | None:
  """Look up a field type by its wire value."""
  return _BY_VALUE.get(value)


def field_label(value: str) -> str:
  """Human-readable label for a field type, ``Field`` when unknown."""
  info = _BY_VALUE.get(value)
  return info.label if info else "Field"


def has_options(value: str) -> bool:
  """Whether fields of this type carry an ``options`` list."""
  return value in CHOICE_TYPES


def field_types_as_dicts() -> list[dict[str, object]]:
  """Catalog rows in the JSON shape served to the UI shell."""
  return [
    {
      "value": ft.value,
      "label": ft.label,
      "icon": ft.icon,
      "hasOptions": ft.has_options,
    }
    for ft in FIELD_TYPES
  ]
