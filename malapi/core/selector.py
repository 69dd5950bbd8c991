"""Field selector serialization.

The API only returns ``id`` and ``title`` (plus ``main_picture``) unless the
``fields`` query parameter asks for more. That parameter is a comma separated
list where an object field can carry its own nested selection in braces::

    alternative_titles,my_list_status{status,score}

Callers describe the selection as a nested mapping (a *field spec*)::

    {"alternative_titles": True, "my_list_status": {"status": True, "score": True}}

Architecture:
    ``serialize_fields`` walks the mapping depth first in insertion order.
    Falsy values drop the field, so ``False`` and ``None`` behave like a
    missing key. Mappings always select their key: a nested mapping whose
    own selection comes out empty is emitted as the bare key, which requests
    the field without sub-fields.

Design Decisions:
    - No escaping: keys containing ``{``, ``}`` or ``,`` are not supported
      by the API either
    - Cycle detection: a spec that contains itself raises FieldSpecError
      instead of recursing until the interpreter gives up
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Union

from .exceptions import FieldSpecError

FieldValue = Union[bool, "FieldSpec", None]
FieldSpec = Mapping[str, FieldValue]
# Accepted wherever a selection is expected: a spec or a flat list of names
FieldsArg = Union[FieldSpec, Iterable[str], None]


def serialize_fields(spec: FieldSpec) -> str:
    """Serialize a field spec into the API's selector syntax.

    Args:
        spec: Mapping of field name to ``True``, a nested spec, or a falsy value

    Returns:
        Selector string, empty when nothing is selected

    Raises:
        FieldSpecError: If a mapping appears inside itself

    Examples:
        >>> serialize_fields({"a": True, "b": {"c": True, "d": False}})
        'a,b{c}'
        >>> serialize_fields({"a": {"b": False}})
        'a'
    """
    return _serialize(spec, ())


def _serialize(spec: FieldSpec, path: tuple[int, ...]) -> str:
    marker = id(spec)
    if marker in path:
        raise FieldSpecError("Field spec contains itself")
    path = (*path, marker)

    parts: list[str] = []
    for key, value in spec.items():
        # An empty mapping still selects its key, unlike other falsy values.
        if isinstance(value, Mapping):
            inner = _serialize(value, path)
            parts.append(f"{key}{{{inner}}}" if inner else key)
        elif value:
            parts.append(key)
    return ",".join(parts)


def as_field_spec(fields: FieldSpec | Iterable[str]) -> FieldSpec:
    """Accept either a field spec or a flat iterable of field names."""
    if isinstance(fields, Mapping):
        return fields
    if isinstance(fields, str):
        return {fields: True}
    return {name: True for name in fields}


def fields_param(fields: FieldsArg) -> str | None:
    """Value for the ``fields`` query parameter, or None to leave it out."""
    if fields is None:
        return None
    return serialize_fields(as_field_spec(fields)) or None
