"""Field registry and serializer."""

from lxcconfig.render.registry import FIELDS, FieldCategory, FieldSpec, get_field
from lxcconfig.render.serializer import format_value, is_unset, render

__all__ = [
    "FIELDS",
    "FieldCategory",
    "FieldSpec",
    "get_field",
    "format_value",
    "is_unset",
    "render",
]
