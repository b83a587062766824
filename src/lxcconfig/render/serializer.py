"""Serializer producing lxc.container.conf text from an LxcConfig."""

import logging
from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple

from lxcconfig.models.config import IdMapEntry, LxcConfig
from lxcconfig.models.settings import RendererSettings
from lxcconfig.render.registry import FIELDS, FieldCategory, FieldSpec
from lxcconfig.utils.templates import render_template


logger = logging.getLogger(__name__)

LINE_TEMPLATE = "\n{{ key }}: {{ value }}"

_SEQUENCES = (FieldCategory.ID_MAP, FieldCategory.ADDRESS_LIST, FieldCategory.PATH_LIST)


def is_unset(spec: FieldSpec, value: Any) -> bool:
    """Check whether a value is the zero value of its field's type."""
    if spec.category is FieldCategory.INTEGER:
        return value == 0
    if spec.category is FieldCategory.STRING:
        return value == ""
    # Sequences and mappings
    return len(value) == 0


def format_value(spec: FieldSpec, value: Any) -> str:
    """Convert a single value to its canonical text form."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, IdMapEntry) and spec.element_format:
        return render_template(spec.element_format, **value.model_dump())
    return str(value)


def _lines(spec: FieldSpec, value: Any, settings: RendererSettings) -> Iterator[Tuple[str, str]]:
    """Yield (key, text) pairs for one populated field."""
    if spec.category is FieldCategory.MAPPING:
        entries = value.items()
        if settings.mapping_order == "sorted":
            entries = sorted(entries)
        for subkey, item in entries:
            yield f"{spec.key}.{subkey}", format_value(spec, item)

    elif spec.category in _SEQUENCES:
        if spec.category is not FieldCategory.ID_MAP and not settings.emit_sequences:
            logger.debug(f"Suppressing sequence field {spec.attr}")
            return
        for item in value:
            yield spec.key, format_value(spec, item)

    else:
        yield spec.key, format_value(spec, value)


def render(config: LxcConfig, settings: Optional[RendererSettings] = None) -> str:
    """Render a configuration, one newline-prefixed line per populated value.

    Fields are visited in registry order and unset fields are skipped.
    Values are written as-is with no quoting or validation.
    """
    settings = settings or RendererSettings()
    parts: List[str] = []

    for spec in FIELDS:
        value = getattr(config, spec.attr)
        if is_unset(spec, value):
            continue
        for key, text in _lines(spec, value, settings):
            parts.append(render_template(LINE_TEMPLATE, key=key, value=text))

    logger.debug(f"Rendered {len(parts)} configuration lines")
    return "".join(parts)
