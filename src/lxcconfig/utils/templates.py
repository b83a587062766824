"""Template rendering utilities."""

import logging
from functools import lru_cache
from typing import Any
from jinja2 import Environment, Template, TemplateError


logger = logging.getLogger(__name__)

# Values go into lxc files verbatim, never into HTML.
_env = Environment(autoescape=False, keep_trailing_newline=True)


@lru_cache(maxsize=64)
def compile_template(template_str: str) -> Template:
    """Compile a template string, reusing earlier compilations."""
    return _env.from_string(template_str)


def render_template(template_str: str, **context: Any) -> str:
    """Render a Jinja2 template string with given context."""
    try:
        return compile_template(template_str).render(**context)

    except TemplateError as e:
        logger.error(f"Template rendering error: {e}")
        raise
