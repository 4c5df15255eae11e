"""
Template Renderer Module

Evaluates a template body against a render context using Jinja2.

Undefined variables are errors (StrictUndefined): the body only sees the
values the caller put into the context plus the molecule helpers.
"""

import logging
from typing import Any, Mapping
from jinja2 import Environment, StrictUndefined, TemplateError, TemplateSyntaxError, UndefinedError
from gedent.core.errors import GedentError, RenderError
from gedent.core.builders.molecule_builder import TEMPLATE_HELPERS


def create_environment() -> Environment:
    """Returns the Jinja2 environment used for every render."""
    env = Environment(
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.globals.update(TEMPLATE_HELPERS)
    return env


_environment = create_environment()


def render(body: str, context: Mapping[str, Any], name: str = "<template>") -> str:
    """
    Render a template body.

    Args:
        body: Header-stripped template text
        context: Values available to the body
        name: Template name, used in error messages

    Returns:
        Rendered text

    Raises:
        RenderError: on syntax errors, undefined variables or failing helpers.
            The underlying exception is chained as __cause__.
    """
    try:
        template = _environment.from_string(body)
    except TemplateSyntaxError as e:
        raise RenderError(f"Syntax error in template '{name}' at line {e.lineno}: {e.message}") from e

    try:
        result = template.render(dict(context))
    except UndefinedError as e:
        raise RenderError(f"Undefined variable in template '{name}': {e.message}") from e
    except TemplateError as e:
        raise RenderError(f"Error rendering template '{name}': {e}") from e
    except GedentError as e:
        raise RenderError(f"Helper function failed in template '{name}': {e}") from e
    except TypeError as e:
        raise RenderError(f"Invalid call in template '{name}': {e}") from e
    except Exception as e:
        raise RenderError(f"Error rendering template '{name}': {e}") from e

    logging.debug(f"Rendered template '{name}' ({len(result)} characters)")
    return result
