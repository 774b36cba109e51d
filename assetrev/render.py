"""Template rendering.

Templates use Handlebars syntax by default, ``{{rev "css/app.css"}}``,
compiled with pybars.  Jinja2 templates, ``{{ rev("css/app.css") }}``, are
available through :attr:`TemplateEngine.JINJA2`.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Mapping

from jinja2 import Environment
from pybars import Compiler

from .config import TemplateEngine

logger = logging.getLogger(__name__)


def _finalize(value: Any) -> Any:
    # ``rev`` returns ``None`` for unknown paths; render it as nothing.
    return "" if value is None else value


def build_environment() -> Environment:
    return Environment(
        autoescape=False,
        keep_trailing_newline=True,
        finalize=_finalize,
    )


def _handlebars_helper(func: Callable[..., Any]) -> Callable[..., Any]:
    # pybars passes the current scope as the first argument.
    @functools.wraps(func)
    def helper(this, *args, **kwargs):
        return _finalize(func(*args, **kwargs))

    return helper


def _render_handlebars(template, context, helpers) -> str:
    compiled = Compiler().compile(template)
    wrapped = {name: _handlebars_helper(func) for name, func in helpers.items()}
    return str(compiled(context, helpers=wrapped))


def _render_jinja2(template, context, helpers) -> str:
    return build_environment().from_string(template).render({**context, **helpers})


def render_template(
    template: str,
    context: Mapping[str, Any],
    helpers: Mapping[str, Callable[..., Any]],
    engine: TemplateEngine = TemplateEngine.HANDLEBARS,
) -> str:
    """Render ``template`` against ``context`` with ``helpers`` callable from it.

    Context keys named like a helper are dropped so the helper always wins.
    Syntax errors are raised unmodified by the engine:
    :class:`pybars.PybarsError` or :class:`jinja2.TemplateSyntaxError`.
    """
    values = {}
    for key, value in context.items():
        if key in helpers:
            logger.warning("Ignoring context key %r, it is reserved for a template helper", key)
            continue
        values[key] = value

    if TemplateEngine(engine) is TemplateEngine.JINJA2:
        return _render_jinja2(template, values, helpers)
    return _render_handlebars(template, values, helpers)
