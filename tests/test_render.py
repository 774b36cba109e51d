import pytest
from jinja2 import TemplateSyntaxError
from pybars import PybarsError

from assetrev.config import TemplateEngine
from assetrev.render import render_template


def test_handlebars_helper_call():
    out = render_template('{{rev "a"}}', {}, {"rev": lambda p: p.upper()})
    assert out == "A"


def test_handlebars_none_renders_empty():
    out = render_template('[{{rev "missing"}}]', {}, {"rev": lambda p: None})
    assert out == "[]"


def test_handlebars_context_and_trailing_newline():
    out = render_template("<title>{{title}}</title>\n", {"title": "Home"}, {})
    assert out == "<title>Home</title>\n"


def test_handlebars_syntax_error_surfaces_unmodified():
    with pytest.raises(PybarsError):
        render_template("{{#if ok}}never closed", {}, {})


def test_jinja2_helper_call():
    out = render_template('{{ rev("a") }}', {}, {"rev": lambda p: p.upper()}, TemplateEngine.JINJA2)
    assert out == "A"


def test_jinja2_none_renders_empty():
    out = render_template('[{{ rev("missing") }}]', {}, {"rev": lambda p: None}, "jinja2")
    assert out == "[]"


def test_jinja2_context_and_trailing_newline():
    out = render_template(
        "<title>{{ title }}</title>\n", {"title": "Home & Away"}, {}, TemplateEngine.JINJA2
    )
    assert out == "<title>Home & Away</title>\n"


def test_jinja2_syntax_error_surfaces_unmodified():
    with pytest.raises(TemplateSyntaxError):
        render_template("{% if %}", {}, {}, TemplateEngine.JINJA2)


@pytest.mark.parametrize(
    "engine, template",
    [(TemplateEngine.HANDLEBARS, '{{rev "a.css"}}'), (TemplateEngine.JINJA2, "{{ rev('a.css') }}")],
)
def test_context_cannot_shadow_helper(engine, template):
    helpers = {"rev": lambda p: "a-1234.css" if p == "a.css" else None}
    out = render_template(template, {"rev": "v2"}, helpers, engine)
    assert out == "a-1234.css"
