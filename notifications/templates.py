"""Markdown email templates.

A template file starts with a metadata header followed by a markdown body::

    ---
    subject: New response to {{ form_name }}
    ---
    Hello, **{{ form_name }}** received a new response.

Header values and the body use Django template syntax. Header values render
as plain text; the body renders with HTML autoescaping and is then converted
from markdown to HTML.
"""

import re
from dataclasses import dataclass

import markdown
from django.template import Context, Engine, Template

MARKDOWN_EXTENSIONS = ["extra", "sane_lists"]

# Backslash escapes understood by markdown with the tables extension. "<", ">"
# and "&" are left to HTML autoescaping.
MARKDOWN_SPECIAL_CHARS = re.compile(r"([\\`*_{}\[\]()#+\-.!|])")

_engine = Engine()


@dataclass(frozen=True)
class CompiledTemplate:
    attributes: dict[str, Template]
    body: Template


@dataclass(frozen=True)
class RenderedTemplate:
    attributes: dict[str, str]
    html: str


def split_metadata(source):
    """Split ``source`` into a ``{key: value}`` header and the remaining body."""
    md = markdown.Markdown(extensions=["meta"])
    lines = md.preprocessors["meta"].run(source.splitlines())
    attributes = {key: " ".join(values).strip() for key, values in md.Meta.items()}
    return attributes, "\n".join(lines).strip()


def compile_template(source):
    attributes, body = split_metadata(source)
    return CompiledTemplate(
        attributes={key: _engine.from_string(value) for key, value in attributes.items()},
        body=_engine.from_string(body),
    )


def render_template(tpl, variables):
    """Render a compiled template with ``variables``."""
    variables = variables or {}
    attributes = {
        key: template.render(Context(variables, autoescape=False)).strip()
        for key, template in tpl.attributes.items()
    }
    body = tpl.body.render(Context(variables, autoescape=True))
    return RenderedTemplate(
        attributes=attributes,
        html=markdown.markdown(body, extensions=MARKDOWN_EXTENSIONS),
    )


def escape_markdown(value):
    """Make ``value`` render as literal text on a single markdown line."""
    text = " ".join(str(value).split())
    return MARKDOWN_SPECIAL_CHARS.sub(r"\\\1", text)
