"""Kida-backed page template.

The page template is deliberately simple: it interpolates values and
guards optional sections with ``{% if %}`` / ``{% for %}``. Every name
it uses must be present in the data object. A missing name is a
configuration error, checked once at startup against the keys the
renderer provides.
"""

import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from kida import Environment
from kida.environment.exceptions import UndefinedError

from splitme.errors import ConfigurationError
from splitme.templating.minify import minify_html

TEMPLATES_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = TEMPLATES_DIR / "index.html"

_OUTPUT = re.compile(r"\{\{-?\s*([A-Za-z_]\w*)")
_CONDITION = re.compile(r"\{%-?\s*(?:if|elif)\s+(.+?)\s*-?%\}", re.DOTALL)
_LOOP = re.compile(r"\{%-?\s*for\s+([\w\s,]+?)\s+in\s+([A-Za-z_]\w*)")
_IDENTIFIER = re.compile(r"(?<![\w.'\"])([A-Za-z_]\w*)")
_KEYWORDS = frozenset({"and", "or", "not", "in", "is", "true", "false", "none", "True", "False", "None", "loop"})


def template_placeholders(source: str) -> frozenset[str]:
    """Top-level names *source* reads from its data object.

    Loop variables are excluded; only the head of a dotted lookup counts
    (``assets.js`` -> ``assets``).
    """
    names: set[str] = set(_OUTPUT.findall(source))
    for expression in _CONDITION.findall(source):
        names.update(_IDENTIFIER.findall(expression))

    loop_vars: set[str] = set()
    for targets, iterable in _LOOP.findall(source):
        loop_vars.update(name.strip() for name in targets.split(",") if name.strip())
        names.add(iterable)

    return frozenset(names - loop_vars - _KEYWORDS)


class PageTemplate:
    """A minified, compiled page template.

    Usage::

        page = PageTemplate.from_path("index.html")
        page.check(renderer.template_keys())   # at startup
        html = page.render(data)               # per request
    """

    __slots__ = ("_placeholders", "_source", "_template")

    def __init__(self, source: str, env: Environment | None = None) -> None:
        minified = minify_html(source)
        environment = env or Environment(autoescape=True)
        self._source = minified
        self._template = environment.from_string(minified)
        self._placeholders = template_placeholders(minified)

    @classmethod
    def from_path(cls, path: str | Path | None = None, env: Environment | None = None) -> "PageTemplate":
        """Read, minify and compile a template file."""
        target = Path(path) if path is not None else DEFAULT_TEMPLATE
        try:
            source = target.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot read page template {target}: {exc.strerror or exc}"
            raise ConfigurationError(msg) from exc
        return cls(source, env)

    @property
    def source(self) -> str:
        """The minified source."""
        return self._source

    @property
    def placeholders(self) -> frozenset[str]:
        return self._placeholders

    def check(self, keys: Iterable[str]) -> None:
        """Raise ``ConfigurationError`` if the template uses a name not in *keys*."""
        missing = self._placeholders - set(keys)
        if missing:
            names = ", ".join(sorted(missing))
            msg = f"Page template uses placeholder(s) with no data: {names}"
            raise ConfigurationError(msg)

    def render(self, data: Mapping[str, Any]) -> str:
        self.check(data.keys())
        try:
            return self._template.render(dict(data))
        except UndefinedError as exc:
            msg = f"Page template lookup failed: {exc}"
            raise ConfigurationError(msg) from exc


def interpolate(template: PageTemplate | str, data: Mapping[str, Any]) -> str:
    """Substitute *data* into *template*.

    Accepts a compiled ``PageTemplate`` or raw template source (minified
    and compiled on the spot).
    """
    page = template if isinstance(template, PageTemplate) else PageTemplate(template)
    return page.render(data)
