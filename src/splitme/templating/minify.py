"""Whitespace and comment minification for the page template.

Runs once at startup, never per request. Template statements
(``{% ... %}``) are treated like tags so the whitespace between them
and the surrounding markup is dropped as well.
"""

import re

_PRESERVED = re.compile(
    r"(<(pre|textarea|script)\b[^>]*>)(.*?)(</\2\s*>)",
    re.DOTALL | re.IGNORECASE,
)
_COMMENT = re.compile(r"<!--(?!\[if).*?-->", re.DOTALL)
_WHITESPACE = re.compile(r"\s+")
_BETWEEN_TAGS = re.compile(r">\s+<")
_AFTER_STATEMENT = re.compile(r"(%\})\s+(?=<|\{%)")
_BEFORE_STATEMENT = re.compile(r"(?<=>)\s+(\{%)")
_AROUND_PRESERVED = re.compile(r"(?<=>)\s+(?=\x00)|(?<=\x00)\s+(?=<|\x00)")
_PLACEHOLDER = re.compile(r"\x00(\d+)\x00")


def _minify_script(body: str) -> str:
    lines = (line.strip() for line in body.splitlines())
    return "\n".join(line for line in lines if line)


def minify_html(source: str) -> str:
    """Collapse whitespace and drop comments.

    ``<pre>`` and ``<textarea>`` contents are kept byte-for-byte; inline
    ``<script>`` bodies lose indentation and blank lines only. Conditional
    comments (``<!--[if IE]>``) survive.
    """
    preserved: list[str] = []

    def stash(m: re.Match[str]) -> str:
        open_tag, tag, body, close_tag = m.groups()
        if tag.lower() == "script":
            body = _minify_script(body)
        preserved.append(f"{_WHITESPACE.sub(' ', open_tag)}{body}{close_tag}")
        return f"\x00{len(preserved) - 1}\x00"

    html = _PRESERVED.sub(stash, source)
    html = _COMMENT.sub("", html)
    html = _WHITESPACE.sub(" ", html)
    html = _BETWEEN_TAGS.sub("><", html)
    html = _AROUND_PRESERVED.sub("", html)
    html = _AFTER_STATEMENT.sub(r"\1", html)
    html = _BEFORE_STATEMENT.sub(r"\1", html)
    html = html.strip()
    return _PLACEHOLDER.sub(lambda m: preserved[int(m.group(1))], html)
