#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wechatmd/utils/html_sanitizer.py
"""HTML sanitization utilities for security.

Raw HTML embedded in Markdown is passed through one of these strategies
before it becomes part of the rendered output:

- pass-through: No sanitization (use only with trusted content)
- escape: HTML-escape all content
- drop: Remove HTML nodes entirely
- sanitize: Remove dangerous elements/attributes but preserve safe HTML
"""

from __future__ import annotations

import html
import logging
import re
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import Tag

from wechatmd.constants import (
    DANGEROUS_HTML_ATTRIBUTES,
    DANGEROUS_HTML_ELEMENTS,
    DANGEROUS_SCHEMES,
    URL_ATTRIBUTES,
    HtmlPassthroughMode,
)

logger = logging.getLogger(__name__)

# A single opening, closing or self-closing tag, as markdown-it emits for
# inline HTML
_SINGLE_TAG_RE = re.compile(r"^<(/?)([A-Za-z][A-Za-z0-9-]*)(\s[^>]*)?/?>$", re.DOTALL)

_CSS_URL_RE = re.compile(r"url\s*\(\s*[\"']?\s*([^)\"']+)")


def is_url_safe(url: str) -> bool:
    """Check if a URL is safe (no dangerous schemes).

    Parameters
    ----------
    url : str
        URL to validate

    Returns
    -------
    bool
        True if URL is safe, False if it uses a dangerous scheme

    Examples
    --------
    >>> is_url_safe("https://example.com")
    True

    >>> is_url_safe("javascript:alert('xss')")
    False

    >>> is_url_safe("/relative/path")
    True

    """
    if not url or not url.strip():
        return True

    # Browsers ignore embedded whitespace and control characters in schemes
    url_lower = re.sub(r"[\s\x00-\x1f]+", "", url).lower()
    return not any(url_lower.startswith(scheme) for scheme in DANGEROUS_SCHEMES)


def is_event_handler_attribute(attr_name: str) -> bool:
    """Check if attribute name is a JavaScript event handler (``onclick`` etc.)."""
    attr_name_lower = attr_name.lower()
    if not (attr_name_lower.startswith("on") and len(attr_name_lower) > 2):
        return False
    event_part = attr_name_lower[2:]
    return event_part.replace("_", "").isalpha() and "-" not in attr_name_lower


def _is_style_safe(style_value: str) -> bool:
    """Check a CSS declaration list for ``expression()`` and unsafe ``url()``."""
    style_lower = style_value.lower()
    if "expression(" in style_lower or "expression (" in style_lower:
        return False
    return all(is_url_safe(match.group(1).strip()) for match in _CSS_URL_RE.finditer(style_lower))


def _is_attribute_safe(attr_name: str, attr_value: Any) -> bool:
    attr_name_lower = attr_name.lower()

    if attr_name_lower in DANGEROUS_HTML_ATTRIBUTES:
        return False
    if is_event_handler_attribute(attr_name):
        return False
    if attr_name_lower in URL_ATTRIBUTES and isinstance(attr_value, str) and not is_url_safe(attr_value):
        return False
    if attr_name_lower == "style" and isinstance(attr_value, str) and not _is_style_safe(attr_value):
        return False
    return True


def _clean_attributes(tag: Tag) -> None:
    """Remove unsafe attributes from ``tag`` in place."""
    for attr_name in list(tag.attrs):
        if not _is_attribute_safe(attr_name, tag.attrs[attr_name]):
            del tag.attrs[attr_name]


def sanitize_html_string(content: str) -> str:
    """Sanitize an HTML string by removing dangerous elements and attributes.

    Parameters
    ----------
    content : str
        HTML content to sanitize

    Returns
    -------
    str
        Sanitized HTML

    """
    soup = BeautifulSoup(content, "html.parser")

    for element in DANGEROUS_HTML_ELEMENTS:
        for tag in soup.find_all(element):
            logger.debug(f"Removing dangerous <{element}> element from embedded HTML")
            tag.decompose()

    for element in soup.find_all(True):
        _clean_attributes(element)

    return str(soup)


def _sanitize_single_tag(content: str, closing: bool, name: str) -> str:
    """Sanitize a lone opening or closing tag without auto-closing it."""
    if name.lower() in DANGEROUS_HTML_ELEMENTS:
        return ""
    if closing:
        return f"</{name}>"

    tag = BeautifulSoup(content, "html.parser").find(True)
    if not isinstance(tag, Tag):
        return html.escape(content)
    _clean_attributes(tag)

    parts = [f"<{name}"]
    for attr_name, attr_value in tag.attrs.items():
        if isinstance(attr_value, list):
            attr_value = " ".join(attr_value)
        parts.append(f' {attr_name}="{html.escape(str(attr_value), quote=True)}"')
    parts.append(" />" if content.rstrip().endswith("/>") else ">")
    return "".join(parts)


def sanitize_html_fragment(content: str) -> str:
    """Sanitize raw HTML taken from a Markdown document.

    Inline HTML arrives from the parser one tag at a time (``<span>``,
    text, ``</span>``). Lone tags are cleaned without being balanced so the
    surrounding Markdown content stays inside them; anything else goes through
    :func:`sanitize_html_string`.

    Parameters
    ----------
    content : str
        HTML fragment

    Returns
    -------
    str
        Sanitized fragment

    """
    match = _SINGLE_TAG_RE.match(content.strip())
    if match:
        return _sanitize_single_tag(content.strip(), bool(match.group(1)), match.group(2))
    return sanitize_html_string(content)


def sanitize_html_content(content: str, mode: HtmlPassthroughMode = "sanitize") -> str:
    """Sanitize HTML content string according to the specified mode.

    Parameters
    ----------
    content : str
        HTML content to sanitize
    mode : {"pass-through", "escape", "drop", "sanitize"}, default "sanitize"
        Sanitization mode:
        - "pass-through": Return content unchanged (for trusted sources)
        - "escape": HTML-escape all content
        - "drop": Return empty string (remove all HTML)
        - "sanitize": Remove dangerous elements and attributes

    Returns
    -------
    str
        Sanitized HTML content

    Examples
    --------
    >>> sanitize_html_content("<script>alert('xss')</script>", mode="escape")
    '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;'

    >>> sanitize_html_content("<script>alert('xss')</script>", mode="drop")
    ''

    >>> sanitize_html_content("<p>Hello <strong>world</strong></p>", mode="sanitize")
    '<p>Hello <strong>world</strong></p>'

    """
    if mode == "pass-through":
        return content
    if mode == "escape":
        return html.escape(content)
    if mode == "drop":
        return ""
    if mode == "sanitize":
        return sanitize_html_fragment(content)

    raise ValueError(f"Unknown HTML passthrough mode: {mode!r}")
