"""
Brand-name substitution over the text content of an HTML document.

Only text nodes are rewritten. Attribute values (hrefs, srcs, alt text) keep
pointing at the original site, and script/style bodies are left as they are.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString

from faleproxy.core.errors import ParseError

LOG = logging.getLogger("faleproxy.rewrite")

# Most specific casing first; mixed casings such as "YaLe" are left alone
REPLACEMENTS: Dict[str, str] = {
    "YALE": "FALE",
    "Yale": "Fale",
    "yale": "fale",
}

_BRAND_RE = re.compile("|".join(re.escape(k) for k in REPLACEMENTS))

# Text inside these tags is code, not page copy
_SKIP_PARENTS = frozenset({"script", "style", "template"})


@dataclass(frozen=True)
class RewrittenPage:
    content: str
    title: str


def replace_brand(text: str) -> str:
    """
    Replace every literal "YALE", "Yale" and "yale" in text.

    Matching is by substring, so "Yales" becomes "Fales" and "Yale's"
    becomes "Fale's". A single pass means a replacement is never revisited.
    """
    if not text:
        return text
    return _BRAND_RE.sub(lambda m: REPLACEMENTS[m.group(0)], text)


def parse_document(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        raise ParseError(f"Could not parse HTML: {e}") from e


def _is_text_node(node) -> bool:
    if not isinstance(node, NavigableString) or isinstance(node, PreformattedString):
        return False
    parent = node.parent
    return parent is None or parent.name not in _SKIP_PARENTS


def substitute_text_nodes(soup: BeautifulSoup) -> int:
    """Rewrite the soup's text nodes in place. Returns how many changed."""
    # Collect first; replacing while iterating descendants breaks the walk
    text_nodes = [node for node in soup.descendants if _is_text_node(node)]

    changed = 0
    for node in text_nodes:
        original = str(node)
        rewritten = replace_brand(original)
        if rewritten != original:
            node.replace_with(rewritten)
            changed += 1
    return changed


def extract_title(soup: BeautifulSoup) -> str:
    if soup.title is None:
        return ""
    return soup.title.get_text(strip=True)


def rewrite_html(html: str) -> RewrittenPage:
    """
    Substitute the brand name in every text node of html.

    The <title> is rewritten like any other text and returned separately.
    Markup that the parser rejects is passed through unchanged with an
    empty title.
    """
    try:
        soup = parse_document(html)
    except ParseError as e:
        LOG.warning("rewrite.unparseable", extra={"extra": {"error": str(e), "html_length": len(html)}})
        return RewrittenPage(content=html, title="")

    changed = substitute_text_nodes(soup)
    LOG.info("rewrite.done", extra={"extra": {"text_nodes_changed": changed}})

    return RewrittenPage(content=str(soup), title=extract_title(soup))
