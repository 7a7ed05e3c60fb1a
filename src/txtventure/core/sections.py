"""Section parsing: header id extraction and link rewriting"""

import re
from typing import Callable, Optional

from txtventure.core.models import Section
from txtventure.core.utils.slug import slugify


HEADER_RE = re.compile(r'^#{2,}[ \t]*(.*)', re.MULTILINE)
LINK_RE = re.compile(r'<#([^>]+)>')

Resolver = Callable[[str], str]


def extract_header(text: str) -> tuple[str, str]:
    """Return (id, body) using the first level-2-or-deeper header; ("", text) if none.

    Only the header's text is removed; its line break stays and is trimmed later.
    """
    m = HEADER_RE.search(text)
    if not m:
        return '', text
    return slugify(m.group(1)), text[:m.start()] + text[m.end():]


def rewrite_links(text: str, url_for: Resolver) -> str:
    """Replace each <#label> token with the URL of the section it names."""
    return LINK_RE.sub(lambda m: url_for(slugify(m.group(1))), text)


def parse_section(
    text: str,
    url_for: Resolver,
    filename_for: Resolver,
    art: Optional[Callable[[str], Optional[str]]] = None,
    ) -> Section:
    """Parse one raw block into a Section.

    `art` is looked up by id; when it returns text, that text and a blank line
    are prepended to the finished body. Art is taken verbatim, so leading
    whitespace in the drawing survives.
    """
    section_id, body = extract_header(text)
    body = rewrite_links(body, url_for).strip() + '\n'

    drawing = art(section_id) if art else None
    if drawing:
        body = f"{drawing}\n\n{body}"

    # Headerless blocks are never written, whatever resolver is supplied.
    destination = filename_for(section_id) if section_id else ''
    return Section(id=section_id, destination_path=destination, body=body)
