"""Linearise a parsed page into a flat, heading-delimited text stream.

Only ``h1``–``h4``, ``p``, ``li`` and ``a`` elements are kept, in document
order. Nesting and inline formatting are dropped; ``h4`` shares the ``h3``
marker.
"""

from bs4 import BeautifulSoup

_SELECTOR = "h1, h2, h3, h4, p, li, a"

_HEADING_MARKERS = {
    "h1": "#",
    "h2": "##",
    "h3": "###",
    "h4": "###",
}

# Fragments shorter than this are treated as noise (icons, "Go", "»", …)
MIN_TEXT_LENGTH = 5


def reduce_to_markdown(soup: BeautifulSoup) -> str:
    body = soup.find("body")
    if body is None:
        return ""

    parts = []
    for el in body.select(_SELECTOR):
        text = el.get_text().strip()
        if len(text) < MIN_TEXT_LENGTH:
            continue

        marker = _HEADING_MARKERS.get(el.name)
        if marker:
            parts.append(f"{marker} {text}\n\n")
        else:
            parts.append(f"{text}\n\n")

    return "".join(parts)
