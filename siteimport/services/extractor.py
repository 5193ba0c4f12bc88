import logging
from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup, ParserRejectedMarkup

from siteimport.models.page import ExtractedAssets, PageMetadata
from siteimport.services.errors import ParseError

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Imported Website"


def _normalize_url(base_url: str, href: str) -> str:
    """Return an absolute URL, resolving *href* against *base_url*."""
    return href if href.startswith("http") else urljoin(base_url, href)


def parse_html(html: str) -> BeautifulSoup:
    """Parse *html* with lxml, raising :class:`ParseError` if the parser rejects it."""
    try:
        return BeautifulSoup(html, "lxml")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Failed to parse HTML: {exc}")


def _extract_title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    if title_tag:
        title = title_tag.get_text().strip()
        if title:
            return title
    return DEFAULT_TITLE


def _extract_description(soup: BeautifulSoup) -> str:
    meta = soup.find("meta", attrs={"name": "description"})
    if meta and meta.get("content"):
        return str(meta["content"])
    return ""


def extract_metadata(soup: BeautifulSoup, url: str) -> PageMetadata:
    return PageMetadata(
        title=_extract_title(soup),
        description=_extract_description(soup),
        url=url,
    )


def _extract_images(soup: BeautifulSoup, base_url: str) -> List[str]:
    images: List[str] = []
    for img in soup.find_all("img"):
        src = img.get("src")
        if not src or src.startswith("data:"):
            continue
        try:
            images.append(_normalize_url(base_url, src))
        except ValueError:
            logger.warning("Invalid image URL: %s", src)
    return images


def _extract_stylesheets(soup: BeautifulSoup, base_url: str) -> List[str]:
    stylesheets: List[str] = []
    for link in soup.find_all("link", rel="stylesheet"):
        href = link.get("href")
        if not href:
            continue
        try:
            stylesheets.append(_normalize_url(base_url, href))
        except ValueError:
            logger.warning("Invalid CSS URL: %s", href)
    return stylesheets


def extract_assets(soup: BeautifulSoup, base_url: str) -> ExtractedAssets:
    """Collect image and stylesheet URLs in source order.

    Images are referenced later by position only, so duplicates are kept.
    """
    return ExtractedAssets(
        images=_extract_images(soup, base_url),
        stylesheets=_extract_stylesheets(soup, base_url),
        inline_styles=sum(1 for style in soup.find_all("style") if style.get_text()),
    )
