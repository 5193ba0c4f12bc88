"""Website import orchestration: guard, fetch, parse, build sections, persist."""

import logging
from typing import List, NamedTuple

from starlette.concurrency import run_in_threadpool
from supabase import Client

from siteimport.models.page import PageMetadata
from siteimport.models.section import Section
from siteimport.services.assembler import build_sections
from siteimport.services.extractor import extract_assets, extract_metadata, parse_html
from siteimport.services.fetcher import fetch_html
from siteimport.services.persistence import persist_import
from siteimport.services.reducer import reduce_to_markdown
from siteimport.services.url_guard import validate_url

logger = logging.getLogger(__name__)


class ImportResult(NamedTuple):
    website_id: str
    metadata: PageMetadata
    sections: List[Section]


async def import_website(url: str, user_id: str, client: Client) -> ImportResult:
    """Import the page at *url* as a new draft website owned by *user_id*.

    Raises:
        ValidationError: if *url* is malformed, not http(s), or private.
        FetchError: if the page cannot be retrieved.
        ParseError: if the HTML cannot be parsed.
        PersistenceError: if the website or homepage cannot be stored.
    """
    validate_url(url)
    logger.info("Scraping website", extra={"url": url, "user_id": user_id})

    html = await fetch_html(url)
    logger.info("HTML fetched", extra={"url": url, "length": len(html)})

    soup = parse_html(html)
    metadata = extract_metadata(soup, url)
    assets = extract_assets(soup, url)
    logger.info(
        "Extracted page assets",
        extra={
            "title": metadata.title,
            "images": len(assets.images),
            "stylesheets": len(assets.stylesheets),
            "inline_styles": assets.inline_styles,
        },
    )

    markdown = reduce_to_markdown(soup)
    sections = build_sections(markdown, assets.images, metadata.title, metadata.description)

    website_id = await run_in_threadpool(persist_import, client, user_id, metadata, sections)
    return ImportResult(website_id=website_id, metadata=metadata, sections=sections)
