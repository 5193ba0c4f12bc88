"""Persist an imported site as a draft website plus its homepage.

Supabase exposes no multi-statement transaction to this service, so the two
inserts are paired with a compensating delete: if the homepage cannot be
written, the website row created just before it is removed again.
"""

import logging
from typing import List

import httpx
from postgrest.exceptions import APIError
from pydantic import TypeAdapter
from supabase import Client

from siteimport.models.page import PageMetadata
from siteimport.models.section import Section
from siteimport.services.errors import PersistenceError

logger = logging.getLogger(__name__)

WEBSITES_TABLE = "websites"
PAGES_TABLE = "pages"

_sections_adapter = TypeAdapter(List[Section])

# postgrest raises APIError for rejected statements and lets httpx errors
# through for transport failures
DATABASE_ERRORS = (APIError, httpx.HTTPError)


def _error_message(exc: Exception) -> str:
    return getattr(exc, "message", None) or str(exc) or type(exc).__name__


def _insert_website(client: Client, user_id: str, metadata: PageMetadata) -> str:
    try:
        result = (
            client.table(WEBSITES_TABLE)
            .insert(
                {
                    "user_id": user_id,
                    "name": metadata.title or "Imported Website",
                    "description": metadata.description or f"Imported from {metadata.url}",
                    "status": "draft",
                }
            )
            .execute()
        )
    except DATABASE_ERRORS as exc:
        message = _error_message(exc)
        logger.error("Error creating website: %s", message)
        raise PersistenceError(f"Failed to create website: {message}")

    if not result.data:
        raise PersistenceError("Failed to create website: no row returned")
    return str(result.data[0]["id"])


def _insert_homepage(client: Client, website_id: str, sections: List[Section]) -> None:
    client.table(PAGES_TABLE).insert(
        {
            "website_id": website_id,
            "title": "Home",
            "slug": "home",
            "is_homepage": True,
            "content": _sections_adapter.dump_python(sections, mode="json", by_alias=True),
        }
    ).execute()


def _delete_website(client: Client, website_id: str) -> None:
    try:
        client.table(WEBSITES_TABLE).delete().eq("id", website_id).execute()
    except DATABASE_ERRORS as exc:
        # The page error is what gets reported; this only leaves an orphaned draft.
        logger.error(
            "Could not remove website %s after page failure: %s", website_id, _error_message(exc)
        )
    else:
        logger.info("Removed website %s after page failure", website_id)


def persist_import(
    client: Client,
    user_id: str,
    metadata: PageMetadata,
    sections: List[Section],
) -> str:
    """Create the draft website and its homepage; return the website id.

    Raises:
        PersistenceError: if either insert fails. When the homepage insert
            fails, the website row has already been deleted again.
    """
    website_id = _insert_website(client, user_id, metadata)
    logger.info("Created website", extra={"website_id": website_id, "user_id": user_id})

    try:
        _insert_homepage(client, website_id, sections)
    except DATABASE_ERRORS as exc:
        message = _error_message(exc)
        logger.error("Error creating page for website %s: %s", website_id, message)
        _delete_website(client, website_id)
        raise PersistenceError(f"Failed to create page: {message}")

    logger.info("Created homepage", extra={"website_id": website_id})
    return website_id
