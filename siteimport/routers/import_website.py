import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address
from supabase import Client

from siteimport.config import Config
from siteimport.models.request import ImportWebsiteRequest
from siteimport.models.response import ErrorResponse, ImportWebsiteResponse
from siteimport.services.auth import get_current_user_id
from siteimport.services.database import get_supabase_client
from siteimport.services.errors import FetchError, ParseError, PersistenceError, ValidationError
from siteimport.services.importer import import_website

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/import-website",
    response_model=ImportWebsiteResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Import an external website as a draft site",
    description=(
        "Fetches *url*, turns its readable content into up to five typed "
        "website-builder sections (navigation, hero, projects, skills, "
        "timeline, content) and stores them as the homepage of a new draft "
        "website owned by the caller.\n\n"
        "Requires a Supabase access token in the `Authorization: Bearer` header."
    ),
)
@limiter.limit(Config.IMPORT_RATE_LIMIT)
async def import_website_endpoint(
    request: Request,
    body: ImportWebsiteRequest,
    user_id: str = Depends(get_current_user_id),
    client: Client = Depends(get_supabase_client),
) -> ImportWebsiteResponse:
    if not body.url:
        raise HTTPException(status_code=400, detail="URL is required")

    url = body.url
    logger.info("Import request received", extra={"url": url, "user_id": user_id})

    try:
        result = await import_website(url, user_id, client)
    except ValidationError as exc:
        logger.warning("URL validation failed: %s – %s", url, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    except FetchError as exc:
        logger.error(
            "Error fetching website %s: %s",
            url,
            exc,
            extra={"status_code": exc.status_code, "aborted": exc.aborted},
        )
        raise HTTPException(status_code=500, detail=str(exc))
    except ParseError as exc:
        logger.error("Error parsing website %s: %s", url, exc)
        raise HTTPException(status_code=500, detail=str(exc))
    except PersistenceError as exc:
        logger.error("Database error importing %s: %s", url, exc)
        raise HTTPException(status_code=500, detail=str(exc))

    logger.info(
        "Website imported",
        extra={"website_id": result.website_id, "sections": len(result.sections)},
    )
    return ImportWebsiteResponse(website_id=result.website_id, metadata=result.metadata)
