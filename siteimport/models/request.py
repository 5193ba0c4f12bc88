from typing import Optional

from pydantic import BaseModel


class ImportWebsiteRequest(BaseModel):
    url: Optional[str] = None
    """Page to import. Validated by the URL guard rather than by pydantic so
    that rejections carry the guard's own reason and map to HTTP 400."""
