from typing import List

from pydantic import BaseModel


class PageMetadata(BaseModel):
    """Metadata reported back to the caller for an imported page."""

    title: str
    description: str
    url: str


class ExtractedAssets(BaseModel):
    images: List[str]  # absolute URLs, source order, referenced by index
    stylesheets: List[str]
    inline_styles: int = 0
