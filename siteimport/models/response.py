from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from siteimport.models.page import PageMetadata


class ImportWebsiteResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    message: str = "Website imported successfully"
    website_id: str
    metadata: PageMetadata


class ErrorResponse(BaseModel):
    error: str
