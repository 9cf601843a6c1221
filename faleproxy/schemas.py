from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

class FetchRequest(BaseModel):
    # Left loose so a missing/null/non-string url reaches the handler's own check
    url: Optional[Any] = Field(None, description="Absolute URL of the page to relay")

class FetchResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool = True
    content: str = Field(description="Rewritten HTML of the upstream page")
    title: str = Field(default="", description="Rewritten <title> text, empty if absent")
    original_url: str = Field(alias="originalUrl", description="URL exactly as submitted")

class ErrorResponse(BaseModel):
    error: str
