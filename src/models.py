from pydantic import BaseModel, Field


class ShortLink(BaseModel):
    id: str
    target_url: str = Field(min_length=1)
    visit_count: int = Field(default=0, ge=0)


class Summary(BaseModel):
    num_urls_known: int


class ErrorResponse(BaseModel):
    error: str
    detail: str
