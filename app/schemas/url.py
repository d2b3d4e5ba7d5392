from pydantic import BaseModel, ConfigDict, Field

# Request DTOs
class ShortenUrlRequest(BaseModel):
    # Opaque: echoed back verbatim, never validated as a URL
    url: str

# Response DTOs
class ShortenUrlResponse(BaseModel):
    # Python fields are snake_case, JSON keys are camelCase
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    short_url: str = Field(..., alias="shortUrl")
    short_code: str = Field(..., alias="shortCode")
    original_url: str = Field(..., alias="originalUrl")
