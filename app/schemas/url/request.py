from pydantic import BaseModel, ConfigDict
from typing import Optional

# Request DTOs
class ShortenRequest(BaseModel):
    url: str
    custom_code: Optional[str] = None

    # unknown fields and non-string values are malformed input
    model_config = ConfigDict(extra="forbid", strict=True)
