from pydantic import BaseModel

class ShortenResponse(BaseModel):
    short_url: str
    short_code: str

class StatsResponse(BaseModel):
    original_url: str
    short_code: str
    click_count: int
    created_at: int

    model_config = {"from_attributes": True}
