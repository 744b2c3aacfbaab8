from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional, Dict

class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: Optional[str] = Field(default="")
    is_regenerate: bool = Field(default=False, alias="isRegenerate")

    @field_validator('category', mode='before')
    @classmethod
    def coerce_category(cls, v):
        # Blank/missing categories are rejected by the route with a 400, not a 422
        if v is None:
            return ""
        return str(v)

    @field_validator('is_regenerate', mode='before')
    @classmethod
    def coerce_regenerate(cls, v):
        if v is None or v == '':
            return False
        return v

class NameResult(BaseModel):
    rank: int
    name: str
    meaning: str
    trademark: Dict[str, bool] = Field(default_factory=dict, description="jurisdiction -> trademark exists")

class GenerateResponse(BaseModel):
    success: bool = True
    category: str
    results: List[NameResult] = Field(default=[])

class SuggestRequest(BaseModel):
    query: Optional[str] = Field(default="")

    @field_validator('query', mode='before')
    @classmethod
    def coerce_query(cls, v):
        if v is None:
            return ""
        return str(v)

class SuggestResponse(BaseModel):
    suggestions: List[str] = Field(default=[])

class ErrorResponse(BaseModel):
    error: str
