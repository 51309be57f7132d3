from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional

class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire (the mobile client's convention)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    detail: Optional[str] = None
    error_code: Optional[str] = None

class DatabaseError(ErrorResponse):
    error_code: str = "DATABASE_ERROR"

class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
