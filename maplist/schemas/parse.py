from __future__ import annotations

from pydantic import BaseModel, Field

from maplist.core.config import settings


class ParseRequest(BaseModel):
    text: str = Field(default="", max_length=settings.max_input_chars)


class HealthResponse(BaseModel):
    status: str = "ok"
