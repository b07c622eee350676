from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from maplist.core.config import settings
from maplist.core.rate_limit import Throttle
from maplist.parsers.map_list import parse_map_data
from maplist.schemas.parse import HealthResponse, ParseRequest
from maplist.schemas.places import ExtractedData, UIConfig
from maplist.services.ui_config import build_ui_config

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])

parse_throttle = Throttle(
    "parse",
    limit=settings.parse_rate_limit,
    window_seconds=settings.parse_rate_window_seconds,
    trust_forwarded_for=settings.trust_forwarded_for,
)


@router.post("/parse", response_model=ExtractedData, dependencies=[Depends(parse_throttle)])
async def parse(payload: ParseRequest) -> ExtractedData:
    return await parse_map_data(payload.text)


@router.post("/parse/raw", response_model=ExtractedData, dependencies=[Depends(parse_throttle)])
async def parse_raw(request: Request) -> ExtractedData:
    """Parse the scraper clipboard output posted as-is (text/plain)."""
    text = (await request.body()).decode("utf-8", errors="replace")
    if len(text) > settings.max_input_chars:
        logger.warning("Rejected raw input of %s chars", len(text))
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="Input text too large"
        )
    return await parse_map_data(text)


@router.get("/ui-config", response_model=UIConfig)
def ui_config() -> UIConfig:
    return build_ui_config()


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()
