# services/roster-api/app/api/v1/sheets.py
from __future__ import annotations
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.config import TOP_K
from app.serve.ranker import InvalidMode, rank, resolve_fields, to_mode
from app.serve.sheet_loader import SheetLoader

logger = logging.getLogger(__name__)

router = APIRouter()

_loader = None
def get_sheet_loader() -> SheetLoader:
    global _loader
    if _loader is None:
        _loader = SheetLoader()
    return _loader


# ---------- Models ----------
class SheetDataResponse(BaseModel):
    success: bool = True
    rows: List[Dict[str, str]]


class TopCharactersResponse(BaseModel):
    success: bool = True
    rows: List[Dict[str, str]]
    type: str
    sortFieldPrimary: str
    sortFieldSecondary: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None


# ---------- Helpers ----------

def _server_error(err: Exception) -> JSONResponse:
    logger.exception("API error: %s", err)
    body = ErrorResponse(message="server error", error=str(err))
    return JSONResponse(status_code=500, content=body.model_dump())


# ---------- Routes ----------

@router.get("/sheet-data", response_model=SheetDataResponse, responses={500: {"model": ErrorResponse}})
async def sheet_data(loader: SheetLoader = Depends(get_sheet_loader)):
    """Every row of the sheet, unranked."""
    try:
        rows = await loader.fetch_rows()
    except Exception as e:
        return _server_error(e)
    return SheetDataResponse(rows=rows)


@router.get(
    "/top-characters",
    response_model=TopCharactersResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def top_characters(
    type: Optional[str] = Query(default=None, description="magic | physical | value"),
    loader: SheetLoader = Depends(get_sheet_loader),
):
    """
    Top characters for one ranking mode:
      magic    : magic attack, then value
      physical : physical attack, then value
      value    : value, then magic attack
    all high -> low.
    """
    try:
        mode = to_mode(type)
    except InvalidMode:
        body = ErrorResponse(
            message="invalid query parameter: type must be 'magic', 'physical' or 'value'"
        )
        return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))

    primary_key, secondary_key = resolve_fields(mode)
    try:
        rows = await loader.fetch_rows()
        top = rank(rows, mode, k=TOP_K)
    except Exception as e:
        return _server_error(e)

    logger.info("top-characters type=%s: %d of %d rows", mode.value, len(top), len(rows))
    return TopCharactersResponse(
        rows=top,
        type=mode.value,
        sortFieldPrimary=primary_key,
        sortFieldSecondary=secondary_key,
    )
