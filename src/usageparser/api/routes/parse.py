"""Parse endpoints — single-line and bulk decoding of usage strings."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Union

from fastapi import APIRouter, Body, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from usageparser.core.config import AppSettings
from usageparser.models.usage_record import UsageRecord
from usageparser.parsing.batch import parse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])

SOME_LINES_FAILED = "SomeInputLinesHadErrors"
ALL_LINES_FAILED = "AllInputLinesHadErrors"


def classify_batch(records: Sequence[UsageRecord]) -> Optional[str]:
    """Overall outcome of a batch, or ``None`` when no line failed."""
    failures = sum(1 for record in records if record.failed)
    if failures == 0:
        return None
    if failures == len(records):
        return ALL_LINES_FAILED
    return SOME_LINES_FAILED


def _settings(request: Request) -> AppSettings:
    return request.app.state.settings


@router.get("/parse")
async def parse_single(
    request: Request,
    input: str = Query("", description="A single usage string, e.g. 7291,293451"),
) -> JSONResponse:
    """Parse one usage string. Responds 404 with the error record on failure."""
    settings = _settings(request)
    record = parse(input, log_failures=settings.log_failed_lines)[0]
    if record.failed:
        logger.info("Error. Code=404 Type=ParseFailure InputLine=%r", input)
        return JSONResponse(status_code=404, content=record.to_dict())
    return JSONResponse(status_code=200, content=record.to_dict())


@router.api_route("/bulk-parse", methods=["GET", "POST"])
async def parse_bulk(
    request: Request,
    lines: Union[list[Any], str] = Body(..., description="JSON array of usage strings"),
) -> JSONResponse:
    """Parse many usage strings. Responds 404 with all records if any line failed."""
    settings = _settings(request)
    if not isinstance(lines, str) and len(lines) > settings.api.max_bulk_lines:
        raise HTTPException(
            status_code=413,
            detail=f"Too many lines: {len(lines)} > {settings.api.max_bulk_lines}",
        )

    records = parse(lines, log_failures=settings.log_failed_lines)
    content = [record.to_dict() for record in records]
    outcome = classify_batch(records)
    if outcome is not None:
        failures = sum(1 for record in records if record.failed)
        logger.info("Error. Code=404 Type=%s Number of errors=%d", outcome, failures)
        return JSONResponse(status_code=404, content=content)
    return JSONResponse(status_code=200, content=content)
