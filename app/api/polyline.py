from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter

from app.core.contracts import (
    DecodeMultiRequest,
    DecodeRequest,
    DecodeResponse,
    Point,
    TokenErrorInfo,
)
from app.core.errors import IncompleteTokenError, bad_request
from app.core.polyline import ORIGIN, decode_polyline
from app.core.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/polyline")


def _check_size(req: DecodeRequest) -> bytes:
    data = req.polyline.encode("utf-8")
    if len(data) > settings.polyline_max_bytes:
        bad_request(
            "polyline_too_long",
            f"polyline is {len(data)} bytes (max {settings.polyline_max_bytes})",
        )
    return data


def _token_error(e: IncompleteTokenError) -> TokenErrorInfo:
    return TokenErrorInfo(message=str(e), length=e.length, token_hex=e.hex)


def _decode_into(
    req: DecodeRequest,
    data: bytes,
    points: List[Point],
    precision: float,
) -> Optional[TokenErrorInfo]:
    try:
        decode_polyline(req.start or ORIGIN, data, points, req.precision or precision)
    except IncompleteTokenError as e:
        logger.warning("polyline_decode_incomplete points=%d err=%s", len(points), e)
        return _token_error(e)
    return None


@router.post("/decode", response_model=DecodeResponse)
def polyline_decode(req: DecodeRequest) -> DecodeResponse:
    data = _check_size(req)
    precision = req.precision or settings.polyline_precision

    points: List[Point] = []
    err = _decode_into(req, data, points, precision)

    logger.info("polyline_decode bytes=%d points=%d complete=%s", len(data), len(points), err is None)
    return DecodeResponse(points=points, complete=err is None, precision=precision, error=err)


@router.post("/decode/multi", response_model=DecodeResponse)
def polyline_decode_multi(req: DecodeMultiRequest) -> DecodeResponse:
    """
    Decode several polylines into one point sequence, in request order.
    Each polyline appends its own start point followed by its points.
    Stops at the first incomplete token; earlier points are kept.
    """
    if not req.polylines:
        bad_request("no_polylines", "polylines must contain at least one polyline")

    blobs = [_check_size(p) for p in req.polylines]
    precision = req.precision or settings.polyline_precision

    points: List[Point] = []
    err: Optional[TokenErrorInfo] = None
    for p, data in zip(req.polylines, blobs):
        err = _decode_into(p, data, points, precision)
        if err is not None:
            break

    logger.info(
        "polyline_decode_multi polylines=%d points=%d complete=%s",
        len(req.polylines),
        len(points),
        err is None,
    )
    return DecodeResponse(points=points, complete=err is None, precision=precision, error=err)
