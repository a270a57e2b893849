from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

from app.core.contracts import Point
from app.core.errors import IncompleteTokenError

logger = logging.getLogger(__name__)

PRECISION_5 = 1e5
PRECISION_6 = 1e6

ORIGIN = Point(lat=0.0, lng=0.0)

PolylineInput = Union[bytes, bytearray, memoryview, str]


def _as_bytes(line: PolylineInput) -> bytes:
    if isinstance(line, str):
        return line.encode("utf-8")
    return bytes(line)


def _decode_varint(line: bytes, pos: int = 0) -> Tuple[int, int]:
    """
    Decode one zig-zag varint token starting at `line[pos]`.
    Returns (consumed, value). Raises IncompleteTokenError with the bytes
    scanned if no terminal byte (0x20 bit clear after the -63 offset) is found.
    """
    result = 0
    shift = 0
    for i in range(pos, len(line)):
        b = line[i] - 63
        result |= (b & 0x1F) << shift
        shift += 5
        if not b & 0x20:
            d = ~(result >> 1) if (result & 1) else (result >> 1)
            return i + 1 - pos, d
    raise IncompleteTokenError(line[pos:])


def decode_one_token(line: PolylineInput, precision: float) -> Tuple[int, float]:
    """
    Decode a single token from the start of `line`.

    A token is a contiguous group of bytes where every byte except the last
    has the 0x20 bit set. Returns (pos, value): pos is the index just past
    the terminal byte, value is the decoded integer divided by `precision`.
    """
    consumed, d = _decode_varint(_as_bytes(line))
    return consumed, d / precision


def decode_polyline(
    start: Point,
    line: PolylineInput,
    points: Optional[List[Point]] = None,
    precision: float = PRECISION_5,
) -> List[Point]:
    """
    Decode a polyline relative to `start` and append the starting point and
    every decoded point to `points` (a new list when None). Returns the list.

    The encoded string stores per-point deltas; `points` receives absolute
    coordinates. On a truncated polyline IncompleteTokenError is raised and
    the points decoded so far stay in the list (also reachable as
    `err.points`).
    """
    if points is None:
        points = []

    data = _as_bytes(line)
    points.append(start)

    lat = start.lat
    lng = start.lng
    pos = 0
    n = len(data)
    try:
        while pos < n:
            consumed, dlat = _decode_varint(data, pos)
            pos += consumed
            lat += dlat / precision

            consumed, dlng = _decode_varint(data, pos)
            pos += consumed
            lng += dlng / precision

            points.append(Point(lat=lat, lng=lng))
    except IncompleteTokenError as e:
        e.points = points
        logger.debug("polyline_incomplete offset=%d token=%s", pos, e.hex)
        raise

    logger.debug("polyline_decoded bytes=%d points=%d", n, len(points))
    return points


def decode_polyline_from_origin(
    line: PolylineInput,
    points: Optional[List[Point]] = None,
    precision: float = PRECISION_5,
) -> List[Point]:
    return decode_polyline(ORIGIN, line, points, precision)
