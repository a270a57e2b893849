from __future__ import annotations

from typing import Any, List, Optional

from fastapi import HTTPException


class IncompleteTokenError(ValueError):
    """A polyline token ran out of bytes before its terminal byte."""

    def __init__(self, token: bytes):
        self.token = bytes(token)
        # Partially decoded output, set by decode_polyline.
        self.points: Optional[List[Any]] = None
        super().__init__(self.token)

    @property
    def length(self) -> int:
        return len(self.token)

    @property
    def hex(self) -> str:
        return self.token.hex()

    def __str__(self) -> str:
        text = self.token.decode("latin-1")
        return f"Incomplete token ({self.length} bytes): {text} (hex 0x{self.hex})"


def bad_request(code: str, message: str):
    raise HTTPException(status_code=400, detail={"code": code, "message": message})
