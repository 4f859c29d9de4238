from __future__ import annotations

from typing import Optional, TypeVar

from fastapi import HTTPException, status

T = TypeVar("T")


def require_header(value: Optional[T], name: str) -> T:
    """Identifiers for single-row routes travel in headers; 400 when absent."""
    if value is None or value == "":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{name} is required in headers",
        )
    return value
