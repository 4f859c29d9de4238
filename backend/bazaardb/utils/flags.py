from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, status

ACTIVE_FLAGS = ("Y", "N")


def normalise_active_flag(value: Optional[str], *, default: str = "Y") -> str:
    """
    Return a 'Y'/'N' flag, falling back to `default` when the caller sent none.

    Anything other than 'Y' or 'N' is a 400, matching the rest of the API.
    """
    if value is None or value == "":
        return default
    if value not in ACTIVE_FLAGS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="is_active must be 'Y' or 'N'",
        )
    return value
