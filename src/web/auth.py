"""Caller identification for FastAPI routes.

Authentication happens upstream; the gateway forwards the signed-in user as
an ``X-User-Id`` header.
"""

from typing import Annotated, Optional

from fastapi import Header, HTTPException, status


async def get_current_user(
    x_user_id: Annotated[Optional[str], Header()] = None,
) -> dict:
    """Resolve the calling user from the X-User-Id header."""
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )
    return {"id": user_id}
