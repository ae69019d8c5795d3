"""Mood entry CRUD routes wrapping mood/storage.py (per-user)."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response, status

from mood.storage import EntryValidationError, MoodStore
from web.auth import get_current_user
from web.deps import get_store
from web.models import MoodEntryCreate, MoodEntryOut

logger = structlog.get_logger()

router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.get("", response_model=list[MoodEntryOut])
async def list_entries(
    limit: int = 5,
    user: dict = Depends(get_current_user),
    store: MoodStore = Depends(get_store),
):
    """Most recent entries, newest first."""
    limit = max(1, min(limit, 500))
    return [MoodEntryOut.from_entry(e) for e in store.recent_entries(user["id"], limit=limit)]


@router.post("", response_model=MoodEntryOut, status_code=status.HTTP_201_CREATED)
async def create_entry(
    body: MoodEntryCreate,
    user: dict = Depends(get_current_user),
    store: MoodStore = Depends(get_store),
):
    try:
        entry = store.add_entry(
            user["id"],
            body.mood,
            energy_level=body.energy_level,
            notes=body.notes,
            created_at=body.created_at,
            mood_emoji=body.mood_emoji,
        )
    except EntryValidationError as e:
        logger.warning("entries.rejected", user_id=user["id"], error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    return MoodEntryOut.from_entry(entry)


@router.get("/{entry_id}", response_model=MoodEntryOut)
async def get_entry(
    entry_id: str,
    user: dict = Depends(get_current_user),
    store: MoodStore = Depends(get_store),
):
    entry = store.get_entry(user["id"], entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Entry not found")
    return MoodEntryOut.from_entry(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: str,
    user: dict = Depends(get_current_user),
    store: MoodStore = Depends(get_store),
):
    if not store.delete_entry(user["id"], entry_id):
        raise HTTPException(status_code=404, detail="Entry not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
