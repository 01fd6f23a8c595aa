"""Read-only beat catalog routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from beatcrest.data.catalog import find_beat, list_beats
from beatcrest.schemas.beat import BeatDetailResponse, BeatListResponse

router = APIRouter(prefix="/api/beats", tags=["beats"])


@router.get("", response_model=BeatListResponse)
@router.get("/", response_model=BeatListResponse, include_in_schema=False)
async def get_beats() -> BeatListResponse:
    """List every beat in the catalog."""
    beats = list_beats()
    return BeatListResponse(beats=beats, total=len(beats))


@router.get("/{beat_id}", response_model=BeatDetailResponse)
async def get_beat(beat_id: int) -> BeatDetailResponse:
    """Fetch a single beat."""
    beat = find_beat(beat_id)
    if beat is None:
        raise HTTPException(status_code=404, detail={"error": "Beat not found"})
    return BeatDetailResponse(beat=beat)
