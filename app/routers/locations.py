from typing import Optional
from fastapi import APIRouter, Depends, HTTPException

from app.utils.auth_helper import get_current_user_required
from app.utils.location_service import GeocoderError, search_locations


router = APIRouter()


@router.get("/search")
def search(
    q: str = "",
    lat: Optional[float] = None,
    lon: Optional[float] = None,
    current_user=Depends(get_current_user_required),
):
    try:
        return search_locations(q, lat, lon)
    except GeocoderError as e:
        raise HTTPException(status_code=502, detail=str(e))
