from fastapi import APIRouter, Depends, HTTPException

from schemas.location import Location
from app.services.search import SearchService
from app.core.dependencies import get_search_service

router = APIRouter(prefix="/locations", tags=["locations"])


# -------------------------------------------------------------------
# LOCATION BY ID
# -------------------------------------------------------------------
@router.get("/{location_id}", response_model=Location)
def get_location(
    location_id: str,
    service: SearchService = Depends(get_search_service),
):
    location = service.get(location_id)

    if location is None:
        raise HTTPException(status_code=404, detail="Location not found")

    return location
