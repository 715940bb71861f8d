from fastapi import APIRouter, Depends, Request
from typing import Any, Dict

from schemas.location import SearchParams, SearchResponse
from app.services.search import SearchService
from app.core.dependencies import get_search_service
from app.core.controlled_vocabulary import terminology
from app.core.reference_data import service_terms


router = APIRouter(prefix="/search", tags=["search"])


def get_search_params(request: Request) -> SearchParams:
    """
    Build SearchParams from every query parameter, so Ohana filters this
    app doesn't know about are passed through. Repeated pass-through keys
    are kept as lists; a repeated named field keeps its last value.
    """
    query: Dict[str, Any] = {}
    for key, value in request.query_params.multi_items():
        if key in query and key not in SearchParams.model_fields:
            prev = query[key]
            query[key] = (prev if isinstance(prev, list) else [prev]) + [value]
        else:
            query[key] = value
    return SearchParams(**query)


# ============================================================
# KEYWORD / LOCATION SEARCH
# ============================================================

@router.get("", response_model=SearchResponse)
def search(
    params: SearchParams = Depends(get_search_params),
    service: SearchService = Depends(get_search_service),
):
    """
    Search Ohana locations.

    When a keyword search comes back empty, the keyword is checked
    against the remap table and, if mapped, searched again.
    """
    locations = service.search(params)
    keyword = params.keyword
    remapped_from = None

    if not locations and keyword:
        remap = service.keyword_mapping(params)
        if remap.remapped:
            locations = remap.locations
            keyword = remap.keyword
            remapped_from = remap.original_keyword

    return SearchResponse(
        locations=locations,
        count=len(locations),
        keyword=keyword,
        remapped_from=remapped_from,
        terminology=terminology(params.keyword),
        service_terms=[] if locations else service_terms(),
    )
