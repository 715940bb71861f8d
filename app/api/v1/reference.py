"""
Autocomplete and reference data endpoints.
Everything here is served from static tables; Ohana is not called.
"""

from fastapi import APIRouter, Query
from typing import List, Optional

from schemas.location import ServiceTerm, TerminologyResponse
from app.core import reference_data
from app.core.controlled_vocabulary import normalize_query, terminology

router = APIRouter(tags=["reference"])


# ============================================================
# AUTOCOMPLETE
# ============================================================

@router.get("/autocomplete/keywords", response_model=List[str])
async def autocomplete_keywords(
    q: Optional[str] = Query(None, max_length=100),
    limit: Optional[int] = Query(None, ge=1, le=1000),
):
    terms = reference_data.keywords()

    if q:
        needle = normalize_query(q)
        terms = [t for t in terms if needle in t]

    return terms[:limit] if limit else terms


@router.get("/autocomplete/locations", response_model=List[str])
async def autocomplete_locations(q: Optional[str] = Query(None, max_length=100)):
    cities = reference_data.locations()

    if q:
        needle = normalize_query(q)
        cities = [c for c in cities if needle in normalize_query(c)]

    return cities


# ============================================================
# TERMS
# ============================================================

@router.get("/terms/services", response_model=List[ServiceTerm])
async def services():
    return reference_data.service_terms()


@router.get("/terms/programs", response_model=List[str])
async def programs():
    return reference_data.program_terms()


@router.get("/terms/terminology", response_model=TerminologyResponse)
async def terminology_lookup(keyword: Optional[str] = None):
    return TerminologyResponse(keyword=keyword, terminology=terminology(keyword))
