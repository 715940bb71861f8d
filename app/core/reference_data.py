"""
Static reference data for autocomplete and the no-results page.

Hardcoded here until Ohana (or another source) can deliver it.
"""

from functools import lru_cache
from typing import Iterable, List, Tuple

from app.core.cip_keywords import CIP_KEYWORDS
from app.core.controlled_vocabulary import TERMINOLOGY, normalize_query
from schemas.location import ServiceTerm


# All cities and unincorporated places of San Mateo County
CITIES: Tuple[str, ...] = (
    "Atherton, CA",
    "Belmont, CA",
    "Brisbane, CA",
    "Burlingame, CA",
    "Colma, CA",
    "Daly City, CA",
    "East Palo Alto, CA",
    "Foster City, CA",
    "Half Moon Bay, CA",
    "Hillsborough, CA",
    "Menlo Park, CA",
    "Millbrae, CA",
    "Pacifica, CA",
    "Portola Valley, CA",
    "Redwood City, CA",
    "San Bruno, CA",
    "San Carlos, CA",
    "San Mateo, CA",
    "South San Francisco, CA",
    "Woodside, CA",
    "Broadmoor, CA",
    "Burlingame Hills, CA",
    "Devonshire, CA",
    "El Granada, CA",
    "Emerald Lake Hills, CA",
    "Highlands-Baywood Park, CA",
    "Kings Mountain, CA",
    "Ladera, CA",
    "La Honda, CA",
    "Loma Mar, CA",
    "Menlo Oaks, CA",
    "Montara, CA",
    "Moss Beach, CA",
    "North Fair Oaks, CA",
    "Palomar Park, CA",
    "Pescadero, CA",
    "Princeton-by-the-Sea, CA",
    "San Gregorio, CA",
    "Sky Londa, CA",
    "West Menlo Park, CA",
)

# Government programs shown on the homepage
PROGRAM_TERMS: Tuple[str, ...] = tuple(sorted([
    "CalFresh/Food Stamps",
    "Market Match",
    "Health Insurance",
    "Women, Infants, and Children",
    "Senior Farmers' Market Nutrition Program",
    "Medi-Cal",
    "Medicare",
]))

# Top level services for when no search results are found
SERVICE_TERMS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("government assistance", tuple(sorted([
        "CalFresh/Food Stamps",
        "Health Insurance",
        "WIC",
        "SFMNP",
        "Medi-Cal",
        "Medicare",
    ]))),
    ("emergency / crisis intervention", tuple(sorted([
        "aging and adult services",
        "",
    ]))),
    ("children, teens, youth and families", ()),
)


def locations() -> List[str]:
    return list(CITIES)


def program_terms() -> List[str]:
    return list(PROGRAM_TERMS)


def service_terms() -> List[ServiceTerm]:
    return [ServiceTerm(name=name, sub=list(sub)) for name, sub in SERVICE_TERMS]


def _unique(terms: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for term in terms:
        if not term or term in seen:
            continue
        seen.add(term)
        out.append(term)
    return out


@lru_cache()
def _keyword_corpus() -> Tuple[str, ...]:
    """
    Keyword autocomplete corpus, built once.

    CIP keywords, then terminology names and aliases, then service terms
    and their subcategories; case-folded, blanks dropped, first
    occurrence wins.
    """
    cip = [normalize_query(k) for k in CIP_KEYWORDS]

    terms = []
    for term in TERMINOLOGY:
        terms.append(term.name)
        terms.extend(term.aka)

    sterms = []
    for name, sub in SERVICE_TERMS:
        sterms.append(name)
        sterms.extend(sub)

    return tuple(_unique(
        cip
        + [normalize_query(t) for t in terms]
        + [normalize_query(s) for s in sterms]
    ))


def keywords() -> List[str]:
    return list(_keyword_corpus())
