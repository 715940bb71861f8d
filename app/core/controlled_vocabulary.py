"""
Controlled vocabulary for keyword search.

Purpose:
- Centralize case folding of search keywords
- Map homepage / CIP keywords that return nothing from Ohana onto
  keywords that do (temporary CIP > OE mapping)
- Recognize terminology terms, which get a definition box on the
  search results page

Tables are keyed by lower-cased text and never mutated after import.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from schemas.location import TerminologyEntry


KEYWORD_REMAPS: Mapping[str, str] = MappingProxyType({
    "animal welfare": "protective services for animals",
    "building support networks": "support groups",
    "daytime caregiving": "day care",
    "help navigating the system": "211",
    "residential caregiving": "palliative care",
    "help finding school": "school enrollment and curriculum",
    "help paying for school": "money management",
    "disaster response": "disaster preparedness",
    "immediate safety needs": "shelter/refuge",
    "psychiatric emergencies": "psychiatric emergency room care",
    "food benefits": "human/social services issues",
    "food delivery": "meal sites/home-delivered meals",
    "free meals": "food pantries",
    "help paying for food": "money management",
    "nutrition support": "nutrition",
    "baby supplies": "UCSF Women's Health Resource Center",
    "toys and gifts": "Community Services Agency of Mountain View",
    "addiction & recovery": "addictions/dependencies support groups",
    "help finding services": "211",
    "help paying for healthcare": "health screening/diagnostic services",
    "help finding housing": "housing counseling",
    "housing advice": "housing counseling",
    "paying for housing": "housing expense assistance",
    "pay for childcare": "money management",
    "pay for food": "money management",
    "pay for housing": "money management",
    "pay for school": "money management",
    "health care reform": "health insurance information/counseling",
    "market match": "market",
    "senior farmers' market nutrition program": "market",
    "sfmnp": "market",
    "bus passes": "transportation passes",
    "transportation to appointments": "transportation services",
    "transportation to healthcare": "transportation services",
    "transportation to school": "transportation services",
    "citizenship & immigration": "citizenship and immigration",
})


TERMINOLOGY: Tuple[TerminologyEntry, ...] = (
    TerminologyEntry(name="wic", aka=("women, infants, and children",)),
    TerminologyEntry(name="sfmnp", aka=("senior farmers' market nutrition program",)),
    TerminologyEntry(name="market match", aka=()),
    TerminologyEntry(name="calfresh", aka=("food stamps", "snap")),
    TerminologyEntry(name="health care reform", aka=("affordable care act", "health insurance")),
)


def normalize_query(query: Optional[str]) -> str:
    """
    Case-fold a raw keyword.

    Only lower-casing is applied; whitespace and punctuation are left
    as typed so matching stays exact.
    """
    return (query or "").lower()


def remapped_keyword(keyword: Optional[str]) -> Optional[str]:
    """
    Return the replacement for a keyword, or None if it has no mapping.

    Examples:
        "Animal Welfare" -> "protective services for animals"
        "bus passes" -> "transportation passes"
    """
    return KEYWORD_REMAPS.get(normalize_query(keyword))


def terminology(keyword: Optional[str]) -> Optional[str]:
    """
    Look up whether a keyword is a terminology term.

    Matches the term name or one of its aliases, case-insensitively and
    exactly. Returns the term name with spaces turned into underscores
    (used as the definition box anchor), or None.

    Examples:
        "Food Stamps" -> "calfresh"
        "affordable care act" -> "health_care_reform"
    """
    if not keyword:
        return None

    q = normalize_query(keyword)

    for term in TERMINOLOGY:
        if q == term.name or q in term.aka:
            return term.name.replace(" ", "_")

    return None
