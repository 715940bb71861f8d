import logging
from typing import List, Optional

from app.clients.exceptions import BadRequest, NotFound
from app.clients.ohana import OhanaClient
from app.core.controlled_vocabulary import remapped_keyword
from schemas.location import KeywordRemap, Location, SearchParams

logger = logging.getLogger(__name__)

# Keyword that matches no Ohana record; searching with it yields an empty list.
NO_MATCH_KEYWORD = "asdfasg"


class SearchService:
    def __init__(self, client: OhanaClient):
        self.client = client

    def search(self, params: SearchParams) -> List[Location]:
        """
        Call the Ohana search endpoint.

        Ohana answers 400 when none of keyword, location or language is
        given, and when the location or radius is invalid. The first case
        falls back to listing all locations, the second to an empty result.
        Any other error propagates.
        """
        try:
            return self.client.search("search", params)
        except BadRequest as e:
            if e.missing_parameters:
                logger.info("Search parameters missing, listing all locations: %s", e)
                return self.client.locations(params)

            logger.warning("Invalid location or radius, returning no results: %s", e)
            return self.client.search("search", {"keyword": NO_MATCH_KEYWORD})

    def get(self, location_id: str) -> Optional[Location]:
        """
        Fetch a single location. Returns None when Ohana has no such id,
        so the caller can show its not-found page.
        """
        try:
            return self.client.location(location_id)
        except NotFound:
            logger.info("Location %s not found", location_id)
            return None

    def keyword_mapping(self, params: SearchParams) -> KeywordRemap:
        """
        Re-run a search with a better performing keyword.

        Some homepage / CIP terms return nothing from Ohana; those are
        mapped to a keyword that does. The outcome reports whether a remap
        happened separately from the (possibly empty) results.
        """
        original = params.keyword
        mapped = remapped_keyword(original)

        if not original or mapped is None or mapped == original:
            return KeywordRemap(original_keyword=original)

        new_params = params.model_copy(update={"keyword": mapped})
        logger.info("Remapped keyword %r -> %r", original, mapped)

        return KeywordRemap(
            original_keyword=original,
            keyword=mapped,
            locations=self.search(new_params),
        )
