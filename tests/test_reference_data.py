"""
Tests for the static autocomplete / reference tables.
"""

from app.core import reference_data
from app.core.cip_keywords import CIP_KEYWORDS


class TestLocations:
    def test_cities(self):
        cities = reference_data.locations()

        assert len(cities) == 40
        assert cities[0] == "Atherton, CA"
        assert cities[-1] == "West Menlo Park, CA"
        assert len(set(cities)) == len(cities)
        assert all(c.endswith(", CA") for c in cities)

    def test_returns_copy(self):
        reference_data.locations().append("Oakland, CA")

        assert "Oakland, CA" not in reference_data.locations()


class TestProgramTerms:
    def test_seven_sorted_entries(self):
        terms = reference_data.program_terms()

        assert len(terms) == 7
        assert terms == sorted(terms)
        assert terms[0] == "CalFresh/Food Stamps"
        assert terms[-1] == "Women, Infants, and Children"


class TestServiceTerms:
    def test_categories(self):
        terms = reference_data.service_terms()

        assert [t.name for t in terms] == [
            "government assistance",
            "emergency / crisis intervention",
            "children, teens, youth and families",
        ]

    def test_subcategories_sorted(self):
        for term in reference_data.service_terms():
            assert term.sub == sorted(term.sub)

        government = reference_data.service_terms()[0]
        assert government.sub == [
            "CalFresh/Food Stamps",
            "Health Insurance",
            "Medi-Cal",
            "Medicare",
            "SFMNP",
            "WIC",
        ]


class TestKeywords:
    def test_no_duplicates(self):
        keywords = reference_data.keywords()

        assert len(keywords) == len(set(keywords))

    def test_case_folded(self):
        assert all(k == k.lower() for k in reference_data.keywords())

    def test_no_blank_entries(self):
        assert "" not in reference_data.keywords()

    def test_includes_every_source(self):
        keywords = reference_data.keywords()

        # CIP taxonomy
        assert "211" in keywords
        assert "protective services for animals" in keywords
        # terminology names and aliases
        assert "calfresh" in keywords
        assert "affordable care act" in keywords
        # service terms and subcategories
        assert "government assistance" in keywords
        assert "aging and adult services" in keywords

    def test_first_occurrence_order(self):
        keywords = reference_data.keywords()

        assert keywords[0] == "211"
        # "food stamps" and "snap" come from CIP before terminology repeats them
        assert keywords.index("food stamps") < keywords.index("calfresh")
        assert keywords.count("snap") == 1

    def test_cip_corpus_size(self):
        assert len(CIP_KEYWORDS) == 873
        assert len(reference_data.keywords()) < len(CIP_KEYWORDS) + 20

    def test_built_once_and_returned_as_copy(self):
        first = reference_data.keywords()
        first.append("not a keyword")

        assert "not a keyword" not in reference_data.keywords()
        assert reference_data._keyword_corpus() is reference_data._keyword_corpus()
