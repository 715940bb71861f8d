"""
Tests for keyword remapping and terminology lookup.
"""

import pytest

from app.core.controlled_vocabulary import (
    KEYWORD_REMAPS,
    TERMINOLOGY,
    normalize_query,
    remapped_keyword,
    terminology,
)


class TestNormalizeQuery:
    def test_lowercases_only(self):
        assert normalize_query("  Food Stamps ") == "  food stamps "

    def test_none(self):
        assert normalize_query(None) == ""


class TestRemappedKeyword:
    @pytest.mark.parametrize(
        "keyword,expected",
        [
            ("Animal Welfare", "protective services for animals"),
            ("bus passes", "transportation passes"),
            ("HELP NAVIGATING THE SYSTEM", "211"),
            ("Senior Farmers' Market Nutrition Program", "market"),
            ("baby supplies", "UCSF Women's Health Resource Center"),
            ("Citizenship & Immigration", "citizenship and immigration"),
        ],
    )
    def test_mapped(self, keyword, expected):
        assert remapped_keyword(keyword) == expected

    @pytest.mark.parametrize("keyword", ["unmapped-term", "animal", "", None, " bus passes"])
    def test_unmapped(self, keyword):
        assert remapped_keyword(keyword) is None

    def test_table_keys_are_lowercase(self):
        assert all(k == k.lower() for k in KEYWORD_REMAPS)
        assert len(KEYWORD_REMAPS) == 36

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            KEYWORD_REMAPS["new"] = "value"


class TestTerminology:
    def test_alias_match(self):
        assert terminology("Food Stamps") == "calfresh"

    def test_name_match_replaces_spaces(self):
        assert terminology("Health Care Reform") == "health_care_reform"
        assert terminology("market match") == "market_match"

    def test_alias_with_spaces_in_name(self):
        assert terminology("Affordable Care Act") == "health_care_reform"

    def test_alias_with_punctuation(self):
        assert terminology("Women, Infants, and Children") == "wic"

    @pytest.mark.parametrize("keyword", ["unknown", "food", "calfresh program", "", None])
    def test_no_match(self, keyword):
        assert terminology(keyword) is None

    def test_five_entries(self):
        assert [t.name for t in TERMINOLOGY] == [
            "wic",
            "sfmnp",
            "market match",
            "calfresh",
            "health care reform",
        ]
