from __future__ import annotations

from processors.entity_extractor import EntityExtractor
from processors.lexicons import Lexicons, load_lexicons


def make_extractor() -> EntityExtractor:
    return EntityExtractor(
        Lexicons.build(
            hazard_terms=["tsunami", "High Waves"],
            marine_terms=["boat", "coast"],
            marine_locations=["Chennai coast", "Goa"],
        )
    )


def test_locations_match_case_insensitively() -> None:
    extractor = make_extractor()
    assert extractor.extract_locations("Waves near CHENNAI COAST and goa") == ["Chennai coast", "Goa"]
    assert extractor.extract_locations("nothing here") == []
    assert extractor.extract_locations(None) == []


def test_hazard_types_are_reported_in_dictionary_spelling() -> None:
    extractor = make_extractor()
    assert extractor.extract_hazard_types("high waves after the TSUNAMI") == ["tsunami", "High Waves"]


def test_marine_terms_are_token_matches() -> None:
    extractor = make_extractor()
    assert extractor.extract_marine_terms("Boat capsized near the coast, boats missing") == ["boat", "coast"]


def test_time_references() -> None:
    refs = EntityExtractor.extract_time_references("Evacuate now! Surge expected at 5:30 pm on 12/01/2025")
    assert refs == ["now", "5:30 pm", "12/01/2025"]
    assert EntityExtractor.extract_time_references(None) == []


def test_extract_with_packaged_lexicons() -> None:
    extractor = EntityExtractor(load_lexicons())
    entities = extractor.extract("EMERGENCY!!! tsunami warning near Chennai coast, evacuate now!!")

    assert "Chennai coast" in entities.locations
    assert "tsunami" in entities.hazard_types
    assert "coast" in entities.marine_terms
    assert entities.time_references == ["now"]
