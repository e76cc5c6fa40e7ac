from __future__ import annotations

import re

from hazard_models.models import ExtractedEntities

from .lexicons import Lexicons
from .tokenizer import tokenize

_TIME_PATTERNS = (
    re.compile(r"\b(?:now|today|tonight|yesterday|tomorrow)\b", re.IGNORECASE),
    re.compile(r"\b\d{1,2}:\d{2}\s*(?:am|pm)?\b", re.IGNORECASE),
    re.compile(r"\b\d{1,2}/\d{1,2}/\d{2,4}\b"),
)


class EntityExtractor:
    """Gazetteer and vocabulary matcher for marine locations, hazards and times.

    Location matching is a case-insensitive substring test against the
    gazetteer: no fuzzy matching and no disambiguation of same-named places.
    """

    def __init__(self, lexicons: Lexicons) -> None:
        self.lexicons = lexicons
        self._locations = [(name, name.lower()) for name in lexicons.marine_locations]
        self._hazards = [(term, term.lower()) for term in lexicons.hazard_terms]

    def extract_locations(self, text: str | None) -> list[str]:
        if not text:
            return []
        lowered = text.lower()
        return [name for name, needle in self._locations if needle in lowered]

    def extract_hazard_types(self, text: str | None) -> list[str]:
        if not text:
            return []
        lowered = text.lower()
        return [term for term, needle in self._hazards if needle in lowered]

    def extract_marine_terms(self, text: str | None) -> list[str]:
        tokens = tokenize(text) or []
        return [token for token in tokens if token in self.lexicons.marine_terms]

    @staticmethod
    def extract_time_references(text: str | None) -> list[str]:
        if not text:
            return []
        references: list[str] = []
        for pattern in _TIME_PATTERNS:
            references.extend(match.group(0) for match in pattern.finditer(text))
        return references

    def extract(self, text: str | None) -> ExtractedEntities:
        return ExtractedEntities(
            locations=self.extract_locations(text),
            hazard_types=self.extract_hazard_types(text),
            marine_terms=self.extract_marine_terms(text),
            time_references=self.extract_time_references(text),
        )
