from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LEXICON_PATH = Path(__file__).resolve().parent / "data" / "lexicons.json"


class LocaleLexicon(BaseModel):
    model_config = ConfigDict(extra="forbid")

    panic_keywords: list[str] = Field(default_factory=list)
    urgency_keywords: list[str] = Field(default_factory=list)
    hazard_terms: list[str] = Field(default_factory=list)
    marine_terms: list[str] = Field(default_factory=list)
    sentiment_extras: dict[str, float] = Field(default_factory=dict)


class LexiconFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    locales: dict[str, LocaleLexicon]
    marine_locations: list[str] = Field(default_factory=list)
    crisis_emojis: list[str] = Field(default_factory=list)


def _ordered_unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True, slots=True)
class Lexicons:
    """Keyword dictionaries shared by the scorer, extractor and topic assigner.

    Keyword sets are stored lowercased; hazard terms and locations keep their
    dictionary spelling because they are reported back verbatim.
    """

    panic_keywords: frozenset[str] = frozenset()
    urgency_keywords: frozenset[str] = frozenset()
    hazard_terms: tuple[str, ...] = ()
    marine_terms: frozenset[str] = frozenset()
    marine_locations: tuple[str, ...] = ()
    crisis_emojis: frozenset[str] = frozenset()
    sentiment_extras: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def build(
        cls,
        *,
        panic_keywords: Iterable[str] = (),
        urgency_keywords: Iterable[str] = (),
        hazard_terms: Iterable[str] = (),
        marine_terms: Iterable[str] = (),
        marine_locations: Iterable[str] = (),
        crisis_emojis: Iterable[str] = (),
        sentiment_extras: Mapping[str, float] | None = None,
    ) -> "Lexicons":
        return cls(
            panic_keywords=frozenset(term.lower() for term in panic_keywords),
            urgency_keywords=frozenset(term.lower() for term in urgency_keywords),
            hazard_terms=_ordered_unique(hazard_terms),
            marine_terms=frozenset(term.lower() for term in marine_terms),
            marine_locations=_ordered_unique(marine_locations),
            crisis_emojis=frozenset(crisis_emojis),
            sentiment_extras=MappingProxyType(
                {k.lower(): float(v) for k, v in (sentiment_extras or {}).items()}
            ),
        )

    @classmethod
    def from_file_model(cls, model: LexiconFile, locales: Sequence[str] | None = None) -> "Lexicons":
        selected = list(locales) if locales else list(model.locales)
        unknown = [code for code in selected if code not in model.locales]
        if unknown:
            raise ValueError(f"unknown lexicon locale(s): {', '.join(unknown)}")

        chosen = [model.locales[code] for code in selected]
        extras: dict[str, float] = {}
        for item in chosen:
            extras.update(item.sentiment_extras)

        return cls.build(
            panic_keywords=(term for item in chosen for term in item.panic_keywords),
            urgency_keywords=(term for item in chosen for term in item.urgency_keywords),
            hazard_terms=(term for item in chosen for term in item.hazard_terms),
            marine_terms=(term for item in chosen for term in item.marine_terms),
            marine_locations=model.marine_locations,
            crisis_emojis=model.crisis_emojis,
            sentiment_extras=extras,
        )


@lru_cache(maxsize=8)
def _load_cached(path: str, locales: tuple[str, ...]) -> Lexicons:
    model = LexiconFile.model_validate_json(Path(path).read_text(encoding="utf-8"))
    return Lexicons.from_file_model(model, locales or None)


def load_lexicons(
    path: str | Path | None = None,
    locales: Sequence[str] | None = None,
) -> Lexicons:
    """Load and merge the lexicon file for the given locales (all locales when omitted).

    Results are cached per (path, locales), so repeated engine construction reuses
    the same immutable dictionaries.
    """
    resolved = Path(path) if path else DEFAULT_LEXICON_PATH
    return _load_cached(str(resolved), tuple(locales or ()))
