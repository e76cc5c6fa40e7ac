from __future__ import annotations

import re
from collections.abc import Collection

from spacy.lang.en.stop_words import STOP_WORDS

# Devanagari, Bengali and Tamil blocks survive punctuation stripping.
INDIC_RANGES = "\u0900-\u097F\u0980-\u09FF\u0B80-\u0BFF"

_NON_WORD = re.compile(rf"[^\w\s{INDIC_RANGES}]")
# Keyword extraction also drops underscores.
_NON_WORD_STRICT = re.compile(rf"[^\w\s{INDIC_RANGES}]|_")
_URL = re.compile(r"https?://\S+")
_MENTION = re.compile(r"@\w+")
_HASHTAG = re.compile(r"#(\w+)")

MIN_KEYWORD_LENGTH = 3


def tokenize(text: str | None) -> list[str] | None:
    """Lowercased word tokens, or None for null/empty text.

    Short tokens such as "sos" are kept; crisis scoring counts them.
    """
    if not text:
        return None
    return [token for token in _NON_WORD.sub(" ", text.lower()).split() if token]


def keyword_tokenize(text: str | None) -> list[str]:
    """Tokenizer for TF-IDF: stricter stripping and tokens of at least three characters."""
    if not text:
        return []
    return [
        token
        for token in _NON_WORD_STRICT.sub(" ", text.lower()).split()
        if len(token) >= MIN_KEYWORD_LENGTH
    ]


def preprocess(text: str | None, stopwords: Collection[str] = STOP_WORDS) -> str:
    """Normalise a post for the TF-IDF corpus.

    lowercase -> drop URLs -> drop @mentions -> unwrap #hashtags -> tokenize ->
    drop English stopwords. Stopwords for other locales are not removed.
    """
    if not text:
        return ""
    processed = text.lower()
    processed = _URL.sub("", processed)
    processed = _MENTION.sub("", processed)
    processed = _HASHTAG.sub(r"\1", processed)
    tokens = tokenize(processed) or []
    return " ".join(token for token in tokens if token not in stopwords)
