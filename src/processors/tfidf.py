from __future__ import annotations

import math
from collections import Counter
from collections.abc import Collection

from spacy.lang.en.stop_words import STOP_WORDS

from hazard_models.models import GlobalKeyword, TermScore

from .tokenizer import keyword_tokenize, preprocess


class Corpus:
    """Append-only TF-IDF statistics for a single analysis batch.

    Math notes:
    - TF = count_in_doc / tokens_in_doc
    - IDF = ln(total_docs / document_frequency[term]); df >= 1 for any term of a
      stored document.
    - Batch keywords average a term's TF-IDF over the documents containing it.

    Create one per batch and drop it afterwards: document frequencies from an
    unrelated batch would skew IDF. Not safe for concurrent `add_document` calls.
    """

    def __init__(self, stopwords: Collection[str] = STOP_WORDS) -> None:
        self.stopwords = stopwords
        self.documents: list[list[str]] = []
        self.term_frequency: list[Counter[str]] = []
        self.document_frequency: Counter[str] = Counter()

    def __len__(self) -> int:
        return len(self.documents)

    def add_document(self, text: str | None) -> int:
        """Preprocess and store a post; returns its document index."""
        return self.add_preprocessed(preprocess(text, self.stopwords))

    def add_preprocessed(self, cleaned: str) -> int:
        terms = keyword_tokenize(cleaned)
        counts = Counter(terms)

        self.documents.append(terms)
        self.term_frequency.append(counts)
        self.document_frequency.update(counts.keys())
        return len(self.documents) - 1

    def terms_for(self, doc_index: int) -> list[TermScore]:
        """TF-IDF of every term in the document, highest first (ties by count); [] for unknown indices."""
        if doc_index < 0 or doc_index >= len(self.documents):
            return []

        total_terms = len(self.documents[doc_index])
        if total_terms == 0:
            return []

        total_docs = len(self.documents)
        scores: list[TermScore] = []
        for term, count in self.term_frequency[doc_index].items():
            tf = count / total_terms
            idf = math.log(total_docs / self.document_frequency[term])
            scores.append(TermScore(term=term, tfidf=tf * idf, count=count))

        scores.sort(key=lambda item: (item.tfidf, item.count), reverse=True)
        return scores

    def top_keywords(self, top_n: int = 20) -> list[GlobalKeyword]:
        totals: dict[str, list[float]] = {}
        for doc_index in range(len(self.documents)):
            for item in self.terms_for(doc_index):
                bucket = totals.setdefault(item.term, [0.0, 0])
                bucket[0] += item.tfidf
                bucket[1] += 1

        keywords = [
            GlobalKeyword(term=term, score=total / occurrences, occurrences=int(occurrences))
            for term, (total, occurrences) in totals.items()
        ]
        keywords.sort(key=lambda item: item.score, reverse=True)
        return keywords[:top_n]
