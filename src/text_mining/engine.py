from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from hazard_models.models import (
    CorpusAnalytics,
    CrisisHotspot,
    KeywordScore,
    SentimentResult,
    SocialMediaPost,
    TextMiningResult,
    Topic,
)
from processors.crisis_scorer import CrisisScorer
from processors.entity_extractor import EntityExtractor
from processors.lexicons import Lexicons, load_lexicons
from processors.sentiment_analyzer import SentimentAnalyzer
from processors.sentiment_trend import SentimentTrendAnalyzer
from processors.tfidf import Corpus
from processors.topic_assigner import TopicAssigner

from .config import TextMiningConfig, load_text_mining_config
from .metrics import ANALYSIS_LATENCY_SECONDS, CORPUS_BATCHES, POSTS_ANALYZED

logger = logging.getLogger("hazard-text-mining")


class TextMiningEngine:
    """Per-post and batch-level text analytics for hazard social-media posts.

    TF-IDF statistics are scoped to a `Corpus`: `analyze_posts` and
    `analyze_corpus` build one per call, `analyze_post` uses the corpus it is
    given or a fresh single-document one (where every IDF is zero). The engine
    itself holds only immutable dictionaries and is safe to share.
    """

    def __init__(
        self,
        config: TextMiningConfig | None = None,
        lexicons: Lexicons | None = None,
        sentiment: SentimentAnalyzer | None = None,
    ) -> None:
        self.config = config or load_text_mining_config()
        self.lexicons = lexicons or load_lexicons(self.config.lexicon_path, self.config.locales)
        self.sentiment = sentiment or SentimentAnalyzer(extras=self.lexicons.sentiment_extras)
        self.scorer = CrisisScorer(self.lexicons, self.sentiment)
        self.extractor = EntityExtractor(self.lexicons)
        self.topics = TopicAssigner(self.lexicons.hazard_terms, self.config.num_topics)
        self.trends = SentimentTrendAnalyzer(self.sentiment, self.config.trend_windows)

    def new_corpus(self) -> Corpus:
        return Corpus()

    def _keywords(self, corpus: Corpus, doc_index: int) -> list[KeywordScore]:
        return [
            KeywordScore(term=item.term, score=item.tfidf, frequency=item.count)
            for item in corpus.terms_for(doc_index)[: self.config.post_keywords]
        ]

    def _post_topics(self, tokens: Sequence[str]) -> list[Topic]:
        matched = self.topics.match_terms(tokens)
        if not matched:
            return []
        return [
            Topic(
                id=self.topics.bucket_for(matched[0]),
                terms=list(dict.fromkeys(matched)),
                weight=len(matched) / len(tokens),
            )
        ]

    def _analyze_indexed(self, post: SocialMediaPost, corpus: Corpus, doc_index: int) -> TextMiningResult:
        sentiment = self.sentiment.score(post.content)
        result = TextMiningResult(
            post_id=post.id,
            keywords=self._keywords(corpus, doc_index),
            topics=self._post_topics(sentiment.tokens),
            sentiment=sentiment,
            crisis_indicators=self.scorer.indicators(post, sentiment),
            entities=self.extractor.extract(post.content),
        )
        POSTS_ANALYZED.inc()
        return result

    def analyze_post(self, post: SocialMediaPost, corpus: Corpus | None = None) -> TextMiningResult:
        """Add the post to `corpus` (or a fresh one) and analyze it against that corpus.

        Without a shared corpus every IDF is ln(1) = 0, so keyword scores are all
        zero and keywords are ranked by term count only. Pass the batch corpus, or
        use `analyze_posts`, when salience matters.
        """
        with ANALYSIS_LATENCY_SECONDS.labels(operation="post").time():
            target = corpus if corpus is not None else self.new_corpus()
            doc_index = target.add_document(post.content)
            return self._analyze_indexed(post, target, doc_index)

    def analyze_posts(self, posts: Sequence[SocialMediaPost]) -> list[TextMiningResult]:
        """Analyze a batch against one shared corpus, built before any post is scored."""
        if not posts:
            logger.debug("no posts to analyze")
            return []

        with ANALYSIS_LATENCY_SECONDS.labels(operation="batch").time():
            corpus = self.new_corpus()
            indices = [corpus.add_document(post.content) for post in posts]
            results = [self._analyze_indexed(post, corpus, index) for post, index in zip(posts, indices)]

        logger.info("batch analyzed posts=%d corpus_terms=%d", len(results), len(corpus.document_frequency))
        return results

    def detect_crisis_locations(
        self,
        posts: Sequence[SocialMediaPost],
        sentiments: Sequence[SentimentResult] | None = None,
    ) -> list[CrisisHotspot]:
        """Locations whose mentioning posts average a panic score above the threshold."""
        panic: dict[str, list[float]] = {}
        members: dict[str, list[str]] = {}

        for i, post in enumerate(posts):
            locations = self.extractor.extract_locations(post.content)
            if not locations:
                continue
            score = self.scorer.panic_score(post, sentiments[i] if sentiments is not None else None)
            for location in locations:
                panic.setdefault(location, []).append(score)
                members.setdefault(location, []).append(post.id)

        hotspots = [
            CrisisHotspot(location=location, panic_level=sum(scores) / len(scores), post_ids=members[location])
            for location, scores in panic.items()
        ]
        hotspots = [item for item in hotspots if item.panic_level > self.config.crisis_threshold]
        hotspots.sort(key=lambda item: item.panic_level, reverse=True)
        return hotspots

    def analyze_corpus(self, posts: Sequence[SocialMediaPost], now: datetime | None = None) -> CorpusAnalytics:
        if not posts:
            logger.debug("no posts for corpus analytics")
            return CorpusAnalytics()

        with ANALYSIS_LATENCY_SECONDS.labels(operation="corpus").time():
            corpus = self.new_corpus()
            for post in posts:
                corpus.add_document(post.content)

            sentiments = self.sentiment.score_batch([post.content for post in posts])
            analytics = CorpusAnalytics(
                global_keywords=corpus.top_keywords(self.config.global_keywords),
                emerging_topics=self.topics.assign(posts),
                crisis_hotspots=self.detect_crisis_locations(posts, sentiments),
                sentiment_trends=self.trends.trend(
                    posts,
                    self.config.trend_window_hours,
                    now=now,
                    comparatives=[item.comparative for item in sentiments],
                ),
            )

        CORPUS_BATCHES.inc()
        logger.info(
            "corpus analyzed posts=%d keywords=%d topics=%d crisis_locations=%d windows=%d",
            len(posts),
            len(analytics.global_keywords),
            len(analytics.emerging_topics),
            len(analytics.crisis_hotspots),
            len(analytics.sentiment_trends),
        )
        return analytics
