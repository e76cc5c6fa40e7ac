from __future__ import annotations

from collections.abc import Iterable, Sequence

from hazard_models.models import EmergingTopic, SocialMediaPost

from .tokenizer import tokenize


class TopicAssigner:
    """Deterministic hazard-keyword bucketing used in place of a topic model.

    A token matches when it equals one word of a hazard dictionary entry
    ("storm" matches "storm surge"). A post goes to bucket
    `ord(first_matched_token[0]) % num_topics`, so unrelated hazards can share
    a bucket when their first characters collide.
    """

    def __init__(self, hazard_terms: Iterable[str], num_topics: int = 5) -> None:
        if num_topics <= 0:
            raise ValueError("num_topics must be positive")
        self.num_topics = num_topics
        self.vocabulary = frozenset(word for term in hazard_terms for word in term.lower().split())

    def match_terms(self, tokens: Sequence[str]) -> list[str]:
        return [token for token in tokens if token in self.vocabulary]

    def bucket_for(self, term: str) -> int:
        return ord(term[0]) % self.num_topics

    def assign(self, posts: Sequence[SocialMediaPost]) -> list[EmergingTopic]:
        """Group posts by bucket, in order of first appearance."""
        if not posts:
            return []

        keywords: dict[int, dict[str, None]] = {}
        members: dict[int, list[str]] = {}

        for post in posts:
            matched = self.match_terms(tokenize(post.content) or [])
            if not matched:
                continue

            topic_id = self.bucket_for(matched[0])
            bucket = keywords.setdefault(topic_id, {})
            for term in matched:
                bucket.setdefault(term)
            members.setdefault(topic_id, []).append(post.id)

        return [
            EmergingTopic(
                topic_id=topic_id,
                keywords=list(terms),
                post_count=len(members[topic_id]),
                post_ids=members[topic_id],
            )
            for topic_id, terms in keywords.items()
        ]
