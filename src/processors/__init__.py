from .crisis_scorer import CrisisScorer, PanicSignals, compute_panic_score
from .entity_extractor import EntityExtractor
from .lexicons import DEFAULT_LEXICON_PATH, LexiconFile, Lexicons, LocaleLexicon, load_lexicons
from .sentiment_analyzer import SentimentAnalyzer
from .sentiment_trend import SentimentTrendAnalyzer
from .tfidf import Corpus
from .tokenizer import keyword_tokenize, preprocess, tokenize
from .topic_assigner import TopicAssigner

__all__ = [
    "Corpus",
    "CrisisScorer",
    "DEFAULT_LEXICON_PATH",
    "EntityExtractor",
    "LexiconFile",
    "Lexicons",
    "LocaleLexicon",
    "PanicSignals",
    "SentimentAnalyzer",
    "SentimentTrendAnalyzer",
    "TopicAssigner",
    "compute_panic_score",
    "keyword_tokenize",
    "load_lexicons",
    "preprocess",
    "tokenize",
]
