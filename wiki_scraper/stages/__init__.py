"""Processing stages for the wiki-scraper pipeline."""

from .extract_stage import run_stage_extract, select_sentences, extract_article, SentenceExtractor, RunStats
from .blacklist_stage import run_stage_blacklist, build_blacklist, word_frequencies
from .analysis import analyze_rejections

__all__ = [
    "run_stage_extract",
    "select_sentences",
    "extract_article",
    "SentenceExtractor",
    "RunStats",
    "run_stage_blacklist",
    "build_blacklist",
    "word_frequencies",
    "analyze_rejections",
]
