"""Configuration constants and settings for the wiki-scraper pipeline."""

import os

# Rule documents shipped with the package (one <language>.toml per language)
BUNDLED_RULES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "rules")
RULES_SUFFIX = ".toml"
WORDS_SUFFIX = ".txt"

# Extraction configuration
DEFAULT_MAX_SENTENCES = 3  # Per article, first-encountered-first-kept
SENTENCE_END_CHARS = (".", "?", "!")
TERMINAL_PUNCTUATION = frozenset(".?!…")
CLOSING_CHARS = frozenset("\"'”’»)]")
QUOTE_CHARS = frozenset("\"'„“”«»‚‘")

# Input parsing
TEXT_FIELD = "text"
TITLE_FIELD = "title"
INPUT_ENCODING = "utf-8"

# Audit logs (written only when --log_dir is given)
REJECTIONS_LOG = "01_rejections.jsonl"
SUMMARY_FILE = "02_summary.json"

# Blacklist generation
DEFAULT_MAX_FREQUENCY = 1

# Reporting
DEFAULT_REPORT_LIMIT = 10
